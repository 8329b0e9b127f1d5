"""Record validation.

Validators return a list of ``Violation`` values, empty when the record is
valid. They never raise, so they are safe to run on records assembled with
``model_construct`` or mutated copies.
"""

from datetime import date, datetime
from typing import Any

from email_validator import EmailNotValidError, validate_email

from onboarding_core.constants.validation import (
    ALLOWED_DOCUMENT_STATUSES,
    ALLOWED_DOCUMENT_TYPES,
    ALLOWED_EMPLOYEE_STATUSES,
    CONTENT_TYPE_PATTERN,
    MAX_FILE_SIZE,
    PROFILE_SORT_KEY,
)
from onboarding_core.models.domain.document import Document, can_transition_document
from onboarding_core.models.domain.employee import Employee, can_transition_employee
from onboarding_core.models.violation import Violation, ViolationKind


def _missing(field: str) -> Violation:
    return Violation(kind=ViolationKind.MISSING_FIELD, field=field, reason="field is required")


def _invalid(field: str, reason: str) -> Violation:
    return Violation(kind=ViolationKind.INVALID_FIELD_VALUE, field=field, reason=reason)


def _check_text(record: Any, field: str, violations: list[Violation]) -> str | None:
    """Check a required non-empty string; return it when usable."""
    value = getattr(record, field, None)
    if value is None:
        violations.append(_missing(field))
        return None
    if not isinstance(value, str):
        violations.append(_invalid(field, "must be a string"))
        return None
    if not value.strip():
        violations.append(_invalid(field, "must not be empty"))
        return None
    return value


def _check_choice(
    record: Any, field: str, allowed: frozenset[str], violations: list[Violation]
) -> None:
    value = _check_text(record, field, violations)
    if value is not None and value not in allowed:
        violations.append(
            _invalid(field, f"'{value}' is not one of {', '.join(sorted(allowed))}")
        )


def _check_datetime(record: Any, field: str, violations: list[Violation]) -> datetime | None:
    value = getattr(record, field, None)
    if value is None:
        violations.append(_missing(field))
        return None
    if not isinstance(value, datetime):
        violations.append(_invalid(field, "must be an ISO-8601 date-time"))
        return None
    if value.tzinfo is not None:
        violations.append(_invalid(field, "must be local time without a zone"))
        return None
    return value


def _check_email(record: Any, violations: list[Violation]) -> None:
    value = _check_text(record, "email", violations)
    if value is None:
        return
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        violations.append(_invalid("email", str(e)))


# =============================================================================
# Employee
# =============================================================================


def validate_employee(employee: Employee) -> list[Violation]:
    """Validate an Employee record.

    Args:
        employee: Record to check

    Returns:
        Violations identifying the offending wire names, empty when valid
    """
    violations: list[Violation] = []

    _check_text(employee, "employee_id", violations)

    sort_key = _check_text(employee, "sort_key", violations)
    if sort_key is not None and sort_key != PROFILE_SORT_KEY:
        violations.append(_invalid("sort_key", f"must be '{PROFILE_SORT_KEY}'"))

    _check_text(employee, "name", violations)
    _check_email(employee, violations)

    department = getattr(employee, "department", None)
    if department is not None and not isinstance(department, str):
        violations.append(_invalid("department", "must be a string"))

    start_date = getattr(employee, "start_date", None)
    if start_date is not None and (not isinstance(start_date, date) or isinstance(start_date, datetime)):
        violations.append(_invalid("start_date", "must be an ISO-8601 date"))

    _check_choice(employee, "status", ALLOWED_EMPLOYEE_STATUSES, violations)

    created_at = _check_datetime(employee, "created_at", violations)
    updated_at = _check_datetime(employee, "updated_at", violations)
    if created_at is not None and updated_at is not None and created_at > updated_at:
        violations.append(_invalid("updated_at", "must not be earlier than created_at"))

    return violations


def validate_employee_transition(current: str, target: str) -> list[Violation]:
    """Check an employee status move against the state machine."""
    if can_transition_employee(current, target):
        return []
    return [_invalid("status", f"cannot move from '{current}' to '{target}'")]


# =============================================================================
# Document
# =============================================================================


def validate_document(document: Document) -> list[Violation]:
    """Validate a Document record.

    Args:
        document: Record to check

    Returns:
        Violations identifying the offending wire names, empty when valid
    """
    violations: list[Violation] = []

    _check_text(document, "employee_id", violations)
    _check_text(document, "document_id", violations)
    _check_choice(document, "document_type", ALLOWED_DOCUMENT_TYPES, violations)
    _check_text(document, "file_name", violations)
    _check_text(document, "s3_key", violations)
    _check_datetime(document, "upload_date", violations)
    _check_choice(document, "status", ALLOWED_DOCUMENT_STATUSES, violations)

    file_size = getattr(document, "file_size", None)
    if file_size is None:
        violations.append(_missing("file_size"))
    elif not isinstance(file_size, int) or isinstance(file_size, bool):
        violations.append(_invalid("file_size", "must be an integer"))
    elif file_size < 0:
        violations.append(_invalid("file_size", "must not be negative"))
    elif file_size > MAX_FILE_SIZE:
        violations.append(_invalid("file_size", "must fit a signed 64-bit integer"))

    content_type = _check_text(document, "content_type", violations)
    if content_type is not None and not CONTENT_TYPE_PATTERN.match(content_type):
        violations.append(_invalid("content_type", "must be a MIME type of the form type/subtype"))

    return violations


def validate_document_transition(current: str, target: str) -> list[Violation]:
    """Check a document status move against the state machine."""
    if can_transition_document(current, target):
        return []
    return [_invalid("status", f"cannot move from '{current}' to '{target}'")]


def validate_record(record: Employee | Document) -> list[Violation]:
    """Validate either record type."""
    if isinstance(record, Employee):
        return validate_employee(record)
    if isinstance(record, Document):
        return validate_document(record)
    return [_invalid(type(record).__name__, "not an onboarding record")]


def is_valid(record: Employee | Document) -> bool:
    """Check whether a record has no violations."""
    return not validate_record(record)
