"""JSON codec for the onboarding records.

Wire names are emitted verbatim and unset optional fields are always
emitted as ``null``. Deserialization ignores unknown fields and raises:

- ``InvalidPayloadError`` when the input is not a JSON object
- ``MissingFieldError`` when a required wire name is absent or ``null``
- ``InvalidFieldValueError`` when a value has the wrong shape

Rule violations on well-shaped values (unknown status, malformed email,
negative size) are left to ``utils.validation``.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from onboarding_core.constants.validation import (
    DOCUMENT_WIRE_FIELDS,
    EMPLOYEE_WIRE_FIELDS,
    REQUIRED_DOCUMENT_FIELDS,
    REQUIRED_EMPLOYEE_FIELDS,
)
from onboarding_core.exceptions import (
    InvalidFieldValueError,
    InvalidPayloadError,
    MissingFieldError,
)
from onboarding_core.models.domain.document import Document
from onboarding_core.models.domain.employee import Employee
from onboarding_core.utils.secure_logging import log_warning

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

Payload = bytes | bytearray | str


def _load_object(data: Payload) -> dict[str, Any]:
    """Parse raw input into a JSON object."""
    try:
        payload = json.loads(data)
    except (TypeError, ValueError, RecursionError) as e:
        log_warning(logger, "Rejected unparseable payload", e)
        raise InvalidPayloadError("payload is not valid JSON") from e

    if not isinstance(payload, dict):
        raise InvalidPayloadError(f"payload must be a JSON object, got {type(payload).__name__}")
    return payload


def _build(
    model: type[RecordT],
    payload: Mapping[str, Any],
    wire_fields: tuple[str, ...],
    required_fields: tuple[str, ...],
) -> RecordT:
    if not isinstance(payload, Mapping):
        raise InvalidPayloadError(f"payload must be a mapping, got {type(payload).__name__}")

    missing = [field for field in required_fields if payload.get(field) is None]
    if missing:
        raise MissingFieldError(missing[0], missing)

    unknown = sorted(str(key) for key in payload if key not in wire_fields)
    if unknown:
        logger.debug(f"Ignoring unknown fields on {model.__name__}: {', '.join(unknown)}")

    known = {field: payload[field] for field in wire_fields if field in payload}
    try:
        return model.model_validate(known)
    except ValidationError as e:
        error = e.errors()[0]
        field = str(error["loc"][0]) if error["loc"] else model.__name__
        raise InvalidFieldValueError(field, error["msg"]) from e


# =============================================================================
# Employee
# =============================================================================


def employee_from_dict(payload: Mapping[str, Any]) -> Employee:
    """Build an Employee from a decoded JSON object.

    Timestamps are taken as given, never refreshed.
    """
    return _build(Employee, payload, EMPLOYEE_WIRE_FIELDS, REQUIRED_EMPLOYEE_FIELDS)


def employee_from_json(data: Payload) -> Employee:
    """Build an Employee from raw JSON."""
    return employee_from_dict(_load_object(data))


def employee_to_dict(employee: Employee) -> dict[str, Any]:
    """Serialize an Employee to a JSON-compatible dict."""
    return employee.model_dump(mode="json")


def employee_to_json(employee: Employee) -> str:
    """Serialize an Employee to compact JSON."""
    return employee.model_dump_json()


# =============================================================================
# Document
# =============================================================================


def document_from_dict(payload: Mapping[str, Any]) -> Document:
    """Build a Document from a decoded JSON object."""
    return _build(Document, payload, DOCUMENT_WIRE_FIELDS, REQUIRED_DOCUMENT_FIELDS)


def document_from_json(data: Payload) -> Document:
    """Build a Document from raw JSON."""
    return document_from_dict(_load_object(data))


def document_to_dict(document: Document) -> dict[str, Any]:
    """Serialize a Document to a JSON-compatible dict."""
    return document.model_dump(mode="json")


def document_to_json(document: Document) -> str:
    """Serialize a Document to compact JSON."""
    return document.model_dump_json()
