"""Domain models package."""

from onboarding_core.models.domain.document import (
    DOCUMENT_TRANSITIONS,
    Document,
    DocumentStatus,
    DocumentType,
    can_transition_document,
)
from onboarding_core.models.domain.employee import (
    EMPLOYEE_TRANSITIONS,
    Employee,
    EmployeeStatus,
    can_transition_employee,
)
from onboarding_core.models.violation import Violation, ViolationKind

__all__ = [
    "DOCUMENT_TRANSITIONS",
    "Document",
    "DocumentStatus",
    "DocumentType",
    "can_transition_document",
    "EMPLOYEE_TRANSITIONS",
    "Employee",
    "EmployeeStatus",
    "can_transition_employee",
    "Violation",
    "ViolationKind",
]
