"""Data Transfer Objects package."""

from onboarding_core.models.dto.document import DocumentUpload
from onboarding_core.models.dto.employee import EmployeeCreate, EmployeeUpdate

__all__ = [
    "DocumentUpload",
    "EmployeeCreate",
    "EmployeeUpdate",
]
