"""Centralized validation constants for the onboarding records.

This module provides a single source of truth for wire names, allowed
values and limits used by the codec and the validators.
"""

import re
from typing import Final

# =============================================================================
# Employee Constants
# =============================================================================

PROFILE_SORT_KEY: Final[str] = "PROFILE"

EMPLOYEE_WIRE_FIELDS: Final[tuple[str, ...]] = (
    "employee_id",
    "sort_key",
    "name",
    "email",
    "department",
    "start_date",
    "status",
    "created_at",
    "updated_at",
)

REQUIRED_EMPLOYEE_FIELDS: Final[tuple[str, ...]] = (
    "employee_id",
    "sort_key",
    "name",
    "email",
    "status",
    "created_at",
    "updated_at",
)

ALLOWED_EMPLOYEE_STATUSES: Final[frozenset[str]] = frozenset(
    {
        "pending",
        "active",
        "terminated",
    }
)

# =============================================================================
# Document Constants
# =============================================================================

DOCUMENT_WIRE_FIELDS: Final[tuple[str, ...]] = (
    "employee_id",
    "document_id",
    "document_type",
    "file_name",
    "s3_key",
    "upload_date",
    "status",
    "file_size",
    "content_type",
)

# Every document wire name is required
REQUIRED_DOCUMENT_FIELDS: Final[tuple[str, ...]] = DOCUMENT_WIRE_FIELDS

ALLOWED_DOCUMENT_STATUSES: Final[frozenset[str]] = frozenset(
    {
        "uploaded",
        "verified",
        "rejected",
    }
)

ALLOWED_DOCUMENT_TYPES: Final[frozenset[str]] = frozenset(
    {
        "id",
        "contract",
        "tax",
        "other",
    }
)

# file_size is stored as a signed 64-bit integer
MAX_FILE_SIZE: Final[int] = 2**63 - 1

# type/subtype per RFC 6838 restricted-name, optional parameters after ';'
CONTENT_TYPE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^[A-Za-z0-9][A-Za-z0-9!#$&^_.+-]{0,126}"
    r"/[A-Za-z0-9][A-Za-z0-9!#$&^_.+-]{0,126}"
    r"([ \t]*;[ \t]*[^;\s]+=[^;\r\n]+)*\Z"
)

S3_KEY_PREFIX: Final[str] = "employees"

# =============================================================================
# Text Length Constants
# =============================================================================

MAX_NAME_LENGTH: Final[int] = 255
MAX_DEPARTMENT_LENGTH: Final[int] = 255
MAX_FILE_NAME_LENGTH: Final[int] = 255
