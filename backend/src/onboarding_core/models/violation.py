"""Validation violation value."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class ViolationKind(StrEnum):
    """Kind of validation failure."""

    MISSING_FIELD = "missing_field"
    INVALID_FIELD_VALUE = "invalid_field_value"


class Violation(BaseModel):
    """A single rule violation, identified by the offending wire name."""

    model_config = ConfigDict(frozen=True)

    kind: ViolationKind
    field: str
    reason: str
