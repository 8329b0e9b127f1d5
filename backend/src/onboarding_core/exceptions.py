"""Domain-specific exceptions for the onboarding records.

Deserialization raises these; validation returns the equivalent
``Violation`` values instead. Field-level errors expose ``.violation`` so
callers can treat both paths the same way.
"""

from typing import Any

from onboarding_core.models.violation import Violation, ViolationKind


class OnboardingError(Exception):
    """Base exception for all onboarding record errors."""

    def __init__(self, message: str = "An error occurred", details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# =============================================================================
# Payload Errors
# =============================================================================


class InvalidPayloadError(OnboardingError):
    """Raised when the input is not a JSON object or cannot be parsed."""

    def __init__(self, reason: str | None = None) -> None:
        message = "Invalid payload"
        details = {"reason": reason} if reason else {}
        super().__init__(message, details)


# =============================================================================
# Field Errors
# =============================================================================


class FieldError(OnboardingError):
    """Base class for errors tied to a single wire name."""

    kind: ViolationKind

    def __init__(self, field: str, message: str, details: dict[str, Any] | None = None) -> None:
        self.field = field
        super().__init__(message, {"field": field, **(details or {})})

    @property
    def violation(self) -> Violation:
        """The error as a validation value."""
        return Violation(kind=self.kind, field=self.field, reason=self.message)


class MissingFieldError(FieldError):
    """Raised when a required wire name is absent."""

    kind = ViolationKind.MISSING_FIELD

    def __init__(self, field: str, missing: list[str] | None = None) -> None:
        details = {"missing": missing} if missing else {}
        super().__init__(field, f"Missing required field '{field}'", details)


class InvalidFieldValueError(FieldError):
    """Raised when a value has the wrong shape or violates a range."""

    kind = ViolationKind.INVALID_FIELD_VALUE

    def __init__(self, field: str, reason: str) -> None:
        self.reason = reason
        super().__init__(field, f"Invalid value for '{field}': {reason}", {"reason": reason})


# =============================================================================
# State Machine Errors
# =============================================================================


class InvalidStatusTransitionError(OnboardingError):
    """Raised when a status move is not admitted by the state machine."""

    def __init__(self, current: str, target: str) -> None:
        self.current = current
        self.target = target
        super().__init__(
            f"Cannot transition status from '{current}' to '{target}'",
            {"current": current, "target": target},
        )
