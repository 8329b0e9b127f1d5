"""Employee domain model."""

from datetime import date, datetime
from enum import StrEnum
from typing import TYPE_CHECKING, Annotated

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from onboarding_core.clock import Clock, reject_epoch, resolve_clock, to_local_naive
from onboarding_core.constants.validation import PROFILE_SORT_KEY
from onboarding_core.exceptions import InvalidStatusTransitionError
from onboarding_core.utils.storage_keys import employee_storage_key

if TYPE_CHECKING:
    from onboarding_core.models.dto.employee import EmployeeCreate, EmployeeUpdate


class EmployeeStatus(StrEnum):
    """Employee onboarding status enum."""

    PENDING = "pending"
    ACTIVE = "active"
    TERMINATED = "terminated"


EMPLOYEE_TRANSITIONS: dict[EmployeeStatus, frozenset[EmployeeStatus]] = {
    EmployeeStatus.PENDING: frozenset({EmployeeStatus.ACTIVE, EmployeeStatus.TERMINATED}),
    EmployeeStatus.ACTIVE: frozenset({EmployeeStatus.TERMINATED}),
    EmployeeStatus.TERMINATED: frozenset(),
}


def can_transition_employee(current: str, target: str) -> bool:
    """Check whether the employee state machine admits ``current -> target``."""
    try:
        return EmployeeStatus(target) in EMPLOYEE_TRANSITIONS[EmployeeStatus(current)]
    except ValueError:
        return False


class Employee(BaseModel):
    """Onboarding profile of one person.

    Stored in the employee's partition under the ``PROFILE`` sort key.
    Records are frozen; ``update`` and ``transition_to`` return a new record
    with ``updated_at`` refreshed.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    employee_id: str
    sort_key: str = PROFILE_SORT_KEY
    name: str
    email: str
    department: str | None = None
    start_date: date | None = None
    # Unrecognised strings are kept so validation can report them
    status: Annotated[EmployeeStatus | str, Field(union_mode="left_to_right")] = EmployeeStatus.PENDING
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at", "start_date", mode="before")
    @classmethod
    def _reject_epoch(cls, value: object) -> object:
        return reject_epoch(value)

    @field_validator("created_at", "updated_at")
    @classmethod
    def _to_local_time(cls, value: datetime) -> datetime:
        return to_local_naive(value)

    @field_serializer("created_at", "updated_at", when_used="json")
    def _serialize_timestamp(self, value: datetime) -> str:
        return value.isoformat()

    @field_serializer("start_date", when_used="json")
    def _serialize_start_date(self, value: date | None) -> str | None:
        return value.isoformat() if value is not None else None

    @classmethod
    def create(
        cls,
        employee_id: str,
        name: str,
        email: str,
        department: str | None = None,
        start_date: date | None = None,
        clock: Clock | None = None,
    ) -> "Employee":
        """Create a new pending profile with both timestamps set to now.

        Args:
            employee_id: Caller-supplied identifier
            name: Full name
            email: Email address
            department: Optional department
            start_date: Optional start date
            clock: Time source, defaults to the active clock

        Returns:
            New Employee record
        """
        now = resolve_clock(clock).now()
        return cls(
            employee_id=employee_id,
            name=name,
            email=email,
            department=department,
            start_date=start_date,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def from_create(
        cls,
        employee_id: str,
        data: "EmployeeCreate",
        clock: Clock | None = None,
    ) -> "Employee":
        """Create a profile from an ``EmployeeCreate`` request payload."""
        return cls.create(
            employee_id=employee_id,
            name=data.name,
            email=str(data.email),
            department=data.department,
            start_date=data.start_date,
            clock=clock,
        )

    @property
    def storage_key(self) -> dict[str, str]:
        """Primary key of the profile row."""
        return employee_storage_key(self.employee_id)

    def _touched(self, clock: Clock | None) -> datetime:
        # Never move backwards, keeps created_at <= updated_at
        return max(resolve_clock(clock).now(), self.updated_at)

    def update(self, changes: "EmployeeUpdate", clock: Clock | None = None) -> "Employee":
        """Apply profile edits and refresh ``updated_at``.

        Only fields explicitly set on ``changes`` are applied. An empty update
        returns the record unchanged.

        Args:
            changes: Profile edits
            clock: Time source, defaults to the active clock

        Returns:
            Updated Employee record
        """
        values = {
            field: value
            for field, value in changes.model_dump(exclude_unset=True).items()
            # name and email are required, only optional fields can be cleared
            if value is not None or field in ("department", "start_date")
        }
        if not values:
            return self
        values["updated_at"] = self._touched(clock)
        return self.model_copy(update=values)

    def transition_to(self, status: str, clock: Clock | None = None) -> "Employee":
        """Move to ``status`` and refresh ``updated_at``.

        Raises:
            InvalidStatusTransitionError: If the move is not admitted
        """
        if not can_transition_employee(self.status, status):
            raise InvalidStatusTransitionError(str(self.status), str(status))
        return self.model_copy(
            update={"status": EmployeeStatus(status), "updated_at": self._touched(clock)}
        )

    def activate(self, clock: Clock | None = None) -> "Employee":
        """Mark onboarding as complete."""
        return self.transition_to(EmployeeStatus.ACTIVE, clock)

    def terminate(self, clock: Clock | None = None) -> "Employee":
        """Move to the terminal state."""
        return self.transition_to(EmployeeStatus.TERMINATED, clock)
