"""Injectable time source for record timestamps.

Timestamps are local wall-clock time without a zone, truncated to whole
seconds, matching the ISO-8601 form used on the wire
(``2025-01-10T09:00:00``).
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, tzinfo
from typing import Protocol

from onboarding_core.config import get_settings


class Clock(Protocol):
    """Anything that can tell the current local time."""

    def now(self) -> datetime:
        """Return the current naive local date-time."""
        ...


class SystemClock:
    """Wall clock, in the configured zone or host local time."""

    def __init__(self, tz: tzinfo | None = None) -> None:
        self.tz = tz

    def now(self) -> datetime:
        tz = self.tz if self.tz is not None else get_settings().tzinfo
        current = datetime.now(tz) if tz is not None else datetime.now()
        return current.replace(tzinfo=None, microsecond=0)


class FixedClock:
    """Clock pinned to one instant."""

    def __init__(self, instant: datetime) -> None:
        self.instant = to_local_naive(instant)

    def now(self) -> datetime:
        return self.instant


_current_clock: ContextVar[Clock] = ContextVar("onboarding_clock", default=SystemClock())


def get_clock() -> Clock:
    """Return the clock active in the current context."""
    return _current_clock.get()


def resolve_clock(clock: Clock | None) -> Clock:
    """Return ``clock`` if given, else the active clock."""
    return clock if clock is not None else get_clock()


@contextmanager
def use_clock(clock: Clock) -> Iterator[Clock]:
    """Pin the active clock for the duration of a ``with`` block."""
    token = _current_clock.set(clock)
    try:
        yield clock
    finally:
        _current_clock.reset(token)


def to_local_naive(value: datetime) -> datetime:
    """Convert an aware date-time to naive local time; naive values pass through."""
    if value.tzinfo is None or value.utcoffset() is None:
        return value
    tz = get_settings().tzinfo
    local = value.astimezone(tz) if tz is not None else value.astimezone()
    return local.replace(tzinfo=None)


def reject_epoch(value: object) -> object:
    """Refuse Unix timestamps, given as numbers or numeric strings.

    Pydantic's lax date parsing reads them as epoch seconds, while wire
    timestamps are ISO-8601 strings.

    Raises:
        ValueError: If ``value`` is numeric
    """
    if isinstance(value, (int, float)):
        raise ValueError("must be an ISO-8601 string, not a number")
    if isinstance(value, str):
        try:
            float(value)
        except ValueError:
            return value
        raise ValueError("must be an ISO-8601 string, not a number")
    return value
