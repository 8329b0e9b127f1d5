"""Pytest fixtures for the onboarding record tests.

Provides:
- A clock pinned to a fixed instant
- Canonical Employee and Document wire payloads
- A settings cache reset around every test
"""

from datetime import datetime
from typing import Any, Generator

import pytest

from onboarding_core.clock import FixedClock, use_clock
from onboarding_core.config import get_settings

PINNED_INSTANT = datetime(2025, 1, 1, 0, 0, 0)


@pytest.fixture(autouse=True)
def _reset_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Drop cached settings so environment overrides take effect."""
    monkeypatch.delenv("ONBOARDING_TIMEZONE", raising=False)
    monkeypatch.delenv("ONBOARDING_DEBUG", raising=False)
    monkeypatch.delenv("ONBOARDING_ENVIRONMENT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock pinned to 2025-01-01T00:00:00."""
    return FixedClock(PINNED_INSTANT)


@pytest.fixture
def pinned_clock(fixed_clock: FixedClock) -> Generator[FixedClock, None, None]:
    """Make the fixed clock the active clock for the test."""
    with use_clock(fixed_clock):
        yield fixed_clock


@pytest.fixture
def employee_payload() -> dict[str, Any]:
    """Canonical Employee wire document."""
    return {
        "employee_id": "E-000123",
        "sort_key": "PROFILE",
        "name": "Alice Example",
        "email": "alice@example.com",
        "department": "Engineering",
        "start_date": "2025-01-13",
        "status": "pending",
        "created_at": "2025-01-10T09:00:00",
        "updated_at": "2025-01-10T09:00:00",
    }


@pytest.fixture
def document_payload() -> dict[str, Any]:
    """Canonical Document wire document."""
    return {
        "employee_id": "E-000123",
        "document_id": "D-1",
        "document_type": "contract",
        "file_name": "contract.pdf",
        "s3_key": "employees/E-000123/D-1/contract.pdf",
        "upload_date": "2025-01-10T09:05:12",
        "status": "uploaded",
        "file_size": 52344,
        "content_type": "application/pdf",
    }
