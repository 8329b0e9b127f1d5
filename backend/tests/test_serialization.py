"""JSON codec tests."""

import json
import logging
from datetime import date, datetime
from typing import Any

import pytest

from onboarding_core.clock import FixedClock
from onboarding_core.exceptions import (
    InvalidFieldValueError,
    InvalidPayloadError,
    MissingFieldError,
)
from onboarding_core.models.domain.document import Document, DocumentStatus
from onboarding_core.models.domain.employee import Employee, EmployeeStatus
from onboarding_core.models.violation import ViolationKind
from onboarding_core.utils.serialization import (
    document_from_dict,
    document_from_json,
    document_to_dict,
    document_to_json,
    employee_from_dict,
    employee_from_json,
    employee_to_dict,
    employee_to_json,
)
from onboarding_core.utils.validation import validate_document, validate_employee


class TestEmployeeCodec:
    """Test Employee (de)serialization."""

    def test_deserialize_canonical(self, employee_payload: dict[str, Any]) -> None:
        """The canonical document deserializes into a valid record."""
        employee = employee_from_json(json.dumps(employee_payload))

        assert validate_employee(employee) == []
        assert employee.employee_id == "E-000123"
        assert employee.status == EmployeeStatus.PENDING
        assert employee.start_date == date(2025, 1, 13)
        assert employee.created_at == datetime(2025, 1, 10, 9, 0, 0)

    def test_deserialize_does_not_refresh_timestamps(
        self, employee_payload: dict[str, Any], pinned_clock: FixedClock
    ) -> None:
        """Timestamps come from the payload, not the clock."""
        employee = employee_from_dict(employee_payload)

        assert employee.updated_at == datetime(2025, 1, 10, 9, 0, 0)
        assert employee.updated_at != pinned_clock.now()

    def test_serialize_uses_wire_names(self, employee_payload: dict[str, Any]) -> None:
        """Every wire name is emitted verbatim with the original values."""
        employee = employee_from_dict(employee_payload)

        assert employee_to_dict(employee) == employee_payload

    def test_unset_optional_fields_emit_null(self, fixed_clock: FixedClock) -> None:
        """department and start_date are always present, null when unset."""
        employee = Employee.create(employee_id="E-1", name="A", email="a@x.y", clock=fixed_clock)

        payload = json.loads(employee_to_json(employee))

        assert payload["department"] is None
        assert payload["start_date"] is None

    def test_round_trip(self, fixed_clock: FixedClock) -> None:
        """deserialize(serialize(r)) == r."""
        employee = Employee.create(
            employee_id="E-1",
            name="Alice",
            email="alice@example.com",
            department="Engineering",
            start_date=date(2025, 1, 13),
            clock=FixedClock(datetime(2025, 1, 1, 9, 30, 15, 250000)),
        ).activate(clock=FixedClock(datetime(2025, 1, 2, 10, 0, 0)))

        assert employee_from_json(employee_to_json(employee)) == employee

    def test_missing_email_raises(self, employee_payload: dict[str, Any]) -> None:
        """A missing required field is reported by name."""
        del employee_payload["email"]

        with pytest.raises(MissingFieldError) as exc_info:
            employee_from_dict(employee_payload)

        assert exc_info.value.field == "email"
        assert exc_info.value.violation.kind == ViolationKind.MISSING_FIELD
        assert exc_info.value.violation.field == "email"

    def test_null_required_field_is_missing(self, employee_payload: dict[str, Any]) -> None:
        """An explicit null counts as absent."""
        employee_payload["name"] = None

        with pytest.raises(MissingFieldError) as exc_info:
            employee_from_dict(employee_payload)

        assert exc_info.value.field == "name"

    def test_all_missing_fields_are_listed(self) -> None:
        """The first missing field is raised, all are listed in details."""
        with pytest.raises(MissingFieldError) as exc_info:
            employee_from_dict({"name": "A"})

        assert exc_info.value.field == "employee_id"
        assert exc_info.value.details["missing"] == [
            "employee_id",
            "sort_key",
            "email",
            "status",
            "created_at",
            "updated_at",
        ]

    def test_optional_fields_may_be_absent(self, employee_payload: dict[str, Any]) -> None:
        """department and start_date are optional on the wire."""
        del employee_payload["department"]
        del employee_payload["start_date"]

        employee = employee_from_dict(employee_payload)

        assert employee.department is None
        assert employee.start_date is None

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("start_date", "13/01/2025"),
            ("start_date", 0),
            ("created_at", "yesterday"),
            ("created_at", 0),
            ("updated_at", 1736499600),
            ("updated_at", "1736499600"),
            ("created_at", 1736499600.5),
            ("employee_id", 123),
            ("name", ["Alice"]),
        ],
    )
    def test_wrong_shape_raises(self, employee_payload: dict[str, Any], field: str, value: Any) -> None:
        """Values of the wrong type are rejected with the offending field."""
        employee_payload[field] = value

        with pytest.raises(InvalidFieldValueError) as exc_info:
            employee_from_dict(employee_payload)

        assert exc_info.value.field == field

    def test_unknown_status_is_kept_for_validation(self, employee_payload: dict[str, Any]) -> None:
        """A well-shaped but unknown status deserializes and fails validation."""
        employee_payload["status"] = "onboarding"

        employee = employee_from_dict(employee_payload)

        assert employee.status == "onboarding"
        assert [v.field for v in validate_employee(employee)] == ["status"]

    def test_aware_timestamps_become_local(
        self, employee_payload: dict[str, Any], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Zoned timestamps are converted to the configured zone and made naive."""
        from onboarding_core.config import get_settings

        monkeypatch.setenv("ONBOARDING_TIMEZONE", "UTC")
        get_settings.cache_clear()
        employee_payload["created_at"] = "2025-01-10T10:00:00+01:00"
        employee_payload["updated_at"] = "2025-01-10T09:00:00Z"

        employee = employee_from_dict(employee_payload)

        assert employee.created_at == datetime(2025, 1, 10, 9, 0, 0)
        assert employee.updated_at == datetime(2025, 1, 10, 9, 0, 0)
        assert employee.created_at.tzinfo is None


class TestDocumentCodec:
    """Test Document (de)serialization."""

    def test_deserialize_canonical(self, document_payload: dict[str, Any]) -> None:
        """The canonical document deserializes into a valid record."""
        document = document_from_json(json.dumps(document_payload).encode("utf-8"))

        assert validate_document(document) == []
        assert document.status == DocumentStatus.UPLOADED
        assert document.file_size == 52344
        assert document.upload_date == datetime(2025, 1, 10, 9, 5, 12)

    def test_serialize_uses_wire_names(self, document_payload: dict[str, Any]) -> None:
        """Every wire name is emitted verbatim with the original values."""
        assert document_to_dict(document_from_dict(document_payload)) == document_payload

    def test_unknown_fields_are_dropped(
        self, document_payload: dict[str, Any], caplog: pytest.LogCaptureFixture
    ) -> None:
        """Extra fields are ignored and never re-serialized."""
        document_payload["hash_md5"] = "9e107d9d372bb6826bd81d3542a419d6"

        with caplog.at_level(logging.DEBUG, logger="onboarding_core.utils.serialization"):
            document = document_from_dict(document_payload)

        assert "hash_md5" not in document_to_json(document)
        assert document == document_from_dict({k: v for k, v in document_payload.items() if k != "hash_md5"})
        assert "hash_md5" in caplog.text

    def test_round_trip(self, fixed_clock: FixedClock) -> None:
        """deserialize(serialize(r)) == r."""
        document = Document.create(
            employee_id="E-1",
            document_id="D-7",
            document_type="tax",
            file_name="w4.pdf",
            s3_key="employees/E-1/D-7/w4.pdf",
            file_size=0,
            content_type="application/pdf",
            clock=fixed_clock,
        ).verify()

        assert document_from_json(document_to_json(document)) == document

    def test_negative_file_size_deserializes(self, document_payload: dict[str, Any]) -> None:
        """Range violations are left to validation."""
        document_payload["file_size"] = -1

        document = document_from_dict(document_payload)

        assert document.file_size == -1

    @pytest.mark.parametrize("value", ["52344", 52.5, True])
    def test_non_integer_file_size_raises(self, document_payload: dict[str, Any], value: Any) -> None:
        """file_size must be a JSON integer."""
        document_payload["file_size"] = value

        with pytest.raises(InvalidFieldValueError) as exc_info:
            document_from_dict(document_payload)

        assert exc_info.value.field == "file_size"

    @pytest.mark.parametrize("value", [0, 1736500000, "1736500000"])
    def test_numeric_upload_date_raises(self, document_payload: dict[str, Any], value: Any) -> None:
        """upload_date must be an ISO-8601 string, not epoch seconds."""
        document_payload["upload_date"] = value

        with pytest.raises(InvalidFieldValueError) as exc_info:
            document_from_dict(document_payload)

        assert exc_info.value.field == "upload_date"

    @pytest.mark.parametrize("field", ["upload_date", "status", "s3_key"])
    def test_defaulted_fields_are_still_required(self, document_payload: dict[str, Any], field: str) -> None:
        """Construction defaults do not make a wire field optional."""
        del document_payload[field]

        with pytest.raises(MissingFieldError) as exc_info:
            document_from_dict(document_payload)

        assert exc_info.value.field == field


class TestInvalidPayload:
    """Test rejection of malformed input."""

    @pytest.mark.parametrize(
        "data",
        [
            "{not json",
            b"\xff\xfe\x00",
            "",
            "[1, 2, 3]",
            '"a string"',
            "null",
        ],
    )
    def test_malformed_input_raises(self, data: str | bytes) -> None:
        """Unparseable input and non-objects raise InvalidPayloadError."""
        with pytest.raises(InvalidPayloadError):
            employee_from_json(data)
        with pytest.raises(InvalidPayloadError):
            document_from_json(data)

    def test_parse_failure_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Unparseable input is logged as a warning before raising."""
        with caplog.at_level(logging.WARNING, logger="onboarding_core.utils.serialization"):
            with pytest.raises(InvalidPayloadError):
                employee_from_json("{not json")

        assert "Rejected unparseable payload" in caplog.text

    def test_non_mapping_raises(self) -> None:
        """The dict entry points reject non-mappings."""
        with pytest.raises(InvalidPayloadError):
            employee_from_dict(["employee_id"])  # type: ignore[arg-type]

    def test_deeply_nested_input_raises(self) -> None:
        """Nesting beyond the parser's depth limit is an invalid payload."""
        data = "[" * 100_000 + "]" * 100_000

        with pytest.raises(InvalidPayloadError):
            employee_from_json(data)
        with pytest.raises(InvalidPayloadError):
            document_from_json(data)
