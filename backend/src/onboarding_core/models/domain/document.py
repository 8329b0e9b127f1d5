"""Document domain model."""

from datetime import datetime
from enum import StrEnum
from typing import TYPE_CHECKING, Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_serializer, field_validator

from onboarding_core.clock import Clock, reject_epoch, resolve_clock, to_local_naive
from onboarding_core.exceptions import InvalidStatusTransitionError
from onboarding_core.utils.storage_keys import build_s3_key, document_storage_key

if TYPE_CHECKING:
    from onboarding_core.models.dto.document import DocumentUpload


class DocumentStatus(StrEnum):
    """Document verification status enum."""

    UPLOADED = "uploaded"
    VERIFIED = "verified"
    REJECTED = "rejected"


class DocumentType(StrEnum):
    """Kind of onboarding document."""

    ID = "id"
    CONTRACT = "contract"
    TAX = "tax"
    OTHER = "other"


DOCUMENT_TRANSITIONS: dict[DocumentStatus, frozenset[DocumentStatus]] = {
    DocumentStatus.UPLOADED: frozenset({DocumentStatus.VERIFIED, DocumentStatus.REJECTED}),
    DocumentStatus.VERIFIED: frozenset(),
    DocumentStatus.REJECTED: frozenset(),
}


def can_transition_document(current: str, target: str) -> bool:
    """Check whether the document state machine admits ``current -> target``."""
    try:
        return DocumentStatus(target) in DOCUMENT_TRANSITIONS[DocumentStatus(current)]
    except ValueError:
        return False


class Document(BaseModel):
    """Metadata of one uploaded document belonging to an employee."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    employee_id: str
    document_id: str
    document_type: Annotated[DocumentType | str, Field(union_mode="left_to_right")]
    file_name: str
    s3_key: str
    upload_date: datetime
    status: Annotated[DocumentStatus | str, Field(union_mode="left_to_right")] = DocumentStatus.UPLOADED
    file_size: StrictInt
    content_type: str

    @field_validator("upload_date", mode="before")
    @classmethod
    def _reject_epoch(cls, value: object) -> object:
        return reject_epoch(value)

    @field_validator("upload_date")
    @classmethod
    def _to_local_time(cls, value: datetime) -> datetime:
        return to_local_naive(value)

    @field_serializer("upload_date", when_used="json")
    def _serialize_upload_date(self, value: datetime) -> str:
        return value.isoformat()

    @classmethod
    def create(
        cls,
        employee_id: str,
        document_id: str,
        document_type: str,
        file_name: str,
        s3_key: str,
        file_size: int,
        content_type: str,
        clock: Clock | None = None,
    ) -> "Document":
        """Create a freshly uploaded document stamped with the current time."""
        return cls(
            employee_id=employee_id,
            document_id=document_id,
            document_type=document_type,
            file_name=file_name,
            s3_key=s3_key,
            upload_date=resolve_clock(clock).now(),
            file_size=file_size,
            content_type=content_type,
        )

    @classmethod
    def from_upload(cls, data: "DocumentUpload", clock: Clock | None = None) -> "Document":
        """Create a document from an upload notification.

        The blob key is derived from the identifiers and file name when the
        notification does not carry one.
        """
        s3_key = data.s3_key or build_s3_key(data.employee_id, data.document_id, data.file_name)
        return cls.create(
            employee_id=data.employee_id,
            document_id=data.document_id,
            document_type=data.document_type,
            file_name=data.file_name,
            s3_key=s3_key,
            file_size=data.file_size,
            content_type=data.content_type,
            clock=clock,
        )

    @property
    def storage_key(self) -> dict[str, str]:
        """Primary key of the document row."""
        return document_storage_key(self.employee_id, self.document_id)

    def _transition(self, target: DocumentStatus) -> "Document":
        if not can_transition_document(self.status, target):
            raise InvalidStatusTransitionError(str(self.status), str(target))
        return self.model_copy(update={"status": target})

    def verify(self) -> "Document":
        """Accept the document.

        Raises:
            InvalidStatusTransitionError: If the document is not ``uploaded``
        """
        return self._transition(DocumentStatus.VERIFIED)

    def reject(self) -> "Document":
        """Reject the document.

        Raises:
            InvalidStatusTransitionError: If the document is not ``uploaded``
        """
        return self._transition(DocumentStatus.REJECTED)
