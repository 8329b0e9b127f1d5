"""Document DTOs."""

from pydantic import BaseModel, Field, field_validator

from onboarding_core.constants.validation import (
    CONTENT_TYPE_PATTERN,
    MAX_FILE_NAME_LENGTH,
    MAX_FILE_SIZE,
)
from onboarding_core.models.domain.document import DocumentType


class DocumentUpload(BaseModel):
    """Upload notification received once a file has landed in the blob store."""

    employee_id: str = Field(min_length=1, description="Owning employee")
    document_id: str = Field(min_length=1, description="Document identifier within the employee")
    document_type: DocumentType = Field(description="Kind of document")
    file_name: str = Field(min_length=1, max_length=MAX_FILE_NAME_LENGTH, description="Original file name")
    s3_key: str | None = Field(default=None, min_length=1, description="Blob key, derived when omitted")
    file_size: int = Field(ge=0, le=MAX_FILE_SIZE, description="File size in bytes")
    content_type: str = Field(description="MIME type, e.g. application/pdf")

    @field_validator("content_type")
    @classmethod
    def validate_content_type(cls, value: str) -> str:
        """Reject values that are not ``type/subtype``."""
        if not CONTENT_TYPE_PATTERN.match(value):
            raise ValueError("content_type must be a MIME type of the form type/subtype")
        return value
