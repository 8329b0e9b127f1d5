"""Key conventions shared with the storage adapter and the blob store.

Rows are partitioned by ``employee_id``. Inside a partition the profile row
uses the ``PROFILE`` sort key and each document row uses its ``document_id``.
"""

from onboarding_core.constants.validation import PROFILE_SORT_KEY, S3_KEY_PREFIX


def employee_storage_key(employee_id: str) -> dict[str, str]:
    """Primary key of an employee's profile row."""
    return {"employee_id": employee_id, "sort_key": PROFILE_SORT_KEY}


def document_storage_key(employee_id: str, document_id: str) -> dict[str, str]:
    """Primary key of a document row."""
    return {"employee_id": employee_id, "sort_key": document_id}


def build_s3_key(employee_id: str, document_id: str, file_name: str) -> str:
    """Build the blob key for an uploaded file.

    Args:
        employee_id: Owning employee
        document_id: Document identifier within the employee
        file_name: Original file name, path separators are replaced

    Returns:
        Key of the form ``employees/<employee_id>/<document_id>/<file_name>``
    """
    safe_name = file_name.replace("/", "_").replace("\\", "_")
    return f"{S3_KEY_PREFIX}/{employee_id}/{document_id}/{safe_name}"
