from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, TypeVar

from pydantic import ValidationError as InputValidationError

from ..config import ActiveConfig
from ..constants import DEFAULT_URL_EXPIRY, NO_CONFIGURATION_ERROR
from ..context import get_config_store, get_storage_client
from ..formatting import format_file_size
from ..models import (
    FileEntry,
    GetFileUrlParams,
    GetFileUrlResponse,
    GetFileUrlSuccess,
    ListFilesParams,
    ListFilesResponse,
    ListFilesSuccess,
    SavePrivateFileParams,
    SavePrivateFileResponse,
    SavePrivateFileSuccess,
    SavePublicFileParams,
    SavePublicFileResponse,
    SavePublicFileSuccess,
    ToolError,
)
from ..models.inputs import (
    DescriptionArg,
    ExpiresInArg,
    FileKeyArg,
    FilenameArg,
    FilePathArg,
    PrefixArg,
    ToolParams,
)

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=ToolParams)

# Helpers


def _parse(model: type[P], **kwargs: Any) -> tuple[P | None, ToolError | None]:
    try:
        return model(**kwargs), None
    except InputValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'input'}: {err['msg']}" for err in e.errors()
        )
        return None, ToolError(error=f"Invalid input: {problems}")


def _resolve_active() -> tuple[ActiveConfig | None, ToolError | None]:
    active = get_config_store().resolve_active()
    if active is None:
        return None, ToolError(error=NO_CONFIGURATION_ERROR)
    return active, None


def _expiration_date(expires_in: int) -> str:
    return (datetime.now(timezone.utc) + timedelta(seconds=expires_in)).isoformat()


def _isoformat(value: Any) -> str:
    return value.isoformat() if isinstance(value, datetime) else str(value)


def save_public_file(
    file_path: FilePathArg,
    filename: FilenameArg = None,
    description: DescriptionArg = None,
) -> SavePublicFileResponse:
    """Save a file to S3 storage and make it publicly accessible. Returns the public URL.

    Args:
        file_path: Path to the local file to upload
        filename: Optional custom filename (storage key); defaults to the file's base name
        description: Optional description stored with the file

    Returns:
        SavePublicFileSuccess with the permanent public URL,
        ToolError when unconfigured or the upload fails.

    Example:
        ```python
        from saveforme_mcp.tools import files

        result = files.save_public_file(file_path="./chart.png", description="Q1 revenue chart")
        # Next step: Share result.url; it does not expire.
        ```
    """
    params, error = _parse(SavePublicFileParams, file_path=file_path, filename=filename, description=description)
    if error:
        return error
    assert params is not None

    active, error = _resolve_active()
    if error:
        return error
    assert active is not None

    try:
        client = get_storage_client(active.config)
        result = client.upload_from_path(
            params.file_path,
            key=params.filename,
            is_public=True,
            description=params.description,
        )
    except Exception as e:
        logger.warning(f"save_public_file failed for {params.file_path}: {e}")
        return ToolError(error=f"Failed to upload file: {e}")

    return SavePublicFileSuccess(
        url=result.url,
        key=result.key,
        drive_name=active.drive_name,
        message=f"File uploaded successfully as public file. URL: {result.url}",
    )


def save_private_file(
    file_path: FilePathArg,
    filename: FilenameArg = None,
    description: DescriptionArg = None,
) -> SavePrivateFileResponse:
    """Save a file to S3 storage as private. Use get_file_url to get temporary access URLs.

    Args:
        file_path: Path to the local file to upload
        filename: Optional custom filename (storage key); defaults to the file's base name
        description: Optional description stored with the file

    Returns:
        SavePrivateFileSuccess with a presigned URL valid for one hour,
        ToolError when unconfigured or the upload fails.

    Example:
        ```python
        from saveforme_mcp.tools import files

        result = files.save_private_file(file_path="./contract.pdf")
        # Next step: Call get_file_url(filename=result.key) for a fresh link after it expires.
        ```
    """
    params, error = _parse(SavePrivateFileParams, file_path=file_path, filename=filename, description=description)
    if error:
        return error
    assert params is not None

    active, error = _resolve_active()
    if error:
        return error
    assert active is not None

    try:
        client = get_storage_client(active.config)
        result = client.upload_from_path(
            params.file_path,
            key=params.filename,
            is_public=False,
            description=params.description,
        )
    except Exception as e:
        logger.warning(f"save_private_file failed for {params.file_path}: {e}")
        return ToolError(error=f"Failed to upload file: {e}")

    return SavePrivateFileSuccess(
        key=result.key,
        url=result.url,
        temporary_url=result.url,
        expires_in=DEFAULT_URL_EXPIRY,
        expiration_date=_expiration_date(DEFAULT_URL_EXPIRY),
        drive_name=active.drive_name,
        message="File uploaded successfully as private file. Temporary URL provided (expires in 1 hour).",
    )


def list_files(
    prefix: PrefixArg = None,
) -> ListFilesResponse:
    """List all files stored in the S3 bucket with their metadata including descriptions.

    Args:
        prefix: Optional key prefix to filter by

    Returns:
        ListFilesSuccess with one entry per file (size also human-formatted),
        ToolError when unconfigured or the listing fails.

    Example:
        ```python
        from saveforme_mcp.tools import files

        result = files.list_files(prefix="images/")
        # Next step: Pass a filename into get_file_url to share it.
        ```
    """
    params, error = _parse(ListFilesParams, prefix=prefix)
    if error:
        return error
    assert params is not None

    active, error = _resolve_active()
    if error:
        return error
    assert active is not None

    try:
        client = get_storage_client(active.config)
        listed = client.list_files(params.prefix)
    except Exception as e:
        logger.warning(f"list_files failed on drive '{active.drive_name}': {e}")
        return ToolError(error=f"Failed to list files: {e}")

    entries = [
        FileEntry(
            filename=item.filename,
            description=item.description or "No description",
            upload_date=_isoformat(item.upload_date),
            is_public=item.is_public,
            size=item.size,
            content_type=item.content_type,
            size_formatted=format_file_size(item.size),
        )
        for item in listed
    ]

    return ListFilesSuccess(
        files=entries,
        count=len(entries),
        drive_name=active.drive_name,
        message=f"Found {len(entries)} files in {active.drive_name}",
    )


def get_file_url(
    filename: FileKeyArg,
    expires_in: ExpiresInArg = DEFAULT_URL_EXPIRY,
) -> GetFileUrlResponse:
    """Get a temporary or permanent URL for a file. For public files, returns permanent URL. For private files, returns temporary presigned URL.

    Args:
        filename: Name/key of the stored file
        expires_in: Lifetime of a presigned URL in seconds (60 to 604800)

    Returns:
        GetFileUrlSuccess with a permanent URL (public file) or a presigned URL
        and its expiration (private file), ToolError when unconfigured, when the
        file does not exist, or when URL generation fails.

    Example:
        ```python
        from saveforme_mcp.tools import files

        result = files.get_file_url(filename="contract.pdf", expires_in=600)
        # Next step: Share result.url before result.expiration_date.
        ```
    """
    params, error = _parse(GetFileUrlParams, filename=filename, expires_in=expires_in)
    if error:
        return error
    assert params is not None

    active, error = _resolve_active()
    if error:
        return error
    assert active is not None

    try:
        client = get_storage_client(active.config)
        if not client.file_exists(params.filename):
            return ToolError(error=f"File '{params.filename}' not found")

        metadata = client.get_file_metadata(params.filename)
        if metadata is not None and metadata.is_public:
            return GetFileUrlSuccess(
                url=client.get_public_url(params.filename),
                url_type="permanent",
                is_public=True,
                filename=params.filename,
                drive_name=active.drive_name,
                message="Public file - permanent URL provided",
            )

        url = client.get_presigned_url(params.filename, params.expires_in)
        expiration_date = _expiration_date(params.expires_in)
    except Exception as e:
        logger.warning(f"get_file_url failed for '{params.filename}': {e}")
        return ToolError(error=f"Failed to get file URL: {e}")

    return GetFileUrlSuccess(
        url=url,
        url_type="temporary",
        is_public=False,
        filename=params.filename,
        expires_in=params.expires_in,
        expiration_date=expiration_date,
        drive_name=active.drive_name,
        message=f"Temporary URL generated, expires at {expiration_date}",
    )
