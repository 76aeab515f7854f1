"""S3-compatible storage client bound to a single drive.

This module wraps a boto3 S3 client with the operations the tools need:
- Uploads from a local path or from in-memory content, with visibility
- Presigned URL generation for private objects
- Listing with per-object metadata (degrading gracefully per key)
- Existence and metadata probes that never raise
- Public URL construction per provider (see ``providers``)

Backend errors raised by upload, list and delete are not caught here; the
tool layer converts them into error responses.
"""

from __future__ import annotations

import logging
import mimetypes
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import boto3
from botocore.config import Config

from ..config.models import StorageConfig
from ..constants import (
    DEFAULT_CONTENT_TYPE,
    DEFAULT_URL_EXPIRY,
    META_DESCRIPTION,
    META_IS_PUBLIC,
    META_UPLOAD_DATE,
    UNKNOWN_CONTENT_TYPE,
)
from ..exceptions import NotFoundError
from .providers import public_base_url

logger = logging.getLogger(__name__)

DEFAULT_REGION = "us-east-1"


@dataclass(frozen=True)
class FileMetadata:
    """What we know about one stored object."""

    filename: str
    upload_date: datetime
    is_public: bool = False
    size: int = 0
    content_type: str = UNKNOWN_CONTENT_TYPE
    description: Optional[str] = None


@dataclass(frozen=True)
class UploadResult:
    """Key written and the URL to reach it (public or presigned)."""

    url: str
    key: str


def create_client(config: StorageConfig, force_path_style: bool = True) -> Any:
    """Create a boto3 S3 client for a drive profile.

    Args:
        config: Drive profile with endpoint, region and credentials
        force_path_style: Address buckets as ``{endpoint}/{bucket}`` instead of
            ``{bucket}.{endpoint}``

    Returns:
        Configured S3 client
    """
    return boto3.client(
        "s3",
        endpoint_url=config.endpoint or None,
        region_name=config.region or DEFAULT_REGION,
        aws_access_key_id=config.access_key_id,
        aws_secret_access_key=config.secret_access_key,
        config=Config(
            signature_version="s3v4",
            s3={"addressing_style": "path" if force_path_style else "virtual"},
        ),
    )


def _user_metadata(metadata: Optional[Dict[str, str]], name: str) -> Optional[str]:
    # S3 returns user metadata names lower-cased; older uploads may not be
    for key, value in (metadata or {}).items():
        if key.lower() == name:
            return value
    return None


def guess_content_type(path: Union[str, Path]) -> str:
    content_type, _ = mimetypes.guess_type(str(path))
    return content_type or DEFAULT_CONTENT_TYPE


class StorageClient:
    """File operations against one bucket of one S3-compatible endpoint.

    Args:
        config: The resolved drive profile. ``force_path_style`` defaults to
            True when unset, which suits MinIO and other self-hosted endpoints.
        client: Pre-built S3 client (tests inject a mock here)
    """

    def __init__(self, config: StorageConfig, client: Any = None) -> None:
        self.config = config
        self.bucket_name = config.bucket_name
        self.force_path_style = True if config.force_path_style is None else config.force_path_style
        self._client = client if client is not None else create_client(config, self.force_path_style)

    # URLs

    def get_public_base_url(self) -> str:
        return public_base_url(self.config.endpoint, self.bucket_name)

    def get_public_url(self, key: str) -> str:
        return f"{self.get_public_base_url()}/{key}"

    def get_presigned_url(self, key: str, expires_in: int = DEFAULT_URL_EXPIRY) -> str:
        """Time-limited GET URL for ``key``; no bounds are enforced here."""
        return self._client.generate_presigned_url(
            "get_object",
            Params={"Bucket": self.bucket_name, "Key": key},
            ExpiresIn=expires_in,
        )

    # Uploads

    def upload_from_path(
        self,
        path: Union[str, Path],
        key: Optional[str] = None,
        is_public: bool = False,
        description: Optional[str] = None,
    ) -> UploadResult:
        """Upload a local file; ``key`` defaults to its base name.

        Raises:
            NotFoundError: If ``path`` does not exist
        """
        file_path = Path(path).expanduser()
        if not file_path.is_file():
            raise NotFoundError(str(path))

        body = file_path.read_bytes()
        return self._put(
            key=key or file_path.name,
            body=body,
            content_type=guess_content_type(file_path),
            is_public=is_public,
            description=description,
        )

    def upload_from_content(
        self,
        content: Union[bytes, str],
        key: str,
        content_type: str = DEFAULT_CONTENT_TYPE,
        is_public: bool = False,
        description: Optional[str] = None,
    ) -> UploadResult:
        body = content.encode("utf-8") if isinstance(content, str) else content
        return self._put(
            key=key,
            body=body,
            content_type=content_type,
            is_public=is_public,
            description=description,
        )

    def _put(
        self,
        key: str,
        body: bytes,
        content_type: str,
        is_public: bool,
        description: Optional[str],
    ) -> UploadResult:
        metadata: Dict[str, str] = {}
        if description:
            metadata[META_DESCRIPTION] = description
        metadata[META_UPLOAD_DATE] = datetime.now(timezone.utc).isoformat()
        metadata[META_IS_PUBLIC] = "true" if is_public else "false"

        params: Dict[str, Any] = {
            "Bucket": self.bucket_name,
            "Key": key,
            "Body": body,
            "ContentType": content_type,
            "Metadata": metadata,
        }
        if is_public:
            params["ACL"] = "public-read"

        self._client.put_object(**params)
        logger.info(f"Uploaded {len(body)} bytes to {self.bucket_name}/{key} (public={is_public})")

        url = self.get_public_url(key) if is_public else self.get_presigned_url(key)
        return UploadResult(url=url, key=key)

    # Listing and probes

    def list_files(self, prefix: Optional[str] = None) -> List[FileMetadata]:
        """List every object under ``prefix`` with its metadata.

        A failed metadata lookup for one key keeps that entry with
        conservative defaults rather than failing the listing.
        """
        params: Dict[str, Any] = {"Bucket": self.bucket_name}
        if prefix:
            params["Prefix"] = prefix

        files: List[FileMetadata] = []
        paginator = self._client.get_paginator("list_objects_v2")
        for page in paginator.paginate(**params):
            for item in page.get("Contents", []) or []:
                key = item.get("Key")
                if not key:
                    continue
                files.append(self._describe_listed(key, item))
        return files

    def _describe_listed(self, key: str, item: Dict[str, Any]) -> FileMetadata:
        upload_date = item.get("LastModified") or datetime.now(timezone.utc)
        size = item.get("Size") or 0

        head = self._head(key)
        if head is None:
            return FileMetadata(filename=key, upload_date=upload_date, size=size)

        metadata = head.get("Metadata")
        return FileMetadata(
            filename=key,
            upload_date=upload_date,
            is_public=_user_metadata(metadata, META_IS_PUBLIC) == "true",
            size=size,
            content_type=head.get("ContentType") or UNKNOWN_CONTENT_TYPE,
            description=_user_metadata(metadata, META_DESCRIPTION),
        )

    def _head(self, key: str) -> Optional[Dict[str, Any]]:
        """HEAD ``key``; every failure (missing, denied, network) becomes None."""
        try:
            return self._client.head_object(Bucket=self.bucket_name, Key=key)
        except Exception as e:
            logger.debug(f"head_object failed for {self.bucket_name}/{key}: {e}")
            return None

    def file_exists(self, key: str) -> bool:
        return self._head(key) is not None

    def get_file_metadata(self, key: str) -> Optional[FileMetadata]:
        head = self._head(key)
        if head is None:
            return None

        metadata = head.get("Metadata")
        return FileMetadata(
            filename=key,
            upload_date=head.get("LastModified") or datetime.now(timezone.utc),
            is_public=_user_metadata(metadata, META_IS_PUBLIC) == "true",
            size=head.get("ContentLength") or 0,
            content_type=head.get("ContentType") or UNKNOWN_CONTENT_TYPE,
            description=_user_metadata(metadata, META_DESCRIPTION),
        )

    def delete_file(self, key: str) -> None:
        """Permanently delete ``key``."""
        self._client.delete_object(Bucket=self.bucket_name, Key=key)
        logger.info(f"Deleted {self.bucket_name}/{key}")
