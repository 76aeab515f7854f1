"""Storage client for S3-compatible backends."""

from .client import FileMetadata, StorageClient, UploadResult, create_client
from .providers import detect_provider, public_base_url

__all__ = [
    "FileMetadata",
    "StorageClient",
    "UploadResult",
    "create_client",
    "detect_provider",
    "public_base_url",
]
