"""SaveForMe MCP Server - save, list and share files on S3-compatible storage.

This package provides Model Context Protocol (MCP) tools that let an AI
assistant upload files to AWS S3, DigitalOcean Spaces or MinIO-style
endpoints and hand back public or presigned URLs. Storage profiles
("drives") are configured once per user and optionally pinned per project.
"""

from __future__ import annotations

from .config import ConfigStore, StorageConfig
from .storage import StorageClient

# Re-export all tools for easy access
from .tools.files import (
    get_file_url,
    list_files,
    save_private_file,
    save_public_file,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "ConfigStore",
    "StorageClient",
    "StorageConfig",
    # File tools
    "get_file_url",
    "list_files",
    "save_private_file",
    "save_public_file",
]
