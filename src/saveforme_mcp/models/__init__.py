"""Pydantic models for structured, type-safe MCP tool inputs and responses."""

from .inputs import (
    GetFileUrlParams,
    ListFilesParams,
    SaveFileParams,
    SavePrivateFileParams,
    SavePublicFileParams,
)
from .responses import (
    # Base responses
    ErrorResponse,
    SuccessResponse,
    # File tool responses
    FileEntry,
    GetFileUrlResponse,
    GetFileUrlSuccess,
    ListFilesResponse,
    ListFilesSuccess,
    SavePrivateFileResponse,
    SavePrivateFileSuccess,
    SavePublicFileResponse,
    SavePublicFileSuccess,
    ToolError,
)

__all__ = [
    # Input models
    "GetFileUrlParams",
    "ListFilesParams",
    "SaveFileParams",
    "SavePrivateFileParams",
    "SavePublicFileParams",
    # Base responses
    "ErrorResponse",
    "SuccessResponse",
    # File tool responses
    "FileEntry",
    "GetFileUrlResponse",
    "GetFileUrlSuccess",
    "ListFilesResponse",
    "ListFilesSuccess",
    "SavePrivateFileResponse",
    "SavePrivateFileSuccess",
    "SavePublicFileResponse",
    "SavePublicFileSuccess",
    "ToolError",
]
