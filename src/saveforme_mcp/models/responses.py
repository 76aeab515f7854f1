"""Pydantic models for MCP tool responses.

Fields are snake_case in Python and always serialize under camelCase aliases,
which is the shape clients of the tools see.
"""

from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, model_serializer
from pydantic.alias_generators import to_camel

# FastMCP dumps tool results without by_alias
CAMEL_CASE_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, serialize_by_alias=True)


class CamelCaseModel(BaseModel):
    """Base model for tool results; populated by field name, dumped by alias."""

    model_config = CAMEL_CASE_CONFIG


# ============================================================================
# Base Response Models
# ============================================================================


class SuccessResponse(CamelCaseModel):
    """Base model for successful operations."""

    success: Literal[True] = True


class ErrorResponse(CamelCaseModel):
    """Base model for error responses."""

    success: Literal[False] = False
    error: str


# ============================================================================
# File Tool Responses
# ============================================================================


class SavePublicFileSuccess(SuccessResponse):
    """Response from save_public_file when successful."""

    url: str
    key: str
    url_type: Literal["permanent"] = "permanent"
    is_public: Literal[True] = True
    drive_name: str
    message: str


class SavePrivateFileSuccess(SuccessResponse):
    """Response from save_private_file when successful."""

    key: str
    url: str
    temporary_url: str
    url_type: Literal["temporary"] = "temporary"
    expires_in: int
    expiration_date: str  # ISO datetime string
    drive_name: str
    message: str


class FileEntry(CamelCaseModel):
    """One file in a list_files response."""

    filename: str
    description: str
    upload_date: str  # ISO datetime string
    is_public: bool
    size: int
    content_type: str
    size_formatted: str


class ListFilesSuccess(SuccessResponse):
    """Response from list_files when successful."""

    files: list[FileEntry]
    count: int
    drive_name: str
    message: str


class GetFileUrlSuccess(SuccessResponse):
    """Response from get_file_url when successful."""

    url: str
    url_type: Literal["permanent", "temporary"]
    is_public: bool
    filename: str
    expires_in: Optional[int] = None
    expiration_date: Optional[str] = None
    drive_name: str
    message: str

    @model_serializer(mode="wrap")
    def _omit_unset_expiry(self, handler):
        # Permanent URLs carry no expiry fields at all
        data = handler(self)
        for key in ("expiresIn", "expires_in", "expirationDate", "expiration_date"):
            if key in data and data[key] is None:
                del data[key]
        return data


class ToolError(ErrorResponse):
    """Error response shared by all file tools."""


SavePublicFileResponse = Union[SavePublicFileSuccess, ToolError]
SavePrivateFileResponse = Union[SavePrivateFileSuccess, ToolError]
ListFilesResponse = Union[ListFilesSuccess, ToolError]
GetFileUrlResponse = Union[GetFileUrlSuccess, ToolError]
