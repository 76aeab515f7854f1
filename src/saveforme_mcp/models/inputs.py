"""Pydantic models for MCP tool input parameters.

Tool arguments arrive untyped from the protocol layer; each tool parses
them into one of these models before doing any work. Field aliases are
the camelCase names published in the tool schemas.

The ``*Arg`` aliases carry names, descriptions and examples only and are
shared with the tool signatures in ``tools.files``. Constraints live on
the models, so rejected input comes back as a tool error result rather
than a protocol error.
"""

from __future__ import annotations

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import DEFAULT_URL_EXPIRY, MAX_URL_EXPIRY, MIN_URL_EXPIRY

# ============================================================================
# Shared argument declarations
# ============================================================================

FilePathArg = Annotated[
    str,
    Field(
        alias="filePath",
        description="Path to the local file to upload",
        examples=["./report.pdf", "/tmp/chart.png"],
    ),
]

FilenameArg = Annotated[
    Optional[str],
    Field(
        description="Optional custom filename for the uploaded file (defaults to original filename)",
        examples=["reports/2024/q1.pdf"],
    ),
]

DescriptionArg = Annotated[
    Optional[str],
    Field(description="Optional description/metadata for the file"),
]

PrefixArg = Annotated[
    Optional[str],
    Field(
        description='Optional prefix to filter files (e.g., "images/" to list only files in images folder)',
        examples=["", "images/", "reports/2024/"],
    ),
]

FileKeyArg = Annotated[
    str,
    Field(
        description="Name/key of the file to get URL for",
        examples=["report.pdf", "images/logo.png"],
    ),
]

ExpiresInArg = Annotated[
    int,
    Field(
        alias="expiresIn",
        description=(
            f"Expiration time for presigned URLs in seconds "
            f"(default: {DEFAULT_URL_EXPIRY} = 1 hour, min: {MIN_URL_EXPIRY}, max: {MAX_URL_EXPIRY} = 7 days)"
        ),
        json_schema_extra={"minimum": MIN_URL_EXPIRY, "maximum": MAX_URL_EXPIRY},
    ),
]


# ============================================================================
# Parameter models
# ============================================================================


class ToolParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class SaveFileParams(ToolParams):
    """Parameters shared by save_public_file and save_private_file."""

    file_path: Annotated[FilePathArg, Field(min_length=1)]
    filename: FilenameArg = None
    description: DescriptionArg = None

    @field_validator("filename", "description")
    @classmethod
    def _blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value


class SavePublicFileParams(SaveFileParams):
    """Parameters for save_public_file tool."""


class SavePrivateFileParams(SaveFileParams):
    """Parameters for save_private_file tool."""


class ListFilesParams(ToolParams):
    """Parameters for list_files tool."""

    prefix: PrefixArg = None


class GetFileUrlParams(ToolParams):
    """Parameters for get_file_url tool."""

    filename: Annotated[FileKeyArg, Field(min_length=1)]
    expires_in: Annotated[ExpiresInArg, Field(ge=MIN_URL_EXPIRY, le=MAX_URL_EXPIRY)] = DEFAULT_URL_EXPIRY
