"""Shared exception types for SaveForMe MCP server."""

from __future__ import annotations


class SaveFormeError(RuntimeError):
    """Base exception for SaveForMe MCP server errors."""

    def __init__(self, message: str, *, error_code: str = "saveforme_error") -> None:
        super().__init__(message)
        self.error_code = error_code


class NotFoundError(SaveFormeError):
    """A local file handed to an upload does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"File not found: {path}", error_code="NOT_FOUND")
        self.path = path
