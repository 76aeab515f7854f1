"""Configuration helpers for SaveForMe MCP server."""

from .base import ConfigurationError, SerializationError, ValidationError
from .models import ActiveConfig, GlobalConfig, ProjectConfig, StorageConfig
from .store import ConfigStore, LoadResult, load_or_absent

__all__ = [
    "ActiveConfig",
    "ConfigStore",
    "ConfigurationError",
    "GlobalConfig",
    "LoadResult",
    "ProjectConfig",
    "SerializationError",
    "StorageConfig",
    "ValidationError",
    "load_or_absent",
]
