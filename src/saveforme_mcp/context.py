"""Per-invocation collaborators for the tools.

Tools never hold configuration or clients between calls; each call asks
for a fresh store and a client bound to whatever drive it resolved.
"""

from __future__ import annotations

from .config import ConfigStore, StorageConfig
from .storage import StorageClient


def get_config_store() -> ConfigStore:
    return ConfigStore.from_environment()


def get_storage_client(config: StorageConfig) -> StorageClient:
    return StorageClient(config)
