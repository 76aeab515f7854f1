"""File-based configuration store with project-over-global resolution."""

from __future__ import annotations

import json
import logging
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from ..constants import (
    GLOBAL_CONFIG_FILENAME,
    LOCAL_CONFIG_DIRNAME,
    LOCAL_CONFIG_FILENAME,
    global_config_dir,
    project_dir,
)
from .base import ConfigurationError
from .models import ActiveConfig, GlobalConfig, ProjectConfig, StorageConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class LoadResult(Generic[T]):
    """Outcome of reading one configuration document.

    Exactly one of ``value`` / ``reason`` is meaningful: ``value`` is None
    with ``reason`` None when the file simply does not exist.
    """

    value: Optional[T] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.reason is None


def load_or_absent(result: LoadResult[T], what: str) -> Optional[T]:
    """Coarsen a load failure to "absent", logging the reason."""
    if result.reason is not None:
        logger.warning(f"Ignoring unreadable {what}: {result.reason}")
        return None
    return result.value


def read_document(path: Path, parse: Callable[[Dict[str, Any]], T]) -> LoadResult[T]:
    """Read and parse a JSON document without raising."""
    if not path.exists():
        return LoadResult()
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
        return LoadResult(value=parse(data))
    except (OSError, ValueError, ConfigurationError) as e:
        # json.JSONDecodeError is a ValueError
        return LoadResult(reason=f"{path}: {e}")


def write_document(path: Path, data: Dict[str, Any]) -> None:
    """Write indented JSON, replacing the target atomically."""
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = json.dumps(data, indent=2)

    with tempfile.NamedTemporaryFile("w", delete=False, dir=path.parent, encoding="utf-8") as tmp:
        tmp.write(payload)
        tmp_path = Path(tmp.name)
    tmp_path.replace(path)


class ConfigStore:
    """Reads, writes and resolves the global and project configuration documents.

    Args:
        global_path: Location of the user-wide document
        local_path: Location of the project document
    """

    def __init__(self, global_path: Path, local_path: Path) -> None:
        self.global_path = Path(global_path)
        self.local_path = Path(local_path)

    @classmethod
    def from_environment(cls) -> ConfigStore:
        """Store at the standard locations (honours SAVEFORME_* overrides)."""
        return cls(
            global_path=global_config_dir() / GLOBAL_CONFIG_FILENAME,
            local_path=project_dir() / LOCAL_CONFIG_DIRNAME / LOCAL_CONFIG_FILENAME,
        )

    # Documents

    def read_global(self) -> LoadResult[GlobalConfig]:
        return read_document(self.global_path, GlobalConfig.from_dict)

    def read_local(self) -> LoadResult[ProjectConfig]:
        return read_document(self.local_path, ProjectConfig.from_dict)

    def load_global(self) -> Optional[GlobalConfig]:
        return load_or_absent(self.read_global(), "global config")

    def load_local(self) -> Optional[ProjectConfig]:
        return load_or_absent(self.read_local(), "project config")

    def save_global(self, config: GlobalConfig) -> None:
        write_document(self.global_path, config.to_dict())
        logger.debug(f"Saved global config to {self.global_path}")

    def save_local(self, config: ProjectConfig) -> None:
        write_document(self.local_path, config.to_dict())
        logger.debug(f"Saved project config to {self.local_path}")

    # Resolution

    def resolve_active(self) -> Optional[ActiveConfig]:
        """Return the drive in effect, or None when nothing is configured.

        A project document wins outright and is used verbatim; otherwise the
        global default drive is used if it names an existing drive.
        """
        local = self.load_local()
        if local is not None:
            return ActiveConfig(config=local.s3_config, drive_name=local.drive_name)

        global_config = self.load_global()
        if global_config is not None:
            drive = global_config.default_drive_config()
            if drive is not None:
                return ActiveConfig(config=drive, drive_name=global_config.default_drive)

        return None

    # Drives

    def upsert_drive(self, name: str, config: StorageConfig, make_default: bool = False) -> GlobalConfig:
        """Add or replace a drive; the first drive always becomes the default."""
        current = self.load_global() or GlobalConfig()
        drives = dict(current.drives)
        drives[name] = config

        default_drive = current.default_drive
        if make_default or not default_drive:
            default_drive = name

        updated = GlobalConfig(default_drive=default_drive, drives=drives)
        self.save_global(updated)
        logger.info(f"Saved drive '{name}' (default: '{default_drive}')")
        return updated

    def list_drive_names(self) -> List[str]:
        global_config = self.load_global()
        return list(global_config.drives) if global_config else []

    def get_drive(self, name: str) -> Optional[StorageConfig]:
        global_config = self.load_global()
        if global_config is None:
            return None
        return global_config.drives.get(name)
