"""Configuration values: drive profiles and the two persisted documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlparse

from .base import ConfigValidationResult, Configuration, SerializationError


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise SerializationError(f"{what} must be a JSON object, got {type(data).__name__}")
    return data


def _require_str(data: Mapping[str, Any], key: str, what: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise SerializationError(f"{what} is missing string field '{key}'")
    return value


@dataclass(frozen=True)
class StorageConfig(Configuration):
    """Connection profile for one S3-compatible bucket (a "drive")."""

    endpoint: str
    region: str
    access_key_id: str
    secret_access_key: str
    bucket_name: str
    force_path_style: Optional[bool] = None

    def validate(self) -> ConfigValidationResult:
        result = ConfigValidationResult.success_result()

        parsed = urlparse(self.endpoint)
        if not self.endpoint:
            result.add_error("Endpoint is required")
        elif parsed.scheme not in ("http", "https") or not parsed.netloc:
            result.add_error(f"Endpoint must be an http(s) URL: {self.endpoint}")
        if not self.bucket_name:
            result.add_error("Bucket name is required")
        if not self.access_key_id:
            result.add_error("Access key ID is required")
        if not self.secret_access_key:
            result.add_error("Secret access key is required")
        return result

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "endpoint": self.endpoint,
            "region": self.region,
            "accessKeyId": self.access_key_id,
            "secretAccessKey": self.secret_access_key,
            "bucketName": self.bucket_name,
        }
        if self.force_path_style is not None:
            data["forcePathStyle"] = self.force_path_style
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> StorageConfig:
        data = _require_mapping(data, "Storage config")
        force_path_style = data.get("forcePathStyle")
        if force_path_style is not None and not isinstance(force_path_style, bool):
            raise SerializationError("Storage config field 'forcePathStyle' must be a boolean")
        return cls(
            endpoint=_require_str(data, "endpoint", "Storage config"),
            region=data.get("region") or "",
            access_key_id=_require_str(data, "accessKeyId", "Storage config"),
            secret_access_key=_require_str(data, "secretAccessKey", "Storage config"),
            bucket_name=_require_str(data, "bucketName", "Storage config"),
            force_path_style=force_path_style,
        )


@dataclass
class GlobalConfig(Configuration):
    """User-wide document: named drives plus the default drive name."""

    default_drive: str = ""
    drives: Dict[str, StorageConfig] = field(default_factory=dict)

    def default_drive_config(self) -> Optional[StorageConfig]:
        """Config of the default drive, or None when unset or dangling."""
        if not self.default_drive:
            return None
        return self.drives.get(self.default_drive)

    def validate(self) -> ConfigValidationResult:
        result = ConfigValidationResult.success_result()
        if self.default_drive and self.default_drive not in self.drives:
            result.add_error(f"Default drive '{self.default_drive}' is not configured")
        for name, drive in self.drives.items():
            for error in drive.validate().errors:
                result.add_error(f"{name}: {error}")
        return result

    def to_dict(self) -> Dict[str, Any]:
        return {
            "defaultDrive": self.default_drive,
            "drives": {name: drive.to_dict() for name, drive in self.drives.items()},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> GlobalConfig:
        data = _require_mapping(data, "Global config")
        drives = _require_mapping(data.get("drives", {}), "Global config 'drives'")
        default_drive = data.get("defaultDrive") or ""
        if not isinstance(default_drive, str):
            raise SerializationError("Global config field 'defaultDrive' must be a string")
        return cls(
            default_drive=default_drive,
            drives={name: StorageConfig.from_dict(drive) for name, drive in drives.items()},
        )


@dataclass(frozen=True)
class ProjectConfig(Configuration):
    """Per-project document.

    ``s3_config`` is a snapshot taken when the project was bound to
    ``drive_name``; later edits to the global drive are not seen here.
    """

    drive_name: str
    project_directory: str
    s3_config: StorageConfig

    def validate(self) -> ConfigValidationResult:
        result = self.s3_config.validate()
        if not self.drive_name:
            result.add_error("Drive name is required")
        return result

    def to_dict(self) -> Dict[str, Any]:
        return {
            "driveName": self.drive_name,
            "projectDirectory": self.project_directory,
            "s3Config": self.s3_config.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ProjectConfig:
        data = _require_mapping(data, "Project config")
        return cls(
            drive_name=_require_str(data, "driveName", "Project config"),
            project_directory=data.get("projectDirectory") or "",
            s3_config=StorageConfig.from_dict(data.get("s3Config")),
        )


@dataclass(frozen=True)
class ActiveConfig:
    """The drive in effect for one tool invocation."""

    config: StorageConfig
    drive_name: str
