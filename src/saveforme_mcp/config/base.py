"""Base configuration classes and validation framework.

Every persisted configuration value (a drive profile, the global document,
the project document) implements the same small interface:

- validate() returns a ConfigValidationResult instead of raising
- to_dict()/from_dict() convert to and from the camelCase JSON form
  stored on disk

Errors raised while converting stored documents are SerializationError;
validate_or_raise() turns a failed validation into ValidationError.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List

from ..exceptions import SaveFormeError


class ConfigurationError(SaveFormeError):
    """Base exception for all configuration-related errors."""

    def __init__(self, message: str, *, error_code: str = "CONFIGURATION_ERROR") -> None:
        super().__init__(message, error_code=error_code)


class ValidationError(ConfigurationError):
    """A drive profile is missing values or has a malformed endpoint."""

    def __init__(self, message: str) -> None:
        super().__init__(message, error_code="VALIDATION_ERROR")


class SerializationError(ConfigurationError):
    """A stored document does not have the expected shape."""

    def __init__(self, message: str) -> None:
        super().__init__(message, error_code="SERIALIZATION_ERROR")


@dataclass
class ConfigValidationResult:
    """Result of configuration validation with success state and error details.

    Attributes:
        success: True if validation passed, False otherwise
        errors: List of error messages describing validation failures
    """

    success: bool
    errors: List[str]

    @property
    def is_valid(self) -> bool:
        return self.success

    def add_error(self, error: str) -> None:
        self.errors.append(error)
        self.success = False

    @classmethod
    def success_result(cls) -> ConfigValidationResult:
        return cls(success=True, errors=[])


class Configuration(ABC):
    """Interface shared by every persisted configuration value."""

    @abstractmethod
    def validate(self) -> ConfigValidationResult:
        """Check all values and report every problem found."""

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON-compatible document form."""

    @classmethod
    @abstractmethod
    def from_dict(cls, data: Dict[str, Any]) -> Configuration:
        """Rebuild from the document form.

        Raises:
            SerializationError: If data is not a mapping or lacks required keys
        """

    def is_valid(self) -> bool:
        return self.validate().success

    def validate_or_raise(self) -> None:
        """Validate configuration and raise ValidationError if invalid."""
        result = self.validate()
        if not result.success:
            error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {error}" for error in result.errors)
            raise ValidationError(error_msg)
