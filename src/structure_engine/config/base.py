"""Base classes for configuration system."""
import math
from typing import Any, Optional


class ConfigError(Exception):
    """Base error for all config validation errors."""


class BaseValidator:
    """Base validator with common validation patterns.

    Every check accepts an optional `path` that is prefixed to the error
    message so nested failures can be located in the source file.
    """

    @staticmethod
    def _ctx(path: Optional[str]) -> str:
        return f"{path}: " if path else ""

    @staticmethod
    def validate_dict(obj: Any, name: str, path: Optional[str] = None) -> None:
        """Validate that object is a dictionary.

        Raises:
            ConfigError: If obj is not a dict
        """
        if not isinstance(obj, dict):
            raise ConfigError(f"{BaseValidator._ctx(path)}{name} must be a dict")

    @staticmethod
    def validate_string(
        obj: Any,
        field_name: str,
        allow_empty: bool = False,
        path: Optional[str] = None
    ) -> None:
        """Validate that object is a string.

        Raises:
            ConfigError: If obj is not a valid string
        """
        ctx = BaseValidator._ctx(path)
        if not isinstance(obj, str):
            raise ConfigError(f"{ctx}{field_name} must be a string")
        if not allow_empty and not obj:
            raise ConfigError(f"{ctx}{field_name} must be a non-empty string")

    @staticmethod
    def validate_float(
        obj: Any,
        field_name: str,
        min_value: Optional[float] = None,
        max_value: Optional[float] = None,
        path: Optional[str] = None
    ) -> None:
        """Validate that object is a finite number within optional bounds.

        Booleans are rejected even though they are ints in Python.

        Raises:
            ConfigError: If obj is not a valid number or out of bounds
        """
        ctx = BaseValidator._ctx(path)
        if isinstance(obj, bool) or not isinstance(obj, (int, float)):
            raise ConfigError(f"{ctx}{field_name} must be a number")
        if not math.isfinite(obj):
            raise ConfigError(f"{ctx}{field_name} must be finite, got {obj}")
        if min_value is not None and obj < min_value:
            raise ConfigError(f"{ctx}{field_name} must be >= {min_value}, got {obj}")
        if max_value is not None and obj > max_value:
            raise ConfigError(f"{ctx}{field_name} must be <= {max_value}, got {obj}")

    @staticmethod
    def validate_list(obj: Any, field_name: str, path: Optional[str] = None) -> None:
        """Validate that object is a list.

        Raises:
            ConfigError: If obj is not a list
        """
        if not isinstance(obj, list):
            raise ConfigError(f"{BaseValidator._ctx(path)}{field_name} must be a list")


__all__ = ["ConfigError", "BaseValidator"]
