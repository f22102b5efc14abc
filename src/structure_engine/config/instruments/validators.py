"""Configuration validator for per-instrument settings."""
from typing import Any, Dict, Optional

from ..base import BaseValidator, ConfigError


class InstrumentsConfigValidator(BaseValidator):
    """Dedicated validator for the instruments config.

    Validators accept an optional `path` parameter that is prefixed to
    error messages to help locate the failing item in a nested config.
    """

    @staticmethod
    def validate_volatility(obj: Dict[str, Any], path: Optional[str] = None) -> None:
        BaseValidator.validate_dict(obj, "volatility", path)

        low = obj.get("low_threshold")
        high = obj.get("high_threshold")
        BaseValidator.validate_float(low, "volatility.low_threshold", min_value=0.0, path=path)
        BaseValidator.validate_float(high, "volatility.high_threshold", min_value=0.0, path=path)

        if low >= high:
            ctx = f"{path}: " if path else ""
            raise ConfigError(
                f"{ctx}volatility.low_threshold ({low}) must be below high_threshold ({high})"
            )

    @staticmethod
    def validate_instrument(obj: Dict[str, Any], path: Optional[str] = None) -> None:
        BaseValidator.validate_dict(obj, "instrument", path)

        name = obj.get("name")
        BaseValidator.validate_string(name, "instrument.name", path=path)

        InstrumentsConfigValidator.validate_volatility(obj.get("volatility"), path=path)

    @staticmethod
    def validate_instruments_config(obj: Dict[str, Any], path: Optional[str] = None) -> None:
        base = path if path else ""

        BaseValidator.validate_dict(obj, "config", path)

        instruments = obj.get("instruments", [])
        BaseValidator.validate_list(instruments, "root 'instruments'", path)

        seen = set()
        for i, item in enumerate(instruments):
            item_path = f"{base}.instruments[{i}]" if base else f"instruments[{i}]"
            InstrumentsConfigValidator.validate_instrument(item, path=item_path)

            name = item["name"].upper()
            if name in seen:
                raise ConfigError(f"{item_path}: duplicate instrument {name!r}")
            seen.add(name)


__all__ = ["InstrumentsConfigValidator", "ConfigError"]
