"""Configuration for the structure engine."""
from .base import ConfigError, BaseValidator
from .instruments import (
    InstrumentConfig,
    InstrumentsConfig,
    VolatilityThresholds,
    get_instrument_config,
    load_instruments_config,
)

__all__ = [
    "ConfigError",
    "BaseValidator",
    "InstrumentConfig",
    "InstrumentsConfig",
    "VolatilityThresholds",
    "get_instrument_config",
    "load_instruments_config",
]
