"""`config.instruments` package exports.

Keep the package API small and explicit so other modules can import the
instrument-specific config pieces from one place.
"""
from .loader import load_instruments_config, InstrumentsConfigLoader
from .models import (
    InstrumentsConfig,
    InstrumentConfig,
    VolatilityThresholds,
    DEFAULT_INSTRUMENTS,
    get_instrument_config,
)
from .validators import InstrumentsConfigValidator, ConfigError

__all__ = [
    "load_instruments_config",
    "InstrumentsConfigLoader",
    "InstrumentsConfig",
    "InstrumentConfig",
    "VolatilityThresholds",
    "DEFAULT_INSTRUMENTS",
    "get_instrument_config",
    "InstrumentsConfigValidator",
    "ConfigError",
]
