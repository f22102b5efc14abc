"""Dataclass models for per-instrument configuration.

Volatility classes are price-scale dependent: an ATR of 0.0015 is a busy
session on EURUSD and a dead one on XAUUSD. Each instrument therefore
carries its own thresholds.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .validators import InstrumentsConfigValidator


@dataclass(frozen=True)
class VolatilityThresholds:
    """ATR boundaries between the LOW / MEDIUM / HIGH volatility classes."""
    low_threshold: float
    high_threshold: float

    @classmethod
    def from_dict(cls, obj: Dict[str, Any]) -> "VolatilityThresholds":
        InstrumentsConfigValidator.validate_volatility(obj)
        return cls(
            low_threshold=float(obj["low_threshold"]),
            high_threshold=float(obj["high_threshold"]),
        )

    def __repr__(self) -> str:
        return f"VolatilityThresholds(low={self.low_threshold}, high={self.high_threshold})"


@dataclass(frozen=True)
class InstrumentConfig:
    """Configuration for a single instrument."""
    name: str
    volatility: VolatilityThresholds

    @classmethod
    def from_dict(cls, obj: Dict[str, Any]) -> "InstrumentConfig":
        """Create from a dict with validation."""
        InstrumentsConfigValidator.validate_instrument(obj)
        return cls(
            name=obj["name"].upper(),
            volatility=VolatilityThresholds.from_dict(obj["volatility"]),
        )

    def __repr__(self) -> str:
        return f"InstrumentConfig(name={self.name!r}, volatility={self.volatility!r})"


@dataclass(frozen=True)
class InstrumentsConfig:
    """Root configuration containing all instruments."""
    instruments: List[InstrumentConfig] = field(default_factory=list)

    @classmethod
    def from_dict(cls, obj: Dict[str, Any]) -> "InstrumentsConfig":
        """Create from a dict with validation."""
        InstrumentsConfigValidator.validate_instruments_config(obj)
        items = obj.get("instruments", [])
        return cls(instruments=[InstrumentConfig.from_dict(i) for i in items])

    def get(self, name: str) -> Optional[InstrumentConfig]:
        """Look up an instrument by (case-insensitive) name."""
        wanted = name.upper()
        for instrument in self.instruments:
            if instrument.name == wanted:
                return instrument
        return None

    def __repr__(self) -> str:
        return f"InstrumentsConfig(instruments={len(self.instruments)})"


# Calibrated on 15m candles
DEFAULT_INSTRUMENTS: Dict[str, InstrumentConfig] = {
    "EURUSD": InstrumentConfig("EURUSD", VolatilityThresholds(0.0010, 0.0025)),
    "GBPUSD": InstrumentConfig("GBPUSD", VolatilityThresholds(0.0012, 0.0030)),
    "XAUUSD": InstrumentConfig("XAUUSD", VolatilityThresholds(1.5, 4.0)),
    "BTCUSD": InstrumentConfig("BTCUSD", VolatilityThresholds(150.0, 450.0)),
    "ETHUSD": InstrumentConfig("ETHUSD", VolatilityThresholds(8.0, 25.0)),
}

DEFAULT_INSTRUMENT = "EURUSD"


def get_instrument_config(name: Optional[str] = None) -> InstrumentConfig:
    """
    Get the built-in configuration for an instrument.

    Args:
        name: Instrument name (e.g., "EURUSD"); None selects the default

    Returns:
        InstrumentConfig, falling back to EURUSD for unknown names
    """
    if not name:
        return DEFAULT_INSTRUMENTS[DEFAULT_INSTRUMENT]
    return DEFAULT_INSTRUMENTS.get(name.upper(), DEFAULT_INSTRUMENTS[DEFAULT_INSTRUMENT])


__all__ = [
    "VolatilityThresholds",
    "InstrumentConfig",
    "InstrumentsConfig",
    "DEFAULT_INSTRUMENTS",
    "get_instrument_config",
]
