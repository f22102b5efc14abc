"""structure-engine: deterministic market-structure analysis for OHLC series."""

from .analysis import (
    AnalysisResult,
    AnalysisSettings,
    Bias,
    Candle,
    DivergenceSignal,
    LabelingMode,
    MarketStructureEngine,
    StructuralMarker,
    Zone,
    analyze_market,
)
from .validators import InvalidInputError, ValidationIssue
from .config import ConfigError, InstrumentConfig, get_instrument_config, load_instruments_config

__version__ = "0.1.0"

__all__ = [
    "analyze_market",
    "MarketStructureEngine",
    "AnalysisSettings",
    "AnalysisResult",
    "Bias",
    "Candle",
    "DivergenceSignal",
    "LabelingMode",
    "StructuralMarker",
    "Zone",
    "InvalidInputError",
    "ValidationIssue",
    "ConfigError",
    "InstrumentConfig",
    "get_instrument_config",
    "load_instruments_config",
]
