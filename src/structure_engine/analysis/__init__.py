"""
Market-structure analysis: context, detectors, scoring, lifecycle.

Public entry points are `analyze_market` and `MarketStructureEngine`.
"""

from .models import (
    AnalysisResult,
    Bias,
    Candle,
    DivergenceSignal,
    LiquidityLevel,
    MarketContext,
    StructuralMarker,
    Zone,
    ZoneCandidate,
)
from .enums import (
    DailyBias,
    Direction,
    DivergenceDirection,
    LabelingMode,
    LevelKind,
    LevelStyle,
    MarkerKind,
    MarkerStrength,
    PremiumDiscount,
    Session,
    StructureState,
    VolatilityClass,
    ZoneKind,
    ZoneOutcome,
    ZoneStatus,
)
from .settings import AnalysisSettings, DEFAULT_SETTINGS
from .engine import MarketStructureEngine, analyze_market

__all__ = [
    # Entry points
    "analyze_market",
    "MarketStructureEngine",
    "AnalysisSettings",
    "DEFAULT_SETTINGS",

    # Models
    "AnalysisResult",
    "Bias",
    "Candle",
    "DivergenceSignal",
    "LiquidityLevel",
    "MarketContext",
    "StructuralMarker",
    "Zone",
    "ZoneCandidate",

    # Enums
    "DailyBias",
    "Direction",
    "DivergenceDirection",
    "LabelingMode",
    "LevelKind",
    "LevelStyle",
    "MarkerKind",
    "MarkerStrength",
    "PremiumDiscount",
    "Session",
    "StructureState",
    "VolatilityClass",
    "ZoneKind",
    "ZoneOutcome",
    "ZoneStatus",
]
