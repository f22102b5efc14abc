"""
Data models for market-structure analysis.

All zones, levels, markers and snapshots are defined here as pure data
models, separate from detection logic (detectors).
"""

from .candle import Candle
from .zone import Zone
from .zone_candidate import ZoneCandidate
from .liquidity_level import LiquidityLevel
from .structural_marker import StructuralMarker
from .divergence import DivergenceSignal
from .market_context import MarketContext
from .bias import Bias
from .analysis_result import AnalysisResult

__all__ = [
    # Inputs
    "Candle",
    "DivergenceSignal",

    # Detection outputs
    "Zone",               # OB / FVG / Unicorn
    "ZoneCandidate",      # Zone + detector flags
    "LiquidityLevel",     # PDH/PDL, session range, session open
    "StructuralMarker",   # Sweep / BOS / ChoCh

    # Snapshots
    "MarketContext",
    "Bias",
    "AnalysisResult",
]
