"""
Bias - Aggregate market snapshot returned with every non-empty analysis.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from ..enums import (
    DailyBias,
    Direction,
    PremiumDiscount,
    Session,
    StructureState,
    VolatilityClass,
)
from .divergence import DivergenceSignal
from .liquidity_level import LiquidityLevel


@dataclass(frozen=True)
class Bias:
    """
    Directional and structural snapshot of the entry timeframe.

    `win_rate` is a ratio in [0, 1] over resolved, high-score zones (plus
    any supplied historical outcomes); `resolved_trades` is its denominator.

    The snapshot is read-only all the way down: `mtf` is stored as a
    read-only mapping and `liquidity_levels` as a tuple.
    """
    trend: Direction
    mtf: Mapping[str, Direction]              # {"entry", "mid", "high"}
    structural_trend: Direction
    structure: StructureState
    premium_discount: PremiumDiscount
    equilibrium: float
    volatility: VolatilityClass
    atr: float
    win_rate: float
    resolved_trades: int
    daily_bias: DailyBias
    session: Session
    next_target: float
    divergence: DivergenceSignal = field(default_factory=DivergenceSignal)
    session_range: Optional[Tuple[float, float]] = None   # (high, low)
    session_open: Optional[float] = None
    liquidity_levels: Tuple[LiquidityLevel, ...] = ()

    def __post_init__(self):
        # Copies, so later changes to the caller's containers never leak in
        object.__setattr__(self, "mtf", MappingProxyType(dict(self.mtf)))
        object.__setattr__(self, "liquidity_levels", tuple(self.liquidity_levels))
