"""
MarketContext - Per-call context shared by the detectors and the scorer.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..enums import DailyBias, Direction, PremiumDiscount, Session, VolatilityClass
from .liquidity_level import LiquidityLevel


@dataclass(frozen=True)
class MarketContext:
    """
    Everything computed once before the detector pass.

    Reference levels are None when the series holds no candle for the
    corresponding period (e.g. the previous UTC day is missing).
    """
    atr: float
    trend_entry: Direction
    trend_mid: Direction
    trend_high: Direction
    volatility: VolatilityClass
    equilibrium: float
    premium_discount: PremiumDiscount
    current_close: float
    next_target: float
    daily_bias: DailyBias
    session: Session
    previous_day_high: Optional[float] = None
    previous_day_low: Optional[float] = None
    session_high: Optional[float] = None
    session_low: Optional[float] = None
    session_open: Optional[float] = None
    liquidity_levels: Tuple[LiquidityLevel, ...] = ()

    @property
    def upper_sweep_levels(self) -> List[float]:
        """Levels a buy-side sweep can take (previous-day high, session high)."""
        return [lvl for lvl in (self.previous_day_high, self.session_high) if lvl is not None]

    @property
    def lower_sweep_levels(self) -> List[float]:
        """Levels a sell-side sweep can take (previous-day low, session low)."""
        return [lvl for lvl in (self.previous_day_low, self.session_low) if lvl is not None]

    def zone_position(self, close: float) -> PremiumDiscount:
        """Classify a price against the equilibrium."""
        if close > self.equilibrium:
            return PremiumDiscount.PREMIUM
        if close < self.equilibrium:
            return PremiumDiscount.DISCOUNT
        return PremiumDiscount.EQUILIBRIUM
