"""
Market Context Builder

Computes, once per analysis call, everything the detectors and the scorer
read but never modify:
- ATR(14) and the instrument-relative volatility class
- Trend per timeframe (entry / mid / high)
- Equilibrium of the recent range and premium/discount of the last close
- Reference liquidity levels (previous UTC day, session range, session open)
- Daily bias phase and trading session from the evaluation hour
"""

from datetime import datetime, timezone
from typing import List, Optional, Sequence

from ..config.instruments import InstrumentConfig
from ..utils.indicators import calculate_atr, calculate_price_change, calculate_range_extremes
from .enums import (
    DailyBias,
    Direction,
    LevelKind,
    LevelStyle,
    PremiumDiscount,
    Session,
    VolatilityClass,
)
from .models import Candle, LiquidityLevel, MarketContext
from .settings import AnalysisSettings

SECONDS_PER_DAY = 86400
SECONDS_PER_HOUR = 3600


def direction_from_change(change: Optional[float]) -> Direction:
    """Sign of a price change as a Direction (None or 0 is NEUTRAL)."""
    if change is None or change == 0:
        return Direction.NEUTRAL
    return Direction.BULLISH if change > 0 else Direction.BEARISH


def classify_daily_bias(hour: int) -> DailyBias:
    if hour < 7:
        return DailyBias.ACCUMULATION
    if hour < 12:
        return DailyBias.MANIPULATION
    return DailyBias.DISTRIBUTION


def classify_session(hour: int) -> Session:
    if hour < 7:
        return Session.ASIA
    if hour < 12:
        return Session.LONDON
    if hour < 21:
        return Session.NEW_YORK
    return Session.CLOSE


class ContextBuilder:
    """
    Builds the MarketContext for one analysis call.

    Usage:
        builder = ContextBuilder(settings, get_instrument_config("EURUSD"))
        context = builder.build(entry_candles, mid_candles, high_candles)
    """

    def __init__(self, settings: AnalysisSettings, instrument: InstrumentConfig):
        self.settings = settings
        self.instrument = instrument

    def build(
        self,
        entry: Sequence[Candle],
        mid: Sequence[Candle],
        high: Sequence[Candle],
        now: Optional[int] = None,
    ) -> Optional[MarketContext]:
        """
        Build the context, or None when the entry series is too short.

        Args:
            entry: Entry-timeframe candles (validated, ascending)
            mid: First higher timeframe candles
            high: Second higher timeframe candles
            now: Evaluation time (unix seconds) for the daily bias and
                session; defaults to the last entry candle time
        """
        s = self.settings
        if len(entry) < s.min_candles:
            return None

        atr = calculate_atr(entry, s.atr_period)
        trend_entry = direction_from_change(calculate_price_change(entry, s.entry_trend_lookback))
        trend_mid = self._higher_timeframe_trend(mid, trend_entry)
        trend_high = self._higher_timeframe_trend(high, trend_entry)

        range_high, range_low = calculate_range_extremes(entry, s.equilibrium_lookback)
        equilibrium = (range_high + range_low) / 2

        target_high, target_low = calculate_range_extremes(entry, s.target_lookback)
        next_target = target_high if trend_entry is Direction.BULLISH else target_low

        evaluation_time = entry[-1].time if now is None else now
        hour = datetime.fromtimestamp(evaluation_time, tz=timezone.utc).hour

        pdh, pdl, session_high, session_low, session_open = self._reference_prices(entry)
        levels = self._liquidity_levels(pdh, pdl, session_high, session_low, session_open)

        current_close = entry[-1].close
        premium_discount = PremiumDiscount.EQUILIBRIUM
        if current_close > equilibrium:
            premium_discount = PremiumDiscount.PREMIUM
        elif current_close < equilibrium:
            premium_discount = PremiumDiscount.DISCOUNT

        return MarketContext(
            atr=atr,
            trend_entry=trend_entry,
            trend_mid=trend_mid,
            trend_high=trend_high,
            volatility=self._classify_volatility(atr),
            equilibrium=equilibrium,
            premium_discount=premium_discount,
            current_close=current_close,
            next_target=next_target,
            daily_bias=classify_daily_bias(hour),
            session=classify_session(hour),
            previous_day_high=pdh,
            previous_day_low=pdl,
            session_high=session_high,
            session_low=session_low,
            session_open=session_open,
            liquidity_levels=tuple(levels),
        )

    def _higher_timeframe_trend(self, candles: Sequence[Candle], fallback: Direction) -> Direction:
        """Trend of a higher timeframe series, or the entry trend if it is too short."""
        change = calculate_price_change(candles, self.settings.htf_trend_lookback)
        if change is None:
            return fallback
        return direction_from_change(change)

    def _classify_volatility(self, atr: float) -> VolatilityClass:
        thresholds = self.instrument.volatility
        if atr < thresholds.low_threshold:
            return VolatilityClass.LOW
        if atr > thresholds.high_threshold:
            return VolatilityClass.HIGH
        return VolatilityClass.MEDIUM

    def _reference_prices(self, entry: Sequence[Candle]):
        """
        Previous-day range, early-session range and session open.

        The current day is the UTC day of the last entry candle.

        Returns:
            (pdh, pdl, session_high, session_low, session_open), each None
            when no candle falls in the corresponding window
        """
        day_start = entry[-1].time // SECONDS_PER_DAY * SECONDS_PER_DAY
        prev_day_start = day_start - SECONDS_PER_DAY
        session_end = day_start + self.settings.session_range_hours * SECONDS_PER_HOUR

        prev_day = [c for c in entry if prev_day_start <= c.time < day_start]
        today = [c for c in entry if c.time >= day_start]
        session = [c for c in today if c.time < session_end]

        pdh = pdl = session_high = session_low = session_open = None
        if prev_day:
            pdh = max(c.high for c in prev_day)
            pdl = min(c.low for c in prev_day)
        if session:
            session_high = max(c.high for c in session)
            session_low = min(c.low for c in session)
        if today:
            session_open = today[0].open

        return pdh, pdl, session_high, session_low, session_open

    @staticmethod
    def _liquidity_levels(pdh, pdl, session_high, session_low, session_open) -> List[LiquidityLevel]:
        candidates = [
            (pdh, "PDH", LevelKind.PREVIOUS_DAY_HIGH, LevelStyle.SOLID),
            (pdl, "PDL", LevelKind.PREVIOUS_DAY_LOW, LevelStyle.SOLID),
            (session_high, "Session High", LevelKind.SESSION_HIGH, LevelStyle.DASHED),
            (session_low, "Session Low", LevelKind.SESSION_LOW, LevelStyle.DASHED),
            (session_open, "Session Open", LevelKind.SESSION_OPEN, LevelStyle.DOTTED),
        ]
        return [
            LiquidityLevel(price=price, label=label, kind=kind, style=style)
            for price, label, kind, style in candidates
            if price is not None
        ]


__all__ = ["ContextBuilder", "direction_from_change", "classify_daily_bias", "classify_session"]
