"""
Order Block Detector

Detects order blocks confirmed by displacement:
- Bullish OB: last down candle before a strong up move
- Bearish OB: last up candle before a strong down move

Displacement: one of the next `displacement_leg` candles has a body larger
than `displacement_min_atr` x ATR in the move direction and closes beyond
the origin candle's extreme.

Confluence flags captured for the scorer:
- Sweep: origin candle took the extreme of the prior `sweep_lookback` candles
- Unicorn: the displacement leg leaves an imbalance (FVG) behind
- Structure break: a leg candle closes beyond the tracked swing level
"""

from typing import Optional, Sequence

from ..enums import Direction, ZoneKind
from ..models import Candle, MarketContext, Zone, ZoneCandidate
from ..settings import AnalysisSettings
from .imbalance_detector import gap_between
from .swing_tracker import SwingTracker


class OrderBlockDetector:
    """
    Order block + displacement + unicorn detection for the forward pass.

    The zone spans the origin candle's full range [low, high].
    """

    def __init__(self, settings: AnalysisSettings):
        self.leg = settings.displacement_leg
        self.displacement_atr = settings.displacement_min_atr
        self.min_gap_atr = settings.imbalance_min_atr
        self.break_atr = settings.break_min_atr
        self.sweep_lookback = settings.sweep_lookback

    def detect(
        self,
        candles: Sequence[Candle],
        i: int,
        context: MarketContext,
        swings: SwingTracker,
    ) -> Optional[ZoneCandidate]:
        """
        Check whether candle i is the origin of an order block.

        Returns:
            ZoneCandidate or None
        """
        origin = candles[i]
        if origin.is_bearish:
            direction = Direction.BULLISH
        elif origin.is_bullish:
            direction = Direction.BEARISH
        else:
            return None

        leg_end = min(i + self.leg, len(candles) - 1)
        leg = range(i + 1, leg_end + 1)
        if not any(self._is_displacement(candles[j], origin, direction, context.atr) for j in leg):
            return None

        prior = candles[max(0, i - self.sweep_lookback):i]
        if direction is Direction.BULLISH:
            has_sweep = bool(prior) and origin.low < min(c.low for c in prior)
        else:
            has_sweep = bool(prior) and origin.high > max(c.high for c in prior)

        min_gap = context.atr * self.min_gap_atr
        has_unicorn = any(
            j + 2 < len(candles) and gap_between(candles[j], candles[j + 2], direction) > min_gap
            for j in leg
        )

        min_break = context.atr * self.break_atr
        has_break = any(swings.closes_beyond(candles[j].close, direction, min_break) for j in leg)

        if has_unicorn:
            kind = ZoneKind.UNICORN_SETUP
        elif direction is Direction.BULLISH:
            kind = ZoneKind.BULLISH_ORDER_BLOCK
        else:
            kind = ZoneKind.BEARISH_ORDER_BLOCK
        prefix = "BullOB" if direction is Direction.BULLISH else "BearOB"

        zone = Zone(
            zone_id=f"{prefix}-{i}",
            kind=kind,
            direction=direction,
            price_top=origin.high,
            price_bottom=origin.low,
            formed_at=origin.time,
            formed_index=i,
        )
        # The unicorn check reads up to two candles past the leg
        confirmed_index = min(leg_end + 2, len(candles) - 1)
        return ZoneCandidate(
            zone=zone,
            confirmed_index=confirmed_index,
            formation_close=origin.close,
            has_sweep=has_sweep,
            has_structure_break=has_break,
            has_displacement=True,
            has_unicorn=has_unicorn,
        )

    def _is_displacement(self, candle: Candle, origin: Candle, direction: Direction, atr: float) -> bool:
        min_body = atr * self.displacement_atr
        if direction is Direction.BULLISH:
            return candle.body > min_body and candle.close > origin.high
        return -candle.body > min_body and candle.close < origin.low
