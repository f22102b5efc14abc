"""
Imbalance (Fair Value Gap) Detector

Detects 3-candle price imbalances:
- Bullish FVG: candle[i].high < candle[i+2].low
- Bearish FVG: candle[i].low > candle[i+2].high

Gap must exceed `imbalance_min_atr` x ATR, and only gaps formed within the
most recent `imbalance_recency` candles are kept (older gaps are stale).
"""

from typing import Optional, Sequence

from ..enums import Direction, ZoneKind
from ..models import Candle, MarketContext, Zone, ZoneCandidate
from ..settings import AnalysisSettings
from .swing_tracker import SwingTracker


def gap_between(first: Candle, third: Candle, direction: Direction) -> float:
    """
    Size of the gap left between two candles two bars apart.

    Positive only when the gap exists in `direction`.
    """
    if direction is Direction.BULLISH:
        return third.low - first.high
    return first.low - third.high


class ImbalanceDetector:
    """
    FVG detection for the forward pass.

    Scoring flags:
    - Displacement: middle candle body > displacement_min_atr x ATR in the
      gap direction
    - Structure break: candle i+1 or i+2 closes beyond the tracked swing
      level in the gap direction by more than break_min_atr x ATR
    """

    def __init__(self, settings: AnalysisSettings):
        self.min_gap_atr = settings.imbalance_min_atr
        self.displacement_atr = settings.displacement_min_atr
        self.break_atr = settings.break_min_atr
        self.recency = settings.imbalance_recency

    def detect(
        self,
        candles: Sequence[Candle],
        i: int,
        context: MarketContext,
        swings: SwingTracker,
    ) -> Optional[ZoneCandidate]:
        """
        Check for an imbalance starting at candle i.

        Returns:
            ZoneCandidate or None
        """
        if i + 2 >= len(candles) or i < len(candles) - self.recency:
            return None

        first, middle, third = candles[i], candles[i + 1], candles[i + 2]
        min_gap = context.atr * self.min_gap_atr

        for direction in (Direction.BULLISH, Direction.BEARISH):
            if gap_between(first, third, direction) <= min_gap:
                continue

            if direction is Direction.BULLISH:
                kind, prefix = ZoneKind.BULLISH_IMBALANCE, "BullFVG"
                top, bottom = third.low, first.high
                displacement = middle.body > context.atr * self.displacement_atr
            else:
                kind, prefix = ZoneKind.BEARISH_IMBALANCE, "BearFVG"
                top, bottom = first.low, third.high
                displacement = -middle.body > context.atr * self.displacement_atr

            structure_break = any(
                swings.closes_beyond(c.close, direction, context.atr * self.break_atr)
                for c in (middle, third)
            )

            zone = Zone(
                zone_id=f"{prefix}-{i}",
                kind=kind,
                direction=direction,
                price_top=top,
                price_bottom=bottom,
                formed_at=first.time,
                formed_index=i,
            )
            return ZoneCandidate(
                zone=zone,
                confirmed_index=i + 2,
                formation_close=first.close,
                has_structure_break=structure_break,
                has_displacement=displacement,
            )

        return None
