"""
Liquidity Sweep Detector

Detects stop runs through reference liquidity levels:
- Buy-side sweep: wick pokes above the previous-day high or session high
  by less than one ATR and the candle closes down
- Sell-side sweep: wick pokes below the previous-day low or session low
  by less than one ATR and the candle closes up

A sweep is a rejection, not a breakout: the wick takes the resting stops
and the body closes back inside.
"""

from typing import List, Optional, Sequence

from ..enums import Direction, MarkerKind, MarkerStrength
from ..marker_index import MarkerIndex
from ..models import Candle, MarketContext, StructuralMarker
from ..settings import AnalysisSettings


class LiquiditySweepDetector:
    """
    Emits SWEEP markers for candles that reject a reference level.

    Usage:
        detector = LiquiditySweepDetector(settings)
        emitted = detector.detect(candles, i, context, markers)
    """

    def __init__(self, settings: AnalysisSettings):
        self.dedup_seconds = settings.sweep_dedup_seconds

    def detect(
        self,
        candles: Sequence[Candle],
        i: int,
        context: MarketContext,
        markers: MarkerIndex,
    ) -> List[StructuralMarker]:
        """
        Check candle i against the reference levels.

        Markers are added to `markers` unless another marker already sits
        within the de-duplication window.

        Returns:
            Markers emitted for this candle (0, 1 or 2)
        """
        candle = candles[i]
        emitted: List[StructuralMarker] = []

        swept_high = self._swept_upper(candle, context)
        if swept_high is not None and candle.is_bearish:
            marker = StructuralMarker(
                time=candle.time,
                side=Direction.BEARISH,
                kind=MarkerKind.SWEEP,
                strength=MarkerStrength.MAJOR,
                price=swept_high,
            )
            if markers.add_if_clear(marker, self.dedup_seconds):
                emitted.append(marker)

        swept_low = self._swept_lower(candle, context)
        if swept_low is not None and candle.is_bullish:
            marker = StructuralMarker(
                time=candle.time,
                side=Direction.BULLISH,
                kind=MarkerKind.SWEEP,
                strength=MarkerStrength.MAJOR,
                price=swept_low,
            )
            if markers.add_if_clear(marker, self.dedup_seconds):
                emitted.append(marker)

        return emitted

    @staticmethod
    def _swept_upper(candle: Candle, context: MarketContext) -> Optional[float]:
        """First upper level the wick exceeded by less than one ATR."""
        for level in context.upper_sweep_levels:
            if level < candle.high < level + context.atr:
                return level
        return None

    @staticmethod
    def _swept_lower(candle: Candle, context: MarketContext) -> Optional[float]:
        for level in context.lower_sweep_levels:
            if level - context.atr < candle.low < level:
                return level
        return None
