"""
Break of Structure (BOS) / Change of Character (ChoCh) Detector

Detects market structure changes against the tracked swing levels:
- BOS: Break of Structure (trend continuation)
- ChoCh: Change of Character (trend reversal)

BOS Detection:
- Bullish structure: close above last swing high -> Bullish BOS
- Bearish structure: close below last swing low -> Bearish BOS

ChoCh Detection:
- Bullish structure: close below last swing low -> Bearish ChoCh
- Bearish structure: close above last swing high -> Bullish ChoCh

A break needs a candle body in the break direction and a close beyond the
level by more than `break_min_atr` x ATR. The broken level is consumed so
it cannot trigger again.
"""

from typing import List, Sequence

from ..enums import Direction, MarkerKind, MarkerStrength
from ..marker_index import MarkerIndex
from ..models import Candle, MarketContext, StructuralMarker
from ..settings import AnalysisSettings
from .swing_tracker import SwingTracker


class StructureBreakDetector:
    """
    Market structure break detection for the forward pass.

    Usage:
        detector = StructureBreakDetector(settings)
        emitted = detector.detect(candles, i, context, swings, markers)
        trend = swings.structural_trend
    """

    def __init__(self, settings: AnalysisSettings):
        self.break_atr = settings.break_min_atr
        self.dedup_seconds = settings.break_dedup_seconds

    def detect(
        self,
        candles: Sequence[Candle],
        i: int,
        context: MarketContext,
        swings: SwingTracker,
        markers: MarkerIndex,
    ) -> List[StructuralMarker]:
        """
        Check candle i for a bullish and a bearish break.

        A break suppressed by the de-duplication window changes nothing:
        the swing level stays tracked and the trend is not flipped.

        Returns:
            Markers emitted for this candle
        """
        candle = candles[i]
        min_distance = context.atr * self.break_atr
        emitted: List[StructuralMarker] = []

        for direction in (Direction.BULLISH, Direction.BEARISH):
            body_agrees = candle.is_bullish if direction is Direction.BULLISH else candle.is_bearish
            if not body_agrees or not swings.closes_beyond(candle.close, direction, min_distance):
                continue
            if markers.has_within(candle.time, self.dedup_seconds):
                continue

            is_choch = swings.structural_trend is not direction
            marker = StructuralMarker(
                time=candle.time,
                side=direction,
                kind=MarkerKind.CHOCH if is_choch else MarkerKind.BOS,
                strength=MarkerStrength.MAJOR if is_choch else MarkerStrength.MINOR,
                price=swings.level_for(direction),
            )
            markers.add(marker)
            emitted.append(marker)

            if is_choch:
                swings.structural_trend = direction
            swings.consume(direction)

        return emitted
