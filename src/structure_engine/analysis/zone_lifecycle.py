"""
Zone Lifecycle Resolver

Labels each zone by scanning the candles that follow it:
- BROKEN / LOSS: a close passes through the far edge
  (bullish: close < bottom, bearish: close > top)
- TESTED: a candle range re-enters the zone (first re-entry time recorded,
  every re-entry counted)
- WIN: while TESTED, price reaches the 1:2 target from the zone midpoint
- FRESH: none of the above before the end of the scan

Status only moves forward: FRESH -> TESTED -> BROKEN.

In LOOKAHEAD mode the scan starts on the candle after formation. In CAUSAL
mode it starts after the candle that confirmed the zone, so no candle the
detector used can also label the zone.
"""

from typing import Optional, Sequence

from .enums import LabelingMode, ZoneOutcome, ZoneStatus
from .models import Candle, Zone, ZoneCandidate


class ZoneLifecycleResolver:
    """
    Forward-scan labeler for detected zones.

    Usage:
        resolver = ZoneLifecycleResolver(LabelingMode.LOOKAHEAD)
        resolver.resolve_candidate(candidate, candles)
        print(candidate.zone.status, candidate.zone.outcome)
    """

    def __init__(self, mode: LabelingMode = LabelingMode.LOOKAHEAD):
        self.mode = mode

    def scan_start(self, candidate: ZoneCandidate) -> int:
        """First candle index the scan may read for this candidate."""
        if self.mode is LabelingMode.CAUSAL:
            return candidate.confirmed_index + 1
        return candidate.zone.formed_index + 1

    def resolve_candidate(
        self,
        candidate: ZoneCandidate,
        candles: Sequence[Candle],
        end_index: Optional[int] = None,
    ) -> Zone:
        return self.resolve(candidate.zone, candles, self.scan_start(candidate), end_index)

    def resolve(
        self,
        zone: Zone,
        candles: Sequence[Candle],
        start_index: int,
        end_index: Optional[int] = None,
    ) -> Zone:
        """
        Scan candles[start_index:end_index] and update the zone in place.

        Args:
            zone: Zone to label (status FRESH, outcome OPEN)
            candles: Full entry series
            start_index: First candle to inspect
            end_index: Exclusive upper bound (default: end of series)

        Returns:
            The same zone, for chaining
        """
        stop = len(candles) if end_index is None else min(end_index, len(candles))
        target = zone.target_price
        zone.age = len(candles) - 1 - zone.formed_index

        for k in range(start_index, stop):
            candle = candles[k]

            if self._closes_through(zone, candle):
                zone.status = ZoneStatus.BROKEN
                zone.outcome = ZoneOutcome.LOSS
                break

            if candle.overlaps(zone.price_top, zone.price_bottom):
                if zone.status is ZoneStatus.FRESH:
                    zone.status = ZoneStatus.TESTED
                    zone.retest_time = candle.time
                zone.test_count += 1
                zone.last_test_time = candle.time

            if zone.status is ZoneStatus.TESTED and self._reaches_target(zone, candle, target):
                zone.outcome = ZoneOutcome.WIN
                break

        return zone

    @staticmethod
    def _closes_through(zone: Zone, candle: Candle) -> bool:
        if zone.is_bullish:
            return candle.close < zone.price_bottom
        return candle.close > zone.price_top

    @staticmethod
    def _reaches_target(zone: Zone, candle: Candle, target: float) -> bool:
        if zone.is_bullish:
            return candle.high >= target
        return candle.low <= target
