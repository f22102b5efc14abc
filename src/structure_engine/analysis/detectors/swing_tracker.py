"""
Swing Tracker - Keeps the most recent confirmed fractal swing levels.
"""

from typing import Optional, Sequence

from ..enums import Direction
from ..models import Candle


class SwingTracker:
    """
    Fractal swing state threaded through the detector pass.

    A swing high at index i requires:
    - High > all highs in the `wing` candles before
    - High > all highs in the `wing` candles after

    Similarly for swing lows. Only the latest confirmed level on each side
    is kept; it is overwritten by every new fractal and cleared when a
    structural break consumes it.

    The tracker also owns the structural trend flag, which starts at the
    entry trend (bullish when the entry trend is neutral) and flips on
    every change of character.
    """

    def __init__(self, initial_trend: Direction = Direction.BULLISH, wing: int = 2):
        """
        Initialize swing tracker.

        Args:
            initial_trend: Entry-timeframe trend at the start of the pass
            wing: Number of candles on each side for fractal confirmation
        """
        self.wing = wing
        self.last_swing_high: Optional[float] = None
        self.last_swing_low: Optional[float] = None
        if initial_trend is Direction.NEUTRAL:
            initial_trend = Direction.BULLISH
        self.structural_trend = initial_trend

    def is_swing_high(self, candles: Sequence[Candle], i: int) -> bool:
        if i < self.wing or i + self.wing >= len(candles):
            return False
        pivot = candles[i].high
        return all(
            candles[j].high < pivot
            for j in range(i - self.wing, i + self.wing + 1)
            if j != i
        )

    def is_swing_low(self, candles: Sequence[Candle], i: int) -> bool:
        if i < self.wing or i + self.wing >= len(candles):
            return False
        pivot = candles[i].low
        return all(
            candles[j].low > pivot
            for j in range(i - self.wing, i + self.wing + 1)
            if j != i
        )

    def update(self, candles: Sequence[Candle], i: int) -> None:
        """Record candle i as the latest swing high and/or low if it is a fractal."""
        if self.is_swing_high(candles, i):
            self.last_swing_high = candles[i].high
        if self.is_swing_low(candles, i):
            self.last_swing_low = candles[i].low

    def level_for(self, direction: Direction) -> Optional[float]:
        """
        Swing level a move in `direction` has to break.

        Bullish breaks take out the swing high, bearish breaks the swing low.
        """
        if direction is Direction.BULLISH:
            return self.last_swing_high
        if direction is Direction.BEARISH:
            return self.last_swing_low
        return None

    def closes_beyond(self, close: float, direction: Direction, min_distance: float) -> bool:
        """Check if a close clears the tracked level in `direction` by more than min_distance."""
        level = self.level_for(direction)
        if level is None:
            return False
        if direction is Direction.BULLISH:
            return close - level > min_distance
        return level - close > min_distance

    def consume(self, direction: Direction) -> None:
        """Clear the level broken by a move in `direction`."""
        if direction is Direction.BULLISH:
            self.last_swing_high = None
        elif direction is Direction.BEARISH:
            self.last_swing_low = None

    def __repr__(self) -> str:
        return (
            f"SwingTracker(high={self.last_swing_high}, low={self.last_swing_low}, "
            f"trend={self.structural_trend.value})"
        )
