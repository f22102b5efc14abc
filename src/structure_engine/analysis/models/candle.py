"""
Candle - Immutable OHLC bar.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Candle:
    """
    One OHLC bar.

    `time` is the bar open time in unix seconds. Series are ordered
    ascending by time with no duplicates.
    """
    time: int
    open: float
    high: float
    low: float
    close: float

    @classmethod
    def from_dict(cls, obj: Dict[str, Any]) -> "Candle":
        """
        Build a candle from the dict shape used by price feeds.

        Accepts either a `time` key (seconds) or the exchange-style `ts` key.
        """
        ts = obj["time"] if "time" in obj else obj["ts"]
        return cls(
            time=int(ts),
            open=float(obj["open"]),
            high=float(obj["high"]),
            low=float(obj["low"]),
            close=float(obj["close"]),
        )

    @property
    def body(self) -> float:
        """Signed body size (positive for up candles)."""
        return self.close - self.open

    @property
    def is_bullish(self) -> bool:
        return self.close > self.open

    @property
    def is_bearish(self) -> bool:
        return self.close < self.open

    def overlaps(self, top: float, bottom: float) -> bool:
        """Check if the candle range touches the [bottom, top] band."""
        return self.low <= top and self.high >= bottom
