"""
Technical Indicators Utility Module

Provides the window reductions used by the context builder:
- ATR (Average True Range, simple mean)
- Net price change over a lookback
- Range extremes (highest high / lowest low)
"""

from typing import Optional, Sequence, Tuple

import numpy as np


def calculate_true_ranges(candles: Sequence) -> np.ndarray:
    """
    True range of every candle after the first.

    True Range = max(high - low, abs(high - prev_close), abs(low - prev_close))

    Args:
        candles: Candle objects (attributes high, low, close)

    Returns:
        Array of len(candles) - 1 true ranges (empty for < 2 candles)
    """
    if len(candles) < 2:
        return np.empty(0)

    highs = np.fromiter((c.high for c in candles), dtype=float, count=len(candles))
    lows = np.fromiter((c.low for c in candles), dtype=float, count=len(candles))
    closes = np.fromiter((c.close for c in candles), dtype=float, count=len(candles))

    prev_close = closes[:-1]
    high_low = highs[1:] - lows[1:]
    high_close = np.abs(highs[1:] - prev_close)
    low_close = np.abs(lows[1:] - prev_close)

    return np.maximum(high_low, np.maximum(high_close, low_close))


def calculate_atr(candles: Sequence, period: int = 14) -> Optional[float]:
    """
    Calculate Average True Range (ATR).

    Simple (non-exponential) mean of the last `period` true ranges.

    Args:
        candles: Candle objects
        period: ATR calculation period (default 14)

    Returns:
        ATR value or None if insufficient data
    """
    if len(candles) < period + 1:
        return None

    true_ranges = calculate_true_ranges(candles)
    return float(np.mean(true_ranges[-period:]))


def calculate_price_change(candles: Sequence, lookback: int) -> Optional[float]:
    """
    Net move from the open `lookback` bars ago to the last close.

    Returns:
        close[last] - open[last - lookback], or None if the series is too short
    """
    if len(candles) <= lookback:
        return None
    return candles[-1].close - candles[-1 - lookback].open


def calculate_range_extremes(candles: Sequence, lookback: int) -> Tuple[float, float]:
    """
    Highest high and lowest low over the last `lookback` candles.

    Uses the whole series when it is shorter than the lookback.

    Returns:
        (highest_high, lowest_low)
    """
    window = candles[-lookback:]
    highs = np.fromiter((c.high for c in window), dtype=float, count=len(window))
    lows = np.fromiter((c.low for c in window), dtype=float, count=len(window))
    return float(highs.max()), float(lows.min())


__all__ = [
    "calculate_true_ranges",
    "calculate_atr",
    "calculate_price_change",
    "calculate_range_extremes",
]
