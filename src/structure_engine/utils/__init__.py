"""Shared numeric helpers."""
from .indicators import (
    calculate_true_ranges,
    calculate_atr,
    calculate_price_change,
    calculate_range_extremes,
)

__all__ = [
    "calculate_true_ranges",
    "calculate_atr",
    "calculate_price_change",
    "calculate_range_extremes",
]
