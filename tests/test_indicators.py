"""Tests for the numpy window reductions."""

import numpy as np
import pytest

from structure_engine.analysis.models import Candle
from structure_engine.utils.indicators import (
    calculate_atr,
    calculate_price_change,
    calculate_range_extremes,
    calculate_true_ranges,
)


@pytest.fixture
def candles():
    return [
        Candle(time=0, open=1.0, high=2.0, low=0.5, close=1.5),
        Candle(time=60, open=1.5, high=3.0, low=1.0, close=2.5),
        Candle(time=120, open=2.5, high=2.6, low=1.0, close=1.2),
        Candle(time=180, open=1.2, high=5.0, low=1.1, close=4.0),
    ]


def test_true_ranges_use_previous_close(candles):
    ranges = calculate_true_ranges(candles)
    assert isinstance(ranges, np.ndarray)
    assert ranges.tolist() == pytest.approx([2.0, 1.6, 3.9])


def test_true_ranges_empty_for_single_candle(candles):
    assert calculate_true_ranges(candles[:1]).size == 0


def test_atr_is_simple_mean_of_last_period(candles):
    assert calculate_atr(candles, period=2) == pytest.approx(2.75)
    assert calculate_atr(candles, period=3) == pytest.approx(2.5)


def test_atr_none_when_series_too_short(candles):
    assert calculate_atr(candles, period=4) is None


def test_price_change(candles):
    assert calculate_price_change(candles, 2) == pytest.approx(2.5)
    assert calculate_price_change(candles, 3) == pytest.approx(3.0)
    assert calculate_price_change(candles, 4) is None


def test_range_extremes(candles):
    assert calculate_range_extremes(candles, 2) == (5.0, 1.0)
    # Lookback longer than the series uses everything
    assert calculate_range_extremes(candles, 10) == (5.0, 0.5)
