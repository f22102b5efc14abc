"""Shared candle and context builders for the engine tests."""

import math

import pytest

from structure_engine.analysis.enums import DailyBias, Direction, PremiumDiscount, Session, VolatilityClass
from structure_engine.analysis.models import Candle, MarketContext

# 2024-01-01 00:00:00 UTC
DAY_START = 1704067200
M15 = 900


def bar(i, open_, close, high=None, low=None, start=DAY_START, step=M15):
    """Candle number i of a series; wicks default to 0.1 beyond the body."""
    if high is None:
        high = max(open_, close) + 0.1
    if low is None:
        low = min(open_, close) - 0.1
    return Candle(time=start + i * step, open=open_, high=high, low=low, close=close)


def rising_series(n, start=DAY_START, step=M15):
    """Steady uptrend: each candle opens 0.001 above the previous open."""
    candles = []
    for i in range(n):
        o = 1.0 + 0.001 * i
        c = o + 0.0008
        candles.append(Candle(time=start + i * step, open=o, high=c + 0.0002, low=o - 0.0002, close=c))
    return candles


def falling_series(n, start=DAY_START, step=M15):
    candles = []
    for i in range(n):
        o = 2.0 - 0.001 * i
        c = o - 0.0008
        candles.append(Candle(time=start + i * step, open=o, high=o + 0.0002, low=c - 0.0002, close=c))
    return candles


def wave_series(n, start=DAY_START, step=M15, amplitude=0.002, period=6.0, drift=0.00002):
    """Oscillating series with swings, breaks and gaps on most windows."""
    candles = []
    prev_close = 1.1
    for i in range(n):
        close = 1.1 + amplitude * math.sin(i / period) + drift * i
        if i % 7 == 3:
            close += amplitude * 0.8 * (1 if (i // 7) % 2 == 0 else -1)
        o = prev_close
        candles.append(Candle(
            time=start + i * step,
            open=o,
            high=max(o, close) + 0.0003,
            low=min(o, close) - 0.0003,
            close=close,
        ))
        prev_close = close
    return candles


def order_block_series(n=120, origin=105):
    """
    Quiet series with one bullish order block at `origin`.

    The origin candle is the only down candle; the next candle displaces
    well above its high, and the market then holds the new level.
    """
    candles = []
    for i in range(n):
        if i < origin:
            o, c, h, l = 1.1000, 1.1001, 1.1003, 1.0998
        elif i == origin:
            o, c, h, l = 1.1002, 1.0996, 1.1004, 1.0994
        elif i == origin + 1:
            o, c, h, l = 1.0996, 1.1030, 1.1032, 1.0995
        else:
            o, c, h, l = 1.1030, 1.1031, 1.1033, 1.1028
        candles.append(Candle(time=DAY_START + i * M15, open=o, high=h, low=l, close=c))
    return candles


def context(**overrides):
    """MarketContext with ATR 1.0, all trends bullish and no reference levels."""
    values = dict(
        atr=1.0,
        trend_entry=Direction.BULLISH,
        trend_mid=Direction.BULLISH,
        trend_high=Direction.BULLISH,
        volatility=VolatilityClass.MEDIUM,
        equilibrium=10.0,
        premium_discount=PremiumDiscount.EQUILIBRIUM,
        current_close=10.0,
        next_target=12.0,
        daily_bias=DailyBias.ACCUMULATION,
        session=Session.ASIA,
    )
    values.update(overrides)
    return MarketContext(**values)


@pytest.fixture
def make_bar():
    return bar


@pytest.fixture
def make_context():
    return context


@pytest.fixture
def rising():
    return rising_series


@pytest.fixture
def falling():
    return falling_series


@pytest.fixture
def wave():
    return wave_series


@pytest.fixture
def order_block_candles():
    return order_block_series()
