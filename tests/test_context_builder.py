"""Tests for per-call market context."""

import pytest

from structure_engine.analysis.context_builder import (
    ContextBuilder,
    classify_daily_bias,
    classify_session,
    direction_from_change,
)
from structure_engine.analysis.enums import (
    DailyBias,
    Direction,
    LevelKind,
    LevelStyle,
    PremiumDiscount,
    Session,
    VolatilityClass,
)
from structure_engine.analysis.settings import DEFAULT_SETTINGS
from structure_engine.config.instruments import get_instrument_config

from conftest import DAY_START


@pytest.fixture
def builder():
    return ContextBuilder(DEFAULT_SETTINGS, get_instrument_config("EURUSD"))


@pytest.fixture
def two_day_context(builder, rising, falling):
    # 120 x 15m candles: all of Jan 1 plus Jan 2 00:00-05:45
    entry = rising(120)
    return builder.build(entry, rising(10), falling(30))


def test_short_series_builds_nothing(builder, rising):
    assert builder.build(rising(99), rising(99), rising(99)) is None


def test_atr_trends_and_volatility(two_day_context):
    ctx = two_day_context

    assert ctx.atr == pytest.approx(0.0012)
    assert ctx.volatility is VolatilityClass.MEDIUM
    assert ctx.trend_entry is Direction.BULLISH
    # Mid series has only 10 bars: falls back to the entry trend
    assert ctx.trend_mid is Direction.BULLISH
    assert ctx.trend_high is Direction.BEARISH


def test_equilibrium_and_premium(two_day_context):
    ctx = two_day_context

    assert ctx.equilibrium == pytest.approx((1.120 + 1.0698) / 2)
    assert ctx.current_close == pytest.approx(1.1198)
    assert ctx.premium_discount is PremiumDiscount.PREMIUM
    assert ctx.next_target == pytest.approx(1.120)


def test_reference_levels(two_day_context):
    ctx = two_day_context

    assert ctx.previous_day_high == pytest.approx(1.096)
    assert ctx.previous_day_low == pytest.approx(0.9998)
    assert ctx.session_high == pytest.approx(1.120)
    assert ctx.session_low == pytest.approx(1.0958)
    assert ctx.session_open == pytest.approx(1.096)

    assert [lvl.label for lvl in ctx.liquidity_levels] == [
        "PDH", "PDL", "Session High", "Session Low", "Session Open",
    ]
    assert [lvl.kind for lvl in ctx.liquidity_levels] == [
        LevelKind.PREVIOUS_DAY_HIGH,
        LevelKind.PREVIOUS_DAY_LOW,
        LevelKind.SESSION_HIGH,
        LevelKind.SESSION_LOW,
        LevelKind.SESSION_OPEN,
    ]
    assert [lvl.style for lvl in ctx.liquidity_levels] == [
        LevelStyle.SOLID, LevelStyle.SOLID, LevelStyle.DASHED, LevelStyle.DASHED, LevelStyle.DOTTED,
    ]
    assert ctx.upper_sweep_levels == [ctx.previous_day_high, ctx.session_high]
    assert ctx.lower_sweep_levels == [ctx.previous_day_low, ctx.session_low]


def test_levels_without_data_are_omitted(builder, rising):
    # 100 x 1m candles from 08:00: no previous day and no 00-06 session
    entry = rising(100, start=DAY_START + 8 * 3600, step=60)

    ctx = builder.build(entry, entry, entry)

    assert ctx.previous_day_high is None
    assert ctx.session_high is None
    assert [lvl.kind for lvl in ctx.liquidity_levels] == [LevelKind.SESSION_OPEN]


def test_daily_bias_defaults_to_last_candle_hour(two_day_context):
    # Last candle opens at 05:45 UTC
    assert two_day_context.daily_bias is DailyBias.ACCUMULATION
    assert two_day_context.session is Session.ASIA


def test_daily_bias_from_explicit_now(builder, rising):
    entry = rising(120)
    now = DAY_START + 86400 + 13 * 3600

    ctx = builder.build(entry, entry, entry, now=now)

    assert ctx.daily_bias is DailyBias.DISTRIBUTION
    assert ctx.session is Session.NEW_YORK


def test_volatility_uses_instrument_thresholds(rising):
    gold = ContextBuilder(DEFAULT_SETTINGS, get_instrument_config("XAUUSD"))
    entry = rising(120)

    assert gold.build(entry, entry, entry).volatility is VolatilityClass.LOW


@pytest.mark.parametrize("hour,bias,session", [
    (0, DailyBias.ACCUMULATION, Session.ASIA),
    (6, DailyBias.ACCUMULATION, Session.ASIA),
    (7, DailyBias.MANIPULATION, Session.LONDON),
    (11, DailyBias.MANIPULATION, Session.LONDON),
    (12, DailyBias.DISTRIBUTION, Session.NEW_YORK),
    (20, DailyBias.DISTRIBUTION, Session.NEW_YORK),
    (21, DailyBias.DISTRIBUTION, Session.CLOSE),
    (23, DailyBias.DISTRIBUTION, Session.CLOSE),
])
def test_hour_classification(hour, bias, session):
    assert classify_daily_bias(hour) is bias
    assert classify_session(hour) is session


def test_direction_from_change():
    assert direction_from_change(0.5) is Direction.BULLISH
    assert direction_from_change(-0.5) is Direction.BEARISH
    assert direction_from_change(0.0) is Direction.NEUTRAL
    assert direction_from_change(None) is Direction.NEUTRAL
