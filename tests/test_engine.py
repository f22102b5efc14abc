"""End-to-end tests for analyze_market / MarketStructureEngine."""

import math

import pytest

from structure_engine import InvalidInputError, analyze_market
from structure_engine.analysis import (
    AnalysisSettings,
    DivergenceSignal,
    LabelingMode,
    MarketStructureEngine,
    StructureState,
    VolatilityClass,
    ZoneKind,
    ZoneOutcome,
    ZoneStatus,
)
from structure_engine.analysis.engine import count_outcomes
from structure_engine.analysis.enums import DivergenceDirection, Direction
from structure_engine.config.instruments import get_instrument_config


def as_dicts(candles):
    return [
        {"ts": c.time, "open": c.open, "high": c.high, "low": c.low, "close": c.close}
        for c in candles
    ]


@pytest.fixture
def series(wave):
    return wave(300), wave(120, step=3600), wave(60, step=14400)


# ============================================================================
# SHORT-CIRCUIT AND INPUT ERRORS
# ============================================================================

def test_insufficient_data_returns_empty_result(wave):
    result = analyze_market(wave(50), wave(50), wave(50))

    assert result.is_empty
    zones, bias, markers, levels = result
    assert (zones, bias, markers, levels) == ([], None, [], [])


def test_length_check_runs_before_validation(wave):
    entry = as_dicts(wave(50))
    entry[10]["high"] = math.nan

    assert analyze_market(entry, [], []).is_empty


def test_exactly_min_candles_is_analyzed(wave):
    assert analyze_market(wave(99), wave(30), wave(30)).is_empty
    assert not analyze_market(wave(100), wave(30), wave(30)).is_empty


def test_malformed_entry_candle_raises(series):
    entry, mid, high = series
    entry = as_dicts(entry)
    entry[150]["low"] = entry[150]["high"] + 1.0

    with pytest.raises(InvalidInputError) as exc_info:
        analyze_market(entry, mid, high)

    assert isinstance(exc_info.value, ValueError)
    assert exc_info.value.get_issues_by_type("invalid_range")[0].index == 150


def test_malformed_higher_timeframe_raises(series):
    entry, mid, high = series
    high = list(reversed(high))

    with pytest.raises(InvalidInputError) as exc_info:
        analyze_market(entry, mid, high)

    assert {i.timeframe for i in exc_info.value.issues} == {"high"}


# ============================================================================
# OUTPUT PROPERTIES
# ============================================================================

def test_analysis_is_deterministic(series):
    first = analyze_market(*series)
    second = analyze_market(*series)

    assert first.zones == second.zones
    assert first.bias == second.bias
    assert first.markers == second.markers
    assert first.liquidity_levels == second.liquidity_levels


def test_dict_and_candle_inputs_agree(series):
    entry, mid, high = series

    from_candles = analyze_market(entry, mid, high)
    from_dicts = analyze_market(as_dicts(entry), as_dicts(mid), as_dicts(high))

    assert from_candles.zones == from_dicts.zones
    assert from_candles.bias == from_dicts.bias


def test_zone_invariants(series):
    entry = series[0]
    zones = analyze_market(*series).zones

    assert len(zones) <= 30
    assert len({z.zone_id for z in zones}) == len(zones)
    for zone in zones:
        assert 0 <= zone.score <= 100
        assert zone.price_top > zone.price_bottom
        # Recency override is the only way a low score survives
        assert zone.score > 60 or zone.formed_index >= len(entry) - 20


def test_zones_are_newest_first(series):
    zones = analyze_market(*series).zones
    indexes = [z.formed_index for z in zones]
    assert indexes == sorted(indexes, reverse=True)


def test_markers_are_chronological_and_capped(series):
    markers = analyze_market(*series).markers

    assert len(markers) <= 20
    times = [m.time for m in markers]
    assert times == sorted(times)


def test_bias_snapshot(series):
    bias = analyze_market(*series).bias

    assert 0.0 <= bias.win_rate <= 1.0
    assert set(bias.mtf) == {"entry", "mid", "high"}
    assert bias.trend is bias.mtf["entry"]
    assert bias.structural_trend in (Direction.BULLISH, Direction.BEARISH)
    assert bias.structure in set(StructureState)
    assert bias.divergence.direction is DivergenceDirection.NONE


def test_bias_is_read_only(series):
    bias = analyze_market(*series).bias

    with pytest.raises(TypeError):
        bias.mtf["entry"] = Direction.NEUTRAL
    assert isinstance(bias.liquidity_levels, tuple)
    with pytest.raises(AttributeError):
        bias.liquidity_levels.append(None)


def test_structure_reflects_last_break(series):
    engine = MarketStructureEngine(settings=AnalysisSettings(max_markers=1000))
    result = engine.analyze(*series)

    breaks = [m for m in result.markers if m.is_structure_break]
    if breaks:
        assert result.bias.structure.value == breaks[-1].kind.value
    else:
        assert result.bias.structure is StructureState.CONSOLIDATION


# ============================================================================
# SCENARIOS
# ============================================================================

def test_recent_order_block_is_surfaced(order_block_candles):
    result = analyze_market(order_block_candles, order_block_candles, order_block_candles)

    by_id = {z.zone_id: z for z in result.zones}
    assert "BullOB-105" in by_id

    zone = by_id["BullOB-105"]
    assert zone.kind is ZoneKind.BULLISH_ORDER_BLOCK
    assert zone.direction is Direction.BULLISH
    assert (zone.price_bottom, zone.price_top) == (1.0994, 1.1004)
    assert zone.confluence == ["Full MTF alignment", "Liquidity sweep", "Displacement", "Discount zone"]
    assert zone.score == 65
    # The displacement candle opens inside the zone and runs through the 1:2 target
    assert zone.status is ZoneStatus.TESTED
    assert zone.outcome is ZoneOutcome.WIN
    assert zone.age == 14

    # The gap left by the displacement is surfaced through the recency override
    assert by_id["BullFVG-105"].score <= 60


def test_historical_outcomes_extend_win_rate(series):
    baseline = analyze_market(*series).bias
    history = ["WIN", "loss", "win", "OPEN", None]

    bias = analyze_market(*series, historical_outcomes=history).bias

    assert bias.resolved_trades == baseline.resolved_trades + 3


def test_win_rate_counts_detected_and_historical_outcomes(order_block_candles):
    candles = order_block_candles

    detected = analyze_market(candles, candles, candles).bias
    combined = analyze_market(candles, candles, candles, historical_outcomes=["LOSS", "WIN", "LOSS"]).bias

    # Only the order block resolved with a qualifying score
    assert (detected.resolved_trades, detected.win_rate) == (1, 1.0)
    assert combined.resolved_trades == 4
    assert combined.win_rate == pytest.approx(0.5)


def test_divergence_payload_is_accepted(series):
    result = analyze_market(*series, divergence={"direction": "Bullish SMT", "strength": 80})

    assert result.bias.divergence == DivergenceSignal(DivergenceDirection.BULLISH, 80.0)
    for zone in result.zones:
        assert ("Divergence confirmation" in zone.confluence) == (zone.direction is Direction.BULLISH)


@pytest.mark.parametrize("payload, expected", [
    ({"direction": "None", "strength": None}, DivergenceDirection.NONE),
    ({"direction": None}, DivergenceDirection.NONE),
    ({"direction": "Bearish SMT", "strength": "n/a"}, DivergenceDirection.BEARISH),
    ("None", DivergenceDirection.NONE),
    ("", DivergenceDirection.NONE),
    (42, DivergenceDirection.NONE),
])
def test_loose_divergence_payloads_do_not_fail(series, payload, expected):
    result = analyze_market(*series, divergence=payload)
    assert result.bias.divergence == DivergenceSignal(expected, 0.0)


def test_divergence_label_string_is_accepted(series):
    result = analyze_market(*series, divergence="Bullish SMT")
    assert result.bias.divergence == DivergenceSignal(DivergenceDirection.BULLISH, 0.0)


def test_instrument_by_name(series):
    result = analyze_market(*series, instrument="xauusd")
    assert result.bias.volatility is VolatilityClass.LOW


def test_instrument_config_object(series):
    result = analyze_market(*series, instrument=get_instrument_config("BTCUSD"))
    assert result.bias.volatility is VolatilityClass.LOW


def test_causal_labeling_runs_with_same_zones_detected(series):
    settings = AnalysisSettings(labeling_mode=LabelingMode.CAUSAL)

    lookahead = analyze_market(*series)
    causal = analyze_market(*series, settings=settings)

    assert [(z.zone_id, z.score) for z in causal.zones] == [(z.zone_id, z.score) for z in lookahead.zones]


def test_count_outcomes():
    assert count_outcomes(None) == (0, 0)
    assert count_outcomes([ZoneOutcome.WIN, ZoneOutcome.LOSS, ZoneOutcome.OPEN, " win ", 3]) == (2, 1)
