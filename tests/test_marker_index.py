"""Tests for the time-sorted marker index."""

from structure_engine.analysis.enums import Direction, MarkerKind, MarkerStrength
from structure_engine.analysis.marker_index import MarkerIndex
from structure_engine.analysis.models import StructuralMarker


def marker(time, kind=MarkerKind.SWEEP):
    return StructuralMarker(
        time=time,
        side=Direction.BULLISH,
        kind=kind,
        strength=MarkerStrength.MAJOR,
        price=1.0,
    )


def test_window_is_strict_on_both_sides():
    index = MarkerIndex()
    index.add(marker(10_000))

    assert index.has_within(10_000, 900)
    assert index.has_within(10_899, 900)
    assert index.has_within(9_101, 900)
    assert not index.has_within(10_900, 900)
    assert not index.has_within(9_100, 900)


def test_empty_index_has_nothing():
    assert not MarkerIndex().has_within(0, 1800)


def test_add_if_clear_suppresses_nearby_markers():
    index = MarkerIndex()
    assert index.add_if_clear(marker(0), 1800)
    assert not index.add_if_clear(marker(1200), 1800)
    assert index.add_if_clear(marker(1800), 1800)
    assert len(index) == 2


def test_out_of_order_inserts_stay_sorted():
    index = MarkerIndex()
    for t in (3000, 1000, 2000, 1000):
        index.add(marker(t))

    times = [m.time for m in index.to_list()]
    assert times == [1000, 1000, 2000, 3000]


def test_to_list_returns_a_copy():
    index = MarkerIndex()
    index.add(marker(5))
    index.to_list().clear()
    assert len(index) == 1


def test_window_is_strict_for_fractional_times():
    index = MarkerIndex()
    index.add(marker(10_000.0))

    assert index.has_within(10_899.5, 900)
    assert index.has_within(9_100.5, 900)
    assert not index.has_within(10_900.0, 900)
    assert not index.has_within(9_100.0, 900)


def test_marker_just_inside_fractional_lower_bound():
    index = MarkerIndex()
    index.add(marker(100.5))

    # 1000.0 - 900 = 100.0 < 100.5
    assert index.has_within(1_000.0, 900)
    assert not index.has_within(1_000.5, 900)
