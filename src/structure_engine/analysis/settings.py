"""
Engine Settings

Fixed heuristics of the market-structure engine collected in one place.
Defaults reproduce the dashboard's behaviour on 15m entry candles.
"""

from dataclasses import dataclass, replace

from .enums import LabelingMode


@dataclass(frozen=True)
class AnalysisSettings:
    """
    Tunable constants for one engine instance.

    ATR multipliers scale with the instrument automatically; only the
    volatility thresholds need per-instrument values (see
    `config.instruments`).
    """
    # Input requirements
    min_candles: int = 100

    # Context
    atr_period: int = 14
    entry_trend_lookback: int = 50
    htf_trend_lookback: int = 20
    equilibrium_lookback: int = 50
    target_lookback: int = 100
    session_range_hours: int = 6

    # Detector pass covers [scan_start, len - scan_tail)
    scan_start: int = 20
    scan_tail: int = 3
    swing_wing: int = 2              # Fractal = 2 candles each side

    # Event thresholds (ATR multiples)
    imbalance_min_atr: float = 0.5
    break_min_atr: float = 0.1
    displacement_min_atr: float = 0.8

    # Event windows
    imbalance_recency: int = 50      # Only keep FVGs from the last N candles
    displacement_leg: int = 3        # Follow-through candles after an OB
    sweep_lookback: int = 5          # Prior candles an OB must sweep
    sweep_dedup_seconds: int = 1800
    break_dedup_seconds: int = 900

    # Output filters
    min_zone_score: int = 60         # Retained zones score strictly above this
    recency_override_candles: int = 20
    win_rate_min_score: int = 65
    max_zones: int = 30
    max_markers: int = 20
    min_divergence_strength: float = 0.0

    labeling_mode: LabelingMode = LabelingMode.LOOKAHEAD

    def __post_init__(self):
        """Validate configuration parameters."""
        assert self.min_candles >= self.scan_start + self.scan_tail + 1, \
            "min_candles must leave room for the detector pass"
        assert self.min_candles > self.entry_trend_lookback, "min_candles must exceed entry_trend_lookback"
        assert self.min_candles > self.atr_period, "min_candles must exceed atr_period"
        assert 1 <= self.atr_period <= 200, "atr_period must be 1-200"
        assert 1 <= self.htf_trend_lookback <= 500, "htf_trend_lookback must be 1-500"
        assert 1 <= self.equilibrium_lookback <= 1000, "equilibrium_lookback must be 1-1000"
        assert 1 <= self.target_lookback <= 1000, "target_lookback must be 1-1000"
        assert 0 < self.session_range_hours < 24, "session_range_hours must be 1-23"
        assert self.scan_start >= self.sweep_lookback, "scan_start must cover sweep_lookback"
        assert self.scan_start >= self.swing_wing, "scan_start must cover swing_wing"
        assert self.scan_tail >= self.swing_wing, "scan_tail must cover swing_wing"
        assert self.imbalance_min_atr >= 0, "imbalance_min_atr must be >= 0"
        assert self.break_min_atr >= 0, "break_min_atr must be >= 0"
        assert self.displacement_min_atr >= 0, "displacement_min_atr must be >= 0"
        assert self.displacement_leg >= 1, "displacement_leg must be >= 1"
        assert 0 <= self.min_zone_score <= 100, "min_zone_score must be 0-100"
        assert 0 <= self.win_rate_min_score <= 100, "win_rate_min_score must be 0-100"
        assert self.max_zones >= 1, "max_zones must be >= 1"
        assert self.max_markers >= 1, "max_markers must be >= 1"
        assert self.min_divergence_strength >= 0, "min_divergence_strength must be >= 0"

    def with_overrides(self, **changes) -> "AnalysisSettings":
        """Return a copy with some fields replaced (validated again)."""
        return replace(self, **changes)


DEFAULT_SETTINGS = AnalysisSettings()


__all__ = ["AnalysisSettings", "DEFAULT_SETTINGS"]
