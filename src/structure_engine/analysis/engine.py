"""
Market-Structure Analysis Engine

Consumes three parallel OHLC series (entry timeframe and two higher
timeframes) and produces ranked zones, a bias snapshot, structural markers
and reference liquidity levels.

Architecture:
- Validators: reject malformed input before any comparison runs
- ContextBuilder: ATR, trends, volatility, equilibrium, reference levels
- Detectors: swing tracker, sweep, imbalance, structure break, order block
- ZoneScorer: confluence-weighted score per candidate
- ZoneLifecycleResolver: FRESH / TESTED / BROKEN and WIN / LOSS labels
- MarketStructureEngine: orchestrates all components

Every call recomputes from scratch; no state survives between calls.
"""

from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union

from ..config.instruments import InstrumentConfig, get_instrument_config
from ..core.logger import get_logger
from ..validators import InvalidInputError, validate_series
from .context_builder import ContextBuilder
from .detectors import (
    ImbalanceDetector,
    LiquiditySweepDetector,
    OrderBlockDetector,
    StructureBreakDetector,
    SwingTracker,
)
from .enums import MarkerKind, StructureState, ZoneOutcome
from .marker_index import MarkerIndex
from .models import (
    AnalysisResult,
    Bias,
    Candle,
    DivergenceSignal,
    MarketContext,
    Zone,
    ZoneCandidate,
)
from .settings import DEFAULT_SETTINGS, AnalysisSettings
from .zone_lifecycle import ZoneLifecycleResolver
from .zone_scorer import ZoneScorer

CandleInput = Sequence[Any]


class MarketStructureEngine:
    """
    Market-structure analysis for one instrument.

    Usage:
        engine = MarketStructureEngine(get_instrument_config("XAUUSD"))
        zones, bias, markers, levels = engine.analyze(m15, h1, h4)

        for zone in zones:
            print(zone.zone_id, zone.score, zone.confluence)

    The instance holds configuration only, so one engine can serve many
    calls (including concurrent ones).
    """

    def __init__(
        self,
        instrument_config: Optional[InstrumentConfig] = None,
        settings: Optional[AnalysisSettings] = None,
    ):
        """
        Initialize the engine.

        Args:
            instrument_config: Volatility thresholds for the instrument
                (default EURUSD)
            settings: Engine constants (default DEFAULT_SETTINGS)
        """
        self.instrument = instrument_config or get_instrument_config()
        self.settings = settings or DEFAULT_SETTINGS
        self.logger = get_logger(__name__)

        self.context_builder = ContextBuilder(self.settings, self.instrument)
        self.sweep_detector = LiquiditySweepDetector(self.settings)
        self.imbalance_detector = ImbalanceDetector(self.settings)
        self.structure_detector = StructureBreakDetector(self.settings)
        self.order_block_detector = OrderBlockDetector(self.settings)
        self.scorer = ZoneScorer(self.settings)
        self.resolver = ZoneLifecycleResolver(self.settings.labeling_mode)

    # ========================================================================
    # PUBLIC API
    # ========================================================================

    def analyze(
        self,
        entry: CandleInput,
        mid: CandleInput,
        high: CandleInput,
        divergence: Union[DivergenceSignal, dict, str, None] = None,
        historical_outcomes: Optional[Iterable[Any]] = None,
        now: Optional[int] = None,
    ) -> AnalysisResult:
        """
        Run one full analysis.

        Args:
            entry: Entry-timeframe candles (Candle objects or dicts)
            mid: First higher timeframe candles
            high: Second higher timeframe candles
            divergence: Optional cross-asset divergence signal, payload dict
                or label string ("Bullish SMT")
            historical_outcomes: Optional past outcomes ("WIN"/"LOSS" or
                ZoneOutcome) added to the win-rate counts
            now: Evaluation time for daily bias and session (unix seconds)

        Returns:
            AnalysisResult; empty when the entry series is too short

        Raises:
            InvalidInputError: if any series holds a malformed candle
        """
        name = self.instrument.name
        if len(entry) < self.settings.min_candles:
            self.logger.debug(
                f"[Engine] {name}: {len(entry)} entry candles < {self.settings.min_candles}, "
                f"returning empty result"
            )
            return AnalysisResult.empty()

        try:
            series = validate_series({"entry": entry, "mid": mid, "high": high})
        except InvalidInputError as e:
            self.logger.warning(f"[Engine] {name}: rejected input ({len(e.issues)} issues): {e}")
            raise

        candles = series["entry"]
        context = self.context_builder.build(candles, series["mid"], series["high"], now=now)
        signal = self._coerce_divergence(divergence)

        candidates, markers, swings = self._run_detectors(candles, context)

        wins = losses = 0
        for candidate in candidates:
            zone = candidate.zone
            zone.score, zone.confluence = self.scorer.score(candidate, context, signal)
            self.resolver.resolve_candidate(candidate, candles)

            if zone.is_resolved and zone.score >= self.settings.win_rate_min_score:
                if zone.outcome is ZoneOutcome.WIN:
                    wins += 1
                else:
                    losses += 1

        hist_wins, hist_losses = count_outcomes(historical_outcomes)
        wins += hist_wins
        losses += hist_losses
        resolved = wins + losses
        win_rate = wins / resolved if resolved else 0.0

        zones = self._select_zones(candidates, len(candles))
        all_markers = markers.to_list()

        bias = Bias(
            trend=context.trend_entry,
            mtf={"entry": context.trend_entry, "mid": context.trend_mid, "high": context.trend_high},
            structural_trend=swings.structural_trend,
            structure=self._structure_state(all_markers),
            premium_discount=context.premium_discount,
            equilibrium=context.equilibrium,
            volatility=context.volatility,
            atr=context.atr,
            win_rate=win_rate,
            resolved_trades=resolved,
            daily_bias=context.daily_bias,
            session=context.session,
            next_target=context.next_target,
            divergence=signal,
            session_range=self._session_range(context),
            session_open=context.session_open,
            liquidity_levels=tuple(context.liquidity_levels),
        )

        self.logger.debug(
            f"[Engine] {name}: {len(candidates)} candidates, {len(zones)} zones kept, "
            f"{len(all_markers)} markers, win_rate={win_rate:.2f} ({resolved} resolved)"
        )

        return AnalysisResult(
            zones=zones,
            bias=bias,
            markers=all_markers[-self.settings.max_markers:],
            liquidity_levels=list(context.liquidity_levels),
        )

    # ========================================================================
    # INTERNAL
    # ========================================================================

    def _run_detectors(
        self,
        candles: List[Candle],
        context: MarketContext,
    ) -> Tuple[List[ZoneCandidate], MarkerIndex, SwingTracker]:
        """
        Single forward pass over [scan_start, len - scan_tail).

        Per index: swing update, sweep, imbalance, structure break, order block.
        """
        swings = SwingTracker(context.trend_entry, self.settings.swing_wing)
        markers = MarkerIndex()
        candidates: List[ZoneCandidate] = []

        for i in range(self.settings.scan_start, len(candles) - self.settings.scan_tail):
            swings.update(candles, i)
            self.sweep_detector.detect(candles, i, context, markers)

            imbalance = self.imbalance_detector.detect(candles, i, context, swings)
            if imbalance is not None:
                candidates.append(imbalance)

            self.structure_detector.detect(candles, i, context, swings, markers)

            order_block = self.order_block_detector.detect(candles, i, context, swings)
            if order_block is not None:
                candidates.append(order_block)

        return candidates, markers, swings

    def _select_zones(self, candidates: List[ZoneCandidate], total: int) -> List[Zone]:
        """Keep high-score or recent zones, newest first, capped at max_zones."""
        s = self.settings
        recent_from = total - s.recency_override_candles
        kept = [
            c.zone for c in candidates
            if c.zone.score > s.min_zone_score or c.zone.formed_index >= recent_from
        ]
        kept.reverse()
        return kept[:s.max_zones]

    @staticmethod
    def _structure_state(markers) -> StructureState:
        for marker in reversed(markers):
            if marker.kind is MarkerKind.BOS:
                return StructureState.BOS
            if marker.kind is MarkerKind.CHOCH:
                return StructureState.CHOCH
        return StructureState.CONSOLIDATION

    @staticmethod
    def _session_range(context: MarketContext) -> Optional[Tuple[float, float]]:
        if context.session_high is None or context.session_low is None:
            return None
        return context.session_high, context.session_low

    @staticmethod
    def _coerce_divergence(divergence) -> DivergenceSignal:
        if divergence is None:
            return DivergenceSignal.none()
        if isinstance(divergence, DivergenceSignal):
            return divergence
        return DivergenceSignal.from_dict(divergence)


def count_outcomes(outcomes: Optional[Iterable[Any]]) -> Tuple[int, int]:
    """
    Count wins and losses in a history of trade outcomes.

    Accepts ZoneOutcome members or strings ("WIN"/"LOSS", any case);
    everything else is ignored.

    Returns:
        (wins, losses)
    """
    wins = losses = 0
    for outcome in outcomes or ():
        if isinstance(outcome, ZoneOutcome):
            label = outcome.value
        elif isinstance(outcome, str):
            label = outcome.strip().upper()
        else:
            continue

        if label == ZoneOutcome.WIN.value:
            wins += 1
        elif label == ZoneOutcome.LOSS.value:
            losses += 1
    return wins, losses


def analyze_market(
    entry: CandleInput,
    mid: CandleInput,
    high: CandleInput,
    *,
    instrument: Union[str, InstrumentConfig, None] = None,
    divergence: Union[DivergenceSignal, dict, str, None] = None,
    historical_outcomes: Optional[Iterable[Any]] = None,
    now: Optional[int] = None,
    settings: Optional[AnalysisSettings] = None,
) -> AnalysisResult:
    """
    Convenience wrapper: build an engine and run one analysis.

    Args:
        instrument: Instrument name (looked up in the built-in defaults) or
            an InstrumentConfig; None selects EURUSD

    See MarketStructureEngine.analyze for the remaining arguments.
    """
    if isinstance(instrument, InstrumentConfig):
        instrument_config = instrument
    else:
        instrument_config = get_instrument_config(instrument)

    engine = MarketStructureEngine(instrument_config, settings)
    return engine.analyze(
        entry,
        mid,
        high,
        divergence=divergence,
        historical_outcomes=historical_outcomes,
        now=now,
    )


__all__ = ["MarketStructureEngine", "analyze_market", "count_outcomes"]
