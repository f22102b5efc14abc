"""
Zone Scorer

Turns detector flags and market context into a confluence score (0-100)
plus the ordered list of reasons behind it.

Weights:
    Alignment        +30 full MTF / +20 entry+mid / +10 entry only / -25 counter-trend
    Liquidity sweep  +15
    Structure break  +15
    Displacement     +10
    Unicorn overlap  +15
    Premium/discount +10
    Divergence       +5

Tags are appended in the order above. Consumers may rely on that order.
"""

from typing import List, Optional, Tuple

from .enums import Direction, DivergenceDirection, PremiumDiscount
from .models import DivergenceSignal, MarketContext, ZoneCandidate
from .settings import AnalysisSettings

FULL_ALIGNMENT_BONUS = 30
MID_ALIGNMENT_BONUS = 20
ENTRY_ALIGNMENT_BONUS = 10
COUNTER_TREND_PENALTY = -25
SWEEP_BONUS = 15
STRUCTURE_BREAK_BONUS = 15
DISPLACEMENT_BONUS = 10
UNICORN_BONUS = 15
PREMIUM_DISCOUNT_BONUS = 10
DIVERGENCE_BONUS = 5

MIN_SCORE = 0
MAX_SCORE = 100


class ZoneScorer:
    """
    Deterministic weighted-sum scorer.

    A neutral entry trend neither rewards nor penalizes alignment.
    """

    def __init__(self, settings: AnalysisSettings):
        self.min_divergence_strength = settings.min_divergence_strength

    def score(
        self,
        candidate: ZoneCandidate,
        context: MarketContext,
        divergence: Optional[DivergenceSignal] = None,
    ) -> Tuple[int, List[str]]:
        """
        Score one candidate.

        Args:
            candidate: Detector output with confluence flags
            context: Per-call market context
            divergence: Optional cross-asset divergence signal

        Returns:
            (score clamped to 0-100, confluence tags in evaluation order)
        """
        direction = candidate.zone.direction
        total = 0
        tags: List[str] = []

        # 1. Multi-timeframe alignment
        if context.trend_entry is not Direction.NEUTRAL:
            if context.trend_entry is not direction:
                total += COUNTER_TREND_PENALTY
                tags.append("Counter-trend")
            elif context.trend_mid is direction and context.trend_high is direction:
                total += FULL_ALIGNMENT_BONUS
                tags.append("Full MTF alignment")
            elif context.trend_mid is direction:
                total += MID_ALIGNMENT_BONUS
                tags.append("Entry + mid timeframe alignment")
            else:
                total += ENTRY_ALIGNMENT_BONUS
                tags.append("Entry timeframe alignment")

        # 2. Detector flags
        if candidate.has_sweep:
            total += SWEEP_BONUS
            tags.append("Liquidity sweep")
        if candidate.has_structure_break:
            total += STRUCTURE_BREAK_BONUS
            tags.append("Structure break")
        if candidate.has_displacement:
            total += DISPLACEMENT_BONUS
            tags.append("Displacement")
        if candidate.has_unicorn:
            total += UNICORN_BONUS
            tags.append("Unicorn overlap")

        # 3. Premium / discount of the formation candle
        position = context.zone_position(candidate.formation_close)
        if direction is Direction.BULLISH and position is PremiumDiscount.DISCOUNT:
            total += PREMIUM_DISCOUNT_BONUS
            tags.append("Discount zone")
        elif direction is Direction.BEARISH and position is PremiumDiscount.PREMIUM:
            total += PREMIUM_DISCOUNT_BONUS
            tags.append("Premium zone")

        # 4. Cross-asset divergence
        if self._divergence_confirms(direction, divergence):
            total += DIVERGENCE_BONUS
            tags.append("Divergence confirmation")

        return max(MIN_SCORE, min(MAX_SCORE, total)), tags

    def _divergence_confirms(self, direction: Direction, divergence: Optional[DivergenceSignal]) -> bool:
        if divergence is None or divergence.direction is DivergenceDirection.NONE:
            return False
        if divergence.strength < self.min_divergence_strength:
            return False
        if direction is Direction.BULLISH:
            return divergence.direction is DivergenceDirection.BULLISH
        return divergence.direction is DivergenceDirection.BEARISH
