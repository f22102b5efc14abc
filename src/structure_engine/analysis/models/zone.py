"""
Zone - A detected supply/demand region with a lifecycle.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..enums import Direction, ZoneKind, ZoneOutcome, ZoneStatus


@dataclass
class Zone:
    """
    Order block, imbalance gap or unicorn setup.

    Zones are produced fresh on every analysis call; nothing is carried
    across calls. `status` and `outcome` are filled in by the lifecycle
    resolver after detection, `score` and `confluence` by the scorer.

    `confluence` preserves evaluation order: consumers may rely on the
    order of the tags, not only their presence.
    """
    zone_id: str                     # "<prefix>-<candle index>"
    kind: ZoneKind
    direction: Direction             # BULLISH or BEARISH
    price_top: float
    price_bottom: float
    formed_at: int                   # Formation candle time (unix seconds)
    formed_index: int                # Formation candle index in the entry series
    status: ZoneStatus = ZoneStatus.FRESH
    outcome: ZoneOutcome = ZoneOutcome.OPEN
    score: int = 0
    confluence: List[str] = field(default_factory=list)
    retest_time: Optional[int] = None    # First re-entry candle time
    test_count: int = 0
    last_test_time: Optional[int] = None
    age: int = 0                     # Candles between formation and the last candle

    @property
    def midpoint(self) -> float:
        return (self.price_top + self.price_bottom) / 2

    @property
    def is_bullish(self) -> bool:
        return self.direction is Direction.BULLISH

    @property
    def is_resolved(self) -> bool:
        """True once the lifecycle produced a WIN or LOSS."""
        return self.outcome is not ZoneOutcome.OPEN

    @property
    def target_price(self) -> float:
        """1:2 target measured from the midpoint, risk to the far edge."""
        if self.is_bullish:
            return self.midpoint + 2 * (self.midpoint - self.price_bottom)
        return self.midpoint - 2 * (self.price_top - self.midpoint)

    def __repr__(self) -> str:
        return (
            f"Zone({self.zone_id}, {self.kind.value}, "
            f"{self.price_bottom:.5f}-{self.price_top:.5f}, "
            f"{self.status.value}, score={self.score})"
        )
