"""
StructuralMarker - Point-in-time annotation for sweeps and structure breaks.
"""

from dataclasses import dataclass

from ..enums import Direction, MarkerKind, MarkerStrength


@dataclass(frozen=True)
class StructuralMarker:
    """
    Chart annotation emitted by the sweep and structure-break detectors.

    `side` is the direction the event points to: a sweep of a high that
    closes back down is BEARISH, a break above a swing high is BULLISH.
    `price` is the level that was swept or broken.
    """
    time: int
    side: Direction
    kind: MarkerKind
    strength: MarkerStrength
    price: float

    @property
    def is_structure_break(self) -> bool:
        return self.kind in (MarkerKind.BOS, MarkerKind.CHOCH)

    def __repr__(self) -> str:
        return f"{self.kind.value}({self.side.value}, {self.price:.5f}, t={self.time})"
