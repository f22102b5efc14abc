"""
LiquidityLevel - Reference price where resting liquidity is expected.
"""

from dataclasses import dataclass

from ..enums import LevelKind, LevelStyle


@dataclass(frozen=True)
class LiquidityLevel:
    """
    Prior-day high/low, session range high/low or session open.

    Stops cluster beyond these prices, which makes them the usual targets
    of liquidity sweeps. Recomputed on every analysis call.
    """
    price: float
    label: str
    kind: LevelKind
    style: LevelStyle = LevelStyle.SOLID

    def __repr__(self) -> str:
        return f"{self.label}({self.price:.5f})"
