"""
AnalysisResult - Public output of one engine invocation.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .bias import Bias
from .liquidity_level import LiquidityLevel
from .structural_marker import StructuralMarker
from .zone import Zone


@dataclass
class AnalysisResult:
    """
    Zones, bias, markers and liquidity levels as independent collections.

    Unpacks like a tuple:
        zones, bias, markers, levels = engine.analyze(...)

    An empty result (bias is None) means "not enough data", not
    "no setups found".
    """
    zones: List[Zone] = field(default_factory=list)
    bias: Optional[Bias] = None
    markers: List[StructuralMarker] = field(default_factory=list)
    liquidity_levels: List[LiquidityLevel] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "AnalysisResult":
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.bias is None

    def __iter__(self) -> Iterator:
        return iter((self.zones, self.bias, self.markers, self.liquidity_levels))
