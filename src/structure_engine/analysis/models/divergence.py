"""
DivergenceSignal - Cross-asset divergence supplied by the correlation service.
"""

from dataclasses import dataclass
from typing import Any, Dict, Union

from ..enums import DivergenceDirection


@dataclass(frozen=True)
class DivergenceSignal:
    """Direction and strength (0-100) of a cross-asset divergence."""
    direction: DivergenceDirection = DivergenceDirection.NONE
    strength: float = 0.0

    @classmethod
    def none(cls) -> "DivergenceSignal":
        return cls()

    @classmethod
    def from_dict(cls, obj: Union[Dict[str, Any], str, None]) -> "DivergenceSignal":
        """
        Parse the correlation service payload.

        Accepts "bullish" as well as the dashboard label "Bullish SMT", either
        as a {"direction", "strength"} dict or as a bare label string.
        Unknown or missing directions map to NONE and a missing or
        non-numeric strength maps to 0.0, so that an absent signal never
        fails the analysis.
        """
        if not obj:
            return cls.none()
        if isinstance(obj, str):
            obj = {"direction": obj}
        elif not isinstance(obj, dict):
            return cls.none()

        words = str(obj.get("direction") or "none").lower().split()
        raw = words[0] if words else "none"
        try:
            direction = DivergenceDirection(raw)
        except ValueError:
            direction = DivergenceDirection.NONE

        try:
            strength = float(obj.get("strength") or 0.0)
        except (TypeError, ValueError):
            strength = 0.0
        return cls(direction=direction, strength=strength)
