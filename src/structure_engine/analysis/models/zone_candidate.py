"""
ZoneCandidate - Detector output before scoring and lifecycle resolution.
"""

from dataclasses import dataclass

from .zone import Zone


@dataclass
class ZoneCandidate:
    """
    A freshly detected zone plus the confluence flags the scorer reads.

    `confirmed_index` is the last candle the detector needed to see before
    the zone existed (for order blocks the third candle of the last
    gap the unicorn check reads past the displacement leg, for imbalances
    the third gap candle).
    """
    zone: Zone
    confirmed_index: int
    formation_close: float
    has_sweep: bool = False
    has_structure_break: bool = False
    has_displacement: bool = False
    has_unicorn: bool = False
