"""
Marker Index

Time-sorted store of emitted structural markers. Detectors ask it whether
another marker already sits within a window around a timestamp before
emitting, so one event is never annotated twice.
"""

from bisect import bisect_right
from typing import List

from .models import StructuralMarker


class MarkerIndex:
    """
    Sorted-by-time marker collection with window lookups.

    Lookups are O(log n) via bisect on a parallel list of times; insertion
    keeps both lists sorted even if markers arrive out of order.
    """

    def __init__(self):
        self._times: List[int] = []
        self._markers: List[StructuralMarker] = []

    def __len__(self) -> int:
        return len(self._markers)

    def has_within(self, time: float, window_seconds: float) -> bool:
        """
        Check for a marker strictly closer than `window_seconds` to `time`.

        Args:
            time: Candidate marker time (unix seconds, int or float)
            window_seconds: Half-width of the exclusion window
        """
        # First stored time > time - window
        pos = bisect_right(self._times, time - window_seconds)
        return pos < len(self._times) and self._times[pos] < time + window_seconds

    def add(self, marker: StructuralMarker) -> None:
        # Stable for equal times: insert after existing entries
        pos = bisect_right(self._times, marker.time)
        self._times.insert(pos, marker.time)
        self._markers.insert(pos, marker)

    def add_if_clear(self, marker: StructuralMarker, window_seconds: int) -> bool:
        """
        Add the marker unless another one is inside the window.

        Returns:
            True if the marker was added
        """
        if self.has_within(marker.time, window_seconds):
            return False
        self.add(marker)
        return True

    def to_list(self) -> List[StructuralMarker]:
        """Markers in chronological order."""
        return list(self._markers)
