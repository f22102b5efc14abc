"""
Candles Validator - Validates candle series before analysis

This module rejects input that would otherwise poison comparisons inside
the detectors (NaN never compares true, so a single bad bar silently
changes swings, breaks and scores):
- Malformed records (missing keys, non-numeric values)
- Non-finite prices or timestamps
- Inverted ranges (high < low)
- Out-of-order or duplicate timestamps
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from ..analysis.models.candle import Candle


@dataclass
class ValidationIssue:
    """Represents a single validation issue found in candle data"""
    issue_type: str  # 'malformed', 'non_finite', 'invalid_range', 'unordered', 'duplicate'
    timeframe: str
    index: int
    timestamp: Optional[int] = None
    description: str = ""

    def __str__(self) -> str:
        return f"[{self.timeframe}#{self.index}] {self.issue_type}: {self.description}"


class InvalidInputError(ValueError):
    """Raised when a candle series fails validation."""

    def __init__(self, issues: List[ValidationIssue]):
        self.issues = issues
        shown = "; ".join(str(i) for i in issues[:5])
        more = f" (+{len(issues) - 5} more)" if len(issues) > 5 else ""
        super().__init__(f"Invalid candle input: {shown}{more}")

    def get_issues_by_type(self, issue_type: str) -> List[ValidationIssue]:
        """Get all issues of a specific type"""
        return [issue for issue in self.issues if issue.issue_type == issue_type]


class CandlesValidator:
    """
    Validates candle series for integrity issues

    Performs the following validations:
    1. Record shape - dicts must carry time/ts and OHLC numbers
    2. Finiteness - no NaN or infinite price/time
    3. Range - high >= low
    4. Ordering - strictly ascending, unique timestamps
    """

    def coerce(self, candles: Sequence[Any], timeframe: str) -> List[Candle]:
        """
        Convert a series to Candle objects and validate it.

        Args:
            candles: Candle objects or price-feed dicts
            timeframe: Label used in issue messages (e.g. "entry")

        Returns:
            List of Candle objects

        Raises:
            InvalidInputError: if any issue is found
        """
        converted: List[Candle] = []
        issues: List[ValidationIssue] = []

        for idx, raw in enumerate(candles):
            if isinstance(raw, Candle):
                converted.append(raw)
                continue
            try:
                converted.append(Candle.from_dict(raw))
            except (KeyError, TypeError, ValueError, OverflowError) as e:
                issues.append(ValidationIssue(
                    issue_type="malformed",
                    timeframe=timeframe,
                    index=idx,
                    description=f"cannot read candle: {e!r}",
                ))

        if issues:
            raise InvalidInputError(issues)

        issues = self.validate(converted, timeframe)
        if issues:
            raise InvalidInputError(issues)
        return converted

    def validate(self, candles: Sequence[Candle], timeframe: str) -> List[ValidationIssue]:
        """Return every issue found in the series (empty list when clean)."""
        issues: List[ValidationIssue] = []
        prev_time: Optional[float] = None

        for idx, candle in enumerate(candles):
            values = (candle.time, candle.open, candle.high, candle.low, candle.close)
            if not all(self._is_finite(v) for v in values):
                issues.append(ValidationIssue(
                    issue_type="non_finite",
                    timeframe=timeframe,
                    index=idx,
                    timestamp=candle.time if self._is_finite(candle.time) else None,
                    description=f"non-finite value in {values}",
                ))
                # Ordering cannot be judged against a bad timestamp
                prev_time = None
                continue

            if candle.high < candle.low:
                issues.append(ValidationIssue(
                    issue_type="invalid_range",
                    timeframe=timeframe,
                    index=idx,
                    timestamp=candle.time,
                    description=f"high {candle.high} < low {candle.low}",
                ))

            if prev_time is not None:
                if candle.time == prev_time:
                    issues.append(ValidationIssue(
                        issue_type="duplicate",
                        timeframe=timeframe,
                        index=idx,
                        timestamp=candle.time,
                        description="timestamp repeats the previous candle",
                    ))
                elif candle.time < prev_time:
                    issues.append(ValidationIssue(
                        issue_type="unordered",
                        timeframe=timeframe,
                        index=idx,
                        timestamp=candle.time,
                        description=f"timestamp {candle.time} before previous {prev_time}",
                    ))
            prev_time = candle.time

        return issues

    @staticmethod
    def _is_finite(value: Any) -> bool:
        try:
            return math.isfinite(value)
        except TypeError:
            return False


def validate_series(series: Dict[str, Sequence[Any]]) -> Dict[str, List[Candle]]:
    """
    Coerce and validate several named series at once.

    All issues across all series are collected before raising, so callers
    see the full picture in one error.

    Raises:
        InvalidInputError: if any series has issues
    """
    validator = CandlesValidator()
    result: Dict[str, List[Candle]] = {}
    issues: List[ValidationIssue] = []

    for timeframe, candles in series.items():
        try:
            result[timeframe] = validator.coerce(candles, timeframe)
        except InvalidInputError as e:
            issues.extend(e.issues)

    if issues:
        raise InvalidInputError(issues)
    return result


__all__ = ["ValidationIssue", "InvalidInputError", "CandlesValidator", "validate_series"]
