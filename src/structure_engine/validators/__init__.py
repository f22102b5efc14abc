"""Input validators."""
from .candles_validator import (
    CandlesValidator,
    InvalidInputError,
    ValidationIssue,
    validate_series,
)

__all__ = ["CandlesValidator", "InvalidInputError", "ValidationIssue", "validate_series"]
