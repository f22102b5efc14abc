"""
Enumerations for the analysis engine.

Centralized location for all enum types used across the analysis package.
"""

from enum import Enum


# ============================================================================
# DIRECTION / TREND ENUMS
# ============================================================================

class Direction(Enum):
    """Directional state of a trend, zone or event."""
    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"


class StructureState(Enum):
    """Most recent structural event on the entry timeframe."""
    BOS = "BOS"
    CHOCH = "ChoCh"
    CONSOLIDATION = "Consolidation"


class PremiumDiscount(Enum):
    """Close position relative to the recent range midpoint."""
    PREMIUM = "premium"
    DISCOUNT = "discount"
    EQUILIBRIUM = "equilibrium"


class VolatilityClass(Enum):
    """ATR-based volatility bucket."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


# ============================================================================
# SESSION ENUMS
# ============================================================================

class DailyBias(Enum):
    """Power-of-three phase of the trading day (UTC hour based)."""
    ACCUMULATION = "accumulation"    # 00-07 UTC
    MANIPULATION = "manipulation"    # 07-12 UTC
    DISTRIBUTION = "distribution"    # 12-24 UTC


class Session(Enum):
    """Trading session by UTC hour."""
    ASIA = "asia"            # 00-07 UTC
    LONDON = "london"        # 07-12 UTC
    NEW_YORK = "new_york"    # 12-21 UTC
    CLOSE = "close"          # 21-24 UTC


# ============================================================================
# ZONE ENUMS
# ============================================================================

class ZoneKind(Enum):
    """Detected zone variant."""
    BULLISH_ORDER_BLOCK = "Bullish OB"
    BEARISH_ORDER_BLOCK = "Bearish OB"
    BULLISH_IMBALANCE = "Bullish FVG"
    BEARISH_IMBALANCE = "Bearish FVG"
    UNICORN_SETUP = "Unicorn Setup"   # Order block whose displacement leg holds an FVG


class ZoneStatus(Enum):
    """Zone lifecycle. Only moves forward: FRESH -> TESTED -> BROKEN."""
    FRESH = "FRESH"
    TESTED = "TESTED"
    BROKEN = "BROKEN"


class ZoneOutcome(Enum):
    """Realized trade outcome of a zone."""
    OPEN = "OPEN"
    WIN = "WIN"
    LOSS = "LOSS"


class LabelingMode(Enum):
    """Where the lifecycle scan starts relative to the formation candle."""
    LOOKAHEAD = "lookahead"   # First candle after formation
    CAUSAL = "causal"         # First candle after the zone was confirmed


# ============================================================================
# MARKER / LEVEL ENUMS
# ============================================================================

class MarkerKind(Enum):
    """Structural event annotation type."""
    SWEEP = "SWEEP"
    BOS = "BOS"
    CHOCH = "ChoCh"


class MarkerStrength(Enum):
    """Visual weight of a marker."""
    MINOR = "minor"
    MAJOR = "major"


class LevelKind(Enum):
    """Reference liquidity level source."""
    PREVIOUS_DAY_HIGH = "previous_day_high"
    PREVIOUS_DAY_LOW = "previous_day_low"
    SESSION_HIGH = "session_high"
    SESSION_LOW = "session_low"
    SESSION_OPEN = "session_open"


class LevelStyle(Enum):
    """Line style hint for chart overlays."""
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"


class DivergenceDirection(Enum):
    """Cross-asset divergence signal direction."""
    BULLISH = "bullish"
    BEARISH = "bearish"
    NONE = "none"
