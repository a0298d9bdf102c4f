"""
Scoring Helper Functions and Constants

Contains the positional CTR curve and the rounding utilities shared by the
Share of Search, Share of Voice and Growth Gap calculations.
"""

from decimal import Decimal, ROUND_HALF_UP
from types import MappingProxyType
from typing import Mapping, Union

Number = Union[int, float]


# ============================================================================
# CTR CURVE (organic click-through rate by SERP position)
# ============================================================================

# Stored calculations depend on these exact values. Do not retune.
CTR_CURVE: Mapping[int, float] = MappingProxyType({
    1: 0.28,    # 28% CTR for position 1
    2: 0.15,    # 15%
    3: 0.09,    # 9%
    4: 0.06,    # 6%
    5: 0.04,    # 4%
    6: 0.03,    # 3%
    7: 0.025,   # 2.5%
    8: 0.02,    # 2%
    9: 0.018,   # 1.8%
    10: 0.015,  # 1.5%
    11: 0.012,  # Page 2
    12: 0.01,
    13: 0.009,
    14: 0.008,
    15: 0.007,
    16: 0.006,
    17: 0.005,
    18: 0.004,
    19: 0.003,
    20: 0.002,
})

MAX_CURVE_POSITION = 20

# Residual traffic for indexed pages beyond page 2
FALLBACK_CTR = 0.001


def get_ctr_for_position(position: int) -> float:
    """
    Get expected CTR for a SERP position.

    Args:
        position: Organic rank position (any integer)

    Returns:
        CTR as decimal (0.0 - 1.0). 0.0 for positions <= 0,
        FALLBACK_CTR beyond position 20.
    """
    if position <= 0:
        return 0.0
    if position > MAX_CURVE_POSITION:
        return FALLBACK_CTR
    return CTR_CURVE.get(position, FALLBACK_CTR)


# ============================================================================
# ROUNDING
# ============================================================================

def round_half_up(value: Number, digits: int = 1) -> float:
    """
    Round half away from zero.

    Works on the shortest decimal repr of the float, so 2.25 -> 2.3 and
    -2.25 -> -2.3 (builtin round() would give 2.2).

    Args:
        value: Number to round
        digits: Decimal places to keep

    Returns:
        Rounded float
    """
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded)


def round_to_int(value: Number) -> int:
    """Round half away from zero to the nearest integer."""
    return int(Decimal(str(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def percentage(part: Number, whole: Number) -> float:
    """
    Express part as a percentage of whole, rounded to one decimal.

    Returns 0.0 when whole is zero instead of dividing.
    """
    if whole == 0:
        return 0.0
    return round_half_up(part / whole * 100, 1)
