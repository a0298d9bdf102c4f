"""
Growth Gap Calculator

Compares organic visibility (SOV) with brand demand (SOS):

    gap = SOV - SOS

    gap > +2  -> growth_potential       (visibility outpaces brand demand)
    gap < -2  -> missing_opportunities  (brand demand outpaces visibility)
    otherwise -> balanced

The gap is rounded before it is classified, and exactly ±2.0 is balanced.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any

from .helpers import round_half_up

logger = logging.getLogger(__name__)


GROWTH_GAP_THRESHOLD = 2.0


class GrowthInterpretation(str, Enum):
    """Growth gap buckets."""
    GROWTH_POTENTIAL = "growth_potential"
    MISSING_OPPORTUNITIES = "missing_opportunities"
    BALANCED = "balanced"


INTERPRETATION_LABELS: Dict[GrowthInterpretation, str] = {
    GrowthInterpretation.GROWTH_POTENTIAL: "Growth Potential",
    GrowthInterpretation.MISSING_OPPORTUNITIES: "Missing Opportunities",
    GrowthInterpretation.BALANCED: "Balanced",
}


@dataclass(frozen=True)
class GrowthGapResult:
    """Result of a growth gap calculation."""
    gap: float  # signed percentage points, 1 decimal
    interpretation: GrowthInterpretation

    @property
    def label(self) -> str:
        """Dashboard label for the bucket."""
        return INTERPRETATION_LABELS[self.interpretation]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {
            "gap": self.gap,
            "interpretation": self.interpretation.value,
        }


def classify_growth_gap(gap: float) -> GrowthInterpretation:
    """
    Classify a (rounded) gap into a bucket.

    Args:
        gap: SOV minus SOS in percentage points

    Returns:
        GrowthInterpretation enum
    """
    if gap > GROWTH_GAP_THRESHOLD:
        return GrowthInterpretation.GROWTH_POTENTIAL
    elif gap < -GROWTH_GAP_THRESHOLD:
        return GrowthInterpretation.MISSING_OPPORTUNITIES
    else:
        return GrowthInterpretation.BALANCED


def calculate_growth_gap(share_of_search: float, share_of_voice: float) -> GrowthGapResult:
    """
    Calculate the growth gap between brand demand and organic visibility.

    Args:
        share_of_search: SOS percentage
        share_of_voice: SOV percentage

    Returns:
        GrowthGapResult
    """
    gap = round_half_up(share_of_voice - share_of_search, 1)
    interpretation = classify_growth_gap(gap)

    logger.debug(f"Growth gap: {share_of_voice} - {share_of_search} = {gap} ({interpretation.value})")

    return GrowthGapResult(gap=gap, interpretation=interpretation)


compute_growth_gap = calculate_growth_gap
