"""
Share of Voice Calculator

Organic visibility expressed as the CTR-weighted share of total market
search demand for the keywords a domain ranks for.

Formula:
    visible_i = round(volume_i × CTR(position_i))
    SOV = Σ visible_i / Σ volume_i × 100

Each keyword's visible volume is rounded before summing, so the breakdown
always adds up to the reported total.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Any, Iterable, List, Tuple

from searchshare.models import RankedKeyword
from .helpers import get_ctr_for_position, percentage, round_to_int

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SOVResult:
    """Result of a Share of Voice calculation."""
    share_of_voice: float  # percentage, 1 decimal
    visible_volume: int
    total_market_volume: int
    keyword_breakdown: Tuple[RankedKeyword, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {
            "shareOfVoice": self.share_of_voice,
            "visibleVolume": self.visible_volume,
            "totalMarketVolume": self.total_market_volume,
            "keywordBreakdown": [kw.to_dict() for kw in self.keyword_breakdown],
        }


def calculate_keyword_visibility(keyword: RankedKeyword) -> RankedKeyword:
    """
    Attach CTR and visible volume to a single ranked keyword.

    Args:
        keyword: Ranked keyword (position <= 0 yields zero visibility)

    Returns:
        Copy of the keyword with ctr (percent, 1 decimal) and
        visible_volume (rounded clicks) populated
    """
    ctr_fraction = get_ctr_for_position(keyword.position)
    visible_volume = round_to_int(keyword.search_volume * ctr_fraction)
    ctr = round_to_int(ctr_fraction * 1000) / 10

    return keyword.with_visibility(ctr=ctr, visible_volume=visible_volume)


def calculate_sov(ranked_keywords: Iterable[RankedKeyword]) -> SOVResult:
    """
    Calculate Share of Voice.

    Args:
        ranked_keywords: Keywords the domain ranks for, with positions

    Returns:
        SOVResult with a per-keyword breakdown in input order.
        share_of_voice is 0.0 when total market volume is zero.
    """
    breakdown = tuple(calculate_keyword_visibility(kw) for kw in ranked_keywords)

    visible_volume = sum(kw.visible_volume for kw in breakdown)
    total_market_volume = sum(kw.search_volume for kw in breakdown)

    share_of_voice = percentage(visible_volume, total_market_volume)

    logger.debug(
        f"SOV: {visible_volume}/{total_market_volume} visible across "
        f"{len(breakdown)} keywords -> {share_of_voice}%"
    )

    return SOVResult(
        share_of_voice=share_of_voice,
        visible_volume=visible_volume,
        total_market_volume=total_market_volume,
        keyword_breakdown=breakdown,
    )


compute_sov = calculate_sov


def top_visible_keywords(result: SOVResult, limit: int = 10) -> List[RankedKeyword]:
    """
    Get the keywords contributing the most visible volume.

    Args:
        result: SOV result
        limit: Maximum keywords to return

    Returns:
        Breakdown entries sorted by visible volume, highest first.
        Ties keep their input order.
    """
    ranked = sorted(
        result.keyword_breakdown,
        key=lambda kw: kw.visible_volume or 0,
        reverse=True,
    )
    return ranked[:limit]
