"""
Share of Search Calculator

Brand awareness expressed as the brand's share of total branded search
demand across the comparison set (own brand + named competitors).

Formula:
    SOS = Σ volume(own brand keywords) / Σ volume(all brand keywords) × 100
"""

import logging
from dataclasses import dataclass
from typing import Dict, Any, Iterable

from searchshare.models import BrandKeyword
from .helpers import percentage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SOSResult:
    """Result of a Share of Search calculation."""
    share_of_search: float  # percentage, 1 decimal
    brand_volume: int
    total_brand_volume: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {
            "shareOfSearch": self.share_of_search,
            "brandVolume": self.brand_volume,
            "totalBrandVolume": self.total_brand_volume,
        }


def calculate_sos(brand_keywords: Iterable[BrandKeyword]) -> SOSResult:
    """
    Calculate Share of Search.

    Multiple own-brand entries (brand name plus variants) are summed
    together. Order of the input does not matter.

    Args:
        brand_keywords: Brand keywords with search volumes

    Returns:
        SOSResult. share_of_search is 0.0 when total volume is zero.
    """
    brand_volume = 0
    total_brand_volume = 0

    for kw in brand_keywords:
        total_brand_volume += kw.search_volume
        if kw.is_own_brand:
            brand_volume += kw.search_volume

    share_of_search = percentage(brand_volume, total_brand_volume)

    logger.debug(
        f"SOS: {brand_volume}/{total_brand_volume} -> {share_of_search}%"
    )

    return SOSResult(
        share_of_search=share_of_search,
        brand_volume=brand_volume,
        total_brand_volume=total_brand_volume,
    )


compute_sos = calculate_sos
