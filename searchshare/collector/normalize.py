"""
Provider Response Normalization

Maps raw DataForSEO items onto the typed keyword records used by the
scoring engine. Fetching the data is the caller's job; these functions only
reshape responses that have already been received.
"""

import logging
from typing import Dict, Any, List, Optional

from searchshare.models import BrandKeyword, RankedKeyword

logger = logging.getLogger(__name__)


def extract_items(response: Dict[str, Any], nested: bool = True) -> List[Dict[str, Any]]:
    """
    Pull the item list out of a raw DataForSEO response.

    Args:
        response: Raw API response
        nested: True for Labs endpoints (tasks[0].result[0].items),
            False for Google Ads endpoints (tasks[0].result)

    Returns:
        List of items, empty if any level is missing
    """
    tasks = response.get("tasks") or [{}]
    result = (tasks[0] or {}).get("result") or []
    if not nested:
        return result
    if not result:
        return []
    return (result[0] or {}).get("items") or []


def normalize_ranked_keyword_items(items: List[Dict[str, Any]]) -> List[RankedKeyword]:
    """
    Convert Labs ranked_keywords items into RankedKeyword records.

    Args:
        items: Items from dataforseo_labs/google/ranked_keywords/live

    Returns:
        List of RankedKeyword in provider order
    """
    keywords = []
    skipped = 0

    for item in items:
        kw_data = item.get("keyword_data") or {}
        kw_info = kw_data.get("keyword_info") or {}
        serp_item = (item.get("ranked_serp_element") or {}).get("serp_item") or {}

        keyword = kw_data.get("keyword")
        if not keyword:
            skipped += 1
            continue

        keywords.append(RankedKeyword(
            keyword=keyword,
            search_volume=kw_info.get("search_volume") or 0,
            position=serp_item.get("rank_group") or 0,
            url=serp_item.get("relative_url"),
        ))

    if skipped:
        logger.debug(f"Skipped {skipped} ranked keyword items without a keyword")

    return keywords


def normalize_search_volume_items(
    items: List[Dict[str, Any]],
    brand_name: Optional[str],
) -> List[BrandKeyword]:
    """
    Convert Google Ads search_volume items into BrandKeyword records.

    A keyword counts as own brand when it contains the brand name
    (case-insensitive).

    Args:
        items: Items from keywords_data/google_ads/search_volume/live
        brand_name: Subject brand name

    Returns:
        List of BrandKeyword in provider order
    """
    brand = (brand_name or "").strip().lower()
    keywords = []

    for item in items:
        keyword = item.get("keyword")
        if not keyword:
            continue

        keywords.append(BrandKeyword(
            keyword=keyword,
            search_volume=item.get("search_volume") or 0,
            is_own_brand=bool(brand) and brand in keyword.lower(),
        ))

    return keywords
