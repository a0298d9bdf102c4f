"""
Demo keyword sets (natural cosmetics, German market).

Own-brand volume 13880 of 79280 branded searches; 46580 monthly searches
across the ten ranked keywords.
"""

from typing import Dict, Any, Tuple

from searchshare.models import BrandKeyword, RankedKeyword


SAMPLE_BRAND_KEYWORDS: Tuple[BrandKeyword, ...] = (
    BrandKeyword(keyword="lavera", search_volume=12100, is_own_brand=True),
    BrandKeyword(keyword="lavera naturkosmetik", search_volume=1300, is_own_brand=True),
    BrandKeyword(keyword="lavera lippenstift", search_volume=480, is_own_brand=True),
    BrandKeyword(keyword="weleda", search_volume=18100, is_own_brand=False),
    BrandKeyword(keyword="dr hauschka", search_volume=14800, is_own_brand=False),
    BrandKeyword(keyword="annemarie börlind", search_volume=5400, is_own_brand=False),
    BrandKeyword(keyword="alverde", search_volume=27100, is_own_brand=False),
)

SAMPLE_RANKED_KEYWORDS: Tuple[RankedKeyword, ...] = (
    RankedKeyword(keyword="naturkosmetik", search_volume=22200, position=4, url="/naturkosmetik"),
    RankedKeyword(keyword="bio gesichtscreme", search_volume=3600, position=2, url="/gesichtspflege"),
    RankedKeyword(keyword="vegane kosmetik", search_volume=4400, position=3, url="/vegan"),
    RankedKeyword(keyword="natürliche hautpflege", search_volume=2900, position=1, url="/hautpflege"),
    RankedKeyword(keyword="bio lippenstift", search_volume=1900, position=5, url="/lippen"),
    RankedKeyword(keyword="naturkosmetik gesicht", search_volume=2400, position=6, url="/gesicht"),
    RankedKeyword(keyword="bio shampoo", search_volume=5400, position=8, url="/haarpflege"),
    RankedKeyword(keyword="naturkosmetik marken", search_volume=1600, position=2, url="/marken"),
    RankedKeyword(keyword="zertifizierte naturkosmetik", search_volume=880, position=1, url="/zertifiziert"),
    RankedKeyword(keyword="bio bodylotion", search_volume=1300, position=7, url="/koerperpflege"),
)


def sample_request_body() -> Dict[str, Any]:
    """Sample data as a camelCase calculation request body."""
    return {
        "brandKeywords": [kw.to_dict() for kw in SAMPLE_BRAND_KEYWORDS],
        "rankedKeywords": [kw.to_dict() for kw in SAMPLE_RANKED_KEYWORDS],
    }
