"""
Pytest Configuration and Shared Fixtures

Provides common fixtures and configuration for all test modules.
"""

import pytest
from typing import Dict, Any, List

from searchshare.models import BrandKeyword, RankedKeyword
from searchshare.utils.config import Settings, get_settings


# ============================================================================
# Settings
# ============================================================================

@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings fresh from the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def small_limits() -> Settings:
    """Settings with tight request limits."""
    return Settings(MAX_BRAND_KEYWORDS=3, MAX_RANKED_KEYWORDS=2, MAX_POSITION=50)


# ============================================================================
# Keyword Fixtures
# ============================================================================

@pytest.fixture
def brand_keywords() -> List[BrandKeyword]:
    """Own brand vs. one competitor."""
    return [
        BrandKeyword(keyword="lavera", search_volume=12100, is_own_brand=True),
        BrandKeyword(keyword="weleda", search_volume=18100, is_own_brand=False),
    ]


@pytest.fixture
def ranked_keywords() -> List[RankedKeyword]:
    """Two ranked keywords at positions 4 and 2."""
    return [
        RankedKeyword(keyword="kw1", search_volume=22200, position=4),
        RankedKeyword(keyword="kw2", search_volume=3600, position=2),
    ]


@pytest.fixture
def calculate_body() -> Dict[str, Any]:
    """A valid camelCase calculation request body."""
    return {
        "brandKeywords": [
            {"keyword": "lavera", "searchVolume": 12100, "isOwnBrand": True},
            {"keyword": "weleda", "searchVolume": 18100, "isOwnBrand": False},
        ],
        "rankedKeywords": [
            {"keyword": "kw1", "searchVolume": 22200, "position": 4, "url": "/kw1"},
            {"keyword": "kw2", "searchVolume": 3600, "position": 2},
        ],
    }


# ============================================================================
# Provider Response Fixtures
# ============================================================================

@pytest.fixture
def ranked_keywords_response() -> Dict[str, Any]:
    """Raw DataForSEO Labs ranked_keywords response."""
    return {
        "status_code": 20000,
        "tasks": [{
            "status_code": 20000,
            "result": [{
                "target": "lavera.de",
                "total_count": 3,
                "items": [
                    {
                        "keyword_data": {
                            "keyword": "naturkosmetik",
                            "keyword_info": {"search_volume": 22200, "cpc": 0.8},
                        },
                        "ranked_serp_element": {
                            "serp_item": {
                                "rank_group": 4,
                                "rank_absolute": 5,
                                "relative_url": "/naturkosmetik",
                                "url": "https://www.lavera.de/naturkosmetik",
                            },
                            "etv": 1200.5,
                        },
                    },
                    {
                        "keyword_data": {
                            "keyword": "bio gesichtscreme",
                            "keyword_info": {"search_volume": None},
                        },
                        "ranked_serp_element": {
                            "serp_item": {"rank_group": 2, "relative_url": "/gesichtspflege"},
                        },
                    },
                    {
                        "keyword_data": {"keyword_info": {"search_volume": 100}},
                        "ranked_serp_element": {"serp_item": {"rank_group": 9}},
                    },
                ],
            }],
        }],
    }


@pytest.fixture
def search_volume_response() -> Dict[str, Any]:
    """Raw DataForSEO Google Ads search_volume response."""
    return {
        "status_code": 20000,
        "tasks": [{
            "status_code": 20000,
            "result": [
                {"keyword": "lavera", "search_volume": 12100},
                {"keyword": "Lavera Naturkosmetik", "search_volume": 1300},
                {"keyword": "weleda", "search_volume": 18100},
                {"keyword": "alverde", "search_volume": None},
            ],
        }],
    }
