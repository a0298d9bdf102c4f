"""
Scoring Module for SearchShare

This module provides the brand visibility metrics:

1. **Share of Search** (0-100%)
   Brand awareness: own-brand search volume as a share of the total
   branded search volume of the comparison set.

2. **Share of Voice** (0-100%)
   Organic visibility: CTR-weighted visible volume as a share of total
   market volume for the keywords a domain ranks for.

3. **Growth Gap** (SOV - SOS)
   Classified into growth_potential, missing_opportunities or balanced.

4. **Actionable insights**
   Quick wins (positions 4-20 with click upside) and keyword
   cannibalization (several URLs ranking for one keyword).

Example Usage:
    from searchshare.models import BrandKeyword, RankedKeyword
    from searchshare.scoring import compute_all

    report = compute_all(
        [
            BrandKeyword(keyword="lavera", search_volume=12100, is_own_brand=True),
            BrandKeyword(keyword="weleda", search_volume=18100, is_own_brand=False),
        ],
        [
            RankedKeyword(keyword="naturkosmetik", search_volume=22200, position=4),
            RankedKeyword(keyword="bio gesichtscreme", search_volume=3600, position=2),
        ],
    )
    print(f"Share of Search: {report.sos.share_of_search}%")  # 40.1
    print(f"Share of Voice: {report.sov.share_of_voice}%")    # 7.3
    print(f"Growth Gap: {report.gap.gap}")                    # -32.8
"""

# Helper utilities and constants
from .helpers import (
    CTR_CURVE,
    FALLBACK_CTR,
    get_ctr_for_position,
    round_half_up,
    round_to_int,
    percentage,
)

# Share of Search
from .share_of_search import (
    SOSResult,
    calculate_sos,
    compute_sos,
)

# Share of Voice
from .share_of_voice import (
    SOVResult,
    calculate_keyword_visibility,
    calculate_sov,
    compute_sov,
    top_visible_keywords,
)

# Growth Gap
from .growth_gap import (
    GROWTH_GAP_THRESHOLD,
    GrowthInterpretation,
    GrowthGapResult,
    classify_growth_gap,
    calculate_growth_gap,
    compute_growth_gap,
)

# Actionable insights
from .insights import (
    Effort,
    CannibalizationFix,
    QuickWinOpportunity,
    CompetingUrl,
    CannibalizationIssue,
    get_target_position,
    get_effort,
    calculate_quick_wins,
    detect_cannibalization,
)

# Pipeline
from .engine import (
    MetricsInputError,
    MetricsReport,
    compute_all,
    compute_from_request,
)

__all__ = [
    # Helpers
    "CTR_CURVE",
    "FALLBACK_CTR",
    "get_ctr_for_position",
    "round_half_up",
    "round_to_int",
    "percentage",

    # Share of Search
    "SOSResult",
    "calculate_sos",
    "compute_sos",

    # Share of Voice
    "SOVResult",
    "calculate_keyword_visibility",
    "calculate_sov",
    "compute_sov",
    "top_visible_keywords",

    # Growth Gap
    "GROWTH_GAP_THRESHOLD",
    "GrowthInterpretation",
    "GrowthGapResult",
    "classify_growth_gap",
    "calculate_growth_gap",
    "compute_growth_gap",

    # Actionable insights
    "Effort",
    "CannibalizationFix",
    "QuickWinOpportunity",
    "CompetingUrl",
    "CannibalizationIssue",
    "get_target_position",
    "get_effort",
    "calculate_quick_wins",
    "detect_cannibalization",

    # Pipeline
    "MetricsInputError",
    "MetricsReport",
    "compute_all",
    "compute_from_request",
]
