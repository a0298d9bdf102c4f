"""
Input Quality Boundary

Turns untyped request bodies into validated keyword records.
"""

from .validators import (
    ValidationResult,
    KeywordValidator,
    validate_brand_keywords,
    validate_ranked_keywords,
    validate_calculate_request,
)
from .schemas import (
    BrandKeywordIn,
    RankedKeywordIn,
    CalculateRequest,
    limits_context,
)

__all__ = [
    "ValidationResult",
    "KeywordValidator",
    "validate_brand_keywords",
    "validate_ranked_keywords",
    "validate_calculate_request",
    "BrandKeywordIn",
    "RankedKeywordIn",
    "CalculateRequest",
    "limits_context",
]
