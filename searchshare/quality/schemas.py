"""
Request Schemas

Pydantic models for the ``brandKeywords`` / ``rankedKeywords`` request
body. Numbers, booleans and strings are strict (no "100" for a volume,
no 1 for a flag). Fractional volumes and positions are floored.

Collection limits and the maximum position are read from the validation
context so they follow Settings:

    CalculateRequest.model_validate(body, context=limits_context(settings))
"""

import math
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from searchshare.models import BrandKeyword, RankedKeyword
from searchshare.utils.config import Settings, get_settings


def limits_context(settings: Optional[Settings] = None) -> Dict[str, int]:
    """Build the validation context carrying request limits."""
    settings = settings or get_settings()
    return {
        "max_brand_keywords": settings.MAX_BRAND_KEYWORDS,
        "max_ranked_keywords": settings.MAX_RANKED_KEYWORDS,
        "max_position": settings.MAX_POSITION,
    }


def _limit(info: ValidationInfo, key: str) -> int:
    context = info.context or limits_context()
    return context[key]


class KeywordIn(BaseModel):
    """Fields shared by incoming keyword items."""
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    keyword: str = Field(strict=True, min_length=1)
    search_volume: float = Field(alias="searchVolume", strict=True, ge=0, allow_inf_nan=False)

    @field_validator("search_volume")
    @classmethod
    def floor_volume(cls, value: float) -> int:
        return math.floor(value)


class BrandKeywordIn(KeywordIn):
    """Incoming brand keyword."""
    is_own_brand: bool = Field(alias="isOwnBrand", strict=True)

    def to_record(self) -> BrandKeyword:
        return BrandKeyword(
            keyword=self.keyword,
            search_volume=self.search_volume,
            is_own_brand=self.is_own_brand,
        )


class RankedKeywordIn(KeywordIn):
    """Incoming ranked keyword. Derived fields on input are ignored."""
    position: float = Field(strict=True, ge=1, allow_inf_nan=False)
    url: Any = None

    @field_validator("position")
    @classmethod
    def check_position(cls, value: float, info: ValidationInfo) -> int:
        max_position = _limit(info, "max_position")
        if value > max_position:
            raise PydanticCustomError(
                "position_out_of_range",
                "Position must be at most {max_position}",
                {"max_position": max_position},
            )
        return math.floor(value)

    @field_validator("url")
    @classmethod
    def keep_text_url(cls, value: Any) -> Optional[str]:
        # Non-string urls are dropped, not rejected
        return value.strip() if isinstance(value, str) else None

    def to_record(self) -> RankedKeyword:
        return RankedKeyword(
            keyword=self.keyword,
            search_volume=self.search_volume,
            position=self.position,
            url=self.url,
        )


def _check_count(value: Any, info: ValidationInfo, key: str, label: str) -> Any:
    limit = _limit(info, key)
    if isinstance(value, list) and len(value) > limit:
        raise PydanticCustomError(
            "too_many_keywords",
            "Maximum {limit} {label} keywords allowed",
            {"limit": limit, "label": label},
        )
    return value


class BrandKeywordsRequest(BaseModel):
    """Body carrying only brand keywords."""
    model_config = ConfigDict(populate_by_name=True)

    brand_keywords: List[BrandKeywordIn] = Field(alias="brandKeywords", min_length=1)

    @field_validator("brand_keywords", mode="before")
    @classmethod
    def limit_brand_keywords(cls, value: Any, info: ValidationInfo) -> Any:
        return _check_count(value, info, "max_brand_keywords", "brand")


class RankedKeywordsRequest(BaseModel):
    """Body carrying only ranked keywords."""
    model_config = ConfigDict(populate_by_name=True)

    ranked_keywords: List[RankedKeywordIn] = Field(alias="rankedKeywords", min_length=1)

    @field_validator("ranked_keywords", mode="before")
    @classmethod
    def limit_ranked_keywords(cls, value: Any, info: ValidationInfo) -> Any:
        return _check_count(value, info, "max_ranked_keywords", "ranked")


class CalculateRequest(BrandKeywordsRequest, RankedKeywordsRequest):
    """Full ``/api/calculate`` body."""
