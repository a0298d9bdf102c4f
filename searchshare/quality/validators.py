"""
Request Validators

Validates raw request bodies against the request schemas and turns the
outcome into a ValidationResult. The calculators assume clean input;
everything malformed is rejected here with an index-specific message.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional, Tuple, Type

from pydantic import BaseModel, ValidationError

from searchshare.models import BrandKeyword, RankedKeyword
from searchshare.utils.config import Settings, get_settings
from .schemas import (
    BrandKeywordsRequest,
    RankedKeywordsRequest,
    CalculateRequest,
    limits_context,
)

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Result of validation."""
    valid: bool
    errors: List[str]
    warnings: List[str] = field(default_factory=list)
    details: Dict = field(default_factory=dict)
    data: Any = None

    @property
    def error(self) -> Optional[str]:
        """First error message, if any."""
        return self.errors[0] if self.errors else None

    @classmethod
    def success(cls, data: Any = None, warnings: Optional[List[str]] = None, details: Optional[Dict] = None):
        """Create successful validation result."""
        return cls(
            valid=True,
            errors=[],
            warnings=warnings or [],
            details=details or {},
            data=data,
        )

    @classmethod
    def failure(cls, errors: List[str], warnings: Optional[List[str]] = None, details: Optional[Dict] = None):
        """Create failed validation result."""
        return cls(
            valid=False,
            errors=errors,
            warnings=warnings or [],
            details=details or {},
        )


# ============================================================================
# ERROR MESSAGES
# ============================================================================

# Body field -> (label, report order)
COLLECTIONS: Dict[str, Tuple[str, int]] = {
    "brandKeywords": ("Brand", 0),
    "rankedKeywords": ("Ranked", 1),
}

# Item field -> (message prefix, report order)
ITEM_FIELDS: Dict[str, Tuple[str, int]] = {
    "keyword": ("Invalid keyword text", 0),
    "searchVolume": ("Invalid search volume", 1),
    "isOwnBrand": ("Invalid isOwnBrand", 2),
    "position": ("Invalid position", 2),
}


def _error_order(error: Dict[str, Any]) -> Tuple[int, int, int]:
    loc = error["loc"]
    if not loc:
        return (-1, 0, 0)
    collection = COLLECTIONS.get(loc[0], ("", 9))[1]
    index = loc[1] if len(loc) > 1 and isinstance(loc[1], int) else -1
    item_field = ITEM_FIELDS.get(loc[2], ("", 9))[1] if len(loc) > 2 else -1
    return (collection, index, item_field)


def error_message(error: Dict[str, Any]) -> str:
    """
    Turn one pydantic error into a request error message.

    Args:
        error: Entry from ValidationError.errors()

    Returns:
        Message naming the collection or the offending item index
    """
    loc = error["loc"]
    if not loc:
        return "Request body must be an object"

    label = COLLECTIONS.get(loc[0], ("Request", 9))[0]

    if len(loc) == 1:
        if error["type"] == "too_many_keywords":
            return error["msg"]
        if error["type"] == "too_short":
            return f"At least one {label.lower()} keyword is required"
        return f"{label} keywords must be an array"

    index = loc[1]
    if len(loc) == 2:
        return f"Invalid keyword at index {index}"

    prefix = ITEM_FIELDS.get(loc[2], (f"Invalid {loc[2]}", 9))[0]
    return f"{prefix} at index {index}"


def first_error_message(exc: ValidationError) -> str:
    """Message for the first problem in body order (brand before ranked, lowest index first)."""
    first = min(exc.errors(), key=_error_order)
    return error_message(first)


# ============================================================================
# VALIDATOR
# ============================================================================

class KeywordValidator:
    """
    Validates keyword collections from request bodies.

    Limits come from Settings (MAX_BRAND_KEYWORDS, MAX_RANKED_KEYWORDS,
    MAX_POSITION). Only the first problem is reported.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def _parse(self, schema: Type[BaseModel], body: Any) -> Tuple[Optional[BaseModel], Optional[str]]:
        try:
            return schema.model_validate(body, context=limits_context(self.settings)), None
        except ValidationError as e:
            return None, first_error_message(e)

    def validate_brand_keywords(self, keywords: Any) -> ValidationResult:
        """
        Validate a brand keywords array.

        Args:
            keywords: Raw value of the ``brandKeywords`` field

        Returns:
            ValidationResult with List[BrandKeyword] as data on success
        """
        parsed, error = self._parse(BrandKeywordsRequest, {"brandKeywords": keywords})
        if error:
            return ValidationResult.failure([error])
        return self._brand_success([kw.to_record() for kw in parsed.brand_keywords])

    def validate_ranked_keywords(self, keywords: Any) -> ValidationResult:
        """
        Validate a ranked keywords array.

        Args:
            keywords: Raw value of the ``rankedKeywords`` field

        Returns:
            ValidationResult with List[RankedKeyword] as data on success
        """
        parsed, error = self._parse(RankedKeywordsRequest, {"rankedKeywords": keywords})
        if error:
            return ValidationResult.failure([error])
        return self._ranked_success([kw.to_record() for kw in parsed.ranked_keywords])

    def validate_calculate_request(self, body: Any) -> ValidationResult:
        """
        Validate a full calculation request body.

        Brand keyword problems are reported before ranked keyword problems.

        Args:
            body: Parsed JSON body with ``brandKeywords`` and ``rankedKeywords``

        Returns:
            ValidationResult with {"brand_keywords", "ranked_keywords"} as data
        """
        parsed, error = self._parse(CalculateRequest, body)
        if error:
            logger.info(f"Rejected calculation request: {error}")
            return ValidationResult.failure([error])

        brand_result = self._brand_success([kw.to_record() for kw in parsed.brand_keywords])
        ranked_result = self._ranked_success([kw.to_record() for kw in parsed.ranked_keywords])

        return ValidationResult.success(
            data={
                "brand_keywords": brand_result.data,
                "ranked_keywords": ranked_result.data,
            },
            warnings=brand_result.warnings + ranked_result.warnings,
            details={
                "brand": brand_result.details,
                "ranked": ranked_result.details,
            },
        )

    def _brand_success(self, keywords: List[BrandKeyword]) -> ValidationResult:
        warnings = []
        if not any(kw.is_own_brand for kw in keywords):
            warnings.append("No own-brand keywords; share of search will be 0")
        if all(kw.search_volume == 0 for kw in keywords):
            warnings.append("All brand keyword volumes are zero")

        return ValidationResult.success(
            data=keywords,
            warnings=warnings,
            details={
                "keyword_count": len(keywords),
                "own_brand_count": sum(1 for kw in keywords if kw.is_own_brand),
            },
        )

    def _ranked_success(self, keywords: List[RankedKeyword]) -> ValidationResult:
        warnings = []
        if all(kw.search_volume == 0 for kw in keywords):
            warnings.append("All ranked keyword volumes are zero")

        return ValidationResult.success(
            data=keywords,
            warnings=warnings,
            details={"keyword_count": len(keywords)},
        )


def validate_brand_keywords(keywords: Any) -> ValidationResult:
    """Validate brand keywords with the configured limits."""
    return KeywordValidator().validate_brand_keywords(keywords)


def validate_ranked_keywords(keywords: Any) -> ValidationResult:
    """Validate ranked keywords with the configured limits."""
    return KeywordValidator().validate_ranked_keywords(keywords)


def validate_calculate_request(body: Any) -> ValidationResult:
    """Validate a calculation request body with the configured limits."""
    return KeywordValidator().validate_calculate_request(body)
