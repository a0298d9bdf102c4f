"""
Metrics Engine

Runs the fixed pipeline SOS -> SOV -> Growth Gap and composes the three
results into a single report. This is the only composition of the
calculators; each of them can also be called on its own.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Any, Iterable, Optional

from searchshare.models import BrandKeyword, RankedKeyword
from searchshare.quality.validators import KeywordValidator, ValidationResult
from .share_of_search import SOSResult, calculate_sos
from .share_of_voice import SOVResult, calculate_sov
from .growth_gap import GrowthGapResult, calculate_growth_gap

logger = logging.getLogger(__name__)


class MetricsInputError(Exception):
    """Raised when a request body is rejected by the validation boundary."""
    def __init__(self, result: ValidationResult):
        super().__init__(result.error or "Invalid metrics input")
        self.result = result

    @property
    def errors(self):
        return self.result.errors


@dataclass(frozen=True)
class MetricsReport:
    """Combined SOS, SOV and growth gap results."""
    sos: SOSResult
    sov: SOVResult
    gap: GrowthGapResult

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the ``/api/calculate`` response shape."""
        return {
            "sos": self.sos.to_dict(),
            "sov": self.sov.to_dict(),
            "gap": self.gap.to_dict(),
        }


def compute_all(
    brand_keywords: Iterable[BrandKeyword],
    ranked_keywords: Iterable[RankedKeyword],
) -> MetricsReport:
    """
    Calculate Share of Search, Share of Voice and the growth gap.

    Args:
        brand_keywords: Brand comparison set
        ranked_keywords: Keywords the domain ranks for

    Returns:
        MetricsReport
    """
    sos = calculate_sos(brand_keywords)
    sov = calculate_sov(ranked_keywords)
    gap = calculate_growth_gap(sos.share_of_search, sov.share_of_voice)

    logger.info(
        f"Metrics: SOS {sos.share_of_search}%, SOV {sov.share_of_voice}%, "
        f"gap {gap.gap} ({gap.interpretation.value})"
    )

    return MetricsReport(sos=sos, sov=sov, gap=gap)


def compute_from_request(
    body: Any,
    validator: Optional[KeywordValidator] = None,
) -> MetricsReport:
    """
    Validate a raw request body and calculate all metrics.

    Args:
        body: Parsed JSON body with ``brandKeywords`` and ``rankedKeywords``
        validator: Optional validator (defaults to configured limits)

    Returns:
        MetricsReport

    Raises:
        MetricsInputError: If the body fails validation
    """
    validator = validator or KeywordValidator()
    result = validator.validate_calculate_request(body)
    if not result.valid:
        raise MetricsInputError(result)

    for warning in result.warnings:
        logger.warning(warning)

    return compute_all(
        result.data["brand_keywords"],
        result.data["ranked_keywords"],
    )
