"""
Actionable Insights

Two follow-ups derived from the ranked keyword set, both priced with the
same CTR curve as Share of Voice:

1. Quick wins - keywords at positions 4-20 where a realistic climb
   (e.g. #7 -> #5, #18 -> #10) adds at least 50 monthly clicks.
2. Cannibalization - keywords where two or more distinct URLs of the
   domain rank, splitting visibility between them.

Target positions:
    position <= 3   -> 1
    position <= 5   -> 3
    position <= 10  -> 5
    position <= 15  -> 8
    otherwise       -> 10
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, Iterable, List, Tuple

from searchshare.models import RankedKeyword
from .helpers import get_ctr_for_position, round_to_int

logger = logging.getLogger(__name__)


QUICK_WIN_MIN_POSITION = 4
QUICK_WIN_MAX_POSITION = 20
QUICK_WIN_MIN_VOLUME = 100
QUICK_WIN_MIN_UPLIFT = 50  # clicks per month


class Effort(str, Enum):
    """Effort needed to close a position gap."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class CannibalizationFix(str, Enum):
    """Recommended fix for competing URLs."""
    CONSOLIDATE = "consolidate"
    DIFFERENTIATE = "differentiate"
    REDIRECT = "redirect"


@dataclass(frozen=True)
class QuickWinOpportunity:
    """A ranked keyword with cheap click upside."""
    keyword: str
    current_position: int
    target_position: int
    search_volume: int
    current_clicks: int
    potential_clicks: int
    click_uplift: int
    uplift_percentage: int
    effort: Effort
    url: str
    reasoning: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {
            "keyword": self.keyword,
            "currentPosition": self.current_position,
            "targetPosition": self.target_position,
            "searchVolume": self.search_volume,
            "currentClicks": self.current_clicks,
            "potentialClicks": self.potential_clicks,
            "clickUplift": self.click_uplift,
            "upliftPercentage": self.uplift_percentage,
            "effort": self.effort.value,
            "url": self.url,
            "reasoning": self.reasoning,
        }


@dataclass(frozen=True)
class CompetingUrl:
    """One of several URLs ranking for the same keyword."""
    url: str
    position: int
    visible_volume: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "position": self.position,
            "visibleVolume": self.visible_volume,
        }


@dataclass(frozen=True)
class CannibalizationIssue:
    """Several URLs of the domain competing for one keyword."""
    keyword: str  # lowercased, trimmed
    search_volume: int
    recommendation: CannibalizationFix
    impact_score: int  # clicks lost vs. a single #1 ranking
    competing_urls: Tuple[CompetingUrl, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {
            "keyword": self.keyword,
            "searchVolume": self.search_volume,
            "competingUrls": [u.to_dict() for u in self.competing_urls],
            "recommendation": self.recommendation.value,
            "impactScore": self.impact_score,
        }


# ============================================================================
# QUICK WINS
# ============================================================================

def get_target_position(current_position: int) -> int:
    """Realistic next position for a keyword."""
    if current_position <= 3:
        return 1
    if current_position <= 5:
        return 3
    if current_position <= 10:
        return 5
    if current_position <= 15:
        return 8
    return 10


def get_effort(current_position: int, target_position: int) -> Effort:
    """Effort by number of positions to climb: <=3 low, <=7 medium."""
    gap = current_position - target_position
    if gap <= 3:
        return Effort.LOW
    if gap <= 7:
        return Effort.MEDIUM
    return Effort.HIGH


def _quick_win_reasoning(
    keyword: RankedKeyword,
    target_position: int,
    click_uplift: int,
    uplift_percentage: int
) -> str:
    position = keyword.position
    volume = keyword.search_volume
    reasons = []

    if 4 <= position <= 6:
        reasons.append(f"Already on page 1 (#{position}) - small optimization could push to top 3")
    elif 7 <= position <= 10:
        reasons.append(f"Bottom of page 1 (#{position}) - improving to top 5 dramatically increases visibility")
    elif 11 <= position <= 15:
        reasons.append(f"Top of page 2 (#{position}) - pushing to page 1 is crucial for traffic")
    else:
        reasons.append(f"Position #{position} has room for improvement with focused optimization")

    if volume >= 10000:
        reasons.append(f"High-volume keyword ({volume:,} monthly searches)")
    elif volume >= 1000:
        reasons.append(f"Good search volume with {volume:,} monthly searches")

    reasons.append(
        f"Moving to position #{target_position} could yield +{click_uplift:,} clicks "
        f"({uplift_percentage}% increase)"
    )

    return ". ".join(reasons) + "."


def calculate_quick_wins(
    ranked_keywords: Iterable[RankedKeyword],
    min_volume: int = QUICK_WIN_MIN_VOLUME
) -> List[QuickWinOpportunity]:
    """
    Find keywords where a modest ranking climb pays off.

    Args:
        ranked_keywords: Keywords the domain ranks for
        min_volume: Minimum monthly search volume to consider

    Returns:
        Opportunities with at least 50 clicks of uplift, highest uplift
        first. Ties keep their input order.
    """
    quick_wins = []

    for kw in ranked_keywords:
        if kw.position < QUICK_WIN_MIN_POSITION or kw.position > QUICK_WIN_MAX_POSITION:
            continue
        if kw.search_volume < min_volume:
            continue

        target_position = get_target_position(kw.position)
        current_clicks = round_to_int(kw.search_volume * get_ctr_for_position(kw.position))
        potential_clicks = round_to_int(kw.search_volume * get_ctr_for_position(target_position))
        click_uplift = potential_clicks - current_clicks

        if click_uplift < QUICK_WIN_MIN_UPLIFT:
            continue

        uplift_percentage = (
            round_to_int(click_uplift / current_clicks * 100) if current_clicks > 0 else 0
        )

        quick_wins.append(QuickWinOpportunity(
            keyword=kw.keyword,
            current_position=kw.position,
            target_position=target_position,
            search_volume=kw.search_volume,
            current_clicks=current_clicks,
            potential_clicks=potential_clicks,
            click_uplift=click_uplift,
            uplift_percentage=uplift_percentage,
            effort=get_effort(kw.position, target_position),
            url=kw.url or "",
            reasoning=_quick_win_reasoning(kw, target_position, click_uplift, uplift_percentage),
        ))

    quick_wins.sort(key=lambda q: q.click_uplift, reverse=True)

    logger.debug(f"Found {len(quick_wins)} quick wins")
    return quick_wins


# ============================================================================
# CANNIBALIZATION
# ============================================================================

def get_cannibalization_fix(position_gap: int, url_count: int) -> CannibalizationFix:
    """Pick a fix from the number of competing URLs and their spread."""
    if url_count > 3:
        return CannibalizationFix.CONSOLIDATE
    if position_gap < 5:
        return CannibalizationFix.DIFFERENTIATE
    return CannibalizationFix.REDIRECT


def detect_cannibalization(ranked_keywords: Iterable[RankedKeyword]) -> List[CannibalizationIssue]:
    """
    Find keywords where several URLs of the domain rank at once.

    Keywords are grouped case-insensitively after trimming. Rankings
    without a URL are ignored, and a group needs at least two distinct
    URLs to count.

    Args:
        ranked_keywords: Keywords the domain ranks for

    Returns:
        Issues sorted by impact score, highest first
    """
    groups: Dict[str, List[RankedKeyword]] = {}
    for kw in ranked_keywords:
        if not kw.url:
            continue
        groups.setdefault(kw.keyword.lower().strip(), []).append(kw)

    issues = []
    for keyword, rankings in groups.items():
        unique_urls = {kw.url for kw in rankings}
        if len(rankings) < 2 or len(unique_urls) < 2:
            continue

        rankings = sorted(rankings, key=lambda kw: kw.position)
        best, worst = rankings[0], rankings[-1]

        competing_urls = tuple(
            CompetingUrl(
                url=kw.url,
                position=kw.position,
                visible_volume=round_to_int(kw.search_volume * get_ctr_for_position(kw.position)),
            )
            for kw in rankings
        )

        # Visibility a single #1 ranking would capture, minus what the split earns
        potential = best.search_volume * get_ctr_for_position(1)
        actual = sum(u.visible_volume for u in competing_urls)
        impact_score = max(0, round_to_int(potential - actual))

        issues.append(CannibalizationIssue(
            keyword=keyword,
            search_volume=best.search_volume,
            recommendation=get_cannibalization_fix(worst.position - best.position, len(unique_urls)),
            impact_score=impact_score,
            competing_urls=competing_urls,
        ))

    issues.sort(key=lambda issue: issue.impact_score, reverse=True)

    if issues:
        logger.info(f"Detected cannibalization on {len(issues)} keywords")
    return issues
