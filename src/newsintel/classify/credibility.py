"""Source-name credibility classification.

Unlike bias classification there is no substring fallback: a credibility
score is only reported for an exact table match.
"""

from newsintel.classify.bias import normalize_source_name
from newsintel.classify.credibility_table import CREDIBILITY_TABLE, DEFAULT_CREDIBILITY
from newsintel.data import CredibilityInfo, CredibilityScore, CredibilityTier

HIGH_TIER_THRESHOLD = 80
MEDIUM_TIER_THRESHOLD = 60


def classify_credibility(source_name: str | None) -> CredibilityInfo:
    """Get credibility information for a news source.

    Args:
        source_name: Free-text publisher name.

    Returns:
        The table entry, or the default "unknown" record (rating 50).
    """
    return CREDIBILITY_TABLE.get(normalize_source_name(source_name), DEFAULT_CREDIBILITY)


def credibility_tier(source_name: str | None) -> CredibilityTier:
    """Bucket a source into high / medium / low / unknown credibility."""
    info = classify_credibility(source_name)
    if info.rating >= HIGH_TIER_THRESHOLD:
        return CredibilityTier.HIGH
    if info.rating >= MEDIUM_TIER_THRESHOLD:
        return CredibilityTier.MEDIUM
    if info.score != CredibilityScore.UNKNOWN:
        return CredibilityTier.LOW
    return CredibilityTier.UNKNOWN


def credibility_color(rating: int) -> str:
    if rating >= HIGH_TIER_THRESHOLD:
        return "#22c55e"
    if rating >= MEDIUM_TIER_THRESHOLD:
        return "#f59e0b"
    return "#ef4444"


def sort_by_credibility(sources: list[str]) -> list[str]:
    """Sort source names by credibility rating, highest first.

    The sort is stable, so equally rated sources keep their input order.
    """
    return sorted(sources, key=lambda s: classify_credibility(s).rating, reverse=True)
