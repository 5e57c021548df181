"""Source-name bias classification.

Lookup is exact-match first, then a substring fallback over the table in
declaration order. Keys of three characters or fewer never match by
substring, which keeps short names like ``"rt"`` or ``"who"`` from matching
inside unrelated source names.
"""

import logging

from newsintel.classify.bias_table import BIAS_TABLE
from newsintel.data import BiasInfo, BiasRating, SimplifiedBias

logger = logging.getLogger(__name__)

_MIN_SUBSTRING_KEY_LENGTH = 4

_BIAS_INFO: dict[BiasRating, BiasInfo] = {
    BiasRating.LEFT: BiasInfo(
        rating=BiasRating.LEFT,
        label="Left",
        color="#3b82f6",
        description="Generally supports progressive policies",
    ),
    BiasRating.CENTER_LEFT: BiasInfo(
        rating=BiasRating.CENTER_LEFT,
        label="Center-Left",
        color="#60a5fa",
        description="Leans left but maintains mainstream reporting",
    ),
    BiasRating.CENTER: BiasInfo(
        rating=BiasRating.CENTER,
        label="Center",
        color="#9ca3af",
        description="Balanced reporting with minimal bias",
    ),
    BiasRating.CENTER_RIGHT: BiasInfo(
        rating=BiasRating.CENTER_RIGHT,
        label="Center-Right",
        color="#fb923c",
        description="Leans right but maintains mainstream reporting",
    ),
    BiasRating.RIGHT: BiasInfo(
        rating=BiasRating.RIGHT,
        label="Right",
        color="#ef4444",
        description="Generally supports conservative policies",
    ),
    BiasRating.UNKNOWN: BiasInfo(
        rating=BiasRating.UNKNOWN,
        label="Unknown",
        color="#71717a",
        description="No bias rating available",
    ),
}


def normalize_source_name(source_name: str | None) -> str:
    """Lowercase and trim a source name for table lookup."""
    if not source_name:
        return ""
    return source_name.lower().strip()


def classify_bias(source_name: str | None) -> BiasRating:
    """Get the bias rating for a news source.

    Args:
        source_name: Free-text publisher name, e.g. ``"The New York Times"``.

    Returns:
        The matching rating, or ``BiasRating.UNKNOWN`` if nothing matches.
    """
    normalized = normalize_source_name(source_name)
    if not normalized:
        return BiasRating.UNKNOWN

    rating = BIAS_TABLE.get(normalized)
    if rating is not None:
        return rating

    # First qualifying key in declaration order wins
    for key, rating in BIAS_TABLE.items():
        if len(key) < _MIN_SUBSTRING_KEY_LENGTH:
            continue
        if key in normalized or normalized in key:
            return rating

    logger.debug(f"No bias rating for source {source_name!r}")
    return BiasRating.UNKNOWN


def simplify_bias(rating: BiasRating) -> SimplifiedBias:
    """Collapse a 6-point rating into left / center / right / unknown.

    Unknown stays unknown; it is never folded into center.
    """
    if rating in (BiasRating.LEFT, BiasRating.CENTER_LEFT):
        return SimplifiedBias.LEFT
    if rating in (BiasRating.RIGHT, BiasRating.CENTER_RIGHT):
        return SimplifiedBias.RIGHT
    if rating == BiasRating.CENTER:
        return SimplifiedBias.CENTER
    return SimplifiedBias.UNKNOWN


def bias_info(rating: BiasRating) -> BiasInfo:
    """Get display label, color and description for a rating."""
    return _BIAS_INFO[rating]


def source_bias_info(source_name: str | None) -> BiasInfo:
    return bias_info(classify_bias(source_name))


def group_sources_by_bias(sources: list[str]) -> dict[BiasRating, list[str]]:
    """Group source names by bias rating.

    Every rating is present in the result, possibly with an empty list.
    """
    groups: dict[BiasRating, list[str]] = {rating: [] for rating in BiasRating}
    for source in sources:
        groups[classify_bias(source)].append(source)
    return groups


def is_left_bias(rating: BiasRating) -> bool:
    return rating in (BiasRating.LEFT, BiasRating.CENTER_LEFT)


def is_right_bias(rating: BiasRating) -> bool:
    return rating in (BiasRating.RIGHT, BiasRating.CENTER_RIGHT)
