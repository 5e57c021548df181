"""Extract an index selection from free-text model output.

Models asked to "return a JSON array of indices" often wrap the array in
prose or markdown fences. The first bracketed integer list in the text is
taken as the answer; anything unusable yields the default selection.
"""

import json
import logging
import re

logger = logging.getLogger(__name__)

DEFAULT_SELECTION_SIZE = 5

_INDEX_LIST_RE = re.compile(r"\[\s*-?\d+(?:\s*,\s*-?\d+)*\s*,?\s*\]")


def default_selection(candidate_count: int, size: int = DEFAULT_SELECTION_SIZE) -> list[int]:
    """The first ``size`` candidate indices."""
    return list(range(min(size, max(candidate_count, 0))))


def parse_selected_indices(
    text: str,
    candidate_count: int,
    *,
    limit: int | None = None,
    default_size: int = DEFAULT_SELECTION_SIZE,
) -> list[int]:
    """Parse a list of candidate indices from model output.

    Out-of-range and repeated indices are dropped.

    Args:
        text: Raw model output.
        candidate_count: Number of candidates the indices refer to.
        limit: Optional maximum number of indices to return.
        default_size: Size of the fallback selection.

    Returns:
        Selected indices in the order given by the model, or the first
        ``default_size`` indices if nothing usable was found.
    """
    fallback = default_selection(candidate_count, default_size)

    match = _INDEX_LIST_RE.search(text)
    if match is None:
        logger.warning("No index list in model output, using default selection")
        return fallback

    # A trailing comma is valid in the pattern but not in JSON
    raw = re.sub(r",\s*\]$", "]", match.group(0))
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("Failed to parse index list, using default selection")
        return fallback

    indices = [i for i in dict.fromkeys(parsed) if 0 <= i < candidate_count]
    if not indices:
        logger.warning("Index list selected no valid candidates, using default selection")
        return fallback

    return indices[:limit] if limit is not None else indices
