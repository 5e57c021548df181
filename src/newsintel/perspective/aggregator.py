"""Group articles into left / center / right perspectives.

Two balance measures coexist and answer different questions:

- ``aggregate_perspectives`` computes percentages over the *capped* groups
  shown side by side, so they sum to 100 only when no group was truncated.
- ``analyze_balance`` counts the full, uncapped article pool for a
  corpus-level skew check.

Articles whose source bias is unknown are kept out of all three columns;
"center" only ever means a source rated center.
"""

import logging
import re
from collections import Counter

from newsintel.classify.bias import classify_bias, simplify_bias
from newsintel.data import (
    Article,
    BalanceReport,
    BalanceStats,
    BalanceVerdict,
    DominantPerspective,
    MultiPerspectiveResult,
    PerspectiveGroup,
    SimplifiedBias,
)

logger = logging.getLogger(__name__)

DEFAULT_ARTICLES_PER_PERSPECTIVE = 5
DEFAULT_THEME_COUNT = 5

# Spread (max% - min%) below which the capped view counts as balanced
BALANCED_SPREAD = 20.0
CENTER_HEAVY_PERCENTAGE = 60.0
BALANCED_LEFT_RIGHT_GAP = 15.0

_WORD_RE = re.compile(r"\b[a-z]{4,}\b")

STOP_WORDS = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "by", "from", "as", "is", "was", "are", "been", "be",
        "have", "has", "had", "do", "does", "did", "will", "would", "could",
        "should", "may", "might", "can", "this", "that", "these", "those",
        "it", "its", "they", "them", "their", "what", "which", "who", "when",
        "where", "why", "how", "all", "each", "every", "both", "few", "more",
        "most", "other", "some", "such", "no", "nor", "not", "only", "own",
        "same", "so", "than", "too", "very", "says", "said", "new", "after",
    }
)  # fmt: skip


def extract_themes(articles: list[Article], limit: int = DEFAULT_THEME_COUNT) -> list[str]:
    """Extract the most frequent keywords from titles and descriptions.

    Words of four or more letters are counted after stop-word removal.
    Equal counts keep first-seen order.

    Args:
        articles: Articles to mine.
        limit: Number of themes to return.

    Returns:
        Up to ``limit`` keywords with the first letter capitalized.
    """
    counts: Counter[str] = Counter()
    for article in articles:
        text = f"{article.title} {article.description or ''}".lower()
        counts.update(word for word in _WORD_RE.findall(text) if word not in STOP_WORDS)

    # Counter preserves insertion order and sorted() is stable
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [word[0].upper() + word[1:] for word, _ in ranked[:limit]]


def bucket_by_bias(articles: list[Article]) -> dict[SimplifiedBias, list[Article]]:
    """Route articles into left / center / right / unknown, keeping input order."""
    buckets: dict[SimplifiedBias, list[Article]] = {bias: [] for bias in SimplifiedBias}
    for article in articles:
        buckets[simplify_bias(classify_bias(article.source.name))].append(article)
    return buckets


def _build_group(bias: SimplifiedBias, articles: list[Article], cap: int) -> PerspectiveGroup:
    capped = articles[:cap]
    sources = list(dict.fromkeys(a.source.name for a in capped))
    return PerspectiveGroup(
        bias=bias,
        articles=tuple(capped),
        sources=tuple(sources),
        themes=tuple(extract_themes(capped)),
    )


def _percentage(count: int, total: int) -> float:
    return count / total * 100 if total > 0 else 0.0


def dominant_perspective(
    left_pct: float, center_pct: float, right_pct: float
) -> DominantPerspective:
    """Pick the leading perspective, or ``balanced`` when the spread is small."""
    spread = max(left_pct, center_pct, right_pct) - min(left_pct, center_pct, right_pct)
    if spread < BALANCED_SPREAD:
        return DominantPerspective.BALANCED
    if left_pct > center_pct and left_pct > right_pct:
        return DominantPerspective.LEFT
    if right_pct > center_pct and right_pct > left_pct:
        return DominantPerspective.RIGHT
    return DominantPerspective.CENTER


def aggregate_perspectives(
    articles: list[Article],
    per_perspective_cap: int = DEFAULT_ARTICLES_PER_PERSPECTIVE,
    *,
    topic: str = "",
) -> MultiPerspectiveResult:
    """Group articles by simplified source bias with balance statistics.

    Args:
        articles: Article pool, typically a topic search result.
        per_perspective_cap: Maximum articles kept per column. Each column
            keeps its first articles in input order.
        topic: Topic label carried into the result.

    Returns:
        The three capped groups and percentages over their combined size.
    """
    if per_perspective_cap < 0:
        raise ValueError(f"per_perspective_cap must be non-negative, got {per_perspective_cap}")

    buckets = bucket_by_bias(articles)
    cap = per_perspective_cap
    left = _build_group(SimplifiedBias.LEFT, buckets[SimplifiedBias.LEFT], cap)
    center = _build_group(SimplifiedBias.CENTER, buckets[SimplifiedBias.CENTER], cap)
    right = _build_group(SimplifiedBias.RIGHT, buckets[SimplifiedBias.RIGHT], cap)

    unknown = buckets[SimplifiedBias.UNKNOWN]
    if unknown:
        logger.debug(f"Excluded {len(unknown)} articles with unknown source bias")

    total = left.article_count + center.article_count + right.article_count
    left_pct = _percentage(left.article_count, total)
    center_pct = _percentage(center.article_count, total)
    right_pct = _percentage(right.article_count, total)

    return MultiPerspectiveResult(
        topic=topic,
        left=left,
        center=center,
        right=right,
        total_articles=len(articles),
        balance_stats=BalanceStats(
            left_percentage=left_pct,
            center_percentage=center_pct,
            right_percentage=right_pct,
            dominant_perspective=dominant_perspective(left_pct, center_pct, right_pct),
        ),
    )


def analyze_balance(articles: list[Article], *, topic: str = "") -> BalanceReport:
    """Check the bias skew of a full, uncapped article pool.

    Center-heavy when more than 60% of articles are center, balanced when
    left and right are within 15 points of each other, otherwise leaning
    toward the larger side. Percentages include unknown-bias articles in
    the denominator.
    """
    buckets = bucket_by_bias(articles)
    left_count = len(buckets[SimplifiedBias.LEFT])
    center_count = len(buckets[SimplifiedBias.CENTER])
    right_count = len(buckets[SimplifiedBias.RIGHT])
    unknown_count = len(buckets[SimplifiedBias.UNKNOWN])

    total = len(articles)
    left_pct = _percentage(left_count, total)
    center_pct = _percentage(center_count, total)
    right_pct = _percentage(right_count, total)

    if center_pct > CENTER_HEAVY_PERCENTAGE:
        balance = BalanceVerdict.CENTER_HEAVY
    elif abs(left_pct - right_pct) < BALANCED_LEFT_RIGHT_GAP:
        balance = BalanceVerdict.BALANCED
    elif left_pct > right_pct:
        balance = BalanceVerdict.LEFT_LEANING
    else:
        balance = BalanceVerdict.RIGHT_LEANING

    return BalanceReport(
        topic=topic,
        left_count=left_count,
        center_count=center_count,
        right_count=right_count,
        unknown_count=unknown_count,
        total_count=total,
        balance=balance,
    )
