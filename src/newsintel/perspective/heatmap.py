"""Per-source views of an article set for bias and sentiment heat maps."""

from newsintel.classify.bias import classify_bias, simplify_bias
from newsintel.classify.sentiment import SentimentAnalyzer
from newsintel.data import (
    Article,
    BiasRating,
    SimplifiedBias,
    SourceBiasCell,
    SourceSentimentCell,
)

_BIAS_ORDER: list[BiasRating] = [
    BiasRating.LEFT,
    BiasRating.CENTER_LEFT,
    BiasRating.CENTER,
    BiasRating.CENTER_RIGHT,
    BiasRating.RIGHT,
    BiasRating.UNKNOWN,
]


def group_by_source(articles: list[Article]) -> dict[str, list[Article]]:
    """Group articles by source name in first-seen order."""
    groups: dict[str, list[Article]] = {}
    for article in articles:
        groups.setdefault(article.source.name, []).append(article)
    return groups


def source_bias_cells(articles: list[Article]) -> list[SourceBiasCell]:
    """One cell per source, ordered left to right with unknown last."""
    cells = [
        SourceBiasCell(
            source=source,
            bias=classify_bias(source),
            count=len(source_articles),
            articles=tuple(source_articles),
        )
        for source, source_articles in group_by_source(articles).items()
    ]
    return sorted(cells, key=lambda cell: _BIAS_ORDER.index(cell.bias))


def source_sentiment_cells(
    articles: list[Article],
    analyzer: SentimentAnalyzer | None = None,
) -> list[SourceSentimentCell]:
    """One cell per source with its mean comparative sentiment.

    Cells are ordered from most negative to most positive.
    """
    analyzer = analyzer or SentimentAnalyzer()
    cells: list[SourceSentimentCell] = []
    for source, source_articles in group_by_source(articles).items():
        scores = [analyzer.analyze_article(a).comparative for a in source_articles]
        cells.append(
            SourceSentimentCell(
                source=source,
                sentiment=sum(scores) / len(scores),
                count=len(source_articles),
                articles=tuple(source_articles),
            )
        )
    return sorted(cells, key=lambda cell: cell.sentiment)


def bias_distribution(articles: list[Article]) -> dict[SimplifiedBias, int]:
    """Count articles per simplified bias, unknown included."""
    counts = {bias: 0 for bias in SimplifiedBias}
    for article in articles:
        counts[simplify_bias(classify_bias(article.source.name))] += 1
    return counts
