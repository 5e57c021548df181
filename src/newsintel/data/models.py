"""Core data models for newsintel."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class BiasRating(StrEnum):
    """Editorial lean of a news source on a 6-point scale.

    Reference:
        AllSides Media Bias Ratings, Ad Fontes Media Bias Chart and
        Pew Research Center audience studies.
    """

    LEFT = "left"
    CENTER_LEFT = "center-left"
    CENTER = "center"
    CENTER_RIGHT = "center-right"
    RIGHT = "right"
    UNKNOWN = "unknown"


class SimplifiedBias(StrEnum):
    """Projection of ``BiasRating`` onto three columns plus unknown."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    UNKNOWN = "unknown"


class CredibilityScore(StrEnum):
    """Credibility grade of a news source."""

    HIGH = "high"
    MEDIUM_HIGH = "medium-high"
    MEDIUM = "medium"
    MIXED = "mixed"
    LOW = "low"
    UNKNOWN = "unknown"


class CredibilityTier(StrEnum):
    """Coarse credibility bucket derived from the numeric rating."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    UNKNOWN = "unknown"


class SentimentClassification(StrEnum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class DominantPerspective(StrEnum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    BALANCED = "balanced"


class BalanceVerdict(StrEnum):
    BALANCED = "balanced"
    LEFT_LEANING = "left-leaning"
    RIGHT_LEANING = "right-leaning"
    CENTER_HEAVY = "center-heavy"


@dataclass(frozen=True)
class ArticleSource:
    """Publisher reference attached to an article."""

    name: str = ""
    id: str | None = None


@dataclass(frozen=True)
class Article:
    """A news article as returned by the news-fetch collaborator.

    ``url`` is the identity key used for deduplication.
    """

    url: str
    source: ArticleSource = field(default_factory=ArticleSource)
    title: str = ""
    author: str | None = None
    description: str | None = None
    url_to_image: str | None = None
    published_at: str | None = None
    content: str | None = None

    @property
    def source_name(self) -> str:
        return self.source.name

    @classmethod
    def from_newsapi(cls, item: dict[str, Any]) -> "Article":
        """Build an article from a NewsAPI-style JSON object."""
        raw_source = item.get("source")
        if not isinstance(raw_source, dict):
            raw_source = {}
        return cls(
            url=item.get("url") or "",
            source=ArticleSource(
                name=raw_source.get("name") or "Unknown",
                id=raw_source.get("id"),
            ),
            title=item.get("title") or "",
            author=item.get("author"),
            description=item.get("description"),
            url_to_image=item.get("urlToImage"),
            published_at=item.get("publishedAt"),
            content=item.get("content"),
        )


@dataclass(frozen=True)
class DocumentMetadata:
    title: str
    url: str
    source: str
    published_at: str | None = None
    url_to_image: str | None = None


@dataclass(frozen=True)
class IndexedDocument:
    """Searchable text derived from an article at index time."""

    text: str
    metadata: DocumentMetadata

    @classmethod
    def from_article(cls, article: Article) -> "IndexedDocument":
        text = f"{article.title}. {article.description or ''}. {article.content or ''}"
        return cls(
            text=text,
            metadata=DocumentMetadata(
                title=article.title,
                url=article.url,
                source=article.source.name,
                published_at=article.published_at,
                url_to_image=article.url_to_image,
            ),
        )


@dataclass(frozen=True)
class BiasInfo:
    """Display metadata for a bias rating."""

    rating: BiasRating
    label: str
    color: str
    description: str


@dataclass(frozen=True)
class CredibilityFactors:
    """Component scores (0-100) behind a credibility rating."""

    fact_checking: int
    editorial_standards: int
    transparency: int


@dataclass(frozen=True)
class CredibilityInfo:
    """Credibility assessment for a news source.

    ``rating`` is a 0-100 composite of the three ``factors``.
    """

    score: CredibilityScore
    rating: int
    label: str
    color: str
    description: str
    factors: CredibilityFactors


@dataclass(frozen=True)
class LexicalScore:
    """Raw output of a sentiment lexicon: polarity sum and per-token mean."""

    score: float
    comparative: float
    tokens: tuple[str, ...] = ()
    positive: tuple[str, ...] = ()
    negative: tuple[str, ...] = ()


@dataclass(frozen=True)
class SentimentResult:
    score: float
    comparative: float
    classification: SentimentClassification
    emoji: str
    tokens: tuple[str, ...] = ()
    positive: tuple[str, ...] = ()
    negative: tuple[str, ...] = ()


@dataclass(frozen=True)
class SentimentSummary:
    """Sentiment statistics over a set of articles."""

    average_score: float
    positive_count: int
    neutral_count: int
    negative_count: int
    total_count: int


@dataclass(frozen=True)
class PerspectiveGroup:
    """Capped, bias-bucketed subset of articles on a topic."""

    bias: SimplifiedBias
    articles: tuple[Article, ...] = ()
    sources: tuple[str, ...] = ()
    themes: tuple[str, ...] = ()

    @property
    def article_count(self) -> int:
        return len(self.articles)

    @property
    def unique_source_count(self) -> int:
        return len(self.sources)


@dataclass(frozen=True)
class BalanceStats:
    """Percentage spread across the three displayed perspectives."""

    left_percentage: float
    center_percentage: float
    right_percentage: float
    dominant_perspective: DominantPerspective


@dataclass(frozen=True)
class MultiPerspectiveResult:
    """Articles on a topic grouped into left, center and right columns.

    ``total_articles`` counts the full input pool, including articles whose
    source bias is unknown and articles dropped by the per-perspective cap.
    """

    topic: str
    left: PerspectiveGroup
    center: PerspectiveGroup
    right: PerspectiveGroup
    total_articles: int
    balance_stats: BalanceStats

    @property
    def perspectives(self) -> dict[SimplifiedBias, PerspectiveGroup]:
        return {
            SimplifiedBias.LEFT: self.left,
            SimplifiedBias.CENTER: self.center,
            SimplifiedBias.RIGHT: self.right,
        }


@dataclass(frozen=True)
class BalanceReport:
    """Corpus-level bias distribution over an uncapped article set."""

    topic: str
    left_count: int
    center_count: int
    right_count: int
    unknown_count: int
    total_count: int
    balance: BalanceVerdict


@dataclass(frozen=True)
class SourceBiasCell:
    source: str
    bias: BiasRating
    count: int
    articles: tuple[Article, ...] = ()


@dataclass(frozen=True)
class SourceSentimentCell:
    source: str
    sentiment: float
    count: int
    articles: tuple[Article, ...] = ()
