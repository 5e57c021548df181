"""Data models for newsintel."""

from newsintel.data.models import (
    Article,
    ArticleSource,
    BalanceReport,
    BalanceStats,
    BalanceVerdict,
    BiasInfo,
    BiasRating,
    CredibilityFactors,
    CredibilityInfo,
    CredibilityScore,
    CredibilityTier,
    DocumentMetadata,
    DominantPerspective,
    IndexedDocument,
    LexicalScore,
    MultiPerspectiveResult,
    PerspectiveGroup,
    SentimentClassification,
    SentimentResult,
    SentimentSummary,
    SimplifiedBias,
    SourceBiasCell,
    SourceSentimentCell,
)

__all__ = [
    "Article",
    "ArticleSource",
    "BalanceReport",
    "BalanceStats",
    "BalanceVerdict",
    "BiasInfo",
    "BiasRating",
    "CredibilityFactors",
    "CredibilityInfo",
    "CredibilityScore",
    "CredibilityTier",
    "DocumentMetadata",
    "DominantPerspective",
    "IndexedDocument",
    "LexicalScore",
    "MultiPerspectiveResult",
    "PerspectiveGroup",
    "SentimentClassification",
    "SentimentResult",
    "SentimentSummary",
    "SimplifiedBias",
    "SourceBiasCell",
    "SourceSentimentCell",
]
