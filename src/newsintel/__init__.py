"""newsintel: retrieval and perspective aggregation for news intelligence."""

from newsintel.briefing import BriefingService, format_context
from newsintel.classify import (
    LexiconScorer,
    SentimentAnalyzer,
    VaderLexiconScorer,
    bias_info,
    classify_bias,
    classify_credibility,
    credibility_tier,
    group_sources_by_bias,
    sentiment_color,
    sentiment_gradient,
    simplify_bias,
    source_bias_info,
    sort_by_credibility,
)
from newsintel.config import NewsIntelConfig, create_from_config, load_config
from newsintel.data import (
    Article,
    ArticleSource,
    BalanceReport,
    BalanceStats,
    BalanceVerdict,
    BiasInfo,
    BiasRating,
    CredibilityInfo,
    CredibilityScore,
    CredibilityTier,
    DominantPerspective,
    IndexedDocument,
    MultiPerspectiveResult,
    PerspectiveGroup,
    SentimentClassification,
    SentimentResult,
    SentimentSummary,
    SimplifiedBias,
)
from newsintel.errors import MissingCredentialError, UpstreamUnavailableError
from newsintel.llm import (
    ChatCompletion,
    ClaudeCompletion,
    GroqCompletion,
    is_error_message,
    parse_selected_indices,
)
from newsintel.merge import documents_to_articles, merge_articles
from newsintel.news import NewsAPIClient, NewsFetcher, fallback_articles
from newsintel.perspective import (
    aggregate_perspectives,
    analyze_balance,
    extract_themes,
    source_bias_cells,
    source_sentiment_cells,
)
from newsintel.search import DocumentIndex, KeywordSearchIndex, get_search_index

__all__ = [
    # Models
    "Article",
    "ArticleSource",
    "BalanceReport",
    "BalanceStats",
    "BalanceVerdict",
    "BiasInfo",
    "BiasRating",
    "CredibilityInfo",
    "CredibilityScore",
    "CredibilityTier",
    "DominantPerspective",
    "IndexedDocument",
    "MultiPerspectiveResult",
    "PerspectiveGroup",
    "SentimentClassification",
    "SentimentResult",
    "SentimentSummary",
    "SimplifiedBias",
    # Errors
    "MissingCredentialError",
    "UpstreamUnavailableError",
    # Classifiers
    "bias_info",
    "classify_bias",
    "classify_credibility",
    "credibility_tier",
    "group_sources_by_bias",
    "simplify_bias",
    "sort_by_credibility",
    "source_bias_info",
    "LexiconScorer",
    "SentimentAnalyzer",
    "VaderLexiconScorer",
    "sentiment_color",
    "sentiment_gradient",
    # Search
    "DocumentIndex",
    "KeywordSearchIndex",
    "get_search_index",
    # Perspectives
    "aggregate_perspectives",
    "analyze_balance",
    "extract_themes",
    "source_bias_cells",
    "source_sentiment_cells",
    # Merge
    "documents_to_articles",
    "merge_articles",
    # Protocols
    "ChatCompletion",
    "NewsFetcher",
    # Collaborators
    "ClaudeCompletion",
    "GroqCompletion",
    "NewsAPIClient",
    "fallback_articles",
    "is_error_message",
    "parse_selected_indices",
    # Briefing
    "BriefingService",
    "format_context",
    # Config
    "NewsIntelConfig",
    "create_from_config",
    "load_config",
]
