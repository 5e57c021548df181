"""Source and text classifiers: bias, credibility and sentiment."""

from newsintel.classify.bias import (
    bias_info,
    classify_bias,
    group_sources_by_bias,
    is_left_bias,
    is_right_bias,
    normalize_source_name,
    simplify_bias,
    source_bias_info,
)
from newsintel.classify.credibility import (
    classify_credibility,
    credibility_color,
    credibility_tier,
    sort_by_credibility,
)
from newsintel.classify.sentiment import (
    LexiconScorer,
    SentimentAnalyzer,
    VaderLexiconScorer,
    classify_comparative,
    sentiment_color,
    sentiment_gradient,
)

__all__ = [
    "LexiconScorer",
    "SentimentAnalyzer",
    "VaderLexiconScorer",
    "bias_info",
    "classify_bias",
    "classify_comparative",
    "classify_credibility",
    "credibility_color",
    "credibility_tier",
    "group_sources_by_bias",
    "is_left_bias",
    "is_right_bias",
    "normalize_source_name",
    "sentiment_color",
    "sentiment_gradient",
    "simplify_bias",
    "sort_by_credibility",
    "source_bias_info",
]
