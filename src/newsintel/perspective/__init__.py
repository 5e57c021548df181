"""Perspective grouping, balance statistics and per-source views."""

from newsintel.perspective.aggregator import (
    STOP_WORDS,
    aggregate_perspectives,
    analyze_balance,
    bucket_by_bias,
    dominant_perspective,
    extract_themes,
)
from newsintel.perspective.heatmap import (
    bias_distribution,
    group_by_source,
    source_bias_cells,
    source_sentiment_cells,
)

__all__ = [
    "STOP_WORDS",
    "aggregate_perspectives",
    "analyze_balance",
    "bias_distribution",
    "bucket_by_bias",
    "dominant_perspective",
    "extract_themes",
    "group_by_source",
    "source_bias_cells",
    "source_sentiment_cells",
]
