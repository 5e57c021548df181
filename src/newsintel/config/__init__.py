"""Configuration module for newsintel."""

from newsintel.config.factory import create_completion, create_from_config, create_news_fetcher
from newsintel.config.loader import get_default_config_path, load_config
from newsintel.config.models import (
    BriefingConfig,
    ClaudeCompletionConfig,
    CompletionConfig,
    GroqCompletionConfig,
    NewsAPIConfig,
    NewsIntelConfig,
)

__all__ = [
    "BriefingConfig",
    "ClaudeCompletionConfig",
    "CompletionConfig",
    "GroqCompletionConfig",
    "NewsAPIConfig",
    "NewsIntelConfig",
    "create_completion",
    "create_from_config",
    "create_news_fetcher",
    "get_default_config_path",
    "load_config",
]
