"""Factory functions to create components from configuration."""

from newsintel.briefing.service import BriefingService
from newsintel.config.models import (
    ClaudeCompletionConfig,
    CompletionConfig,
    GroqCompletionConfig,
    NewsAPIConfig,
    NewsIntelConfig,
)
from newsintel.llm.base import ChatCompletion
from newsintel.llm.claude import ClaudeCompletion
from newsintel.llm.groq import GroqCompletion
from newsintel.news.base import NewsFetcher
from newsintel.news.newsapi import NewsAPIClient
from newsintel.search.base import DocumentIndex


def create_news_fetcher(config: NewsAPIConfig) -> NewsFetcher:
    """Create a news fetcher from config."""
    if isinstance(config, NewsAPIConfig):
        return NewsAPIClient(
            country=config.country,
            base_url=config.base_url,
            timeout=config.timeout_seconds,
        )
    msg = f"Unknown news config type: {type(config)}"
    raise ValueError(msg)


def create_completion(config: CompletionConfig) -> ChatCompletion:
    """Create a completion backend from config.

    Uses explicit type matching rather than getattr.
    """
    if isinstance(config, ClaudeCompletionConfig):
        return ClaudeCompletion(
            model=config.model,
            max_tokens=config.max_tokens,
            temperature=config.temperature,
            timeout=config.timeout_seconds,
        )
    if isinstance(config, GroqCompletionConfig):
        return GroqCompletion(
            model=config.model,
            max_tokens=config.max_tokens,
            temperature=config.temperature,
            timeout=config.timeout_seconds,
        )
    msg = f"Unknown completion config type: {type(config)}"
    raise ValueError(msg)


def create_from_config(
    config: NewsIntelConfig,
    *,
    index: DocumentIndex | None = None,
) -> BriefingService:
    """Create a briefing service from root config.

    Args:
        config: Root configuration.
        index: Search index to use instead of the process-wide one.

    Returns:
        A BriefingService wired to the configured fetcher and backend.
    """
    return BriefingService(
        fetcher=create_news_fetcher(config.news),
        completion=create_completion(config.completion),
        index=index,
        context_limit=config.briefing.context_limit,
        related_k=config.briefing.related_k,
        articles_per_perspective=config.briefing.articles_per_perspective,
    )
