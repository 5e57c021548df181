import logging
import os
from typing import Any

import httpx

from newsintel.data import Article
from newsintel.errors import UpstreamUnavailableError
from newsintel.news.fallback import fallback_articles

logger = logging.getLogger(__name__)

NEWSAPI_BASE_URL = "https://newsapi.org/v2"
_REMOVED_TITLE = "[Removed]"


class NewsAPIClient:
    """Fetch articles from NewsAPI.org.

    Failures never propagate: headlines fall back to the built-in sample
    articles and searches return an empty list. A missing API key is
    detected before any request and serves the sample articles for both.

    Args:
        api_key: NewsAPI key (defaults to NEWS_API_KEY env var).
        country: Country code for top headlines.
        base_url: API root, overridable for testing.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        country: str = "us",
        base_url: str = NEWSAPI_BASE_URL,
        timeout: float = 30.0,
    ) -> None:
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout}")
        self._api_key = api_key or os.environ.get("NEWS_API_KEY")
        self._country = country
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    async def fetch_headlines(self, category: str = "general") -> list[Article]:
        if not self._api_key:
            logger.warning("NEWS_API_KEY is not set, returning sample articles")
            return fallback_articles()

        params: dict[str, str] = {"country": self._country, "category": category}
        try:
            return await self._get("top-headlines", params)
        except UpstreamUnavailableError as e:
            logger.error(f"Headline fetch failed ({e.reason}), returning sample articles")
            return fallback_articles()

    async def search_articles(
        self,
        query: str,
        *,
        sort_by: str = "relevancy",
        language: str = "en",
        from_date: str | None = None,
        to_date: str | None = None,
    ) -> list[Article]:
        if not self._api_key:
            logger.warning("NEWS_API_KEY is not set, returning sample articles")
            return fallback_articles()

        params: dict[str, str] = {"q": query, "language": language, "sortBy": sort_by}
        if from_date:
            params["from"] = from_date
        if to_date:
            params["to"] = to_date

        try:
            return await self._get("everything", params)
        except UpstreamUnavailableError as e:
            logger.error(f"Article search for {query!r} failed ({e.reason})")
            return []

    async def _get(self, endpoint: str, params: dict[str, str]) -> list[Article]:
        """Execute one API request and parse its articles.

        Raises:
            UpstreamUnavailableError: With the failure cause as ``reason``.
        """
        url = f"{self._base_url}/{endpoint}"
        params = {**params, "apiKey": self._api_key or ""}
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()
                data = response.json()
        except httpx.TimeoutException as e:
            raise UpstreamUnavailableError("newsapi", "timeout") from e
        except httpx.HTTPStatusError as e:
            raise UpstreamUnavailableError("newsapi", f"http {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise UpstreamUnavailableError("newsapi", f"transport error: {e}") from e
        except ValueError as e:
            raise UpstreamUnavailableError("newsapi", "malformed payload") from e

        if not isinstance(data, dict):
            raise UpstreamUnavailableError("newsapi", "malformed payload")
        if data.get("status") == "error":
            raise UpstreamUnavailableError("newsapi", f"api error: {data.get('message', '')}")

        items = data.get("articles") or []
        if not isinstance(items, list):
            raise UpstreamUnavailableError("newsapi", "malformed payload")
        return _parse_articles(items)


def _parse_articles(items: list[Any]) -> list[Article]:
    articles: list[Article] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        article = Article.from_newsapi(item)
        if not article.url or article.title == _REMOVED_TITLE:
            continue
        articles.append(article)
    return articles
