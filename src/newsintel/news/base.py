from typing import Protocol

from newsintel.data import Article


class NewsFetcher(Protocol):
    """Interface for news article sources."""

    async def fetch_headlines(self, category: str = "general") -> list[Article]:
        """Fetch top headlines for a category.

        Returns:
            Headline articles, or a fixed sample set when the upstream fails.
        """
        ...

    async def search_articles(
        self,
        query: str,
        *,
        sort_by: str = "relevancy",
        language: str = "en",
        from_date: str | None = None,
        to_date: str | None = None,
    ) -> list[Article]:
        """Search articles matching a free-text query.

        Args:
            query: Search query.
            sort_by: One of ``relevancy``, ``popularity``, ``publishedAt``.
            language: Two-letter language code.
            from_date: Start date filter (ISO format, e.g. "2026-01-01").
            to_date: End date filter (ISO format).

        Returns:
            Matching articles; empty when the upstream fails.
        """
        ...
