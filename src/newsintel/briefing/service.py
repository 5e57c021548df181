"""Briefing service wiring news fetch, retrieval, aggregation and the LLM.

Flow for a briefing:
1. Fresh articles for the topic come from the news fetcher
2. Related articles come from the local keyword index
3. Both are merged by URL, fresh first, and capped
4. The merged context is formatted and sent to the completion backend
"""

import logging

from newsintel.data import Article, BalanceReport, IndexedDocument, MultiPerspectiveResult
from newsintel.llm.base import ChatCompletion, is_error_message
from newsintel.llm.selection import DEFAULT_SELECTION_SIZE, parse_selected_indices
from newsintel.merge import documents_to_articles, merge_articles
from newsintel.news.base import NewsFetcher
from newsintel.perspective.aggregator import aggregate_perspectives, analyze_balance
from newsintel.search.base import DocumentIndex
from newsintel.search.keyword import get_search_index

logger = logging.getLogger(__name__)

BRIEFING_SYSTEM_PROMPT = """\
You are a senior intelligence analyst. Write a deep-dive briefing on: "{topic}".

Use the provided articles as your primary source of truth. If they are not \
relevant to the topic, ignore them, rely on general knowledge and say in the \
executive summary that recent coverage was not available.

Synthesize rather than summarize: identify trends, conflicts and drivers.

Format in Markdown with these sections:
## Executive Summary
## Key Developments
## Strategic Context
## Future Implications

Tone: professional, objective, no filler.\
"""

CHAT_SYSTEM_PROMPT = """\
You are a helpful news assistant. Answer the user's question based only on \
the provided article context. Keep it concise and conversational.\
"""

SELECTION_SYSTEM_PROMPT = """\
You select the news articles most relevant to a topic. Given a numbered list \
of candidates, respond with a JSON array of the {limit} most relevant \
candidate numbers, most relevant first, e.g. [3, 0, 7]. Return ONLY the JSON \
array.\
"""


def format_context(articles: list[Article]) -> str:
    """Render articles as plain-text blocks separated by ``---``."""
    blocks = [
        "\n".join(
            [
                f"Title: {a.title}",
                f"Source: {a.source.name}",
                f"Date: {a.published_at or ''}",
                f"Description: {a.description or ''}",
                f"Content: {a.content or ''}",
            ]
        )
        for a in articles
    ]
    return "\n---\n".join(blocks)


class BriefingService:
    """Produce briefings, related context and perspective views for topics.

    Args:
        fetcher: News source for headlines and topic searches.
        completion: Chat completion backend.
        index: Search index for local context (defaults to the
            process-wide index).
        context_limit: Maximum articles in a briefing context.
        related_k: Local index hits merged into a briefing context.
        articles_per_perspective: Cap per column for multi-perspective views.
    """

    def __init__(
        self,
        fetcher: NewsFetcher,
        completion: ChatCompletion,
        index: DocumentIndex | None = None,
        *,
        context_limit: int = 10,
        related_k: int = 3,
        articles_per_perspective: int = 5,
    ) -> None:
        if context_limit <= 0:
            raise ValueError(f"context_limit must be positive, got {context_limit}")
        self._fetcher = fetcher
        self._completion = completion
        self._index = index if index is not None else get_search_index()
        self._context_limit = context_limit
        self._related_k = related_k
        self._articles_per_perspective = articles_per_perspective

    async def refresh(self, category: str = "general") -> list[Article]:
        """Fetch headlines and publish them as the new index contents."""
        articles = await self._fetcher.fetch_headlines(category)
        self._index.index_articles(articles, replace=True)
        logger.info(f"Refreshed {category!r} headlines: {len(articles)} articles")
        return articles

    def related_context(self, query: str, k: int = 5) -> list[IndexedDocument]:
        return self._index.search(query, k)

    async def gather_context(self, topic: str) -> list[Article]:
        """Merge a fresh topic search with local index hits."""
        fresh = await self._fetcher.search_articles(topic)
        local = documents_to_articles(self._index.search(topic, self._related_k))
        merged = merge_articles(fresh, local, self._context_limit)
        logger.info(
            f"Context for {topic!r}: {len(fresh)} fresh, {len(local)} local, "
            f"{len(merged)} after merge"
        )
        return merged

    async def generate_briefing(self, topic: str) -> str:
        """Write a briefing on a topic.

        Returns:
            The completion text, or a sentinel ``"Error: ..."`` string when
            the completion backend is unconfigured or unavailable.
        """
        articles = await self.gather_context(topic)
        if not articles:
            logger.warning(f"No context articles for {topic!r}, briefing from model knowledge")

        user_prompt = f"Topic: {topic}\n\nContext Articles:\n{format_context(articles)}"
        return await self._completion.complete(
            BRIEFING_SYSTEM_PROMPT.format(topic=topic), user_prompt
        )

    async def chat_with_article(self, question: str, context: str) -> str:
        user_prompt = f"Context:\n{context}\n\nQuestion: {question}"
        return await self._completion.complete(CHAT_SYSTEM_PROMPT, user_prompt)

    async def select_relevant(
        self,
        topic: str,
        candidates: list[Article],
        limit: int = DEFAULT_SELECTION_SIZE,
    ) -> list[Article]:
        """Let the model pick the candidates most relevant to a topic.

        Falls back to the first candidates when the model output has no
        usable index list.
        """
        if not candidates:
            return []

        listing = "\n".join(
            f"{i}. {a.title} ({a.source.name}): {a.description or ''}"
            for i, a in enumerate(candidates)
        )
        text = await self._completion.complete(
            SELECTION_SYSTEM_PROMPT.format(limit=limit),
            f"Topic: {topic}\n\nCandidates:\n{listing}",
        )
        if is_error_message(text):
            logger.warning("Completion unavailable for article selection, using default")

        indices = parse_selected_indices(text, len(candidates), limit=limit, default_size=limit)
        return [candidates[i] for i in indices]

    async def multi_perspectives(self, topic: str) -> MultiPerspectiveResult:
        articles = await self._fetcher.search_articles(topic)
        return aggregate_perspectives(
            articles, self._articles_per_perspective, topic=topic
        )

    async def perspective_balance(self, topic: str) -> BalanceReport:
        articles = await self._fetcher.search_articles(topic)
        return analyze_balance(articles, topic=topic)
