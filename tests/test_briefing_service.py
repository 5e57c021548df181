"""Tests for BriefingService."""

import pytest

from newsintel.briefing import BriefingService, format_context
from newsintel.data import Article, ArticleSource, BalanceVerdict, DominantPerspective
from newsintel.llm.base import UPSTREAM_ERROR_MESSAGE
from newsintel.search import KeywordSearchIndex


def _article(url: str, source: str = "Reuters", title: str = "", description: str = "") -> Article:
    return Article(
        url=url,
        source=ArticleSource(name=source),
        title=title or url,
        description=description,
        published_at="2024-05-01",
    )


class FakeFetcher:
    """News fetcher returning canned results and recording calls."""

    def __init__(self, headlines: list[Article], results: list[Article]) -> None:
        self._headlines = headlines
        self._results = results
        self.categories: list[str] = []
        self.queries: list[str] = []

    async def fetch_headlines(self, category: str = "general") -> list[Article]:
        self.categories.append(category)
        return list(self._headlines)

    async def search_articles(self, query: str, **kwargs) -> list[Article]:
        self.queries.append(query)
        return list(self._results)


class FakeCompletion:
    """Completion backend capturing prompts."""

    def __init__(self, reply: str = "briefing") -> None:
        self.reply = reply
        self.calls: list[tuple[str, str]] = []

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        self.calls.append((system_prompt, user_prompt))
        return self.reply


@pytest.fixture
def headlines() -> list[Article]:
    return [
        _article("https://a.com/1", title="Rate decision looms", description="Fed rates"),
        _article("https://a.com/2", title="Sports roundup"),
    ]


@pytest.fixture
def fresh() -> list[Article]:
    return [
        _article("https://b.com/1", source="MSNBC", title="Fed holds rates"),
        _article("https://a.com/1", source="Fox News", title="Rates duplicate"),
    ]


@pytest.fixture
def completion() -> FakeCompletion:
    return FakeCompletion()


@pytest.fixture
def service(
    headlines: list[Article], fresh: list[Article], completion: FakeCompletion
) -> BriefingService:
    return BriefingService(
        FakeFetcher(headlines, fresh), completion, KeywordSearchIndex(), related_k=3
    )


def test_format_context() -> None:
    article = Article(
        url="u",
        source=ArticleSource(name="Reuters"),
        title="T",
        description="D",
        published_at="2024-05-01",
        content="C",
    )
    text = format_context([article, article])
    block = "Title: T\nSource: Reuters\nDate: 2024-05-01\nDescription: D\nContent: C"
    assert text == f"{block}\n---\n{block}"
    assert format_context([]) == ""


class TestBriefingService:
    """Tests for BriefingService."""

    def test_rejects_non_positive_context_limit(self, completion: FakeCompletion) -> None:
        with pytest.raises(ValueError, match="context_limit"):
            BriefingService(FakeFetcher([], []), completion, KeywordSearchIndex(), context_limit=0)

    async def test_refresh_replaces_index(self, service: BriefingService) -> None:
        await service.refresh("business")
        await service.refresh("business")

        assert len(service._index.search("rates", k=10)) == 1
        assert service._fetcher.categories == ["business", "business"]

    async def test_related_context(self, service: BriefingService) -> None:
        await service.refresh()
        hits = service.related_context("rate decision")
        assert [h.metadata.title for h in hits] == ["Rate decision looms"]

    async def test_gather_context_merges_fresh_first(self, service: BriefingService) -> None:
        await service.refresh()
        articles = await service.gather_context("rates")

        assert [a.url for a in articles] == ["https://b.com/1", "https://a.com/1"]
        # The fresh copy wins over the indexed one
        assert articles[1].title == "Rates duplicate"

    async def test_gather_context_respects_limit(
        self,
        headlines: list[Article],
        completion: FakeCompletion,
    ) -> None:
        results = [_article(f"https://c.com/{i}") for i in range(12)]
        service = BriefingService(
            FakeFetcher(headlines, results), completion, KeywordSearchIndex(), context_limit=10
        )
        assert len(await service.gather_context("anything")) == 10

    async def test_generate_briefing_prompts(
        self,
        service: BriefingService,
        completion: FakeCompletion,
    ) -> None:
        await service.refresh()
        text = await service.generate_briefing("rates")

        assert text == "briefing"
        system_prompt, user_prompt = completion.calls[0]
        assert '"rates"' in system_prompt
        assert "{topic}" not in system_prompt
        assert user_prompt.startswith("Topic: rates\n\nContext Articles:\n")
        assert "Title: Fed holds rates" in user_prompt
        assert user_prompt.count("\n---\n") == 1

    async def test_generate_briefing_without_context(self, completion: FakeCompletion) -> None:
        service = BriefingService(FakeFetcher([], []), completion, KeywordSearchIndex())
        await service.generate_briefing("obscure")
        assert completion.calls[0][1] == "Topic: obscure\n\nContext Articles:\n"

    async def test_generate_briefing_passes_sentinel_through(self) -> None:
        completion = FakeCompletion(UPSTREAM_ERROR_MESSAGE)
        service = BriefingService(FakeFetcher([], []), completion, KeywordSearchIndex())
        assert await service.generate_briefing("rates") == UPSTREAM_ERROR_MESSAGE

    async def test_chat_with_article(
        self,
        service: BriefingService,
        completion: FakeCompletion,
    ) -> None:
        await service.chat_with_article("Who decided?", "The Fed held rates.")
        _, user_prompt = completion.calls[0]
        assert user_prompt == "Context:\nThe Fed held rates.\n\nQuestion: Who decided?"

    async def test_select_relevant(self, completion: FakeCompletion) -> None:
        candidates = [_article(f"https://d.com/{i}") for i in range(6)]
        completion.reply = "Most relevant: [4, 1, 9]"
        service = BriefingService(FakeFetcher([], []), completion, KeywordSearchIndex())

        selected = await service.select_relevant("rates", candidates, limit=3)

        assert selected == [candidates[4], candidates[1]]
        system_prompt, user_prompt = completion.calls[0]
        assert "3 most relevant" in system_prompt
        assert "0. https://d.com/0 (Reuters)" in user_prompt

    async def test_select_relevant_falls_back(self, completion: FakeCompletion) -> None:
        candidates = [_article(f"https://d.com/{i}") for i in range(6)]
        completion.reply = UPSTREAM_ERROR_MESSAGE
        service = BriefingService(FakeFetcher([], []), completion, KeywordSearchIndex())

        selected = await service.select_relevant("rates", candidates, limit=2)

        assert selected == candidates[:2]

    async def test_select_relevant_no_candidates(self, completion: FakeCompletion) -> None:
        service = BriefingService(FakeFetcher([], []), completion, KeywordSearchIndex())
        assert await service.select_relevant("rates", []) == []
        assert completion.calls == []

    async def test_multi_perspectives(self, completion: FakeCompletion) -> None:
        results = [
            _article("https://e.com/1", source="MSNBC"),
            _article("https://e.com/2", source="Reuters"),
            _article("https://e.com/3", source="Fox News"),
        ]
        service = BriefingService(FakeFetcher([], results), completion, KeywordSearchIndex())

        result = await service.multi_perspectives("rates")

        assert result.topic == "rates"
        assert result.total_articles == 3
        assert result.balance_stats.dominant_perspective == DominantPerspective.BALANCED

    async def test_perspective_balance(self, completion: FakeCompletion) -> None:
        results = [_article(f"https://f.com/{i}", source="Fox News") for i in range(4)]
        service = BriefingService(FakeFetcher([], results), completion, KeywordSearchIndex())

        report = await service.perspective_balance("rates")

        assert report.topic == "rates"
        assert report.balance == BalanceVerdict.RIGHT_LEANING
