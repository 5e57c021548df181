"""Tests for the keyword search index."""

import threading

import pytest

from newsintel.data import Article, ArticleSource, DocumentMetadata, IndexedDocument
from newsintel.search import KeywordSearchIndex, get_search_index, score_document


def _article(title: str, description: str = "", url: str | None = None) -> Article:
    return Article(
        url=url or f"https://example.com/{title.lower().replace(' ', '-')}",
        source=ArticleSource(name="Example"),
        title=title,
        description=description,
    )


def _doc(title: str, description: str = "", url: str | None = None) -> IndexedDocument:
    return IndexedDocument.from_article(_article(title, description, url))


@pytest.fixture
def index() -> KeywordSearchIndex:
    index = KeywordSearchIndex()
    index.index_articles(
        [
            _article("AI Regulation Bill", "Lawmakers debate new regulation."),
            _article("Climate Talks Stall", "Delegates leave the climate summit."),
            _article("Markets Today", "Stocks mixed as regulation fears ease."),
        ]
    )
    return index


# -- Scoring --


def test_score_title_text_and_token() -> None:
    doc = _doc("AI Regulation Bill", "Lawmakers debate new regulation.")
    assert score_document(doc, "regulation") == pytest.approx(3.5)


def test_score_is_case_insensitive() -> None:
    doc = _doc("AI Regulation Bill")
    assert score_document(doc, "REGULATION") == score_document(doc, "regulation")


def test_score_repeated_tokens_count_again() -> None:
    doc = _doc("Climate Talks Stall")
    assert score_document(doc, "climate climate") == pytest.approx(1.0)


def test_score_short_tokens_ignored() -> None:
    doc = _doc("AI Regulation Bill")
    # "ai" matches the full-query text and title checks but is too short as a token
    assert score_document(doc, "ai") == pytest.approx(3.0)
    assert score_document(doc, "xyz ai bill") == pytest.approx(0.5)


def test_score_no_match() -> None:
    assert score_document(_doc("AI Regulation Bill"), "football") == 0.0


class TestKeywordSearchIndex:
    """Tests for KeywordSearchIndex."""

    def test_orders_by_score(self, index: KeywordSearchIndex) -> None:
        results = index.search("regulation", k=3)
        assert [r.metadata.title for r in results] == ["AI Regulation Bill", "Markets Today"]

    def test_respects_k(self, index: KeywordSearchIndex) -> None:
        assert len(index.search("regulation", k=1)) == 1
        assert index.search("regulation", k=0) == []

    def test_excludes_zero_scores(self, index: KeywordSearchIndex) -> None:
        assert index.search("football") == []

    def test_empty_query_matches_everything(self, index: KeywordSearchIndex) -> None:
        """The empty string occurs in every title and text, so all documents tie."""
        results = index.search("", k=5)
        assert [r.metadata.title for r in results] == [
            "AI Regulation Bill",
            "Climate Talks Stall",
            "Markets Today",
        ]
        assert len(index.search("", k=2)) == 2

    def test_whitespace_query_needs_literal_match(self, index: KeywordSearchIndex) -> None:
        assert index.search("   ") == []

    def test_ties_keep_insertion_order(self) -> None:
        index = KeywordSearchIndex(
            [_doc("First", "budget vote"), _doc("Second", "budget vote"), _doc("Third", "budget")]
        )
        results = index.search("budget vote", k=3)
        assert [r.metadata.title for r in results] == ["First", "Second", "Third"]

    def test_empty_index(self) -> None:
        assert KeywordSearchIndex().search("anything") == []

    def test_insert_does_not_deduplicate(self) -> None:
        index = KeywordSearchIndex()
        article = _article("Same Story")
        index.index_articles([article])
        index.index_articles([article])
        assert len(index) == 2

    def test_reset_clears(self, index: KeywordSearchIndex) -> None:
        index.reset()
        assert len(index) == 0
        assert index.search("regulation") == []

    def test_replace_publishes_new_collection(self, index: KeywordSearchIndex) -> None:
        index.index_articles([_article("Fresh Headline", "regulation update")], replace=True)
        assert len(index) == 1
        assert [r.metadata.title for r in index.search("regulation")] == ["Fresh Headline"]

    def test_snapshot_is_not_mutated_by_writers(self, index: KeywordSearchIndex) -> None:
        before = index.snapshot()
        index.insert([_doc("Later")])
        index.rebuild([])
        assert len(before) == 3
        assert len(index.snapshot()) == 0

    def test_concurrent_rebuilds_leave_a_complete_collection(self) -> None:
        index = KeywordSearchIndex()
        batches = [[_doc(f"Batch {b} item {i}") for i in range(20)] for b in range(8)]
        seen_sizes: list[int] = []

        def writer(batch: list[IndexedDocument]) -> None:
            for _ in range(50):
                index.rebuild(batch)

        def reader() -> None:
            for _ in range(200):
                seen_sizes.append(len(index.snapshot()))

        threads = [threading.Thread(target=writer, args=(b,)) for b in batches]
        threads.append(threading.Thread(target=reader))
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert set(seen_sizes) <= {0, 20}
        assert len(index) == 20


def test_document_text_from_article() -> None:
    doc = IndexedDocument.from_article(_article("Title", "Desc"))
    assert doc.text == "Title. Desc. "
    assert doc.metadata == DocumentMetadata(
        title="Title", url="https://example.com/title", source="Example"
    )


def test_default_index_is_shared() -> None:
    assert get_search_index() is get_search_index()


def test_search_returns_only_matching_document() -> None:
    index = KeywordSearchIndex()
    index.index_articles([_article("AI Regulation Bill"), _article("Sports Recap")])
    assert [r.metadata.title for r in index.search("regulation", 5)] == ["AI Regulation Bill"]


def test_better_new_match_ranks_first() -> None:
    index = KeywordSearchIndex([_doc("Markets Today", "Stocks mixed as regulation fears ease.")])
    index.index_articles([_article("Regulation", "regulation")])
    assert index.search("regulation", 1)[0].metadata.title == "Regulation"
