"""Tests for merging fresh and local article lists."""

from newsintel.data import Article, ArticleSource, DocumentMetadata, IndexedDocument
from newsintel.merge import documents_to_articles, merge_articles


def _article(url: str, title: str = "") -> Article:
    return Article(url=url, source=ArticleSource(name="Example"), title=title or url)


def test_merge_primary_first_and_dedupes() -> None:
    primary = [_article("a", "Fresh A"), _article("b")]
    secondary = [_article("a", "Stale A"), _article("c")]

    merged = merge_articles(primary, secondary, limit=10)

    assert [a.url for a in merged] == ["a", "b", "c"]
    assert merged[0].title == "Fresh A"


def test_merge_truncates_to_limit() -> None:
    primary = [_article(u) for u in ("a", "b", "c")]
    secondary = [_article("d")]
    assert [a.url for a in merge_articles(primary, secondary, limit=2)] == ["a", "b"]


def test_merge_dedupes_within_primary() -> None:
    primary = [_article("a"), _article("a"), _article("b")]
    assert [a.url for a in merge_articles(primary, [], limit=5)] == ["a", "b"]


def test_merge_non_positive_limit() -> None:
    assert merge_articles([_article("a")], [_article("b")], limit=0) == []
    assert merge_articles([_article("a")], [], limit=-1) == []


def test_merge_empty_inputs() -> None:
    assert merge_articles([], [], limit=5) == []


def test_documents_to_articles_uses_metadata() -> None:
    doc = IndexedDocument(
        text="Body text",
        metadata=DocumentMetadata(
            title="Title",
            url="https://example.com/x",
            source="Reuters",
            published_at="2024-05-01T00:00:00Z",
        ),
    )
    [article] = documents_to_articles([doc])

    assert article.url == "https://example.com/x"
    assert article.title == "Title"
    assert article.source.name == "Reuters"
    assert article.published_at == "2024-05-01T00:00:00Z"
    assert article.description == "Body text"
    assert article.content == "Body text"


def test_documents_to_articles_fallbacks() -> None:
    text = "x" * 80
    doc = IndexedDocument(
        text=text, metadata=DocumentMetadata(title="", url="https://example.com/y", source="")
    )
    [article] = documents_to_articles([doc])

    assert article.title == "x" * 50 + "..."
    assert article.source.name == "Local Context"
    assert article.published_at == "Unknown Date"


def test_merge_output_properties() -> None:
    primary = [_article(u) for u in ("a", "b", "a", "d")]
    secondary = [_article(u) for u in ("d", "e", "b", "f")]
    inputs = {a.url for a in primary + secondary}

    for limit in range(7):
        merged = merge_articles(primary, secondary, limit)
        urls = [a.url for a in merged]
        assert len(urls) == len(set(urls))
        assert len(urls) <= limit
        assert set(urls) <= inputs
