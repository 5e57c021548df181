"""Combine fresh and locally indexed articles into one context list."""

from newsintel.data import Article, ArticleSource, IndexedDocument

LOCAL_SOURCE_NAME = "Local Context"
UNKNOWN_DATE = "Unknown Date"
_TITLE_PREVIEW_LENGTH = 50


def merge_articles(primary: list[Article], secondary: list[Article], limit: int) -> list[Article]:
    """Concatenate two article lists, drop repeated URLs and truncate.

    The first occurrence of a URL wins, so primary entries take priority
    over secondary duplicates. There is no interleaving: when ``primary``
    alone reaches ``limit`` no secondary article is kept.

    Args:
        primary: Preferred articles, e.g. a fresh topic search.
        secondary: Supplementary articles, e.g. local index hits.
        limit: Maximum number of articles to return.

    Returns:
        Deduplicated articles in first-occurrence order.
    """
    if limit <= 0:
        return []

    seen_urls: set[str] = set()
    merged: list[Article] = []
    for article in [*primary, *secondary]:
        if article.url in seen_urls:
            continue
        seen_urls.add(article.url)
        merged.append(article)
        if len(merged) == limit:
            break
    return merged


def documents_to_articles(documents: list[IndexedDocument]) -> list[Article]:
    """Turn search index hits back into articles for merging."""
    articles: list[Article] = []
    for doc in documents:
        meta = doc.metadata
        title = meta.title or f"{doc.text[:_TITLE_PREVIEW_LENGTH]}..."
        articles.append(
            Article(
                url=meta.url,
                source=ArticleSource(name=meta.source or LOCAL_SOURCE_NAME),
                title=title,
                description=doc.text,
                url_to_image=meta.url_to_image,
                published_at=meta.published_at or UNKNOWN_DATE,
                content=doc.text,
            )
        )
    return articles
