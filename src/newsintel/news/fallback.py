"""Built-in sample articles served when the news API is unavailable."""

from datetime import UTC, datetime

from newsintel.data import Article, ArticleSource


def fallback_articles() -> list[Article]:
    """Return the two sample articles, stamped with the current time."""
    now = datetime.now(tz=UTC).isoformat()
    return [
        Article(
            url="https://www.theverge.com",
            source=ArticleSource(name="The Verge", id="the-verge"),
            author="Nilay Patel",
            title="The Future of AI is Agentic",
            description="How autonomous agents are reshaping the software landscape.",
            url_to_image="https://images.unsplash.com/photo-1677442136019-21780ecad995",
            published_at=now,
            content="AI agents are becoming more capable...",
        ),
        Article(
            url="https://techcrunch.com",
            source=ArticleSource(name="TechCrunch", id="techcrunch"),
            author="Sarah Perez",
            title="Crypto Markets Rally on New Regulations",
            description="Bitcoin and Ethereum see significant gains as new laws pass.",
            url_to_image="https://images.unsplash.com/photo-1518546305927-5a440bb11c19",
            published_at=now,
            content="The cryptocurrency market saw a major boost today...",
        ),
    ]
