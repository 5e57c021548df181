from newsintel.news.base import NewsFetcher
from newsintel.news.fallback import fallback_articles
from newsintel.news.newsapi import NEWSAPI_BASE_URL, NewsAPIClient

__all__ = [
    "NEWSAPI_BASE_URL",
    "NewsAPIClient",
    "NewsFetcher",
    "fallback_articles",
]
