from newsintel.search.base import DocumentIndex
from newsintel.search.keyword import KeywordSearchIndex, get_search_index, score_document

__all__ = [
    "DocumentIndex",
    "KeywordSearchIndex",
    "get_search_index",
    "score_document",
]
