"""In-memory keyword search over indexed articles.

Relevance of a document for a lowercased query:

    +1.0  if the full query occurs in the document text
    +2.0  if the full query occurs in the document title
    +0.5  for every whitespace token of the query longer than 3 characters
          that occurs in the document text (repeated tokens count again)

There is no stemming or TF-IDF; this is headline-context retrieval, not a
ranking function. Documents scoring zero are never returned and ties keep
insertion order.

The document collection is an immutable tuple. Writers build a replacement
tuple under a lock and publish it with a single assignment, so a concurrent
``search`` sees either the old or the new collection, never a partial one.
"""

import logging
import threading

from newsintel.data import Article, IndexedDocument

logger = logging.getLogger(__name__)

TITLE_MATCH_SCORE = 2.0
TEXT_MATCH_SCORE = 1.0
TOKEN_MATCH_SCORE = 0.5
MIN_TOKEN_LENGTH = 4


def score_document(document: IndexedDocument, query: str) -> float:
    """Compute the keyword relevance of a document for a query.

    Args:
        document: Document to score.
        query: Search query; matched case-insensitively.

    Returns:
        Non-negative relevance score; 0.0 means no match.
    """
    lower_query = query.lower()
    text = document.text.lower()
    title = (document.metadata.title or "").lower()

    score = 0.0
    if lower_query in text:
        score += TEXT_MATCH_SCORE
    if lower_query in title:
        score += TITLE_MATCH_SCORE
    for token in lower_query.split():
        if len(token) >= MIN_TOKEN_LENGTH and token in text:
            score += TOKEN_MATCH_SCORE
    return score


class KeywordSearchIndex:
    """Process-wide keyword index with snapshot-swap updates.

    Args:
        documents: Optional initial documents.
    """

    def __init__(self, documents: list[IndexedDocument] | None = None) -> None:
        self._documents: tuple[IndexedDocument, ...] = tuple(documents or ())
        self._write_lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._documents)

    def snapshot(self) -> tuple[IndexedDocument, ...]:
        """Return the currently published documents."""
        return self._documents

    def insert(self, documents: list[IndexedDocument]) -> None:
        """Append documents. No deduplication by URL happens here."""
        with self._write_lock:
            self._documents = self._documents + tuple(documents)

    def reset(self) -> None:
        """Discard all documents."""
        with self._write_lock:
            self._documents = ()

    def rebuild(self, documents: list[IndexedDocument]) -> None:
        """Replace the whole collection in one step.

        Equivalent to ``reset`` followed by ``insert`` but without the empty
        intermediate state being visible to readers.
        """
        replacement = tuple(documents)
        with self._write_lock:
            self._documents = replacement
        logger.info(f"Rebuilt search index with {len(replacement)} documents")

    def index_articles(self, articles: list[Article], *, replace: bool = False) -> None:
        """Convert articles to documents and add them to the index.

        Args:
            articles: Articles to index.
            replace: Publish the articles as the whole collection instead
                of appending them.
        """
        documents = [IndexedDocument.from_article(a) for a in articles]
        if replace:
            self.rebuild(documents)
        else:
            self.insert(documents)
            logger.info(f"Indexed {len(documents)} articles for search")

    def search(self, query: str, k: int = 3) -> list[IndexedDocument]:
        """Return up to ``k`` documents ordered by relevance.

        Args:
            query: Search query.
            k: Maximum number of documents to return.

        Returns:
            Documents with a positive score, best first; ties keep
            insertion order. An empty query matches every document.
        """
        if k <= 0:
            return []
        documents = self._documents
        scored = [(score_document(doc, query), doc) for doc in documents]
        matches = [item for item in scored if item[0] > 0]
        # sorted() is stable, so equal scores stay in insertion order
        matches = sorted(matches, key=lambda item: item[0], reverse=True)
        return [doc for _, doc in matches[:k]]


_default_index = KeywordSearchIndex()


def get_search_index() -> KeywordSearchIndex:
    """Return the process-wide index shared by refresh and retrieval."""
    return _default_index
