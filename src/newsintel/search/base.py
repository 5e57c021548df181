from typing import Protocol

from newsintel.data import Article, IndexedDocument


class DocumentIndex(Protocol):
    """Interface for searchable article collections."""

    def index_articles(self, articles: list[Article], *, replace: bool = False) -> None:
        """Add articles to the index, or replace its contents when ``replace``."""
        ...

    def search(self, query: str, k: int = 3) -> list[IndexedDocument]:
        """Return up to ``k`` matching documents, most relevant first."""
        ...

    def reset(self) -> None: ...
