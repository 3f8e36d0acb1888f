"""Protocol for the dictionary data-access collaborator."""

from typing import Protocol

from lugat.models import Article, Translation


class DataStore(Protocol):
    """Interface for a backend that holds the word index and articles.

    Any source (local SQLite index, hosted GraphQL API, test doubles)
    implements this protocol. Calls are blocking; asynchrony is provided
    by running them through a QueryRunner.
    """

    def query_by_prefix(self, prefix: str) -> list[Translation]:
        """Find every translation whose word begins with a prefix.

        Args:
            prefix: Lower-cased prefix (the caller folds case).

        Returns:
            Matching translations in store order.

        Raises:
            QueryError: If the store cannot be queried.
        """
        ...

    def query_articles_by_word(self, word: str) -> list[Article]:
        """List every article whose word equals ``word`` exactly.

        Raises:
            QueryError: If the store cannot be queried.
        """
        ...
