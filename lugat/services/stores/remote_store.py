"""Hosted dictionary API store (GraphQL over HTTP)."""

import logging
from typing import Any

import requests

from lugat.exceptions import QueryError
from lugat.models import Article, Translation

logger = logging.getLogger(__name__)

LIST_TRANSLATIONS_QUERY = """
query ListTranslations($filter: ModelTranslationFilterInput, $limit: Int, $nextToken: String) {
  listTranslations(filter: $filter, limit: $limit, nextToken: $nextToken) {
    items { word dict shorteningPos }
    nextToken
  }
}
"""

LIST_ARTICLES_QUERY = """
query ListArticles($filter: ModelArticleFilterInput, $limit: Int, $nextToken: String) {
  listArticles(filter: $filter, limit: $limit, nextToken: $nextToken) {
    items { word text }
    nextToken
  }
}
"""

# Upper bound on pages followed for one query
MAX_PAGES = 50


class RemoteStore:
    """Online dictionary store backed by the hosted GraphQL data API.

    Implements DataStore protocol. Translations are matched on their
    lower-cased ``wordPattern`` field; list results are paginated and all
    pages are collected.
    """

    def __init__(
        self,
        api_url: str,
        api_key: str = "",
        timeout: float = 10.0,
        page_size: int = 100,
        session: requests.Session | None = None,
    ):
        """Initialize with API endpoint and credentials.

        Args:
            api_url: GraphQL endpoint URL.
            api_key: API key sent in the ``x-api-key`` header.
            timeout: Seconds to wait for each HTTP request.
            page_size: Items requested per page.
            session: Optional requests session (a new one if omitted).
        """
        self._api_url = api_url
        self._api_key = api_key
        self._timeout = timeout
        self._page_size = page_size
        self._session = session or requests.Session()

    def query_by_prefix(self, prefix: str) -> list[Translation]:
        """Find translations whose word pattern begins with ``prefix``.

        Raises:
            QueryError: On network, HTTP or GraphQL errors
        """
        items = self._list_all(
            LIST_TRANSLATIONS_QUERY,
            "listTranslations",
            {"wordPattern": {"beginsWith": prefix}},
        )
        return [Translation.from_dict(item) for item in items]

    def query_articles_by_word(self, word: str) -> list[Article]:
        """List articles whose word equals ``word``.

        Raises:
            QueryError: On network, HTTP or GraphQL errors
        """
        items = self._list_all(LIST_ARTICLES_QUERY, "listArticles", {"word": {"eq": word}})
        return [Article.from_dict(item) for item in items]

    def _list_all(self, query: str, field: str, filter_: dict[str, Any]) -> list[dict]:
        """Run a list query and follow ``nextToken`` until the last page."""
        items: list[dict] = []
        next_token = None

        for _ in range(MAX_PAGES):
            variables = {"filter": filter_, "limit": self._page_size, "nextToken": next_token}
            data = self._post(query, variables)

            connection = (data or {}).get(field) or {}
            items.extend(item for item in connection.get("items") or [] if item)

            next_token = connection.get("nextToken")
            if not next_token:
                return items

        logger.warning(f"{field} still paginating after {MAX_PAGES} pages, truncating results")
        return items

    def _post(self, query: str, variables: dict[str, Any]) -> dict:
        """POST one GraphQL request and return its ``data`` member."""
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["x-api-key"] = self._api_key

        try:
            response = self._session.post(
                self._api_url,
                json={"query": query, "variables": variables},
                headers=headers,
                timeout=self._timeout,
            )
        except requests.exceptions.Timeout as e:
            raise QueryError(f"Dictionary API timed out after {self._timeout}s") from e
        except requests.RequestException as e:
            raise QueryError(f"Dictionary API request failed: {e}") from e

        if response.status_code != 200:
            raise QueryError(f"Dictionary API returned HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise QueryError(f"Dictionary API returned invalid JSON: {e}") from e

        if not isinstance(payload, dict):
            raise QueryError("Dictionary API returned an unexpected payload")

        errors = payload.get("errors")
        if errors:
            message = "; ".join(
                str(err.get("message", err)) if isinstance(err, dict) else str(err) for err in errors
            )
            raise QueryError(f"Dictionary API error: {message}")

        return payload.get("data") or {}
