"""Interface protocols for Lugat."""

from .data_store import DataStore
from .presenter import SearchView
from .query_runner import QueryRunner

__all__ = ["DataStore", "QueryRunner", "SearchView"]
