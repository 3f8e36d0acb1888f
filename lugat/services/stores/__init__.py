"""Data store implementations."""

from .remote_store import RemoteStore
from .sqlite_store import SQLiteStore

__all__ = ["RemoteStore", "SQLiteStore"]
