"""Custom exceptions for Lugat."""

from .base import LugatException
from .config import ConfigError
from .store import QueryError, StoreSetupError

__all__ = [
    "LugatException",
    "ConfigError",
    "QueryError",
    "StoreSetupError",
]
