"""Services for Lugat."""

from .entry_renderer import EntryRenderer, parse_link
from .runners import ImmediateRunner
from .search_controller import Key, SearchController
from .store_factory import create_store

__all__ = [
    "EntryRenderer",
    "ImmediateRunner",
    "Key",
    "SearchController",
    "create_store",
    "parse_link",
]
