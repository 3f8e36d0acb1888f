"""Widgets for the GUI shell."""

from .search_widget import SearchWidget

__all__ = ["SearchWidget"]
