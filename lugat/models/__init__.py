"""Data models for Lugat."""

from .commands import FocusInput, ScrollIntoView, ViewCommand
from .entry import Article, Translation
from .state import InteractionState

__all__ = [
    "Translation",
    "Article",
    "InteractionState",
    "ViewCommand",
    "ScrollIntoView",
    "FocusInput",
]
