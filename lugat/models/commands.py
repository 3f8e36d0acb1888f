"""Instructions the controller hands back to the presentation layer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScrollIntoView:
    """Bring the suggestion at ``index`` into view."""

    index: int


@dataclass(frozen=True)
class FocusInput:
    """Return keyboard focus to the search input."""


ViewCommand = ScrollIntoView | FocusInput
