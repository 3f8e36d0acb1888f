"""Interaction state owned by the search controller."""

from dataclasses import dataclass, field

from .entry import Article, Translation


@dataclass
class InteractionState:
    """Everything the lookup widget shows, in one explicit object.

    Only SearchController mutates this; views read it when notified.
    """

    query_text: str = ""
    suggestions: list[Translation] = field(default_factory=list)
    active_index: int = -1  # -1 means no highlighted suggestion
    selected: Translation | None = None
    articles: list[Article] = field(default_factory=list)
    history: list[str] = field(default_factory=list)  # Append-only, most recent last

    @property
    def active_suggestion(self) -> Translation | None:
        """The highlighted suggestion, or None when nothing is highlighted."""
        if 0 <= self.active_index < len(self.suggestions):
            return self.suggestions[self.active_index]
        return None
