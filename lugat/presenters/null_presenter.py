"""Null view for testing (no output)."""

from lugat.models import InteractionState


class NullPresenter:
    """Present state to nowhere (testing implementation)."""

    def suggestions_changed(self, state: InteractionState) -> None:
        """Suggestions changed (no-op)."""
        pass

    def articles_changed(self, state: InteractionState) -> None:
        """Articles changed (no-op)."""
        pass
