"""GUI view implementation using Qt signals."""

from PyQt6.QtCore import QObject, pyqtSignal

from lugat.models import InteractionState


class GUIPresenter(QObject):
    """SearchView that forwards state changes as Qt signals.

    Implements SearchView through structural subtyping (duck typing).
    This avoids metaclass conflicts between QObject and Protocol metaclasses.
    """

    suggestions_signal = pyqtSignal(object)  # InteractionState
    articles_signal = pyqtSignal(object)  # InteractionState

    def __init__(self, parent=None):
        """Initialize the GUI presenter.

        Args:
            parent: Optional parent QObject
        """
        super().__init__(parent)

    def suggestions_changed(self, state: InteractionState) -> None:
        """Announce a change of query text, suggestions or highlight."""
        self.suggestions_signal.emit(state)

    def articles_changed(self, state: InteractionState) -> None:
        """Announce a change of selection, articles or history."""
        self.articles_signal.emit(state)
