"""View protocol for output abstraction."""

from typing import Protocol

from lugat.models import InteractionState


class SearchView(Protocol):
    """Interface for showing interaction state to the user (CLI, GUI, etc).

    The controller calls these after it mutates state. Commands such as
    scrolling or focusing are returned from the controller's handlers
    instead, so they only happen in response to user input.
    """

    def suggestions_changed(self, state: InteractionState) -> None:
        """Query text, suggestion list or highlighted index changed.

        Args:
            state: The controller's current state
        """
        ...

    def articles_changed(self, state: InteractionState) -> None:
        """Selection, its articles or the lookup history changed.

        Args:
            state: The controller's current state
        """
        ...
