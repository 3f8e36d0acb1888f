"""Incremental search controller for the lookup widget."""

import logging
from collections.abc import Callable
from enum import Enum

from lugat.interfaces import DataStore, QueryRunner, SearchView
from lugat.models import (
    Article,
    FocusInput,
    InteractionState,
    ScrollIntoView,
    Translation,
    ViewCommand,
)
from lugat.services.entry_renderer import EntryRenderer

logger = logging.getLogger(__name__)


class Key(str, Enum):
    """Navigation keys the controller understands."""

    ARROW_UP = "ArrowUp"
    ARROW_DOWN = "ArrowDown"
    ENTER = "Enter"
    ESCAPE = "Escape"


class SearchController:
    """Turn input events into store queries and state updates.

    Owns an InteractionState and is its only writer. Queries go through a
    QueryRunner and may complete in any order; every query is tagged with a
    generation number and its response is applied only if no newer query of
    the same kind has been issued since ("latest wins"). Failed queries are
    applied as empty results.

    Handlers return the view commands (scrolling, focus) the presentation
    layer should carry out; state changes are announced through the view.
    """

    def __init__(
        self,
        store: DataStore,
        runner: QueryRunner,
        view: SearchView | None = None,
        renderer: EntryRenderer | None = None,
        state: InteractionState | None = None,
    ):
        """Initialize the controller.

        Args:
            store: Data-access collaborator for prefix and article queries
            runner: Runs store queries and reports back on this thread
            view: Optional view notified after state changes
            renderer: Renderer for article bodies (default settings if omitted)
            state: Initial state (a fresh one if omitted)
        """
        self.store = store
        self.runner = runner
        self.view = view
        self.renderer = renderer or EntryRenderer()
        self.state = state or InteractionState()

        self._suggestion_generation = 0
        self._article_generation = 0

    # ------------------------------------------------------------------
    # Input handlers
    # ------------------------------------------------------------------

    def on_text_changed(self, new_text: str) -> list[ViewCommand]:
        """Handle an edit of the search input.

        Args:
            new_text: The input's new value

        Returns:
            View commands to execute (none for text changes)
        """
        self._search(new_text)
        return []

    def on_key_down(self, key: str) -> list[ViewCommand]:
        """Handle a navigation key pressed in the search input.

        Args:
            key: One of "ArrowUp", "ArrowDown", "Enter", "Escape"; anything
                else is ignored

        Returns:
            View commands to execute
        """
        state = self.state
        count = len(state.suggestions)
        if count == 0:
            return []

        if key == Key.ARROW_DOWN:
            state.active_index = state.active_index + 1 if state.active_index < count - 1 else 0
            self._notify_suggestions()
            return [ScrollIntoView(state.active_index)]

        if key == Key.ARROW_UP:
            state.active_index = state.active_index - 1 if state.active_index > 0 else count - 1
            self._notify_suggestions()
            return [ScrollIntoView(state.active_index)]

        if key == Key.ENTER:
            active = state.active_suggestion
            if active is not None:
                return self.on_suggestion_selected(active)
            return []

        if key == Key.ESCAPE:
            # Dismissed lists stay dismissed even if a query is still in flight
            self._suggestion_generation += 1
            self._replace_suggestions([])
            return []

        return []

    def on_suggestion_selected(self, translation: Translation) -> list[ViewCommand]:
        """Select a suggestion and fetch its articles.

        Args:
            translation: The chosen suggestion

        Returns:
            A command returning focus to the search input
        """
        state = self.state
        state.query_text = translation.word
        state.selected = translation
        state.articles = []
        state.history.append(translation.word)
        self._notify_suggestions()
        self._notify_articles()

        self._article_generation += 1
        generation = self._article_generation
        word = translation.word
        logger.debug(f"Fetching articles for {word!r} (generation {generation})")

        self.runner.submit(
            lambda: self.store.query_articles_by_word(word),
            lambda articles: self._apply_articles(generation, articles),
            lambda message: self._article_query_failed(generation, word, message),
        )
        return [FocusInput()]

    def submit_word(self, word: str) -> list[ViewCommand]:
        """Search for ``word`` and select it once suggestions arrive.

        Used for cross-reference links and explicit submits. Selection
        happens only if the word itself is among the suggestions
        (case-insensitively) and no newer search has started meanwhile.

        Args:
            word: Word to look up

        Returns:
            A command returning focus to the search input
        """
        self._search(word, on_applied=lambda: self._select_exact(word))
        return [FocusInput()]

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_articles(self) -> list[str]:
        """Render every article of the current selection for display."""
        return [
            self.renderer.render(article.text, article.word, self.state.selected)
            for article in self.state.articles
        ]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _search(self, text: str, on_applied: Callable[[], None] | None = None) -> None:
        """Update the query text and issue a prefix query for it."""
        state = self.state
        state.query_text = text
        state.active_index = -1

        # A new generation also supersedes any in-flight query for older text
        self._suggestion_generation += 1
        generation = self._suggestion_generation

        if not text:
            self._replace_suggestions([])
            return

        self._notify_suggestions()

        prefix = text.lower()
        logger.debug(f"Prefix query {prefix!r} (generation {generation})")

        def _done(result: list[Translation]) -> None:
            if self._apply_suggestions(generation, result) and on_applied is not None:
                on_applied()

        self.runner.submit(
            lambda: self.store.query_by_prefix(prefix),
            _done,
            lambda message: self._prefix_query_failed(generation, prefix, message),
        )

    def _apply_suggestions(self, generation: int, result: list[Translation]) -> bool:
        """Apply a prefix query response if it is still the latest one."""
        if generation != self._suggestion_generation:
            logger.debug(
                f"Discarding stale suggestions (generation {generation}, "
                f"current {self._suggestion_generation})"
            )
            return False

        self._replace_suggestions(list(result or []))
        return True

    def _prefix_query_failed(self, generation: int, prefix: str, message: str) -> None:
        logger.warning(f"Prefix query for {prefix!r} failed: {message}")
        self._apply_suggestions(generation, [])

    def _apply_articles(self, generation: int, articles: list[Article]) -> None:
        """Apply an article query response if it belongs to the current selection."""
        if generation != self._article_generation:
            logger.debug(
                f"Discarding stale articles (generation {generation}, "
                f"current {self._article_generation})"
            )
            return

        self.state.articles = list(articles or [])
        self._notify_articles()

    def _article_query_failed(self, generation: int, word: str, message: str) -> None:
        logger.warning(f"Article query for {word!r} failed: {message}")
        self._apply_articles(generation, [])

    def _select_exact(self, word: str) -> None:
        folded = word.lower()
        for translation in self.state.suggestions:
            if translation.word.lower() == folded:
                self.on_suggestion_selected(translation)
                return
        logger.info(f"No entry for {word!r}")

    def _replace_suggestions(self, suggestions: list[Translation]) -> None:
        self.state.suggestions = suggestions
        self.state.active_index = -1
        self._notify_suggestions()

    def _notify_suggestions(self) -> None:
        if self.view is not None:
            self.view.suggestions_changed(self.state)

    def _notify_articles(self) -> None:
        if self.view is not None:
            self.view.articles_changed(self.state)
