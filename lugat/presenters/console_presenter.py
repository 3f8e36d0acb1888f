"""Console view for CLI output."""

from lugat.models import InteractionState
from lugat.services.entry_renderer import EntryRenderer
from lugat.utils.text_utils import markup_to_plain


class ConsolePresenter:
    """Present lookup state to the console (CLI implementation).

    Notifications arrive after every state change; unchanged lists are
    not printed again.
    """

    def __init__(self, renderer: EntryRenderer | None = None, max_suggestions: int = 20):
        """Initialize the console presenter.

        Args:
            renderer: Renderer used to format article bodies
            max_suggestions: Number of suggestions shown before truncating
        """
        self.renderer = renderer or EntryRenderer()
        self.max_suggestions = max_suggestions
        self._shown_suggestions: tuple | None = None
        self._shown_articles: tuple | None = None

    def suggestions_changed(self, state: InteractionState) -> None:
        """Print the suggestion list if it differs from the last one shown."""
        key = (tuple(state.suggestions), state.active_index)
        if not state.suggestions or key == self._shown_suggestions:
            return
        self._shown_suggestions = key

        print(f"\nSuggestions for '{state.query_text}' ({len(state.suggestions)}):")
        for i, translation in enumerate(state.suggestions[: self.max_suggestions]):
            marker = ">" if i == state.active_index else " "
            print(f" {marker} {translation.word}")

        if len(state.suggestions) > self.max_suggestions:
            print(f"   ... and {len(state.suggestions) - self.max_suggestions} more")

    def articles_changed(self, state: InteractionState) -> None:
        """Print the selected word's articles once they have arrived."""
        if state.selected is None or not state.articles:
            return
        key = (state.selected, tuple(state.articles))
        if key == self._shown_articles:
            return
        self._shown_articles = key

        print(f"\n{state.selected.word}")
        print("=" * 60)
        for i, article in enumerate(state.articles, 1):
            if len(state.articles) > 1:
                print(f"[{i}]")
            rendered = self.renderer.render(article.text, article.word, state.selected)
            print(markup_to_plain(rendered))
            print()
