"""Incremental search widget: input, suggestions, history and article view."""

from __future__ import annotations

from PyQt6.QtCore import QEvent, QObject, Qt, QUrl
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QTextBrowser,
    QVBoxLayout,
    QWidget,
)

from lugat.gui.constants import ARTICLE_STYLESHEET, HISTORY_MAX_HEIGHT, SUGGESTION_LIST_WIDTH
from lugat.gui.presenters import GUIPresenter
from lugat.gui.workers import QtQueryRunner
from lugat.interfaces import DataStore, QueryRunner
from lugat.models import FocusInput, InteractionState, ScrollIntoView, ViewCommand
from lugat.services import EntryRenderer, Key, SearchController, parse_link

# Qt keys forwarded to the controller
_NAVIGATION_KEYS = {
    Qt.Key.Key_Up.value: Key.ARROW_UP,
    Qt.Key.Key_Down.value: Key.ARROW_DOWN,
    Qt.Key.Key_Return.value: Key.ENTER,
    Qt.Key.Key_Enter.value: Key.ENTER,
    Qt.Key.Key_Escape.value: Key.ESCAPE,
}


class SearchWidget(QWidget):
    """Lookup widget wired to a SearchController.

    The widget only translates Qt events into controller calls, executes
    the commands the controller returns and redraws from the state it is
    handed. It never changes lookup state itself.
    """

    def __init__(
        self,
        store: DataStore,
        renderer: EntryRenderer | None = None,
        runner: QueryRunner | None = None,
        parent=None,
    ):
        """Initialize the search widget.

        Args:
            store: Data store queried for suggestions and articles
            renderer: Article renderer (default settings if omitted)
            runner: Query runner (a threaded QtQueryRunner if omitted)
            parent: Optional parent widget
        """
        super().__init__(parent)
        self.renderer = renderer or EntryRenderer()
        self.runner = runner if runner is not None else QtQueryRunner(self)

        self.presenter = GUIPresenter(self)
        self.presenter.suggestions_signal.connect(self._on_suggestions_changed)
        self.presenter.articles_signal.connect(self._on_articles_changed)

        self.controller = SearchController(
            store=store,
            runner=self.runner,
            view=self.presenter,
            renderer=self.renderer,
        )
        self._shown_suggestions: list = []
        self._shown_history: list[str] = []

        self._setup_ui()

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        layout = QHBoxLayout()
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(8)

        # Suggestion list
        self.suggestion_list = QListWidget()
        self.suggestion_list.setObjectName("word-list")
        self.suggestion_list.setFixedWidth(SUGGESTION_LIST_WIDTH)
        self.suggestion_list.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.suggestion_list.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.suggestion_list.itemClicked.connect(self._on_suggestion_clicked)
        self.suggestion_list.setAccessibleName("Suggestions")
        layout.addWidget(self.suggestion_list)

        right_layout = QVBoxLayout()
        right_layout.setSpacing(8)

        # Input row
        input_layout = QHBoxLayout()
        self.search_input = QLineEdit()
        self.search_input.setObjectName("search-input")
        self.search_input.setPlaceholderText("Search words...")
        self.search_input.setAccessibleName("Search words")
        # textEdited ignores programmatic setText, so state updates don't loop back
        self.search_input.textEdited.connect(self._on_text_edited)
        self.search_input.installEventFilter(self)
        input_layout.addWidget(self.search_input, 1)

        self.ok_button = QPushButton("OK")
        self.ok_button.clicked.connect(self._on_submit)
        input_layout.addWidget(self.ok_button)
        right_layout.addLayout(input_layout)

        # History
        self.history_list = QListWidget()
        self.history_list.setObjectName("history")
        self.history_list.setMaximumHeight(HISTORY_MAX_HEIGHT)
        self.history_list.setFlow(QListWidget.Flow.LeftToRight)
        self.history_list.setWrapping(True)
        self.history_list.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.history_list.itemClicked.connect(self._on_history_clicked)
        self.history_list.setAccessibleName("Lookup history")
        right_layout.addWidget(self.history_list)

        # Selected word and articles
        self.word_label = QLabel()
        word_font = QFont()
        word_font.setPixelSize(20)
        word_font.setWeight(QFont.Weight.Bold)
        self.word_label.setFont(word_font)
        right_layout.addWidget(self.word_label)

        self.article_view = QTextBrowser()
        self.article_view.setObjectName("article")
        self.article_view.setOpenLinks(False)
        self.article_view.document().setDefaultStyleSheet(ARTICLE_STYLESHEET)
        self.article_view.anchorClicked.connect(self._on_anchor_clicked)
        right_layout.addWidget(self.article_view, 1)

        layout.addLayout(right_layout, 1)
        self.setLayout(layout)

    # ------------------------------------------------------------------
    # Qt events -> controller
    # ------------------------------------------------------------------

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        """Forward navigation keys pressed in the search input."""
        if obj is self.search_input and event.type() == QEvent.Type.KeyPress:
            if self._handle_key(event.key()):
                return True
        return super().eventFilter(obj, event)

    def _handle_key(self, key: int) -> bool:
        """Send a navigation key to the controller.

        Args:
            key: Qt key code

        Returns:
            True if the key was consumed
        """
        name = _NAVIGATION_KEYS.get(key)
        if name is None:
            return False
        self._execute(self.controller.on_key_down(name))
        return True

    def _on_text_edited(self, text: str) -> None:
        self._execute(self.controller.on_text_changed(text))

    def _on_suggestion_clicked(self, item: QListWidgetItem) -> None:
        row = self.suggestion_list.row(item)
        suggestions = self.controller.state.suggestions
        if 0 <= row < len(suggestions):
            self._execute(self.controller.on_suggestion_selected(suggestions[row]))

    def _on_submit(self) -> None:
        text = self.search_input.text().strip()
        if text:
            self._execute(self.controller.submit_word(text))

    def _on_history_clicked(self, item: QListWidgetItem) -> None:
        self._execute(self.controller.submit_word(item.text()))

    def _on_anchor_clicked(self, url: QUrl) -> None:
        """Look up the word behind a cross-reference link."""
        encoded = bytes(url.toEncoded()).decode("ascii", errors="ignore")
        word = parse_link(encoded, self.renderer.link_scheme)
        if word:
            self._execute(self.controller.submit_word(word))

    def _execute(self, commands: list[ViewCommand]) -> None:
        """Carry out view commands returned by the controller."""
        for command in commands:
            if isinstance(command, ScrollIntoView):
                item = self.suggestion_list.item(command.index)
                if item is not None:
                    self.suggestion_list.scrollToItem(
                        item, QAbstractItemView.ScrollHint.EnsureVisible
                    )
            elif isinstance(command, FocusInput):
                self.search_input.setFocus()

    # ------------------------------------------------------------------
    # Controller state -> widgets
    # ------------------------------------------------------------------

    def _on_suggestions_changed(self, state: InteractionState) -> None:
        if self.search_input.text() != state.query_text:
            self.search_input.setText(state.query_text)

        if state.suggestions != self._shown_suggestions:
            self._shown_suggestions = list(state.suggestions)
            self.suggestion_list.clear()
            for translation in state.suggestions:
                self.suggestion_list.addItem(translation.word)

        self.suggestion_list.setCurrentRow(state.active_index)

    def _on_articles_changed(self, state: InteractionState) -> None:
        if state.history != self._shown_history:
            self._shown_history = list(state.history)
            self.history_list.clear()
            self.history_list.addItems(state.history)

        self.word_label.setText(state.selected.word if state.selected else "")

        rendered = self.controller.render_articles()
        self.article_view.setHtml(
            "<hr/>".join(f'<div class="article">{body}</div>' for body in rendered)
        )

    def shutdown(self) -> None:
        """Stop outstanding queries (called when the window closes)."""
        if isinstance(self.runner, QtQueryRunner):
            self.runner.shutdown()
