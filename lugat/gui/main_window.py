"""Main window for the Lugat GUI."""

from PyQt6.QtWidgets import QMainWindow

from lugat.config import LugatConfig
from lugat.gui.constants import (
    WINDOW_DEFAULT_HEIGHT,
    WINDOW_DEFAULT_WIDTH,
    WINDOW_MIN_HEIGHT,
    WINDOW_MIN_WIDTH,
    WINDOW_TITLE,
)
from lugat.gui.widgets import SearchWidget
from lugat.interfaces import DataStore
from lugat.services import EntryRenderer


class MainWindow(QMainWindow):
    """Main application window hosting the lookup widget."""

    def __init__(self, config: LugatConfig, store: DataStore):
        """Initialize the main window.

        Args:
            config: Application configuration
            store: Data store the lookup widget queries
        """
        super().__init__()
        self.config = config

        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)
        self.resize(WINDOW_DEFAULT_WIDTH, WINDOW_DEFAULT_HEIGHT)

        renderer = EntryRenderer(
            abbreviation_dict=config.abbreviation_dict, link_scheme=config.link_scheme
        )
        self.search_widget = SearchWidget(store, renderer=renderer)
        self.setCentralWidget(self.search_widget)

        self.setAccessibleName("Lugat Main Window")
        self.statusBar().showMessage(f"Dictionary: {self._describe_store(config)}")
        self.search_widget.search_input.setFocus()

    @staticmethod
    def _describe_store(config: LugatConfig) -> str:
        if config.store_backend == "remote":
            return config.api_url
        return str(config.db_path)

    def closeEvent(self, event) -> None:
        """Stop background queries before the window goes away."""
        self.search_widget.shutdown()
        super().closeEvent(event)
