"""Main GUI application entry point."""

import logging
import sys

from PyQt6.QtWidgets import QApplication, QMessageBox

from lugat.config import ConfigManager
from lugat.exceptions import LugatException
from lugat.gui.main_window import MainWindow
from lugat.services import create_store
from lugat.utils import configure_logging

logger = logging.getLogger(__name__)


def main():
    """Launch the Lugat GUI application."""
    app = QApplication(sys.argv)
    app.setApplicationName("Lugat")
    app.setOrganizationName("Lugat")

    config = ConfigManager.load_config()
    configure_logging(config.log_level)

    try:
        store = create_store(config)
    except LugatException as e:
        logger.error(f"Could not open dictionary: {e}")
        QMessageBox.critical(None, "Lugat", f"Could not open dictionary:\n{e}")
        return 1

    window = MainWindow(config, store)
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
