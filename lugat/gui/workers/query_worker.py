"""Worker thread running one store query."""

import threading
from collections.abc import Callable
from typing import Any

from PyQt6.QtCore import QThread, pyqtSignal


class QueryWorkerThread(QThread):
    """Run a single blocking query job off the GUI thread.

    Emits result_ready with the job's return value or error with a message.
    A cancelled worker emits neither; cancellation is checked before the job
    starts and again before reporting, since a running query cannot be
    interrupted.
    """

    result_ready = pyqtSignal(object)  # Job return value
    error = pyqtSignal(str)

    def __init__(self, job: Callable[[], Any], parent=None):
        """Initialize the query worker thread.

        Args:
            job: Zero-argument callable performing the query
            parent: Optional parent QObject
        """
        super().__init__(parent)
        self.job = job
        self._cancel_event = threading.Event()

    def cancel(self) -> None:
        """Request that the outcome of this query be dropped."""
        self._cancel_event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def run(self) -> None:
        """Execute the query in the background thread."""
        try:
            if self.is_cancelled:
                return

            result = self.job()

            if not self.is_cancelled:
                self.result_ready.emit(result)
        except Exception as e:
            if not self.is_cancelled:
                self.error.emit(f"Query failed: {e}")
