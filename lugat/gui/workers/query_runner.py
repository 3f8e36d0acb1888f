"""Qt implementation of the QueryRunner protocol."""

import logging
from collections.abc import Callable
from typing import Any

from PyQt6.QtCore import QObject, pyqtSlot

from lugat.gui.workers.query_worker import QueryWorkerThread

logger = logging.getLogger(__name__)

SHUTDOWN_WAIT_MS = 2000


class QtQueryRunner(QObject):
    """Run queries on worker threads and report back on the GUI thread.

    Implements QueryRunner protocol through structural subtyping. Each job
    gets its own QueryWorkerThread; the worker's signals are connected to
    slots of this object, which lives on the GUI thread, so callbacks are
    queued onto the GUI event loop and never run concurrently with input
    handlers.
    """

    def __init__(self, parent=None):
        """Initialize the runner.

        Args:
            parent: Optional parent QObject
        """
        super().__init__(parent)
        self._callbacks: dict[QueryWorkerThread, tuple[Callable, Callable]] = {}

    @property
    def pending_count(self) -> int:
        """Number of queries that have not finished yet."""
        return len(self._callbacks)

    def submit(
        self,
        job: Callable[[], Any],
        on_done: Callable[[Any], None],
        on_error: Callable[[str], None],
    ) -> None:
        """Start ``job`` on a new worker thread.

        Args:
            job: Zero-argument callable performing the query
            on_done: Receives the job's return value on the GUI thread
            on_error: Receives a failure description on the GUI thread
        """
        worker = QueryWorkerThread(job)
        self._callbacks[worker] = (on_done, on_error)

        worker.result_ready.connect(self._on_result)
        worker.error.connect(self._on_error)
        worker.finished.connect(self._on_finished)
        worker.start()

    def shutdown(self) -> None:
        """Cancel outstanding queries and wait for their threads to exit."""
        for worker in list(self._callbacks):
            worker.cancel()
        for worker in list(self._callbacks):
            if not worker.wait(SHUTDOWN_WAIT_MS):
                logger.warning("Query worker did not stop in time")
        self._callbacks.clear()

    @pyqtSlot(object)
    def _on_result(self, result: Any) -> None:
        callbacks = self._callbacks.get(self.sender())
        if callbacks is not None:
            callbacks[0](result)

    @pyqtSlot(str)
    def _on_error(self, message: str) -> None:
        callbacks = self._callbacks.get(self.sender())
        if callbacks is not None:
            callbacks[1](message)

    @pyqtSlot()
    def _on_finished(self) -> None:
        worker = self.sender()
        self._callbacks.pop(worker, None)
        if worker is not None:
            worker.deleteLater()
