"""Background worker threads for GUI."""

from .query_runner import QtQueryRunner
from .query_worker import QueryWorkerThread

__all__ = ["QtQueryRunner", "QueryWorkerThread"]
