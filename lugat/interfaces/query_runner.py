"""Protocol for running store queries off the interaction thread."""

from collections.abc import Callable
from typing import Any, Protocol


class QueryRunner(Protocol):
    """Runs a blocking job and reports back on the interaction thread.

    Exactly one of ``on_done`` or ``on_error`` is called per job, and it is
    called on the thread that owns the controller. Jobs may complete in
    any order relative to submission.
    """

    def submit(
        self,
        job: Callable[[], Any],
        on_done: Callable[[Any], None],
        on_error: Callable[[str], None],
    ) -> None:
        """Schedule ``job``.

        Args:
            job: Zero-argument callable performing the query
            on_done: Receives the job's return value
            on_error: Receives a description of the failure
        """
        ...
