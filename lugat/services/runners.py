"""Query runners that do not need an event loop."""

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class ImmediateRunner:
    """Run each query inline, in the caller's thread.

    Implements QueryRunner protocol. Used by the CLI, where there is no
    interaction thread to keep responsive.
    """

    def submit(
        self,
        job: Callable[[], Any],
        on_done: Callable[[Any], None],
        on_error: Callable[[str], None],
    ) -> None:
        """Run ``job`` now and report the outcome.

        Args:
            job: Zero-argument callable performing the query
            on_done: Receives the job's return value
            on_error: Receives a description of the failure
        """
        try:
            result = job()
        except Exception as e:
            logger.debug("Query job failed", exc_info=True)
            on_error(f"Query failed: {e}")
            return

        on_done(result)
