"""Helpers for configuring consistent logging output."""

import logging

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_CONFIGURED = False


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).strip().upper(), logging.INFO)


def configure_logging(level: str | int | None = None, *, force: bool = False) -> None:
    """Install a root handler for the CLI and GUI entry points.

    Library modules only create loggers; this is called once by whichever
    entry point starts the process.

    Args:
        level: Level name or number (INFO when omitted or unknown)
        force: Reconfigure even if logging was already set up
    """
    global _CONFIGURED

    if _CONFIGURED and not force:
        return

    resolved_level = _resolve_level(level)
    logging.basicConfig(level=resolved_level, format=_DEFAULT_FORMAT, force=force)
    logging.getLogger("lugat").setLevel(resolved_level)
    _CONFIGURED = True
