"""Utility helpers for Lugat."""

from .logging_config import configure_logging
from .text_utils import markup_to_plain

__all__ = ["configure_logging", "markup_to_plain"]
