"""Text processing utilities."""

import html
import re

_BREAK_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]+>")


def markup_to_plain(markup: str) -> str:
    """Convert rendered article markup to plain text for terminals.

    Args:
        markup: HTML fragment produced by EntryRenderer

    Returns:
        Text with break elements turned into newlines and all other tags removed
    """
    text = _BREAK_RE.sub("\n", markup)

    # Remove remaining tags (styling spans, links)
    text = _TAG_RE.sub("", text)

    text = html.unescape(text)

    # Trim trailing spaces but keep intentional blank lines
    return "\n".join(line.rstrip() for line in text.split("\n")).strip("\n")
