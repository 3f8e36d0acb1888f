"""Constants for the GUI shell."""

WINDOW_TITLE = "Lugat - Dictionary Lookup"
WINDOW_MIN_WIDTH = 640
WINDOW_MIN_HEIGHT = 420
WINDOW_DEFAULT_WIDTH = 900
WINDOW_DEFAULT_HEIGHT = 600

SUGGESTION_LIST_WIDTH = 220
HISTORY_MAX_HEIGHT = 90

# Styles for the classes EntryRenderer emits
ARTICLE_STYLESHEET = """
i.spec { color: #2e7d32; }
i.link { color: #6d6d6d; }
a.link { color: #1565c0; text-decoration: none; }
b { color: #202020; }
"""
