"""Rendering of annotated dictionary articles into display markup.

Article bodies use a small annotation language:

- ``~`` stands for the headword (optionally shortened)
- ``\\n`` (backslash + n) is an escaped line break
- ``/text/`` and a fixed set of subject-field abbreviations mark special terms
- ``см. a, b`` / ``ср. a, b`` list cross-referenced words
- ``lead - rest`` lines pair a phrase with its translation
- ``◊`` separates senses and ``; `` separates clauses

Each transformation is a separate pure function; :class:`EntryRenderer`
applies them in a fixed order. The output is an HTML fragment and must not
be fed through the pipeline again.
"""

import re
from collections.abc import Callable
from functools import partial
from urllib.parse import quote, unquote

from lugat.models import Translation

SHORTENING_MARKER = "~"
SENSE_MARKER = "◊"
LINE_BREAK = "<br/>"

DEFAULT_ABBREVIATION_DICT = "crh-ru"
DEFAULT_LINK_SCHEME = "lookup"

# Subject-field and usage labels of the Crimean Tatar - Russian dictionary
SPECIAL_ABBREVIATIONS = (
    "лингв",  # linguistics
    "перен",  # figurative
    "физ",  # physics
    "хим",  # chemistry
    "бот",  # botany
    "биол",  # biology
    "зоо",  # zoology
    "грам",  # grammar
    "геогр",  # geography
    "астр",  # astronomy
    "шк",  # school
    "мат",  # mathematics
    "анат",  # anatomy
    "ирон",  # ironic
    "этн",  # ethnography
    "стр",  # construction
    "рел",  # religion
    "посл",  # proverb
    "уст",  # archaic
)

_ESCAPED_NEWLINE = "\\n"
_ABBREVIATION_RE = re.compile("(?:" + "|".join(SPECIAL_ABBREVIATIONS) + r")\.")
_SLASH_TERM_RE = re.compile(r"/(.+?)/")
_CROSS_REFERENCE_RE = re.compile(r"(ср|см)\. (.+)$", re.MULTILINE)
_LINK_SEPARATOR_RE = re.compile(r"\s*,\s*")
_DEFINITION_LINE_RE = re.compile(r"^(.[^)].+?) - (.+?)$", re.MULTILINE)


def expand_shortenings(text: str, headword: str, shortening_pos: int | None = None) -> str:
    """Replace every shortening marker with the (possibly truncated) headword.

    A positive ``shortening_pos`` keeps that many leading characters of the
    headword. Zero, None and malformed values all substitute the full headword.

    Example:
        >>> expand_shortenings("~ka bol", "kitap", 3)
        'kitka bol'
    """
    if SHORTENING_MARKER not in text:
        return text

    replacement = headword
    if isinstance(shortening_pos, int) and not isinstance(shortening_pos, bool):
        if shortening_pos > 0:
            replacement = headword[:shortening_pos]

    return text.replace(SHORTENING_MARKER, replacement)


def literalize_newlines(text: str) -> str:
    """Turn escaped ``\\n`` sequences into real line breaks."""
    return text.replace(_ESCAPED_NEWLINE, "\n")


def style_slash_terms(text: str) -> str:
    """Wrap ``/term/`` in a special-term span, dropping the slashes."""
    return _SLASH_TERM_RE.sub(r'<i class="spec">\1</i>', text)


def style_abbreviations(text: str) -> str:
    """Wrap each known subject-field abbreviation in a special-term span."""
    return _ABBREVIATION_RE.sub(r'<i class="spec">\g<0></i>', text)


def make_link(word: str, scheme: str = DEFAULT_LINK_SCHEME) -> str:
    """Build an anchor that asks the view to look ``word`` up."""
    return f'<a class="link" href="{scheme}:{quote(word, safe="")}">{word}</a>'


def parse_link(url: str, scheme: str = DEFAULT_LINK_SCHEME) -> str | None:
    """Recover the word from a cross-reference link target.

    Args:
        url: The activated link target (percent-encoded)
        scheme: Scheme the links were rendered with

    Returns:
        The referenced word, or None if the URL is not a cross-reference.
    """
    prefix = f"{scheme}:"
    if not url.startswith(prefix):
        return None
    word = unquote(url[len(prefix) :])
    return word or None


def link_cross_references(text: str, scheme: str = DEFAULT_LINK_SCHEME) -> str:
    """Turn ``см. a, b`` / ``ср. a, b`` runs into a label followed by links.

    Everything after the label up to the end of the line is treated as a
    comma-separated word list. Empty items are dropped and no separator
    follows the last link.
    """

    def _replace(match: re.Match) -> str:
        words = [w.strip() for w in _LINK_SEPARATOR_RE.split(match.group(2))]
        links = ", ".join(make_link(w, scheme) for w in words if w)
        return f'<i class="link">{match.group(1)}.</i> {links}'

    return _CROSS_REFERENCE_RE.sub(_replace, text)


def bold_headword_definitions(text: str) -> str:
    """Bold the lead of every ``lead - rest`` line.

    Lines whose second character is ``)`` (numbered senses such as ``1) ...``)
    are left alone.
    """
    return _DEFINITION_LINE_RE.sub(r"<b>\1</b> \2", text)


def isolate_sense_markers(text: str) -> str:
    """Put every sense divider on a line of its own."""
    return text.replace(SENSE_MARKER, f"\n{SENSE_MARKER}\n")


def materialize_line_breaks(text: str) -> str:
    """Convert line breaks to break elements."""
    return text.replace("\n", LINE_BREAK)


def break_clauses(text: str) -> str:
    """Start a new line after each clause separator."""
    return text.replace("; ", LINE_BREAK)


class EntryRenderer:
    """Convert raw article text into display markup.

    The renderer holds no per-entry state; the same arguments always give
    the same output.
    """

    def __init__(
        self,
        abbreviation_dict: str = DEFAULT_ABBREVIATION_DICT,
        link_scheme: str = DEFAULT_LINK_SCHEME,
    ):
        """Initialize the renderer.

        Args:
            abbreviation_dict: Dictionary id whose entries get term styling
            link_scheme: URL scheme used for cross-reference links
        """
        self.abbreviation_dict = abbreviation_dict
        self.link_scheme = link_scheme

    def stages(self, headword: str, meta: Translation | None = None) -> list[Callable[[str], str]]:
        """Return the transformations for one entry, in application order.

        Args:
            headword: Word substituted for shortening markers
            meta: Translation carrying the dictionary id and shortening position

        Returns:
            List of ``str -> str`` functions
        """
        shortening_pos = getattr(meta, "shortening_pos", None)
        dict_id = getattr(meta, "dict_id", None)

        stages: list[Callable[[str], str]] = [
            partial(expand_shortenings, headword=headword or "", shortening_pos=shortening_pos),
            literalize_newlines,
        ]
        if dict_id and dict_id == self.abbreviation_dict:
            # Slash terms first: closing tags contain slashes too
            stages += [style_slash_terms, style_abbreviations]
        stages += [
            partial(link_cross_references, scheme=self.link_scheme),
            bold_headword_definitions,
            isolate_sense_markers,
            materialize_line_breaks,
            break_clauses,
        ]
        return stages

    def render(self, raw_text: str, headword: str, meta: Translation | None = None) -> str:
        """Render one article body.

        Args:
            raw_text: Annotated article text as stored
            headword: The article's headword
            meta: Translation the article was selected through, if any

        Returns:
            HTML fragment for a rich-text view
        """
        text = raw_text or ""
        for stage in self.stages(headword, meta):
            text = stage(text)
        return text
