"""Data models for dictionary entries."""

import logging
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


def _coerce_shortening_pos(value: Any) -> int | None:
    """Turn a raw shorteningPos field into a non-negative int, or None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        pos = int(value)
    except (TypeError, ValueError, OverflowError):
        logger.debug(f"Ignoring malformed shorteningPos: {value!r}")
        return None
    if pos < 0:
        logger.debug(f"Ignoring negative shorteningPos: {pos}")
        return None
    return pos


@dataclass(frozen=True)
class Translation:
    """A headword record as returned by a prefix query."""

    word: str  # Headword, unique within one result set
    dict_id: str = ""  # Source dictionary, e.g. "crh-ru"
    shortening_pos: int | None = None  # Headword characters kept when expanding "~"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Translation":
        """Build a Translation from a store record.

        Accepts both the API's camelCase keys and snake_case keys. Missing
        or malformed metadata degrades to defaults instead of failing.
        """
        shortening = data.get("shorteningPos", data.get("shortening_pos"))
        return cls(
            word=str(data.get("word") or ""),
            dict_id=str(data.get("dict") or data.get("dict_id") or ""),
            shortening_pos=_coerce_shortening_pos(shortening),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"word": self.word, "dict": self.dict_id, "shorteningPos": self.shortening_pos}

    def __str__(self) -> str:
        return self.word


@dataclass(frozen=True)
class Article:
    """Raw annotated definition text for a headword."""

    word: str
    text: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Article":
        return cls(word=str(data.get("word") or ""), text=str(data.get("text") or ""))

    def to_dict(self) -> dict[str, Any]:
        return {"word": self.word, "text": self.text}

    def __str__(self) -> str:
        return f"{self.word}: {self.text[:50]}"
