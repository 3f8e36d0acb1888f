"""Local SQLite word index and article store."""

import json
import logging
import os
import sqlite3
from collections.abc import Iterable
from pathlib import Path

from lugat.exceptions import QueryError, StoreSetupError
from lugat.models import Article, Translation

logger = logging.getLogger(__name__)


class SQLiteStore:
    """Dictionary data kept in a local SQLite database.

    Implements DataStore protocol. Translations carry a lower-cased copy of
    their word (``word_pattern``) that prefix queries match against, so the
    lookup is case-insensitive for any script, not only ASCII.
    """

    def __init__(self, db_path: Path):
        """Initialize the store.

        Args:
            db_path: Path to the SQLite database file.
        """
        self._db_path = db_path

    @property
    def db_path(self) -> Path:
        return self._db_path

    def initialize(self) -> None:
        """Create the database and schema if they don't exist."""
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        with sqlite3.connect(str(self._db_path)) as conn:
            conn.executescript("""
                CREATE TABLE IF NOT EXISTS translations (
                    word TEXT NOT NULL,
                    word_pattern TEXT NOT NULL,
                    dict TEXT NOT NULL DEFAULT '',
                    shortening_pos INTEGER
                );
                CREATE INDEX IF NOT EXISTS idx_translations_pattern
                    ON translations (word_pattern);
                CREATE TABLE IF NOT EXISTS articles (
                    word TEXT NOT NULL,
                    text TEXT NOT NULL DEFAULT ''
                );
                CREATE INDEX IF NOT EXISTS idx_articles_word ON articles (word);
                """)

    def is_available(self) -> bool:
        """Check if the database file exists and is readable."""
        return self._db_path.exists() and os.access(self._db_path, os.R_OK)

    def query_by_prefix(self, prefix: str) -> list[Translation]:
        """Find translations whose lower-cased word starts with ``prefix``.

        Args:
            prefix: Lower-cased prefix

        Returns:
            Matching translations ordered by word

        Raises:
            QueryError: If the database cannot be read
        """
        rows = self._fetch(
            "SELECT word, dict, shortening_pos FROM translations "
            "WHERE substr(word_pattern, 1, ?) = ? ORDER BY word_pattern, word",
            (len(prefix), prefix),
        )
        return [
            Translation.from_dict({"word": word, "dict": dict_id, "shorteningPos": pos})
            for word, dict_id, pos in rows
        ]

    def query_articles_by_word(self, word: str) -> list[Article]:
        """List articles stored for exactly ``word``, in insertion order.

        Raises:
            QueryError: If the database cannot be read
        """
        rows = self._fetch("SELECT word, text FROM articles WHERE word = ? ORDER BY rowid", (word,))
        return [Article(word=w, text=text) for w, text in rows]

    def import_records(
        self, translations: Iterable[Translation], articles: Iterable[Article]
    ) -> tuple[int, int]:
        """Bulk insert translations and articles.

        Args:
            translations: Headword records to add
            articles: Article bodies to add

        Returns:
            Tuple of (translations_added, articles_added)

        Raises:
            StoreSetupError: If the database cannot be written
        """
        translation_rows = [
            (t.word, t.word.lower(), t.dict_id, t.shortening_pos) for t in translations if t.word
        ]
        article_rows = [(a.word, a.text) for a in articles if a.word]

        try:
            with sqlite3.connect(str(self._db_path)) as conn:
                conn.executemany(
                    "INSERT INTO translations (word, word_pattern, dict, shortening_pos) "
                    "VALUES (?, ?, ?, ?)",
                    translation_rows,
                )
                conn.executemany("INSERT INTO articles (word, text) VALUES (?, ?)", article_rows)
        except sqlite3.Error as e:
            raise StoreSetupError(f"Error writing to {self._db_path}: {e}") from e

        logger.info(
            f"Imported {len(translation_rows)} translations and {len(article_rows)} articles"
        )
        return (len(translation_rows), len(article_rows))

    def import_json(self, json_path: Path) -> tuple[int, int]:
        """Import a JSON export into the database.

        The file holds an object with ``translations`` (``word``, ``dict``,
        ``shorteningPos``) and ``articles`` (``word``, ``text``) arrays.

        Args:
            json_path: Path to the export file

        Returns:
            Tuple of (translations_added, articles_added)

        Raises:
            StoreSetupError: If the file is missing or malformed
        """
        if not json_path.exists():
            raise StoreSetupError(f"Import file not found: {json_path}")

        try:
            with json_path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise StoreSetupError(f"Error parsing {json_path}: {e}") from e

        if not isinstance(data, dict):
            raise StoreSetupError(f"Expected a JSON object in {json_path}")

        self.initialize()
        return self.import_records(
            (
                Translation.from_dict(item)
                for item in data.get("translations", [])
                if isinstance(item, dict)
            ),
            (Article.from_dict(item) for item in data.get("articles", []) if isinstance(item, dict)),
        )

    def _fetch(self, sql: str, params: tuple) -> list[tuple]:
        """Run a read query, translating database errors into QueryError."""
        if not self.is_available():
            raise QueryError(f"Dictionary database not found at: {self._db_path}")

        try:
            with sqlite3.connect(str(self._db_path)) as conn:
                return conn.execute(sql, params).fetchall()
        except sqlite3.Error as e:
            raise QueryError(f"Error querying {self._db_path}: {e}") from e
