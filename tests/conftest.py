"""Pytest configuration and shared fixtures."""

import pytest

from lugat.config import ConfigManager, LugatConfig
from lugat.exceptions import QueryError
from lugat.models import Article, Translation
from lugat.services import EntryRenderer, SearchController
from lugat.services.stores import SQLiteStore


@pytest.fixture(autouse=True)
def isolated_config_file(tmp_path, monkeypatch):
    """Keep tests away from the user's real configuration file."""
    config_file = tmp_path / "config" / "config.json"
    monkeypatch.setattr(ConfigManager, "CONFIG_FILE", config_file)
    return config_file


@pytest.fixture
def temp_dir(tmp_path):
    """Provide a temporary directory for test files."""
    return tmp_path


@pytest.fixture
def test_config(temp_dir):
    """Provide a test configuration with temporary paths."""
    return LugatConfig(db_path=temp_dir / "lugat.db")


@pytest.fixture
def sample_translations():
    """Headwords from a small Crimean Tatar - Russian dictionary."""
    return [
        Translation(word="kitap", dict_id="crh-ru", shortening_pos=3),
        Translation(word="kitaphane", dict_id="crh-ru"),
        Translation(word="kim", dict_id="crh-ru", shortening_pos=0),
        Translation(word="Kiyik", dict_id="crh-ru"),
        Translation(word="bir", dict_id="crh-ru"),
        Translation(word="eki", dict_id="crh-ru"),
    ]


@pytest.fixture
def sample_articles():
    """Articles for the sample headwords; kitap has two."""
    return [
        Article(word="kitap", text="книга\\n~ka bol - стать книгой"),
        Article(word="kitap", text="см. kitaphane"),
        Article(word="kitaphane", text="библиотека"),
        Article(word="bir", text="один ◊ см. eki"),
        Article(word="eki", text="два"),
    ]


class FakeStore:
    """In-memory DataStore that records every query it receives."""

    def __init__(self, translations=(), articles=()):
        self.translations = list(translations)
        self.articles = list(articles)
        self.prefix_queries: list[str] = []
        self.article_queries: list[str] = []
        self.fail = False

    def query_by_prefix(self, prefix: str) -> list[Translation]:
        self.prefix_queries.append(prefix)
        if self.fail:
            raise QueryError("store offline")
        return [t for t in self.translations if t.word.lower().startswith(prefix)]

    def query_articles_by_word(self, word: str) -> list[Article]:
        self.article_queries.append(word)
        if self.fail:
            raise QueryError("store offline")
        return [a for a in self.articles if a.word == word]


class DeferredRunner:
    """QueryRunner that holds jobs until the test resolves them, in any order."""

    def __init__(self):
        self.pending = []

    def submit(self, job, on_done, on_error) -> None:
        self.pending.append((job, on_done, on_error))

    def resolve(self, index: int = 0) -> None:
        """Run the pending job at ``index`` and deliver its outcome."""
        job, on_done, on_error = self.pending.pop(index)
        try:
            result = job()
        except QueryError as e:
            on_error(str(e))
            return
        on_done(result)

    def resolve_all(self) -> None:
        while self.pending:
            self.resolve(0)

    def fail(self, index: int = 0, message: str = "connection reset") -> None:
        """Report the pending job at ``index`` as failed without running it."""
        _, _, on_error = self.pending.pop(index)
        on_error(message)


class RecordingView:
    """A SearchView that records a snapshot of every notification."""

    def __init__(self):
        self.suggestion_updates = []
        self.article_updates = []

    def suggestions_changed(self, state) -> None:
        self.suggestion_updates.append((list(state.suggestions), state.active_index))

    def articles_changed(self, state) -> None:
        self.article_updates.append((state.selected, list(state.articles)))


@pytest.fixture
def fake_store(sample_translations, sample_articles):
    """Provide an in-memory store with the sample data."""
    return FakeStore(sample_translations, sample_articles)


@pytest.fixture
def deferred_runner():
    """Provide a runner whose jobs complete only when the test says so."""
    return DeferredRunner()


@pytest.fixture
def recording_view():
    """Provide a view that records notifications for assertion."""
    return RecordingView()


@pytest.fixture
def controller(fake_store, deferred_runner, recording_view):
    """Provide a controller over the fake store with deferred queries."""
    return SearchController(
        store=fake_store,
        runner=deferred_runner,
        view=recording_view,
        renderer=EntryRenderer(),
    )


@pytest.fixture
def sqlite_store(temp_dir, sample_translations, sample_articles):
    """Provide an initialized SQLite store holding the sample data."""
    store = SQLiteStore(temp_dir / "lugat.db")
    store.initialize()
    store.import_records(sample_translations, sample_articles)
    return store
