"""Tests for the Qt lookup widget and query workers.

The widget tests drive the private slot methods directly (the same ones Qt
signals and the key event filter call) with an ImmediateRunner, so every
query completes before the call returns.

Requires PyQt6 to be importable. Tests are skipped if PyQt6 or a display is unavailable.
"""

import os
import time

import pytest

from lugat.services import ImmediateRunner

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Skip all tests in this module if PyQt6 is not available or no display
try:
    from PyQt6.QtCore import QCoreApplication, Qt, QUrl
    from PyQt6.QtWidgets import QApplication

    # Create QApplication if not already running (needed for any widget)
    _app = QApplication.instance() or QApplication([])
    _HAS_QT = True
except (ImportError, RuntimeError):
    _HAS_QT = False

# Also skip if no display available (headless CI without virtual display)
_HAS_DISPLAY = bool(os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY") or _HAS_QT)

pytestmark = pytest.mark.skipif(
    not (_HAS_QT and _HAS_DISPLAY),
    reason="PyQt6 or display not available",
)


def _wait_until(predicate, timeout=5.0):
    """Pump the Qt event loop until ``predicate`` holds or time runs out."""
    deadline = time.monotonic() + timeout
    while not predicate() and time.monotonic() < deadline:
        QCoreApplication.processEvents()
        time.sleep(0.01)
    return predicate()


@pytest.fixture
def widget(fake_store):
    """Create a SearchWidget whose queries complete synchronously."""
    from lugat.gui.widgets import SearchWidget

    return SearchWidget(fake_store, runner=ImmediateRunner())


def _list_words(list_widget):
    return [list_widget.item(i).text() for i in range(list_widget.count())]


class TestTyping:
    """Tests for typing into the search input."""

    def test_shows_suggestions(self, widget):
        widget._on_text_edited("ki")
        assert _list_words(widget.suggestion_list) == ["kitap", "kitaphane", "kim", "Kiyik"]

    def test_clearing_input_clears_list(self, widget):
        widget._on_text_edited("ki")
        widget._on_text_edited("")
        assert widget.suggestion_list.count() == 0


class TestKeys:
    """Tests for navigation keys forwarded from the input."""

    def test_arrow_down_highlights_first(self, widget):
        widget._on_text_edited("ki")

        assert widget._handle_key(Qt.Key.Key_Down.value) is True
        assert widget.suggestion_list.currentRow() == 0

    def test_arrow_up_wraps_to_last(self, widget):
        widget._on_text_edited("ki")
        widget._handle_key(Qt.Key.Key_Up.value)
        assert widget.suggestion_list.currentRow() == 3

    def test_enter_shows_articles(self, widget):
        widget._on_text_edited("kitap")
        widget._handle_key(Qt.Key.Key_Down.value)

        widget._handle_key(Qt.Key.Key_Return.value)

        assert widget.word_label.text() == "kitap"
        assert widget.search_input.text() == "kitap"
        assert _list_words(widget.history_list) == ["kitap"]
        assert "kitka bol" in widget.article_view.toPlainText()

    def test_escape_hides_suggestions(self, widget):
        widget._on_text_edited("ki")
        widget._handle_key(Qt.Key.Key_Escape.value)
        assert widget.suggestion_list.count() == 0

    def test_other_keys_not_consumed(self, widget):
        widget._on_text_edited("ki")
        assert widget._handle_key(Qt.Key.Key_A.value) is False


class TestLookups:
    """Tests for clicks, links and history."""

    def test_clicking_suggestion_selects_it(self, widget):
        widget._on_text_edited("e")

        widget._on_suggestion_clicked(widget.suggestion_list.item(0))

        assert widget.word_label.text() == "eki"
        assert "два" in widget.article_view.toPlainText()

    def test_cross_reference_link_looks_up_word(self, widget):
        widget._on_text_edited("bir")
        widget._handle_key(Qt.Key.Key_Down.value)
        widget._handle_key(Qt.Key.Key_Enter.value)
        assert "eki" in widget.article_view.toPlainText()

        widget._on_anchor_clicked(QUrl("lookup:eki"))

        assert widget.word_label.text() == "eki"
        assert _list_words(widget.history_list) == ["bir", "eki"]

    def test_foreign_link_ignored(self, widget):
        widget._on_anchor_clicked(QUrl("https://example.com"))
        assert widget.word_label.text() == ""

    def test_ok_button_submits_input(self, widget):
        widget.search_input.setText("KITAPHANE")
        widget.ok_button.click()
        assert widget.word_label.text() == "kitaphane"

    def test_history_click_looks_up_again(self, widget):
        widget.controller.submit_word("bir")
        widget.controller.submit_word("eki")

        widget._on_history_clicked(widget.history_list.item(0))

        assert widget.word_label.text() == "bir"
        assert _list_words(widget.history_list) == ["bir", "eki", "bir"]


class TestQueryWorkers:
    """Tests for the threaded query runner."""

    def test_worker_emits_result(self):
        from lugat.gui.workers import QueryWorkerThread

        worker = QueryWorkerThread(lambda: ["kitap"])
        results = []
        worker.result_ready.connect(results.append)

        worker.run()

        assert results == [["kitap"]]

    def test_worker_emits_error(self):
        from lugat.gui.workers import QueryWorkerThread

        def job():
            raise ValueError("bad row")

        worker = QueryWorkerThread(job)
        errors = []
        worker.error.connect(errors.append)

        worker.run()

        assert errors == ["Query failed: bad row"]

    def test_cancelled_worker_stays_silent(self):
        from lugat.gui.workers import QueryWorkerThread

        worker = QueryWorkerThread(lambda: ["kitap"])
        results, errors = [], []
        worker.result_ready.connect(results.append)
        worker.error.connect(errors.append)

        worker.cancel()
        worker.run()

        assert worker.is_cancelled is True
        assert results == []
        assert errors == []

    def test_runner_reports_on_gui_thread(self):
        from lugat.gui.workers import QtQueryRunner

        runner = QtQueryRunner()
        results = []

        runner.submit(lambda: "done", results.append, pytest.fail)

        assert _wait_until(lambda: runner.pending_count == 0)
        assert results == ["done"]

    def test_runner_reports_errors(self):
        from lugat.gui.workers import QtQueryRunner

        runner = QtQueryRunner()
        errors = []

        def job():
            raise OSError("disk gone")

        runner.submit(job, pytest.fail, errors.append)

        assert _wait_until(lambda: runner.pending_count == 0)
        assert errors == ["Query failed: disk gone"]
