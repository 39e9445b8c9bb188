"""Tests for the clipboard query history."""

import json

from parrot_translate.history import QueryHistory


class TestQueryHistory:
    def test_unseen_text_is_queried(self):
        history = QueryHistory()
        assert history.last_seen("good") is None
        assert history.should_auto_query("good", now_ms=1000)

    def test_suppressed_within_window(self):
        history = QueryHistory(window_ms=5000)
        history.record("good", now_ms=10_000)
        assert not history.should_auto_query("good", now_ms=14_000)
        assert not history.should_auto_query("good", now_ms=15_000)
        assert history.should_auto_query("good", now_ms=15_001)

    def test_other_text_not_affected(self):
        history = QueryHistory()
        history.record("good", now_ms=10_000)
        assert history.should_auto_query("bad", now_ms=10_001)

    def test_persisted_to_file(self, tmp_path):
        path = tmp_path / "nested" / "history.json"
        QueryHistory(path).record("好", now_ms=42)

        assert json.loads(path.read_text(encoding="utf-8")) == {"好": 42}
        assert QueryHistory(path).last_seen("好") == 42

    def test_unreadable_file_ignored(self, tmp_path):
        path = tmp_path / "history.json"
        path.write_text("{not json", encoding="utf-8")

        history = QueryHistory(path)

        assert history.last_seen("good") is None
        history.record("good", now_ms=1)
        assert json.loads(path.read_text(encoding="utf-8")) == {"good": 1}

    def test_expired_entries_pruned_on_record(self, tmp_path):
        path = tmp_path / "history.json"
        history = QueryHistory(path, window_ms=5000)
        history.record("old", now_ms=0)
        history.record("new", now_ms=10_000)

        assert history.last_seen("old") is None
        assert json.loads(path.read_text(encoding="utf-8")) == {"new": 10_000}
