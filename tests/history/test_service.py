"""Unit tests for history and bookmark services."""

import logging
from datetime import datetime, timezone

import pytest

from baseline_check.history import (
    BOOKMARKS_KEY,
    HISTORY_KEY,
    BookmarkService,
    HistoryService,
    JsonFileStore,
    StorageError,
)
from baseline_check.history.types import make_preview

NOW = datetime(2025, 1, 31, 12, 0, tzinfo=timezone.utc)


class ReadOnlyStore:
    """Reads succeed, every write fails."""

    def __init__(self):
        self.data = {}

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        raise StorageError("disk full")

    def remove(self, key):
        raise StorageError("disk full")

    def keys(self):
        return sorted(self.data)


class TestHistoryService:
    def test_add_newest_first(self, store, mixed_result):
        history = HistoryService(store)
        first = history.add("a", mixed_result)
        second = history.add("b", mixed_result)
        assert [h.id for h in history.entries()] == [second.id, first.id]

    def test_item_fields(self, store, mixed_result):
        item = HistoryService(store).add("display: grid;", mixed_result, now=NOW)
        assert item.timestamp == NOW
        assert item.preview == "display: grid;"
        assert item.results.to_result() == mixed_result

    def test_capped(self, store, empty_result):
        history = HistoryService(store, limit=3)
        for i in range(5):
            history.add(f"snippet {i}", empty_result)
        entries = history.entries()
        assert len(entries) == 3
        assert entries[0].code == "snippet 4"

    def test_record_dedupes_by_id(self, store, mixed_result):
        history = HistoryService(store)
        item = history.add("a", mixed_result)
        history.add("b", mixed_result)
        entries = history.record(item)
        assert [h.id for h in entries].count(item.id) == 1
        assert entries[0].id == item.id

    def test_get(self, store, mixed_result):
        history = HistoryService(store)
        item = history.add("a", mixed_result)
        found = history.get(item.id)
        assert found.id == item.id
        assert found.results.to_result() == mixed_result
        assert history.get("missing") is None

    def test_clear(self, store, mixed_result):
        history = HistoryService(store)
        history.add("a", mixed_result)
        history.clear()
        assert history.entries() == []
        assert store.get(HISTORY_KEY) is None

    def test_invalid_limit(self, store):
        with pytest.raises(ValueError):
            HistoryService(store, limit=0)

    def test_persisted_with_camel_case_summary(self, store, mixed_result):
        HistoryService(store).add("a", mixed_result)
        assert '"needsFallback"' in store.get(HISTORY_KEY)

    def test_unreadable_entries_discarded(self, store, caplog):
        store.set(HISTORY_KEY, '[{"id": "x"}]')
        with caplog.at_level(logging.WARNING):
            assert HistoryService(store).entries() == []
        assert "Discarding" in caplog.text

    def test_corrupt_file_reads_as_empty(self, tmp_path, mixed_result):
        path = tmp_path / "store.json"
        path.write_text("{oops", encoding="utf-8")
        history = HistoryService(JsonFileStore(path))
        assert history.entries() == []

    def test_failed_write_keeps_previous(self, mixed_result):
        history = HistoryService(ReadOnlyStore())
        item = history.add("a", mixed_result)
        assert item.code == "a"
        assert history.entries() == []


class TestBookmarkService:
    def test_save_newest_first(self, store, mixed_result):
        bookmarks = BookmarkService(store)
        first = bookmarks.save("Grid layout", "display: grid;", mixed_result)
        second = bookmarks.save("Empty", "")
        assert [b.id for b in bookmarks.entries()] == [second.id, first.id]

    def test_result_optional(self, store):
        bookmark = BookmarkService(store).save("Draft", "fetch('/x')")
        assert bookmark.results is None

    def test_not_capped(self, store, empty_result):
        bookmarks = BookmarkService(store)
        for i in range(60):
            bookmarks.save(f"b{i}", "x", empty_result)
        assert len(bookmarks.entries()) == 60

    def test_remove(self, store, mixed_result):
        bookmarks = BookmarkService(store)
        keep = bookmarks.save("keep", "a", mixed_result)
        drop = bookmarks.save("drop", "b", mixed_result)
        assert [b.id for b in bookmarks.remove(drop.id)] == [keep.id]

    def test_remove_missing_is_noop(self, store, mixed_result):
        bookmarks = BookmarkService(store)
        bookmarks.save("keep", "a", mixed_result)
        assert len(bookmarks.remove("missing")) == 1

    def test_stored_under_own_key(self, store):
        BookmarkService(store).save("a", "b")
        assert store.keys() == [BOOKMARKS_KEY]


class TestMakePreview:
    def test_short_code_unchanged(self):
        assert make_preview("x" * 100) == "x" * 100

    def test_long_code_cut(self):
        assert make_preview("x" * 101) == "x" * 100 + "..."
