"""History and bookmark services on top of a KeyValueStore.

Each service keeps its whole list under one key as a JSON array.
Persistence problems are logged and never propagate: a failed read
looks like an empty list and a failed write leaves the previous list in
place, so an analysis is never lost because storage misbehaved.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from baseline_check.detector.types import AnalysisResult
from baseline_check.export.schemas import AnalysisPayload
from baseline_check.history.store import KeyValueStore, StorageError
from baseline_check.history.types import BookmarkItem, HistoryItem, make_preview

logger = logging.getLogger(__name__)

HISTORY_KEY = "baseline-history"
BOOKMARKS_KEY = "baseline-bookmarks"
DRAFT_KEY = "baseline-paste-check"

DEFAULT_HISTORY_LIMIT = 50

_HISTORY_ADAPTER = TypeAdapter(list[HistoryItem])
_BOOKMARKS_ADAPTER = TypeAdapter(list[BookmarkItem])


def _now(now: Optional[datetime]) -> datetime:
    return now or datetime.now(timezone.utc)


class HistoryService:
    """Most recent analyses, newest first, capped at `limit` entries."""

    def __init__(self, store: KeyValueStore, limit: int = DEFAULT_HISTORY_LIMIT):
        if limit < 1:
            raise ValueError(f"History limit must be at least 1, got {limit}")
        self.store = store
        self.limit = limit

    def add(self, code: str, result: AnalysisResult, now: Optional[datetime] = None) -> HistoryItem:
        item = HistoryItem(
            id=uuid.uuid4().hex,
            code=code,
            results=AnalysisPayload.from_result(result),
            timestamp=_now(now),
            preview=make_preview(code),
        )
        self.record(item)
        return item

    def record(self, item: HistoryItem) -> list[HistoryItem]:
        """Put item first, dropping any older entry with the same id."""
        current = self.entries()
        updated = [item] + [h for h in current if h.id != item.id]
        updated = updated[:self.limit]
        if _save(self.store, HISTORY_KEY, _HISTORY_ADAPTER, updated):
            return updated
        return current

    def entries(self) -> list[HistoryItem]:
        return _load(self.store, HISTORY_KEY, _HISTORY_ADAPTER)

    def get(self, item_id: str) -> Optional[HistoryItem]:
        return next((h for h in self.entries() if h.id == item_id), None)

    def clear(self) -> None:
        try:
            self.store.remove(HISTORY_KEY)
        except StorageError as exc:
            logger.warning("Failed to clear history: %s", exc)


class BookmarkService:
    """Named snippets, newest first, no cap."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def save(
        self,
        name: str,
        code: str,
        result: Optional[AnalysisResult] = None,
        now: Optional[datetime] = None,
    ) -> BookmarkItem:
        bookmark = BookmarkItem(
            id=uuid.uuid4().hex,
            name=name,
            code=code,
            results=AnalysisPayload.from_result(result) if result is not None else None,
            timestamp=_now(now),
            preview=make_preview(code),
        )
        self.record(bookmark)
        return bookmark

    def record(self, bookmark: BookmarkItem) -> list[BookmarkItem]:
        current = self.entries()
        updated = [bookmark] + [b for b in current if b.id != bookmark.id]
        if _save(self.store, BOOKMARKS_KEY, _BOOKMARKS_ADAPTER, updated):
            return updated
        return current

    def remove(self, bookmark_id: str) -> list[BookmarkItem]:
        current = self.entries()
        updated = [b for b in current if b.id != bookmark_id]
        if _save(self.store, BOOKMARKS_KEY, _BOOKMARKS_ADAPTER, updated):
            return updated
        return current

    def entries(self) -> list[BookmarkItem]:
        return _load(self.store, BOOKMARKS_KEY, _BOOKMARKS_ADAPTER)


def _load(store: KeyValueStore, key: str, adapter: TypeAdapter) -> list:
    try:
        raw = store.get(key)
    except StorageError as exc:
        logger.warning("Failed to load %s: %s", key, exc)
        return []
    if raw is None:
        return []

    try:
        return adapter.validate_json(raw)
    except ValidationError as exc:
        logger.warning("Discarding unreadable %s entries: %d validation errors", key, exc.error_count())
        return []


def _save(store: KeyValueStore, key: str, adapter: TypeAdapter, items: list) -> bool:
    try:
        store.set(key, adapter.dump_json(items, by_alias=True).decode("utf-8"))
    except StorageError as exc:
        logger.warning("Failed to save %s: %s", key, exc)
        return False
    return True
