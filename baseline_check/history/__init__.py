"""History, bookmarks and share links for analyzed snippets.

The detection core never imports this package; callers wire a store in.
"""

from baseline_check.history.service import (
    BOOKMARKS_KEY,
    DRAFT_KEY,
    HISTORY_KEY,
    BookmarkService,
    HistoryService,
)
from baseline_check.history.share import decode_share_fragment, encode_share_fragment
from baseline_check.history.store import InMemoryStore, JsonFileStore, KeyValueStore, StorageError
from baseline_check.history.types import BookmarkItem, HistoryItem, make_preview

__all__ = [
    "BOOKMARKS_KEY",
    "DRAFT_KEY",
    "HISTORY_KEY",
    "BookmarkService",
    "HistoryService",
    "decode_share_fragment",
    "encode_share_fragment",
    "InMemoryStore",
    "JsonFileStore",
    "KeyValueStore",
    "StorageError",
    "BookmarkItem",
    "HistoryItem",
    "make_preview",
]
