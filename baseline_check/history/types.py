"""Pydantic models for persisted history and bookmark entries."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from baseline_check.export.schemas import AnalysisPayload

PREVIEW_LENGTH = 100


def make_preview(code: str, length: int = PREVIEW_LENGTH) -> str:
    """First `length` characters of code, with '...' when it was cut."""
    if len(code) > length:
        return code[:length] + "..."
    return code


class HistoryItem(BaseModel):
    """One past analysis, newest entries first in the history list."""

    id: str = Field(min_length=1)
    code: str
    results: AnalysisPayload
    timestamp: datetime
    preview: str


class BookmarkItem(BaseModel):
    """A named snippet, optionally with the analysis it produced."""

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    code: str
    results: Optional[AnalysisPayload] = None
    timestamp: datetime
    preview: str
