"""Browsing helpers for a detected feature list: filter, sort, paginate, group.

These rely on the detector's ordering contract (status, then identifier)
but re-sort explicitly when asked, so they also work on filtered input.
"""

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Literal, Optional

from baseline_check.detector.engine import sort_by_status
from baseline_check.detector.types import DetectedFeature, Status

DEFAULT_PAGE_SIZE = 20

SortKey = Literal["status", "feature"]


@dataclass
class Page:
    """One page of features. page is 1-based; total_pages is at least 1."""

    items: list[DetectedFeature] = field(default_factory=list)
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    total_items: int = 0
    total_pages: int = 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    def to_dict(self) -> dict:
        return {
            "items": [f.to_dict() for f in self.items],
            "page": self.page,
            "page_size": self.page_size,
            "total_items": self.total_items,
            "total_pages": self.total_pages,
        }


def filter_features(
    features: Iterable[DetectedFeature],
    status: Optional[Status] = None,
    search: str = "",
) -> list[DetectedFeature]:
    """Keep features with the given status whose identifier contains search.

    status=None keeps every status; search is case-insensitive.
    """
    needle = search.strip().lower()
    return [
        f for f in features
        if (status is None or f.status == status)
        and (not needle or needle in f.feature.lower())
    ]


def sort_features(features: Iterable[DetectedFeature], by: SortKey = "status") -> list[DetectedFeature]:
    if by == "status":
        return sort_by_status(features)
    if by == "feature":
        return sorted(features, key=lambda f: f.feature)
    raise ValueError(f"Unknown sort key: {by!r}")


def paginate(
    features: Sequence[DetectedFeature],
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> Page:
    """Slice features into a page, clamping page into the valid range."""
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")

    total_pages = max(1, math.ceil(len(features) / page_size))
    page = min(max(1, page), total_pages)
    start = (page - 1) * page_size

    return Page(
        items=list(features[start:start + page_size]),
        page=page,
        page_size=page_size,
        total_items=len(features),
        total_pages=total_pages,
    )


def group_by_status(features: Iterable[DetectedFeature]) -> dict[Status, list[DetectedFeature]]:
    """Bucket features per status, always in baseline/needs-fallback/unknown order."""
    groups: dict[Status, list[DetectedFeature]] = {
        Status.BASELINE: [],
        Status.NEEDS_FALLBACK: [],
        Status.UNKNOWN: [],
    }
    for feature in features:
        groups[feature.status].append(feature)
    return groups
