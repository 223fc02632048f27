"""Feature detection engine.

Scans a snippet with every catalog signature and classifies each hit
against the Baseline dataset. Each signature is tested at most once per
call, so the cost is linear in text size times catalog size.

The engine keeps no state between calls; the catalog and the dataset are
only ever read.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Optional

from baseline_check.catalog import CATALOG, FeatureSignature
from baseline_check.detector.types import STATUS_PRIORITY, DetectedFeature, Status, Summary

logger = logging.getLogger(__name__)


def detect_features(
    text: str,
    baseline_data: Mapping[str, Optional[bool]],
    catalog: Mapping[str, FeatureSignature] = CATALOG,
) -> list[DetectedFeature]:
    """Return the features found in text, sorted by status then identifier.

    A feature is reported once, however many of its patterns match.
    Empty text or text without matches yields an empty list.
    """
    seen: set[str] = set()
    found: list[DetectedFeature] = []

    if not text:
        return found

    for feature, signature in catalog.items():
        if feature in seen:
            continue
        if signature.matches(text):
            seen.add(feature)
            found.append(
                DetectedFeature(feature=feature, status=classify_status(feature, baseline_data))
            )

    logger.debug("Detected %d features in %d characters", len(found), len(text))
    return sort_by_status(found)


def classify_status(feature: str, baseline_data: Mapping[str, Optional[bool]]) -> Status:
    """Map the dataset's tri-state flag to a status.

    Only literal True/False count; a missing key or None is unknown.
    """
    flag = baseline_data.get(feature)
    if flag is True:
        return Status.BASELINE
    if flag is False:
        return Status.NEEDS_FALLBACK
    return Status.UNKNOWN


def sort_by_status(features: Iterable[DetectedFeature]) -> list[DetectedFeature]:
    """Order by status priority, then identifier ascending."""
    return sorted(features, key=lambda f: (STATUS_PRIORITY[f.status], f.feature))


def summarize(features: Iterable[DetectedFeature]) -> Summary:
    """Count features per status. Always recomputed from the list."""
    return Summary.from_features(features)
