"""Types for the detector module.

A DetectedFeature records one feature found in a snippet together with
its Baseline status. An AnalysisResult bundles the sorted features with
the inferred language and summary counts derived from them.
"""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum


class Status(StrEnum):
    """Baseline support status of a detected feature."""

    BASELINE = "baseline"
    NEEDS_FALLBACK = "needs-fallback"
    UNKNOWN = "unknown"


# Sort priority for the result contract: baseline, then needs-fallback, then unknown.
STATUS_PRIORITY: dict[Status, int] = {
    Status.BASELINE: 0,
    Status.NEEDS_FALLBACK: 1,
    Status.UNKNOWN: 2,
}


class Language(StrEnum):
    """Overall snippet language inferred from the detected features."""

    CSS = "CSS"
    JAVASCRIPT = "JavaScript"
    HTML = "HTML"
    HTML_CSS = "HTML + CSS"
    HTML_JAVASCRIPT = "HTML + JavaScript"
    MIXED = "Mixed"


@dataclass(frozen=True)
class DetectedFeature:
    """A feature found in the analyzed text.

    found is always True for emitted entries; it is kept for the
    exported document shape.
    """

    feature: str
    status: Status
    found: bool = True

    def __post_init__(self) -> None:
        if not self.feature:
            raise ValueError("DetectedFeature requires a feature identifier")
        if self.found is not True:
            raise ValueError(f"DetectedFeature '{self.feature}' must have found=True")
        # Accept plain strings such as "needs-fallback" from callers.
        object.__setattr__(self, "status", Status(self.status))

    def to_dict(self) -> dict:
        return {
            "feature": self.feature,
            "status": str(self.status),
            "found": self.found,
        }


@dataclass(frozen=True)
class Summary:
    """Counts per status. total always equals the sum of the three buckets."""

    total: int = 0
    baseline: int = 0
    needs_fallback: int = 0
    unknown: int = 0

    @classmethod
    def from_features(cls, features: Iterable[DetectedFeature]) -> "Summary":
        counts: Counter[Status] = Counter(f.status for f in features)
        return cls(
            total=sum(counts.values()),
            baseline=counts[Status.BASELINE],
            needs_fallback=counts[Status.NEEDS_FALLBACK],
            unknown=counts[Status.UNKNOWN],
        )

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "baseline": self.baseline,
            "needsFallback": self.needs_fallback,
            "unknown": self.unknown,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Complete detector output for one snippet.

    The summary is validated against the feature list at construction,
    so a result can never carry counts that disagree with its features.
    """

    language: Language
    features: tuple[DetectedFeature, ...]
    summary: Summary

    def __post_init__(self) -> None:
        object.__setattr__(self, "language", Language(self.language))
        object.__setattr__(self, "features", tuple(self.features))

        names = [f.feature for f in self.features]
        if len(names) != len(set(names)):
            duplicates = sorted({n for n in names if names.count(n) > 1})
            raise ValueError(f"Duplicate feature identifiers: {', '.join(duplicates)}")

        expected = Summary.from_features(self.features)
        if self.summary != expected:
            raise ValueError(
                f"Summary {self.summary} does not match features (expected {expected})"
            )

    def to_dict(self) -> dict:
        return {
            "language": str(self.language),
            "features": [f.to_dict() for f in self.features],
            "summary": self.summary.to_dict(),
        }
