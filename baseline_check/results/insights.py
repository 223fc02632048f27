"""Derived insights for an analysis: compatibility score and recommendations."""

import math
from dataclasses import dataclass, field
from enum import StrEnum

from baseline_check.detector.types import AnalysisResult, Status, Summary
from baseline_check.results.view import group_by_status

DEFAULT_RECOMMENDATION_LIMIT = 4


class ScoreTier(StrEnum):
    OUTSTANDING = "outstanding"
    GREAT = "great"
    GOOD = "good"
    NEEDS_WORK = "needs-work"


# Lower bound (inclusive) for each tier, checked top-down.
SCORE_THRESHOLDS: tuple[tuple[int, ScoreTier], ...] = (
    (85, ScoreTier.OUTSTANDING),
    (70, ScoreTier.GREAT),
    (50, ScoreTier.GOOD),
)

SCORE_MESSAGES: dict[ScoreTier, str] = {
    ScoreTier.OUTSTANDING: "Outstanding! Your code is highly compatible with modern browsers.",
    ScoreTier.GREAT: "Great job! Most features are well-supported across browsers.",
    ScoreTier.GOOD: "Good foundation with room for improvement in browser compatibility.",
    ScoreTier.NEEDS_WORK: "Consider adding fallbacks to improve cross-browser compatibility.",
}


def compatibility_score(summary: Summary) -> int:
    """Share of Baseline features as a whole percentage; 0 with no features."""
    if summary.total == 0:
        return 0
    # Halves round up, e.g. 1 of 8 -> 13.
    return math.floor(summary.baseline / summary.total * 100 + 0.5)


def score_tier(score: int) -> ScoreTier:
    for threshold, tier in SCORE_THRESHOLDS:
        if score >= threshold:
            return tier
    return ScoreTier.NEEDS_WORK


@dataclass
class Recommendation:
    """Advice for one status group.

    features lists at most `limit` identifiers; remaining counts the rest.
    """

    kind: str
    status: Status
    title: str
    description: str
    action: str
    features: list[str] = field(default_factory=list)
    remaining: int = 0

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "status": str(self.status),
            "title": self.title,
            "description": self.description,
            "action": self.action,
            "features": self.features,
            "remaining": self.remaining,
        }


def recommendations(
    result: AnalysisResult,
    limit: int = DEFAULT_RECOMMENDATION_LIMIT,
) -> list[Recommendation]:
    """Recommendations in warning, info, success order for non-empty groups."""
    groups = group_by_status(result.features)
    recs: list[Recommendation] = []

    fallback = groups[Status.NEEDS_FALLBACK]
    if fallback:
        recs.append(_build(
            "warning", Status.NEEDS_FALLBACK, fallback, limit,
            title="Fallback Strategy Needed",
            description=(
                f"{len(fallback)} features require polyfills or progressive "
                "enhancement for optimal browser support."
            ),
            action="Consider implementing feature detection and fallbacks",
        ))

    unknown = groups[Status.UNKNOWN]
    if unknown:
        recs.append(_build(
            "info", Status.UNKNOWN, unknown, limit,
            title="Research Required",
            description=(
                f"{len(unknown)} features are not in the Baseline dataset. "
                "Manual browser support verification recommended."
            ),
            action="Check MDN Web Docs or Can I Use for detailed support info",
        ))

    baseline = groups[Status.BASELINE]
    if baseline:
        recs.append(_build(
            "success", Status.BASELINE, baseline, limit,
            title="Excellent Browser Support",
            description=(
                f"{len(baseline)} features are Baseline-supported, ensuring consistent "
                "behavior across all modern browsers."
            ),
            action="These features are safe to use without fallbacks",
        ))

    return recs


def _build(kind, status, group, limit, *, title, description, action) -> Recommendation:
    shown = [f.feature for f in group[:limit]]
    return Recommendation(
        kind=kind,
        status=status,
        title=title,
        description=description,
        action=action,
        features=shown,
        remaining=len(group) - len(shown),
    )
