"""Browsing and insight helpers over analysis results."""

from baseline_check.results.insights import (
    SCORE_MESSAGES,
    Recommendation,
    ScoreTier,
    compatibility_score,
    recommendations,
    score_tier,
)
from baseline_check.results.view import Page, filter_features, group_by_status, paginate, sort_features

__all__ = [
    "Recommendation",
    "ScoreTier",
    "SCORE_MESSAGES",
    "compatibility_score",
    "recommendations",
    "score_tier",
    "Page",
    "filter_features",
    "group_by_status",
    "paginate",
    "sort_features",
]
