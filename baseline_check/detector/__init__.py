"""Detector module for web-platform feature usage in code snippets.

Public API:
    detect(text, baseline_data) -> AnalysisResult
    detect_features(text, baseline_data) -> list[DetectedFeature]
"""

from baseline_check.detector.engine import classify_status, detect_features, sort_by_status, summarize
from baseline_check.detector.language import guess_source_language, infer_language
from baseline_check.detector.orchestrator import detect
from baseline_check.detector.types import (
    STATUS_PRIORITY,
    AnalysisResult,
    DetectedFeature,
    Language,
    Status,
    Summary,
)

__all__ = [
    "detect",
    "detect_features",
    "classify_status",
    "sort_by_status",
    "summarize",
    "infer_language",
    "guess_source_language",
    "STATUS_PRIORITY",
    "AnalysisResult",
    "DetectedFeature",
    "Language",
    "Status",
    "Summary",
]
