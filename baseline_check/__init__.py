"""Baseline Check: detect web-platform features in code and rate their Baseline status.

Public API:
    detect(text, baseline_data) -> AnalysisResult
    resolve_documentation(feature) -> str | None
    export_json(result) -> str
    export_markdown(result) -> str
    create_checker(settings=None) -> BaselineChecker
"""

from baseline_check.checker import BaselineChecker, InputReadError, create_checker
from baseline_check.detector import AnalysisResult, DetectedFeature, Language, Status, Summary, detect
from baseline_check.docs import resolve_documentation
from baseline_check.export import export_json, export_markdown, load_json_export

__all__ = [
    "BaselineChecker",
    "InputReadError",
    "create_checker",
    "AnalysisResult",
    "DetectedFeature",
    "Language",
    "Status",
    "Summary",
    "detect",
    "resolve_documentation",
    "export_json",
    "export_markdown",
    "load_json_export",
]
