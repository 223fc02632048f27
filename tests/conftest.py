"""Shared test fixtures for the Baseline Check test suite."""

from pathlib import Path

import pytest

from baseline_check.detector import AnalysisResult, DetectedFeature, Language, Status, Summary
from baseline_check.history import InMemoryStore

SNIPPETS_DIR = Path(__file__).resolve().parents[1] / "fixtures" / "snippets"


@pytest.fixture
def snippets_dir() -> Path:
    return SNIPPETS_DIR


@pytest.fixture
def mixed_result() -> AnalysisResult:
    """One feature per status, already in result order."""
    features = (
        DetectedFeature("grid", Status.BASELINE),
        DetectedFeature("css-has", Status.NEEDS_FALLBACK),
        DetectedFeature("css-rem-units", Status.UNKNOWN),
    )
    return AnalysisResult(
        language=Language.CSS,
        features=features,
        summary=Summary(total=3, baseline=1, needs_fallback=1, unknown=1),
    )


@pytest.fixture
def empty_result() -> AnalysisResult:
    return AnalysisResult(language=Language.MIXED, features=(), summary=Summary())


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()
