"""Unit tests for detector result types."""

import pytest

from baseline_check.detector import AnalysisResult, DetectedFeature, Language, Status, Summary


class TestDetectedFeature:
    def test_status_coerced_from_string(self):
        feature = DetectedFeature("fetch", "needs-fallback")
        assert feature.status is Status.NEEDS_FALLBACK

    def test_unknown_status_rejected(self):
        with pytest.raises(ValueError):
            DetectedFeature("fetch", "partial")

    def test_empty_identifier_rejected(self):
        with pytest.raises(ValueError):
            DetectedFeature("", Status.BASELINE)

    def test_found_must_be_true(self):
        with pytest.raises(ValueError):
            DetectedFeature("fetch", Status.BASELINE, found=False)

    def test_to_dict(self):
        assert DetectedFeature("fetch", Status.UNKNOWN).to_dict() == {
            "feature": "fetch", "status": "unknown", "found": True,
        }


class TestSummary:
    def test_from_features(self):
        summary = Summary.from_features([
            DetectedFeature("a", Status.BASELINE),
            DetectedFeature("b", Status.NEEDS_FALLBACK),
            DetectedFeature("c", Status.NEEDS_FALLBACK),
        ])
        assert summary == Summary(total=3, baseline=1, needs_fallback=2, unknown=0)

    def test_to_dict_uses_camel_case(self):
        d = Summary(total=1, needs_fallback=1).to_dict()
        assert d == {"total": 1, "baseline": 0, "needsFallback": 1, "unknown": 0}


class TestAnalysisResult:
    def test_language_coerced(self):
        result = AnalysisResult(language="HTML + CSS", features=(), summary=Summary())
        assert result.language is Language.HTML_CSS

    def test_features_become_tuple(self):
        result = AnalysisResult(
            language=Language.CSS,
            features=[DetectedFeature("grid", Status.BASELINE)],
            summary=Summary(total=1, baseline=1),
        )
        assert isinstance(result.features, tuple)

    def test_duplicates_rejected(self):
        with pytest.raises(ValueError, match="Duplicate"):
            AnalysisResult(
                language=Language.CSS,
                features=(DetectedFeature("grid", Status.BASELINE), DetectedFeature("grid", Status.UNKNOWN)),
                summary=Summary(total=2, baseline=1, unknown=1),
            )

    def test_mismatched_summary_rejected(self):
        with pytest.raises(ValueError, match="does not match"):
            AnalysisResult(
                language=Language.CSS,
                features=(DetectedFeature("grid", Status.BASELINE),),
                summary=Summary(total=1, unknown=1),
            )

    def test_to_dict_keys(self, mixed_result):
        assert set(mixed_result.to_dict()) == {"language", "features", "summary"}
        assert mixed_result.to_dict()["language"] == "CSS"
