"""Golden tests for detection on fixture snippets.

Each fixture mimics a real-world file. The detector should find the
expected features and label the language, using the bundled dataset.
"""

import pytest

from baseline_check.dataset import default_baseline_data
from baseline_check.detector import Language, Status, detect


def _statuses(result):
    return {f.feature: f.status for f in result.features}


class TestModernLayoutCss:
    """A stylesheet using grid, container queries and :has()."""

    @pytest.fixture
    def result(self, snippets_dir):
        text = (snippets_dir / "modern-layout.css").read_text(encoding="utf-8")
        return detect(text, default_baseline_data())

    def test_language(self, result):
        assert result.language == Language.CSS

    def test_layout_features(self, result):
        found = _statuses(result)
        for name in ("grid", "css-grid", "aspect-ratio", "css-rem-units"):
            assert name in found

    def test_modern_features(self, result):
        found = _statuses(result)
        for name in ("css-has", "css-container-queries", "css-backdrop-filter", "prefers-reduced-motion"):
            assert name in found

    def test_grid_is_baseline(self, result):
        assert _statuses(result)["grid"] == Status.BASELINE

    def test_summary_consistent(self, result):
        assert result.summary.total == len(result.features)


class TestUserServiceJs:
    """An ES module with fetch, async/await and modern operators."""

    @pytest.fixture
    def result(self, snippets_dir):
        text = (snippets_dir / "user-service.js").read_text(encoding="utf-8")
        return detect(text, default_baseline_data())

    def test_language(self, result):
        assert result.language == Language.JAVASCRIPT

    def test_syntax_features(self, result):
        found = _statuses(result)
        for name in ("es-modules", "async-await", "arrow-functions", "optional-chaining",
                     "nullish-coalescing", "spread-operator", "template-literals"):
            assert name in found

    def test_api_features(self, result):
        found = _statuses(result)
        for name in ("fetch", "map-set", "promise-allsettled", "intersection-observer"):
            assert name in found

    def test_fetch_is_baseline(self, result):
        assert _statuses(result)["fetch"] == Status.BASELINE


class TestSignupHtml:
    """A form page with dialog, details and responsive images."""

    @pytest.fixture
    def result(self, snippets_dir):
        text = (snippets_dir / "signup.html").read_text(encoding="utf-8")
        return detect(text, default_baseline_data())

    def test_language(self, result):
        assert result.language == Language.HTML

    def test_elements(self, result):
        found = _statuses(result)
        for name in ("dialog", "details", "summary", "picture", "progress", "lazy-loading"):
            assert name in found

    def test_form_features(self, result):
        found = _statuses(result)
        for name in ("input-email", "input-date", "input-required", "input-placeholder"):
            assert name in found

    def test_canvas_not_detected(self, result):
        assert "canvas" not in _statuses(result)
