"""Unit tests for language inference and source-language guessing."""

import pytest

from baseline_check.detector import DetectedFeature, Language, Status, guess_source_language, infer_language
from baseline_check.detector.language import (
    is_css_like,
    is_html_like,
    is_js_like,
    source_language_label,
)


def _features(*names):
    return [DetectedFeature(name, Status.UNKNOWN) for name in names]


class TestFamilies:
    @pytest.mark.parametrize("name", ["css-has", "css-grid", "grid", "flexbox", "aspect-ratio"])
    def test_css_like(self, name):
        assert is_css_like(name)

    @pytest.mark.parametrize("name", ["es-modules", "promise-any", "async-await", "fetch", "map-set", "array-methods"])
    def test_js_like(self, name):
        assert is_js_like(name)

    @pytest.mark.parametrize("name", ["dialog", "details", "picture", "canvas", "svg", "html-imports"])
    def test_html_like(self, name):
        assert is_html_like(name)

    @pytest.mark.parametrize("name", ["input-email", "optional-chaining", "web-components", "prefers-contrast"])
    def test_unclassified(self, name):
        assert not is_css_like(name)
        assert not is_js_like(name)
        assert not is_html_like(name)


class TestInferLanguage:
    @pytest.mark.parametrize("names, expected", [
        (("grid",), Language.CSS),
        (("css-has", "css-rem-units"), Language.CSS),
        (("fetch",), Language.JAVASCRIPT),
        (("es-modules", "promise"), Language.JAVASCRIPT),
        (("dialog",), Language.HTML),
        (("grid", "dialog"), Language.HTML_CSS),
        (("fetch", "svg"), Language.HTML_JAVASCRIPT),
        (("grid", "fetch"), Language.MIXED),
        (("grid", "fetch", "dialog"), Language.MIXED),
        ((), Language.MIXED),
        (("input-email",), Language.MIXED),
    ])
    def test_decision_table(self, names, expected):
        assert infer_language(_features(*names)) == expected

    def test_unclassified_features_do_not_change_label(self):
        assert infer_language(_features("grid", "input-email", "optional-chaining")) == Language.CSS


class TestGuessSourceLanguage:
    def test_markup(self):
        assert guess_source_language("<div class='a'>hi</div>") == "markup"

    def test_doctype_is_markup(self):
        assert guess_source_language("<!DOCTYPE html>\n<p>x</p>") == "markup"

    def test_typescript(self):
        assert guess_source_language("interface User { name: string }") == "typescript"

    def test_jsx(self):
        assert guess_source_language("import React from 'react';\nconst App = () => <App />;") == "jsx"

    def test_css(self):
        assert guess_source_language(".a { color: red; }") == "css"

    def test_default_javascript(self):
        assert guess_source_language("let x = 1;") == "javascript"

    def test_empty_is_javascript(self):
        assert guess_source_language("   ") == "javascript"

    def test_labels(self):
        assert source_language_label("markup") == "HTML"
        assert source_language_label("jsx") == "JSX"
        assert source_language_label("cobol") == "Code"
