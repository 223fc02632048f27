"""Language inference.

Two independent guesses live here:

infer_language() labels an analyzed snippet from the features detected
in it. Membership is decided from identifier prefixes and short allow
lists, not from catalog categories, so labels stay stable for
identifiers such as "grid" or "dialog" that carry no prefix.

guess_source_language() looks at the raw text only and picks a syntax
mode for an editor view.
"""

from collections.abc import Iterable

from baseline_check.detector.types import DetectedFeature, Language

CSS_PREFIXES = ("css-",)
CSS_FEATURES = frozenset({"grid", "flexbox", "aspect-ratio"})

JS_PREFIXES = ("es",)
JS_SUBSTRINGS = ("promise", "async")
JS_FEATURES = frozenset({"fetch", "map-set", "array-methods"})

HTML_PREFIXES = ("html",)
HTML_FEATURES = frozenset({"dialog", "details", "picture", "canvas", "svg"})


def is_css_like(feature: str) -> bool:
    return feature.startswith(CSS_PREFIXES) or feature in CSS_FEATURES


def is_js_like(feature: str) -> bool:
    return (
        feature.startswith(JS_PREFIXES)
        or any(part in feature for part in JS_SUBSTRINGS)
        or feature in JS_FEATURES
    )


def is_html_like(feature: str) -> bool:
    return feature.startswith(HTML_PREFIXES) or feature in HTML_FEATURES


def infer_language(features: Iterable[DetectedFeature]) -> Language:
    """Classify the snippet from which families of features it uses.

    Any combination outside the five single/pair cases, including no
    features at all and all three families together, is Mixed.
    """
    names = [f.feature for f in features]
    has_css = any(is_css_like(n) for n in names)
    has_js = any(is_js_like(n) for n in names)
    has_html = any(is_html_like(n) for n in names)

    if has_css and not has_js and not has_html:
        return Language.CSS
    if has_js and not has_css and not has_html:
        return Language.JAVASCRIPT
    if has_html and not has_css and not has_js:
        return Language.HTML
    if has_css and has_html and not has_js:
        return Language.HTML_CSS
    if has_js and has_html and not has_css:
        return Language.HTML_JAVASCRIPT
    return Language.MIXED


SOURCE_LANGUAGE_LABELS = {
    "javascript": "JavaScript",
    "typescript": "TypeScript",
    "jsx": "JSX",
    "css": "CSS",
    "markup": "HTML",
}

_MARKUP_HINTS = ("<!doctype", "<html", "<div", "<span")
_TYPESCRIPT_HINTS = ("interface ", ": string", ": number", "type ")
_CSS_DECLARATION_HINTS = ("color:", "margin:", "padding:")


def guess_source_language(text: str) -> str:
    """Pick a syntax mode for raw text, defaulting to javascript."""
    code = text.strip().lower()

    if any(hint in code for hint in _MARKUP_HINTS):
        return "markup"
    if any(hint in code for hint in _TYPESCRIPT_HINTS):
        return "typescript"
    if "import " in code and ("jsx" in code or ("<" in code and ">" in code)):
        return "jsx"
    if "{" in code and any(hint in code for hint in _CSS_DECLARATION_HINTS):
        return "css"
    return "javascript"


def source_language_label(language: str) -> str:
    return SOURCE_LANGUAGE_LABELS.get(language, "Code")
