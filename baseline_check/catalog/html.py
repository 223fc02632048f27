"""HTML element and attribute signatures."""

from baseline_check.catalog.types import Category, SignatureRow

_HTML_TABLE: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("dialog", (r"<dialog", r"HTMLDialogElement", r"showModal\s*\(", r"\.close\s*\(")),
    ("details", (r"<details", r"<summary")),
    ("summary", (r"<summary",)),
    ("picture", (r"<picture", r"<source")),
    ("track", (r"<track",)),
    ("progress", (r"<progress",)),
    ("meter", (r"<meter",)),
    ("output", (r"<output",)),
    ("datalist", (r"<datalist", r"list\s*=")),

    # Web components
    ("web-components", (
        r"customElements", r"attachShadow", r"custom-element",
        r"customElements\.define", r"<[\w-]+-[\w-]+",
    )),
    ("shadow-dom", (r"attachShadow", r"shadowRoot")),
    ("custom-elements", (r"customElements\.define", r"HTMLElement")),
    ("template", (r"<template",)),
    ("slot", (r"<slot", r"slot\s*=")),

    # Media and graphics
    ("canvas", (r"<canvas", r"getContext\s*\(")),
    ("svg", (r"<svg", r"<path", r"<circle", r"<rect")),
    ("video", (r"<video",)),
    ("audio", (r"<audio",)),
    ("source", (r"<source",)),
    ("srcset", (r"srcset\s*=",)),
    ("sizes", (r"sizes\s*=",)),
    ("loading", (r"""loading\s*=\s*["']lazy["']""",)),
    ("lazy-loading", (r"""loading\s*=\s*["']lazy["']""",)),

    # Resource hints
    ("preload", (r"""rel\s*=\s*["']preload["']""",)),
    ("prefetch", (r"""rel\s*=\s*["']prefetch["']""",)),
    ("preconnect", (r"""rel\s*=\s*["']preconnect["']""",)),
    ("dns-prefetch", (r"""rel\s*=\s*["']dns-prefetch["']""",)),
    ("modulepreload", (r"""rel\s*=\s*["']modulepreload["']""",)),
)

HTML_SIGNATURES: tuple[SignatureRow, ...] = tuple(
    SignatureRow(feature, Category.HTML, patterns) for feature, patterns in _HTML_TABLE
)
