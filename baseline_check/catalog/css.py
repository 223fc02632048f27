"""CSS feature signatures.

Patterns look for property declarations, at-rules, functions, units and
selectors as they appear in stylesheets or inline style attributes.
"""

from baseline_check.catalog.types import Category, SignatureRow

_CSS_TABLE: tuple[tuple[str, tuple[str, ...]], ...] = (
    # Layout
    ("grid", (
        r"display\s*:\s*grid", r"grid-template", r"grid-area", r"grid-column",
        r"grid-row", r"grid-gap", r"gap\s*:",
    )),
    ("css-grid", (r"display\s*:\s*grid", r"grid-template", r"grid-area")),
    ("flexbox", (
        r"display\s*:\s*flex", r"flex-direction", r"flex-wrap",
        r"justify-content", r"align-items", r"flex\s*:",
    )),
    ("css-flexbox", (r"display\s*:\s*flex", r"flex-direction", r"justify-content")),
    ("subgrid", (r"grid-template.*subgrid", r"subgrid")),
    ("css-subgrid", (r"subgrid",)),

    # Modern properties
    ("aspect-ratio", (r"aspect-ratio\s*:",)),
    ("backdrop-filter", (r"backdrop-filter\s*:",)),
    ("css-backdrop-filter", (r"backdrop-filter\s*:",)),
    ("css-custom-properties", (r"--[\w-]+\s*:", r"var\s*\(")),
    ("css-variables", (r"--[\w-]+\s*:", r"var\s*\(")),
    ("css-calc", (r"calc\s*\(",)),
    ("css-transforms", (r"transform\s*:", r"rotate\s*\(", r"scale\s*\(", r"translate\s*\(")),
    ("css-transitions", (r"transition\s*:", r"transition-property", r"transition-duration")),
    ("css-animations", (r"@keyframes", r"animation\s*:", r"animation-name")),
    ("css-gradients", (r"linear-gradient", r"radial-gradient", r"conic-gradient")),
    ("css-filter", (r"filter\s*:", r"blur\s*\(", r"brightness\s*\(", r"contrast\s*\(")),
    ("css-clip-path", (r"clip-path\s*:",)),
    ("css-object-fit", (r"object-fit\s*:",)),
    ("css-object-position", (r"object-position\s*:",)),

    # Positioning and writing modes
    ("css-sticky", (r"position\s*:\s*sticky",)),
    ("css-position-sticky", (r"position\s*:\s*sticky",)),
    ("css-logical-properties", (
        r"margin-inline", r"padding-block", r"border-inline", r"inset-inline",
    )),
    ("css-writing-mode", (r"writing-mode\s*:",)),
    ("css-text-orientation", (r"text-orientation\s*:",)),

    # Newer, limited-availability features
    ("css-cascade-layers", (r"@layer", r"layer\s*\(")),
    ("css-container-queries", (
        r"@container", r"container-type", r"container-name", r"container\s*:",
    )),
    ("css-has", (r":has\s*\(",)),
    ("css-nesting", (r"&\s*[.:#\[]", r"&\s*\{")),
    ("css-color-mix", (r"color-mix\s*\(",)),
    ("css-relative-color-syntax", (r"from\s+\w+",)),
    ("css-wide-gamut-colors", (r"color\s*\(\s*display-p3", r"color\s*\(\s*rec2020")),

    # Scrolling
    ("css-scroll-behavior", (r"scroll-behavior\s*:",)),
    ("css-overscroll-behavior", (r"overscroll-behavior",)),
    ("css-scroll-snap", (r"scroll-snap",)),
    ("css-scroll-timeline", (r"scroll-timeline", r"@scroll-timeline")),
    ("css-view-timeline", (r"view-timeline", r"@view-timeline")),
    ("css-animation-timeline", (r"animation-timeline",)),

    # Typography
    ("css-font-display", (r"font-display\s*:",)),
    ("css-font-feature-settings", (r"font-feature-settings",)),
    ("css-font-variation-settings", (r"font-variation-settings",)),

    # Color and appearance
    ("css-color-scheme", (r"color-scheme\s*:",)),
    ("css-forced-color-adjust", (r"forced-color-adjust",)),
    ("css-light-dark", (r"light-dark\s*\(",)),

    # User preference media queries
    ("prefers-color-scheme", (r"@media.*prefers-color-scheme",)),
    ("prefers-reduced-motion", (r"@media.*prefers-reduced-motion",)),
    ("prefers-contrast", (r"@media.*prefers-contrast",)),
    ("prefers-reduced-transparency", (r"@media.*prefers-reduced-transparency",)),

    # Units. Digit runs are taken whole so a long number is scanned once.
    ("css-viewport-units", (
        r"(?<!\d)\d++vh", r"(?<!\d)\d++vw", r"(?<!\d)\d++vmin",
        r"(?<!\d)\d++vmax", r"(?<!\d)\d++vi", r"(?<!\d)\d++vb",
    )),
    ("css-rem-units", (r"(?<!\d)\d++rem",)),
    ("css-ch-units", (r"(?<!\d)\d++ch",)),
    ("css-ex-units", (r"(?<!\d)\d++ex",)),

    # Selectors
    ("css-nth-child", (r":nth-child\s*\(", r":nth-last-child\s*\(", r":nth-of-type\s*\(")),
    ("css-not-selector", (r":not\s*\(",)),
    ("css-attribute-selectors", (r"\[[\w-]+[*^$|~]?=",)),
    ("css-pseudo-elements", (r"::before", r"::after", r"::first-line", r"::first-letter")),
    ("css-pseudo-classes", (r":hover", r":focus", r":active", r":visited", r":target")),

    # Experimental
    ("css-anchor-positioning", (r"anchor\s*\(", r"position-anchor")),
    ("css-view-transitions", (r"view-transition", r"::view-transition")),
    ("css-scope", (r"@scope",)),
    ("css-starting-style", (r"@starting-style",)),
    ("css-field-sizing", (r"field-sizing\s*:",)),
)

CSS_SIGNATURES: tuple[SignatureRow, ...] = tuple(
    SignatureRow(feature, Category.CSS, patterns) for feature, patterns in _CSS_TABLE
)
