"""Documentation links for detected features.

Resolution order:
1. Exact entry in the MDN table.
2. Identifier on the Can I Use allow-list -> https://caniuse.com/<id>.
3. Structural prefix fallbacks:
     css-<name>    -> MDN CSS reference, dashes turned into underscores
     input-<type>  -> MDN <input type="..."> page
     es<...year>   -> MDN "New in JavaScript" overview
4. Otherwise None.

Only URL strings are built here; nothing is fetched.
"""

import re
from collections.abc import Iterable, Mapping
from typing import Optional

MDN_BASE = "https://developer.mozilla.org/en-US/docs/Web/"
CANIUSE_BASE = "https://caniuse.com/"

_JS_REF = "JavaScript/Reference/"
_GLOBALS = _JS_REF + "Global_Objects/"

MDN_PATHS: dict[str, str] = {
    # CSS
    "grid": "CSS/CSS_Grid_Layout",
    "css-grid": "CSS/CSS_Grid_Layout",
    "flexbox": "CSS/CSS_Flexible_Box_Layout",
    "css-flexbox": "CSS/CSS_Flexible_Box_Layout",
    "css-custom-properties": "CSS/--*",
    "css-variables": "CSS/var()",
    "css-transforms": "CSS/transform",
    "css-transitions": "CSS/CSS_Transitions",
    "css-animations": "CSS/CSS_Animations",
    "css-gradients": "CSS/CSS_Images/Using_CSS_gradients",
    "css-calc": "CSS/calc()",
    "css-filter": "CSS/filter",
    "css-backdrop-filter": "CSS/backdrop-filter",
    "css-clip-path": "CSS/clip-path",
    "css-object-fit": "CSS/object-fit",
    "css-object-position": "CSS/object-position",
    "css-sticky": "CSS/position#sticky",
    "css-position-sticky": "CSS/position#sticky",
    "css-logical-properties": "CSS/CSS_Logical_Properties",
    "css-writing-mode": "CSS/writing-mode",
    "css-text-orientation": "CSS/text-orientation",
    "css-font-display": "CSS/@font-face/font-display",
    "css-font-feature-settings": "CSS/font-feature-settings",
    "css-font-variation-settings": "CSS/font-variation-settings",
    "css-color-mix": "CSS/color_value/color-mix()",
    "css-color-scheme": "CSS/color-scheme",
    "css-cascade-layers": "CSS/@layer",
    "css-container-queries": "CSS/CSS_Container_Queries",
    "css-has": "CSS/:has",
    "css-nesting": "CSS/CSS_Nesting",
    "css-subgrid": "CSS/CSS_Grid_Layout/Subgrid",
    "css-scroll-behavior": "CSS/scroll-behavior",
    "css-overscroll-behavior": "CSS/overscroll-behavior",
    "css-scroll-snap": "CSS/CSS_Scroll_Snap",
    "css-viewport-units": "CSS/length#viewport-percentage_lengths",
    "css-rem-units": "CSS/length#rem",
    "css-nth-child": "CSS/:nth-child",
    "css-not-selector": "CSS/:not",
    "css-attribute-selectors": "CSS/Attribute_selectors",
    "css-pseudo-elements": "CSS/Pseudo-elements",
    "css-pseudo-classes": "CSS/Pseudo-classes",
    "aspect-ratio": "CSS/aspect-ratio",
    "prefers-color-scheme": "CSS/@media/prefers-color-scheme",
    "prefers-reduced-motion": "CSS/@media/prefers-reduced-motion",
    "prefers-contrast": "CSS/@media/prefers-contrast",

    # HTML
    "dialog": "HTML/Element/dialog",
    "details": "HTML/Element/details",
    "summary": "HTML/Element/summary",
    "picture": "HTML/Element/picture",
    "track": "HTML/Element/track",
    "progress": "HTML/Element/progress",
    "meter": "HTML/Element/meter",
    "output": "HTML/Element/output",
    "datalist": "HTML/Element/datalist",
    "web-components": "Web_Components",
    "shadow-dom": "Web_Components/Using_shadow_DOM",
    "custom-elements": "Web_Components/Using_custom_elements",
    "template": "HTML/Element/template",
    "slot": "HTML/Element/slot",
    "canvas": "HTML/Element/canvas",
    "svg": "SVG",
    "video": "HTML/Element/video",
    "audio": "HTML/Element/audio",
    "source": "HTML/Element/source",
    "srcset": "HTML/Element/img#attr-srcset",
    "sizes": "HTML/Element/img#attr-sizes",
    "loading": "HTML/Element/img#attr-loading",
    "lazy-loading": "HTML/Element/img#attr-loading",

    # Forms
    "input-multiple": "HTML/Element/input#attr-multiple",
    "input-pattern": "HTML/Element/input#attr-pattern",
    "input-placeholder": "HTML/Element/input#attr-placeholder",
    "input-required": "HTML/Element/input#attr-required",
    "input-autofocus": "HTML/Element/input#attr-autofocus",
    "input-autocomplete": "HTML/Element/input#attr-autocomplete",
    "form-validation": "API/Constraint_validation",

    # JavaScript language
    "es-modules": "JavaScript/Guide/Modules",
    "dynamic-import": _JS_REF + "Operators/import",
    "import-meta": _JS_REF + "Operators/import.meta",
    "top-level-await": _JS_REF + "Operators/await#top_level_await",
    "async-await": _JS_REF + "Statements/async_function",
    "arrow-functions": _JS_REF + "Functions/Arrow_functions",
    "template-literals": _JS_REF + "Template_literals",
    "destructuring": _JS_REF + "Operators/Destructuring_assignment",
    "spread-operator": _JS_REF + "Operators/Spread_syntax",
    "rest-parameters": _JS_REF + "Functions/rest_parameters",
    "default-parameters": _JS_REF + "Functions/Default_parameters",
    "const-let": _JS_REF + "Statements/const",
    "classes": _JS_REF + "Classes",
    "for-of": _JS_REF + "Statements/for...of",
    "generators": _GLOBALS + "Generator",
    "iterators": _JS_REF + "Iteration_protocols",
    "nullish-coalescing": _JS_REF + "Operators/Nullish_coalescing",
    "optional-chaining": _JS_REF + "Operators/Optional_chaining",
    "logical-assignment": _JS_REF + "Operators/Logical_AND_assignment",
    "numeric-separators": _JS_REF + "Lexical_grammar#numeric_separators",
    "private-fields": _JS_REF + "Classes/Private_class_fields",
    "private-methods": _JS_REF + "Classes/Private_class_fields#private_methods",
    "static-blocks": _JS_REF + "Classes/Static_initialization_blocks",
    "class-static-initialization-blocks": _JS_REF + "Classes/Static_initialization_blocks",

    # JavaScript built-ins
    "map-set": _GLOBALS + "Map",
    "weak-map-set": _GLOBALS + "WeakMap",
    "symbols": _GLOBALS + "Symbol",
    "proxy": _GLOBALS + "Proxy",
    "reflect": _GLOBALS + "Reflect",
    "object-assign": _GLOBALS + "Object/assign",
    "object-entries": _GLOBALS + "Object/entries",
    "object-values": _GLOBALS + "Object/values",
    "object-keys": _GLOBALS + "Object/keys",
    "object-hasown": _GLOBALS + "Object/hasOwn",
    "array-methods": _GLOBALS + "Array",
    "array-flat": _GLOBALS + "Array/flat",
    "array-at": _GLOBALS + "Array/at",
    "promise": _GLOBALS + "Promise",
    "promise-allsettled": _GLOBALS + "Promise/allSettled",
    "promise-any": _GLOBALS + "Promise/any",
    "intl": _GLOBALS + "Intl",
    "intl-collator": _GLOBALS + "Intl/Collator",
    "intl-datetimeformat": _GLOBALS + "Intl/DateTimeFormat",
    "intl-numberformat": _GLOBALS + "Intl/NumberFormat",
    "intl-pluralrules": _GLOBALS + "Intl/PluralRules",
    "intl-relativetimeformat": _GLOBALS + "Intl/RelativeTimeFormat",
    "intl-listformat": _GLOBALS + "Intl/ListFormat",
    "intl-locale": _GLOBALS + "Intl/Locale",
    "intl-displaynames": _GLOBALS + "Intl/DisplayNames",
    "intl-segmenter": _GLOBALS + "Intl/Segmenter",
    "bigint": _GLOBALS + "BigInt",

    # Web APIs
    "fetch": "API/Fetch_API",
    "websockets": "API/WebSockets_API",
    "eventsource": "API/EventSource",
    "server-sent-events": "API/Server-sent_events",
    "xhr": "API/XMLHttpRequest",
    "abort-controller": "API/AbortController",
    "abort-signal": "API/AbortSignal",
    "intersection-observer": "API/Intersection_Observer_API",
    "resize-observer": "API/Resize_Observer_API",
    "mutation-observer": "API/MutationObserver",
    "performance-observer": "API/PerformanceObserver",
    "broadcast-channel": "API/Broadcast_Channel_API",
    "message-channel": "API/Channel_Messaging_API",
    "indexeddb": "API/IndexedDB_API",
    "localstorage": "API/Window/localStorage",
    "sessionstorage": "API/Window/sessionStorage",
    "web-workers": "API/Web_Workers_API",
    "shared-worker": "API/SharedWorker",
    "service-worker": "API/Service_Worker_API",
    "webgl": "API/WebGL_API",
    "webgl2": "API/WebGL2RenderingContext",
    "web-audio": "API/Web_Audio_API",
    "geolocation": "API/Geolocation_API",
    "device-orientation": "API/Device_orientation_events",
    "device-motion": "API/DeviceMotionEvent",
    "vibration": "API/Vibration_API",
    "battery-status": "API/Battery_Status_API",
    "network-information": "API/Network_Information_API",
    "permissions": "API/Permissions_API",
    "notifications": "API/Notifications_API",
    "push-notifications": "API/Push_API",
    "credential-management": "API/Credential_Management_API",
    "web-authn": "API/Web_Authentication_API",
    "file-api": "API/File_API",
    "filereader": "API/FileReader",
    "blob": "API/Blob",
    "formdata": "API/FormData",
    "url-api": "API/URL",
    "urlsearchparams": "API/URLSearchParams",
    "streams": "API/Streams_API",
    "readable-stream": "API/ReadableStream",
    "writable-stream": "API/WritableStream",
    "transform-stream": "API/TransformStream",
    "text-encoder": "API/TextEncoder",
    "text-decoder": "API/TextDecoder",
    "crypto-api": "API/Web_Crypto_API",
    "crypto-subtle": "API/SubtleCrypto",
    "page-visibility": "API/Page_Visibility_API",
    "fullscreen": "API/Fullscreen_API",
    "pointer-lock": "API/Pointer_Lock_API",
    "screen-orientation": "API/Screen_Orientation_API",
    "history-api": "API/History_API",
    "structured-clone": "API/structuredClone",
}

# Features with a dedicated Can I Use page under the same identifier.
CANIUSE_FEATURES = frozenset({
    "css-grid", "flexbox", "css-variables", "css-custom-properties",
    "css-backdrop-filter", "css-container-queries", "css-has",
    "css-nesting", "css-subgrid", "dialog", "web-components",
    "shadow-dom", "custom-elements", "fetch", "websockets",
    "service-worker", "web-workers", "indexeddb", "webgl",
    "web-audio", "geolocation", "notifications",
})

_ES_YEAR = re.compile(r"20(1[5-9]|2[0-4])")


class DocumentationResolver:
    """Derives a reference URL for a feature identifier.

    urls maps identifiers to absolute URLs; external_catalog lists
    identifiers that have a page at external_base + identifier.
    """

    def __init__(
        self,
        urls: Mapping[str, str],
        external_catalog: Iterable[str] = (),
        external_base: str = CANIUSE_BASE,
        reference_base: str = MDN_BASE,
    ):
        self._urls = dict(urls)
        self._external = frozenset(external_catalog)
        self._external_base = external_base
        self._reference_base = reference_base

    def resolve(self, feature: str) -> Optional[str]:
        url = self._urls.get(feature)
        if url:
            return url

        if feature in self._external:
            return f"{self._external_base}{feature}"

        if feature.startswith("css-"):
            prop = feature.removeprefix("css-").replace("-", "_")
            return f"{self._reference_base}CSS/{prop}"

        if feature.startswith("input-"):
            input_type = feature.removeprefix("input-")
            return f"{self._reference_base}HTML/Element/input/{input_type}"

        if feature.startswith("es") and _ES_YEAR.search(feature):
            return f"{self._reference_base}JavaScript/New_in_JavaScript"

        return None


DEFAULT_RESOLVER = DocumentationResolver(
    urls={feature: MDN_BASE + path for feature, path in MDN_PATHS.items()},
    external_catalog=CANIUSE_FEATURES,
)


def resolve_documentation(feature: str) -> Optional[str]:
    """Reference URL for feature, or None when nothing sensible can be built."""
    return DEFAULT_RESOLVER.resolve(feature)


def display_name(feature: str) -> str:
    """Turn a kebab-case identifier into Title Case words."""
    return " ".join(word[:1].upper() + word[1:] for word in feature.split("-"))
