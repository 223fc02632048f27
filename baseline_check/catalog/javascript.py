"""JavaScript syntax and Web API signatures.

Syntax and API rows share one table so that registration order stays
stable; each row carries its own category.
"""

from baseline_check.catalog.types import Category, SignatureRow

_S = Category.JS_SYNTAX
_A = Category.JS_API

JS_SIGNATURES: tuple[SignatureRow, ...] = (
    # Network
    SignatureRow("fetch", _A, (r"fetch\s*\(", r"new\s+Request", r"new\s+Response")),
    SignatureRow("websockets", _A, (r"new\s+WebSocket", r"WebSocket\s*\(")),
    SignatureRow("eventsource", _A, (r"new\s+EventSource", r"EventSource\s*\(")),
    SignatureRow("server-sent-events", _A, (r"new\s+EventSource",)),
    SignatureRow("xhr", _A, (r"new\s+XMLHttpRequest", r"XMLHttpRequest\s*\(")),

    # Syntax
    SignatureRow("es-modules", _S, (r"import\s+", r"export\s+", r"""from\s+['"]""")),
    SignatureRow("dynamic-import", _S, (r"import\s*\(",)),
    SignatureRow("import-meta", _S, (r"import\.meta",)),
    SignatureRow("top-level-await", _S, (r"await\s+(?!.*function)",)),
    SignatureRow("async-await", _S, (r"async\s+function", r"async\s*\(", r"await\s+")),
    SignatureRow("arrow-functions", _S, (r"=>\s*\{", r"=>\s*[^{]")),
    SignatureRow("template-literals", _S, (r"`[^`]*\$\{[^}]*\}[^`]*`", r"`[^`]*`")),
    SignatureRow("destructuring", _S, (r"\{\s*[\w,\s]+\}\s*=", r"\[\s*[\w,\s]+\]\s*=")),
    SignatureRow("spread-operator", _S, (r"\.\.\.",)),
    SignatureRow("rest-parameters", _S, (r"\.\.\.\w+\s*[,)]",)),
    # Same matches as \w+\s*=\s*[^,)]+\s*[,)] in a single pass: the first
    # assignment is located, then the closing , or ) is looked for after it.
    SignatureRow("default-parameters", _S, (r"\b\w++\s*+=[^,)]",), follow=r"[^,)]*+[,)]"),
    SignatureRow("const-let", _S, (r"\bconst\s+", r"\blet\s+")),
    SignatureRow("classes", _S, (r"\bclass\s+\w+", r"extends\s+\w+")),
    SignatureRow("for-of", _S, (r"for\s*\(\s*[\w\s]+\s+of\s+",)),

    # Objects and collections
    SignatureRow("map-set", _A, (r"new\s+Map", r"new\s+Set", r"Map\s*\(", r"Set\s*\(")),
    SignatureRow("weak-map-set", _A, (r"new\s+WeakMap", r"new\s+WeakSet")),
    SignatureRow("symbols", _A, (r"Symbol\s*\(", r"Symbol\.")),
    SignatureRow("proxy", _A, (r"new\s+Proxy", r"Proxy\s*\(")),
    SignatureRow("reflect", _A, (r"Reflect\.",)),
    SignatureRow("object-assign", _A, (r"Object\.assign",)),
    SignatureRow("object-entries", _A, (r"Object\.entries",)),
    SignatureRow("object-values", _A, (r"Object\.values",)),
    SignatureRow("object-keys", _A, (r"Object\.keys",)),
    SignatureRow("object-hasown", _A, (r"Object\.hasOwn",)),

    # Arrays and iteration
    SignatureRow("array-methods", _A, (
        r"\.map\s*\(", r"\.filter\s*\(", r"\.reduce\s*\(", r"\.find\s*\(", r"\.forEach\s*\(",
    )),
    SignatureRow("array-flat", _A, (r"\.flat\s*\(", r"\.flatMap\s*\(")),
    SignatureRow("array-at", _A, (r"\.at\s*\(",)),
    SignatureRow("generators", _S, (r"function\s*\*", r"yield\s+")),
    SignatureRow("iterators", _A, (r"Symbol\.iterator", r"\[Symbol\.iterator\]")),

    # Promises and cancellation
    SignatureRow("promise", _A, (
        r"new\s+Promise", r"Promise\.", r"\.then\s*\(", r"\.catch\s*\(", r"\.finally\s*\(",
    )),
    SignatureRow("promise-allsettled", _A, (r"Promise\.allSettled",)),
    SignatureRow("promise-any", _A, (r"Promise\.any",)),
    SignatureRow("abort-controller", _A, (r"new\s+AbortController", r"AbortController\s*\(")),
    SignatureRow("abort-signal", _A, (r"AbortSignal", r"signal\s*:")),

    # Observers and messaging
    SignatureRow("intersection-observer", _A, (
        r"new\s+IntersectionObserver", r"IntersectionObserver\s*\(",
    )),
    SignatureRow("resize-observer", _A, (r"new\s+ResizeObserver", r"ResizeObserver\s*\(")),
    SignatureRow("mutation-observer", _A, (r"new\s+MutationObserver", r"MutationObserver\s*\(")),
    SignatureRow("performance-observer", _A, (
        r"new\s+PerformanceObserver", r"PerformanceObserver\s*\(",
    )),
    SignatureRow("broadcast-channel", _A, (r"new\s+BroadcastChannel", r"BroadcastChannel\s*\(")),
    SignatureRow("message-channel", _A, (r"new\s+MessageChannel", r"MessageChannel\s*\(")),

    # Storage
    SignatureRow("indexeddb", _A, (r"indexedDB", r"IDBDatabase", r"IDBTransaction")),
    SignatureRow("localstorage", _A, (r"localStorage",)),
    SignatureRow("sessionstorage", _A, (r"sessionStorage",)),

    # Workers
    SignatureRow("web-workers", _A, (r"new\s+Worker", r"Worker\s*\(")),
    SignatureRow("shared-worker", _A, (r"new\s+SharedWorker", r"SharedWorker\s*\(")),
    SignatureRow("service-worker", _A, (r"navigator\.serviceWorker", r"ServiceWorker")),

    # Graphics and media
    SignatureRow("canvas", _A, (r"""getContext\s*\(\s*['"](?:2d|webgl|webgl2)['"]""",)),
    SignatureRow("webgl", _A, (r"""getContext\s*\(\s*['"](?:webgl|experimental-webgl)['"]""",)),
    SignatureRow("webgl2", _A, (r"""getContext\s*\(\s*['"]webgl2['"]""",)),
    SignatureRow("web-audio", _A, (
        r"new\s+AudioContext", r"AudioContext\s*\(", r"webkitAudioContext",
    )),

    # Device
    SignatureRow("geolocation", _A, (r"navigator\.geolocation", r"getCurrentPosition")),
    SignatureRow("device-orientation", _A, (r"DeviceOrientationEvent", r"deviceorientation")),
    SignatureRow("device-motion", _A, (r"DeviceMotionEvent", r"devicemotion")),
    SignatureRow("vibration", _A, (r"navigator\.vibrate",)),
    SignatureRow("battery-status", _A, (r"navigator\.getBattery", r"BatteryManager")),
    SignatureRow("network-information", _A, (r"navigator\.connection", r"NetworkInformation")),

    # Permissions and security
    SignatureRow("permissions", _A, (r"navigator\.permissions", r"Permissions")),
    SignatureRow("notifications", _A, (r"new\s+Notification", r"Notification\.")),
    SignatureRow("push-notifications", _A, (r"PushManager", r"PushSubscription")),
    SignatureRow("credential-management", _A, (
        r"navigator\.credentials", r"CredentialsContainer",
    )),
    SignatureRow("web-authn", _A, (r"navigator\.credentials\.create", r"PublicKeyCredential")),

    # Files and data
    SignatureRow("file-api", _A, (r"new\s+File", r"File\s*\(", r"FileList")),
    SignatureRow("filereader", _A, (r"new\s+FileReader", r"FileReader\s*\(")),
    SignatureRow("blob", _A, (r"new\s+Blob", r"Blob\s*\(")),
    SignatureRow("formdata", _A, (r"new\s+FormData", r"FormData\s*\(")),
    SignatureRow("url-api", _A, (r"new\s+URL", r"URL\s*\(")),
    SignatureRow("urlsearchparams", _A, (r"new\s+URLSearchParams", r"URLSearchParams\s*\(")),

    # Streams
    SignatureRow("streams", _A, (r"ReadableStream", r"WritableStream", r"TransformStream")),
    SignatureRow("readable-stream", _A, (r"new\s+ReadableStream", r"ReadableStream\s*\(")),
    SignatureRow("writable-stream", _A, (r"new\s+WritableStream", r"WritableStream\s*\(")),
    SignatureRow("transform-stream", _A, (r"new\s+TransformStream", r"TransformStream\s*\(")),

    # Encoding and crypto
    SignatureRow("text-encoder", _A, (r"new\s+TextEncoder", r"TextEncoder\s*\(")),
    SignatureRow("text-decoder", _A, (r"new\s+TextDecoder", r"TextDecoder\s*\(")),
    SignatureRow("crypto-api", _A, (r"crypto\.", r"window\.crypto")),
    SignatureRow("crypto-subtle", _A, (r"crypto\.subtle", r"SubtleCrypto")),

    # Internationalization
    SignatureRow("intl", _A, (r"Intl\.",)),
    SignatureRow("intl-collator", _A, (r"Intl\.Collator",)),
    SignatureRow("intl-datetimeformat", _A, (r"Intl\.DateTimeFormat",)),
    SignatureRow("intl-numberformat", _A, (r"Intl\.NumberFormat",)),
    SignatureRow("intl-pluralrules", _A, (r"Intl\.PluralRules",)),
    SignatureRow("intl-relativetimeformat", _A, (r"Intl\.RelativeTimeFormat",)),
    SignatureRow("intl-listformat", _A, (r"Intl\.ListFormat",)),
    SignatureRow("intl-locale", _A, (r"Intl\.Locale",)),
    SignatureRow("intl-displaynames", _A, (r"Intl\.DisplayNames",)),
    SignatureRow("intl-segmenter", _A, (r"Intl\.Segmenter",)),

    # Memory management
    SignatureRow("weak-refs", _A, (r"new\s+WeakRef", r"WeakRef\s*\(")),
    SignatureRow("finalization-registry", _A, (
        r"new\s+FinalizationRegistry", r"FinalizationRegistry\s*\(",
    )),

    # Recent syntax
    SignatureRow("bigint", _S, (r"(?<!\d)\d++n\b", r"BigInt\s*\(")),
    SignatureRow("nullish-coalescing", _S, (r"\?\?",)),
    SignatureRow("optional-chaining", _S, (r"\?\.",)),
    SignatureRow("logical-assignment", _S, (r"\|\|=", r"&&=", r"\?\?=")),
    SignatureRow("numeric-separators", _S, (r"(?<!\d)\d++_\d+",)),
    SignatureRow("private-fields", _S, (r"#\w+",)),
    SignatureRow("private-methods", _S, (r"#\w+\s*\(",)),
    SignatureRow("static-blocks", _S, (r"static\s*\{",)),
    SignatureRow("class-static-initialization-blocks", _S, (r"static\s*\{",)),

    # Module loading
    SignatureRow("import-maps", _A, (r"importmap", r'"imports"\s*:')),
    SignatureRow("import-assertions", _S, (r"import\s+.*assert\s*\{",)),
    SignatureRow("import-attributes", _S, (r"import\s+.*with\s*\{",)),
    SignatureRow("json-modules", _S, (r"import\s+.*\.json",)),

    # Page and navigation APIs
    SignatureRow("page-visibility", _A, (r"document\.visibilityState", r"visibilitychange")),
    SignatureRow("fullscreen", _A, (
        r"requestFullscreen", r"exitFullscreen", r"fullscreenElement",
    )),
    SignatureRow("pointer-lock", _A, (r"requestPointerLock", r"exitPointerLock")),
    SignatureRow("screen-orientation", _A, (r"screen\.orientation", r"orientationchange")),
    SignatureRow("history-api", _A, (
        r"history\.pushState", r"history\.replaceState", r"popstate",
    )),
    SignatureRow("structured-clone", _A, (r"structuredClone\s*\(",)),
)
