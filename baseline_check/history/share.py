"""Shareable URL fragments carrying a code snippet.

Format: code=<base64 of the percent-encoded snippet>. Percent-encoding
first keeps the base64 input ASCII for any Unicode text.
"""

import base64
import logging
from urllib.parse import quote, unquote

logger = logging.getLogger(__name__)

FRAGMENT_KEY = "code"

# Characters encodeURIComponent leaves alone, so links interoperate with browsers.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_share_fragment(code: str) -> str:
    encoded = quote(code, safe=_URI_COMPONENT_SAFE)
    return f"{FRAGMENT_KEY}={base64.b64encode(encoded.encode('ascii')).decode('ascii')}"


def decode_share_fragment(fragment: str) -> str:
    """Recover the snippet from a fragment, or "" when none can be decoded."""
    for part in fragment.lstrip("#").split("&"):
        key, sep, value = part.partition("=")
        if key != FRAGMENT_KEY or not sep:
            continue
        try:
            return unquote(base64.b64decode(value, validate=True).decode("ascii"), errors="strict")
        # Covers binascii.Error, UnicodeDecodeError and non-ASCII input.
        except ValueError as exc:
            logger.warning("Failed to decode shared snippet: %s", exc)
            return ""
    return ""
