"""Types for the signature catalog.

A FeatureSignature ties one feature identifier to the compiled text
patterns that reveal its use. Signatures are built once at import time
and never change afterwards.
"""

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import NamedTuple, Optional


class Category(StrEnum):
    """Which part of the web platform a signature belongs to."""

    CSS = "css"
    HTML = "html"
    JS_SYNTAX = "js-syntax"
    JS_API = "js-api"
    FORM = "form"


class SignatureRow(NamedTuple):
    """One declarative catalog entry, before compilation.

    patterns are raw regular expressions; they are compiled
    case-insensitively with ASCII classes by the registry.

    follow, when set, must match right where a pattern's first hit
    ends for that hit to count.
    """

    feature: str
    category: Category
    patterns: tuple[str, ...]
    follow: Optional[str] = None


@dataclass(frozen=True)
class FeatureSignature:
    """A compiled detection rule set for one feature.

    A feature is present when ANY of its patterns is found anywhere
    in the text. Only presence matters, never the number of hits.
    """

    feature: str
    category: Category
    patterns: tuple[re.Pattern[str], ...]
    follow: Optional[re.Pattern[str]] = None

    def matches(self, text: str) -> bool:
        for pattern in self.patterns:
            hit = pattern.search(text)
            if hit is None:
                continue
            if self.follow is None or self.follow.match(text, hit.end()):
                return True
        return False


class CatalogError(Exception):
    """Raised when a signature table cannot be turned into a catalog.

    Always raised while the catalog is built, never during a scan.
    """

    def __init__(self, feature: str, message: str):
        self.feature = feature
        super().__init__(f"Invalid signature '{feature}': {message}")
