"""Signature registry: compiles the category tables into one flat catalog.

Build flow:
1. Walk the tables in scan order (CSS, HTML, JS, Form).
2. Validate and compile every row; any problem raises CatalogError.
3. Merge into a single identifier -> FeatureSignature mapping.

A row that redefines an identifier from an earlier table replaces that
registration's patterns and category but keeps its position. A repeat
inside the same table is rejected as ambiguous.
"""

import logging
import re
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType

from baseline_check.catalog.css import CSS_SIGNATURES
from baseline_check.catalog.forms import FORM_SIGNATURES
from baseline_check.catalog.html import HTML_SIGNATURES
from baseline_check.catalog.javascript import JS_SIGNATURES
from baseline_check.catalog.types import CatalogError, Category, FeatureSignature, SignatureRow

logger = logging.getLogger(__name__)

# Word and digit classes stay ASCII-only, like the browser regexes the
# signatures were written for.
PATTERN_FLAGS = re.IGNORECASE | re.ASCII

# Scan order. Also decides which registration wins for a redefined identifier.
SIGNATURE_TABLES: tuple[tuple[SignatureRow, ...], ...] = (
    CSS_SIGNATURES,
    HTML_SIGNATURES,
    JS_SIGNATURES,
    FORM_SIGNATURES,
)


def build_catalog(
    tables: Iterable[Sequence[SignatureRow]],
) -> Mapping[str, FeatureSignature]:
    """Compile signature tables into a read-only flat catalog."""
    catalog: dict[str, FeatureSignature] = {}

    for table in tables:
        seen_in_table: set[str] = set()
        for row in table:
            if row.feature in seen_in_table:
                raise CatalogError(row.feature, "registered twice in the same table")
            seen_in_table.add(row.feature)

            signature = compile_signature(row)
            if signature.feature in catalog:
                logger.debug(
                    "Signature '%s' redefined by %s table, replacing %s patterns",
                    signature.feature,
                    signature.category,
                    catalog[signature.feature].category,
                )
            catalog[signature.feature] = signature

    logger.debug("Built signature catalog with %d features", len(catalog))
    return MappingProxyType(catalog)


def compile_signature(row: SignatureRow) -> FeatureSignature:
    """Compile one row, rejecting anything that could not match sensibly."""
    if not row.feature or row.feature != row.feature.strip():
        raise CatalogError(row.feature, "identifier must be a non-empty, unpadded string")
    if not isinstance(row.category, Category):
        raise CatalogError(row.feature, f"unknown category {row.category!r}")
    if not row.patterns:
        raise CatalogError(row.feature, "at least one pattern is required")

    compiled: list[re.Pattern[str]] = []
    for raw in row.patterns:
        pattern = _compile(row.feature, raw)
        # A pattern that matches empty text would flag every input.
        if pattern.search("") is not None:
            raise CatalogError(row.feature, f"pattern {raw!r} matches the empty string")
        compiled.append(pattern)

    return FeatureSignature(
        feature=row.feature,
        category=row.category,
        patterns=tuple(compiled),
        follow=_compile(row.feature, row.follow) if row.follow is not None else None,
    )


def _compile(feature: str, raw: str) -> re.Pattern[str]:
    try:
        return re.compile(raw, PATTERN_FLAGS)
    except re.error as exc:
        raise CatalogError(feature, f"pattern {raw!r} does not compile: {exc}") from exc


CATALOG: Mapping[str, FeatureSignature] = build_catalog(SIGNATURE_TABLES)


def features_in(category: Category, catalog: Mapping[str, FeatureSignature] = CATALOG) -> list[str]:
    """Identifiers whose winning registration belongs to category, in scan order."""
    return [name for name, sig in catalog.items() if sig.category == category]
