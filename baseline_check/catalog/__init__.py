"""Signature catalog of detectable web-platform features.

Public API:
    CATALOG -> read-only mapping of identifier to FeatureSignature
    build_catalog(tables) -> Mapping[str, FeatureSignature]
"""

from baseline_check.catalog.registry import CATALOG, build_catalog, features_in
from baseline_check.catalog.types import CatalogError, Category, FeatureSignature, SignatureRow

__all__ = [
    "CATALOG",
    "build_catalog",
    "features_in",
    "CatalogError",
    "Category",
    "FeatureSignature",
    "SignatureRow",
]
