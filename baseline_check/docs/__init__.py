"""Documentation links and display names for feature identifiers.

Public API:
    resolve_documentation(feature) -> str | None
    display_name(feature) -> str
"""

from baseline_check.docs.resolver import (
    CANIUSE_FEATURES,
    DEFAULT_RESOLVER,
    DocumentationResolver,
    display_name,
    resolve_documentation,
)

__all__ = [
    "CANIUSE_FEATURES",
    "DEFAULT_RESOLVER",
    "DocumentationResolver",
    "display_name",
    "resolve_documentation",
]
