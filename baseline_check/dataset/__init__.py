"""Baseline support dataset provider.

Public API:
    load_baseline_data(path=None) -> Mapping[str, bool]
    default_baseline_data() -> Mapping[str, bool]
"""

from baseline_check.dataset.loader import (
    DatasetError,
    default_baseline_data,
    load_baseline_data,
    parse_baseline_data,
)

__all__ = ["DatasetError", "default_baseline_data", "load_baseline_data", "parse_baseline_data"]
