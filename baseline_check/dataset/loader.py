"""Baseline dataset loading.

The dataset maps feature identifiers to a support flag:
  true  -> Baseline (works across all major browsers)
  false -> needs a fallback
  absent or null -> unknown

A copy ships with the package; deployments can point to their own file
through BASELINE_CHECK_DATASET_PATH. Either way the data is validated
once and handed out as a read-only mapping.
"""

import json
import logging
from collections.abc import Mapping
from functools import lru_cache
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Optional

from pydantic import StrictBool, TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

BUNDLED_DATASET = "baseline.json"

_DATASET_ADAPTER = TypeAdapter(dict[str, Optional[StrictBool]])


class DatasetError(Exception):
    """Raised when a Baseline dataset cannot be read or is malformed."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"Invalid Baseline dataset {source}: {message}")


def load_baseline_data(path: Optional[Path] = None) -> Mapping[str, bool]:
    """Load and validate a dataset file, or the bundled one when path is None.

    Null values are dropped so they read as unknown, the same as a
    missing key.
    """
    if path is None:
        source = f"<bundled {BUNDLED_DATASET}>"
        raw = resources.files("baseline_check.dataset").joinpath("data", BUNDLED_DATASET).read_text(
            encoding="utf-8"
        )
    else:
        source = str(path)
        try:
            raw = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise DatasetError(source, f"cannot be read ({exc})") from exc

    return parse_baseline_data(raw, source=source)


def parse_baseline_data(raw: str, source: str = "<string>") -> Mapping[str, bool]:
    """Validate dataset JSON text into a read-only identifier -> flag mapping."""
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise DatasetError(source, f"not valid JSON ({exc})") from exc

    if not isinstance(payload, dict):
        raise DatasetError(source, "top level must be a JSON object")

    try:
        validated = _DATASET_ADAPTER.validate_python(payload)
    except ValidationError as exc:
        raise DatasetError(source, f"values must be true, false or null ({exc.error_count()} errors)") from exc

    data = {feature: flag for feature, flag in validated.items() if flag is not None}
    logger.debug(
        "Loaded Baseline dataset %s: %d entries (%d null entries dropped)",
        source, len(data), len(validated) - len(data),
    )
    return MappingProxyType(data)


@lru_cache(maxsize=1)
def default_baseline_data() -> Mapping[str, bool]:
    """The bundled dataset, loaded once per process."""
    return load_baseline_data()
