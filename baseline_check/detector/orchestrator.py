"""Detector orchestrator, the single analysis entry point.

Analysis flow:
1. Scan the text with the signature catalog (engine.detect_features).
2. Infer the snippet language from the detected identifiers.
3. Summarize counts per status from the same feature list.
4. Return an AnalysisResult, validated at construction.
"""

import logging
from collections.abc import Mapping
from typing import Optional

from baseline_check.catalog import CATALOG, FeatureSignature
from baseline_check.detector.engine import detect_features, summarize
from baseline_check.detector.language import infer_language
from baseline_check.detector.types import AnalysisResult

logger = logging.getLogger(__name__)


def detect(
    text: str,
    baseline_data: Mapping[str, Optional[bool]],
    catalog: Mapping[str, FeatureSignature] = CATALOG,
) -> AnalysisResult:
    """Analyze one snippet against the Baseline dataset.

    Any string is valid input; text without recognizable features gives
    an empty result with language Mixed.
    """
    features = detect_features(text, baseline_data, catalog)
    result = AnalysisResult(
        language=infer_language(features),
        features=tuple(features),
        summary=summarize(features),
    )

    logger.debug(
        "Analysis complete: language=%s total=%d baseline=%d needs_fallback=%d unknown=%d",
        result.language,
        result.summary.total,
        result.summary.baseline,
        result.summary.needs_fallback,
        result.summary.unknown,
    )
    return result
