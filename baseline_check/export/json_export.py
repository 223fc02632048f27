"""JSON report export and import.

The exported document carries a fresh timestamp plus the language,
summary and feature list of the result. Loading it back yields an equal
AnalysisResult; only the timestamp is dropped.
"""

import json
import logging
from datetime import date, datetime, timezone
from typing import Optional

from baseline_check.detector.types import AnalysisResult
from baseline_check.export.schemas import AnalysisPayload, ExportDocument

logger = logging.getLogger(__name__)


def iso_timestamp(moment: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a Z suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def export_json(result: AnalysisResult, exported_at: Optional[datetime] = None) -> str:
    """Serialize result as an indented JSON document."""
    moment = exported_at or datetime.now(timezone.utc)
    payload = AnalysisPayload.from_result(result).model_dump(mode="json", by_alias=True)

    document = {
        "timestamp": iso_timestamp(moment),
        "language": payload["language"],
        "summary": payload["summary"],
        "features": payload["features"],
    }
    return json.dumps(document, indent=2, ensure_ascii=False)


def load_json_export(text: str) -> AnalysisResult:
    """Parse an exported document back into an AnalysisResult.

    Raises:
        pydantic.ValidationError: If the document is malformed or its
            summary disagrees with its features.
    """
    document = ExportDocument.model_validate_json(text)
    logger.debug("Loaded JSON export from %s", document.timestamp.isoformat())
    return document.to_result()


def report_filename(extension: str, day: Optional[date] = None) -> str:
    """Download name for a report, e.g. baseline-report-2025-01-31.json."""
    day = day or datetime.now(timezone.utc).date()
    return f"baseline-report-{day.isoformat()}.{extension.lstrip('.')}"
