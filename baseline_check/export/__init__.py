"""Report exporters for analysis results.

Public API:
    export_json(result) -> str
    load_json_export(text) -> AnalysisResult
    export_markdown(result) -> str
"""

from baseline_check.export.json_export import export_json, load_json_export, report_filename
from baseline_check.export.markdown import export_markdown
from baseline_check.export.schemas import AnalysisPayload, ExportDocument

__all__ = [
    "export_json",
    "load_json_export",
    "report_filename",
    "export_markdown",
    "AnalysisPayload",
    "ExportDocument",
]
