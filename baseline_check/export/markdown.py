"""Markdown report export."""

from datetime import datetime, timezone
from typing import Optional

from baseline_check.detector.types import AnalysisResult, Status

STATUS_ICONS: dict[Status, str] = {
    Status.BASELINE: "✅",
    Status.NEEDS_FALLBACK: "⚠️",
    Status.UNKNOWN: "❓",
}

STATUS_LABELS: dict[Status, str] = {
    Status.BASELINE: "Baseline",
    Status.NEEDS_FALLBACK: "Needs Fallback",
    Status.UNKNOWN: "Unknown",
}

# Section order in the detailed results.
STATUS_ORDER = (Status.BASELINE, Status.NEEDS_FALLBACK, Status.UNKNOWN)

NO_FEATURES_LINE = "No features detected in the provided code."


def export_markdown(result: AnalysisResult, generated_at: Optional[datetime] = None) -> str:
    """Render result as a human-readable Markdown report.

    Empty status groups are left out. A result without features gets a
    single explanatory line instead of the summary and sections.
    """
    moment = generated_at or datetime.now(timezone.utc)
    lines = [
        "# Baseline Report",
        "",
        f"*Generated on {moment.strftime('%Y-%m-%d %H:%M:%S %Z').strip()}*",
        "",
        f"**Language:** {result.language}",
        "",
    ]

    if not result.features:
        lines.append(NO_FEATURES_LINE)
        return "\n".join(lines) + "\n"

    summary = result.summary
    counts = {
        Status.BASELINE: summary.baseline,
        Status.NEEDS_FALLBACK: summary.needs_fallback,
        Status.UNKNOWN: summary.unknown,
    }

    lines += ["## Summary", "", f"- **Total Features Detected:** {summary.total}"]
    for status in STATUS_ORDER:
        lines.append(f"- **{STATUS_ICONS[status]} {STATUS_LABELS[status]}:** {counts[status]}")
    lines += ["", "## Detailed Results", ""]

    for status in STATUS_ORDER:
        group = [f.feature for f in result.features if f.status == status]
        if not group:
            continue
        lines.append(f"### {STATUS_ICONS[status]} {STATUS_LABELS[status]} ({len(group)})")
        lines.append("")
        lines += [f"- **{feature}**" for feature in group]
        lines.append("")

    lines += ["---", "", "*Report generated by Baseline Check*"]
    return "\n".join(lines) + "\n"
