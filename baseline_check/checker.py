"""Checker facade: wires settings, dataset, detector, exporters and storage.

Create one per process with create_checker(). The detector itself stays
stateless; everything stateful (history, bookmarks, the saved draft)
lives behind the store chosen here.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Literal, Optional

from baseline_check.core.config import Settings, get_settings
from baseline_check.core.logging import configure_structlog
from baseline_check.dataset import load_baseline_data
from baseline_check.detector import AnalysisResult, detect
from baseline_check.docs import resolve_documentation
from baseline_check.export import export_json, export_markdown
from baseline_check.history import (
    DRAFT_KEY,
    BookmarkService,
    HistoryService,
    InMemoryStore,
    JsonFileStore,
    KeyValueStore,
    StorageError,
)
from baseline_check.results import Page, Recommendation, paginate, recommendations

logger = logging.getLogger(__name__)

ExportFormat = Literal["json", "markdown"]


class InputReadError(Exception):
    """Raised when an input file cannot be read as UTF-8 text."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Could not read {path}: {reason}")


class BaselineChecker:
    def __init__(
        self,
        settings: Settings,
        baseline_data: Mapping[str, bool],
        store: KeyValueStore,
    ):
        self.settings = settings
        self.baseline_data = baseline_data
        self.store = store
        self.history = HistoryService(store, limit=settings.history_limit)
        self.bookmarks = BookmarkService(store)

    def analyze(self, code: str, record: bool = True) -> AnalysisResult:
        """Analyze a snippet. Non-blank snippets are added to history when record is set."""
        result = detect(code, self.baseline_data)
        if record and code.strip():
            self.history.add(code, result)
        logger.info(
            "Analyzed %d characters: %s, %d features",
            len(code), result.language, result.summary.total,
        )
        return result

    def analyze_file(self, path: Path, record: bool = True) -> AnalysisResult:
        path = Path(path)
        try:
            code = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise InputReadError(path, str(exc)) from exc
        return self.analyze(code, record=record)

    def export(self, result: AnalysisResult, fmt: ExportFormat = "json") -> str:
        if fmt == "json":
            return export_json(result)
        if fmt == "markdown":
            return export_markdown(result)
        raise ValueError(f"Unsupported export format: {fmt!r}")

    def page(self, result: AnalysisResult, page: int = 1) -> Page:
        return paginate(result.features, page=page, page_size=self.settings.page_size)

    def recommendations(self, result: AnalysisResult) -> list[Recommendation]:
        return recommendations(result, limit=self.settings.recommendation_limit)

    def documentation(self, feature: str) -> Optional[str]:
        return resolve_documentation(feature)

    def save_draft(self, code: str) -> None:
        try:
            self.store.set(DRAFT_KEY, code)
        except StorageError as exc:
            logger.warning("Failed to save draft: %s", exc)

    def load_draft(self) -> str:
        try:
            return self.store.get(DRAFT_KEY) or ""
        except StorageError as exc:
            logger.warning("Failed to load draft: %s", exc)
            return ""


def create_checker(settings: Optional[Settings] = None) -> BaselineChecker:
    """Build a checker: configure logging, load the dataset once, pick a store.

    Raises:
        DatasetError: If the configured dataset cannot be loaded.
    """
    settings = settings or get_settings()
    configure_structlog(debug=settings.debug)

    baseline_data = load_baseline_data(settings.dataset_path)

    store: KeyValueStore
    if settings.storage_path is not None:
        store = JsonFileStore(settings.storage_path)
    else:
        store = InMemoryStore()

    logger.info(
        "Checker ready: %d dataset entries, storage=%s",
        len(baseline_data), settings.storage_path or "memory",
    )
    return BaselineChecker(settings, baseline_data, store)
