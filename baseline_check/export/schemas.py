"""Pydantic schemas for serialized analysis results.

Used for the JSON report and for persisted history/bookmark entries.
Validation rebuilds the AnalysisResult, so a document whose summary
disagrees with its feature list is rejected.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from baseline_check.detector.types import AnalysisResult, DetectedFeature, Language, Status, Summary


class FeaturePayload(BaseModel):
    """One detected feature as written to JSON."""

    feature: str = Field(min_length=1)
    status: Status
    found: bool = True


class SummaryPayload(BaseModel):
    """Status counts. needsFallback keeps the camelCase key on the wire."""

    model_config = ConfigDict(populate_by_name=True)

    total: int = Field(ge=0)
    baseline: int = Field(ge=0)
    needs_fallback: int = Field(ge=0, alias="needsFallback")
    unknown: int = Field(ge=0)


class AnalysisPayload(BaseModel):
    """Serialized AnalysisResult."""

    language: Language
    summary: SummaryPayload
    features: list[FeaturePayload]

    @model_validator(mode="after")
    def check_consistency(self) -> "AnalysisPayload":
        # Raises ValueError on found=False, duplicates or mismatched counts.
        self.to_result()
        return self

    @classmethod
    def from_result(cls, result: AnalysisResult) -> "AnalysisPayload":
        return cls.model_validate(result.to_dict())

    def to_result(self) -> AnalysisResult:
        return AnalysisResult(
            language=self.language,
            features=tuple(
                DetectedFeature(feature=f.feature, status=f.status, found=f.found)
                for f in self.features
            ),
            summary=Summary(
                total=self.summary.total,
                baseline=self.summary.baseline,
                needs_fallback=self.summary.needs_fallback,
                unknown=self.summary.unknown,
            ),
        )


class ExportDocument(AnalysisPayload):
    """The JSON report: a serialized result plus the moment it was exported."""

    timestamp: datetime
