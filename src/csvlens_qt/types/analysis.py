"""Response models for the external CSV analysis service."""

# =============================================================================
# IMPORTS
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# =============================================================================
# RESPONSE MODELS
# =============================================================================


class _ResponseModel(BaseModel):
    """Immutable snapshot of a JSON object returned by the analysis service."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class DatasetShape(_ResponseModel):
    """Dataset dimensions."""

    rows: int
    cols: int


class MissingSummary(_ResponseModel):
    """Missing-value totals, overall and per column."""

    total: int
    by_column: dict[str, int] = Field(default_factory=dict, alias="byColumn")


class SummaryStats(_ResponseModel):
    """Descriptive statistics of a single numeric column."""

    count: int
    mean: float | None
    std: float | None
    min: float | None
    p25: float | None
    median: float | None
    p75: float | None
    max: float | None


class Correlation(_ResponseModel):
    """Pairwise correlation matrix over a subset of numeric columns."""

    columns: list[str]
    matrix: list[list[float]]

    @model_validator(mode="after")
    def _check_square(self) -> "Correlation":
        size = len(self.columns)
        if len(self.matrix) != size or any(len(row) != size for row in self.matrix):
            raise ValueError(
                f"correlation matrix must be {size}x{size} to match its columns"
            )
        return self


class Preview(_ResponseModel):
    """A bounded sample of rows together with the full column list."""

    columns: list[str]
    rows: list[dict[str, Any]] = Field(default_factory=list)


class AnalysisResult(_ResponseModel):
    """Summary of an uploaded CSV as computed by the analysis service."""

    file_name: str = Field(alias="fileName")
    shape: DatasetShape
    dtypes: dict[str, str] = Field(default_factory=dict)
    missing: MissingSummary
    numeric_columns: list[str] = Field(default_factory=list, alias="numericColumns")
    summary_stats: dict[str, SummaryStats] = Field(
        default_factory=dict, alias="summaryStats"
    )
    correlation: Correlation | None = None
    preview: Preview

    @model_validator(mode="after")
    def _check_numeric_stats(self) -> "AnalysisResult":
        missing_stats = [
            name for name in self.numeric_columns if name not in self.summary_stats
        ]
        if missing_stats:
            raise ValueError(
                "summaryStats has no entry for numeric column(s): "
                + ", ".join(missing_stats)
            )
        return self

    @property
    def first_numeric_column(self) -> str | None:
        """Name of the first numeric column, if any."""
        return self.numeric_columns[0] if self.numeric_columns else None
