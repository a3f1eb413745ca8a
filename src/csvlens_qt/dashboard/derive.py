"""Pure presentation helpers turning an analysis result into display values."""

import math
from typing import Any

from csvlens_qt.types.analysis import AnalysisResult, Preview, SummaryStats

MISSING_CHART_LIMIT = 12

STAT_FIELDS = ("count", "mean", "std", "min", "p25", "median", "p75", "max")


def missing_chart(
    result: AnalysisResult | None, limit: int = MISSING_CHART_LIMIT
) -> list[tuple[str, int]]:
    """Columns with the most missing values, largest first.

    Equal counts are ordered by column name so the ranking does not depend on
    the order in which the service serialized the mapping.
    """
    if result is None:
        return []
    ranked = sorted(
        result.missing.by_column.items(), key=lambda item: (-item[1], item[0])
    )
    return ranked[:limit]


def _non_finite_text(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return "Infinity" if value > 0 else "-Infinity"


def format_stat(value: float | int | None) -> str:
    """Fixed four-decimal rendering; non-finite values keep their JSON literal."""
    if value is None:
        return "null"
    if not math.isfinite(value):
        return _non_finite_text(value)
    return f"{value:.4f}"


def stat_rows(stats: SummaryStats) -> list[tuple[str, str]]:
    """The eight statistics of a column as (name, text) pairs."""
    return [(name, format_stat(getattr(stats, name))) for name in STAT_FIELDS]


def cell_text(value: Any) -> str:
    """Text shown for a single preview cell."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and not math.isfinite(value):
        return _non_finite_text(value)
    return str(value)


def preview_matrix(preview: Preview) -> list[list[str]]:
    """Preview rows as text, aligned to ``preview.columns``."""
    return [
        [cell_text(row.get(column)) for column in preview.columns]
        for row in preview.rows
    ]


def dataset_summary(result: AnalysisResult) -> list[tuple[str, str]]:
    return [
        ("File", result.file_name),
        ("Rows", str(result.shape.rows)),
        ("Cols", str(result.shape.cols)),
        ("Missing", str(result.missing.total)),
        ("Numeric cols", str(len(result.numeric_columns))),
    ]
