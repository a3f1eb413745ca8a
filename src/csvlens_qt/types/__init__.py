"""Type definitions for csvlens-qt."""

from .analysis import (
    AnalysisResult,
    Correlation,
    DatasetShape,
    MissingSummary,
    Preview,
    SummaryStats,
)
from .state import (
    AnalysisInProgressError,
    AnalysisOutcome,
    AnalysisStateError,
    Failed,
    Idle,
    Loading,
    NoFileSelectedError,
    RequestState,
    Succeeded,
    ViewState,
)

__all__ = [
    "AnalysisResult",
    "Correlation",
    "DatasetShape",
    "MissingSummary",
    "Preview",
    "SummaryStats",
    "AnalysisInProgressError",
    "AnalysisOutcome",
    "AnalysisStateError",
    "Failed",
    "Idle",
    "Loading",
    "NoFileSelectedError",
    "RequestState",
    "Succeeded",
    "ViewState",
]
