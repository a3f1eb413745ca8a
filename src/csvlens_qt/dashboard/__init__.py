"""Upload-and-render dashboard page and its result cards."""

from csvlens_qt.dashboard.page import AnalysisWorker, DashboardPage

__all__ = ["AnalysisWorker", "DashboardPage"]
