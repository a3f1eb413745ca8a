"""Infrastructure services shared across csvlens-qt modules."""

from csvlens_qt.services.client import AnalysisClient
from csvlens_qt.services.threading import start_worker, WorkerHandle

__all__ = ["AnalysisClient", "start_worker", "WorkerHandle"]
