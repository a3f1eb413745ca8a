"""CSV Lens - Qt dashboard for summaries returned by a CSV analysis service."""

from .dashboard import DashboardPage

__version__ = "0.1.0"

__all__ = ["DashboardPage"]
