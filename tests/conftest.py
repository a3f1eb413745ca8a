"""Shared fixtures for csvlens-qt tests."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication


@pytest.fixture
def app():
    """Create QApplication instance for testing."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture
def sales_payload():
    """Response body of a successful analysis of ``sales.csv``."""
    return {
        "fileName": "sales.csv",
        "shape": {"rows": 100, "cols": 5},
        "dtypes": {"age": "float64", "region": "object"},
        "missing": {"total": 3, "byColumn": {"age": 3}},
        "numericColumns": ["age"],
        "summaryStats": {
            "age": {
                "count": 97,
                "mean": 41.2,
                "std": 5.1,
                "min": 18,
                "p25": 35,
                "median": 41,
                "p75": 47,
                "max": 70,
            }
        },
        "correlation": None,
        "preview": {"columns": ["age"], "rows": [{"age": 41}]},
    }


@pytest.fixture
def sales_result(sales_payload):
    from csvlens_qt.types.analysis import AnalysisResult

    return AnalysisResult.model_validate(sales_payload)
