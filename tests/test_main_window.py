"""Tests for the main window wiring."""

from unittest.mock import patch

import pytest

from csvlens_qt.main_window import MainWindow


@pytest.fixture
def window(app):
    return MainWindow("http://api.example.com")


def test_window_setup(window):
    assert window.windowTitle() == "CSV Lens"
    assert window.status_bar.message_text() == "Ready"


def test_status_follows_analysis(window):
    window.dashboard.analysis_started.emit("sales.csv")
    assert window.status_bar.message_text() == "Analyzing sales.csv…"

    window.dashboard.analysis_finished.emit(True, "sales.csv")
    assert window.status_bar.message_text() == "Analysis complete: sales.csv"

    window.dashboard.analysis_finished.emit(False, "Request failed")
    assert window.status_bar.message_text() == "Analysis failed: Request failed"

    window.status_manager.clear_status()
    assert window.status_bar.message_text() == "Ready"


def test_close_shuts_down_dashboard(window):
    window.show()
    with patch.object(window.dashboard, "shutdown") as shutdown:
        window.close()
    shutdown.assert_called_once()
