"""Primary application window hosting the CSV Lens dashboard."""

# =============================================================================
# IMPORTS
# =============================================================================

import logging

from PySide6.QtCore import QObject, Signal, Slot
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QLabel,
    QMainWindow,
    QMenuBar,
    QScrollArea,
    QStatusBar,
)

from csvlens_qt.dashboard import DashboardPage

logger = logging.getLogger(__name__)


# =============================================================================
# STATUS MANAGER
# =============================================================================


class StatusManager(QObject):
    """Simple status manager for showing user-friendly messages."""

    status_message = Signal(str)
    status_cleared = Signal()

    def show_message(self, message: str) -> None:
        logger.debug("Status Bar: Showing message - %s", message)
        self.status_message.emit(message)

    def clear_status(self) -> None:
        logger.debug("Status Bar: Clearing status")
        self.status_cleared.emit()


# =============================================================================
# STATUS BAR
# =============================================================================


class SimpleStatusBar(QStatusBar):
    """Status bar with a single message label."""

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self._status_label = QLabel("Ready")
        self.addWidget(self._status_label)

    def message_text(self) -> str:
        return self._status_label.text()

    def show_status_message(self, message: str) -> None:
        self._status_label.setText(message)

    def clear_status(self) -> None:
        self._status_label.setText("Ready")


# =============================================================================
# MAIN WINDOW CLASS
# =============================================================================


class MainWindow(QMainWindow):
    """Top-level window around the dashboard page."""

    # ------------------------------------------------------------------------
    # INITIALIZATION
    # ------------------------------------------------------------------------
    def __init__(self, api_base: str) -> None:
        super().__init__()
        self._api_base = api_base
        self.status_manager = StatusManager()
        self._build_ui()
        self._connect_signals()
        logger.info("Main window ready, analysis service at %s", api_base)

    # ------------------------------------------------------------------------
    # UI BUILDING
    # ------------------------------------------------------------------------
    def _build_ui(self) -> None:
        self.setWindowTitle("CSV Lens")
        self.resize(1200, 800)

        self.dashboard = DashboardPage(self._api_base, self)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.dashboard)
        self.setCentralWidget(scroll)

        self._create_menu_bar()

        self.status_bar = SimpleStatusBar(self)
        self.setStatusBar(self.status_bar)

    def _create_menu_bar(self) -> None:
        menu_bar = QMenuBar(self)
        self.setMenuBar(menu_bar)

        file_menu = menu_bar.addMenu("&File")

        open_action = file_menu.addAction("Open CSV...")
        open_action.setShortcut("Ctrl+O")
        open_action.setStatusTip("Choose a CSV file to analyze")
        open_action.triggered.connect(self.dashboard.browse_for_file)

        file_menu.addSeparator()

        quit_action = file_menu.addAction("Quit")
        quit_action.setShortcut("Ctrl+Q")
        quit_action.triggered.connect(self.close)

    # ------------------------------------------------------------------------
    # SIGNAL CONNECTIONS
    # ------------------------------------------------------------------------
    def _connect_signals(self) -> None:
        self.status_manager.status_message.connect(self.status_bar.show_status_message)
        self.status_manager.status_cleared.connect(self.status_bar.clear_status)

        self.dashboard.analysis_started.connect(self._on_analysis_started)
        self.dashboard.analysis_finished.connect(self._on_analysis_finished)

    # ------------------------------------------------------------------------
    # EVENT HANDLERS
    # ------------------------------------------------------------------------
    @Slot(str)
    def _on_analysis_started(self, file_name: str) -> None:
        self.status_manager.show_message(f"Analyzing {file_name}…")

    @Slot(bool, str)
    def _on_analysis_finished(self, success: bool, message: str) -> None:
        if success:
            self.status_manager.show_message(f"Analysis complete: {message}")
        else:
            self.status_manager.show_message(f"Analysis failed: {message}")

    def closeEvent(self, event: QCloseEvent) -> None:
        logger.debug("Main window closing")
        self.dashboard.shutdown()
        super().closeEvent(event)
