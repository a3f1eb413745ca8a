"""Upload-and-render page: pick a CSV, send it for analysis, show the summary."""

# =============================================================================
# IMPORTS
# =============================================================================

import logging
from pathlib import Path

from PySide6.QtCore import QObject, Signal, Slot
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QFileDialog,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from csvlens_qt.config import DEFAULT_DIR
from csvlens_qt.dashboard import derive
from csvlens_qt.dashboard.cards import (
    DatasetCard,
    MissingChartCard,
    PreviewCard,
    StatsCard,
)
from csvlens_qt.services import AnalysisClient, WorkerHandle, start_worker
from csvlens_qt.services.client import REQUEST_FAILED
from csvlens_qt.types.analysis import AnalysisResult
from csvlens_qt.types.state import (
    AnalysisOutcome,
    AnalysisStateError,
    Failed,
    Succeeded,
    ViewState,
)

logger = logging.getLogger(__name__)

ANALYZE_LABEL = "Analyze CSV"
ANALYZING_LABEL = "Analyzing..."


# =============================================================================
# MAIN DASHBOARD PAGE
# =============================================================================


class DashboardPage(QWidget):
    """Single view holding the selected file, the request state and the result.

    All state lives in one immutable ``ViewState``; every event replaces it and
    re-renders the widgets from scratch.
    """

    # ------------------------------------------------------------------------
    # SIGNALS
    # ------------------------------------------------------------------------
    analysis_started = Signal(str)  # file name
    analysis_finished = Signal(bool, str)  # success, file name or error message

    # ------------------------------------------------------------------------
    # INITIALIZATION
    # ------------------------------------------------------------------------
    def __init__(self, api_base: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._client = AnalysisClient(api_base)
        self._state = ViewState()
        self._worker: WorkerHandle | None = None

        # Missing-chart derivation cache, keyed on the result object
        self._chart_source: AnalysisResult | None = None
        self._chart_entries: list[tuple[str, int]] = []

        self._build_ui()
        self._connect_signals()
        self.render()

    # ------------------------------------------------------------------------
    # UI CONSTRUCTION
    # ------------------------------------------------------------------------
    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)

        title = QLabel("CSV Lens")
        title_font = QFont()
        title_font.setBold(True)
        title_font.setPointSize(18)
        title.setFont(title_font)
        layout.addWidget(title)

        subtitle = QLabel("Upload a CSV → get instant insights → visualize it.")
        subtitle.setStyleSheet("color: #666;")
        layout.addWidget(subtitle)

        layout.addWidget(self._build_upload_group())

        self._results = self._build_results()
        layout.addWidget(self._results, 1)
        layout.addStretch()

    def _build_upload_group(self) -> QGroupBox:
        group = QGroupBox("Upload")
        group_layout = QVBoxLayout(group)

        row = QHBoxLayout()
        self._path_edit = QLineEdit()
        self._path_edit.setReadOnly(True)
        self._path_edit.setPlaceholderText("No file selected")
        row.addWidget(self._path_edit, 1)

        self._browse_button = QPushButton("Browse…")
        row.addWidget(self._browse_button)

        self._analyze_button = QPushButton(ANALYZE_LABEL)
        row.addWidget(self._analyze_button)
        group_layout.addLayout(row)

        self._progress_bar = QProgressBar()
        self._progress_bar.setRange(0, 0)  # Indeterminate progress
        self._progress_bar.setTextVisible(False)
        self._progress_bar.hide()
        group_layout.addWidget(self._progress_bar)

        self._error_label = QLabel()
        self._error_label.setWordWrap(True)
        self._error_label.setStyleSheet(
            "background-color: #ffebee; border: 1px solid #d32f2f;"
            " color: #d32f2f; padding: 6px;"
        )
        self._error_label.hide()
        group_layout.addWidget(self._error_label)

        return group

    def _build_results(self) -> QWidget:
        container = QWidget()
        grid = QGridLayout(container)
        grid.setContentsMargins(0, 0, 0, 0)

        self._dataset_card = DatasetCard()
        self._missing_card = MissingChartCard()
        self._stats_card = StatsCard()
        self._preview_card = PreviewCard()

        grid.addWidget(self._dataset_card, 0, 0)
        grid.addWidget(self._missing_card, 0, 1)
        grid.addWidget(self._stats_card, 0, 2)
        grid.addWidget(self._preview_card, 1, 0, 1, 3)
        container.hide()
        return container

    def _connect_signals(self) -> None:
        self._browse_button.clicked.connect(self.browse_for_file)
        self._analyze_button.clicked.connect(self._on_analyze_clicked)

    # ------------------------------------------------------------------------
    # PUBLIC API
    # ------------------------------------------------------------------------
    @property
    def state(self) -> ViewState:
        return self._state

    def select_file(self, path: Path | None) -> None:
        """Hold ``path`` as the file to analyze; no upload happens yet."""
        logger.debug("UI Event: Selected file - %s", path)
        self._set_state(self._state.select_file(path))

    def analyze(self) -> bool:
        """Start analyzing the selected file in the background.

        Returns False without side effects when no file is selected or an
        analysis is already running.
        """
        try:
            next_state = self._state.begin_analysis()
        except AnalysisStateError as exc:
            logger.debug("UI Action: Ignoring analyze request - %s", exc)
            return False

        self._set_state(next_state)
        file_path = next_state.selected_file

        worker = AnalysisWorker(client=self._client, file_path=file_path)
        worker.analysis_settled.connect(self._on_analysis_settled)
        self._worker = start_worker(
            worker,
            start_method="process_data",
            finished_callback=self._on_worker_thread_finished,
        )
        self.analysis_started.emit(file_path.name)
        return True

    def missing_chart(self) -> list[tuple[str, int]]:
        """Top missing-value columns of the held result, recomputed on change."""
        result = self._state.result
        if result is not self._chart_source:
            self._chart_source = result
            self._chart_entries = derive.missing_chart(result)
        return self._chart_entries

    def shutdown(self) -> None:
        """Wait for a running analysis thread before the window goes away."""
        if self._worker is not None:
            self._worker.stop()
            self._worker = None

    # ---- Read-only views used by the main window and tests ----
    def trigger_enabled(self) -> bool:
        return self._analyze_button.isEnabled()

    def trigger_text(self) -> str:
        return self._analyze_button.text()

    def error_text(self) -> str | None:
        return None if self._error_label.isHidden() else self._error_label.text()

    def results_visible(self) -> bool:
        return not self._results.isHidden()

    @property
    def dataset_card(self) -> DatasetCard:
        return self._dataset_card

    @property
    def missing_card(self) -> MissingChartCard:
        return self._missing_card

    @property
    def stats_card(self) -> StatsCard:
        return self._stats_card

    @property
    def preview_card(self) -> PreviewCard:
        return self._preview_card

    # ------------------------------------------------------------------------
    # RENDERING
    # ------------------------------------------------------------------------
    def _set_state(self, state: ViewState) -> None:
        self._state = state
        self.render()

    def render(self) -> None:
        """Project the current state onto the widgets."""
        state = self._state

        self._path_edit.setText(
            str(state.selected_file) if state.selected_file is not None else ""
        )
        self._analyze_button.setEnabled(state.trigger_enabled)
        self._analyze_button.setText(
            ANALYZING_LABEL if state.is_loading else ANALYZE_LABEL
        )
        self._progress_bar.setVisible(state.is_loading)

        error = state.error_message
        self._error_label.setText(error or "")
        self._error_label.setVisible(error is not None)

        result = state.result
        if result is None:
            self._results.hide()
            return

        self._dataset_card.set_result(result)
        self._missing_card.set_entries(self.missing_chart())

        column = result.first_numeric_column
        if column is None:
            self._stats_card.show_no_numeric_columns()
        else:
            self._stats_card.show_stats(column, result.summary_stats[column])

        self._preview_card.set_preview(result.preview)
        self._results.show()

    # ------------------------------------------------------------------------
    # UI EVENT HANDLERS
    # ------------------------------------------------------------------------
    @Slot()
    def browse_for_file(self) -> None:
        """Let the user pick a CSV file; cancelling keeps the current file."""
        logger.debug("UI Click: Browse for CSV")
        current = self._state.selected_file
        start_dir = str(current.parent) if current is not None else DEFAULT_DIR
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            "Select CSV File",
            start_dir,
            "CSV Files (*.csv);;All Files (*)",
            options=QFileDialog.Option.DontUseNativeDialog,
        )
        if file_path:
            self.select_file(Path(file_path))

    @Slot()
    def _on_analyze_clicked(self) -> None:
        logger.debug("UI Click: Analyze CSV button")
        self.analyze()

    # ------------------------------------------------------------------------
    # WORKER CALLBACK HANDLERS
    # ------------------------------------------------------------------------
    @Slot(object)
    def _on_analysis_settled(self, outcome: AnalysisOutcome) -> None:
        self._set_state(self._state.settle(outcome))
        if isinstance(outcome, Succeeded):
            logger.info("Analysis finished for %s", outcome.result.file_name)
            self.analysis_finished.emit(True, outcome.result.file_name)
        else:
            logger.info("Analysis failed: %s", outcome.message)
            self.analysis_finished.emit(False, outcome.message)

    @Slot()
    def _on_worker_thread_finished(self) -> None:
        # A late signal from an earlier run must not release a live thread
        if self._worker is not None and not self._worker.is_running():
            self._worker = None


# =============================================================================
# BACKGROUND ANALYSIS WORKER
# =============================================================================


class AnalysisWorker(QObject):
    """Runs a single upload off the GUI thread and reports its outcome."""

    analysis_settled = Signal(object)  # Succeeded | Failed
    finished = Signal()

    def __init__(self, *, client: AnalysisClient, file_path: Path) -> None:
        super().__init__()
        self._client = client
        self._file_path = file_path

    def process_data(self) -> None:
        try:
            outcome = self._client.analyze(self._file_path)
        except Exception as exc:
            logger.exception("Unexpected analysis worker failure")
            outcome = Failed(str(exc) or REQUEST_FAILED)
        try:
            self.analysis_settled.emit(outcome)
        finally:
            self.finished.emit()
