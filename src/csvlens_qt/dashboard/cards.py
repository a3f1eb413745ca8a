"""Result cards shown once the analysis service returned a summary."""

# =============================================================================
# IMPORTS
# =============================================================================

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QAbstractItemView,
    QFormLayout,
    QGroupBox,
    QHeaderView,
    QLabel,
    QStackedWidget,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from csvlens_qt.components.mpl_canvas import MplCanvas
from csvlens_qt.dashboard.derive import dataset_summary, preview_matrix, stat_rows
from csvlens_qt.types.analysis import AnalysisResult, Preview, SummaryStats

logger = logging.getLogger(__name__)

NO_NUMERIC_COLUMNS_TEXT = "No numeric columns found."
MISSING_TIP_TEXT = (
    "Tip: columns with lots of missing values usually need cleaning or dropping."
)


# =============================================================================
# TABLE HELPERS
# =============================================================================


def _make_read_only_table(parent: QWidget | None = None) -> QTableWidget:
    table = QTableWidget(parent)
    table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
    table.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
    table.verticalHeader().setVisible(False)
    table.setAlternatingRowColors(True)
    return table


def _read_only_item(text: str) -> QTableWidgetItem:
    item = QTableWidgetItem(text)
    item.setFlags(item.flags() & ~Qt.ItemFlag.ItemIsEditable)
    return item


def table_texts(table: QTableWidget) -> list[list[str]]:
    """Snapshot of all cell texts, row by row."""
    return [
        [
            table.item(row, col).text() if table.item(row, col) else ""
            for col in range(table.columnCount())
        ]
        for row in range(table.rowCount())
    ]


# =============================================================================
# DATASET CARD
# =============================================================================


class DatasetCard(QGroupBox):
    """File name, dimensions, missing total and numeric column count."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__("Dataset", parent)
        self._layout = QFormLayout(self)
        self._value_labels: dict[str, QLabel] = {}

    def set_result(self, result: AnalysisResult) -> None:
        for label, text in dataset_summary(result):
            value_label = self._value_labels.get(label)
            if value_label is None:
                value_label = QLabel()
                value_label.setTextInteractionFlags(
                    Qt.TextInteractionFlag.TextSelectableByMouse
                )
                self._value_labels[label] = value_label
                self._layout.addRow(f"{label}:", value_label)
            value_label.setText(text)

    def field_text(self, label: str) -> str | None:
        value_label = self._value_labels.get(label)
        return value_label.text() if value_label is not None else None


# =============================================================================
# MISSING VALUES CARD
# =============================================================================


class MissingChartCard(QGroupBox):
    """Bar chart of the columns with the most missing values."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__("Missing Values (Top 12)", parent)
        layout = QVBoxLayout(self)

        self._canvas = MplCanvas(self, width=4, height=3)
        self._canvas.setMinimumHeight(220)
        layout.addWidget(self._canvas)

        tip = QLabel(MISSING_TIP_TEXT)
        tip.setWordWrap(True)
        tip.setStyleSheet("color: #666; font-size: 11px;")
        layout.addWidget(tip)

        self._entries: list[tuple[str, int]] = []

    @property
    def canvas(self) -> MplCanvas:
        return self._canvas

    def entries(self) -> list[tuple[str, int]]:
        return list(self._entries)

    def set_entries(self, entries: list[tuple[str, int]]) -> None:
        if entries == self._entries and self._canvas.bar_count() == len(entries):
            return
        self._entries = list(entries)
        labels = [name for name, _ in entries]
        values = [count for _, count in entries]
        self._canvas.plot_bars(labels, values, y_label="Missing")
        logger.debug("Missing chart updated with %d columns", len(entries))


# =============================================================================
# STATISTICS CARD
# =============================================================================


class StatsCard(QGroupBox):
    """Statistics table of the first numeric column."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__("Quick Stats (first numeric column)", parent)
        layout = QVBoxLayout(self)

        self._stack = QStackedWidget()
        layout.addWidget(self._stack)

        # Page 0: fallback message
        self._empty_label = QLabel(NO_NUMERIC_COLUMNS_TEXT)
        self._empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._empty_label.setStyleSheet("color: #666; font-style: italic;")
        self._stack.addWidget(self._empty_label)

        # Page 1: column name and statistics table
        table_page = QWidget()
        table_layout = QVBoxLayout(table_page)
        table_layout.setContentsMargins(0, 0, 0, 0)
        self._column_label = QLabel()
        column_font = QFont()
        column_font.setBold(True)
        self._column_label.setFont(column_font)
        table_layout.addWidget(self._column_label)

        self._table = _make_read_only_table()
        self._table.setColumnCount(2)
        self._table.horizontalHeader().setVisible(False)
        self._table.horizontalHeader().setSectionResizeMode(
            QHeaderView.ResizeMode.Stretch
        )
        table_layout.addWidget(self._table)
        self._stack.addWidget(table_page)

    @property
    def table(self) -> QTableWidget:
        return self._table

    def is_showing_table(self) -> bool:
        return self._stack.currentIndex() == 1

    def fallback_text(self) -> str:
        return self._empty_label.text()

    def column_text(self) -> str:
        return self._column_label.text()

    def show_stats(self, column: str, stats: SummaryStats) -> None:
        rows = stat_rows(stats)
        self._column_label.setText(f"Column: {column}")
        self._table.setRowCount(len(rows))
        for row, (name, text) in enumerate(rows):
            self._table.setItem(row, 0, _read_only_item(name))
            self._table.setItem(row, 1, _read_only_item(text))
        self._stack.setCurrentIndex(1)

    def show_no_numeric_columns(self) -> None:
        self._column_label.clear()
        self._table.setRowCount(0)
        self._stack.setCurrentIndex(0)


# =============================================================================
# PREVIEW CARD
# =============================================================================


class PreviewCard(QGroupBox):
    """Table with the sample rows returned by the service."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__("Data Preview", parent)
        layout = QVBoxLayout(self)
        self._table = _make_read_only_table()
        self._table.setMinimumHeight(200)
        layout.addWidget(self._table)

    @property
    def table(self) -> QTableWidget:
        return self._table

    def set_preview(self, preview: Preview) -> None:
        matrix = preview_matrix(preview)
        self._table.clear()
        self._table.setColumnCount(len(preview.columns))
        self._table.setHorizontalHeaderLabels(preview.columns)
        self._table.setRowCount(len(matrix))
        for row, values in enumerate(matrix):
            for col, text in enumerate(values):
                self._table.setItem(row, col, _read_only_item(text))
        self._table.resizeColumnsToContents()
        logger.debug(
            "Preview table populated with %d rows x %d columns",
            len(matrix),
            len(preview.columns),
        )
