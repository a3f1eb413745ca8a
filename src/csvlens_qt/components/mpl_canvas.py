"""
Matplotlib canvas widget for embedding bar charts in Qt.
"""

import logging
from typing import Sequence

import matplotlib

matplotlib.use("QtAgg")
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure
from PySide6.QtWidgets import QWidget

logger = logging.getLogger(__name__)


class MplCanvas(FigureCanvas):
    """A Matplotlib canvas with a bar chart API and hover tooltips."""

    def __init__(
        self,
        parent: QWidget | None = None,
        width: int = 5,
        height: int = 3,
        dpi: int = 100,
    ):
        self.fig = Figure(figsize=(width, height), dpi=dpi, constrained_layout=True)
        self.axes = self.fig.add_subplot(111)
        super().__init__(self.fig)
        self.setParent(parent)

        self._bars = []
        self._bar_labels: list[str] = []
        self._bar_values: list[float] = []
        self._tooltip = None

        self.mpl_connect("motion_notify_event", self._on_motion)

    def clear(self) -> None:
        """Clear the axes and forget any plotted bars."""
        self.axes.cla()
        self._bars = []
        self._bar_labels = []
        self._bar_values = []
        self._tooltip = None
        self.draw_idle()

    # ---- Bar API ----
    def plot_bars(
        self,
        labels: Sequence[str],
        values: Sequence[float],
        *,
        title: str = "",
        y_label: str = "",
        hide_category_axis: bool = True,
    ) -> None:
        """Plot one bar per label; the value axis always stays visible."""
        self.clear()
        self.axes.set_title(title)
        self.axes.set_ylabel(y_label)
        self.axes.grid(True, axis="y", linestyle=":", linewidth=0.5)

        self._bar_labels = list(labels)
        self._bar_values = list(values)
        if self._bar_labels:
            container = self.axes.bar(
                range(len(self._bar_labels)), self._bar_values, color="#4f5b93"
            )
            self._bars = list(container.patches)
            self.axes.set_xticks(range(len(self._bar_labels)))
            self.axes.set_xticklabels(self._bar_labels, rotation=45, ha="right")

        self.axes.get_xaxis().set_visible(not hide_category_axis)

        self._tooltip = self.axes.annotate(
            "",
            xy=(0, 0),
            xytext=(0, 8),
            textcoords="offset points",
            ha="center",
            bbox={"boxstyle": "round", "fc": "white", "alpha": 0.9},
        )
        self._tooltip.set_visible(False)
        self.draw_idle()

    def bar_count(self) -> int:
        return len(self._bars)

    def tooltip_text(self) -> str | None:
        """Text of the hover tooltip, or None when it is hidden."""
        if self._tooltip is None or not self._tooltip.get_visible():
            return None
        return self._tooltip.get_text()

    # ---- Hover handling ----
    def _bar_index_at(self, event) -> int | None:
        if event.inaxes is not self.axes:
            return None
        for index, bar in enumerate(self._bars):
            contains, _ = bar.contains(event)
            if contains:
                return index
        return None

    def _on_motion(self, event) -> None:
        if self._tooltip is None:
            return
        index = self._bar_index_at(event)
        if index is None:
            if self._tooltip.get_visible():
                self._tooltip.set_visible(False)
                self.draw_idle()
            return

        bar = self._bars[index]
        value = self._bar_values[index]
        self._tooltip.xy = (bar.get_x() + bar.get_width() / 2, bar.get_height())
        self._tooltip.set_text(f"{self._bar_labels[index]}: {value:,}")
        self._tooltip.set_visible(True)
        self.draw_idle()
