"""Tests for the bar chart canvas."""

from types import SimpleNamespace

import pytest

from csvlens_qt.components.mpl_canvas import MplCanvas


@pytest.fixture
def canvas(app):
    return MplCanvas()


def _event_at_bar(canvas: MplCanvas, index: int) -> SimpleNamespace:
    bar = canvas._bars[index]
    center = (bar.get_x() + bar.get_width() / 2, bar.get_height() / 2)
    x, y = canvas.axes.transData.transform(center)
    return SimpleNamespace(x=x, y=y, inaxes=canvas.axes, canvas=canvas)


def test_plot_bars_hides_category_axis(canvas):
    canvas.plot_bars(["age", "income"], [3, 1])

    assert canvas.bar_count() == 2
    assert not canvas.axes.get_xaxis().get_visible()
    assert canvas.axes.get_yaxis().get_visible()
    assert canvas.tooltip_text() is None


def test_empty_plot(canvas):
    canvas.plot_bars([], [])
    assert canvas.bar_count() == 0


def test_hover_shows_tooltip(canvas):
    canvas.plot_bars(["age", "income"], [3, 1])
    canvas.draw()

    canvas._on_motion(_event_at_bar(canvas, 0))
    assert canvas.tooltip_text() == "age: 3"

    canvas._on_motion(SimpleNamespace(x=0, y=0, inaxes=None, canvas=canvas))
    assert canvas.tooltip_text() is None


def test_clear_resets_bars(canvas):
    canvas.plot_bars(["age"], [3])
    canvas.clear()

    assert canvas.bar_count() == 0
    assert canvas.tooltip_text() is None


def test_tooltip_shows_large_counts_in_full(canvas):
    canvas.plot_bars(["events"], [1234567])
    canvas.draw()

    canvas._on_motion(_event_at_bar(canvas, 0))
    assert canvas.tooltip_text() == "events: 1,234,567"
