"""Reusable UI components shared across csvlens-qt pages."""

from csvlens_qt.components.mpl_canvas import MplCanvas

__all__ = ["MplCanvas"]
