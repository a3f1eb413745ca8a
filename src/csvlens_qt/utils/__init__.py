"""Utility helpers for csvlens-qt."""

from csvlens_qt.utils.logging_config import setup_logging

__all__ = ["setup_logging"]
