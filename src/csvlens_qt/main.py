#!/usr/bin/env python3
"""Application entry-point for the CSV Lens dashboard."""

# =============================================================================
# IMPORTS
# =============================================================================

import logging
import sys

import typer
from PySide6.QtWidgets import QApplication

from csvlens_qt import config
from csvlens_qt.main_window import MainWindow
from csvlens_qt.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="Upload a CSV to the analysis service and explore the summary.",
)


# =============================================================================
# MAIN APPLICATION ENTRY POINT
# =============================================================================


@app.command()
def main(
    api_base: str | None = typer.Option(
        None,
        "--api-base",
        help=(
            "Base URL of the analysis service. Defaults to "
            f"${config.API_BASE_ENV}, then config.yaml, then {config.DEFAULT_API_BASE}."
        ),
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable verbose logging."),
) -> None:
    """Spin up the Qt event loop and show the dashboard window."""
    setup_logging(level=config.LOG_LEVEL, debug=debug)

    base_url = api_base.rstrip("/") if api_base else config.API_BASE
    logger.info("Starting CSV Lens against %s", base_url)

    qt_app = QApplication.instance() or QApplication(sys.argv[:1])
    qt_app.setApplicationName("CSV Lens")
    qt_app.setQuitOnLastWindowClosed(True)

    window = MainWindow(base_url)
    window.show()

    exit_code = qt_app.exec()
    raise typer.Exit(code=exit_code)


# =============================================================================
# CLI ENTRY POINT
# =============================================================================

if __name__ == "__main__":  # pragma: no cover - CLI entry point
    app()
