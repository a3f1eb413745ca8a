"""
Centralized logging configuration for CSV Lens.
"""

import logging
import sys

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers that are noisy at DEBUG level
_QUIET_LOGGERS = ("urllib3", "matplotlib", "PIL")


def setup_logging(level: str | int = logging.INFO, debug: bool = False) -> None:
    """
    Configure the root logger with a single console handler.

    Args:
        level: Level used when ``debug`` is False
        debug: If True, log everything from csvlens_qt at DEBUG level
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    effective_level = logging.DEBUG if debug else level
    root_logger.setLevel(effective_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    root_logger.addHandler(console_handler)

    logging.getLogger("csvlens_qt").setLevel(effective_level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
