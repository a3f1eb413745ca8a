"""Helpers for running QObject workers in dedicated threads."""

# =============================================================================
# IMPORTS
# =============================================================================

import logging
from typing import Callable

from PySide6.QtCore import QObject, QThread

logger = logging.getLogger(__name__)


# =============================================================================
# WORKER HANDLE
# =============================================================================


class WorkerHandle:
    """Handle for managing a worker running inside a QThread."""

    def __init__(self, thread: QThread, worker: QObject) -> None:
        self._thread = thread
        self._worker = worker

    @property
    def thread(self) -> QThread:
        return self._thread

    @property
    def worker(self) -> QObject:
        return self._worker

    def is_running(self) -> bool:
        try:
            return self._thread.isRunning()
        except RuntimeError:
            # Underlying QThread already deleted
            return False

    def stop(self, timeout_ms: int = 1000) -> None:
        """Wait for the thread to finish, used when the application shuts down.

        A blocking HTTP call cannot be interrupted, so the thread is
        terminated if it does not finish within ``timeout_ms``.
        """
        try:
            running = self._thread.isRunning()
        except RuntimeError:
            # Underlying QThread already deleted
            return
        if not running:
            return

        try:
            self._worker.disconnect()
        except (RuntimeError, TypeError):
            logger.debug("Worker signals already disconnected")

        self._thread.requestInterruption()
        self._thread.quit()
        if not self._thread.wait(timeout_ms):
            logger.warning("Worker thread did not stop in time, terminating")
            self._thread.terminate()
            self._thread.wait(100)


# =============================================================================
# WORKER MANAGEMENT FUNCTIONS
# =============================================================================


def start_worker(
    worker: QObject,
    start_method: str = "process",
    finished_callback: Callable[[], None] | None = None,
) -> WorkerHandle:
    """Move ``worker`` to a new ``QThread`` and start ``start_method``."""
    if not hasattr(worker, start_method):
        raise AttributeError(f"Worker {worker!r} has no method '{start_method}'")

    thread = QThread()
    thread.setParent(None)
    worker.setParent(None)
    worker.moveToThread(thread)

    thread.started.connect(getattr(worker, start_method))  # type: ignore[arg-type]

    if hasattr(worker, "finished"):
        worker.finished.connect(thread.quit)  # type: ignore[attr-defined]

    thread.finished.connect(worker.deleteLater)
    thread.finished.connect(thread.deleteLater)

    if finished_callback is not None:
        thread.finished.connect(finished_callback)

    thread.start()
    return WorkerHandle(thread, worker)
