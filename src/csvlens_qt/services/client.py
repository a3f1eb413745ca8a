"""HTTP client for the external CSV analysis service."""

# =============================================================================
# IMPORTS
# =============================================================================

import logging
from pathlib import Path
from typing import Any

import requests
from pydantic import ValidationError

from csvlens_qt.types.analysis import AnalysisResult
from csvlens_qt.types.state import AnalysisOutcome, Failed, Succeeded

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

ANALYZE_PATH = "/analyze/csv"
UPLOAD_FIELD = "file"

GENERIC_ERROR = "Something went wrong"
REQUEST_FAILED = "Request failed"


# =============================================================================
# CLIENT
# =============================================================================


class AnalysisClient:
    """Uploads one CSV per call and maps the reply to an outcome.

    The client never raises: transport failures, error statuses, error
    payloads and malformed bodies all come back as ``Failed``. Requests are
    sent once, without retries or a timeout.
    """

    def __init__(self, base_url: str) -> None:
        self._base_url = base_url.rstrip("/")

    @property
    def endpoint(self) -> str:
        return f"{self._base_url}{ANALYZE_PATH}"

    def analyze(self, path: Path) -> AnalysisOutcome:
        """POST ``path`` as multipart form data and interpret the response."""
        logger.info("Uploading %s to %s", path.name, self.endpoint)
        try:
            with open(path, "rb") as handle:
                response = self._post(files={UPLOAD_FIELD: (path.name, handle)})
            body = response.json()
        except (requests.RequestException, OSError, ValueError) as exc:
            logger.warning("Analysis request for %s failed: %s", path.name, exc)
            return Failed(str(exc) or REQUEST_FAILED)

        ok = 200 <= response.status_code < 300
        return self._interpret(path, ok, response.status_code, body)

    # ------------------------------------------------------------------------
    # INTERNALS
    # ------------------------------------------------------------------------
    def _post(self, **kwargs) -> requests.Response:
        return requests.post(
            self.endpoint, headers={"Accept": "application/json"}, **kwargs
        )

    def _interpret(
        self, path: Path, ok: bool, status_code: int, body: Any
    ) -> AnalysisOutcome:
        server_error = _error_text(body)
        if not ok or server_error:
            message = server_error or GENERIC_ERROR
            logger.warning(
                "Analysis service rejected %s (HTTP %d): %s",
                path.name,
                status_code,
                message,
            )
            return Failed(message)

        try:
            result = AnalysisResult.model_validate(body)
        except ValidationError as exc:
            logger.warning("Malformed analysis response for %s: %s", path.name, exc)
            return Failed(_describe_validation_error(exc))

        logger.info(
            "Analysis of %s succeeded (%d rows x %d cols)",
            path.name,
            result.shape.rows,
            result.shape.cols,
        )
        return Succeeded(result)


# =============================================================================
# HELPERS
# =============================================================================


def _error_text(body: Any) -> str | None:
    """Return the body's ``error`` field if it is a non-empty string."""
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if isinstance(error, str) and error:
        return error
    return None


def _describe_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "body"
    return f"Invalid response from analysis service: {location}: {first.get('msg')}"
