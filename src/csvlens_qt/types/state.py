"""Request lifecycle of the upload-and-render view."""

# =============================================================================
# IMPORTS
# =============================================================================

from dataclasses import dataclass, replace
from pathlib import Path

from csvlens_qt.types.analysis import AnalysisResult

# =============================================================================
# ERRORS
# =============================================================================


class AnalysisStateError(RuntimeError):
    """Raised when a transition is not allowed from the current state."""


class NoFileSelectedError(AnalysisStateError):
    """Raised when an analysis is requested before a file was chosen."""


class AnalysisInProgressError(AnalysisStateError):
    """Raised when an analysis is requested while another one is running."""


# =============================================================================
# REQUEST STATES
# =============================================================================


@dataclass(frozen=True)
class Idle:
    """No analysis has been requested yet."""


@dataclass(frozen=True)
class Loading:
    """A request is in flight."""


@dataclass(frozen=True)
class Succeeded:
    """The service returned a well-formed summary."""

    result: AnalysisResult


@dataclass(frozen=True)
class Failed:
    """The last request failed; ``message`` is shown to the user."""

    message: str


RequestState = Idle | Loading | Succeeded | Failed
AnalysisOutcome = Succeeded | Failed


# =============================================================================
# VIEW STATE
# =============================================================================


@dataclass(frozen=True)
class ViewState:
    """Everything the dashboard renders from.

    Transitions return a new instance; the current one is never mutated.
    """

    selected_file: Path | None = None
    request: RequestState = Idle()

    @property
    def is_loading(self) -> bool:
        return isinstance(self.request, Loading)

    @property
    def trigger_enabled(self) -> bool:
        """Whether the analyze action may be triggered."""
        return self.selected_file is not None and not self.is_loading

    @property
    def result(self) -> AnalysisResult | None:
        if isinstance(self.request, Succeeded):
            return self.request.result
        return None

    @property
    def error_message(self) -> str | None:
        if isinstance(self.request, Failed):
            return self.request.message
        return None

    def select_file(self, path: Path | None) -> "ViewState":
        """Replace (or clear) the selected file, keeping the request state."""
        return replace(self, selected_file=path)

    def begin_analysis(self) -> "ViewState":
        """Enter ``Loading``, dropping any previous result or error."""
        if self.selected_file is None:
            raise NoFileSelectedError("Select a CSV file before analyzing")
        if self.is_loading:
            raise AnalysisInProgressError("An analysis is already running")
        return replace(self, request=Loading())

    def settle(self, outcome: AnalysisOutcome) -> "ViewState":
        """Store the outcome of the in-flight request."""
        if not self.is_loading:
            raise AnalysisStateError(
                f"Cannot settle an analysis from state {type(self.request).__name__}"
            )
        if not isinstance(outcome, (Succeeded, Failed)):
            raise TypeError(f"Unexpected analysis outcome: {outcome!r}")
        return replace(self, request=outcome)
