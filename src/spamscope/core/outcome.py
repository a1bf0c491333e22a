# =============================================================================
# Analysis Outcome
# =============================================================================
# Each input mode owns one outcome slot that records where its most recent
# analysis attempt stands:
#
#        start()            succeed(result)
#   IDLE -------> LOADING ------------------> SUCCEEDED
#     ^             |                              |
#     |             | fail(message)                |
#     |             v                              |
#     +--reset()-- FAILED <-------- start() -------+
#
#   - start() is refused while a request is outstanding. That is what
#     guarantees one outstanding request per slot.
#   - succeed()/fail() are only allowed while LOADING.
#   - reset() is allowed from any state.
#
# Every start() and reset() bumps the slot's generation. A request captures the
# generation it was started with; when its response arrives the generation is
# compared again so answers for a superseded request are thrown away.
#
# reset() changes what the slot shows, not what is on the wire: a request
# orphaned by reset() stays `pending` until it settles, and release() is how
# the caller reports that.
# =============================================================================

from dataclasses import dataclass
from enum import Enum, auto

from spamscope.core.result import AnalysisResult


class AnalysisStatus(Enum):
    """Lifecycle state of an outcome slot."""
    IDLE = auto()       # Nothing analyzed yet (or invalidated by an edit)
    LOADING = auto()    # Request in flight
    SUCCEEDED = auto()  # Result available
    FAILED = auto()     # Error message available


@dataclass
class AnalysisOutcome:
    """
    Mutable outcome slot for one input mode.

    Attributes:
        status: Current lifecycle state.
        result: Parsed result, present only when SUCCEEDED.
        error_message: Human-readable failure, present only when FAILED.
        generation: Identity of the most recent start()/reset().
        pending: Generation of the request still on the wire, if any. Survives
            reset(); cleared when that request settles.
    """
    status: AnalysisStatus = AnalysisStatus.IDLE
    result: AnalysisResult | None = None
    error_message: str | None = None
    generation: int = 0
    pending: int | None = None

    @property
    def is_loading(self) -> bool:
        """Returns True while a request is in flight."""
        return self.status is AnalysisStatus.LOADING

    @property
    def in_flight(self) -> bool:
        """Returns True while a request is outstanding, including one orphaned by reset()."""
        return self.pending is not None

    def start(self) -> int:
        """
        Move to LOADING, dropping any previous result or error.

        Returns:
            The generation of the new request.

        Raises:
            InvalidTransitionError: If a request is already in flight.
        """
        if self.in_flight:
            raise InvalidTransitionError("Cannot start an analysis while one is in flight")
        self.generation += 1
        self.pending = self.generation
        self.status = AnalysisStatus.LOADING
        self.result = None
        self.error_message = None
        return self.generation

    def succeed(self, result: AnalysisResult) -> None:
        """Settle the in-flight request with a result."""
        self._require_loading("succeed")
        self.status = AnalysisStatus.SUCCEEDED
        self.result = result
        self.pending = None

    def fail(self, message: str) -> None:
        """Settle the in-flight request with an error message."""
        self._require_loading("fail")
        self.status = AnalysisStatus.FAILED
        self.error_message = message
        self.pending = None

    def reset(self) -> None:
        """Return to IDLE and invalidate any in-flight request."""
        self.generation += 1
        self.status = AnalysisStatus.IDLE
        self.result = None
        self.error_message = None

    def release(self, generation: int) -> None:
        """Mark the request started as `generation` as settled without touching status."""
        if self.pending == generation:
            self.pending = None

    def is_current(self, generation: int) -> bool:
        """Returns True if `generation` is the request this slot is waiting on."""
        return self.status is AnalysisStatus.LOADING and self.generation == generation

    def _require_loading(self, action: str) -> None:
        if self.status is not AnalysisStatus.LOADING:
            raise InvalidTransitionError(
                f"Cannot {action} from {self.status.name}; no request in flight"
            )


class InvalidTransitionError(Exception):
    """Raised when an outcome slot is asked to make an illegal transition."""
    pass
