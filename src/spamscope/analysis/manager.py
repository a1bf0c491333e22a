# =============================================================================
# Analysis Request Manager
# =============================================================================
# Issues classification requests and tracks one outcome slot per input mode.
#
# Key responsibilities:
#   - Skip requests whose preconditions fail (blank text, no file)
#   - Refuse to start a second request for a mode with one still on the wire
#   - Collapse every request failure into one mode-specific error message
#   - Drop responses for requests that were superseded by reset()
#
# The Text and File slots are fully independent: a text analysis in flight
# never blocks a file analysis, and vice versa.
# =============================================================================

import asyncio
import logging
from pathlib import Path
from typing import Callable, Protocol

from spamscope.client import ClassifierError
from spamscope.core import AnalysisOutcome, AnalysisResult, InputMode

logger = logging.getLogger(__name__)

# User-facing failure messages, one per mode
TEXT_ERROR_MESSAGE = "Error analyzing the message"
FILE_ERROR_MESSAGE = "Error analyzing the file"


class Classifier(Protocol):
    """What the manager needs from a classifier client."""

    async def analyze_text(self, text: str) -> AnalysisResult: ...

    async def analyze_file(self, path: Path) -> AnalysisResult: ...


class AnalysisRequestManager:
    """
    Per-mode request lifecycle.

    Usage:
        >>> manager = AnalysisRequestManager(ClassifierClient(url))
        >>> outcome = await manager.analyze_text("You've WON!")
        >>> outcome.status
        <AnalysisStatus.SUCCEEDED: 3>

    Attributes:
        client: The classifier transport.
        on_change: Called with no arguments when a request starts or settles.
    """

    def __init__(self, client: Classifier) -> None:
        """
        Initialize the manager.

        Args:
            client: Object implementing analyze_text() and analyze_file().
        """
        self.client = client
        self.on_change: Callable[[], None] | None = None
        self._outcomes = {
            InputMode.TEXT: AnalysisOutcome(),
            InputMode.FILE: AnalysisOutcome(),
        }

    def outcome(self, mode: InputMode) -> AnalysisOutcome:
        """The outcome slot for a mode."""
        return self._outcomes[mode]

    @property
    def text_outcome(self) -> AnalysisOutcome:
        return self._outcomes[InputMode.TEXT]

    @property
    def file_outcome(self) -> AnalysisOutcome:
        return self._outcomes[InputMode.FILE]

    def reset(self, mode: InputMode) -> None:
        """Return a mode's slot to IDLE, orphaning any request in flight."""
        self._outcomes[mode].reset()

    async def analyze(self, mode: InputMode, content: str | Path | None) -> AnalysisOutcome:
        """
        Analyze content for the given mode.

        Args:
            mode: Which slot to use.
            content: Text for TEXT mode, a file path for FILE mode.

        Returns:
            The mode's outcome slot after the request settles (or unchanged,
            if the request was skipped).
        """
        if mode is InputMode.TEXT:
            return await self.analyze_text(content or "")
        return await self.analyze_file(content)

    async def analyze_text(self, text: str) -> AnalysisOutcome:
        """
        Classify pasted text.

        Blank (empty or whitespace-only) text is skipped without a request.
        The text is sent untrimmed.
        """
        outcome = self.text_outcome
        if not text.strip():
            logger.debug("Skipping text analysis: no content")
            return outcome
        return await self._run(outcome, TEXT_ERROR_MESSAGE, self.client.analyze_text, text)

    async def analyze_file(self, path: Path | None) -> AnalysisOutcome:
        """Classify an uploaded file. A missing file is skipped."""
        outcome = self.file_outcome
        if path is None:
            logger.debug("Skipping file analysis: no file selected")
            return outcome
        return await self._run(outcome, FILE_ERROR_MESSAGE, self.client.analyze_file, Path(path))

    async def _run(self, outcome: AnalysisOutcome, error_message: str, request, payload) -> AnalysisOutcome:
        # The in-flight check and start() happen before the first await, so two
        # calls on the same loop can never both get past this point. A request
        # orphaned by reset() still counts until it settles.
        if outcome.in_flight:
            logger.debug("Skipping analysis: a request is already in flight")
            return outcome

        generation = outcome.start()
        self._notify()

        try:
            result = await request(payload)
        except asyncio.CancelledError:
            if outcome.is_current(generation):
                outcome.reset()
            outcome.release(generation)
            raise
        except Exception as e:
            if not outcome.is_current(generation):
                logger.debug(f"Ignoring failure of superseded request: {e}")
                outcome.release(generation)
                self._notify()
                return outcome
            if isinstance(e, ClassifierError):
                logger.warning(f"Analysis failed: {e}")
            else:
                logger.exception(f"Unexpected error during analysis: {e}")
            outcome.fail(error_message)
            self._notify()
            return outcome

        if not outcome.is_current(generation):
            logger.debug("Ignoring result of superseded request")
            outcome.release(generation)
            self._notify()
            return outcome

        outcome.succeed(result)
        self._notify()
        return outcome

    def _notify(self) -> None:
        if self.on_change:
            self.on_change()
