# =============================================================================
# Analysis Controller
# =============================================================================
# The orchestration layer between the UI and everything else. It owns:
#   - the InputSession (what the user gave us)
#   - the FileContentReader (turning files into text)
#   - the AnalysisRequestManager (per-mode request lifecycle)
#   - the ResultActions (copy/export)
#
# and applies the rules that cut across them:
#   - Editing text (or loading an example) resets the Text outcome
#   - Selecting a file resets the File outcome and starts a read
#   - A read failure is recorded on the session, never on the File outcome
#
# After every state change, including ones that finish asynchronously, the
# on_change callback fires so the UI can re-render from view().
# =============================================================================

import logging
from pathlib import Path
from typing import Callable

from spamscope.analysis.actions import ResultActions
from spamscope.analysis.examples import EXAMPLES
from spamscope.analysis.manager import AnalysisRequestManager
from spamscope.analysis.reader import FileContentReader, FileReadError
from spamscope.analysis.view_model import AnalysisView, derive_view
from spamscope.core import AnalysisOutcome, InputMode, InputSession

logger = logging.getLogger(__name__)

# Shown when the selected file cannot be read
READ_ERROR_MESSAGE = "Error reading the file"


class AnalysisController:
    """
    Coordinates input, requests and actions for one session.

    Usage:
        >>> controller = AnalysisController(manager, actions)
        >>> controller.on_change = refresh_screen
        >>> controller.set_text_content("You've WON!")
        >>> await controller.analyze()
        >>> controller.view().result.prediction
        <Prediction.SPAM: 'spam'>

    Attributes:
        session: Input state.
        manager: Request manager holding both outcome slots.
        actions: Copy/export actions.
        reader: File reader.
        on_change: Called with no arguments after each state change.
    """

    def __init__(
        self,
        manager: AnalysisRequestManager,
        actions: ResultActions,
        *,
        reader: FileContentReader | None = None,
        session: InputSession | None = None,
    ) -> None:
        self.manager = manager
        self.actions = actions
        self.reader = reader or FileContentReader()
        self.session = session or InputSession()
        self.on_change: Callable[[], None] | None = None

        # Request start/settle changes state too
        self.manager.on_change = self._changed

    # -------------------------------------------------------------------------
    # State access
    # -------------------------------------------------------------------------

    def view(self) -> AnalysisView:
        """Project the current state for rendering."""
        return derive_view(
            self.session,
            self.manager.text_outcome,
            self.manager.file_outcome,
        )

    def _changed(self) -> None:
        if self.on_change:
            self.on_change()

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    def set_mode(self, mode: InputMode) -> None:
        """Switch input mode. Nothing is cleared."""
        if mode is self.session.mode:
            return
        self.session.set_mode(mode)
        self._changed()

    def set_text_content(self, text: str) -> None:
        """Replace the text and invalidate any Text analysis."""
        if text == self.session.text_content:
            return
        self.session.set_text_content(text)
        self.manager.reset(InputMode.TEXT)
        self._changed()

    def load_example(self, index: int) -> None:
        """Load one of the built-in examples into the text input."""
        example = EXAMPLES[index]
        logger.debug(f"Loading example: {example.label}")
        self.session.set_text_content(example.text)
        self.manager.reset(InputMode.TEXT)
        self._changed()

    def select_file(self, path: Path) -> None:
        """
        Select a file for analysis.

        Resets the File outcome and starts reading the file in the
        background. Must be called from inside a running event loop.
        """
        selected = self.session.set_selected_file(path)
        self.manager.reset(InputMode.FILE)
        logger.info(f"Selected file {selected.path}")

        def on_load(text: str) -> None:
            selected.text = text
            self._changed()

        def on_error(error: FileReadError) -> None:
            logger.warning(f"Read failed: {error}")
            selected.text = None
            self.session.file_read_error = READ_ERROR_MESSAGE
            self._changed()

        self.reader.read_as_text(selected.path, on_load=on_load, on_error=on_error)
        self._changed()

    # -------------------------------------------------------------------------
    # Analysis
    # -------------------------------------------------------------------------

    async def analyze(self) -> AnalysisOutcome:
        """Analyze the active mode's content."""
        if self.session.mode is InputMode.TEXT:
            return await self.analyze_text()
        return await self.analyze_file()

    async def analyze_text(self) -> AnalysisOutcome:
        """Analyze the pasted text (no-op if blank or already loading)."""
        return await self.manager.analyze_text(self.session.text_content)

    async def analyze_file(self) -> AnalysisOutcome:
        """Analyze the selected file (no-op if none or already loading)."""
        selected = self.session.selected_file
        return await self.manager.analyze_file(selected.path if selected else None)

    # -------------------------------------------------------------------------
    # Result actions
    # -------------------------------------------------------------------------

    def copy_summary(self) -> str | None:
        """Copy the active result's summary (no-op without a result)."""
        return self.actions.copy_summary(self.view())

    def export_result(self) -> Path | None:
        """Export the active result (no-op without a result)."""
        return self.actions.export_result(self.view())
