# =============================================================================
# Input Session
# =============================================================================
# Holds what the user has given us to analyze, independent of any results:
#   - Which input mode is active (pasted text or an uploaded file)
#   - The pasted text
#   - The selected file and, once read, its decoded text
#
# Both modes keep their content when the user switches back and forth.
# Side effects of editing (resetting outcomes, starting file reads) live in
# the AnalysisController; the session itself is plain state.
# =============================================================================

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class InputMode(Enum):
    """The active input channel."""
    TEXT = "text"
    FILE = "file"


@dataclass
class SelectedFile:
    """
    A file chosen for analysis.

    Attributes:
        path: Location of the file on disk.
        text: Decoded text content. None until the read completes, and stays
              None if the read fails.
    """
    path: Path
    text: str | None = None

    @property
    def name(self) -> str:
        """The file's base name, as shown to the user."""
        return self.path.name


@dataclass
class InputSession:
    """
    Input state for one run of the application.

    Attributes:
        mode: Active input mode.
        text_content: Pasted/typed text (Text mode).
        selected_file: Chosen file (File mode), or None.
        file_read_error: Message from the last failed file read, or None.
    """
    mode: InputMode = InputMode.TEXT
    text_content: str = ""
    selected_file: SelectedFile | None = None
    file_read_error: str | None = field(default=None)

    def set_mode(self, mode: InputMode) -> None:
        """Switch the active mode. Content of both modes is kept."""
        self.mode = mode

    def set_text_content(self, text: str) -> None:
        """Replace the pasted text."""
        self.text_content = text

    def set_selected_file(self, path: Path) -> SelectedFile:
        """
        Replace the selected file.

        The new file starts with no decoded text and any previous read error
        is cleared.

        Returns:
            The new SelectedFile.
        """
        self.selected_file = SelectedFile(path=Path(path))
        self.file_read_error = None
        return self.selected_file

    @property
    def active_content(self) -> str:
        """Text of the active mode ("" while a file is unread)."""
        if self.mode is InputMode.TEXT:
            return self.text_content
        if self.selected_file and self.selected_file.text is not None:
            return self.selected_file.text
        return ""
