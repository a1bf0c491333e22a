# =============================================================================
# File Picker Screen
# =============================================================================
# Modal browser for choosing the message file to analyze in File mode.
#
# The tree only lists directories and message files (.txt, .eml); hidden
# entries are never shown. F4 switches to listing every file, for messages
# saved under other extensions. A path typed into the input is taken as-is.
# =============================================================================

from pathlib import Path
from typing import Iterable

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, DirectoryTree, Input, Static

MESSAGE_SUFFIXES = (".txt", ".eml")


def is_message_file(path: Path) -> bool:
    """Returns True if the file name looks like a saved message."""
    return path.suffix.lower() in MESSAGE_SUFFIXES


def visible_entries(paths: Iterable[Path], *, show_all: bool = False) -> list[Path]:
    """
    Pick the directory entries the picker lists.

    Args:
        paths: Entries of one directory.
        show_all: List every file, not just message files.

    Returns:
        Non-hidden directories, plus the files that pass the filter.
    """
    entries = []
    for path in paths:
        if path.name.startswith("."):
            continue
        if show_all or path.is_dir() or is_message_file(path):
            entries.append(path)
    return entries


def human_size(size: float) -> str:
    """
    Returns a human-readable file size.

    Examples:
        - 500 -> "500 B"
        - 1500 -> "1.5 KB"
    """
    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024:
            return f"{size:.1f} {unit}" if size != int(size) else f"{int(size)} {unit}"
        size /= 1024
    return f"{size:.1f} TB"


def picker_title(show_all: bool) -> str:
    if show_all:
        return "Select a message file (all files)"
    return f"Select a message file ({', '.join(MESSAGE_SUFFIXES)})"


class MessageFileTree(DirectoryTree):
    """DirectoryTree that hides everything but directories and message files."""

    def __init__(self, path: str | Path, *, show_all: bool = False, **kwargs) -> None:
        super().__init__(path, **kwargs)
        self.show_all = show_all

    def filter_paths(self, paths: Iterable[Path]) -> Iterable[Path]:
        return visible_entries(paths, show_all=self.show_all)


class FilePickerScreen(ModalScreen[Path | None]):
    """
    Modal screen for picking the file to analyze.

    Dismisses with the chosen path, or None if cancelled.
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
        Binding("f4", "toggle_all", "All files"),
    ]

    CSS = """
    FilePickerScreen {
        align: center middle;
    }

    #file-picker-container {
        width: 80%;
        height: 80%;
        min-width: 60;
        min-height: 20;
        background: $surface;
        border: thick $primary;
        padding: 1;
    }

    #file-picker-title {
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    #path-input {
        margin-bottom: 1;
    }

    #directory-tree {
        height: 1fr;
        border: tall $primary;
    }

    #file-info {
        height: 2;
        margin-top: 1;
        color: $text-muted;
    }

    #file-picker-buttons {
        height: auto;
        margin-top: 1;
        align: center middle;
    }

    #file-picker-buttons Button {
        margin: 0 1;
    }
    """

    def __init__(self, start_path: Path | None = None) -> None:
        """
        Initialize the file picker.

        Args:
            start_path: Directory to open in. Defaults to home.
        """
        super().__init__()
        self._start_path = Path(start_path).expanduser() if start_path else Path.home()
        self._selected_path: Path | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="file-picker-container"):
            yield Static(picker_title(False), id="file-picker-title")
            yield Input(
                value=str(self._start_path),
                placeholder="Type a path, or browse below",
                id="path-input",
            )
            yield MessageFileTree(self._start_path, id="directory-tree")
            yield Static("No file selected", id="file-info")
            with Horizontal(id="file-picker-buttons"):
                yield Button("Analyze this file", id="open-btn", variant="primary")
                yield Button("Cancel", id="cancel-btn")

    def on_mount(self) -> None:
        self.query_one("#directory-tree", MessageFileTree).focus()

    def on_directory_tree_file_selected(self, event: DirectoryTree.FileSelected) -> None:
        self._selected_path = event.path
        self._describe(event.path)

    def on_directory_tree_directory_selected(self, event: DirectoryTree.DirectorySelected) -> None:
        self.query_one("#path-input", Input).value = str(event.path)

    def _describe(self, path: Path) -> None:
        """Show what the selected file is before it gets analyzed."""
        info = self.query_one("#file-info", Static)
        try:
            size = path.stat().st_size
        except OSError as e:
            info.update(f"Cannot read {path.name}: {e}")
            return

        line = f"Selected: {path.name} ({human_size(size)})"
        if size == 0:
            line += ", empty"
        elif not is_message_file(path):
            line += ", not a saved message; it is uploaded as-is"
        info.update(line)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id != "path-input":
            return
        path = Path(event.value).expanduser()
        if path.is_file():
            self.dismiss(path)
        elif path.is_dir():
            self.query_one("#directory-tree", MessageFileTree).path = path
        else:
            self.notify(f"No such file or directory: {path}", severity="warning")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "open-btn":
            self.action_select()
        elif event.button.id == "cancel-btn":
            self.action_cancel()

    def action_toggle_all(self) -> None:
        """Switch between message files only and every file."""
        tree = self.query_one("#directory-tree", MessageFileTree)
        tree.show_all = not tree.show_all
        self.query_one("#file-picker-title", Static).update(picker_title(tree.show_all))
        tree.reload()

    def action_select(self) -> None:
        """Dismiss with the chosen file."""
        # The tree selection wins; fall back to a file typed into the input
        if self._selected_path and self._selected_path.is_file():
            self.dismiss(self._selected_path)
            return

        input_path = Path(self.query_one("#path-input", Input).value).expanduser()
        if input_path.is_file():
            self.dismiss(input_path)
        else:
            self.notify("Choose a file to analyze", severity="warning")

    def action_cancel(self) -> None:
        self.dismiss(None)
