# =============================================================================
# Analyzer Screen
# =============================================================================
# The primary view of SpamScope:
#   - Top row: built-in example messages
#   - Left panel: input (text editor or file picker + preview), analyze button
#   - Right panel: result (verdict, confidence, probabilities, keywords)
#
# The screen keeps no analysis state of its own. Every render reads a fresh
# AnalysisView from the controller, and the controller calls back into
# _refresh() whenever anything changes (including async completions).
# =============================================================================

from pathlib import Path

from textual import work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import Button, ContentSwitcher, Footer, Header, Static, TextArea

from spamscope.analysis import EXAMPLES, AnalysisController
from spamscope.core import InputMode
from spamscope.ui.screens.file_picker import FilePickerScreen
from spamscope.ui.widgets.result_panel import ResultPanel

# ContentSwitcher pane ids per mode
PANES = {
    InputMode.TEXT: "text-pane",
    InputMode.FILE: "file-pane",
}


class AnalyzerScreen(Screen):
    """
    The main analysis screen.

    Keybindings:
        - F2 / F3: Text / File mode
        - F5: Analyze
        - Ctrl+O: Choose a file
        - F6: Copy summary
        - F7: Export result
    """

    BINDINGS = [
        Binding("f2", "text_mode", "Text"),
        Binding("f3", "file_mode", "File"),
        Binding("f5", "analyze", "Analyze"),
        Binding("ctrl+o", "choose_file", "Open File"),
        Binding("f6", "copy_summary", "Copy"),
        Binding("f7", "export_result", "Export"),
    ]

    CSS = """
    #examples {
        height: auto;
        padding: 0 1;
    }

    #examples-label {
        width: auto;
        padding: 1 1 0 0;
        text-style: bold;
    }

    #examples Button {
        margin-right: 1;
    }

    #body {
        height: 1fr;
    }

    #input-column {
        width: 1fr;
        padding: 0 1;
        border-right: solid $primary;
    }

    #mode-bar {
        height: auto;
    }

    #mode-bar Button {
        margin-right: 1;
    }

    #counts {
        width: 1fr;
        padding: 1 0 0 0;
        text-align: right;
        color: $text-muted;
    }

    #input-switcher {
        height: 1fr;
    }

    #message-input, #file-preview {
        height: 1fr;
    }

    #file-name {
        height: auto;
        margin: 1 0;
    }

    #analyze-btn {
        width: 100%;
        margin-top: 1;
    }

    #error-line {
        height: auto;
        color: $error;
    }

    #result-column {
        width: 1fr;
    }
    """

    def __init__(self, controller: AnalysisController) -> None:
        """
        Initialize the analyzer screen.

        Args:
            controller: The session's analysis controller.
        """
        super().__init__()
        self._controller = controller
        self._controller.on_change = self._refresh

    def compose(self) -> ComposeResult:
        """
        Compose the analyzer layout.

        +--------------------------------------------------+
        |                    Header                         |
        +--------------------------------------------------+
        | Quick test: [Prize Winner] [Urgent] [Legitimate]  |
        +------------------------+-------------------------+
        | [Text] [File]  counts  |                         |
        |                        |      Result panel       |
        |   editor / preview     |                         |
        |                        |                         |
        | [      Analyze       ] |                         |
        | error                  |                         |
        +------------------------+-------------------------+
        |                    Footer                         |
        +--------------------------------------------------+
        """
        yield Header()

        with Horizontal(id="examples"):
            yield Static("Quick test:", id="examples-label")
            for index, example in enumerate(EXAMPLES):
                yield Button(example.label, id=f"example-{index}")

        with Horizontal(id="body"):
            with Vertical(id="input-column"):
                with Horizontal(id="mode-bar"):
                    yield Button("Text", id="mode-text", variant="primary")
                    yield Button("File", id="mode-file")
                    yield Static("", id="counts")

                with ContentSwitcher(initial=PANES[InputMode.TEXT], id="input-switcher"):
                    with Vertical(id="text-pane"):
                        yield TextArea(self._controller.session.text_content, id="message-input")
                    with Vertical(id="file-pane"):
                        yield Button("Choose file...", id="choose-file")
                        yield Static("No file selected", id="file-name")
                        yield TextArea("", id="file-preview", read_only=True)

                yield Button("Analyze", id="analyze-btn", variant="success")
                yield Static("", id="error-line")

            with VerticalScroll(id="result-column"):
                yield ResultPanel(id="result-panel")

        yield Footer()

    def on_mount(self) -> None:
        """Draw the initial state."""
        self._refresh()
        self.query_one("#message-input", TextArea).focus()

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _refresh(self) -> None:
        """Re-render every dynamic widget from a fresh view."""
        if not self.is_mounted:
            return

        view = self._controller.view()

        self.query_one("#input-switcher", ContentSwitcher).current = PANES[view.mode]
        self.query_one("#mode-text", Button).variant = (
            "primary" if view.mode is InputMode.TEXT else "default"
        )
        self.query_one("#mode-file", Button).variant = (
            "primary" if view.mode is InputMode.FILE else "default"
        )
        self.query_one("#counts", Static).update(
            f"{view.character_count} characters · {view.word_count} words"
        )

        if view.mode is InputMode.FILE:
            self.query_one("#file-name", Static).update(
                f"File: [b]{view.selected_file_name}[/]" if view.selected_file_name
                else "No file selected"
            )
            preview = self.query_one("#file-preview", TextArea)
            if preview.text != view.content:
                preview.load_text(view.content)

        analyze_btn = self.query_one("#analyze-btn", Button)
        analyze_btn.disabled = not view.can_analyze
        analyze_btn.label = "Analyzing..." if view.is_loading else (
            "Analyze Text" if view.mode is InputMode.TEXT else "Analyze File"
        )

        self.query_one("#error-line", Static).update(view.read_error or view.error_message or "")
        self.query_one("#result-panel", ResultPanel).show_view(view)

    # -------------------------------------------------------------------------
    # Event Handlers
    # -------------------------------------------------------------------------

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        """Keep the session in sync with the editor."""
        if event.text_area.id == "message-input":
            self._controller.set_text_content(event.text_area.text)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        button_id = event.button.id or ""
        if button_id.startswith("example-"):
            self._load_example(int(button_id.removeprefix("example-")))
        elif button_id == "mode-text":
            self.action_text_mode()
        elif button_id == "mode-file":
            self.action_file_mode()
        elif button_id == "choose-file":
            self.action_choose_file()
        elif button_id == "analyze-btn":
            self.action_analyze()

    def _load_example(self, index: int) -> None:
        self._controller.set_mode(InputMode.TEXT)
        self._controller.load_example(index)
        # Changed fires afterwards with the same text, which is a no-op
        self.query_one("#message-input", TextArea).load_text(
            self._controller.session.text_content
        )

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def action_text_mode(self) -> None:
        self._controller.set_mode(InputMode.TEXT)

    def action_file_mode(self) -> None:
        self._controller.set_mode(InputMode.FILE)

    def action_choose_file(self) -> None:
        """Open the file picker and load the chosen file."""
        selected = self._controller.session.selected_file
        start = selected.path.parent if selected else None

        def on_picked(path: Path | None) -> None:
            if path is not None:
                self._controller.set_mode(InputMode.FILE)
                self._controller.select_file(path)

        self.app.push_screen(FilePickerScreen(start), on_picked)

    def action_analyze(self) -> None:
        """Analyze the active mode's content."""
        if not self._controller.view().can_analyze:
            return
        self._run_analysis()

    @work(group="analysis")
    async def _run_analysis(self) -> None:
        """Background worker for one analysis request."""
        await self._controller.analyze()

    def action_copy_summary(self) -> None:
        """Copy the result summary to the clipboard."""
        if self._controller.copy_summary():
            self.notify("Summary copied to clipboard")

    def action_export_result(self) -> None:
        """Export the result as JSON."""
        try:
            path = self._controller.export_result()
        except OSError as e:
            self.notify(f"Export failed: {e}", severity="error")
            return
        if path:
            self.notify(f"Exported to {path}")
