# =============================================================================
# UI Screens
# =============================================================================
# Full-screen views for the application.
#
#   - AnalyzerScreen: Input, analyze button and result panel
#   - FilePickerScreen: Modal file browser for File mode
# =============================================================================

from spamscope.ui.screens.analyzer import AnalyzerScreen
from spamscope.ui.screens.file_picker import FilePickerScreen

__all__ = ["AnalyzerScreen", "FilePickerScreen"]
