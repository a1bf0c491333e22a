# =============================================================================
# UI Module
# =============================================================================
# Textual-based user interface for SpamScope.
#
# Structure:
#   - screens/: Full-screen views (analyzer, file picker)
#   - widgets/: Reusable UI components (result panel)
#
# The UI holds no analysis state. It renders AnalysisView snapshots from the
# AnalysisController and forwards user actions to it.
# =============================================================================

# Screen exports
from spamscope.ui.screens.analyzer import AnalyzerScreen
from spamscope.ui.screens.file_picker import FilePickerScreen

# Widget exports
from spamscope.ui.widgets.result_panel import ResultPanel

__all__ = [
    "AnalyzerScreen",
    "FilePickerScreen",
    "ResultPanel",
]
