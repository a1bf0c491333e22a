# =============================================================================
# UI Widgets
# =============================================================================
# Reusable UI components for SpamScope.
#
#   - ResultPanel: Verdict, confidence gauge, probability bars and keywords
# =============================================================================

from spamscope.ui.widgets.result_panel import ResultPanel

__all__ = ["ResultPanel"]
