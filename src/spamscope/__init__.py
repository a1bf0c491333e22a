# =============================================================================
# SpamScope: A Terminal Front-End for a Spam Classifier
# =============================================================================
#
# SpamScope sends pasted text or an email file to a remote spam-classification
# service and shows the verdict right in your terminal.
#
# Features:
#   - Text and file input modes, each with its own result
#   - Confidence gauge and SPAM/HAM probability bars
#   - Suspicious keyword display
#   - Copy a summary to the clipboard, export results as JSON
#   - XDG Base Directory compliant configuration
#
# =============================================================================

__version__ = "0.1.0"
__app_name__ = "spamscope"

# Main entry point - this is what gets called by the 'spamscope' command
from spamscope.app import main

__all__ = ["main", "__version__", "__app_name__"]
