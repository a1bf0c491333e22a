# =============================================================================
# Analysis Module
# =============================================================================
# Orchestrates classification requests and everything derived from them.
#
# Pipeline:
#   user action -> AnalysisController -> InputSession / FileContentReader /
#   AnalysisRequestManager -> derive_view() -> UI -> ResultActions
# =============================================================================

from spamscope.analysis.actions import ResultActions
from spamscope.analysis.controller import AnalysisController, READ_ERROR_MESSAGE
from spamscope.analysis.examples import EXAMPLES, Example
from spamscope.analysis.manager import (
    AnalysisRequestManager,
    FILE_ERROR_MESSAGE,
    TEXT_ERROR_MESSAGE,
)
from spamscope.analysis.reader import FileContentReader, FileReadError
from spamscope.analysis.view_model import AnalysisView, ChartPoint, derive_view

__all__ = [
    "AnalysisController",
    "AnalysisRequestManager",
    "AnalysisView",
    "ChartPoint",
    "EXAMPLES",
    "Example",
    "FileContentReader",
    "FileReadError",
    "ResultActions",
    "derive_view",
    "READ_ERROR_MESSAGE",
    "TEXT_ERROR_MESSAGE",
    "FILE_ERROR_MESSAGE",
]
