# =============================================================================
# SpamScope Core Module
# =============================================================================
# Core domain models for SpamScope. These are plain Python dataclasses with no
# external dependencies, so they can be imported anywhere without causing
# circular dependency issues.
#
#   - InputSession / SelectedFile: What the user wants analyzed
#   - AnalysisResult: The classifier's verdict
#   - AnalysisOutcome: Per-mode request lifecycle (state machine)
# =============================================================================

from spamscope.core.outcome import AnalysisOutcome, AnalysisStatus, InvalidTransitionError
from spamscope.core.result import AnalysisResult, Prediction, ResultFormatError
from spamscope.core.session import InputMode, InputSession, SelectedFile

__all__ = [
    "AnalysisOutcome",
    "AnalysisStatus",
    "InvalidTransitionError",
    "AnalysisResult",
    "Prediction",
    "ResultFormatError",
    "InputMode",
    "InputSession",
    "SelectedFile",
]
