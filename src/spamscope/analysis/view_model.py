# =============================================================================
# Derived View Model
# =============================================================================
# Everything the UI shows is projected from three pieces of state:
#
#   (input session, text outcome, file outcome) --derive_view()--> AnalysisView
#
# Nothing here is stored between renders. Counts, chart series and the
# "current" result/error are recomputed from scratch each time, so they can
# never drift out of sync with the state they describe.
# =============================================================================

import re
from dataclasses import dataclass

from spamscope.core import (
    AnalysisOutcome,
    AnalysisResult,
    AnalysisStatus,
    InputMode,
    InputSession,
)

# Display colors keyed to the winning class
SPAM_COLOR = "#ef4444"  # alert red
HAM_COLOR = "#10b981"   # success green

_WORD_RE = re.compile(r"\S+")


@dataclass(frozen=True)
class ChartPoint:
    """One bar/segment of a chart."""
    name: str
    value: float
    fill: str


@dataclass(frozen=True)
class AnalysisView:
    """
    Render-ready snapshot of the active mode.

    Attributes:
        mode: Active input mode.
        content: Text of the active mode ("" for an unread file).
        character_count: len(content).
        word_count: Number of whitespace-separated words in content.
        status: Lifecycle state of the active outcome slot.
        result: Active result, if the slot SUCCEEDED.
        error_message: Analysis failure message, if the slot FAILED.
        read_error: File read failure (File mode only). Separate from
                    error_message because no request was ever made.
        is_loading: True while the active slot has a request on the wire, even
            one orphaned by an edit.
        can_analyze: True if the analyze action would issue a request.
        selected_file_name: Name of the selected file (File mode only).
        probability_series: SPAM/HAM bars, only for spam results.
        confidence_series: Single gauge point, whenever a result exists.
    """
    mode: InputMode
    content: str
    character_count: int
    word_count: int
    status: AnalysisStatus
    result: AnalysisResult | None
    error_message: str | None
    read_error: str | None
    is_loading: bool
    can_analyze: bool
    selected_file_name: str | None
    probability_series: tuple[ChartPoint, ...]
    confidence_series: tuple[ChartPoint, ...]

    @property
    def show_results(self) -> bool:
        """Whether the result panels should render."""
        return self.result is not None


def count_words(text: str) -> int:
    """Number of maximal runs of non-whitespace characters ("" -> 0)."""
    return len(_WORD_RE.findall(text.strip()))


def probability_series(result: AnalysisResult | None) -> tuple[ChartPoint, ...]:
    """
    SPAM/HAM probability bars for a spam verdict.

    Explicit probabilities win; otherwise SPAM falls back to the confidence
    and HAM to its complement. Non-spam verdicts get no bars.
    """
    if result is None or not result.is_spam:
        return ()

    spam_value = result.spam_probability
    if spam_value is None:
        spam_value = result.confidence
    ham_value = result.ham_probability
    if ham_value is None:
        ham_value = 100 - result.confidence

    return (
        ChartPoint(name="SPAM", value=spam_value, fill=SPAM_COLOR),
        ChartPoint(name="HAM", value=ham_value, fill=HAM_COLOR),
    )


def confidence_series(result: AnalysisResult | None) -> tuple[ChartPoint, ...]:
    """Single confidence point labelled by the winning class."""
    if result is None:
        return ()
    if result.is_spam:
        return (ChartPoint(name="SPAM", value=result.confidence, fill=SPAM_COLOR),)
    return (ChartPoint(name="HAM", value=result.confidence, fill=HAM_COLOR),)


def derive_view(
    session: InputSession,
    text_outcome: AnalysisOutcome,
    file_outcome: AnalysisOutcome,
) -> AnalysisView:
    """
    Project the current state into an AnalysisView.

    Pure: reads its arguments, mutates nothing, and equal inputs always give
    equal views.
    """
    if session.mode is InputMode.TEXT:
        outcome = text_outcome
        can_analyze = not outcome.in_flight and bool(session.text_content.strip())
        read_error = None
        file_name = None
    else:
        outcome = file_outcome
        can_analyze = not outcome.in_flight and session.selected_file is not None
        read_error = session.file_read_error
        file_name = session.selected_file.name if session.selected_file else None

    content = session.active_content
    result = outcome.result if outcome.status is AnalysisStatus.SUCCEEDED else None
    error = outcome.error_message if outcome.status is AnalysisStatus.FAILED else None

    return AnalysisView(
        mode=session.mode,
        content=content,
        character_count=len(content),
        word_count=count_words(content),
        status=outcome.status,
        result=result,
        error_message=error,
        read_error=read_error,
        is_loading=outcome.in_flight,
        can_analyze=can_analyze,
        selected_file_name=file_name,
        probability_series=probability_series(result),
        confidence_series=confidence_series(result),
    )
