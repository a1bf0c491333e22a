# =============================================================================
# Core Model Tests
# =============================================================================
# Result parsing, the outcome state machine and the input session.
# =============================================================================

from pathlib import Path

import pytest

from spamscope.core import (
    AnalysisOutcome,
    AnalysisResult,
    AnalysisStatus,
    InputMode,
    InputSession,
    InvalidTransitionError,
    Prediction,
    ResultFormatError,
)

from conftest import SPAM_RESPONSE


# -----------------------------------------------------------------------------
# AnalysisResult
# -----------------------------------------------------------------------------

def test_result_parses_full_record():
    result = AnalysisResult.from_dict({
        **SPAM_RESPONSE,
        "spam_probability": 96.0,
        "ham_probability": 4.0,
        "cleaned_text": "congratulations won",
        "filename": "mail.eml",
    })

    assert result.prediction is Prediction.SPAM
    assert result.is_spam
    assert result.confidence == 97.2
    assert result.latency == 12.4
    assert result.spam_keywords == ("congratulations", "won", "urgent")
    assert result.spam_probability == 96.0
    assert result.ham_probability == 4.0
    assert result.filename == "mail.eml"


def test_result_optional_fields_default_to_none():
    result = AnalysisResult.from_dict({"prediction": "ham", "confidence": 80, "latency": 3})

    assert result.prediction is Prediction.HAM
    assert not result.is_spam
    assert result.confidence == 80.0
    assert result.spam_keywords is None
    assert result.spam_probability is None
    assert result.ham_probability is None


@pytest.mark.parametrize("body", [
    [],
    "spam",
    {"confidence": 90, "latency": 1},
    {"prediction": "maybe", "confidence": 90, "latency": 1},
    {"prediction": "spam", "latency": 1},
    {"prediction": "spam", "confidence": "high", "latency": 1},
    {"prediction": "spam", "confidence": True, "latency": 1},
    {"prediction": "spam", "confidence": 90, "latency": 1, "spam_keywords": "won"},
    {"prediction": "spam", "confidence": 90, "latency": 1, "spam_probability": "x"},
])
def test_result_rejects_malformed_bodies(body):
    with pytest.raises(ResultFormatError):
        AnalysisResult.from_dict(body)


# -----------------------------------------------------------------------------
# AnalysisOutcome
# -----------------------------------------------------------------------------

def test_outcome_starts_idle():
    outcome = AnalysisOutcome()
    assert outcome.status is AnalysisStatus.IDLE
    assert outcome.result is None
    assert outcome.error_message is None


def test_outcome_success_path(spam_result):
    outcome = AnalysisOutcome()
    generation = outcome.start()

    assert outcome.is_loading
    assert outcome.is_current(generation)

    outcome.succeed(spam_result)
    assert outcome.status is AnalysisStatus.SUCCEEDED
    assert outcome.result is spam_result
    assert not outcome.is_current(generation)


def test_outcome_failure_then_restart_clears_error():
    outcome = AnalysisOutcome()
    outcome.start()
    outcome.fail("boom")
    assert outcome.status is AnalysisStatus.FAILED
    assert outcome.error_message == "boom"

    outcome.start()
    assert outcome.is_loading
    assert outcome.error_message is None


def test_outcome_rejects_start_while_loading():
    outcome = AnalysisOutcome()
    outcome.start()
    with pytest.raises(InvalidTransitionError):
        outcome.start()


def test_outcome_rejects_settle_without_request(spam_result):
    outcome = AnalysisOutcome()
    with pytest.raises(InvalidTransitionError):
        outcome.succeed(spam_result)
    with pytest.raises(InvalidTransitionError):
        outcome.fail("nope")


def test_outcome_reset_invalidates_in_flight_request(spam_result):
    outcome = AnalysisOutcome()
    generation = outcome.start()
    outcome.reset()

    assert outcome.status is AnalysisStatus.IDLE
    assert not outcome.is_current(generation)

    # The orphaned request is still on the wire
    assert outcome.in_flight
    with pytest.raises(InvalidTransitionError):
        outcome.start()

    # Once it settles, a new request gets a fresh identity
    outcome.release(generation)
    assert not outcome.in_flight
    assert outcome.start() != generation


def test_outcome_release_ignores_other_generations():
    outcome = AnalysisOutcome()
    generation = outcome.start()
    outcome.release(generation - 1)
    assert outcome.in_flight

    outcome.fail("boom")
    assert not outcome.in_flight


# -----------------------------------------------------------------------------
# InputSession
# -----------------------------------------------------------------------------

def test_session_mode_switch_keeps_both_contents():
    session = InputSession()
    session.set_text_content("hello")
    session.set_selected_file(Path("/tmp/mail.eml"))
    session.selected_file.text = "file body"

    session.set_mode(InputMode.FILE)
    assert session.active_content == "file body"

    session.set_mode(InputMode.TEXT)
    assert session.active_content == "hello"
    assert session.selected_file.text == "file body"


def test_session_new_file_starts_unread_and_clears_read_error():
    session = InputSession(mode=InputMode.FILE)
    session.file_read_error = "Error reading the file"

    selected = session.set_selected_file(Path("/tmp/other.txt"))

    assert selected.name == "other.txt"
    assert selected.text is None
    assert session.file_read_error is None
    assert session.active_content == ""
