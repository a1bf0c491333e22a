# =============================================================================
# Pytest Configuration and Fixtures
# =============================================================================
# Shared fixtures for the SpamScope test suite.
#
# Async code is driven with asyncio.run() inside plain test functions; the
# classifier service is replaced by FakeClassifier.
# =============================================================================

import asyncio
import tempfile
from datetime import datetime, timezone
from pathlib import Path

import pytest

from spamscope.analysis import AnalysisController, AnalysisRequestManager, ResultActions
from spamscope.client import ClassifierHTTPError
from spamscope.core import AnalysisResult


SPAM_TEXT = (
    "CONGRATULATIONS! You've WON $1,000,000! Click here NOW to claim your prize! "
    "Limited time offer! Act fast! FREE money waiting!"
)

SPAM_RESPONSE = {
    "prediction": "spam",
    "confidence": 97.2,
    "latency": 12.4,
    "spam_keywords": ["congratulations", "won", "urgent"],
}

HAM_RESPONSE = {
    "prediction": "ham",
    "confidence": 88.5,
    "latency": 8.1,
}

# 2024-01-15T10:30:00.123Z
FIXED_NOW = datetime(2024, 1, 15, 10, 30, 0, 123000, tzinfo=timezone.utc)


class FakeClassifier:
    """
    Stand-in for ClassifierClient.

    Attributes:
        text_calls / file_calls: Payloads received, in order.
        text_result / file_result: What to answer with. An exception instance
                                   is raised instead of returned.
        gate: If set, requests wait on this event before answering, which
              keeps them "in flight" until the test releases them.
    """

    def __init__(self) -> None:
        self.text_calls: list[str] = []
        self.file_calls: list[Path] = []
        self.text_result: AnalysisResult | Exception = AnalysisResult.from_dict(SPAM_RESPONSE)
        self.file_result: AnalysisResult | Exception = AnalysisResult.from_dict(HAM_RESPONSE)
        self.gate: asyncio.Event | None = None

    async def analyze_text(self, text: str) -> AnalysisResult:
        self.text_calls.append(text)
        return await self._answer(self.text_result)

    async def analyze_file(self, path: Path) -> AnalysisResult:
        self.file_calls.append(path)
        return await self._answer(self.file_result)

    async def _answer(self, answer):
        if self.gate is not None:
            await self.gate.wait()
        else:
            await asyncio.sleep(0)
        if isinstance(answer, Exception):
            raise answer
        return answer


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def spam_result() -> AnalysisResult:
    """The classifier's answer for the prize-winner spam."""
    return AnalysisResult.from_dict(SPAM_RESPONSE)


@pytest.fixture
def fake_classifier() -> FakeClassifier:
    return FakeClassifier()


@pytest.fixture
def http_failure() -> ClassifierHTTPError:
    return ClassifierHTTPError("Classifier returned HTTP 500", status_code=500)


@pytest.fixture
def clipboard() -> list[str]:
    """A list standing in for the system clipboard."""
    return []


@pytest.fixture
def controller(fake_classifier, clipboard, temp_dir) -> AnalysisController:
    """A controller wired to fakes, exporting into temp_dir."""
    actions = ResultActions(clipboard.append, temp_dir, clock=lambda: FIXED_NOW)
    return AnalysisController(AnalysisRequestManager(fake_classifier), actions)
