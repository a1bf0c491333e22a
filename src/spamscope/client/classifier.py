# =============================================================================
# Classifier Client
# =============================================================================
# HTTP client for the remote spam-classification service.
#
# Endpoints:
#   - POST {base}/api/analyze/       JSON body {"email_text": "..."}
#   - POST {base}/api/analyze-file/  multipart body, field "file"
#
# Both answer 2xx with a JSON result record (see core/result.py).
#
# Uses requests for HTTP. The blocking call runs in asyncio.to_thread() so the
# event loop (and the UI drawn on it) keeps going while we wait; the parsed
# result is handed back to the loop, which is the only place state changes.
#
# requests.Session is not safe to share between threads, so each endpoint gets
# its own session. Callers keep at most one request per endpoint outstanding.
# =============================================================================

import asyncio
import logging
from pathlib import Path
from typing import Any, Callable

import requests

from spamscope.core.result import AnalysisResult, ResultFormatError

logger = logging.getLogger(__name__)

TEXT_ENDPOINT = "/api/analyze/"
FILE_ENDPOINT = "/api/analyze-file/"


class ClassifierClient:
    """
    Async-friendly client for the classifier service.

    Usage:
        >>> client = ClassifierClient("http://localhost:8000")
        >>> result = await client.analyze_text("You've WON!")
        >>> result.prediction
        <Prediction.SPAM: 'spam'>
        >>> client.close()

    Attributes:
        base_url: Service root, without a trailing slash.
        timeout: Seconds to wait for a response, or None to wait as long as
                 the transport allows.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float | None = None,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: Service root (e.g. "http://localhost:8000").
            timeout: Request timeout in seconds, None for no timeout.
            session_factory: Builds the per-endpoint sessions (mainly for tests).
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._sessions = {
            TEXT_ENDPOINT: session_factory(),
            FILE_ENDPOINT: session_factory(),
        }

    def url_for(self, endpoint: str) -> str:
        """Absolute URL for an endpoint path."""
        return f"{self.base_url}{endpoint}"

    async def analyze_text(self, text: str) -> AnalysisResult:
        """
        Classify a piece of text.

        Args:
            text: The message to classify, sent as-is.

        Returns:
            The classifier's result.

        Raises:
            ClassifierError: On transport failure, non-2xx status, or a
                             malformed response body.
        """
        logger.info(f"Analyzing text ({len(text)} chars)")
        return await asyncio.to_thread(
            self._post, TEXT_ENDPOINT, json={"email_text": text}
        )

    async def analyze_file(self, path: Path) -> AnalysisResult:
        """
        Upload a file and classify its contents.

        Args:
            path: File to upload. Its raw bytes are sent, not decoded text.

        Returns:
            The classifier's result.

        Raises:
            ClassifierError: If the file cannot be read, or for any of the
                             reasons analyze_text() raises.
        """
        path = Path(path)
        logger.info(f"Analyzing file {path.name}")
        return await asyncio.to_thread(self._upload, path)

    def close(self) -> None:
        """Release pooled connections."""
        for session in self._sessions.values():
            session.close()

    # -------------------------------------------------------------------------
    # Blocking helpers (run in a worker thread)
    # -------------------------------------------------------------------------

    def _upload(self, path: Path) -> AnalysisResult:
        try:
            with open(path, "rb") as f:
                return self._post(FILE_ENDPOINT, files={"file": (path.name, f)})
        except OSError as e:
            raise UploadError(f"Could not read {path}: {e}") from e

    def _post(self, endpoint: str, **kwargs: Any) -> AnalysisResult:
        url = self.url_for(endpoint)
        try:
            response = self._sessions[endpoint].post(url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request to {url} failed: {e}")
            raise ClassifierConnectionError(f"Could not reach classifier at {url}: {e}") from e

        if not 200 <= response.status_code < 300:
            logger.error(f"Classifier returned HTTP {response.status_code} for {url}")
            raise ClassifierHTTPError(
                f"Classifier returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            result = AnalysisResult.from_dict(response.json())
        except (ValueError, ResultFormatError) as e:
            # requests' JSONDecodeError and ResultFormatError are both ValueErrors
            logger.error(f"Malformed classifier response from {url}: {e}")
            raise ClassifierResponseError(f"Malformed classifier response: {e}") from e

        logger.debug(
            f"Classifier verdict: {result.prediction.value} "
            f"({result.confidence}%, {result.latency}ms)"
        )
        return result


class ClassifierError(Exception):
    """Base exception for classifier requests."""
    pass


class ClassifierConnectionError(ClassifierError):
    """Raised when the classifier cannot be reached."""
    pass


class ClassifierHTTPError(ClassifierError):
    """Raised when the classifier answers with a non-success status."""

    def __init__(self, message: str, *, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class ClassifierResponseError(ClassifierError):
    """Raised when the response body is not a valid result record."""
    pass


class UploadError(ClassifierError):
    """Raised when the file to upload cannot be read."""
    pass
