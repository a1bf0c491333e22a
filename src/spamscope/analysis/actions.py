# =============================================================================
# Result Actions
# =============================================================================
# Side-effecting actions on the active result:
#   - copy_summary(): four-line plain-text summary to the clipboard
#   - export_result(): JSON record written to the export directory
#
# Both are silent no-ops when there is no result to act on.
# =============================================================================

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable

from spamscope.analysis.view_model import AnalysisView
from spamscope.core import AnalysisResult

logger = logging.getLogger(__name__)

# Exported message previews keep this many characters, then "..."
PREVIEW_LENGTH = 100
PREVIEW_MARKER = "..."

# Shown in the summary when the classifier reported no keywords
NO_KEYWORDS = "N/A"

ClipboardSink = Callable[[str], None]
Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_number(value: float) -> str:
    """Format like JavaScript does: 97.0 -> "97", 97.2 -> "97.2"."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_summary(result: AnalysisResult) -> str:
    """
    Build the clipboard summary for a result.

    Example:
        Result: SPAM
        Confidence: 97.2%
        Spam keywords: congratulations, won, urgent
        Latency: 12.40ms
    """
    keywords = ", ".join(result.spam_keywords or ()) or NO_KEYWORDS
    return "\n".join([
        f"Result: {result.prediction.value.upper()}",
        f"Confidence: {format_number(result.confidence)}%",
        f"Spam keywords: {keywords}",
        f"Latency: {result.latency:.2f}ms",
    ])


def build_export_record(result: AnalysisResult, content: str, now: datetime) -> dict[str, Any]:
    """
    Build the export document for a result.

    Args:
        result: The result being exported.
        content: Text that was analyzed (only a preview is kept).
        now: Export time.

    Returns:
        Dict with exactly the exported fields. spam_keywords is left out
        when the classifier reported none.
    """
    timestamp = now.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    record: dict[str, Any] = {
        "timestamp": timestamp.replace("+00:00", "Z"),
        "message": content[:PREVIEW_LENGTH] + PREVIEW_MARKER,
        "prediction": result.prediction.value,
        "confidence": result.confidence,
    }
    if result.spam_keywords is not None:
        record["spam_keywords"] = list(result.spam_keywords)
    record["latency"] = result.latency
    return record


class ResultActions:
    """
    Copy/export for the active result.

    Usage:
        >>> actions = ResultActions(clipboard=app.copy_to_clipboard,
        ...                         export_dir=Path("~/Downloads").expanduser())
        >>> actions.copy_summary(view)
        >>> path = actions.export_result(view)

    Attributes:
        export_dir: Directory export files are written to.
    """

    def __init__(
        self,
        clipboard: ClipboardSink | None,
        export_dir: Path,
        *,
        clock: Clock = _utc_now,
    ) -> None:
        """
        Initialize the actions.

        Args:
            clipboard: Callable that puts text on the system clipboard, or
                       None if no clipboard is available.
            export_dir: Where export_result() writes files.
            clock: Source of the current time (injectable for tests).
        """
        self._clipboard = clipboard
        self.export_dir = Path(export_dir)
        self._clock = clock

    def copy_summary(self, view: AnalysisView) -> str | None:
        """
        Copy a summary of the active result to the clipboard.

        Clipboard failures are logged, not raised.

        Returns:
            The copied text, or None if nothing was copied.
        """
        if view.result is None:
            return None

        text = format_summary(view.result)
        if self._clipboard is None:
            logger.warning("No clipboard available, summary not copied")
            return None

        try:
            self._clipboard(text)
        except Exception as e:
            logger.warning(f"Clipboard write failed: {e}")
            return None
        return text

    def export_result(self, view: AnalysisView) -> Path | None:
        """
        Write the active result to a JSON file.

        The file is named spam-analysis-<epoch milliseconds>.json.

        Returns:
            Path of the written file, or None if there was nothing to export.

        Raises:
            OSError: If the file cannot be written.
        """
        if view.result is None:
            return None

        now = self._clock()
        record = build_export_record(view.result, view.content, now)
        path = self.export_dir / f"spam-analysis-{int(now.timestamp() * 1000)}.json"

        self.export_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(record, indent=2, ensure_ascii=False), encoding="utf-8")

        logger.info(f"Exported analysis to {path}")
        return path
