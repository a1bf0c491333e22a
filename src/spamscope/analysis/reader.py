# =============================================================================
# File Content Reader
# =============================================================================
# Turns a user-selected file into text so it can be previewed and counted.
#
# Design notes:
#   - Reads are scheduled as tasks on the running event loop; no threads.
#   - Each read fires exactly one callback: on_load(text) or on_error(error).
#   - Starting a new read supersedes the pending one. Every read captures a
#     generation number and a completion whose generation is no longer the
#     latest fires neither callback.
#   - Bytes are decoded as UTF-8 with a BOM stripped and undecodable bytes
#     replaced, the same way a browser's readAsText() treats them.
# =============================================================================

import asyncio
import logging
from pathlib import Path
from typing import Callable

logger = logging.getLogger(__name__)

# Callback types
LoadCallback = Callable[[str], None]
ErrorCallback = Callable[["FileReadError"], None]


class FileContentReader:
    """
    Single-slot asynchronous text reader.

    Usage:
        >>> reader = FileContentReader()
        >>> task = reader.read_as_text(path, on_load=show, on_error=complain)
        >>> await task
    """

    ENCODING = "utf-8-sig"

    def __init__(self) -> None:
        """Initialize the reader."""
        self._generation = 0
        self._pending: asyncio.Task | None = None

    @property
    def is_reading(self) -> bool:
        """Returns True while the latest read has not completed."""
        return self._pending is not None and not self._pending.done()

    def read_as_text(
        self,
        path: Path,
        on_load: LoadCallback,
        on_error: ErrorCallback,
    ) -> asyncio.Task:
        """
        Start reading a file, superseding any read still pending.

        Must be called from inside a running event loop.

        Args:
            path: File to read.
            on_load: Called with the decoded text on success.
            on_error: Called with a FileReadError on failure.

        Returns:
            The task performing the read.
        """
        self._generation += 1
        generation = self._generation
        path = Path(path)

        if self.is_reading:
            logger.debug(f"Superseding pending read with {path.name}")

        self._pending = asyncio.get_running_loop().create_task(
            self._read(path, generation, on_load, on_error),
            name=f"read-{path.name}",
        )
        return self._pending

    async def _read(
        self,
        path: Path,
        generation: int,
        on_load: LoadCallback,
        on_error: ErrorCallback,
    ) -> None:
        # Yield once so the caller finishes its own state update first
        await asyncio.sleep(0)

        try:
            text = path.read_bytes().decode(self.ENCODING, errors="replace")
        except OSError as e:
            if generation != self._generation:
                logger.debug(f"Dropping stale read failure for {path.name}")
                return
            logger.warning(f"Failed to read {path}: {e}")
            on_error(FileReadError(f"Could not read {path.name}: {e}"))
            return

        if generation != self._generation:
            logger.debug(f"Dropping stale read result for {path.name}")
            return

        logger.debug(f"Read {len(text)} chars from {path.name}")
        on_load(text)


class FileReadError(Exception):
    """Raised (via the error callback) when a file cannot be read."""
    pass
