"""Completion detection by watching the output file.

Umi-OCR has no completion callback, so a job counts as finished when its
output file appears or, if a result from an earlier run is already there,
when that file's modification time changes.
"""

import os
import time
from collections.abc import Callable
from enum import StrEnum
from pathlib import Path

from src.errors import FilesystemError
from src.utils.logger import get_logger

logger = get_logger(__name__)


class WatchOutcome(StrEnum):
    """How completion was observed."""

    CREATED = "created"
    OVERWRITTEN = "overwritten"


class CompletionWatcher:
    """Polls a path until it is created or overwritten.

    The wait is unbounded. Callers wanting a deadline must cancel from
    outside, e.g. with ``KeyboardInterrupt``.

    Args:
        poll_interval: Seconds between polls.
        sleep: Sleep function, replaceable in tests.
    """

    def __init__(
        self,
        poll_interval: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.poll_interval = poll_interval
        self.sleep = sleep

    def wait(self, path: str | Path) -> WatchOutcome:
        """Block until ``path`` is produced or refreshed.

        The branch is chosen once, when watching starts.

        Args:
            path: Output file to watch.

        Returns:
            ``OVERWRITTEN`` if the file existed at start and its
            modification time changed, ``CREATED`` if it did not exist
            and then appeared.

        Raises:
            FilesystemError: If the file cannot be inspected for a reason
                other than absence.
        """
        path = Path(path)
        initial = self._modified_ns(path)

        if initial is not None:
            logger.info("Waiting for document at path %s to be overwritten", path)
            while True:
                self.sleep(self.poll_interval)
                current = self._modified_ns(path)
                if current is not None and current != initial:
                    logger.info("Document at path %s has been overwritten", path)
                    return WatchOutcome.OVERWRITTEN

        logger.info("Waiting for document to exist at path: %s", path)
        while True:
            self.sleep(self.poll_interval)
            if self._modified_ns(path) is not None:
                logger.info("Document detected at path: %s", path)
                return WatchOutcome.CREATED

    @staticmethod
    def _modified_ns(path: Path) -> int | None:
        """Return the modification time in nanoseconds, or None if absent."""
        try:
            return os.stat(path).st_mtime_ns
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise FilesystemError(f"Cannot inspect {path}: {exc}") from exc
