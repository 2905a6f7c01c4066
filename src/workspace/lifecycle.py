"""BatchDOC tab lifecycle: close leftovers, open a fresh tab, confirm it.

Umi-OCR acknowledges tab commands before it has applied them, so every
step is followed by a settle delay and the new tab is confirmed by
polling the listing a bounded number of times.
"""

import time
from collections.abc import Callable

from src.control.channel import ControlChannel
from src.control.commands import add_tab, list_tabs, remove_tab
from src.errors import VerificationTimeout
from src.utils.config import WorkspaceConfig
from src.utils.logger import get_logger

from .inspector import contains_fresh_entry, extract_stale_indices

logger = get_logger(__name__)


class WorkspaceManager:
    """Guarantees exactly one fresh, visible BatchDOC tab.

    The tab list is never cached: every decision re-reads it from the
    remote application.

    Args:
        channel: Control channel to the Umi-OCR instance.
        config: Tab naming and timing settings.
        sleep: Sleep function, replaceable in tests.
    """

    def __init__(
        self,
        channel: ControlChannel,
        config: WorkspaceConfig | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.channel = channel
        self.config = config or WorkspaceConfig()
        self.sleep = sleep

    def list_tabs(self) -> str:
        """Fetch the current tab listing."""
        return self.channel.send(list_tabs())

    def close_stale(self) -> list[int]:
        """Close every tab left over from earlier runs.

        Tabs are closed from the highest index down so that closing one
        never renumbers a tab still waiting to be closed.

        Returns:
            The closed indices, in closing order.
        """
        indices = extract_stale_indices(self.list_tabs(), self.config.tab_name)
        closed: list[int] = []
        for index in sorted(indices, reverse=True):
            logger.info("Closing %s tab with index %d...", self.config.tab_name, index)
            self.channel.send(remove_tab(index))
            logger.info("%s tab with index %d closed.", self.config.tab_name, index)
            closed.append(index)
            self.sleep(self.config.settle_delay)
        return closed

    def open_fresh(self) -> None:
        """Open a new BatchDOC tab and let the application settle."""
        logger.info("Opening %s tab...", self.config.tab_name)
        self.channel.send(add_tab(self.config.page_type))
        logger.info("%s tab opened.", self.config.tab_name)
        self.sleep(self.config.settle_delay)

    def verify(self) -> int:
        """Poll the listing until the fresh tab is visible.

        Returns:
            The 1-based attempt on which the tab was found.

        Raises:
            VerificationTimeout: If the tab is not visible after
                ``max_attempts`` listings.
        """
        name = self.config.tab_name
        attempts = self.config.max_attempts
        for attempt in range(1, attempts + 1):
            if contains_fresh_entry(self.list_tabs(), name):
                logger.info("%s found on attempt %d.", name, attempt)
                return attempt
            if attempt < attempts:
                logger.info("%s not found on attempt %d. Retrying...", name, attempt)
                self.sleep(self.config.retry_delay)
        raise VerificationTimeout(
            f"{name} tab was not found after {attempts} attempts"
        )

    def reset(self) -> tuple[list[int], int]:
        """Close stale tabs, open a fresh one and confirm it.

        Returns:
            The closed indices and the verification attempt count.
        """
        closed = self.close_stale()
        self.open_fresh()
        return closed, self.verify()
