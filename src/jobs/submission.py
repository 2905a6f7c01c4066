"""Submission of a document to the BatchDOC tab."""

import time
from collections.abc import Callable

from src.control.channel import ControlChannel
from src.control.commands import call_function
from src.utils.config import WorkspaceConfig
from src.utils.logger import get_logger

logger = get_logger(__name__)

ADD_DOCS_FUNC = "addDocs"
START_FUNC = "docStart"


class JobSubmitter:
    """Adds a document to the verified tab and starts processing.

    Neither step is retried: after a partial failure the state of the
    remote queue is unknown.

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

    def add_document(self, path: str) -> None:
        """Queue ``path`` in the BatchDOC tab."""
        logger.info("Adding document from path %s...", path)
        self.channel.send(call_function(self.config.tab_name, ADD_DOCS_FUNC, [path]))
        logger.info("Documents added.")

    def start(self) -> None:
        """Start processing the queued documents."""
        logger.info("Starting document processing...")
        self.channel.send(call_function(self.config.tab_name, START_FUNC))
        logger.info("Document processing started.")

    def submit(self, path: str) -> None:
        """Add ``path`` and start processing, with a settle delay in between."""
        self.add_document(path)
        self.sleep(self.config.settle_delay)
        self.start()
