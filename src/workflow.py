"""End-to-end batch-document workflow.

Resets the BatchDOC tab, submits one document, starts processing and
waits for the layered PDF to be written. Steps run strictly one after
another and the first failure aborts the run.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass, field

from src.control.channel import ControlChannel, HttpControlChannel
from src.jobs.submission import JobSubmitter
from src.utils.config import AppConfig, load_config
from src.utils.logger import get_logger
from src.watch.completion import CompletionWatcher, WatchOutcome
from src.watch.paths import derive_output_path, normalize_path
from src.workspace.lifecycle import WorkspaceManager

logger = get_logger(__name__)


@dataclass
class WorkflowResult:
    """Summary of a completed workflow run."""

    document_path: str
    output_path: str
    outcome: WatchOutcome
    verify_attempts: int
    closed_indices: list[int] = field(default_factory=list)


class WorkflowDriver:
    """Sequences workspace reset, submission and completion watching.

    Args:
        channel: Control channel to the Umi-OCR instance.
        config: Application configuration.
        sleep: Sleep function shared by every step, replaceable in tests.
    """

    def __init__(
        self,
        channel: ControlChannel,
        config: AppConfig | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = config or AppConfig()
        self.workspace = WorkspaceManager(channel, self.config.workspace, sleep)
        self.submitter = JobSubmitter(channel, self.config.workspace, sleep)
        self.watcher = CompletionWatcher(self.config.watch.poll_interval, sleep)

    def run(self, path: str) -> WorkflowResult:
        """Process one document through Umi-OCR.

        Args:
            path: Input document path, in any separator style.

        Returns:
            Summary of the run.

        Raises:
            ValueError: If ``path`` has no file name. Nothing is sent to
                Umi-OCR in that case.
        """
        document_path = normalize_path(path)
        output_path = derive_output_path(
            document_path,
            self.config.watch.output_suffix,
            self.config.watch.output_extension,
        )

        closed, attempts = self.workspace.reset()
        self.submitter.submit(document_path)
        outcome = self.watcher.wait(output_path)

        logger.info("Workflow finished for %s -> %s", document_path, output_path)
        return WorkflowResult(
            document_path=document_path,
            output_path=output_path,
            outcome=outcome,
            verify_attempts=attempts,
            closed_indices=closed,
        )


def run_workflow(path: str, config: AppConfig | None = None) -> WorkflowResult:
    """Run the workflow against the endpoint named in the configuration."""
    config = config or load_config()
    channel = HttpControlChannel(config.control.url, config.control.timeout)
    return WorkflowDriver(channel, config).run(path)
