"""Exception hierarchy for the batch-document workflow."""


class WorkflowError(Exception):
    """Base class for every failure that aborts a workflow run."""


class TransportError(WorkflowError):
    """The control endpoint was unreachable or answered with an error status."""


class ResponseReadError(WorkflowError):
    """The control endpoint answered but its body could not be read."""


class VerificationTimeout(WorkflowError):
    """A freshly opened tab never showed up in the tab listing."""


class FilesystemError(WorkflowError):
    """A metadata query on a watched path failed for a reason other than absence."""
