"""Logging helpers shared by the CLI and the workflow modules.

Progress of a run (tabs closed, document queued, output detected) goes to
stdout through the root logger; errors still reach stderr via the CLI.
"""

import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Attach a stdout handler to the root logger and set its level.

    Calling it again only changes the level, so a ``--log-level`` given
    after an earlier setup still applies. Unknown level names fall back
    to INFO.

    Args:
        level: Level name such as ``"DEBUG"`` or ``"warning"``.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(numeric_level)

    if root.handlers:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module, usually called with ``__name__``."""
    return logging.getLogger(name)
