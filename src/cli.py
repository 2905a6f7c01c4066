"""Command-line interface for sending one document through Umi-OCR.

Resets the BatchDOC tab, submits the document given with ``--path`` and
blocks until the layered PDF has been written.
"""

import argparse
import sys
from pathlib import Path

from src import __version__
from src.errors import WorkflowError
from src.utils.config import load_config
from src.utils.logger import get_logger, setup_logging
from src.workflow import run_workflow

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="umi-batchdoc",
        description="Process a document with Umi-OCR's batch document tab",
    )
    parser.add_argument(
        "-p", "--path", required=True, help="Path of the document to process"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="YAML configuration file (default: configs/config.yaml)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override the configured log level (DEBUG, INFO, ...)",
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run the workflow.

    Exits with status 0 on success, 1 on any failure and 130 when
    interrupted.

    Args:
        argv: Command-line arguments (defaults to sys.argv).
    """
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
        setup_logging(args.log_level or config.log_level)
        run_workflow(args.path, config)
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        sys.exit(130)
    except WorkflowError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    except Exception as exc:
        logger.debug("Unexpected failure", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    print("Done!")
    sys.exit(0)


if __name__ == "__main__":
    main()
