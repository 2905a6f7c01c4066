"""Command payloads understood by the Umi-OCR ``/argv`` endpoint.

Each command is the argument vector Umi-OCR would accept on its own
command line, sent as a JSON array of strings.
"""

import json
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    """A single remote instruction as an ordered sequence of string tokens."""

    tokens: tuple[str, ...]

    def to_payload(self) -> list[str]:
        """Return the JSON array body for this command."""
        return list(self.tokens)

    def __str__(self) -> str:
        return " ".join(self.tokens)


def list_tabs() -> Command:
    """Enumerate all open tabs."""
    return Command(("--all_pages",))


def add_tab(page_type: int) -> Command:
    """Open a new tab of the given page type."""
    return Command(("--add_page", str(page_type)))


def remove_tab(index: int) -> Command:
    """Close the tab at ``index``."""
    return Command(("--del_page", str(index)))


def call_function(
    target: str, func: str, args: Sequence[str] | None = None
) -> Command:
    """Invoke ``func`` on the QML module ``target``.

    Args:
        target: Name of the QML module, e.g. ``BatchDOC``.
        func: Function to call on the module.
        args: Optional positional arguments, JSON-encoded as one token.

    Returns:
        The command to send.
    """
    tokens = ["--call_qml", target, "--func", func]
    if args is not None:
        tokens.append(json.dumps(list(args), ensure_ascii=False))
    return Command(tuple(tokens))
