"""Shared test fixtures for the batch-document driver test suite."""

from collections.abc import Callable
from pathlib import Path

import pytest

from src.control.commands import Command


class FakeChannel:
    """Control channel returning scripted replies and recording commands.

    ``listings`` are returned, in order, for each ``--all_pages`` command;
    the last one repeats once exhausted. Every other command gets ``"OK"``.
    """

    def __init__(self, listings: list[str] | None = None) -> None:
        self.listings = list(listings or [""])
        self.sent: list[list[str]] = []

    def send(self, command: Command) -> str:
        self.sent.append(command.to_payload())
        if command.tokens[0] == "--all_pages":
            if len(self.listings) > 1:
                return self.listings.pop(0)
            return self.listings[0]
        return "OK"

    def sent_with(self, flag: str) -> list[list[str]]:
        """Return the recorded commands whose first token is ``flag``."""
        return [tokens for tokens in self.sent if tokens[0] == flag]


class RecordingSleep:
    """Sleep replacement that records requested delays without waiting."""

    def __init__(self, on_sleep: Callable[[int], None] | None = None) -> None:
        self.calls: list[float] = []
        self.on_sleep = on_sleep

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
        if self.on_sleep is not None:
            self.on_sleep(len(self.calls))


@pytest.fixture
def fake_channel() -> FakeChannel:
    """Channel reporting an empty tab list."""
    return FakeChannel()


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    """Sleep that returns immediately."""
    return RecordingSleep()


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def config_dir(project_root: Path) -> Path:
    """Return the configs directory path."""
    return project_root / "configs"


@pytest.fixture
def make_channel() -> Callable[..., FakeChannel]:
    """Factory for channels with scripted tab listings."""
    return FakeChannel


@pytest.fixture
def make_sleep() -> Callable[..., RecordingSleep]:
    """Factory for recording sleeps with an optional per-call hook."""
    return RecordingSleep
