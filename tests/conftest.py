"""
Pytest configuration and shared fixtures.

Provides markers, logging fixtures, and fakes for the discovery facility and
signal delivery.
"""

import io
import os
import subprocess
from collections.abc import Generator
from pathlib import Path

import pytest

from sigctl.log import LogConfig, Logger, LoggerFactory


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (real signals, subprocesses)"
    )
    config.addinivalue_line("markers", "property: Property-based tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests (multiple processes)")


# =============================================================================
# Fakes
# =============================================================================


class FakeFinder:
    """
    ProcessFinder returning canned output.

    Args:
        output: Stdout bytes to return
        returncode: Non-zero to raise CalledProcessError with that status
        error: Exception to raise instead
    """

    no_match_status = 1

    def __init__(
        self,
        output: bytes = b"",
        returncode: int = 0,
        error: BaseException | None = None,
    ) -> None:
        self.output = output
        self.returncode = returncode
        self.error = error
        self.calls = 0

    def __call__(self) -> bytes:
        self.calls += 1
        if self.error is not None:
            raise self.error
        if self.returncode:
            raise subprocess.CalledProcessError(
                self.returncode, ["pgrep", "server"], output=self.output
            )
        return self.output


class RecordingSender:
    """SignalSender recording deliveries, optionally failing."""

    def __init__(self, error: OSError | None = None) -> None:
        self.sent: list[tuple[int, int]] = []
        self.error = error

    def __call__(self, pid: int, signum: int) -> None:
        if self.error is not None:
            raise self.error
        self.sent.append((pid, signum))


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def log_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def lg(log_stream: io.StringIO) -> Generator[Logger, None, None]:
    """Debug-level root logger writing uncolored lines to log_stream."""
    logger = LoggerFactory.create_root(
        LogConfig.from_params("debug", colors=False), name="/test", stream=log_stream
    )
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "server.yaml"
    path.write_text(
        "control:\n"
        "  process_name: gnatsd\n"
        "  disable_signals: false\n"
        "logging:\n"
        "  level: info\n"
    )
    return path


@pytest.fixture(autouse=True)
def clear_sigctl_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep SIGCTL_* variables from the environment out of tests."""
    for key in list(os.environ):
        if key.startswith("SIGCTL_"):
            monkeypatch.delenv(key)


@pytest.fixture
def make_finder() -> type[FakeFinder]:
    """Factory for FakeFinder instances."""
    return FakeFinder


@pytest.fixture
def sender() -> RecordingSender:
    return RecordingSender()


@pytest.fixture
def failing_sender() -> type[RecordingSender]:
    """Factory for senders raising the given OSError."""
    return RecordingSender
