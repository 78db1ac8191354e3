"""
Target process resolution.

ProcessResolver turns an optional caller-supplied pid into exactly one target
pid. When no pid is given it asks a ProcessFinder (pgrep by default) for the
running instances of the managed program and refuses to guess when it finds
none or several.
"""

from __future__ import annotations

import os
import subprocess
from typing import TYPE_CHECKING, Protocol

from .exceptions import (
    AmbiguousTargetError,
    InvalidArgumentError,
    NotRunningError,
    ResolutionUnavailableError,
)

if TYPE_CHECKING:
    from .log import Logger

DEFAULT_PROCESS_NAME = "server"

# pgrep exits 1 when no process matched
PGREP_NO_MATCH_STATUS = 1


class ProcessFinder(Protocol):
    """
    Discovery facility listing pids of the managed program.

    Returns raw stdout (newline separated pids). A non-zero exit is reported by
    raising ``subprocess.CalledProcessError``; any other failure by raising the
    underlying exception (``OSError``, ``subprocess.TimeoutExpired``).
    """

    no_match_status: int

    def __call__(self) -> bytes: ...


class PgrepFinder:
    """
    ProcessFinder backed by the ``pgrep`` executable.

    Example:
        finder = PgrepFinder("nginx")
        finder()  # b"1234\\n5678\\n"
    """

    no_match_status = PGREP_NO_MATCH_STATUS

    def __init__(
        self,
        process_name: str = DEFAULT_PROCESS_NAME,
        executable: str = "pgrep",
        timeout: float | None = None,
    ) -> None:
        self.process_name = process_name
        self.executable = executable
        self.timeout = timeout

    def __call__(self) -> bytes:
        result = subprocess.run(
            [self.executable, self.process_name],
            capture_output=True,
            check=True,
            timeout=self.timeout,
        )
        return result.stdout

    def __repr__(self) -> str:
        return f"PgrepFinder({self.process_name!r}, executable={self.executable!r})"


def parse_pid(text: str) -> int | None:
    """Parse a positive decimal pid, returning None if text is not one."""
    text = text.strip()
    if not (text.isascii() and text.isdigit()):
        return None
    pid = int(text)
    return pid if pid > 0 else None


class ProcessResolver:
    """
    Resolves exactly one target pid.

    Args:
        finder: Discovery facility used when no pid is supplied
        process_name: Name of the managed program, used in error messages
        own_pid: Pid excluded from discovery results (defaults to os.getpid())
        lg: Optional logger for trace output
    """

    def __init__(
        self,
        finder: ProcessFinder,
        process_name: str = DEFAULT_PROCESS_NAME,
        own_pid: int | None = None,
        lg: Logger | None = None,
    ) -> None:
        self._finder = finder
        self._process_name = process_name
        self._own_pid = own_pid
        self._lg = lg

    @property
    def process_name(self) -> str:
        return self._process_name

    def resolve(self, pid_str: str | int | None = "") -> int:
        """
        Resolve the target pid.

        Args:
            pid_str: Explicit pid (text or int); empty or None triggers discovery

        Returns:
            Target pid

        Raises:
            InvalidArgumentError: If pid_str is not a positive integer
            NotRunningError: If discovery finds no process
            AmbiguousTargetError: If discovery finds several processes
            ResolutionUnavailableError: If discovery fails
        """
        if pid_str is not None and pid_str != "":
            pid = parse_pid(str(pid_str))
            if pid is None:
                raise InvalidArgumentError(f"invalid pid: {pid_str}")
            return pid

        pids = self.discover()
        if not pids:
            raise NotRunningError(self._process_name)
        if len(pids) > 1:
            raise AmbiguousTargetError(self._process_name, pids)
        return pids[0]

    def discover(self) -> list[int]:
        """
        List candidate pids in discovery order, excluding our own process.

        Raises:
            ResolutionUnavailableError: If the finder fails or its output is malformed
        """
        output = self._run_finder()
        own_pid = self._own_pid if self._own_pid is not None else os.getpid()

        pids = []
        for line in output.decode("ascii", errors="replace").split("\n"):
            if not line.strip():
                continue
            pid = parse_pid(line)
            if pid is None:
                raise ResolutionUnavailableError()
            if pid == own_pid:
                continue
            pids.append(pid)

        if self._lg is not None:
            self._lg.debug(
                "discovered processes",
                extra={"name": self._process_name, "pids": pids},
            )
        return pids

    def _run_finder(self) -> bytes:
        """Run the finder, mapping its "no match" exit status to empty output."""
        no_match = getattr(self._finder, "no_match_status", PGREP_NO_MATCH_STATUS)
        try:
            return self._finder()
        except subprocess.CalledProcessError as e:
            if e.returncode == no_match:
                return e.output or b""
            raise ResolutionUnavailableError() from e
        except (OSError, subprocess.SubprocessError) as e:
            raise ResolutionUnavailableError() from e
