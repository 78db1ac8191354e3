"""
Command dispatch: deliver a lifecycle command to the running instance.

The dispatcher looks up the command's signal, resolves the target pid and
makes a single delivery attempt. Nothing here retries.
"""

from __future__ import annotations

import os
import signal
from typing import TYPE_CHECKING, Any, Protocol

from .command import Command
from .exceptions import DeliveryFailedError
from .resolver import DEFAULT_PROCESS_NAME, PgrepFinder, ProcessResolver

if TYPE_CHECKING:
    from .config import ControlSettings
    from .log import Logger


class SignalSender(Protocol):
    """Delivers a signal to a pid, raising OSError on failure."""

    def __call__(self, pid: int, signum: signal.Signals) -> None: ...


def os_signal_sender(pid: int, signum: signal.Signals) -> None:
    """SignalSender backed by os.kill."""
    os.kill(pid, signum)


class CommandDispatcher:
    """
    Maps a Command to its signal and delivers it to the resolved process.

    Example:
        resolver = ProcessResolver(PgrepFinder("nginx"), process_name="nginx")
        dispatcher = CommandDispatcher(resolver)
        dispatcher.dispatch(Command.RELOAD)         # discover the pid
        dispatcher.dispatch("reopen", pid_str="42")  # explicit pid
    """

    def __init__(
        self,
        resolver: ProcessResolver,
        sender: SignalSender = os_signal_sender,
        lg: Logger | None = None,
    ) -> None:
        self._resolver = resolver
        self._sender = sender
        self._lg = lg

    @classmethod
    def from_settings(
        cls, settings: ControlSettings, lg: Logger | None = None
    ) -> CommandDispatcher:
        """Build a dispatcher using pgrep discovery configured by settings."""
        finder = PgrepFinder(
            settings.process_name,
            executable=settings.pgrep,
            timeout=settings.timeout,
        )
        resolver = ProcessResolver(finder, settings.process_name, lg=lg)
        return cls(resolver, lg=lg)

    def dispatch(self, command: Command | str, pid_str: str | None = "") -> int:
        """
        Send the signal for command to the target process.

        Args:
            command: Lifecycle command (member or value such as "reload")
            pid_str: Explicit pid text; empty or None resolves by discovery

        Returns:
            The pid that was signalled

        Raises:
            UnknownCommandError: If command is not a lifecycle command
            ResolutionError: If the target cannot be resolved (see ProcessResolver)
            InvalidArgumentError: If pid_str is not a valid pid
            DeliveryFailedError: If the OS rejects the signal
        """
        cmd = Command.parse(command)
        signum = cmd.signal
        pid = self._resolver.resolve(pid_str)

        try:
            self._sender(pid, signum)
        except OSError as e:
            raise DeliveryFailedError(pid, signum, e.strerror or str(e)) from e

        if self._lg is not None:
            self._lg.debug(
                "signal delivered",
                extra={"command": cmd.value, "signal": signum.name, "pid": pid},
            )
        return pid


def process_signal(
    command: Any,
    pid_str: str | None = "",
    process_name: str = DEFAULT_PROCESS_NAME,
) -> int:
    """
    Send command to the single running instance of process_name (or to pid_str).

    Convenience wrapper building a pgrep-backed dispatcher.
    """
    resolver = ProcessResolver(PgrepFinder(process_name), process_name)
    return CommandDispatcher(resolver).dispatch(command, pid_str)
