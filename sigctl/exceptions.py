"""
Exception hierarchy for process signal control.

Errors are split by the phase that produced them: argument parsing, target
resolution, and signal delivery. Every error carries a human-readable message
plus optional keyword context, so callers can either print ``str(e)`` or
inspect the structured fields.
"""

import signal
from typing import Any


class SignalControlError(Exception):
    """
    Base exception for all sigctl errors.

    Example:
        try:
            dispatcher.dispatch(Command.RELOAD)
        except SignalControlError as e:
            lg.error("reload failed", extra={"exception": e})
    """

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class InvalidArgumentError(SignalControlError):
    """Raised for caller mistakes: unparseable pid text or a bad command."""

    pass


class UnknownCommandError(InvalidArgumentError):
    """Raised when a command value is not one of the lifecycle commands."""

    def __init__(self, command: Any) -> None:
        self.command = command
        super().__init__(f"unknown signal {str(command)!r}")


class ResolutionError(SignalControlError):
    """Base for failures while determining the target process."""

    pass


class NotRunningError(ResolutionError):
    """Raised when discovery finds no candidate process."""

    def __init__(self, process_name: str) -> None:
        self.process_name = process_name
        super().__init__(f"no {process_name} processes running")


class AmbiguousTargetError(ResolutionError):
    """
    Raised when discovery finds more than one candidate process.

    The message lists every pid found, one per line, in discovery order.
    """

    def __init__(self, process_name: str, pids: list[int]) -> None:
        self.process_name = process_name
        self.pids = list(pids)
        listing = "\n".join(str(pid) for pid in self.pids)
        super().__init__(f"multiple {process_name} processes running:\n{listing}")


class ResolutionUnavailableError(ResolutionError):
    """Raised when the discovery facility fails or returns garbage."""

    def __init__(self, message: str = "unable to resolve pid, try providing one"):
        super().__init__(message)


class DeliveryFailedError(SignalControlError):
    """
    Raised when the OS rejects a signal (no such process, permission denied).

    The original ``OSError`` is chained as ``__cause__``.
    """

    def __init__(self, pid: int, signum: int, reason: str) -> None:
        self.pid = pid
        self.signal = signum
        super().__init__(
            f"failed to deliver signal: {reason}",
            pid=pid,
            signal=signal.Signals(signum).name,
        )


class ConfigError(SignalControlError):
    """
    Configuration-related errors.

    Examples:
        - Config file not found or unreadable
        - Invalid YAML syntax
        - Config file exceeding the size limit
    """

    pass
