"""
Lifecycle commands and the signals that carry them.

Each command maps to exactly one signal. The listener inside the managed
process only watches three of them: ``SIGKILL`` (stop) cannot be caught, so a
stop always terminates the target immediately.
"""

import enum
import signal
from typing import Any

from .exceptions import UnknownCommandError


class Command(enum.Enum):
    """Abstract lifecycle operation an operator can request of a running instance."""

    STOP = "stop"
    QUIT = "quit"
    REOPEN = "reopen"
    RELOAD = "reload"

    @classmethod
    def parse(cls, value: Any) -> "Command":
        """
        Resolve a command from a member or its textual value.

        Args:
            value: Command member or name such as "reload" (case-insensitive)

        Returns:
            Matching Command

        Raises:
            UnknownCommandError: If value does not name a lifecycle command
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnknownCommandError(value)

    @property
    def signal(self) -> signal.Signals:
        """Signal delivered for this command."""
        return COMMAND_SIGNALS[self]


COMMAND_SIGNALS: dict[Command, signal.Signals] = {
    Command.STOP: signal.SIGKILL,
    Command.QUIT: signal.SIGINT,
    Command.REOPEN: signal.SIGUSR1,
    Command.RELOAD: signal.SIGHUP,
}

# Signals trapped by SignalListener; SIGKILL is deliberately absent.
LISTENED_SIGNALS: tuple[signal.Signals, ...] = (
    signal.SIGINT,
    signal.SIGUSR1,
    signal.SIGHUP,
)


def signal_for(command: Any) -> signal.Signals:
    """
    Look up the signal for a command value.

    Raises:
        UnknownCommandError: If command is not a lifecycle command
    """
    return COMMAND_SIGNALS[Command.parse(command)]
