"""
sigctl: control a long-running server process with OS signals.

Outside the server, CommandDispatcher resolves the running instance and sends
it the signal for a lifecycle command. Inside the server, SignalListener maps
received signals to the server's callbacks.

Example:
    from sigctl import Command, process_signal

    process_signal(Command.RELOAD, process_name="gnatsd")
"""

from .command import COMMAND_SIGNALS, LISTENED_SIGNALS, Command, signal_for
from .config import Config, ControlSettings
from .dispatcher import CommandDispatcher, SignalSender, os_signal_sender, process_signal
from .exceptions import (
    AmbiguousTargetError,
    ConfigError,
    DeliveryFailedError,
    InvalidArgumentError,
    NotRunningError,
    ResolutionError,
    ResolutionUnavailableError,
    SignalControlError,
    UnknownCommandError,
)
from .listener import ListenerState, ManagedProcess, SignalListener
from .resolver import PgrepFinder, ProcessFinder, ProcessResolver
from .service import Service
from .version import __version__

__all__ = [
    "__version__",
    # Commands
    "Command",
    "COMMAND_SIGNALS",
    "LISTENED_SIGNALS",
    "signal_for",
    # Control side
    "CommandDispatcher",
    "ProcessResolver",
    "ProcessFinder",
    "PgrepFinder",
    "SignalSender",
    "os_signal_sender",
    "process_signal",
    # Managed side
    "SignalListener",
    "ListenerState",
    "ManagedProcess",
    "Service",
    # Configuration
    "Config",
    "ControlSettings",
    # Errors
    "SignalControlError",
    "InvalidArgumentError",
    "UnknownCommandError",
    "ResolutionError",
    "NotRunningError",
    "AmbiguousTargetError",
    "ResolutionUnavailableError",
    "DeliveryFailedError",
    "ConfigError",
]
