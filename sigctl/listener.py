"""
In-process signal listener.

SignalListener runs inside the managed process. Signal handlers only enqueue
the signal number; a single background thread drains the queue and invokes the
matching ManagedProcess callback, one signal at a time:

- SIGINT: close the exposed endpoint, log, then exit with status 0
- SIGUSR1: reopen log output
- SIGHUP: reload configuration (failures are logged, never fatal)

SIGKILL (the stop command) cannot be trapped and is not handled here.
"""

from __future__ import annotations

import enum
import logging
import os
import queue
import signal
import threading
from collections.abc import Callable
from types import FrameType
from typing import TYPE_CHECKING, Any, Protocol

from .command import LISTENED_SIGNALS

if TYPE_CHECKING:
    from .config import ControlSettings
    from .log import Logger


class ManagedProcess(Protocol):
    """Callbacks the managed server exposes to the listener."""

    def close_exposed_endpoint(self) -> None:
        """Release any interprocess endpoint (e.g. remove a unix socket path)."""
        ...

    def reopen_log_output(self) -> None:
        """Reopen log files, typically after external rotation."""
        ...

    def reload_configuration(self) -> None:
        """Reload configuration, raising on failure."""
        ...


class ListenerState(enum.Enum):
    """Lifecycle states of a SignalListener."""

    IDLE = "idle"  # constructed, start() not called yet
    INERT = "inert"  # signals disabled, nothing installed
    RUNNING = "running"
    SHUTTING_DOWN = "shutting_down"  # terminal


def exit_process(code: int) -> None:
    """Flush logging and terminate the process immediately."""
    logging.shutdown()
    os._exit(code)


_STOP = object()


class SignalListener:
    """
    Maps received signals to ManagedProcess callbacks.

    Args:
        process: Callback provider
        lg: Logger for diagnostics
        disable_signals: Install nothing and stay inert when True
        exit_func: Called with the exit status on SIGINT (defaults to exit_process)

    Example:
        listener = SignalListener(service, lg)
        listener.start()  # must run in the main thread
    """

    def __init__(
        self,
        process: ManagedProcess,
        lg: Logger | logging.Logger,
        disable_signals: bool = False,
        exit_func: Callable[[int], Any] = exit_process,
    ) -> None:
        self._process = process
        self._lg = lg
        self._disable_signals = disable_signals
        self._exit_func = exit_func
        self._state = ListenerState.IDLE
        self._queue: queue.Queue[Any] = queue.Queue(maxsize=1)
        self._thread: threading.Thread | None = None
        self._original_handlers: dict[signal.Signals, Any] = {}
        self._handlers: dict[int, Callable[[], None]] = {
            signal.SIGINT: self._on_interrupt,
            signal.SIGUSR1: self._on_reopen,
            signal.SIGHUP: self._on_reload,
        }

    @classmethod
    def from_settings(
        cls,
        process: ManagedProcess,
        lg: Logger | logging.Logger,
        settings: ControlSettings,
        **kwargs: Any,
    ) -> SignalListener:
        return cls(process, lg, disable_signals=settings.disable_signals, **kwargs)

    @property
    def state(self) -> ListenerState:
        return self._state

    @property
    def running(self) -> bool:
        return self._state is ListenerState.RUNNING

    def start(self) -> None:
        """Install signal handlers and start the receive loop."""
        if self._state is not ListenerState.IDLE:
            return
        if self._disable_signals:
            self._state = ListenerState.INERT
            self._lg.debug("signal handling disabled")
            return

        for signum in LISTENED_SIGNALS:
            self._original_handlers[signum] = signal.signal(signum, self._enqueue)

        self._state = ListenerState.RUNNING
        self._thread = threading.Thread(
            target=self._loop, name="sigctl-listener", daemon=True
        )
        self._thread.start()

    def uninstall(self, timeout: float = 5.0) -> None:
        """Restore the previous signal handlers and stop the receive loop."""
        for signum, handler in self._original_handlers.items():
            signal.signal(signum, handler)
        self._original_handlers.clear()

        if self._thread is not None:
            if self._thread.is_alive():
                try:
                    self._queue.put(_STOP, timeout=timeout)
                except queue.Full:
                    pass
                self._thread.join(timeout)
            self._thread = None
        if self._state is ListenerState.RUNNING:
            self._state = ListenerState.IDLE

    def handle(self, signum: int) -> None:
        """
        Process one signal synchronously.

        Ignored once the listener is shutting down.
        """
        if self._state is ListenerState.SHUTTING_DOWN:
            return

        handler = self._handlers.get(signum)
        if handler is None:
            self._lg.warning("unexpected signal", extra={"signal": signum})
            return

        self._lg.debug("trapped signal", extra={"signal": signal.Signals(signum).name})
        handler()

    def _enqueue(self, signum: int, frame: FrameType | None) -> None:
        """Signal handler: hand the signal to the receive loop."""
        self._post(signum)

    def _post(self, item: Any) -> None:
        try:
            self._queue.put_nowait(item)
        except queue.Full:
            pass  # coalesce with the signal already pending

    def _loop(self) -> None:
        while self._state is not ListenerState.SHUTTING_DOWN:
            item = self._queue.get()
            if item is _STOP:
                return
            self.handle(item)

    def _on_interrupt(self) -> None:
        try:
            self._process.close_exposed_endpoint()
        except Exception as e:
            self._lg.error("failed to close exposed endpoint", extra={"error": str(e)})
        finally:
            self._lg.info("server exiting")
            self._state = ListenerState.SHUTTING_DOWN
            self._exit_func(0)

    def _on_reopen(self) -> None:
        try:
            self._process.reopen_log_output()
        except Exception as e:
            self._lg.error("failed to reopen log output", extra={"error": str(e)})

    def _on_reload(self) -> None:
        try:
            self._process.reload_configuration()
        except Exception as e:
            self._lg.error(
                "failed to reload server configuration", extra={"error": str(e)}
            )
