"""
Reference ManagedProcess for servers built on sigctl's config and logging.

Service implements the three listener callbacks:

- close_exposed_endpoint: remove the unix socket path, if any
- reopen_log_output: reopen the root logger's file handlers
- reload_configuration: re-read the YAML config and re-apply logging settings
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

from .config import Config, ControlSettings
from .exceptions import ConfigError
from .listener import SignalListener
from .log import LogConfig, LogError, Logger, LoggerFactory, reopen_file_handlers


class Service:
    """
    Managed process wiring config, logging and an optional unix socket.

    Args:
        config: Loaded configuration
        lg: Root logger of the server
        socket_path: Unix socket removed on graceful shutdown
        on_reload: Called with the reloaded config after logging is re-applied

    Example:
        config = Config("etc/server.yaml")
        lg = LoggerFactory.create_root(LogConfig.from_config(config))
        service = Service(config, lg, socket_path="/run/server.sock")
        service.listen()
    """

    def __init__(
        self,
        config: Config,
        lg: Logger,
        socket_path: str | Path | None = None,
        on_reload: Callable[[Config], Any] | None = None,
    ) -> None:
        self.config = config
        self.lg = lg
        self.socket_path = Path(socket_path) if socket_path else None
        self._on_reload = on_reload

    @property
    def settings(self) -> ControlSettings:
        return ControlSettings.from_config(self.config)

    def listen(self, **kwargs: Any) -> SignalListener:
        """Create and start a SignalListener for this service."""
        listener = SignalListener.from_settings(
            self, LoggerFactory.derive(self.lg, "signals"), self.settings, **kwargs
        )
        listener.start()
        return listener

    def close_exposed_endpoint(self) -> None:
        if self.socket_path is None:
            return
        try:
            os.unlink(self.socket_path)
        except FileNotFoundError:
            return
        except OSError as e:
            self.lg.warning(
                "failed to remove unix socket",
                extra={"path": str(self.socket_path), "error": str(e)},
            )
            return
        self.lg.debug("removed unix socket", extra={"path": str(self.socket_path)})

    def reopen_log_output(self) -> None:
        count = reopen_file_handlers(self.lg)
        self.lg.debug("reopened log files", extra={"handlers": count})

    def reload_configuration(self) -> None:
        """
        Reload the config file and apply its logging section.

        The running config is replaced only after the new one validates.

        Raises:
            ConfigError: If the file cannot be read, parsed, or validated
        """
        fresh = self.config.load_fresh()
        ControlSettings.from_config(fresh)  # validate
        try:
            LoggerFactory.apply_config(self.lg, LogConfig.from_config(fresh))
        except LogError as e:
            raise ConfigError(f"invalid logging configuration: {e}") from e
        self.config.replace(fresh)
        if self._on_reload is not None:
            self._on_reload(self.config)
        self.lg.info("reloaded configuration", extra={"path": str(self.config.path)})
