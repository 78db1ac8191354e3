"""
Factory for creating and configuring loggers.

Root loggers own the handlers (console or file). Derived loggers are "views"
that add a name suffix and bound extra fields but emit through the root's
handlers, so reconfiguring the root reconfigures the whole tree.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

from .config import LogConfig
from .exceptions import LogDestinationError
from .formatters import LogFormatter
from .handlers import ReopenableFileHandler
from .logger import Logger


class LoggerFactory:
    """Factory for creating and configuring loggers."""

    @staticmethod
    def create_root(
        config: LogConfig, name: str = "/sigctl", stream: TextIO | None = None
    ) -> Logger:
        """
        Create a root logger with the specified configuration.

        Output goes to config.file when set (through a ReopenableFileHandler),
        otherwise to stream (stderr by default).

        Example:
            >>> lg = LoggerFactory.create_root(LogConfig.from_params("debug"))
            >>> lg.info("listening", extra={"port": 4222})
            [12:34:56,789] [I] listening          [port:4222] [1234] [/sigctl]
        """
        lg = Logger(name, config)
        lg.propagate = False
        lg.addHandler(LoggerFactory._create_handler(config, stream))
        return lg

    @staticmethod
    def _create_handler(config: LogConfig, stream: TextIO | None) -> logging.Handler:
        handler: logging.Handler
        if config.file:
            try:
                handler = ReopenableFileHandler(config.file)
            except OSError as e:
                raise LogDestinationError(config.file, e.strerror or str(e)) from e
            handler.setFormatter(LogFormatter(config, colors=False))
        else:
            handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
            handler.setFormatter(LogFormatter(config))
        return handler

    @staticmethod
    def derive(
        parent: Logger, tags: str | list[str], extra: dict[str, Any] | None = None
    ) -> Logger:
        """
        Derive a child logger sharing the root's handlers.

        Args:
            parent: Root or derived logger
            tags: Name suffix(es), e.g. "listener" -> "/sigctl/listener"
            extra: Fields bound to every record of the child

        Example:
            >>> child = LoggerFactory.derive(lg, "resolver")
            >>> child.name
            '/sigctl/resolver'
        """
        if isinstance(tags, str):
            tags = [tags]
        name = "/".join([parent.name.rstrip("/"), *tags])

        merged = parent.extra
        if extra:
            merged.update(extra)

        child = Logger(name, parent.config, merged)
        child.setLevel(logging.NOTSET)
        child.parent = parent
        child.propagate = False
        child._root_logger = parent.root_logger
        return child

    @staticmethod
    def apply_config(lg: Logger, config: LogConfig) -> None:
        """
        Apply a new configuration to an existing root logger.

        Updates the level and replaces handlers whose destination changed.
        The logger is left unchanged when the new destination cannot be opened.

        Raises:
            LogDestinationError: If the new log file cannot be opened
        """
        root = lg.root_logger
        old = root.config
        replacement = None
        if old.file != config.file or old.colors != config.colors:
            replacement = LoggerFactory._create_handler(config, None)

        root._config = config
        if config.level is False:
            root.disabled = True
        else:
            root.disabled = False
            root.setLevel(config.level)

        if replacement is not None:
            for handler in list(root.handlers):
                root.removeHandler(handler)
                handler.close()
            root.addHandler(replacement)
        else:
            for handler in root.handlers:
                handler.setFormatter(
                    LogFormatter(config, colors=False if config.file else None)
                )
