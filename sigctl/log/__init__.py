"""
Logging for sigctl.

Extends Python's standard logging with:
- Structured extra fields rendered as ``[key:value]``
- A TRACE level below DEBUG
- Derived loggers sharing their root's handlers
- File handlers that reopen on demand (log rotation via SIGUSR1)
- Disabling all output with level False or "false"
"""

import logging
from typing import Any

from .config import LogConfig, resolve_level
from .constants import LogConstants
from .exceptions import InvalidLogLevelError, LogDestinationError, LogError
from .factory import LoggerFactory
from .formatters import LogFormatter
from .handlers import ReopenableFileHandler, reopen_file_handlers
from .logger import Logger

logging.addLevelName(LogConstants.CUSTOM_LEVELS["TRACE"], "TRACE")


def create_root_lg(
    level: str | int | bool = "info",
    micros: bool = False,
    colors: bool = True,
    file: str | None = None,
) -> Logger:
    """
    Create a root logger.

    Example:
        >>> lg = create_root_lg("debug", file="/var/log/server.log")
    """
    return LoggerFactory.create_root(LogConfig.from_params(level, micros, colors, file))


def derive_lg(
    lg: Logger, tags: str | list[str], extra: dict[str, Any] | None = None
) -> Logger:
    """Derive a child logger from lg (see LoggerFactory.derive)."""
    return LoggerFactory.derive(lg, tags, extra)


__all__ = [
    "Logger",
    "LoggerFactory",
    "LogConfig",
    "LogConstants",
    "LogFormatter",
    "ReopenableFileHandler",
    "LogError",
    "InvalidLogLevelError",
    "LogDestinationError",
    "create_root_lg",
    "derive_lg",
    "reopen_file_handlers",
    "resolve_level",
]
