"""
Configuration for the logging system.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .constants import LogConstants
from .exceptions import InvalidLogLevelError


def resolve_level(level: str | int | bool) -> int | bool:
    """
    Resolve a log level from a name, numeric value, or boolean.

    Args:
        level: Level name ("info", "trace", ...), number, or False to disable

    Returns:
        Numeric level, or False when logging is disabled

    Raises:
        InvalidLogLevelError: If the level name is unknown
    """
    if isinstance(level, bool):
        return logging.INFO if level else False
    if isinstance(level, int):
        return level
    text = str(level).strip().lower()
    if text.isnumeric():
        return int(text)
    if text in LogConstants.LEVEL_NAMES:
        return LogConstants.LEVEL_NAMES[text]
    raise InvalidLogLevelError(level)


@dataclass(frozen=True)
class LogConfig:
    """
    Immutable logger configuration.

    Attributes:
        level: Numeric level, or False to disable logging
        micros: Show microsecond timestamps
        colors: Emit ANSI colors on console output
        file: Optional log file path; console output is used when None
    """

    level: int | bool = logging.INFO
    micros: bool = False
    colors: bool = True
    file: str | None = None

    @classmethod
    def from_params(
        cls,
        level: str | int | bool = "info",
        micros: bool = False,
        colors: bool = True,
        file: str | None = None,
    ) -> LogConfig:
        return cls(level=resolve_level(level), micros=micros, colors=colors, file=file)

    @classmethod
    def from_config(cls, config: Any, section: str = "logging") -> LogConfig:
        """
        Create LogConfig from a configuration mapping.

        Args:
            config: Config instance or plain dict
            section: Dotted path of the logging section (default: "logging")

        Example:
            config = Config("etc/server.yaml")
            log_config = LogConfig.from_config(config)
        """
        current: Any = config
        for part in section.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                current = {}
                break
        if not isinstance(current, dict):
            current = {}

        return cls.from_params(
            level=current.get("level", "info"),
            micros=bool(current.get("micros", False)),
            colors=bool(current.get("colors", True)),
            file=current.get("file"),
        )
