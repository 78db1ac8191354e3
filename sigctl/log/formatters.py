"""
Log formatter rendering structured extra fields.

Output layout:
    [12:34:56,789] [I] server exiting              [signal:SIGINT] [1234] [/sigctl]
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from .config import LogConfig
from .constants import LogConstants

EXTRA_ATTR = "__sigctl__extra"


def _format_value(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    if isinstance(value, BaseException):
        return f"{value.__class__.__name__}: {value}"
    return str(value)


class LogFormatter(logging.Formatter):
    """
    Formatter producing the sigctl log line layout.

    Args:
        config: Logging configuration (colors and micros are read from it)
        colors: Override config.colors, e.g. to disable colors for file output
    """

    def __init__(self, config: LogConfig, colors: bool | None = None) -> None:
        super().__init__(LogConstants.DEFAULT_FORMAT)
        self._config = config
        self._colors = config.colors if colors is None else colors

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        ts = datetime.fromtimestamp(record.created)
        if self._config.micros:
            return ts.strftime("%H:%M:%S,%f")
        return ts.strftime("%H:%M:%S,") + f"{int(record.msecs):03d}"

    def format(self, record: logging.LogRecord) -> str:
        record.message = record.getMessage()
        asctime = self.formatTime(record)
        level = record.levelname[:1]
        head = f"[{asctime}] [{level}] {record.message}"

        rule = (
            LogConstants.MICRO_RULE_WIDTH
            if self._config.micros
            else LogConstants.DEFAULT_RULE_WIDTH
        )
        parts = [head + " " * max(1, rule - len(head))]
        fields = self._format_extra(record)
        if fields:
            parts.append(fields + " ")
        parts.append(f"[{record.process}] [{record.name}]")
        line = "".join(parts)

        if self._colors:
            line = self._colorize(record.levelno, line)
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line

    def _format_extra(self, record: logging.LogRecord) -> str:
        extra = getattr(record, EXTRA_ATTR, None)
        if not extra:
            return ""
        return " ".join(f"[{key}:{_format_value(extra[key])}]" for key in sorted(extra))

    @staticmethod
    def _colorize(levelno: int, line: str) -> str:
        color = LogConstants.LEVEL_COLORS.get(levelno, "")
        if not color:
            return line
        return color + line + LogConstants.RESET
