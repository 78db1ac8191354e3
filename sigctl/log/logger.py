"""
Logger class with structured extra fields.

Extra fields are merged from two places: fields bound to the logger at
creation (``LoggerFactory.derive(lg, "resolver", extra={...})``) and the
``extra`` argument of each call. They are attached to the record under a
private attribute so they can never collide with LogRecord attributes.
"""

from __future__ import annotations

import logging
from typing import Any

from .config import LogConfig
from .constants import LogConstants
from .formatters import EXTRA_ATTR


class Logger(logging.Logger):
    """
    Logger with bound extra fields, a TRACE level and a disabled state.

    Args:
        name: Logger name, by convention a path such as "/sigctl/listener"
        config: Logger configuration (level False disables logging)
        extra: Fields included in every record
    """

    def __init__(
        self,
        name: str,
        config: LogConfig | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        if config is None:
            config = LogConfig()
        if config.level is False:
            super().__init__(name, logging.CRITICAL + 1)
            self._logging_disabled = True
        else:
            super().__init__(name, config.level)
            self._logging_disabled = False
        self._config = config
        self._extra = dict(extra or {})
        self._root_logger: Logger | None = None  # set for derived loggers

    @property
    def config(self) -> LogConfig:
        return self._config

    @property
    def extra(self) -> dict[str, Any]:
        return dict(self._extra)

    @property
    def root_logger(self) -> Logger:
        """Logger owning the handlers (self unless derived)."""
        return self._root_logger if self._root_logger is not None else self

    @property
    def disabled(self) -> bool:  # type: ignore[override]
        return self._logging_disabled

    @disabled.setter
    def disabled(self, value: bool) -> None:
        self._logging_disabled = value

    def makeRecord(  # type: ignore[override]
        self,
        name: str,
        level: int,
        fn: str,
        lno: int,
        msg: Any,
        args: Any,
        exc_info: Any,
        func: str | None = None,
        extra: dict[str, Any] | None = None,
        sinfo: str | None = None,
    ) -> logging.LogRecord:
        """Create a record carrying the merged extra fields."""
        record = super().makeRecord(
            name, level, fn, lno, msg, args, exc_info, func=func, sinfo=sinfo
        )
        merged = self._extra.copy()
        if extra:
            merged.update(extra)
        setattr(record, EXTRA_ATTR, merged)
        return record

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a TRACE level message."""
        level = LogConstants.CUSTOM_LEVELS["TRACE"]
        if self.isEnabledFor(level):
            self._log(level, msg, args, **kwargs)

    def isEnabledFor(self, level: int) -> bool:
        if self._logging_disabled:
            return False
        if self._root_logger is not None and not self._root_logger.isEnabledFor(level):
            return False
        return level >= self.getEffectiveLevel()

    def setLevel(self, level: int | str) -> None:
        super().setLevel(level)
        self._cache.clear()  # type: ignore[attr-defined]

    def callHandlers(self, record: logging.LogRecord) -> None:
        """Derived loggers emit through their root logger's handlers."""
        if self._root_logger is not None:
            self._root_logger.callHandlers(record)
            return
        super().callHandlers(record)
