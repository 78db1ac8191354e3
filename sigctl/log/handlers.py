"""
File handler that can be reopened on demand.

Log rotation tools (logrotate, newsyslog) move the current log file aside and
then signal the server to reopen its output. ``reopen_file_handlers`` is the
piece that runs on that signal.
"""

from __future__ import annotations

import logging
from pathlib import Path


class ReopenableFileHandler(logging.FileHandler):
    """
    FileHandler whose stream can be closed and reopened at the same path.

    Example:
        handler = ReopenableFileHandler("/var/log/server.log")
        ...  # file renamed by logrotate
        handler.reopen()  # new records go to a fresh /var/log/server.log
    """

    def __init__(
        self,
        filename: str | Path,
        mode: str = "a",
        encoding: str | None = "utf-8",
        delay: bool = False,
    ) -> None:
        path = Path(filename)
        if path.parent != path:
            path.parent.mkdir(parents=True, exist_ok=True)
        super().__init__(path, mode=mode, encoding=encoding, delay=delay)

    def reopen(self) -> None:
        """Close the current stream and open the configured path again."""
        self.acquire()
        try:
            if self.stream is not None:
                self.stream.flush()
                self.stream.close()
            self.stream = self._open()
        finally:
            self.release()


def reopen_file_handlers(lg: logging.Logger) -> int:
    """
    Reopen every ReopenableFileHandler attached to lg (or its root logger).

    Returns:
        Number of handlers reopened

    Raises:
        OSError: If a log file cannot be reopened
    """
    owner = getattr(lg, "root_logger", lg)
    count = 0
    for handler in owner.handlers:
        if isinstance(handler, ReopenableFileHandler):
            handler.reopen()
            count += 1
    return count
