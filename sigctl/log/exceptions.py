"""
Custom exceptions for the logging system.
"""

from typing import Any


class LogError(Exception):
    """Base exception for logging-related errors."""

    pass


class InvalidLogLevelError(LogError):
    """Raised when an invalid log level is specified."""

    def __init__(self, level: Any) -> None:
        self.level = level
        super().__init__(f"Invalid log level: {level}")


class LogDestinationError(LogError):
    """Raised when a log file cannot be opened."""

    def __init__(self, path: Any, reason: str) -> None:
        self.path = path
        super().__init__(f"unable to open log file {path}: {reason}")
