"""
Output abstraction for the CLI.

Errors are rendered with a rich console on stderr; tests swap in
BufferedOutput to inspect them.
"""

from typing import Protocol, TextIO

from rich.console import Console
from rich.markup import escape


class OutputWriter(Protocol):
    """Protocol for CLI output writing."""

    def write(self, text: str = "") -> None:
        """Write a line of regular output."""
        ...

    def error(self, text: str) -> None:
        """Write an error message."""
        ...


class ConsoleOutput:
    """
    Writer backed by rich consoles (stdout for output, stderr for errors).

    Args:
        stream: Regular output stream (defaults to stdout)
        err_stream: Error stream (defaults to stderr)
    """

    def __init__(
        self, stream: TextIO | None = None, err_stream: TextIO | None = None
    ) -> None:
        self._out = Console(file=stream, highlight=False)
        self._err = Console(file=err_stream, stderr=err_stream is None, highlight=False)

    def write(self, text: str = "") -> None:
        self._out.print(text, markup=False)

    def error(self, text: str) -> None:
        self._err.print(f"[bold red]error:[/bold red] {escape(text)}")


class BufferedOutput:
    """
    Writer capturing output and errors in lists.

    Example:
        out = BufferedOutput()
        out.error("no server processes running")
        assert out.errors == ["no server processes running"]
    """

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.errors: list[str] = []

    def write(self, text: str = "") -> None:
        self.lines.append(text)

    def error(self, text: str) -> None:
        self.errors.append(text)
