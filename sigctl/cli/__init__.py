"""Command line interface for sending lifecycle signals."""

from .cli import main

__all__ = ["main"]
