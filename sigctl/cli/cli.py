"""
sigctl command line.

Usage:
    sigctl reload                 # signal the single running instance
    sigctl quit 1234              # signal pid 1234
    sigctl --name gnatsd reopen
    sigctl --config etc/server.yaml stop

Success is silent. Errors are printed to stderr and exit with status 1.
"""

from __future__ import annotations

import argparse
import dataclasses
from collections.abc import Sequence

from ..command import Command
from ..config import Config, ControlSettings
from ..dispatcher import CommandDispatcher
from ..exceptions import SignalControlError
from ..log import LogConfig, LogError, LoggerFactory
from ..version import version_string
from .output import ConsoleOutput, OutputWriter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sigctl",
        description="Send lifecycle signals to a running server process",
    )
    parser.add_argument(
        "command",
        choices=[c.value for c in Command],
        help="stop (SIGKILL), quit (SIGINT), reopen (SIGUSR1), reload (SIGHUP)",
    )
    parser.add_argument(
        "pid", nargs="?", default="", help="target pid (discovered when omitted)"
    )
    parser.add_argument("-n", "--name", help="process name used for discovery")
    parser.add_argument("-c", "--config", help="YAML configuration file")
    parser.add_argument(
        "-l", "--log-level", default=None, help="log level (default: warning)"
    )
    parser.add_argument("--version", action="version", version=version_string())
    return parser


def _load_settings(args: argparse.Namespace) -> tuple[Config, ControlSettings]:
    config = Config(args.config)
    settings = ControlSettings.from_config(config)
    if args.name:
        settings = dataclasses.replace(settings, process_name=args.name)
    return config, settings


def run(args: argparse.Namespace, out: OutputWriter) -> int:
    """Execute a parsed command line, returning the exit status."""
    try:
        config, settings = _load_settings(args)
        log_config = LogConfig.from_config(config)
        level = args.log_level or config.get("logging.level", "warning")
        log_config = LogConfig.from_params(
            level, log_config.micros, log_config.colors, log_config.file
        )
        lg = LoggerFactory.create_root(log_config, name="/sigctl/cli")
        dispatcher = CommandDispatcher.from_settings(settings, lg=lg)
        dispatcher.dispatch(args.command, args.pid)
    except (SignalControlError, LogError) as e:
        out.error(str(e))
        return 1
    return 0


def main(argv: Sequence[str] | None = None, out: OutputWriter | None = None) -> int:
    """Main entry point for the sigctl console script."""
    args = build_parser().parse_args(argv)
    return run(args, out if out is not None else ConsoleOutput())


if __name__ == "__main__":
    raise SystemExit(main())
