"""
Tests for sigctl/command.py.
"""

import signal

import pytest

from sigctl.command import COMMAND_SIGNALS, LISTENED_SIGNALS, Command, signal_for
from sigctl.exceptions import InvalidArgumentError, UnknownCommandError


@pytest.mark.unit
class TestCommandSignals:
    """Test the fixed command to signal mapping."""

    def test_mapping(self):
        assert COMMAND_SIGNALS == {
            Command.STOP: signal.SIGKILL,
            Command.QUIT: signal.SIGINT,
            Command.REOPEN: signal.SIGUSR1,
            Command.RELOAD: signal.SIGHUP,
        }

    def test_mapping_is_bijection(self):
        assert set(COMMAND_SIGNALS) == set(Command)
        assert len(set(COMMAND_SIGNALS.values())) == len(Command)

    def test_signal_property(self):
        assert Command.RELOAD.signal is signal.SIGHUP

    def test_listened_signals_exclude_kill(self):
        assert signal.SIGKILL not in LISTENED_SIGNALS
        assert set(LISTENED_SIGNALS) == {signal.SIGINT, signal.SIGUSR1, signal.SIGHUP}


@pytest.mark.unit
class TestCommandParse:
    """Test Command.parse."""

    @pytest.mark.parametrize("text", ["stop", "quit", "reopen", "reload"])
    def test_parse_value(self, text):
        assert Command.parse(text).value == text

    def test_parse_is_case_insensitive(self):
        assert Command.parse(" RELOAD ") is Command.RELOAD

    def test_parse_member(self):
        assert Command.parse(Command.QUIT) is Command.QUIT

    @pytest.mark.parametrize("value", ["restart", "", "SIGHUP", 1, None])
    def test_parse_unknown(self, value):
        with pytest.raises(UnknownCommandError) as exc_info:
            Command.parse(value)
        assert exc_info.value.command == value

    def test_unknown_command_is_invalid_argument(self):
        with pytest.raises(InvalidArgumentError):
            signal_for("restart")

    def test_unknown_command_message(self):
        assert str(UnknownCommandError("restart")) == "unknown signal 'restart'"

    def test_signal_for(self):
        assert signal_for("quit") is signal.SIGINT
