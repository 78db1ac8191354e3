"""Property-based tests for pid resolution and command mapping."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from sigctl.command import COMMAND_SIGNALS, Command
from sigctl.exceptions import (
    AmbiguousTargetError,
    InvalidArgumentError,
    UnknownCommandError,
)
from sigctl.resolver import ProcessResolver

pids = st.integers(min_value=1, max_value=4_194_304)


class _CountingFinder:
    no_match_status = 1

    def __init__(self, output: bytes = b"") -> None:
        self.output = output
        self.calls = 0

    def __call__(self) -> bytes:
        self.calls += 1
        return self.output


@pytest.mark.property
@pytest.mark.unit
class TestResolverProperties:
    @given(pid=pids)
    def test_explicit_pid_returned_without_discovery(self, pid: int) -> None:
        finder = _CountingFinder(b"1\n2\n")
        assert ProcessResolver(finder, own_pid=3).resolve(str(pid)) == pid
        assert finder.calls == 0

    @given(text=st.text(min_size=1, max_size=20))
    @settings(max_examples=200)
    def test_non_numeric_text_is_invalid(self, text: str) -> None:
        stripped = text.strip()
        if stripped.isascii() and stripped.isdigit() and int(stripped) > 0:
            return
        finder = _CountingFinder()
        with pytest.raises(InvalidArgumentError):
            ProcessResolver(finder).resolve(text)
        assert finder.calls == 0

    @given(own=pids, other=pids, own_first=st.booleans())
    def test_own_pid_excluded(self, own: int, other: int, own_first: bool) -> None:
        if own == other:
            return
        lines = [own, other] if own_first else [other, own]
        output = "".join(f"{p}\n" for p in lines).encode()
        resolver = ProcessResolver(_CountingFinder(output), own_pid=own)
        assert resolver.resolve() == other

    @given(found=st.lists(pids, min_size=2, max_size=10, unique=True))
    def test_ambiguous_lists_all_in_order(self, found: list[int]) -> None:
        output = "\n".join(str(p) for p in found).encode() + b"\n"
        resolver = ProcessResolver(_CountingFinder(output), "srv", own_pid=0)

        with pytest.raises(AmbiguousTargetError) as exc_info:
            resolver.resolve()

        assert exc_info.value.pids == found
        assert str(exc_info.value).split("\n")[1:] == [str(p) for p in found]

    @given(value=st.text(max_size=12))
    def test_unknown_commands_rejected(self, value: str) -> None:
        if value.strip().lower() in {c.value for c in Command}:
            return
        with pytest.raises(UnknownCommandError):
            Command.parse(value)

    def test_command_mapping_is_total_bijection(self) -> None:
        assert set(COMMAND_SIGNALS) == set(Command)
        assert len(set(COMMAND_SIGNALS.values())) == len(COMMAND_SIGNALS)
