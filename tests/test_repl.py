"""Tests for the interactive loop."""

from collections.abc import Iterator

import pytest

from optline.repl import run_repl


def _reader(lines: list[str]):
    remaining: Iterator[str] = iter(lines)

    def read_line(prompt: str) -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return read_line


def test_repl_prints_outcomes_until_eof(person_config, capsys: pytest.CaptureFixture[str]) -> None:
    run_repl(person_config, read_line=_reader(["--name Ann -v", "", "--bogus"]))

    out = capsys.readouterr().out
    assert "Parsing options for test" in out
    assert "name=Ann\nverbose=present" in out
    assert "ERROR: Invalid argument: --bogus" in out


def test_repl_exit_command_stops_loop(person_config, capsys: pytest.CaptureFixture[str]) -> None:
    run_repl(person_config, read_line=_reader(["quit", "--name Ann"]))

    assert "name=Ann" not in capsys.readouterr().out


def test_repl_json_output(person_config, capsys: pytest.CaptureFixture[str]) -> None:
    run_repl(person_config, as_json=True, read_line=_reader(["--help age"]))

    out = capsys.readouterr().out
    assert '{"help": "-a --age: The age of the person (takes input)\\n"}' in out


def test_repl_keyboard_interrupt_continues(person_config, capsys: pytest.CaptureFixture[str]) -> None:
    calls = {"count": 0}

    def read_line(prompt: str) -> str:
        calls["count"] += 1
        if calls["count"] == 1:
            raise KeyboardInterrupt
        if calls["count"] == 2:
            return "-a 7"
        raise EOFError

    run_repl(person_config, read_line=read_line)

    assert "age=7" in capsys.readouterr().out
