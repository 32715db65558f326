"""Tests for running the display query command.

The subprocess call is replaced by a fake runner recording its arguments.
"""

import logging
import subprocess

import pytest

from randrprops.errors import QueryError
from randrprops.query import DEFAULT_COMMAND, query_props


class FakeRunner:
    def __init__(self, returncode: int = 0, stdout: bytes = b"", stderr: bytes = b"") -> None:
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.calls: list[tuple[tuple[str, ...], dict]] = []

    def __call__(self, command, **kwargs):
        self.calls.append((command, kwargs))
        return subprocess.CompletedProcess(command, self.returncode, self.stdout, self.stderr)


def failing_runner(exc: BaseException):
    def run(command, **kwargs):
        raise exc

    return run


class TestQueryProps:
    def test_returns_stdout(self, sample_report: bytes) -> None:
        runner = FakeRunner(stdout=sample_report)
        assert query_props(runner=runner) == sample_report

    def test_default_command(self) -> None:
        runner = FakeRunner()
        query_props(runner=runner)
        command, kwargs = runner.calls[0]
        assert command == DEFAULT_COMMAND == ("xrandr", "--props")
        assert kwargs["capture_output"] is True
        assert kwargs["check"] is False
        assert kwargs["timeout"] is None
        assert "env" not in kwargs

    def test_custom_command_and_timeout(self) -> None:
        runner = FakeRunner()
        query_props(["xrandr", "--props", "--verbose"], timeout=2.5, runner=runner)
        command, kwargs = runner.calls[0]
        assert command == ("xrandr", "--props", "--verbose")
        assert kwargs["timeout"] == 2.5

    def test_display_sets_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOME", "/home/test")
        runner = FakeRunner()
        query_props(display=":1", runner=runner)
        env = runner.calls[0][1]["env"]
        assert env["DISPLAY"] == ":1"
        assert env["HOME"] == "/home/test"

    def test_stderr_without_failure_is_logged(self, caplog) -> None:
        runner = FakeRunner(stdout=b"Screen 0", stderr=b"warning: output HDMI-2 not found")
        with caplog.at_level(logging.WARNING, logger="randrprops"):
            assert query_props(runner=runner) == b"Screen 0"
        assert "HDMI-2 not found" in caplog.text


class TestQueryErrors:
    def test_non_zero_exit(self) -> None:
        runner = FakeRunner(returncode=1, stderr=b"Can't open display :9\n")
        with pytest.raises(QueryError) as exc_info:
            query_props(runner=runner)
        error = exc_info.value
        assert error.returncode == 1
        assert error.command == ("xrandr", "--props")
        assert "Can't open display :9" in error.stderr
        assert str(error) == "'xrandr --props' exited with status 1: Can't open display :9"

    def test_missing_binary(self) -> None:
        runner = failing_runner(FileNotFoundError(2, "No such file or directory", "xrandr"))
        with pytest.raises(QueryError) as exc_info:
            query_props(runner=runner)
        assert exc_info.value.returncode is None
        assert str(exc_info.value).startswith("could not run 'xrandr --props'")
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_timeout(self) -> None:
        runner = failing_runner(subprocess.TimeoutExpired(["xrandr", "--props"], 1.0))
        with pytest.raises(QueryError) as exc_info:
            query_props(timeout=1.0, runner=runner)
        assert exc_info.value.returncode is None
        assert "timed out" in exc_info.value.stderr
