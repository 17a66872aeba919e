"""Tests for the executor module."""

import stat

import pytest

from myshell.config import ShellConfig
from myshell.executor import run_external
from myshell.request import CommandRequest, CommandResult


def write_script(directory, name, body, executable=True):
    path = directory / name
    path.write_text(f"#!/bin/sh\n{body}\n")
    if executable:
        path.chmod(path.stat().st_mode | stat.S_IXUSR)
    return path


@pytest.fixture
def bindir(tmp_path):
    d = tmp_path / "bin"
    d.mkdir()
    return d


@pytest.fixture
def config(bindir):
    return ShellConfig(search_path=(str(bindir),))


class TestRunExternal:
    def test_captures_stdout(self, bindir, config):
        write_script(bindir, "greet", 'echo "hello $1"')
        result = run_external(CommandRequest("greet", ("world",)), config)
        assert result == CommandResult(stdout="hello world\n")

    def test_captures_stderr(self, bindir, config):
        write_script(bindir, "warn", "echo oops >&2")
        result = run_external(CommandRequest("warn"), config)
        assert result == CommandResult(stderr="oops\n")

    def test_arguments_passed_verbatim(self, bindir, config):
        write_script(bindir, "args", 'for a in "$@"; do echo "[$a]"; done')
        result = run_external(CommandRequest("args", ("a b", "c")), config)
        assert result.stdout == "[a b]\n[c]\n"

    def test_argv0_is_typed_name(self, bindir, config):
        write_script(bindir, "me", 'echo "$0"')
        assert run_external(CommandRequest("me"), config).stdout.strip().endswith("me")

    def test_nonzero_exit_not_reported(self, bindir, config):
        write_script(bindir, "fails", "echo partial; exit 3")
        result = run_external(CommandRequest("fails"), config)
        assert result == CommandResult(stdout="partial\n")

    def test_stdin_is_empty(self, bindir, config):
        write_script(bindir, "reader", "cat; echo done")
        assert run_external(CommandRequest("reader"), config).stdout == "done\n"

    def test_command_not_found(self, config):
        result = run_external(CommandRequest("nonexistent_cmd_xyz"), config)
        assert result == CommandResult(stderr="nonexistent_cmd_xyz: command not found\n")

    def test_not_executable(self, bindir, config):
        write_script(bindir, "noexec", "echo hi", executable=False)
        result = run_external(CommandRequest("noexec"), config)
        assert result.stdout == ""
        assert result.stderr.startswith("noexec: ")
        assert not result.terminate

    def test_binary_output_round_trips(self, tmp_path):
        payload = b"\xff\xfeAB\x80\n"
        blob = tmp_path / "blob.bin"
        blob.write_bytes(payload)
        result = run_external(CommandRequest("cat", (str(blob),)), ShellConfig.from_environ())
        assert result.stdout.encode("utf-8", "surrogateescape") == payload
