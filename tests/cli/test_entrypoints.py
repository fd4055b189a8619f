"""Tests for the portprobe command-line interface."""

import errno
import json
import socket
import subprocess
import sys

import pytest

from portprobe import cli
from portprobe.core.errors import PortUnavailableError
from portprobe.types import MAX_PORT, MIN_PORT, PortProtocol


@pytest.mark.parametrize("command", ["tcp", "udp", "dual"])
def test_probe_commands_print_port(capsys, command):
    exit_code = cli.main([command])

    out = capsys.readouterr().out.strip()
    assert exit_code == 0
    assert out.isdigit()
    assert MIN_PORT <= int(out) <= MAX_PORT


def test_verbose_prints_json(capsys):
    exit_code = cli.main(["-v", "dual"])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload["protocol"] == "dual"
    assert MIN_PORT <= payload["port"] <= MAX_PORT


def test_probe_failure_exit_code(monkeypatch, capsys):
    """Verify PortUnavailableError maps to exit code 1 with the error on stderr."""

    def failing_probe(protocol):
        raise PortUnavailableError(PortProtocol(protocol), 0, OSError(errno.EMFILE, "Too many open files"))

    monkeypatch.setattr(cli, "probe_port", failing_probe)

    exit_code = cli.main(["--log-level", "CRITICAL", "udp"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert "Error: Cannot bind UDP ephemeral port" in captured.err
    assert "Too many open files" in captured.err


def test_keyboard_interrupt_exit_code(monkeypatch, capsys):
    def interrupted(protocol):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, "probe_port", interrupted)

    assert cli.main(["tcp"]) == 130
    assert "Interrupted" in capsys.readouterr().err


def test_missing_command_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])

    assert exc_info.value.code == 2
    assert "usage: portprobe" in capsys.readouterr().err


def test_python_dash_m_entrypoint():
    """Verify `python -m portprobe tcp` prints a port that is free to bind."""
    result = subprocess.run(
        [sys.executable, "-m", "portprobe", "tcp"],
        capture_output=True,
        text=True,
        check=True,
    )

    port = int(result.stdout.strip())
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("", port))


@pytest.mark.parametrize("argv", [["tcp"], ["--log-level", "DEBUG", "tcp"]])
def test_invalid_env_log_level_exit_code(monkeypatch, capsys, argv):
    """Verify a bad PORTPROBE_LOG_LEVEL is reported as an error instead of a traceback."""
    monkeypatch.setenv("PORTPROBE_LOG_LEVEL", "chatty")

    exit_code = cli.main(argv)

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert "Error: invalid configuration" in captured.err
    assert "unknown log level" in captured.err


def test_invalid_log_level_option_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--log-level", "nonsense", "tcp"])

    assert exc_info.value.code == 2
    assert "invalid choice: 'NONSENSE'" in capsys.readouterr().err


def test_log_level_option_is_case_insensitive(capsys):
    exit_code = cli.main(["--log-level", "debug", "tcp"])

    assert exit_code == 0
    assert capsys.readouterr().out.strip().isdigit()
