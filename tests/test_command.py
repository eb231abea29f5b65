"""Tests for the command line entry point."""

import sys

import pytest

from consolehelp.command import main, run_help, use_param
from consolehelp.models import ConsoleHelpError, ExitCode, UnknownCommandError

CONFIG = """
[application]
name = "yiic"

[application.controller_map]
message = "tests.sample_commands:MessageCommand"
"""


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(CONFIG)
    return path


@pytest.fixture(autouse=True)
def no_default_config(monkeypatch, tmp_path):
    "Never read the user's configuration"
    monkeypatch.setattr("consolehelp.config_loader.CONFIG_FILE", tmp_path / "absent" / "config.toml")


def run_main(monkeypatch, *args):
    "Runs main() with `args` and returns the exit code"
    monkeypatch.setattr(sys, "argv", ["consolehelp", *args])
    with pytest.raises(SystemExit) as excinfo:
        main()
    return excinfo.value.code


def test_use_param(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["consolehelp", "--config", "a.toml", "message"])
    assert use_param("--config") == "a.toml"
    assert sys.argv == ["consolehelp", "message"]
    assert use_param("--debug") == ""


def test_use_param_without_value(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["consolehelp", "--config"])
    assert use_param("--config") == ""
    assert sys.argv == ["consolehelp"]


def test_run_help(config_file, capsys):
    assert run_help([], str(config_file)) == ExitCode.SUCCESS
    output = capsys.readouterr().out
    assert " * help\n * message\n" in output
    assert "Usage: yiic <command-name>" in output


def test_run_help_unknown_command(config_file):
    with pytest.raises(UnknownCommandError):
        run_help(["bogus"], str(config_file))


def test_main_command_list(monkeypatch, capsys):
    assert run_main(monkeypatch) == ExitCode.SUCCESS
    assert " * help\n" in capsys.readouterr().out


def test_main_with_config(monkeypatch, capsys, config_file):
    assert run_main(monkeypatch, "--config", str(config_file), "message") == ExitCode.SUCCESS
    assert "SUB-COMMANDS" in capsys.readouterr().out


def test_main_help_flag(monkeypatch, capsys):
    assert run_main(monkeypatch, "--help") == ExitCode.SUCCESS
    assert "The following commands are available:" in capsys.readouterr().out


def test_main_unknown_command(monkeypatch, capsys):
    assert run_main(monkeypatch, "bogus") == ExitCode.USAGE_ERROR
    captured = capsys.readouterr()
    assert captured.err.splitlines()[-1] == 'Error: No help for unknown command "bogus".'
    assert captured.out == ""


def test_main_unknown_sub_command(monkeypatch, capsys):
    assert run_main(monkeypatch, "help/xyz") == ExitCode.USAGE_ERROR
    assert 'unknown sub-command "help/xyz"' in capsys.readouterr().err


def test_main_missing_config(monkeypatch, tmp_path):
    assert run_main(monkeypatch, "--config", str(tmp_path / "missing.toml")) == ExitCode.CONFIG_ERROR


def test_main_debug_log(monkeypatch, tmp_path):
    log_file = tmp_path / "debug.log"
    assert run_main(monkeypatch, "--debug", str(log_file), "help") == ExitCode.SUCCESS
    assert log_file.exists()


def test_main_config_error_is_logged(monkeypatch, mocker):
    mocker.patch("consolehelp.command.run_help", side_effect=ConsoleHelpError)
    log = mocker.patch("consolehelp.command.get_logger").return_value
    assert run_main(monkeypatch) == ExitCode.CONFIG_ERROR
    log.critical.assert_called_once_with("Command failed.")
