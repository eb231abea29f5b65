" generic fixtures "
from io import StringIO

import pytest

from consolehelp.console import Application
from consolehelp.help import HelpCommand
from consolehelp.messages import reset_messages

from .sample_commands import CacheCommand, MessageCommand


def pytest_configure():
    "Runs once before all"
    from consolehelp.logging_setup import init_logger

    init_logger("/dev/null", force_debug=True)


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    "No ANSI colors in the tested output"
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.fixture(autouse=True)
def default_messages():
    "Restores the default message catalogs after each test"
    yield
    reset_messages()


@pytest.fixture
def application(tmp_path):
    "An application with explicit commands, a child group and a command file"
    (tmp_path / "deploy_command.py").write_text("")
    return Application(
        name="yiic",
        controller_map={"help": HelpCommand, "message": MessageCommand},
        modules={
            "admin": {"controller_map": {"cache": CacheCommand}},
            "missing": None,
        },
        controller_path=tmp_path,
    )


@pytest.fixture
def help_command(application):
    "The help command of `application`, writing to a buffer"
    return HelpCommand("help", application, stdout=StringIO())
