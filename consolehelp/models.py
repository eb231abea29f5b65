"""Exit codes and exceptions."""

from enum import IntEnum

from .messages import translate

__all__ = [
    "ConsoleHelpError",
    "ExitCode",
    "UnknownCommandError",
    "UnknownSubCommandError",
    "UsageError",
]


class ExitCode(IntEnum):
    """Exit codes of the consolehelp command."""

    SUCCESS = 0
    USAGE_ERROR = 1  # Unknown command or sub-command
    CONFIG_ERROR = 2  # Configuration could not be loaded


class ConsoleHelpError(BaseException):
    """Used for errors which already triggered logging."""


class UsageError(Exception):
    """The command line asks for something that does not exist."""


class UnknownCommandError(UsageError):
    """No command matches the requested path."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(translate('No help for unknown command "{command}".', command=command))


class UnknownSubCommandError(UsageError):
    """The command exists but has no such action.

    `command` is the full "<command path>/<action id>" route.
    """

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(translate('No help for unknown sub-command "{command}".', command=command))
