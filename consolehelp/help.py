"""Help screens for console commands."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any, TextIO

from .ansi import BOLD, colorize, should_colorize
from .commands.discovery import list_actions, list_commands
from .commands.options import action_parameters, build_action_options, build_global_options
from .commands.parsing import extract_doc
from .console import Application, Command
from .constants import HELP_COMMAND
from .logging_setup import get_logger
from .models import ExitCode, UnknownCommandError, UnknownSubCommandError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .console import CommandGroup

__all__ = ["HelpCommand", "format_action_help", "format_command_help", "format_command_list"]


def _c(text: str, color: bool, *codes: str) -> str:
    """Colorize text when `color` is set."""
    return colorize(text, *codes) if color else text


def _section(title: str, color: bool) -> str:
    """Format an underlined section title."""
    return f"\n{_c(title, color, BOLD)}\n{'-' * len(title)}\n\n"


def _option(name: str, description: str) -> str:
    return f" --{name}: {description}\n" if description else f" --{name}\n"


def format_command_list(program: str, commands: Sequence[str], color: bool = False) -> str:
    """Format the list of all commands.

    Args:
        program: Program name shown in the usage lines
        commands: Sorted command paths
        color: Highlight titles with ANSI codes

    Returns:
        The text to print
    """
    if not commands:
        return "\nNo commands are found.\n"
    lines = [
        f"\n{_c('Usage:', color, BOLD)} {program} <command-name> [...options...]\n",
        "The following commands are available:\n",
        *(f" * {command}" for command in commands),
        "\nTo see the help of each command, enter:\n",
        f"    {program} {HELP_COMMAND} <command-name>\n",
    ]
    return "\n".join(lines)


def format_command_help(  # noqa: PLR0913
    summary: str,
    global_options: dict[str, str],
    command_path: str,
    actions: Sequence[str],
    default_action: str,
    color: bool = False,
) -> str:
    """Format the overview of a command.

    Shows the command description, its global options, then its
    sub-commands; the default action is listed under the command path alone.

    Args:
        summary: Free-text description of the command
        global_options: Option name -> description
        command_path: Full path of the command
        actions: Sorted action ids
        default_action: Id of the default action
        color: Highlight titles with ANSI codes

    Returns:
        The text to print
    """
    parts: list[str] = []
    if summary:
        parts.append(f"\n{summary}\n")

    if global_options:
        parts.append(_section("GLOBAL OPTIONS", color))
        for name, description in global_options.items():
            parts.append(_option(name, description))
            if description:
                parts.append("\n")

    if actions:
        parts.append(_section("SUB-COMMANDS", color))
        for action in actions:
            if action == default_action:
                parts.append(f" * {command_path} (default)\n")
            else:
                parts.append(f" * {command_path}/{action}\n")
        parts.append("\n")

    return "".join(parts)


def format_action_help(summary: str, options: dict[str, str], color: bool = False) -> str:
    """Format the details of an action: its description and its options."""
    parts: list[str] = []
    if summary:
        parts.append(f"\n{summary}\n")
    if options:
        parts.append(_section("OPTIONS", color))
        parts.extend(_option(name, description) for name, description in options.items())
        parts.append("\n")
    return "".join(parts)


class HelpCommand(Command):
    """Provides help information about console commands.

    Displays the list of available commands, or the detailed
    instructions about using a specific command:

        consolehelp help [command name]

    If the command name is not provided, all available commands are listed.
    """

    def __init__(self, command_id: str, group: CommandGroup, stdout: TextIO | None = None) -> None:
        super().__init__(command_id, group)
        self.stdout = stdout or sys.stdout
        self.log = get_logger("help")

    def action_index(self, args: Sequence[str] = ()) -> int:
        """Displays available commands or the detailed information about a particular command.

        For example:

            consolehelp help          # list available commands
            consolehelp help message  # display help info about "message"

        @param list args additional anonymous command line arguments.
        You may provide a command name to display its detailed information.
        @return int the exit status
        @throws UsageError if the command for help is unknown
        """
        if not args:
            self.write(format_command_list(self._program_name(), self.get_commands(), self._use_color()))
            return ExitCode.SUCCESS

        result = self.application.create_command(args[0])
        if result is None:
            raise UnknownCommandError(args[0])

        command, action_id = result
        self.log.debug("Help for %s (action %r)", command.unique_id, action_id)
        if action_id == "":
            self.write(self.get_command_help(command))
        else:
            self.write(self.get_action_help(command, action_id))
        return ExitCode.SUCCESS

    def _program_name(self) -> str:
        """Program name used in the usage lines."""
        root = self.application
        return root.name if isinstance(root, Application) else self.id

    def _use_color(self) -> bool:
        """True when the output stream accepts ANSI colors."""
        return should_colorize(self.stdout)

    def write(self, text: str) -> None:
        """Write `text` to the output stream."""
        self.stdout.write(text)

    def get_commands(self) -> list[str]:
        """Return all available command paths."""
        return list_commands(self.application)

    def get_actions(self, command: Command) -> list[str]:
        """Return the action ids of `command`."""
        return list_actions(command)

    def get_command_help(self, command: Command) -> str:
        """Format the overview of `command`."""
        command_class = type(command)
        return format_command_help(
            extract_doc(command_class.__doc__).summary,
            build_global_options(command_class),
            command.unique_id,
            self.get_actions(command),
            command.default_action,
            self._use_color(),
        )

    def get_action_help(self, command: Command, action_id: str) -> str:
        """Format the details of an action of `command`.

        Raises:
            UnknownSubCommandError: If the command has no such action
        """
        action = command.create_action(action_id)
        if action is None:
            raise UnknownSubCommandError(f"{command.unique_id}/{action_id}")
        handler: Any = action.get_handler()
        doc = extract_doc(handler.__doc__)
        return format_action_help(doc.summary, build_action_options(action_parameters(handler), doc.tags), self._use_color())
