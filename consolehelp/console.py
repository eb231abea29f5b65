"""Console application model: command groups, commands and actions.

A minimal host for commands: enough to enumerate them and resolve a
"group/command/action" route to a command instance and an action.
"""

from __future__ import annotations

import importlib
import importlib.util
import re
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar, cast

from .commands.discovery import action_methods, scan_command_files
from .commands.parsing import id_to_camel
from .constants import COMMAND_FILE_SUFFIX, DEFAULT_ACTION, DEFAULT_PROGRAM_NAME
from .logging_setup import get_logger
from .models import ConsoleHelpError

if TYPE_CHECKING:
    from collections.abc import Callable

    # A command class, or its "package.module:ClassName" import path
    CommandSpec = type["Command"] | str
    # A child group, its configuration table, a factory, or None when unavailable
    GroupSpec = CommandGroup | dict[str, Any] | Callable[[CommandGroup], CommandGroup | None] | None

__all__ = ["Action", "Application", "Command", "CommandGroup", "InlineAction", "import_class"]


def import_class(spec: str) -> type:
    """Import a class from its "package.module:ClassName" path.

    Raises:
        ConsoleHelpError: If the module or the class cannot be found
    """
    module_name, _, class_name = spec.partition(":")
    try:
        return cast("type", getattr(importlib.import_module(module_name), class_name))
    except (ImportError, AttributeError) as e:
        get_logger("console").critical("Unable to import command class %r: %s", spec, e)
        raise ConsoleHelpError from e


class Action:
    """An action provided by its own class.

    Subclasses implement `run`, whose signature and docstring describe
    the action's options.
    """

    def __init__(self, action_id: str, command: Command) -> None:
        self.id = action_id
        self.command = command

    @property
    def unique_id(self) -> str:
        """Full route of the action, e.g. "admin/user/create"."""
        return f"{self.command.unique_id}/{self.id}"

    def get_handler(self) -> Callable[..., Any]:
        """Return the callable whose signature and docstring document the action."""
        return self.run

    def run(self, *args: Any) -> Any:
        """Runs the action. Subclasses override this; the base action does nothing."""
        return None


class InlineAction(Action):
    """An action implemented by an "action*" method of its command."""

    def __init__(self, action_id: str, command: Command, method_name: str) -> None:
        super().__init__(action_id, command)
        self.method_name = method_name

    def get_handler(self) -> Callable[..., Any]:
        return cast("Callable[..., Any]", getattr(self.command, self.method_name))

    def run(self, *args: Any) -> Any:
        return self.get_handler()(*args)


class Command:
    """Base class for console commands.

    Actions are either methods named "action<Id>" / "action_<id>", or
    `Action` subclasses registered by `actions`. Public attributes declared
    by a subclass are the command's global options.
    """

    default_action: ClassVar[str] = DEFAULT_ACTION

    def __init__(self, command_id: str, group: CommandGroup) -> None:
        self.id = command_id
        self.group = group

    @property
    def unique_id(self) -> str:
        """Full path of the command, e.g. "admin/user"."""
        return f"{self.group.unique_id}/{self.id}" if self.group.unique_id else self.id

    @property
    def application(self) -> CommandGroup:
        """The root group of the command tree."""
        return self.group.root

    def actions(self) -> dict[str, type[Action]]:
        """Return the explicitly registered actions (id -> Action subclass)."""
        return {}

    def create_action(self, action_id: str) -> Action | None:
        """Create the action `action_id` ("" being the default action).

        Returns:
            The action, or None if the command has no such action
        """
        if action_id == "":
            action_id = self.default_action
        actions = self.actions()
        if action_id in actions:
            return actions[action_id](action_id, self)
        method_name = action_methods(type(self)).get(action_id)
        if method_name is None:
            return None
        return InlineAction(action_id, self, method_name)


class CommandGroup:
    """A namespace node holding commands and child groups."""

    def __init__(  # noqa: PLR0913
        self,
        group_id: str = "",
        parent: CommandGroup | None = None,
        controller_map: dict[str, CommandSpec] | None = None,
        modules: dict[str, GroupSpec] | None = None,
        controller_path: str | Path | None = None,
        command_file_suffix: str = COMMAND_FILE_SUFFIX,
        base_path: Path | None = None,
    ) -> None:
        self.id = group_id
        self.parent = parent
        self.controller_map: dict[str, CommandSpec] = dict(controller_map or {})
        self.modules: dict[str, GroupSpec] = dict(modules or {})
        self.base_path = base_path if base_path is not None else (parent.base_path if parent else None)
        self.controller_path = self._resolve_path(controller_path)
        self.command_file_suffix = command_file_suffix
        self.log = get_logger("console")

    @staticmethod
    def from_config(group_id: str, parent: CommandGroup, config: dict[str, Any]) -> CommandGroup:
        """Build a child group from its configuration table.

        The child is a plain `CommandGroup`, whatever the class of `parent`.
        """
        return CommandGroup(
            group_id,
            parent,
            controller_map=config.get("controller_map"),
            modules=config.get("modules"),
            controller_path=config.get("controller_path"),
            command_file_suffix=config.get("command_file_suffix", parent.command_file_suffix),
        )

    def _resolve_path(self, path: str | Path | None) -> Path | None:
        if path is None:
            return None
        resolved = Path(path).expanduser()
        if not resolved.is_absolute() and self.base_path is not None:
            resolved = self.base_path / resolved
        return resolved

    @property
    def unique_id(self) -> str:
        """Path of the group from the root, "" for the root itself."""
        if self.parent is None:
            return ""
        return f"{self.parent.unique_id}/{self.id}" if self.parent.unique_id else self.id

    @property
    def root(self) -> CommandGroup:
        """The topmost group."""
        return self if self.parent is None else self.parent.root

    def get_module(self, group_id: str) -> CommandGroup | None:
        """Return the child group `group_id`, or None if it is not available."""
        entry = self.modules.get(group_id)
        if entry is None or isinstance(entry, CommandGroup):
            return entry
        if isinstance(entry, dict):
            return CommandGroup.from_config(group_id, self, entry)
        if not callable(entry):
            self.log.debug("Ignoring group %r: unsupported definition %r", group_id, entry)
            return None
        return entry(self)

    def create_command(self, route: str) -> tuple[Command, str] | None:
        """Resolve a route to a command and the requested action id.

        The first route segment is looked up in the explicit mappings, then
        in the child groups (which resolve the rest of the route), then in the
        command files. Whatever follows the command is the action id, "" for
        the default action.

        Args:
            route: E.g. "help", "admin/user" or "admin/user/create"

        Returns:
            (command, action_id), or None if no command matches
        """
        route = route.strip("/")
        if not route:
            return None
        command_id, _, rest = route.partition("/")

        if command_id in self.controller_map:
            spec = self.controller_map[command_id]
            command_class = import_class(spec) if isinstance(spec, str) else spec
            return command_class(command_id, self), rest

        module = self.get_module(command_id)
        if module is not None:
            return module.create_command(rest)

        path = scan_command_files(self).get(command_id)
        if path is not None:
            command_class = self._load_command_file(path)
            if command_class is not None:
                return command_class(command_id, self), rest
        return None

    def _load_command_file(self, path: Path) -> type[Command] | None:
        """Import a command file and return the class named after it.

        "message_command.py" must define `MessageCommand`.
        """
        module_name = "_consolehelp_" + re.sub(r"\W", "_", str(path.with_suffix("")))
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            self.log.warning("Cannot load command file %s", path)
            return None
        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except Exception as e:
            del sys.modules[module_name]
            self.log.critical("Error loading command file %s: %s", path, e)
            raise ConsoleHelpError from e

        command_class = getattr(module, id_to_camel(path.stem), None)
        if not (isinstance(command_class, type) and issubclass(command_class, Command)):
            self.log.warning("%s does not define %s", path, id_to_camel(path.stem))
            return None
        return command_class


class Application(CommandGroup):
    """The root group, named after the program."""

    def __init__(self, name: str = DEFAULT_PROGRAM_NAME, **kwargs: Any) -> None:
        super().__init__("", None, **kwargs)
        self.name = name
