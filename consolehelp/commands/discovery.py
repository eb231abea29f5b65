"""Command and action discovery."""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING

from ..constants import ACTION_METHOD_PREFIX, ACTIONS_ACCESSOR
from ..logging_setup import get_logger
from .parsing import camel_to_id

if TYPE_CHECKING:
    from pathlib import Path

    from ..console import Command, CommandGroup

__all__ = ["action_methods", "list_actions", "list_commands", "scan_command_files"]


def scan_command_files(group: CommandGroup) -> dict[str, Path]:
    """Find the command files of a group's directory.

    A file named "<name><suffix>" (suffix being the group's
    `command_file_suffix`) provides the command "<name>", with its first
    character lower-cased: "message_command.py" -> "message",
    "MigrateCommand.py" -> "migrate" (with suffix "Command.py").

    Args:
        group: The command group to scan

    Returns:
        Dict mapping inferred command name to file path
    """
    if group.controller_path is None:
        return {}
    suffix = group.command_file_suffix
    try:
        entries = sorted(group.controller_path.iterdir())
    except OSError as e:
        get_logger("discovery").debug("Cannot list %s: %s", group.controller_path, e)
        return {}

    found: dict[str, Path] = {}
    for entry in entries:
        name = entry.name
        if len(name) <= len(suffix) or not name.endswith(suffix) or not entry.is_file():
            continue
        stem = name[: -len(suffix)]
        found[stem[0].lower() + stem[1:]] = entry
    return found


def _group_commands(group: CommandGroup) -> list[str]:
    """List the command names of `group`, relative to the group itself."""
    commands = list(group.controller_map)

    for child_id in group.modules:
        child = group.get_module(child_id)
        if child is None:
            get_logger("discovery").debug("Skipping unresolved group %r", child_id)
            continue
        commands.extend(f"{child_id}/{name}" for name in _group_commands(child))

    commands.extend(scan_command_files(group))
    return commands


def list_commands(group: CommandGroup) -> list[str]:
    """Return every command path reachable from `group`.

    Walks explicit mappings, child groups (recursively) and command files.
    Paths are prefixed with the group's own path unless it is the root.

    Args:
        group: The group to list, usually the application

    Returns:
        Sorted list of unique command paths, e.g. ["admin/user", "help"]
    """
    prefix = f"{group.unique_id}/" if group.unique_id else ""
    return sorted({prefix + name for name in _group_commands(group)})


def action_methods(command_class: type) -> dict[str, str]:
    """Map the action ids of a command class to their handler method names.

    Inline actions are the public, non-static methods named "action<Id>"
    (or "action_<id>"), the `actions` accessor aside.
    E.g., "actionListAll" -> "list-all", "action_index" -> "index"

    Args:
        command_class: A Command subclass

    Returns:
        Dict mapping action id to method name
    """
    methods: dict[str, str] = {}
    for name in dir(command_class):
        if not name.startswith(ACTION_METHOD_PREFIX) or name == ACTIONS_ACCESSOR:
            continue
        attr = inspect.getattr_static(command_class, name)
        if not inspect.isfunction(attr):
            continue
        action_id = camel_to_id(name[len(ACTION_METHOD_PREFIX) :])
        if action_id:
            methods[action_id] = name
    return methods


def list_actions(command: Command) -> list[str]:
    """Return the ids of every action available on `command`.

    Combines the explicitly registered actions with the inline ones.

    Args:
        command: The command instance

    Returns:
        Sorted list of unique action ids
    """
    return sorted(set(command.actions()) | set(action_methods(type(command))))
