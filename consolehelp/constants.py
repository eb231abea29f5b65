"""Shared constants for consolehelp."""

import os
from pathlib import Path

__all__ = [
    "ACTION_METHOD_PREFIX",
    "ACTIONS_ACCESSOR",
    "COMMAND_FILE_SUFFIX",
    "CONFIG_FILE",
    "DEFAULT_ACTION",
    "DEFAULT_LANGUAGE",
    "DEFAULT_PROGRAM_NAME",
    "DOC_INDENT",
    "HELP_COMMAND",
]

_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
CONFIG_FILE = _xdg_config_home / "consolehelp" / "config.toml"

DEFAULT_PROGRAM_NAME = "consolehelp"
DEFAULT_LANGUAGE = "en"

# Command classes discovered from a group's directory: "<name>_command.py"
COMMAND_FILE_SUFFIX = "_command.py"

# Methods named "action<Id>" are inline actions; "actions" lists the object-backed ones
ACTION_METHOD_PREFIX = "action"
ACTIONS_ACCESSOR = "actions"

DEFAULT_ACTION = "index"
HELP_COMMAND = "help"

# Indentation of free-text parameter documentation under an option line
DOC_INDENT = "    "
