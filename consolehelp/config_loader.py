"""Configuration file loading.

The configuration describes the application whose commands are documented:
its name, its command groups and where their command files live.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .constants import COMMAND_FILE_SUFFIX, CONFIG_FILE, DEFAULT_LANGUAGE, DEFAULT_PROGRAM_NAME, HELP_COMMAND
from .console import Application
from .help import HelpCommand
from .messages import add_messages, set_language
from .models import ConsoleHelpError
from .utils import merge

if TYPE_CHECKING:
    import logging

__all__ = ["ConfigLoader", "build_application"]


class ConfigLoader:
    """Handles loading and merging configuration files.

    Supports:
    - a single TOML file
    - a directory, whose .toml files are merged in name order
    - `include` directives in the [application] table
    """

    def __init__(self, log: logging.Logger) -> None:
        """Initialize the config loader.

        Args:
            log: Logger instance for status and error messages
        """
        self.log = log
        self._config: dict[str, Any] = {}
        self.base_path: Path = CONFIG_FILE.parent

    @property
    def config(self) -> dict[str, Any]:
        """Return the loaded configuration."""
        return self._config

    def load(self, config_filename: str = "") -> dict[str, Any]:
        """Load configuration from file or directory.

        Without `config_filename`, the default CONFIG_FILE is used when it
        exists; an empty configuration is used otherwise.

        Args:
            config_filename: Optional path to config file or directory.

        Returns:
            The loaded and merged configuration dictionary.

        Raises:
            ConsoleHelpError: If an explicit config file is not found or a file has syntax errors.
        """
        if config_filename:
            fname = Path(os.path.expandvars(config_filename)).expanduser()
            self.base_path = fname if fname.is_dir() else fname.parent
            merge(self._config, self._open_config(fname))
        elif CONFIG_FILE.exists():
            self.base_path = CONFIG_FILE.parent
            merge(self._config, self._open_config(CONFIG_FILE))
        else:
            self.log.info("No configuration at %s, using defaults", CONFIG_FILE)
        return self._config

    def _open_config(self, fname: Path) -> dict[str, Any]:
        """Load a config file or directory, following includes.

        Args:
            fname: Configuration file or directory path

        Returns:
            The loaded configuration dictionary
        """
        config = self._load_config_directory(fname) if fname.is_dir() else self._load_config_file(fname)

        for extra_config in list(config.get("application", {}).pop("include", [])):
            extra_path = Path(os.path.expandvars(extra_config)).expanduser()
            if not extra_path.is_absolute():
                extra_path = (fname if fname.is_dir() else fname.parent) / extra_path
            merge(config, self._open_config(extra_path))

        return config

    def _load_config_directory(self, directory: Path) -> dict[str, Any]:
        """Load and merge all .toml files from a directory.

        Args:
            directory: Path to directory containing .toml files

        Returns:
            Merged configuration from all files
        """
        config: dict[str, Any] = {}
        for toml_file in sorted(f.name for f in directory.iterdir()):
            if not toml_file.endswith(".toml"):
                continue
            merge(config, self._load_config_file(directory / toml_file))
        return config

    def _load_config_file(self, fname: Path) -> dict[str, Any]:
        """Load a single TOML file.

        Raises:
            ConsoleHelpError: If file not found or has syntax errors
        """
        if not fname.exists():
            self.log.critical("Config file not found: %s", fname)
            raise ConsoleHelpError
        self.log.info("Loading %s", fname)
        with fname.open("rb") as f:
            try:
                return tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                self.log.critical("Problem reading %s: %s", fname, e)
                raise ConsoleHelpError from e


def build_application(config: dict[str, Any], base_path: Path | None = None) -> Application:
    """Create the application described by `config`.

    The built-in `help` command is always available; a configured command
    of the same name replaces it. Message catalogs are registered and the
    configured language is activated.

    Args:
        config: Loaded configuration
        base_path: Directory relative paths are resolved against

    Returns:
        The root command group
    """
    section = config.get("application", {})

    for language, messages in config.get("messages", {}).items():
        add_messages(language, messages)
    set_language(section.get("language", DEFAULT_LANGUAGE))

    return Application(
        name=section.get("name", DEFAULT_PROGRAM_NAME),
        controller_map={HELP_COMMAND: HelpCommand, **section.get("controller_map", {})},
        modules=config.get("modules", {}),
        controller_path=section.get("controller_path"),
        command_file_suffix=section.get("command_file_suffix", COMMAND_FILE_SUFFIX),
        base_path=base_path,
    )
