"""consolehelp command line entry point.

Usage: consolehelp [--config FILE] [--debug LOGFILE] [command]
"""

import sys

from .config_loader import ConfigLoader, build_application
from .constants import HELP_COMMAND
from .help import HelpCommand
from .logging_setup import get_logger, init_logger
from .models import ConsoleHelpError, ExitCode, UsageError

__all__ = ["main", "run_help", "use_param"]


def use_param(txt: str) -> str:
    """Check if parameter `txt` is in sys.argv.

    If found, removes it from sys.argv & returns the argument value
    """
    v = ""
    if txt in sys.argv:
        i = sys.argv.index(txt)
        v = sys.argv[i + 1] if i + 1 < len(sys.argv) else ""
        del sys.argv[i : i + 2]
    return v


def run_help(args: list[str], config_filename: str = "") -> int:
    """Load the application and print the help matching `args`.

    Args:
        args: Positional arguments, the first one being an optional command path
        config_filename: Optional configuration file or directory

    Returns:
        The exit code

    Raises:
        UsageError: If the requested command or sub-command is unknown
        ConsoleHelpError: If the configuration cannot be loaded
    """
    loader = ConfigLoader(get_logger("config"))
    config = loader.load(config_filename)
    application = build_application(config, loader.base_path)

    help_command = HelpCommand(HELP_COMMAND, application)
    return int(help_command.action_index(args))


def main() -> None:
    """Run the command."""
    debug_flag = use_param("--debug")
    if debug_flag:
        init_logger(filename=debug_flag, force_debug=True)
    else:
        init_logger()
    log = get_logger("startup")

    config_override = use_param("--config")
    args = sys.argv[1:]
    if args and args[0] in {"--help", "-h"}:
        args = args[1:]

    exit_code = ExitCode.SUCCESS
    try:
        exit_code = ExitCode(run_help(args, config_override))
    except KeyboardInterrupt:
        pass
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        exit_code = ExitCode.USAGE_ERROR
    except ConsoleHelpError:
        log.critical("Command failed.")
        exit_code = ExitCode.CONFIG_ERROR
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
