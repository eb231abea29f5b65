"""Allow `python -m consolehelp`."""

from .command import main

main()
