"""consolehelp - help screens for console command applications.

Discovers the commands of an application (command groups, command classes and
their actions), reads their docstrings and signatures, and prints usage
information: the command list, a command overview, or an action's options.
"""
