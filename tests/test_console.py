"""Tests for the console application model."""

import sys

import pytest

from consolehelp.console import Action, Application, Command, CommandGroup, InlineAction, import_class
from consolehelp.help import HelpCommand
from consolehelp.models import ConsoleHelpError

from .sample_commands import CacheCommand, ImportAction, MessageCommand

GREET_COMMAND = '''
from consolehelp.console import Command


class GreetCommand(Command):
    """Greets people."""

    polite: bool = True
    """@var bool whether to say please"""

    def action_hello(self, name, times=1):
        """Says hello.

        @param str name who to greet
        @param int times how many times
        """
'''


class TestGroups:
    """Tests for CommandGroup paths and child groups."""

    def test_unique_ids(self):
        app = Application(modules={"admin": {"modules": {"tools": {}}}})
        admin = app.get_module("admin")
        tools = admin.get_module("tools")
        assert app.unique_id == ""
        assert admin.unique_id == "admin"
        assert tools.unique_id == "admin/tools"
        assert tools.root is app

    def test_get_module(self):
        existing = CommandGroup("ready")
        app = Application(modules={"ready": existing, "absent": None})
        assert app.get_module("ready") is existing
        assert app.get_module("absent") is None
        assert app.get_module("unknown") is None

    def test_child_of_application_is_a_group(self):
        app = Application(name="yiic", modules={"admin": {"controller_map": {"cache": CacheCommand}}})
        admin = app.get_module("admin")
        assert type(admin) is CommandGroup
        assert admin.parent is app
        assert admin.controller_map == {"cache": CacheCommand}

    def test_unsupported_group_definition(self):
        app = Application(modules={"admin": "not-a-group", "count": 3})
        assert app.get_module("admin") is None
        assert app.get_module("count") is None
        assert app.create_command("admin/cache") is None

    def test_group_factory(self):
        app = Application(modules={"tools": lambda parent: CommandGroup("tools", parent, controller_map={"cache": CacheCommand})})
        tools = app.get_module("tools")
        assert tools.unique_id == "tools"
        assert tools.root is app

    def test_relative_controller_path(self, tmp_path):
        app = Application(controller_path="commands", base_path=tmp_path, modules={"admin": {"controller_path": "admin"}})
        assert app.controller_path == tmp_path / "commands"
        assert app.get_module("admin").controller_path == tmp_path / "admin"


class TestCreateCommand:
    """Tests for route resolution."""

    def test_explicit_command(self, application):
        command, action_id = application.create_command("message")
        assert isinstance(command, MessageCommand)
        assert command.unique_id == "message"
        assert action_id == ""

    def test_command_and_action(self, application):
        command, action_id = application.create_command("message/list-all")
        assert command.id == "message"
        assert action_id == "list-all"

    def test_child_group(self, application):
        command, action_id = application.create_command("admin/cache/flush")
        assert isinstance(command, CacheCommand)
        assert command.unique_id == "admin/cache"
        assert command.application is application
        assert action_id == "flush"

    def test_import_path(self):
        app = Application(controller_map={"message": "tests.sample_commands:MessageCommand"})
        command, _ = app.create_command("message")
        assert isinstance(command, MessageCommand)

    def test_unknown(self, application):
        assert application.create_command("bogus") is None
        assert application.create_command("admin/bogus") is None
        assert application.create_command("") is None

    def test_command_file(self, tmp_path):
        (tmp_path / "greet_command.py").write_text(GREET_COMMAND)
        app = Application(controller_path=tmp_path)
        command, action_id = app.create_command("greet/hello")
        assert type(command).__name__ == "GreetCommand"
        assert action_id == "hello"

    def test_command_file_without_class(self, application):
        assert application.create_command("deploy") is None

    def test_broken_command_file(self, tmp_path):
        (tmp_path / "broken_command.py").write_text("raise RuntimeError('boom')\n")
        app = Application(controller_path=tmp_path)
        with pytest.raises(ConsoleHelpError):
            app.create_command("broken")
        assert not [name for name in sys.modules if name.endswith("broken_command")]


class TestImportClass:
    """Tests for import_class."""

    def test_import(self):
        assert import_class("consolehelp.help:HelpCommand") is HelpCommand

    @pytest.mark.parametrize("spec", ["consolehelp.nowhere:Thing", "consolehelp.help:Nothing"])
    def test_failures(self, spec):
        with pytest.raises(ConsoleHelpError):
            import_class(spec)


class TestCreateAction:
    """Tests for Command.create_action."""

    def test_default_action(self, application):
        action = MessageCommand("message", application).create_action("")
        assert isinstance(action, InlineAction)
        assert action.id == "extract"
        assert action.method_name == "action_extract"

    def test_registered_action(self, application):
        action = MessageCommand("message", application).create_action("import")
        assert isinstance(action, ImportAction)
        assert action.get_handler() == action.run
        assert action.unique_id == "message/import"

    def test_inline_handler(self, application):
        command = MessageCommand("message", application)
        action = command.create_action("list-all")
        assert action.get_handler() == command.actionListAll

    def test_unknown_action(self, application):
        assert MessageCommand("message", application).create_action("xyz") is None

    def test_missing_default_action(self, application):
        assert Command("bare", application).create_action("") is None

    def test_inline_run(self, application):
        class Counter(Command):
            def action_add(self, a, b=1):
                return a + b

        assert Counter("counter", application).create_action("add").run(2) == 3

    def test_base_action_run(self, application):
        assert Action("noop", Command("bare", application)).run() is None
