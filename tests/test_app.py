"""Tests for the REPL application and its commands."""

import io
import json

from rich.console import Console

from task_cli.cli.app import UNKNOWN_COMMAND_MESSAGE, TaskCLIApp
from task_cli.cli.commands import Command
from task_cli.cli.session import TerminalSession
from task_cli.tasks.models import Priority
from task_cli.tasks.store import TaskStore

from tests.conftest import CLIHarness


class TestScenario:
    """End-to-end command sequence through process_input."""

    def test_full_session(self, cli):
        out = cli.send('add "Buy milk" -p high')
        assert "Task added with ID: 1" in out

        out = cli.send('add "Clean"')
        assert "Task added with ID: 2" in out

        out = cli.send("list")
        assert "Task List" in out
        assert out.index("Buy milk") < out.index("Clean")
        assert "HIGH" in out and "MEDIUM" in out

        out = cli.send("done 1")
        assert "Task 1 marked as completed." in out

        out = cli.send("list")
        milk_line = next(line for line in out.splitlines() if "Buy milk" in line)
        assert "DONE" in milk_line

        out = cli.send("list pending")
        assert "Clean" in out
        assert "Buy milk" not in out

        out = cli.send("delete 2")
        assert "Task 2 deleted." in out

        out = cli.send("list pending")
        assert "No tasks found." in out

        out = cli.send("done 99")
        assert "Task with ID 99 not found." in out

        assert cli.stderr == ""


class TestAdd:
    """Tests for the add command."""

    def test_description_joined_from_tokens(self, cli):
        cli.send("add Buy some -p low milk")

        task = cli.app.store.get(1)
        assert task.description == "Buy some milk"
        assert task.priority is Priority.LOW

    def test_unknown_priority_defaults_to_medium(self, cli):
        cli.send('add "Task" -p urgent')
        assert cli.app.store.get(1).priority is Priority.MEDIUM

    def test_without_description_is_unrecognized(self, cli):
        assert UNKNOWN_COMMAND_MESSAGE in cli.send("add")
        assert UNKNOWN_COMMAND_MESSAGE in cli.send("add -p high")
        assert UNKNOWN_COMMAND_MESSAGE in cli.send('add ""')
        assert UNKNOWN_COMMAND_MESSAGE in cli.send('add "   " -p high')
        assert cli.app.store.is_empty()

    def test_writes_file(self, cli, mock_context):
        cli.send('add "Persist me"')
        data = json.loads(mock_context.tasks_file.read_text(encoding="utf-8"))
        assert data == [
            {"id": 1, "description": "Persist me", "completed": False, "priority": 2}
        ]

    def test_markup_in_description_printed_literally(self, cli):
        cli.send('add "[bold]not bold[/bold] [red]"')
        out = cli.send("list")
        assert "[bold]not bold[/bold] [red]" in out


class TestList:
    """Tests for the list command."""

    def test_empty(self, cli):
        assert "No tasks found." in cli.send("list")

    def test_unrecognized_argument_shows_all(self, cli):
        cli.send("add one")
        cli.send("done 1")
        out = cli.send("list everything")
        assert "one" in out
        assert "DONE" in out


class TestDoneAndDelete:
    """Tests for the done and delete commands."""

    def test_done_is_idempotent(self, cli):
        cli.send("add task")
        assert "marked as completed" in cli.send("done 1")
        assert "marked as completed" in cli.send("done 1")

    def test_invalid_id(self, cli):
        cli.send("add task")
        assert "Invalid task ID: abc" in cli.send("done abc")
        assert "Invalid task ID: 1x" in cli.send("delete 1x")
        assert cli.app.store.get(1).completed is False
        assert len(cli.app.store) == 1

    def test_wrong_arity_is_unrecognized(self, cli):
        cli.send("add task")
        assert UNKNOWN_COMMAND_MESSAGE in cli.send("done")
        assert UNKNOWN_COMMAND_MESSAGE in cli.send("delete 1 2")
        assert len(cli.app.store) == 1

    def test_delete_twice(self, cli):
        cli.send("add task")
        assert "Task 1 deleted." in cli.send("delete 1")
        assert "Task with ID 1 not found." in cli.send("delete 1")


class TestDispatch:
    """Tests for line dispatching."""

    def test_unknown_command(self, cli):
        assert UNKNOWN_COMMAND_MESSAGE in cli.send("frobnicate now")

    def test_command_names_are_case_sensitive(self, cli):
        assert UNKNOWN_COMMAND_MESSAGE in cli.send("LIST")

    def test_blank_line_ignored(self, cli):
        assert cli.send("") == ""
        assert cli.send("    ") == ""

    def test_help(self, cli):
        out = cli.send("help")
        for usage in ("add <description>", "list [pending]", "done <id>", "delete <id>", "help", "exit"):
            assert usage in out
        assert 'add "Buy groceries" -p high' in out

    def test_help_ignores_extra_arguments(self, cli):
        assert "list [pending]" in cli.send("help me please")

    def test_exit_stops(self, cli):
        cli.send("exit")
        assert cli.app.should_exit is True

    def test_command_error_reported(self, cli):
        class BrokenCommand(Command):
            def __init__(self):
                super().__init__(name="broken", description="Always fails")

            def execute(self, args, app):
                raise RuntimeError("boom")

        cli.app.command_registry.register(BrokenCommand())
        cli.send("broken")

        assert "Error executing command: boom" in cli.stderr
        assert cli.app.should_exit is False

    def test_store_errors_go_to_stderr(self, cli):
        cli.app.store.path.unlink()
        cli.app.store.path.mkdir()

        out = cli.send("add still works")

        assert "Task added with ID: 1" in out
        assert "Error saving tasks" in cli.stderr


class TestRun:
    """Tests for the main loop."""

    def test_banner_commands_and_goodbye(self, mock_context):
        harness = CLIHarness(mock_context.settings, "add \"Walk the dog\"\nlist\nexit\nlist\n")

        assert harness.app.run() == 0

        out = harness.stdout
        assert "Command Line Task Manager" in out
        assert "Task added with ID: 1" in out
        assert "Walk the dog" in out
        assert out.rstrip().endswith("Goodbye!")
        # Nothing after exit is processed
        assert harness.input.read() == "list\n"

    def test_end_of_input_ends_session(self, mock_context):
        harness = CLIHarness(mock_context.settings, "add one\n\nadd two")

        harness.app.run()

        assert len(harness.app.store) == 2
        assert "Goodbye!" in harness.stdout

    def test_banner_can_be_disabled(self, mock_context):
        settings = mock_context.settings.model_copy(update={"show_banner": False})
        harness = CLIHarness(settings, "")

        harness.app.run()

        assert "Command Line Task Manager" not in harness.stdout
        assert "Goodbye!" in harness.stdout

    def test_prompt_printed_before_each_read(self, mock_context):
        harness = CLIHarness(mock_context.settings.model_copy(update={"show_banner": False}), "help\n")

        harness.app.run()

        assert harness.stdout.count("> ") == 2

    def test_load_error_reported_at_startup(self, mock_context):
        mock_context.tasks_file.write_text("not json", encoding="utf-8")
        harness = CLIHarness(mock_context.settings, "exit\n")

        harness.app.run()

        assert "Error loading tasks" in harness.stderr
        assert harness.app.store.is_empty()
        assert mock_context.tasks_file.read_text(encoding="utf-8") == "not json"

    def test_state_survives_restart(self, mock_context):
        CLIHarness(mock_context.settings, 'add "Keep me" -p low\nexit\n').app.run()

        harness = CLIHarness(mock_context.settings, "")
        assert harness.app.store.get(1).description == "Keep me"
        assert "Task added with ID: 2" in harness.send("add next")


class TestInjection:
    """The store is passed in explicitly rather than shared globally."""

    def test_injected_store_is_used(self, mock_context, tmp_path):
        store = TaskStore(tmp_path / "other.json")
        store.add("From elsewhere")

        session = TerminalSession(
            input_stream=io.StringIO("list\n"),
            console=Console(file=io.StringIO(), width=120, color_system=None),
        )
        app = TaskCLIApp(mock_context.settings, store=store, session=session)

        assert app.store is store
        assert not mock_context.tasks_file.exists()

        app.process_input("list")
        assert "From elsewhere" in session.console.file.getvalue()

    def test_empty_injected_store_is_kept(self, mock_context, tmp_path):
        store = TaskStore(tmp_path / "other.json")
        assert store.is_empty()

        session = TerminalSession(
            input_stream=io.StringIO(""),
            console=Console(file=io.StringIO(), width=120, color_system=None),
        )
        app = TaskCLIApp(mock_context.settings, store=store, session=session)

        assert app.store is store
        assert not mock_context.tasks_file.exists()

        app.process_input('add "Goes to other file"')
        assert store.get(1).description == "Goes to other file"
        assert not mock_context.tasks_file.exists()
