"""Commands that read and change the task list."""

from abc import abstractmethod
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from task_cli.cli.commands import PRIORITY_OPTION, Command, CommandCategory, parse_task_id
from task_cli.constants import truncate
from task_cli.tasks.models import Priority, Task

if TYPE_CHECKING:
    from task_cli.cli.app import TaskCLIApp

_PRIORITY_STYLES = {
    Priority.HIGH: "bold red",
    Priority.MEDIUM: "yellow",
    Priority.LOW: "dim",
}


def render_task_table(tasks: list[Task]) -> Table:
    """Build the table shown by ``list``."""
    table = Table(title="Task List", show_lines=False, padding=(0, 1))
    table.add_column("ID", justify="right", no_wrap=True)
    table.add_column("Status", no_wrap=True)
    table.add_column("Priority", no_wrap=True)
    table.add_column("Description")

    for task in tasks:
        status_style = "green" if task.completed else "cyan"
        table.add_row(
            str(task.id),
            Text(task.status_label, style=status_style),
            Text(task.priority.label, style=_PRIORITY_STYLES[task.priority]),
            # Text keeps descriptions literal; a str cell would be parsed as markup
            Text(truncate(task.description)),
        )
    return table


class AddCommand(Command):
    """Add a new task."""

    def __init__(self) -> None:
        super().__init__(
            name="add",
            description="Add a new task",
            usage="add <description> [-p high|medium|low]",
            examples=['add "Buy groceries" -p high', 'add "Walk the dog"'],
            category=CommandCategory.TASKS,
            min_args=1,
        )

    def accepts(self, args: list[str]) -> bool:
        # Some non-blank description must remain once -p is taken out
        parsed = self.parse_args(args, value_options=(PRIORITY_OPTION,))
        return bool(parsed.text.strip())

    def execute(self, args: list[str], app: "TaskCLIApp") -> None:
        parsed = self.parse_args(args, value_options=(PRIORITY_OPTION,))
        priority = self.parse_priority(parsed)
        task_id = app.store.add(parsed.text, priority)
        app.session.add_success(f"Task added with ID: {task_id}")


class ListCommand(Command):
    """List tasks ordered by priority."""

    def __init__(self) -> None:
        super().__init__(
            name="list",
            description="List all tasks ('list pending' hides completed ones)",
            usage="list [pending]",
            examples=["list", "list pending"],
            category=CommandCategory.TASKS,
        )

    def execute(self, args: list[str], app: "TaskCLIApp") -> None:
        pending_only = bool(args) and args[0] == "pending"
        tasks = app.store.list_tasks(include_completed=not pending_only)

        if not tasks:
            app.session.add_message("No tasks found.")
            return

        app.session.add_rich(render_task_table(tasks))


class _TaskIdCommand(Command):
    """Base for commands taking exactly one task id."""

    def __init__(self, name: str, description: str, **kwargs: Any) -> None:
        super().__init__(
            name=name,
            description=description,
            usage=f"{name} <id>",
            category=CommandCategory.TASKS,
            min_args=1,
            max_args=1,
            **kwargs,
        )

    def execute(self, args: list[str], app: "TaskCLIApp") -> None:
        task_id = parse_task_id(args[0])
        if task_id is None:
            app.session.add_warning(f"Invalid task ID: {args[0]}")
            return

        if self.apply(task_id, app):
            app.session.add_success(self.success_message(task_id))
        else:
            app.session.add_warning(f"Task with ID {task_id} not found.")

    @abstractmethod
    def apply(self, task_id: int, app: "TaskCLIApp") -> bool:
        """Change the store; False if the task does not exist."""

    @abstractmethod
    def success_message(self, task_id: int) -> str:
        """Message printed after apply() succeeds."""


class DoneCommand(_TaskIdCommand):
    """Mark a task as completed."""

    def __init__(self) -> None:
        super().__init__("done", "Mark task as completed", examples=["done 2"])

    def apply(self, task_id: int, app: "TaskCLIApp") -> bool:
        return app.store.complete(task_id)

    def success_message(self, task_id: int) -> str:
        return f"Task {task_id} marked as completed."


class DeleteCommand(_TaskIdCommand):
    """Delete a task."""

    def __init__(self) -> None:
        super().__init__("delete", "Delete a task", examples=["delete 3"])

    def apply(self, task_id: int, app: "TaskCLIApp") -> bool:
        return app.store.delete(task_id)

    def success_message(self, task_id: int) -> str:
        return f"Task {task_id} deleted."
