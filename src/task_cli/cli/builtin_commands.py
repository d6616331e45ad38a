"""Built-in commands for the CLI."""

from typing import TYPE_CHECKING

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from task_cli.cli.commands import Command, CommandCategory, CommandRegistry

if TYPE_CHECKING:
    from task_cli.cli.app import TaskCLIApp


def render_help(registry: CommandRegistry) -> Panel:
    """Build the usage panel listing every command and a few examples."""
    table = Table(show_header=False, box=None, padding=(0, 2, 0, 0))
    table.add_column("Usage", style="bold cyan", no_wrap=True)
    table.add_column("Description")

    examples: list[str] = []
    for category in (CommandCategory.TASKS, CommandCategory.GENERAL):
        for cmd in registry.by_category(category):
            table.add_row(Text(cmd.usage), cmd.description)
            examples.extend(cmd.examples)

    parts: list = [Text("USAGE:", style="bold"), table]
    if examples:
        parts.append(Text(""))
        parts.append(Text("EXAMPLES:", style="bold"))
        for example in examples:
            parts.append(Text(f"  {example}"))

    return Panel(
        Group(*parts),
        title="[bold]Command Line Task Manager[/bold]",
        border_style="cyan",
    )


class HelpCommand(Command):
    """Display help information about available commands."""

    def __init__(self) -> None:
        super().__init__(
            name="help",
            description="Show this help message",
            category=CommandCategory.GENERAL,
        )

    def execute(self, args: list[str], app: "TaskCLIApp") -> None:
        app.session.add_rich(render_help(app.command_registry))


class ExitCommand(Command):
    """Exit the application."""

    def __init__(self) -> None:
        super().__init__(
            name="exit",
            description="Exit the program",
            category=CommandCategory.GENERAL,
        )

    def execute(self, args: list[str], app: "TaskCLIApp") -> None:
        app.stop()
