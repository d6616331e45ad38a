"""Interactive command-line front end for the task store."""

from task_cli.cli.commands import (
    Command,
    CommandCategory,
    CommandRegistry,
    ParsedArgs,
    parse_task_id,
    split_command,
)
from task_cli.cli.app import TaskCLIApp
from task_cli.cli.session import CommandNameCompleter, TerminalSession

__all__ = [
    "Command",
    "CommandCategory",
    "CommandNameCompleter",
    "CommandRegistry",
    "ParsedArgs",
    "TaskCLIApp",
    "TerminalSession",
    "parse_task_id",
    "split_command",
]
