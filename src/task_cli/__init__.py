"""Task CLI - an interactive command-line task tracker.

Tasks (description, completion flag, priority) live in memory and are
written to a JSON file after every change. The package provides:

- Task records and a file-backed TaskStore
- A small command registry with quote-aware input parsing
- A REPL built on rich output and prompt_toolkit input
- Layered settings (env vars, JSON config files, .env) via pydantic-settings
"""

from task_cli.cli.app import TaskCLIApp
from task_cli.cli.commands import Command, CommandRegistry
from task_cli.config import (
    SettingsContext,
    TaskSettings,
    get_settings,
    reload_settings,
    set_settings,
)
from task_cli.tasks import JsonTaskCodec, Priority, Task, TaskCodec, TaskStore

__all__ = [
    # CLI
    "TaskCLIApp",
    "Command",
    "CommandRegistry",
    # Tasks
    "JsonTaskCodec",
    "Priority",
    "Task",
    "TaskCodec",
    "TaskStore",
    # Settings
    "TaskSettings",
    "SettingsContext",
    "get_settings",
    "reload_settings",
    "set_settings",
]

__version__ = "0.1.0"
