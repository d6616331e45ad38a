"""Shared test fixtures and utilities for task-cli tests.

Provides:
- MockContext for isolating tests from global state
- Temporary tasks file and store fixtures
- A CLI harness that feeds input lines and captures console output
"""

import io
import os
import tempfile
from pathlib import Path
from typing import Generator

import pytest
from rich.console import Console

from task_cli.cli.app import TaskCLIApp
from task_cli.cli.session import TerminalSession
from task_cli.config import (
    TaskSettings,
    reload_settings,
    set_context_settings,
    set_settings,
)
from task_cli.tasks.store import TaskStore


def _clear_task_cli_env() -> dict[str, str]:
    """Remove TASK_CLI_* variables from the environment, returning them."""
    removed = {k: v for k, v in os.environ.items() if k.startswith("TASK_CLI_")}
    for key in removed:
        del os.environ[key]
    return removed


class MockContext:
    """Context manager for isolating tests from global state.

    Handles:
    - Resetting the global settings singleton
    - Providing a temporary directory for the tasks file
    - Hiding TASK_CLI_* environment variables

    Usage:
        with MockContext() as ctx:
            settings = ctx.settings
            tasks_file = ctx.tasks_file
    """

    def __init__(self, **settings_kwargs):
        self._settings_kwargs = settings_kwargs
        self._temp_dir: tempfile.TemporaryDirectory | None = None
        self._settings: TaskSettings | None = None
        self._original_env: dict[str, str] = {}

    def __enter__(self) -> "MockContext":
        self._temp_dir = tempfile.TemporaryDirectory()
        self._original_env = _clear_task_cli_env()

        self._settings = TaskSettings(
            tasks_file=Path(self._temp_dir.name) / "tasks.json",
            **self._settings_kwargs,
        )
        set_settings(self._settings)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        set_context_settings(None)
        _clear_task_cli_env()
        os.environ.update(self._original_env)
        reload_settings()
        if self._temp_dir:
            self._temp_dir.cleanup()

    @property
    def settings(self) -> TaskSettings:
        if self._settings is None:
            raise RuntimeError("MockContext not entered")
        return self._settings

    @property
    def tasks_file(self) -> Path:
        return self.settings.tasks_file


class CLIHarness:
    """Drives a TaskCLIApp with in-memory input and output."""

    def __init__(self, settings: TaskSettings, input_text: str = "") -> None:
        self.out = io.StringIO()
        self.err = io.StringIO()
        self.input = io.StringIO(input_text)
        self.session = TerminalSession(
            settings.prompt,
            console=Console(file=self.out, width=120, color_system=None, highlight=False),
            error_console=Console(file=self.err, width=120, color_system=None, highlight=False),
            input_stream=self.input,
        )
        self.app = TaskCLIApp(settings, session=self.session)

    def send(self, line: str) -> str:
        """Process one line and return what it printed to stdout."""
        start = self.out.tell()
        self.app.process_input(line)
        return self.out.getvalue()[start:]

    @property
    def stdout(self) -> str:
        return self.out.getvalue()

    @property
    def stderr(self) -> str:
        return self.err.getvalue()


@pytest.fixture
def mock_context() -> Generator[MockContext, None, None]:
    """Fixture providing an isolated test context."""
    with MockContext() as ctx:
        yield ctx


@pytest.fixture
def tasks_file(tmp_path: Path) -> Path:
    """Path to a (not yet created) tasks file in a temporary directory."""
    return tmp_path / "tasks.json"


@pytest.fixture
def store(tasks_file: Path) -> TaskStore:
    """Fresh store backed by a temporary file."""
    return TaskStore(tasks_file)


@pytest.fixture
def cli(mock_context: MockContext) -> CLIHarness:
    """CLI harness bound to an isolated settings context."""
    return CLIHarness(mock_context.settings)
