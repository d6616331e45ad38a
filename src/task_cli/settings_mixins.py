"""Settings mixins for storage layout and CLI/UI configuration.

StorageSettingsMixin: Application identity and the backing task file.
CLISettingsMixin: Logging and interactive display settings.

These live outside cli/ so that config.py can compose TaskSettings
without importing the cli package.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator

from task_cli.constants import DEFAULT_JSON_INDENT, DEFAULT_PROMPT, DEFAULT_TASKS_FILE


class StorageSettingsMixin:
    """Settings for application identity and the persisted task file.

    Should be composed with TaskSettings via multiple inheritance.
    """

    app_name: str = Field(
        default="task_cli",
        title="App Name",
        description="Application name, used for config directories",
    )

    tasks_file: Path = Field(
        default=Path(DEFAULT_TASKS_FILE),
        title="Tasks File",
        description="JSON file the task list is loaded from and saved to",
    )

    json_indent: int = Field(
        default=DEFAULT_JSON_INDENT,
        ge=0,
        le=8,
        title="JSON Indent",
        description="Indentation used when writing the tasks file",
    )

    @field_validator("tasks_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Expand ~ in paths."""
        if isinstance(v, str):
            return Path(v).expanduser()
        return v


class CLISettingsMixin:
    """Settings for CLI/UI configuration.

    Note: This is a mixin, not a TaskSettings subclass, to avoid
    MRO issues when composed with other settings classes.
    """

    log_level: Literal["debug", "info", "warning", "error"] = Field(
        default="error",
        title="Log Level",
        description="Logging verbosity level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        title="Log Format",
        description="Log output format (console for dev, json for machines)",
    )

    prompt: str = Field(
        default=DEFAULT_PROMPT,
        title="Prompt",
        description="Text shown before each input line",
    )
    show_banner: bool = Field(
        default=True,
        title="Show Banner",
        description="Print the help text when the session starts",
    )
