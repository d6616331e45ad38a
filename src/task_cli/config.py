"""Configuration for the task CLI.

Settings Management:
    The module provides both a global singleton and context-based settings:

    1. Global singleton (simple cases):
        set_settings(my_settings)
        settings = get_settings()

    2. Context-based (isolated contexts, tests):
        with SettingsContext(my_settings):
            settings = get_settings()  # Returns my_settings

Settings Loading Priority (highest to lowest):
    1. Constructor arguments
    2. Environment variables (TASK_CLI_* prefix)
    3. Project config (./.{app_name}/settings.json)
    4. User config (~/.{app_name}/settings.json)
    5. .env file
    6. Default values

Only settings are global here; the task store is always constructed
explicitly from a settings instance and passed around.
"""

from contextlib import contextmanager
from contextvars import ContextVar, Token
from pathlib import Path
from typing import Generator, Tuple, Type

from pydantic_settings import (
    BaseSettings as PydanticBaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from task_cli.settings_mixins import CLISettingsMixin, StorageSettingsMixin

__all__ = [
    "TaskSettings",
    "SettingsContext",
    "get_settings",
    "set_settings",
    "reload_settings",
]


def _get_json_config_source(
    settings_cls: Type[PydanticBaseSettings],
    json_file: Path,
) -> PydanticBaseSettingsSource | None:
    """Create a JSON config source if the file exists."""
    if not json_file.exists():
        return None
    return JsonConfigSettingsSource(settings_cls, json_file=json_file)


class TaskSettings(StorageSettingsMixin, CLISettingsMixin, PydanticBaseSettings):
    """Settings for the task CLI.

    Mixins provide organized settings:
    - StorageSettingsMixin: app name, tasks file, JSON layout
    - CLISettingsMixin: logging, prompt and banner
    """

    model_config = SettingsConfigDict(
        env_prefix="TASK_CLI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[PydanticBaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Layer JSON config files between the environment and .env.

        JSON sources are only included if the files exist.
        """
        sources: list[PydanticBaseSettingsSource] = [
            init_settings,
            env_settings,
        ]

        app_name = "task_cli"
        field_info = cls.model_fields.get("app_name")
        if field_info is not None and field_info.default:
            app_name = field_info.default

        project_json = _get_json_config_source(
            settings_cls,
            Path.cwd() / f".{app_name}" / "settings.json",
        )
        if project_json:
            sources.append(project_json)

        user_json = _get_json_config_source(
            settings_cls,
            Path.home() / f".{app_name}" / "settings.json",
        )
        if user_json:
            sources.append(user_json)

        sources.append(dotenv_settings)

        return tuple(sources)


# Context variable for settings (takes precedence over global singleton)
_settings_context: ContextVar[TaskSettings | None] = ContextVar(
    "settings_context", default=None
)

_settings_instance: TaskSettings | None = None


def get_settings() -> TaskSettings:
    """Get the current settings instance.

    Resolution order:
    1. Context variable (set via SettingsContext or set_context_settings)
    2. Global singleton (set via set_settings)
    3. Fresh TaskSettings instance (created on first access)
    """
    context_settings = _settings_context.get()
    if context_settings is not None:
        return context_settings

    global _settings_instance
    if _settings_instance is None:
        _settings_instance = TaskSettings()
    return _settings_instance


def set_settings(settings: TaskSettings) -> None:
    """Set the global settings instance."""
    global _settings_instance
    _settings_instance = settings


def set_context_settings(settings: TaskSettings | None) -> Token:
    """Set settings for the current context.

    Returns:
        Token that can be used to reset the context variable.
    """
    return _settings_context.set(settings)


@contextmanager
def SettingsContext(settings: TaskSettings) -> Generator[TaskSettings, None, None]:
    """Context manager for isolated settings.

    Example:
        with SettingsContext(test_settings) as s:
            app = TaskCLIApp()  # picks up test_settings
    """
    token = _settings_context.set(settings)
    try:
        yield settings
    finally:
        _settings_context.reset(token)


def reload_settings() -> TaskSettings:
    """Reload settings (clears global singleton and context cache).

    Returns:
        Fresh TaskSettings instance
    """
    global _settings_instance
    _settings_instance = None
    _settings_context.set(None)
    return get_settings()
