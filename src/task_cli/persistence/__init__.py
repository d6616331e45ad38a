"""Persistence helpers for the task store."""

from task_cli.persistence._utils import atomic_write_text

__all__ = ["atomic_write_text"]
