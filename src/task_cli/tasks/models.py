"""Task record and priority levels."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class Priority(IntEnum):
    """Task priority. Lower values sort first."""

    HIGH = 1
    MEDIUM = 2
    LOW = 3

    @classmethod
    def from_name(cls, name: str | None) -> "Priority":
        """Map a user-supplied name to a priority.

        ``high``/``medium``/``low`` map to their level; anything else,
        including None and other spellings such as ``HIGH``, falls back
        to MEDIUM.
        """
        for member in cls:
            if name == member.name.lower():
                return member
        return cls.MEDIUM

    @property
    def label(self) -> str:
        return self.name


@dataclass
class Task:
    """A single task entry."""

    id: int
    description: str
    completed: bool = False
    priority: Priority = Priority.MEDIUM

    @property
    def sort_key(self) -> tuple[int, int]:
        return (int(self.priority), self.id)

    @property
    def status_label(self) -> str:
        return "DONE" if self.completed else "PENDING"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "completed": self.completed,
            "priority": int(self.priority),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Task":
        """Build a task from its document form.

        Raises:
            KeyError: If a field is missing.
            TypeError: If a field has the wrong type.
            ValueError: If the priority is not a known level.
        """
        task_id = data["id"]
        description = data["description"]
        completed = data["completed"]
        priority = data["priority"]

        # bool is a subclass of int; reject it where an integer is expected
        if not isinstance(task_id, int) or isinstance(task_id, bool):
            raise TypeError(f"task id must be an integer, got {task_id!r}")
        if not isinstance(description, str):
            raise TypeError(f"task description must be a string, got {description!r}")
        if not isinstance(completed, bool):
            raise TypeError(f"task completed flag must be a boolean, got {completed!r}")
        if not isinstance(priority, int) or isinstance(priority, bool):
            raise TypeError(f"task priority must be an integer, got {priority!r}")

        return cls(
            id=task_id,
            description=description,
            completed=completed,
            priority=Priority(priority),
        )
