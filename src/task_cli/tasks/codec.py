"""Mapping between task records and their persisted document form.

The store only deals in ``Task`` objects and strings; everything that
knows about the concrete serialization format lives here.
"""

import json
from typing import Protocol, Sequence

from task_cli.tasks.models import Task


class DocumentError(ValueError):
    """Raised when a persisted document cannot be turned into tasks."""


class TaskCodec(Protocol):
    """Converts a task collection to and from a text document."""

    def encode(self, tasks: Sequence[Task]) -> str: ...

    def decode(self, text: str) -> list[Task]: ...


class JsonTaskCodec:
    """Stores tasks as a JSON array of objects.

    Each object has the keys ``id``, ``description``, ``completed`` and
    ``priority`` (1 = high, 2 = medium, 3 = low).
    """

    def __init__(self, indent: int | None = 4) -> None:
        self.indent = indent

    def encode(self, tasks: Sequence[Task]) -> str:
        return json.dumps(
            [task.to_dict() for task in tasks],
            indent=self.indent,
            ensure_ascii=False,
        )

    def decode(self, text: str) -> list[Task]:
        """Parse a document into tasks.

        Raises:
            DocumentError: If the text is not valid JSON, is not an array,
                or contains a record that is not a well-formed task.
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise DocumentError(f"invalid JSON: {e}") from e

        if not isinstance(data, list):
            raise DocumentError(f"expected a JSON array, got {type(data).__name__}")

        tasks: list[Task] = []
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                raise DocumentError(f"record {index} is not an object")
            try:
                tasks.append(Task.from_dict(item))
            except KeyError as e:
                raise DocumentError(f"record {index} is missing field {e}") from e
            except (TypeError, ValueError) as e:
                raise DocumentError(f"record {index}: {e}") from e
        return tasks
