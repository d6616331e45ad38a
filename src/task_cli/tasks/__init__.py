"""Task records and their file-backed store.

Example:
    >>> store = TaskStore("tasks.json")
    >>> task_id = store.add("Implement auth module", Priority.HIGH)
    >>> store.complete(task_id)
    >>> store.list_tasks(include_completed=False)
"""

from task_cli.tasks.codec import DocumentError, JsonTaskCodec, TaskCodec
from task_cli.tasks.models import Priority, Task
from task_cli.tasks.store import TaskStore

__all__ = [
    "DocumentError",
    "JsonTaskCodec",
    "Priority",
    "Task",
    "TaskCodec",
    "TaskStore",
]
