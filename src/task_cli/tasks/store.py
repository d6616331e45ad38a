"""File-backed task store.

Keeps the task list in memory and rewrites the whole JSON file after
every mutation. The store never prints anything itself: problems with
the backing file are logged and queued as diagnostics that the caller
collects with ``pop_errors()``.
"""

from pathlib import Path

from task_cli.logging import Loggers
from task_cli.persistence import atomic_write_text
from task_cli.tasks.codec import DocumentError, JsonTaskCodec, TaskCodec
from task_cli.tasks.models import Priority, Task

logger = Loggers.store()


class TaskStore:
    """Persistent, ordered collection of tasks.

    Ids are assigned in strictly increasing order starting at 1 and are
    never reused within a session. On load the counter restarts at one
    past the highest id found in the file.

    Example:
        >>> store = TaskStore("tasks.json")
        >>> task_id = store.add("Buy milk", Priority.HIGH)
        >>> store.complete(task_id)
        True
        >>> store.list_tasks(include_completed=False)
        []
    """

    def __init__(self, path: str | Path, codec: TaskCodec | None = None) -> None:
        self._path = Path(path)
        self._codec: TaskCodec = codec or JsonTaskCodec()
        self._tasks: list[Task] = []
        self._next_id = 1
        self._errors: list[str] = []
        self.load()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def next_id(self) -> int:
        return self._next_id

    def load(self) -> None:
        """Replace the in-memory state with the contents of the backing file.

        A missing file starts an empty store and writes an empty list.
        An unreadable or malformed file starts an empty store and leaves
        the file as it is until the next mutation overwrites it.
        """
        self._tasks = []
        self._next_id = 1

        if not self._path.exists():
            logger.info("tasks_file_missing", path=str(self._path))
            self.persist()
            return

        try:
            text = self._path.read_text(encoding="utf-8")
            tasks = self._codec.decode(text)
        except (OSError, UnicodeDecodeError, DocumentError) as e:
            logger.warning("tasks_load_failed", path=str(self._path), error=str(e))
            self._errors.append(
                f"Error loading tasks from {self._path}: {e}. Starting with empty task list."
            )
            return

        self._tasks = tasks
        if tasks:
            self._next_id = max(1, max(task.id for task in tasks) + 1)
        logger.info(
            "tasks_loaded",
            path=str(self._path),
            count=len(tasks),
            next_id=self._next_id,
        )

    def persist(self) -> bool:
        """Write every task, in insertion order, to the backing file.

        Returns:
            True if the file was written, False if writing failed.
        """
        try:
            atomic_write_text(self._path, self._codec.encode(self._tasks))
        except OSError as e:
            logger.warning("tasks_save_failed", path=str(self._path), error=str(e))
            self._errors.append(f"Error saving tasks to {self._path}: {e}")
            return False
        logger.debug("tasks_saved", path=str(self._path), count=len(self._tasks))
        return True

    def pop_errors(self) -> list[str]:
        """Return and clear diagnostics recorded since the last call."""
        errors, self._errors = self._errors, []
        return errors

    def add(self, description: str, priority: Priority = Priority.MEDIUM) -> int:
        """Create a new task.

        Args:
            description: Task description (must not be blank).
            priority: Priority level.

        Returns:
            The id assigned to the new task.
        """
        if not description or not description.strip():
            raise ValueError("description is required")

        task = Task(
            id=self._next_id,
            description=description,
            completed=False,
            priority=Priority(priority),
        )
        self._next_id += 1
        self._tasks.append(task)
        logger.info("task_added", task_id=task.id, priority=task.priority.label)
        self.persist()
        return task.id

    def get(self, task_id: int) -> Task | None:
        """Get a task by id."""
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def list_tasks(self, include_completed: bool = True) -> list[Task]:
        """List tasks ordered by priority, then id.

        Args:
            include_completed: If False, completed tasks are left out.

        Returns:
            A new list; the stored order is not changed.
        """
        results = sorted(self._tasks, key=lambda t: t.sort_key)
        if not include_completed:
            results = [t for t in results if not t.completed]
        return results

    def complete(self, task_id: int) -> bool:
        """Mark a task as completed.

        Completing an already completed task succeeds and rewrites the file.

        Returns:
            True if the task exists, False if not found.
        """
        task = self.get(task_id)
        if task is None:
            return False
        task.completed = True
        logger.info("task_completed", task_id=task_id)
        self.persist()
        return True

    def delete(self, task_id: int) -> bool:
        """Delete a task.

        Returns:
            True if deleted, False if not found.
        """
        task = self.get(task_id)
        if task is None:
            return False
        self._tasks.remove(task)
        logger.info("task_deleted", task_id=task_id)
        self.persist()
        return True

    def is_empty(self) -> bool:
        """Check if the store has any tasks."""
        return not self._tasks

    def __len__(self) -> int:
        return len(self._tasks)
