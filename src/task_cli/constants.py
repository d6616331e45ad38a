"""Shared constants for task-cli."""

DEFAULT_TASKS_FILE = "tasks.json"
DEFAULT_PROMPT = "> "
DEFAULT_JSON_INDENT = 4

# Description column truncation in list output
DESCRIPTION_MAX_LENGTH = 200


def truncate(text: str, max_length: int = DESCRIPTION_MAX_LENGTH) -> str:
    """Truncate text with ellipsis if it exceeds max_length."""
    if len(text) > max_length:
        return text[:max_length] + "..."
    return text
