"""Command registry, base command class and input parsing helpers.

Input lines are split into tokens first (double-quoted substrings stay
together); the first token selects a command and the rest are handed
to it. Example of creating a custom command:

    from task_cli.cli.commands import Command, CommandCategory

    class CountCommand(Command):
        '''Show how many tasks are stored.'''

        def __init__(self):
            super().__init__(
                name="count",
                description="Show the number of tasks",
                usage="count",
                max_args=0,
                category=CommandCategory.TASKS,
            )

        def execute(self, args: list[str], app: Any) -> None:
            app.session.add_message(f"{len(app.store)} tasks")
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from task_cli.tasks.models import Priority

# A double-quoted run (closing quote optional at end of line) or a bare word
_TOKEN_PATTERN = re.compile(r'"([^"]*)(?:"|$)|(\S+)')
_TASK_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

PRIORITY_OPTION = "-p"


def split_command(line: str) -> list[str]:
    """Split an input line into tokens.

    Whitespace separates tokens, except inside double quotes: a quoted
    substring becomes one token with the quotes removed and its inner
    whitespace kept. An unterminated quote runs to the end of the line.

    Example:
        >>> split_command('add "Buy milk" -p high')
        ['add', 'Buy milk', '-p', 'high']
    """
    tokens: list[str] = []
    for match in _TOKEN_PATTERN.finditer(line):
        quoted, bare = match.groups()
        tokens.append(quoted if quoted is not None else bare)
    return tokens


def parse_task_id(token: str) -> int | None:
    """Parse a task id argument.

    Returns:
        The integer value, or None if the token is not an integer.
    """
    token = token.strip()
    if not _TASK_ID_PATTERN.fullmatch(token):
        return None
    return int(token)


class CommandCategory(Enum):
    """Categories for organizing commands."""

    TASKS = "tasks"
    GENERAL = "general"


@dataclass
class ParsedArgs:
    """Parsed command arguments.

    Provides easy access to positional arguments and options.
    """

    positional: list[str] = field(default_factory=list)
    """Arguments that are not options, in their original order."""

    options: dict[str, str] = field(default_factory=dict)
    """Option values keyed by option token (e.g. ``-p``)."""

    @property
    def text(self) -> str:
        """Positional arguments joined with single spaces."""
        return " ".join(self.positional)

    def get_option(self, name: str, default: str | None = None) -> str | None:
        return self.options.get(name, default)


class Command(ABC):
    """Base class for commands.

    Subclass this and override execute(). The number of accepted
    arguments is checked by accepts() before execute() is called; a
    command that does not accept its arguments is reported to the user
    as unrecognized.
    """

    def __init__(
        self,
        name: str,
        description: str,
        aliases: list[str] | None = None,
        usage: str | None = None,
        examples: list[str] | None = None,
        category: CommandCategory = CommandCategory.GENERAL,
        min_args: int = 0,
        max_args: int | None = None,
    ) -> None:
        """Initialize the command.

        Args:
            name: Command name as typed at the prompt
            description: Short description of what the command does
            aliases: Alternative names for the command
            usage: Usage string showing syntax (e.g., "done <id>")
            examples: List of example usages
            category: Category for organizing in help
            min_args: Minimum number of arguments after the name
            max_args: Maximum number of arguments, or None for no limit
        """
        self.name = name
        self.description = description
        self.aliases = aliases or []
        self.usage = usage or name
        self.examples = examples or []
        self.category = category
        self.min_args = min_args
        self.max_args = max_args

    def accepts(self, args: list[str]) -> bool:
        """Check whether the argument count fits this command."""
        if len(args) < self.min_args:
            return False
        return self.max_args is None or len(args) <= self.max_args

    @abstractmethod
    def execute(self, args: list[str], app: Any) -> None:
        """Execute the command with given arguments.

        Args:
            args: Tokens after the command name
            app: The CLI application instance
        """

    def parse_args(
        self, args: list[str], value_options: tuple[str, ...] = ()
    ) -> ParsedArgs:
        """Separate options from positional arguments.

        Each token equal to one of ``value_options`` consumes the token
        that follows it as its value; a later occurrence overrides an
        earlier one. An option with nothing after it is kept as a plain
        positional token. Everything else is positional.
        """
        options: dict[str, str] = {}
        positional: list[str] = []

        i = 0
        while i < len(args):
            part = args[i]
            if part in value_options and i + 1 < len(args):
                options[part] = args[i + 1]
                i += 2
                continue
            positional.append(part)
            i += 1

        return ParsedArgs(positional=positional, options=options)

    def parse_priority(self, parsed: ParsedArgs) -> Priority:
        """Read the ``-p`` option; missing or unknown values mean MEDIUM."""
        return Priority.from_name(parsed.get_option(PRIORITY_OPTION))


class CommandRegistry:
    """Registry for managing commands.

    Handles command registration and lookup by name or alias.
    """

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}
        self._categories: dict[CommandCategory, list[Command]] = {
            cat: [] for cat in CommandCategory
        }

    def register(self, command: Command) -> None:
        """Register a command and its aliases, replacing any command of the same name."""
        existing = self._commands.get(command.name)
        if existing is not None and existing is not command:
            self.unregister(existing.name)

        self._commands[command.name] = command
        for alias in command.aliases:
            self._commands[alias] = command

        if command not in self._categories[command.category]:
            self._categories[command.category].append(command)

    def unregister(self, name: str) -> None:
        """Unregister a command by name."""
        cmd = self._commands.get(name)
        if cmd:
            del self._commands[cmd.name]
            for alias in cmd.aliases:
                self._commands.pop(alias, None)

            if cmd in self._categories[cmd.category]:
                self._categories[cmd.category].remove(cmd)

    def get(self, name: str) -> Command | None:
        """Get a command by name or alias."""
        return self._commands.get(name)

    def all_commands(self) -> list[Command]:
        """Get all unique commands (excluding aliases), in registration order."""
        seen: set[str] = set()
        commands: list[Command] = []
        for cmd in self._commands.values():
            if cmd.name not in seen:
                seen.add(cmd.name)
                commands.append(cmd)
        return commands

    def by_category(self, category: CommandCategory) -> list[Command]:
        """Get commands in a specific category."""
        return self._categories.get(category, [])

    def get_completions(self) -> list[str]:
        """Get all command names and aliases for auto-completion."""
        return list(self._commands.keys())
