"""Terminal session: reads input lines and renders output.

Output goes through rich consoles (normal output to stdout, errors and
diagnostics to stderr). Input comes from prompt_toolkit when stdin is an
interactive terminal, giving line editing, history and command-name
completion; otherwise lines are read straight from the input stream so
the CLI also works with piped input.
"""

from __future__ import annotations

import sys
from typing import IO, Iterable

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document
from prompt_toolkit.history import InMemoryHistory
from rich.console import Console, RenderableType
from rich.markup import escape


class CommandNameCompleter(Completer):
    """Completes the command name (the first word on the line)."""

    def __init__(self, commands: Iterable[str]) -> None:
        self.commands = sorted(commands)

    def get_completions(self, document: Document, complete_event):
        """Yield completions only while the first word is being typed."""
        text = document.text_before_cursor.lstrip()

        if " " in text:
            return

        for cmd in self.commands:
            if cmd.startswith(text):
                yield Completion(
                    text=cmd,
                    start_position=-len(text),
                    display=cmd,
                )


class TerminalSession:
    """Line-oriented terminal I/O for the REPL.

    Args:
        message: Prompt text shown before each read.
        console: Console for regular output (defaults to stdout).
        error_console: Console for errors (defaults to stderr).
        input_stream: Stream to read lines from. Defaults to stdin; when
            stdin is a terminal, prompt_toolkit handles the reading.
        completer: Optional completer for the interactive prompt.
    """

    def __init__(
        self,
        message: str = "> ",
        *,
        console: Console | None = None,
        error_console: Console | None = None,
        input_stream: IO[str] | None = None,
        completer: Completer | None = None,
    ) -> None:
        self.message = message
        self.console = console or Console(highlight=False)
        self.error_console = error_console or Console(stderr=True, highlight=False)
        self._input_stream = input_stream
        self._prompt_session: PromptSession[str] | None = None

        if input_stream is None and sys.stdin.isatty():
            self._prompt_session = PromptSession(
                history=InMemoryHistory(),
                completer=completer,
                complete_while_typing=True,
            )

    @property
    def interactive(self) -> bool:
        return self._prompt_session is not None

    def prompt(self) -> str:
        """Block until one line of input is available.

        Returns:
            The line without its trailing newline.

        Raises:
            EOFError: At end of input.
            KeyboardInterrupt: If the user pressed Ctrl+C at the prompt.
        """
        if self._prompt_session is not None:
            return self._prompt_session.prompt(self.message)

        stream = self._input_stream or sys.stdin
        self.console.print(escape(self.message), end="")
        self.console.file.flush()
        line = stream.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def add_message(self, text: str) -> None:
        """Print plain text (never interpreted as markup)."""
        self.console.print(text, markup=False)

    def add_success(self, text: str) -> None:
        self.console.print(f"[green]{escape(text)}[/green]")

    def add_warning(self, text: str) -> None:
        self.console.print(f"[yellow]{escape(text)}[/yellow]")

    def add_error(self, text: str) -> None:
        """Print an error or diagnostic to the error console."""
        self.error_console.print(f"[red]{escape(text)}[/red]")

    def add_rich(self, renderable: RenderableType) -> None:
        """Print a rich renderable (table, panel, ...)."""
        self.console.print(renderable)
