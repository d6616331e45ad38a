"""Interactive task CLI application.

This module provides the REPL that:
1. Builds the task store from settings and hands it to commands explicitly
2. Reads one line at a time through a TerminalSession
3. Dispatches each line to the matching command
4. Prints any store diagnostics (load/save failures) on the error stream
"""

from __future__ import annotations

from task_cli.cli.builtin_commands import ExitCommand, HelpCommand, render_help
from task_cli.cli.commands import CommandRegistry, split_command
from task_cli.cli.session import CommandNameCompleter, TerminalSession
from task_cli.cli.task_commands import AddCommand, DeleteCommand, DoneCommand, ListCommand
from task_cli.config import TaskSettings, get_settings
from task_cli.logging import Loggers, bind_context, configure_logging
from task_cli.tasks.codec import JsonTaskCodec
from task_cli.tasks.store import TaskStore

logger = Loggers.cli()

UNKNOWN_COMMAND_MESSAGE = "Unknown command. Type 'help' for available commands."


class TaskCLIApp:
    """Task tracker REPL.

    The store and the session can be injected, which keeps tests and
    embedding code free of global state; by default both are built from
    settings.
    """

    def __init__(
        self,
        settings: TaskSettings | None = None,
        *,
        store: TaskStore | None = None,
        session: TerminalSession | None = None,
    ) -> None:
        """Initialize the CLI application.

        Args:
            settings: Optional settings override
            store: Optional pre-built task store
            session: Optional terminal session (for custom I/O)
        """
        self._settings = settings or get_settings()
        configure_logging(self._settings)
        bind_context(tasks_file=str(self._settings.tasks_file))

        logger.info("app_starting", app_name=self._settings.app_name)

        self.command_registry = CommandRegistry()
        self.register_commands()
        self._register_builtin_commands()

        self.store = store if store is not None else TaskStore(
            self._settings.tasks_file,
            codec=JsonTaskCodec(indent=self._settings.json_indent),
        )

        self.session = session if session is not None else TerminalSession(
            self._settings.prompt,
            completer=CommandNameCompleter(self.command_registry.get_completions()),
        )

        self.should_exit = False

    @property
    def settings(self) -> TaskSettings:
        """Get the application settings."""
        return self._settings

    def register_commands(self) -> None:
        """Register the task commands.

        Override to add or replace commands.
        """
        self.command_registry.register(AddCommand())
        self.command_registry.register(ListCommand())
        self.command_registry.register(DoneCommand())
        self.command_registry.register(DeleteCommand())

    def _register_builtin_commands(self) -> None:
        self.command_registry.register(HelpCommand())
        self.command_registry.register(ExitCommand())

    def stop(self) -> None:
        """Stop the application after the current command."""
        self.should_exit = True

    def process_input(self, user_input: str) -> None:
        """Tokenize one input line and run the matching command.

        Blank lines are ignored. Unknown commands and commands given the
        wrong number of arguments change nothing and print a hint.
        """
        tokens = split_command(user_input)
        if not tokens:
            return

        name, args = tokens[0], tokens[1:]
        command = self.command_registry.get(name)

        if command is None or not command.accepts(args):
            logger.debug("unknown_command", command=name, arg_count=len(args))
            self.session.add_warning(UNKNOWN_COMMAND_MESSAGE)
        else:
            logger.debug("executing_command", command=command.name, args=args)
            try:
                command.execute(args, self)
                logger.debug("command_completed", command=command.name)
            except Exception as e:
                logger.error("command_failed", command=command.name, error=str(e))
                self.session.add_error(f"Error executing command: {e}")

        self._report_store_errors()

    def _report_store_errors(self) -> None:
        for error in self.store.pop_errors():
            self.session.add_error(error)

    def run(self) -> int:
        """Run the main loop until ``exit`` or end of input.

        Returns:
            Process exit code.
        """
        logger.info("repl_starting")

        self._report_store_errors()
        if self._settings.show_banner:
            self.session.add_rich(render_help(self.command_registry))

        while not self.should_exit:
            try:
                user_input = self.session.prompt()
            except KeyboardInterrupt:
                continue
            except EOFError:
                self.session.add_message("")
                break
            self.process_input(user_input)

        logger.info("app_ending", task_count=len(self.store))
        self.session.add_message("Goodbye!")
        return 0
