"""
Interactive shell session.

Holds the state the shell needs between commands: the file indexer, the
working directory and the indexer configuration. The working directory
is session state, never the process-wide cwd, so relative paths typed by
the user are resolved against `session.cwd`.

I/O goes through injectable callables (`echo`, `prompt`, `confirm`) that
default to click's, so the shell can be driven from tests.
"""

import shlex
from pathlib import Path
from typing import Callable

import click

from ..config.schema import IndexerConfig
from ..indexing.file_indexer import FileIndexer
from ..logging import get_logger
from .commands import COMMANDS

logger = get_logger(__name__)


def _default_prompt(text: str) -> str:
    return click.prompt(text, default="", show_default=False, prompt_suffix="")


def _default_confirm(text: str) -> bool:
    return click.confirm(text, default=False)


class ShellSession:
    """Read-eval-print loop over a FileIndexer."""

    def __init__(
        self,
        indexer: FileIndexer,
        cwd: Path,
        config: IndexerConfig | None = None,
        echo: Callable[[str], None] = click.echo,
        prompt: Callable[[str], str] = _default_prompt,
        confirm: Callable[[str], bool] = _default_confirm,
    ) -> None:
        self.indexer = indexer
        self.cwd = cwd.expanduser().resolve()
        self.config = config or IndexerConfig()
        self.echo = echo
        self.prompt = prompt
        self.confirm = confirm
        self.running = True

    def resolve(self, path: str) -> Path:
        """Resolve a user-supplied path against the session directory."""
        candidate = Path(path).expanduser()
        if not candidate.is_absolute():
            candidate = self.cwd / candidate
        return candidate

    def execute(self, line: str) -> bool:
        """Parse and run one command line.

        Returns:
            True if the command succeeded, False otherwise
        """
        try:
            parts = shlex.split(line)
        except ValueError as e:
            self.echo(f"Could not parse command: {e}")
            return False

        if not parts:
            return True

        name, args = parts[0], parts[1:]
        cmd = COMMANDS.get(name)
        if cmd is None:
            self.echo(f"Invalid command '{name}'. Type 'help' for a list of commands.")
            return False

        logger.debug("shell.command", command=name, args=args)
        return cmd.handler(self, args)

    def run(self) -> None:
        """Run the loop until `exit` is confirmed or input ends."""
        self.echo("Welcome to the Text File Indexer!")
        self.echo("Type 'help' for a list of commands.")

        while self.running:
            self.echo(f"Working directory: {self.cwd}")
            try:
                line = self.prompt("> ")
            except (EOFError, click.Abort):
                break

            if not line.strip():
                continue

            if not self.execute(line):
                self.echo("Error while executing command. Please try again.")
            self.echo("")

        self.echo("Thank you for using the Text File Indexer!")
