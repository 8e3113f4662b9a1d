"""
Shell commands - registered handler table.

Each command is a plain function `handler(session, args) -> bool`
registered under its name with the `command` decorator. The handler
returns True when the command succeeded; user-facing messages go through
`session.echo`.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from ..errors import NotFoundError
from ..files.discovery import collect_text_files

if TYPE_CHECKING:
    from .session import ShellSession

Handler = Callable[["ShellSession", list[str]], bool]


@dataclass(frozen=True)
class Command:
    """A shell command and its help text."""

    name: str
    usage: str
    summary: str
    handler: Handler


COMMANDS: dict[str, Command] = {}


def command(name: str, usage: str, summary: str) -> Callable[[Handler], Handler]:
    """Register a handler in COMMANDS under `name`."""

    def decorator(handler: Handler) -> Handler:
        COMMANDS[name] = Command(name=name, usage=usage, summary=summary, handler=handler)
        return handler

    return decorator


# ── Help ──────────────────────────────────────────────────────────────────


@command("help", "help", "Show this list of commands.")
def cmd_help(session: "ShellSession", args: list[str]) -> bool:
    session.echo("Available commands:")
    width = max(len(c.usage) for c in COMMANDS.values())
    for cmd in COMMANDS.values():
        session.echo(f"  {cmd.usage:<{width}}  {cmd.summary}")
    return True


# ── Indexing ──────────────────────────────────────────────────────────────


@command(
    "index",
    "index [-r|--recursive] <path>...",
    "Index all text files in the given files and directories.",
)
def cmd_index(session: "ShellSession", args: list[str]) -> bool:
    recursive = session.config.recursive
    if args and args[0] in ("-r", "--recursive"):
        recursive = True
        args = args[1:]

    if not args:
        session.echo(
            "Please provide a list of paths separated by spaces. "
            "Quote paths that contain spaces."
        )
        return False

    found: list[Path] = []
    for arg in args:
        try:
            found.extend(
                collect_text_files(
                    session.resolve(arg),
                    recursive=recursive,
                    reader=session.indexer.reader,
                    exclude_dirs=session.config.exclude_dirs,
                    exclude_patterns=session.config.exclude_patterns,
                )
            )
        except NotFoundError as e:
            session.echo(f"Skipping: {e}")

    # Same file reached through two arguments is indexed once
    files = list(dict.fromkeys(found))
    if not files:
        session.echo("No text files found.")
        return True

    new_files = [f for f in files if not session.indexer.is_indexed(f)]
    known_files = [f for f in files if f not in new_files]

    # One file at a time: a failure stops the command but keeps earlier files
    for count, file in enumerate(new_files, start=1):
        if not session.indexer.index_file(file):
            session.echo(f"Error while indexing: {session.indexer.last_error}")
            if count > 1:
                session.echo(f"Indexed {count - 1} file(s) before the error.")
            return False
    if new_files:
        session.echo(f"Indexed {len(new_files)} file(s).")

    for file in known_files:
        if not session.confirm(f"File `{file.name}` already indexed. Update?"):
            continue
        if not session.indexer.update_file_in_index(file):
            session.echo(f"Error while updating {file}: {session.indexer.last_error}")
            return False
        session.echo(f"Updated {file}.")

    return True


@command("update", "update <path>...", "Re-index files whose content changed.")
def cmd_update(session: "ShellSession", args: list[str]) -> bool:
    if not args:
        session.echo("Please provide at least one file to update.")
        return False

    for arg in args:
        path = session.resolve(arg)
        if not session.indexer.update_file_in_index(path):
            session.echo(f"Error while updating {path}: {session.indexer.last_error}")
            return False
        session.echo(f"Updated {path}.")
    return True


@command("remove", "remove <path>...", "Remove files from the index.")
def cmd_remove(session: "ShellSession", args: list[str]) -> bool:
    if not args:
        session.echo("Please provide at least one file to remove.")
        return False

    for arg in args:
        path = session.resolve(arg)
        if not session.indexer.is_indexed(path):
            session.echo(f"Not indexed: {path}")
            continue
        session.indexer.remove_file_from_index(path)
        session.echo(f"Removed {path}.")
    return True


@command("clear", "clear", "Remove every file from the index.")
def cmd_clear(session: "ShellSession", args: list[str]) -> bool:
    session.indexer.clear_index()
    session.echo("Index cleared.")
    return True


# ── Queries ───────────────────────────────────────────────────────────────


@command("query", "query <word>", "Find indexed files containing a word.")
def cmd_query(session: "ShellSession", args: list[str]) -> bool:
    if len(args) != 1:
        session.echo("Please provide one keyword to search for.")
        return False

    files = sorted(session.indexer.search(args[0]))
    # Echo the keyword the way it was looked up
    keyword = args[0].strip().lower()

    if not files:
        session.echo(f"No files found containing '{keyword}'")
        return True

    session.echo(f"Files containing '{keyword}':")
    for file in files:
        session.echo(f"- {file}")
    return True


@command("files", "files", "List the indexed files.")
def cmd_files(session: "ShellSession", args: list[str]) -> bool:
    files = sorted(session.indexer.get_indexed_files())
    if not files:
        session.echo("No files indexed.")
        return True
    for file in files:
        session.echo(f"- {file}")
    return True


@command("stats", "stats", "Show index size.")
def cmd_stats(session: "ShellSession", args: list[str]) -> bool:
    files = len(session.indexer.get_indexed_files())
    tokens = session.indexer.index.token_count
    session.echo(f"{files} file(s) indexed, {tokens} distinct token(s).")
    return True


# ── Navigation ────────────────────────────────────────────────────────────


@command("cd", "cd [path]", "Change the working directory (home if omitted).")
def cmd_cd(session: "ShellSession", args: list[str]) -> bool:
    target = Path.home() if not args else session.resolve(args[0])

    try:
        target = target.resolve(strict=True)
    except (OSError, RuntimeError):
        session.echo(f"Directory doesn't exist: {target}")
        return False

    if not target.is_dir():
        session.echo(f"Not a directory: {target}")
        return False

    session.cwd = target
    session.echo(f"Changed directory to: {target}")
    return True


@command("ls", "ls", "List the files in the working directory.")
def cmd_ls(session: "ShellSession", args: list[str]) -> bool:
    try:
        entries = sorted(session.cwd.iterdir(), key=lambda p: p.name)
    except OSError as e:
        session.echo(f"Could not list {session.cwd}: {e}")
        return False

    for entry in entries:
        session.echo(f"{entry.name}/" if entry.is_dir() else entry.name)
    return True


@command("exit", "exit", "Exit the shell.")
def cmd_exit(session: "ShellSession", args: list[str]) -> bool:
    if session.confirm("Are you sure you want to exit?"):
        session.running = False
    return True
