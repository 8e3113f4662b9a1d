"""
Main CLI for textindexer using Click.

`shell` opens the interactive indexer; `search` indexes a set of paths as
one batch and prints the files containing a keyword; `validate-config`
checks a YAML configuration file.
"""

import sys
from pathlib import Path

import click
from pydantic import ValidationError

from .config.loader import load_config
from .config.schema import AppConfig
from .errors import NotFoundError
from .files.discovery import collect_text_files
from .indexing import SimpleFileIndexer
from .logging import configure_logging
from .shell import ShellSession

# Exit codes
EXIT_SUCCESS = 0
EXIT_FAILED = 1
EXIT_CONFIG_ERROR = 3
EXIT_INTERRUPTED = 130

# Current version
_VERSION = "0.3.0"


def _load_or_exit(config_path: Path | None, cli_args: dict) -> AppConfig:
    """Load the configuration, exiting with EXIT_CONFIG_ERROR on failure."""
    try:
        return load_config(config_path=config_path, cli_args=cli_args)
    except FileNotFoundError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)
    except ValidationError as e:
        click.echo(f"Invalid configuration: {e}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)


@click.group()
@click.version_option(version=_VERSION, prog_name="textindexer")
def main() -> None:
    """textindexer - In-memory full-text index over local text files.

    Index text files, then look up which of them contain a keyword.
    """
    pass


@main.command()
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to the YAML configuration file",
)
@click.option(
    "-w",
    "--workspace",
    type=click.Path(path_type=Path),
    help="Starting working directory of the shell",
)
@click.option(
    "--batch-policy",
    type=click.Choice(["clear", "rollback"]),
    help="What a failed batch does to the index",
)
@click.option("-v", "--verbose", count=True, help="Technical log verbosity (-v, -vv)")
@click.option("--log-file", type=click.Path(path_type=Path), help="Write JSON logs to this file")
@click.option("--quiet", is_flag=True, help="Hide indexing progress logs")
def shell(
    config: Path | None,
    workspace: Path | None,
    batch_policy: str | None,
    verbose: int,
    log_file: Path | None,
    quiet: bool,
) -> None:
    """Start the interactive indexing shell."""
    app_config = _load_or_exit(
        config,
        {
            "workspace": workspace,
            "batch_policy": batch_policy,
            "verbose": verbose or None,
            "log_file": log_file,
        },
    )
    configure_logging(app_config.logging, quiet=quiet)

    indexer = SimpleFileIndexer.from_config(app_config.indexer)
    session = ShellSession(
        indexer,
        cwd=app_config.workspace.root,
        config=app_config.indexer,
    )
    try:
        session.run()
    except KeyboardInterrupt:
        click.echo("\nInterrupted.", err=True)
        sys.exit(EXIT_INTERRUPTED)


@main.command()
@click.argument("keyword")
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option(
    "-r",
    "--recursive",
    is_flag=True,
    help="Descend into subdirectories",
)
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to the YAML configuration file",
)
@click.option("-v", "--verbose", count=True, help="Technical log verbosity (-v, -vv)")
@click.option("--quiet", is_flag=True, help="Hide indexing progress logs")
def search(
    keyword: str,
    paths: tuple[Path, ...],
    recursive: bool,
    config: Path | None,
    verbose: int,
    quiet: bool,
) -> None:
    """Index PATHS as one batch and print the files containing KEYWORD."""
    app_config = _load_or_exit(config, {"recursive": recursive or None, "verbose": verbose or None})
    configure_logging(app_config.logging, quiet=quiet)

    indexer = SimpleFileIndexer.from_config(app_config.indexer)

    files: list[Path] = []
    for path in paths:
        try:
            files.extend(
                collect_text_files(
                    path,
                    recursive=app_config.indexer.recursive,
                    reader=indexer.reader,
                    exclude_dirs=app_config.indexer.exclude_dirs,
                    exclude_patterns=app_config.indexer.exclude_patterns,
                )
            )
        except NotFoundError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(EXIT_FAILED)

    if not indexer.index_files(*dict.fromkeys(files)):
        click.echo(f"Indexing failed: {indexer.last_error}", err=True)
        sys.exit(EXIT_FAILED)

    for file in sorted(indexer.search(keyword)):
        click.echo(str(file))
    sys.exit(EXIT_SUCCESS)


@main.command()
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to the configuration file to validate",
)
def validate_config(config: Path | None) -> None:
    """Validate a YAML configuration file."""
    try:
        app_config = load_config(config_path=config)
        click.echo("Valid configuration")
        click.echo(f"  Batch failure policy: {app_config.indexer.batch_failure_policy}")
        click.echo(f"  Recursive by default: {app_config.indexer.recursive}")
        click.echo(f"  Workspace: {app_config.workspace.root}")
    except FileNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)
    except Exception as e:
        click.echo(f"Invalid configuration: {e}", err=True)
        sys.exit(EXIT_FAILED)
