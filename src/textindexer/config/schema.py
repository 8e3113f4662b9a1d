"""
Pydantic models for textindexer configuration.

Defines all configuration schemas using Pydantic v2 for validation,
defaults, and serialization.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field


class LoggingConfig(BaseModel):
    """Logging system configuration."""

    # "human" is the indexing progress level shown by default
    level: Literal["debug", "info", "human", "warn", "error"] = "human"
    file: Path | None = None
    verbose: int = 0

    model_config = {"extra": "forbid"}


class WorkspaceConfig(BaseModel):
    """Workspace (starting directory of the shell) configuration."""

    root: Path = Path(".")

    model_config = {"extra": "forbid"}


class IndexerConfig(BaseModel):
    """File indexer configuration.

    Controls which files are considered text, how directories are
    traversed, and what happens to the index when a batch fails.
    """

    batch_failure_policy: Literal["clear", "rollback"] = Field(
        default="clear",
        description=(
            "What a failed multi-file indexing call does to the index. "
            "'clear' wipes the whole index (including files indexed before the "
            "batch); 'rollback' discards only the failed batch."
        ),
    )
    recursive: bool = Field(
        default=False,
        description="Default for descending into subdirectories when indexing a directory.",
    )
    max_file_size: int = Field(
        default=1_000_000,
        ge=0,
        description="Maximum file size to index in bytes (default: 1MB)",
    )
    exclude_dirs: list[str] = Field(
        default_factory=list,
        description=(
            "Additional directories to exclude (besides defaults: "
            ".git, node_modules, __pycache__, .venv, etc.)"
        ),
    )
    exclude_patterns: list[str] = Field(
        default_factory=list,
        description="Additional glob patterns of file names to exclude (e.g.: ['*.log'])",
    )
    extra_mime_types: list[str] = Field(
        default_factory=list,
        description=(
            "MIME types accepted as text besides text/* "
            "(e.g.: ['application/json', 'application/xml'])"
        ),
    )

    model_config = {"extra": "forbid"}


class AppConfig(BaseModel):
    """Complete application configuration.

    This is the root of the configuration tree. It combines all sections
    and is the entry point for validation.
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    workspace: WorkspaceConfig = Field(default_factory=WorkspaceConfig)
    indexer: IndexerConfig = Field(default_factory=IndexerConfig)

    model_config = {"extra": "forbid"}
