"""
Text file discovery - the file enumeration provider.

Given a path and a recursive flag, returns the candidate files to index:
the path itself when it is a text file, or the text files inside it when
it is a directory. Common tool and VCS directories are skipped the same
way the indexer skips them everywhere else.
"""

import fnmatch
import os
from pathlib import Path
from typing import Iterator

from ..errors import NotFoundError
from .reader import TextFileReader

# Directories ignored by default
DEFAULT_IGNORE_DIRS: frozenset[str] = frozenset({
    ".git",
    ".hg",
    ".svn",
    "node_modules",
    "__pycache__",
    ".venv",
    "venv",
    ".tox",
    ".mypy_cache",
    ".pytest_cache",
    ".ruff_cache",
    ".idea",
    ".vscode",
})

# File patterns ignored by default
DEFAULT_IGNORE_PATTERNS: tuple[str, ...] = (
    "*.pyc",
    "*.pyo",
    ".DS_Store",
    "Thumbs.db",
)


def collect_text_files(
    path: Path,
    recursive: bool = False,
    reader: TextFileReader | None = None,
    exclude_dirs: list[str] | tuple[str, ...] = (),
    exclude_patterns: list[str] | tuple[str, ...] = (),
) -> list[Path]:
    """Enumerate the text files reachable from `path`.

    Args:
        path: A file or a directory
        recursive: If True, descend into subdirectories
        reader: Reader used to classify files (default TextFileReader())
        exclude_dirs: Additional directory names to skip
        exclude_patterns: Additional glob patterns of file names to skip

    Returns:
        Absolute paths of the text files found, in sorted order.

    Raises:
        NotFoundError: If `path` does not exist
    """
    reader = reader or TextFileReader()
    root = path.expanduser().resolve()

    if not root.exists():
        raise NotFoundError(root)

    if not root.is_dir():
        return [root] if reader.is_text_file(root) else []

    ignore_dirs = DEFAULT_IGNORE_DIRS | frozenset(exclude_dirs)
    ignore_patterns = DEFAULT_IGNORE_PATTERNS + tuple(exclude_patterns)

    return [
        file_path
        for file_path in _walk(root, recursive, ignore_dirs, ignore_patterns)
        if reader.is_text_file(file_path)
    ]


def _walk(
    root: Path,
    recursive: bool,
    ignore_dirs: frozenset[str],
    ignore_patterns: tuple[str, ...],
) -> Iterator[Path]:
    """Walk `root` in sorted order, honouring the exclusions.

    Prunes dirnames in place so ignored directories are never entered.
    """
    for dirpath, dirnames, filenames in os.walk(root):
        if recursive:
            dirnames[:] = sorted(
                d for d in dirnames
                if d not in ignore_dirs
                and not any(fnmatch.fnmatch(d, p) for p in ignore_patterns)
            )
        else:
            dirnames[:] = []

        for filename in sorted(filenames):
            if any(fnmatch.fnmatch(filename, p) for p in ignore_patterns):
                continue
            yield Path(dirpath) / filename
