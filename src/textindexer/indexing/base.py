"""
Abstract index interface.

An index maps tokens to the set of files containing them and keeps the
authoritative set of indexed files. Implementations may use any data
structure, but every operation must be total: an index never performs
I/O and never raises.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Index(ABC):
    """Inverted index of tokens to files."""

    @abstractmethod
    def add_to_index(self, token: str, file: Path) -> None:
        """Post `file` under `token` and mark it as indexed. Idempotent."""
        pass

    @abstractmethod
    def register_file(self, file: Path) -> None:
        """Mark `file` as indexed without posting it under any token."""
        pass

    @abstractmethod
    def remove_file_from_index(self, file: Path) -> None:
        """Remove `file` from the index.

        After removal the file must never be returned by `search()` or
        `get_indexed_files()`. No-op if the file is not indexed.
        """
        pass

    @abstractmethod
    def clear_index(self) -> None:
        """Remove every posting and every indexed file."""
        pass

    @abstractmethod
    def search(self, token: str) -> frozenset[Path]:
        """Return the indexed files posted under `token` (empty if unknown)."""
        pass

    @abstractmethod
    def get_indexed_files(self) -> frozenset[Path]:
        """Return every file currently indexed."""
        pass

    @property
    @abstractmethod
    def token_count(self) -> int:
        """Number of distinct tokens with at least one posting."""
        pass
