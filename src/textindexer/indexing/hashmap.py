"""
Dict-backed inverted index.

A dict gives constant-time lookup and insertion per token. Removal is
the expensive operation: postings are purged eagerly, which walks the
whole vocabulary (O(distinct tokens)) but guarantees the index never
holds a dangling reference to a removed file and never holds an empty
posting set.
"""

from pathlib import Path

from .base import Index


class HashMapIndex(Index):
    """Inverted index stored in a dict of token -> set of files."""

    def __init__(self) -> None:
        self._postings: dict[str, set[Path]] = {}
        self._indexed_files: set[Path] = set()

    def add_to_index(self, token: str, file: Path) -> None:
        self._postings.setdefault(token, set()).add(file)
        self._indexed_files.add(file)

    def register_file(self, file: Path) -> None:
        self._indexed_files.add(file)

    def remove_file_from_index(self, file: Path) -> None:
        if file not in self._indexed_files:
            return
        self._indexed_files.discard(file)

        # Copy the keys: empty posting sets are deleted while iterating
        for token in list(self._postings):
            files = self._postings[token]
            files.discard(file)
            if not files:
                del self._postings[token]

    def clear_index(self) -> None:
        self._postings.clear()
        self._indexed_files.clear()

    def search(self, token: str) -> frozenset[Path]:
        return frozenset(self._postings.get(token, ()))

    def get_indexed_files(self) -> frozenset[Path]:
        return frozenset(self._indexed_files)

    @property
    def token_count(self) -> int:
        """Number of distinct tokens currently posted."""
        return len(self._postings)

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__}(tokens={len(self._postings)}, "
            f"files={len(self._indexed_files)})>"
        )
