"""
File indexer - orchestrates reader, tokenizer and index.

Every operation works on files identified by their canonical absolute
path. Read failures never leave a partially indexed file behind: a file
is either indexed with all of its tokens or not indexed at all.

Batches (`index_files`) are all-or-nothing. Every file is read and
tokenized into a staging list first; the index is only touched once the
whole batch has been read. On the first failure the batch failure policy
decides what happens to the index:

- "clear": the whole index is wiped, including files indexed before the
  batch started. An empty index is preferred over a partial one.
- "rollback": the staged batch is discarded and the index is left
  exactly as it was before the call.
"""

import os
from pathlib import Path
from typing import Literal

import structlog

from ..config.schema import IndexerConfig
from ..errors import BatchAbortedError, FileReadError, IndexerError
from ..files.reader import TextFileReader
from ..logging.human import HumanLog
from ..tokenizing import Tokenizer, WhitespaceTokenizer
from .base import Index
from .hashmap import HashMapIndex

BatchPolicy = Literal["clear", "rollback"]
BATCH_POLICIES: tuple[str, ...] = ("clear", "rollback")


def canonical_path(file: str | os.PathLike) -> Path:
    """Resolve a file argument to the identifier used by the index."""
    return Path(os.fspath(file)).expanduser().resolve()


class FileIndexer:
    """Indexes text files into an inverted index.

    Owns exactly one tokenizer and one index for its whole lifetime.
    Mutating operations return a bool; the cause of the last failure is
    available in `last_error`.

    Not thread-safe: mutating calls must be serialized by the caller.
    """

    def __init__(
        self,
        tokenizer: Tokenizer,
        index: Index,
        reader: TextFileReader | None = None,
        batch_policy: BatchPolicy = "clear",
    ) -> None:
        """Initialize the indexer.

        Args:
            tokenizer: Tokenizer used for file contents
            index: Index that stores the postings
            reader: File content provider (default TextFileReader())
            batch_policy: "clear" or "rollback", see module docstring

        Raises:
            ValueError: If batch_policy is not a known policy
        """
        if batch_policy not in BATCH_POLICIES:
            raise ValueError(
                f"Unknown batch policy '{batch_policy}'. "
                f"Expected one of: {', '.join(BATCH_POLICIES)}"
            )
        self.tokenizer = tokenizer
        self.index = index
        self.reader = reader if reader is not None else TextFileReader()
        self.batch_policy = batch_policy
        self.last_error: IndexerError | None = None
        self.log = structlog.get_logger().bind(component="file_indexer")
        self.hlog = HumanLog(self.log)

    # ── Indexing ─────────────────────────────────────────────────────────

    def index_file(self, file: str | os.PathLike) -> bool:
        """Index a single file.

        Args:
            file: Path of the text file to index

        Returns:
            True if the file was indexed, False if it could not be read.
            On failure the index is not modified.
        """
        path = canonical_path(file)
        try:
            tokens = self._read_tokens(path)
        except FileReadError as e:
            self._record_failure(path, e)
            return False

        self._commit(path, tokens)
        self.last_error = None
        return True

    def index_files(self, *files: str | os.PathLike) -> bool:
        """Index several files as a single all-or-nothing batch.

        Files are processed in the given order. On the first file that
        cannot be read, the batch failure policy is applied and nothing
        from the batch remains in the index.

        Args:
            *files: Paths of the text files to index

        Returns:
            True if every file was indexed, False otherwise
        """
        paths = [canonical_path(f) for f in files]
        self.hlog.batch_start(files=len(paths))

        staged: list[tuple[Path, list[str]]] = []
        for path in paths:
            try:
                staged.append((path, self._read_tokens(path)))
            except FileReadError as e:
                self._abort_batch(path, e)
                return False

        for path, tokens in staged:
            self._commit(path, tokens)

        self.last_error = None
        self.hlog.batch_done(files=len(staged), vocabulary=self.index.token_count)
        return True

    def update_file_in_index(self, file: str | os.PathLike) -> bool:
        """Re-index a file whose content may have changed.

        The file is removed first (if indexed) and then indexed again.
        If re-indexing fails the file ends up not indexed at all; its old
        postings are not restored.

        Args:
            file: Path of the file to update

        Returns:
            True if the file was re-indexed, False otherwise
        """
        path = canonical_path(file)
        if path in self.index.get_indexed_files():
            self.index.remove_file_from_index(path)

        if not self.index_file(path):
            return False

        self.hlog.file_updated(str(path))
        return True

    # ── Delegation ───────────────────────────────────────────────────────

    def remove_file_from_index(self, file: str | os.PathLike) -> None:
        """Remove a file from the index (no-op if it is not indexed)."""
        path = canonical_path(file)
        if path in self.index.get_indexed_files():
            self.index.remove_file_from_index(path)
            self.hlog.file_removed(str(path))

    def clear_index(self) -> None:
        """Remove every file and posting from the index."""
        self.index.clear_index()
        self.hlog.cleared()

    def search(self, keyword: str) -> frozenset[Path]:
        """Return the indexed files containing `keyword` (case-insensitive)."""
        return self.index.search(keyword.strip().lower())

    def get_indexed_files(self) -> frozenset[Path]:
        """Return every file currently indexed."""
        return self.index.get_indexed_files()

    def is_indexed(self, file: str | os.PathLike) -> bool:
        """True if `file` is currently indexed."""
        return canonical_path(file) in self.index.get_indexed_files()

    # ── Internals ────────────────────────────────────────────────────────

    def _read_tokens(self, path: Path) -> list[str]:
        content = self.reader.read(path)
        return self.tokenizer.tokenize(content)

    def _commit(self, path: Path, tokens: list[str]) -> None:
        """Insert a file's tokens; files without tokens are still registered."""
        if not tokens:
            self.index.register_file(path)
        for token in tokens:
            self.index.add_to_index(token.lower(), path)

        self.log.debug("indexer.file.indexed", file=str(path), tokens=len(tokens))
        self.hlog.file_done(str(path), tokens=len(tokens))

    def _record_failure(self, path: Path, error: IndexerError) -> None:
        self.last_error = error
        self.log.warning(
            "indexer.file.read_failed",
            file=str(path),
            error_type=type(error).__name__,
            error=str(error),
        )
        self.hlog.file_failed(str(path), str(error))

    def _abort_batch(self, path: Path, error: FileReadError) -> None:
        self._record_failure(path, error)
        self.last_error = BatchAbortedError(path, error, self.batch_policy)

        if self.batch_policy == "clear":
            self.index.clear_index()

        self.log.warning(
            "indexer.batch.aborted",
            file=str(path),
            policy=self.batch_policy,
            indexed_files=len(self.index.get_indexed_files()),
        )
        self.hlog.batch_aborted(str(path), policy=self.batch_policy)

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__}(tokenizer={self.tokenizer!r}, "
            f"index={self.index!r}, batch_policy='{self.batch_policy}')>"
        )


class SimpleFileIndexer(FileIndexer):
    """FileIndexer wired with a WhitespaceTokenizer and a HashMapIndex."""

    def __init__(
        self,
        reader: TextFileReader | None = None,
        batch_policy: BatchPolicy = "clear",
    ) -> None:
        super().__init__(
            tokenizer=WhitespaceTokenizer(),
            index=HashMapIndex(),
            reader=reader,
            batch_policy=batch_policy,
        )

    @classmethod
    def from_config(cls, config: IndexerConfig) -> "SimpleFileIndexer":
        """Build an indexer from the `indexer` section of the configuration."""
        reader = TextFileReader(
            extra_mime_types=config.extra_mime_types,
            max_file_size=config.max_file_size,
        )
        return cls(reader=reader, batch_policy=config.batch_failure_policy)
