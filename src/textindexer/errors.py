"""
Error hierarchy for textindexer.

All fallibility originates at the file-read boundary. The index itself
never raises; the FileIndexer catches these errors, logs them and
reports a boolean outcome to its caller.
"""

from pathlib import Path


class IndexerError(Exception):
    """Base error for everything raised by textindexer."""

    pass


class FileReadError(IndexerError):
    """A file could not be turned into text content."""

    def __init__(self, path: Path | str, message: str) -> None:
        self.path = Path(path)
        super().__init__(message)


class NotFoundError(FileReadError):
    """The file does not exist or is not a regular file."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(path, f"File not found: {path}")


class NotReadableError(FileReadError):
    """I/O failure while reading the file."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.reason = reason
        super().__init__(path, f"Could not read {path}: {reason}")


class NotTextError(FileReadError):
    """The file is not classified as text (binary or unknown MIME type)."""

    def __init__(
        self,
        path: Path | str,
        mime_type: str | None = None,
        reason: str | None = None,
    ) -> None:
        self.mime_type = mime_type
        detail = reason or mime_type or "undetermined type"
        super().__init__(path, f"Not a text file: {path} ({detail})")


class BatchAbortedError(IndexerError):
    """A multi-file indexing call stopped at its first failing file."""

    def __init__(self, path: Path, cause: IndexerError, policy: str) -> None:
        self.path = path
        self.cause = cause
        self.policy = policy
        super().__init__(f"Batch aborted at {path} (policy={policy}): {cause}")
