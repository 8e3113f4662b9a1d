"""
Text file reader - the file content provider used by the FileIndexer.

A file qualifies as text when the MIME type guessed from its name is
`text/*` (or one of the configured extra types). Files whose type cannot
be determined are rejected. Content is decoded as UTF-8; anything that
fails to decode is treated as not being text either.
"""

import mimetypes
from pathlib import Path

from ..errors import NotFoundError, NotReadableError, NotTextError
from ..logging import get_logger

logger = get_logger(__name__)


class TextFileReader:
    """Classifies and reads text files.

    Raises the FileReadError family instead of returning sentinels, so
    the caller decides how a failure affects the index.
    """

    def __init__(
        self,
        extra_mime_types: list[str] | tuple[str, ...] = (),
        max_file_size: int | None = None,
    ) -> None:
        """Initialize the reader.

        Args:
            extra_mime_types: Non-`text/*` MIME types to accept as text
                (e.g. "application/json")
            max_file_size: Maximum size in bytes; None for no limit
        """
        self.extra_mime_types = frozenset(extra_mime_types)
        self.max_file_size = max_file_size

    def guess_mime_type(self, path: Path) -> str | None:
        """Guess the MIME type of a file from its name."""
        mime_type, _ = mimetypes.guess_type(path.name)
        return mime_type

    def is_text_file(self, path: Path) -> bool:
        """Return True if `path` is an existing regular file classified as text."""
        if not path.is_file():
            return False
        return self._is_text_type(self.guess_mime_type(path))

    def read(self, path: Path) -> str:
        """Read the text content of a file.

        Args:
            path: Path of the file to read

        Returns:
            The decoded content (possibly empty)

        Raises:
            NotFoundError: If the file does not exist or is not a regular file
            NotTextError: If the file is not classified as text or is not UTF-8
            NotReadableError: If the file is too large or an I/O error occurs
        """
        if not path.exists() or not path.is_file():
            raise NotFoundError(path)

        mime_type = self.guess_mime_type(path)
        if not self._is_text_type(mime_type):
            raise NotTextError(path, mime_type)

        try:
            if self.max_file_size is not None:
                size = path.stat().st_size
                if size > self.max_file_size:
                    raise NotReadableError(
                        path, f"{size} bytes exceeds limit of {self.max_file_size}"
                    )
            content = path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            raise NotTextError(path, mime_type, reason="invalid UTF-8")
        except OSError as e:
            raise NotReadableError(path, e.strerror or str(e))

        logger.debug("reader.file.read", file=str(path), chars=len(content))
        return content

    def _is_text_type(self, mime_type: str | None) -> bool:
        if mime_type is None:
            return False
        return mime_type.startswith("text/") or mime_type in self.extra_mime_types
