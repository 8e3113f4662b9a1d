"""
Files module - reading and enumerating the text files to index.
"""

from .discovery import DEFAULT_IGNORE_DIRS, collect_text_files
from .reader import TextFileReader

__all__ = [
    "DEFAULT_IGNORE_DIRS",
    "TextFileReader",
    "collect_text_files",
]
