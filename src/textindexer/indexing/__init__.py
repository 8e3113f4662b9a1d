"""
Indexing module - inverted index and file indexer.

Maps tokens to the set of files containing them and exposes file-level
operations (index, update, remove, search, clear) on top of it.
"""

from .base import Index
from .file_indexer import BATCH_POLICIES, FileIndexer, SimpleFileIndexer, canonical_path
from .hashmap import HashMapIndex

__all__ = [
    "BATCH_POLICIES",
    "FileIndexer",
    "HashMapIndex",
    "Index",
    "SimpleFileIndexer",
    "canonical_path",
]
