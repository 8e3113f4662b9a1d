"""
Tokenizing module - splits raw text into index tokens.
"""

from .whitespace import Tokenizer, WhitespaceTokenizer

__all__ = [
    "Tokenizer",
    "WhitespaceTokenizer",
]
