"""
Whitespace tokenizer.

Splits text on runs of whitespace and lower-cases the result. Case
folding is the only normalization applied: punctuation stays attached
to the token, so "world!" and "world" are different tokens. This is a
known limitation of the tokenizer, not something the index corrects.
"""

from abc import ABC, abstractmethod


class Tokenizer(ABC):
    """Interface for tokenization strategies.

    Implementations must be pure: no I/O, no state between calls.
    """

    @abstractmethod
    def tokenize(self, text: str) -> list[str]:
        """Split text into a list of tokens."""
        pass


class WhitespaceTokenizer(Tokenizer):
    """Tokenizer that splits on one or more whitespace characters."""

    def tokenize(self, text: str, lowercase: bool = True) -> list[str]:
        """Tokenize a string.

        Args:
            text: Text to tokenize
            lowercase: If False, keep the original case (inspection only;
                the indexing path always lower-cases)

        Returns:
            List of tokens. Empty or all-whitespace text yields [].
        """
        # str.split() with no separator collapses runs and drops empties
        tokens = text.split()
        if lowercase:
            tokens = [token.lower() for token in tokens]
        return tokens

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}()>"
