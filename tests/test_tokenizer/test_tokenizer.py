"""
Tests for the whitespace tokenizer.

Covers:
- Splitting on runs of any whitespace
- Empty and all-whitespace input
- Case folding (and the case-preserving variant)
- Punctuation kept as part of the token
"""

import pytest

from textindexer.tokenizing import Tokenizer, WhitespaceTokenizer


@pytest.fixture
def tokenizer() -> WhitespaceTokenizer:
    return WhitespaceTokenizer()


class TestSplitting:
    def test_single_spaces(self, tokenizer: WhitespaceTokenizer):
        assert tokenizer.tokenize("hello big world") == ["hello", "big", "world"]

    def test_runs_of_mixed_whitespace(self, tokenizer: WhitespaceTokenizer):
        text = "one  \t two\n\nthree\r\nfour"
        assert tokenizer.tokenize(text) == ["one", "two", "three", "four"]

    def test_leading_and_trailing_whitespace(self, tokenizer: WhitespaceTokenizer):
        assert tokenizer.tokenize("   padded   ") == ["padded"]

    def test_duplicates_are_kept_in_order(self, tokenizer: WhitespaceTokenizer):
        assert tokenizer.tokenize("a b a") == ["a", "b", "a"]

    def test_empty_string(self, tokenizer: WhitespaceTokenizer):
        assert tokenizer.tokenize("") == []

    def test_only_whitespace(self, tokenizer: WhitespaceTokenizer):
        assert tokenizer.tokenize(" \n\t  ") == []


class TestCaseFolding:
    def test_lowercase_by_default(self, tokenizer: WhitespaceTokenizer):
        assert tokenizer.tokenize("The Quick FOX") == ["the", "quick", "fox"]

    def test_preserve_case(self, tokenizer: WhitespaceTokenizer):
        assert tokenizer.tokenize("The Quick FOX", lowercase=False) == ["The", "Quick", "FOX"]


class TestPunctuation:
    def test_punctuation_stays_attached(self, tokenizer: WhitespaceTokenizer):
        assert tokenizer.tokenize("Hello, world!") == ["hello,", "world!"]

    def test_punctuated_token_differs_from_bare_word(self, tokenizer: WhitespaceTokenizer):
        assert "world" not in tokenizer.tokenize("world!")


class TestPurity:
    def test_is_a_tokenizer(self, tokenizer: WhitespaceTokenizer):
        assert isinstance(tokenizer, Tokenizer)

    def test_repeated_calls_are_independent(self, tokenizer: WhitespaceTokenizer):
        first = tokenizer.tokenize("a b")
        first.append("mutated")
        assert tokenizer.tokenize("a b") == ["a", "b"]
