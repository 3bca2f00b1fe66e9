"""Word tokenization.

Words are whatever remains between delimiters:
- runs of whitespace
- any single one of: , . ; : ! ? " ( ) [ ] { }

Everything else (apostrophes, hyphens, digits, other punctuation) stays
inside the word. No case folding or Unicode normalization.
"""

import re
from typing import Iterable

from nltk.tokenize import RegexpTokenizer

# Whitespace run OR one punctuation delimiter
WORD_DELIMITER = r'\s+|[,.;:!?"()\[\]{}]'


class WordTokenizer:
    """Splits text into words on whitespace and punctuation."""

    def __init__(self, pattern: str = WORD_DELIMITER):
        """
        Initialize tokenizer.

        Args:
            pattern: Delimiter regex (matches are gaps between words)
        """
        self.pattern = pattern
        self._tokenizer = RegexpTokenizer(pattern, gaps=True, discard_empty=True, flags=re.UNICODE)

    def tokenize(self, line: str) -> list[str]:
        """
        Split a single line into words.

        Args:
            line: Input text (usually one line of a file)

        Returns:
            Words in order; never empty or whitespace-only
        """
        if not line:
            return []
        return [word for word in self._tokenizer.tokenize(line) if word.strip()]

    def tokenize_lines(self, lines: Iterable[str]) -> list[str]:
        """Tokenize each line on its own and concatenate the words in order.

        Delimiters never span a line break, so no word straddles two lines.
        """
        words = []
        for line in lines:
            words.extend(self.tokenize(line))
        return words


_DEFAULT_TOKENIZER = WordTokenizer()


def tokenize(text: str) -> list[str]:
    """
    Convenience function to split text into words.

    Multi-line text is tokenized line by line.

    Args:
        text: Input text

    Returns:
        List of words
    """
    return _DEFAULT_TOKENIZER.tokenize_lines(text.splitlines())


def tokenize_lines(lines: Iterable[str]) -> list[str]:
    """Convenience function to tokenize an iterable of lines (e.g. an open file)."""
    return _DEFAULT_TOKENIZER.tokenize_lines(lines)
