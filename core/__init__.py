"""Core modules for wordindexer."""

from .processor import Processor
from .tokenizer import WordTokenizer, tokenize, tokenize_lines

__all__ = ["Processor", "WordTokenizer", "tokenize", "tokenize_lines"]
