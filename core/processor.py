"""File processing: read, tokenize, apply rules."""

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from core.tokenizer import WordTokenizer
from rules.base import Rule
from rules.types import RuleResult

logger = logging.getLogger(__name__)


class Processor:
    """Applies registered rules to the words of a text file."""

    def __init__(self, encoding: str = "utf-8", tokenizer: Optional[WordTokenizer] = None):
        """
        Initialize processor.

        Args:
            encoding: Text encoding used to read input files
            tokenizer: Word tokenizer (default: whitespace + punctuation)
        """
        self.encoding = encoding
        self.tokenizer = tokenizer or WordTokenizer()
        self._rules: list[Rule] = []

    @property
    def rules(self) -> tuple[Rule, ...]:
        """Registered rules, in registration order."""
        return tuple(self._rules)

    def add_rule(self, rule: Rule) -> None:
        """Append a rule.

        Rules with the same name share one result key; the last one wins.
        """
        name = rule.name()
        if any(existing.name() == name for existing in self._rules):
            logger.warning("Rule '%s' is already registered, its result will be overwritten", name)
        self._rules.append(rule)

    def process_words(self, words: Sequence[str]) -> dict[str, RuleResult]:
        """
        Apply every rule to an already tokenized word sequence.

        Args:
            words: Words in file order

        Returns:
            Dict mapping rule name -> result, in rule registration order
        """
        results = {}
        for rule in self._rules:
            results[rule.name()] = rule.process(words)
            logger.debug("%s: %s", rule.name(), results[rule.name()])
        return results

    def process_file(self, path: Union[str, Path]) -> dict[str, RuleResult]:
        """
        Read a text file and apply every rule to its words.

        Args:
            path: Path to a text file

        Returns:
            Dict mapping rule name -> result

        Raises:
            FileNotFoundError: If path does not exist
            OSError: If the file cannot be opened or decoded
        """
        file_path = Path(path)
        logger.info("Processing file: %s", file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"File does not exist: {file_path}")

        try:
            with open(file_path, "r", encoding=self.encoding) as f:
                words = self.tokenizer.tokenize_lines(f)
        except UnicodeDecodeError as e:
            raise OSError(f"Cannot decode {file_path} as {self.encoding}: {e}") from e

        logger.info("Extracted %d words from file", len(words))
        return self.process_words(words)
