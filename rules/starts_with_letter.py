"""Count words starting with a given letter."""

from typing import Sequence

from rules.base import Rule
from rules.types import Count, StartsWithLetterConfig


def _single_case(letter: str, mapped: str) -> str:
    # "ß".upper() == "SS": fall back to the letter itself
    return mapped if len(mapped) == 1 else letter


class StartsWithLetterRule(Rule):
    """Counts words whose first character matches the configured letter."""

    def __init__(self, config: StartsWithLetterConfig):
        super().__init__(config)
        letter = config.letter
        self.upper = _single_case(letter, letter.upper())
        self.lower = _single_case(letter, letter.lower())

        if config.ignore_case:
            self._targets = frozenset((letter, self.upper, self.lower))
        else:
            self._targets = frozenset((letter,))

    def name(self) -> str:
        if self.config.ignore_case:
            return f"Words starting with {self.upper}/{self.lower}"
        return f"Words starting with {self.config.letter}"

    def process(self, words: Sequence[str]) -> Count:
        return Count(sum(1 for word in words if word and word[0] in self._targets))
