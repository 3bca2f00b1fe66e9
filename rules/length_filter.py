"""Filter words by length."""

from typing import Sequence

from rules.base import Rule
from rules.types import LengthFilterConfig, WordList


class LengthFilterRule(Rule):
    """Keeps words whose length satisfies `len(word) <op> threshold`.

    Length is counted in code points.
    """

    def __init__(self, config: LengthFilterConfig):
        super().__init__(config)

    def name(self) -> str:
        return f"Words with length {self.config.operator.symbol} {self.config.threshold}"

    def process(self, words: Sequence[str]) -> WordList:
        op = self.config.operator
        threshold = self.config.threshold
        return WordList(tuple(word for word in words if op.matches(len(word), threshold)))
