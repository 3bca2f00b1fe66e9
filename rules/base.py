"""Rule abstraction."""

from abc import ABC, abstractmethod
from typing import Sequence

from rules.types import RuleConfig, RuleResult


class Rule(ABC):
    """Abstract base class for word analysis rules.

    A rule is a pure function over a word sequence plus a stable,
    human-readable name derived from its configuration.
    """

    def __init__(self, config: RuleConfig):
        self.config = config

    @abstractmethod
    def name(self) -> str:
        """Return rule description, e.g. "Words with length > 5"."""
        pass

    @abstractmethod
    def process(self, words: Sequence[str]) -> RuleResult:
        """
        Apply the rule to a word sequence.

        Args:
            words: Words in file order

        Returns:
            Count or WordList, depending on the rule
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.config!r})"
