"""Rule configuration and result types.

Each rule variant has its own frozen config dataclass, validated on
construction. Results are tagged too, so callers never have to guess
whether a value is a count or a list of words.

IMPORTANT: Invalid configuration raises InvalidRuleConfigError - never silently defaulted!
"""

import operator
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union


class RuleType(Enum):
    """Rule kinds known to the factory."""

    STARTS_WITH_LETTER = "starts_with_letter"
    LENGTH_FILTER = "length_filter"


class InvalidRuleConfigError(ValueError):
    """Raised when a rule is configured with missing or malformed parameters."""

    def __init__(self, reason: str, rule_type: "RuleType | str | None" = None):
        self.reason = reason
        self.rule_type = rule_type
        if isinstance(rule_type, RuleType):
            message = f"Invalid {rule_type.name} rule: {reason}"
        elif rule_type is not None:
            message = f"Invalid rule '{rule_type}': {reason}"
        else:
            message = f"Invalid rule: {reason}"
        super().__init__(message)


class LengthOperator(Enum):
    """Comparison applied between a word's length and a threshold."""

    EQUAL_TO = ("=", operator.eq)
    LESS_THAN = ("<", operator.lt)
    GREATER_THAN = (">", operator.gt)
    LESS_THAN_OR_EQUAL = ("<=", operator.le)
    GREATER_THAN_OR_EQUAL = (">=", operator.ge)

    def __init__(self, symbol: str, compare: Callable[[int, int], bool]):
        self.symbol = symbol
        self.compare = compare

    def matches(self, length: int, threshold: int) -> bool:
        return self.compare(length, threshold)

    @classmethod
    def parse(cls, value) -> "LengthOperator":
        """Resolve an operator from a member, a member name or a symbol.

        Examples:
            LengthOperator.parse(">") -> GREATER_THAN
            LengthOperator.parse("less_than") -> LESS_THAN
            LengthOperator.parse("==") -> EQUAL_TO

        Raises:
            InvalidRuleConfigError: If value is not a known operator
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip()
            if text == "==":
                return cls.EQUAL_TO
            for member in cls:
                if text == member.symbol or text.upper() == member.name:
                    return member
        supported = ", ".join(f"{m.name} ({m.symbol})" for m in cls)
        raise InvalidRuleConfigError(
            f"unknown comparison operator {value!r}. Supported: {supported}",
            RuleType.LENGTH_FILTER,
        )


# === Configs ===

@dataclass(frozen=True)
class StartsWithLetterConfig:
    """Count words whose first character is `letter`."""
    letter: str
    ignore_case: bool = False

    def __post_init__(self):
        if not isinstance(self.letter, str) or len(self.letter) != 1:
            raise InvalidRuleConfigError(
                f"letter must be a single character, got {self.letter!r}",
                RuleType.STARTS_WITH_LETTER,
            )
        if not isinstance(self.ignore_case, bool):
            raise InvalidRuleConfigError(
                f"ignore_case must be a bool, got {self.ignore_case!r}",
                RuleType.STARTS_WITH_LETTER,
            )


@dataclass(frozen=True)
class LengthFilterConfig:
    """Keep words whose length compares to `threshold` via `operator`."""
    threshold: int
    operator: LengthOperator

    def __post_init__(self):
        # bool is an int subclass, but True/False make no sense as a length
        if isinstance(self.threshold, bool) or not isinstance(self.threshold, int):
            raise InvalidRuleConfigError(
                f"threshold must be an integer, got {self.threshold!r}",
                RuleType.LENGTH_FILTER,
            )
        if not isinstance(self.operator, LengthOperator):
            raise InvalidRuleConfigError(
                f"operator must be a LengthOperator, got {self.operator!r}",
                RuleType.LENGTH_FILTER,
            )


RuleConfig = Union[StartsWithLetterConfig, LengthFilterConfig]


# === Results ===

@dataclass(frozen=True)
class Count:
    """Number of matching words."""
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class WordList:
    """Matching words in input order, duplicates included."""
    words: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self):
        return iter(self.words)

    def __str__(self) -> str:
        return "[" + ", ".join(self.words) + "]"


RuleResult = Union[Count, WordList]
