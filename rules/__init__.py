"""Word analysis rules and the factory that builds them."""

from .base import Rule
from .factory import (
    build_rule,
    create_length_filter_rule,
    create_rule,
    create_starts_with_letter_rule,
    register_rule,
)
from .length_filter import LengthFilterRule
from .starts_with_letter import StartsWithLetterRule
from .types import (
    Count,
    InvalidRuleConfigError,
    LengthFilterConfig,
    LengthOperator,
    RuleConfig,
    RuleResult,
    RuleType,
    StartsWithLetterConfig,
    WordList,
)

__all__ = [
    "Rule",
    "StartsWithLetterRule",
    "LengthFilterRule",
    "RuleType",
    "LengthOperator",
    "StartsWithLetterConfig",
    "LengthFilterConfig",
    "RuleConfig",
    "Count",
    "WordList",
    "RuleResult",
    "InvalidRuleConfigError",
    "build_rule",
    "create_rule",
    "create_starts_with_letter_rule",
    "create_length_filter_rule",
    "register_rule",
]
