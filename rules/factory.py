"""Rule construction.

Two entry points:
- build_rule(config): typed, takes a validated RuleConfig
- create_rule(rule_type, *params): loose positional params, validated here

New rule kinds plug in through register_rule() without touching callers.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Union

from rules.base import Rule
from rules.length_filter import LengthFilterRule
from rules.starts_with_letter import StartsWithLetterRule
from rules.types import (
    InvalidRuleConfigError,
    LengthFilterConfig,
    LengthOperator,
    RuleConfig,
    RuleType,
    StartsWithLetterConfig,
)


@dataclass(frozen=True)
class RuleEntry:
    """Registry entry: how to build one kind of rule."""
    config_cls: type
    rule_cls: type
    parse_params: Callable[[tuple], RuleConfig]


_REGISTRY: dict[RuleType, RuleEntry] = {}


def register_rule(
    rule_type: RuleType,
    config_cls: type,
    rule_cls: type,
    parse_params: Optional[Callable[[tuple], RuleConfig]] = None,
) -> None:
    """Register a rule constructor for a rule type.

    Args:
        rule_type: Tag used by create_rule()
        config_cls: Config dataclass accepted by rule_cls
        rule_cls: Rule subclass built from config_cls instances
        parse_params: Turns create_rule() positional params into a config.
                      Defaults to config_cls(*params).
    """
    if parse_params is None:
        def parse_params(params: tuple) -> RuleConfig:
            try:
                return config_cls(*params)
            except TypeError as e:
                raise InvalidRuleConfigError(str(e), rule_type) from e

    _REGISTRY[rule_type] = RuleEntry(config_cls, rule_cls, parse_params)


def get_rule_type(value: Union[RuleType, str]) -> RuleType:
    """Resolve a RuleType from a member, its name or its value.

    Examples:
        get_rule_type("LENGTH_FILTER") -> RuleType.LENGTH_FILTER
        get_rule_type("starts_with_letter") -> RuleType.STARTS_WITH_LETTER

    Raises:
        InvalidRuleConfigError: If the type is unknown
    """
    if isinstance(value, RuleType):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        for member in RuleType:
            if key in (member.value, member.name.lower()):
                return member
    supported = ", ".join(member.name for member in RuleType)
    raise InvalidRuleConfigError(f"unknown rule type. Supported: {supported}", str(value))


def build_rule(config: RuleConfig) -> Rule:
    """Build a rule from a validated config."""
    for entry in _REGISTRY.values():
        if type(config) is entry.config_cls:
            return entry.rule_cls(config)
    raise InvalidRuleConfigError(f"no rule registered for {type(config).__name__}")


def create_rule(rule_type: Union[RuleType, str], *params) -> Rule:
    """
    Create a rule from a type tag and positional parameters.

    Args:
        rule_type: RuleType or its name
        *params: STARTS_WITH_LETTER -> (letter, [ignore_case])
                 LENGTH_FILTER -> (threshold, operator)

    Returns:
        Rule instance

    Raises:
        InvalidRuleConfigError: If the type is unknown or params are invalid
    """
    kind = get_rule_type(rule_type)
    entry = _REGISTRY.get(kind)
    if entry is None:
        raise InvalidRuleConfigError("no rule registered", kind)
    return entry.rule_cls(entry.parse_params(params))


# === Typed constructors ===

def create_starts_with_letter_rule(letter: str, ignore_case: bool = False) -> Rule:
    """Create a rule counting words that start with `letter`."""
    return build_rule(StartsWithLetterConfig(letter, ignore_case))


def create_length_filter_rule(threshold: int, operator: Union[LengthOperator, str]) -> Rule:
    """Create a rule keeping words whose length compares to `threshold`."""
    return build_rule(LengthFilterConfig(threshold, LengthOperator.parse(operator)))


# === Built-in rules ===

def _starts_with_letter_params(params: tuple) -> StartsWithLetterConfig:
    if not params or not isinstance(params[0], str) or len(params[0]) != 1:
        raise InvalidRuleConfigError(
            "requires a single character parameter", RuleType.STARTS_WITH_LETTER
        )
    # Anything other than a real bool means case-sensitive
    ignore_case = len(params) > 1 and isinstance(params[1], bool) and params[1]
    return StartsWithLetterConfig(params[0], ignore_case)


def _length_filter_params(params: tuple) -> LengthFilterConfig:
    if len(params) < 2:
        raise InvalidRuleConfigError(
            "requires an integer and a comparison operator parameter", RuleType.LENGTH_FILTER
        )
    threshold, op = params[0], params[1]
    if isinstance(threshold, bool) or not isinstance(threshold, int):
        raise InvalidRuleConfigError(
            f"threshold must be an integer, got {threshold!r}", RuleType.LENGTH_FILTER
        )
    return LengthFilterConfig(threshold, LengthOperator.parse(op))


register_rule(
    RuleType.STARTS_WITH_LETTER, StartsWithLetterConfig, StartsWithLetterRule,
    _starts_with_letter_params,
)
register_rule(
    RuleType.LENGTH_FILTER, LengthFilterConfig, LengthFilterRule,
    _length_filter_params,
)
