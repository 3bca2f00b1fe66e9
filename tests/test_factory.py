"""Tests for rule construction."""

import pytest
import sys
from dataclasses import dataclass
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from rules import (
    Count,
    InvalidRuleConfigError,
    LengthFilterConfig,
    LengthFilterRule,
    LengthOperator,
    Rule,
    RuleType,
    StartsWithLetterConfig,
    StartsWithLetterRule,
    build_rule,
    create_length_filter_rule,
    create_rule,
    create_starts_with_letter_rule,
    register_rule,
)
from rules import factory


class TestCreateRule:
    """Test create_rule with positional params."""

    def test_starts_with_letter(self):
        """Letter + case flag builds a StartsWithLetterRule."""
        rule = create_rule(RuleType.STARTS_WITH_LETTER, "M", True)
        assert isinstance(rule, StartsWithLetterRule)
        assert rule.name() == "Words starting with M/m"

    def test_case_flag_defaults_to_sensitive(self):
        """Missing or non-bool case flag means case-sensitive."""
        assert create_rule(RuleType.STARTS_WITH_LETTER, "M").name() == "Words starting with M"
        assert create_rule(RuleType.STARTS_WITH_LETTER, "M", "yes").name() == "Words starting with M"
        assert create_rule(RuleType.STARTS_WITH_LETTER, "M", 1).name() == "Words starting with M"

    def test_length_filter(self):
        """Threshold + operator builds a LengthFilterRule."""
        rule = create_rule(RuleType.LENGTH_FILTER, 5, LengthOperator.GREATER_THAN)
        assert isinstance(rule, LengthFilterRule)
        assert rule.name() == "Words with length > 5"

    def test_length_filter_operator_by_name_or_symbol(self):
        """Operator may be given by name or symbol."""
        assert create_rule(RuleType.LENGTH_FILTER, 3, "LESS_THAN").name() == "Words with length < 3"
        assert create_rule(RuleType.LENGTH_FILTER, 3, "<=").name() == "Words with length <= 3"

    def test_type_by_name(self):
        """Rule type may be given as a string."""
        rule = create_rule("length_filter", 2, "=")
        assert isinstance(rule, LengthFilterRule)
        rule = create_rule("STARTS_WITH_LETTER", "a")
        assert isinstance(rule, StartsWithLetterRule)

    def test_starts_with_letter_missing_letter(self):
        """No letter is an error."""
        with pytest.raises(InvalidRuleConfigError):
            create_rule(RuleType.STARTS_WITH_LETTER)

    def test_starts_with_letter_bad_letter(self):
        """Letter must be a single-character string."""
        for bad in ("", "Mm", 77, None):
            with pytest.raises(InvalidRuleConfigError):
                create_rule(RuleType.STARTS_WITH_LETTER, bad, True)

    def test_length_filter_too_few_params(self):
        """Threshold and operator are both required."""
        with pytest.raises(InvalidRuleConfigError):
            create_rule(RuleType.LENGTH_FILTER)
        with pytest.raises(InvalidRuleConfigError):
            create_rule(RuleType.LENGTH_FILTER, 5)

    def test_length_filter_bad_threshold(self):
        """Threshold must be an int (bools rejected)."""
        for bad in ("5", 5.0, True, None):
            with pytest.raises(InvalidRuleConfigError):
                create_rule(RuleType.LENGTH_FILTER, bad, LengthOperator.GREATER_THAN)

    def test_length_filter_bad_operator(self):
        """Operator must be a known operator."""
        for bad in ("!=", "bigger", 5, None):
            with pytest.raises(InvalidRuleConfigError):
                create_rule(RuleType.LENGTH_FILTER, 5, bad)

    def test_unknown_type(self):
        """Unknown rule types are rejected."""
        with pytest.raises(InvalidRuleConfigError) as exc_info:
            create_rule("ends_with_letter", "s")
        assert "ends_with_letter" in str(exc_info.value)
        with pytest.raises(InvalidRuleConfigError):
            create_rule(None)

    def test_error_is_value_error(self):
        """InvalidRuleConfigError can be caught as ValueError."""
        with pytest.raises(ValueError):
            create_rule(RuleType.LENGTH_FILTER, 5)


class TestTypedConstructors:
    """Test build_rule and the direct constructors."""

    def test_build_rule(self):
        """Configs map to their rule classes."""
        assert isinstance(build_rule(StartsWithLetterConfig("M", True)), StartsWithLetterRule)
        assert isinstance(
            build_rule(LengthFilterConfig(5, LengthOperator.GREATER_THAN)), LengthFilterRule
        )

    def test_build_rule_unknown_config(self):
        """Unregistered config types are rejected."""
        with pytest.raises(InvalidRuleConfigError):
            build_rule(object())

    def test_direct_constructors(self):
        """Direct constructors match create_rule output."""
        assert create_starts_with_letter_rule("M", True).name() == "Words starting with M/m"
        assert create_starts_with_letter_rule("M").name() == "Words starting with M"
        assert create_length_filter_rule(5, ">").name() == "Words with length > 5"

    def test_rule_keeps_config(self):
        """Rules expose their validated config."""
        rule = create_length_filter_rule(5, LengthOperator.GREATER_THAN)
        assert rule.config == LengthFilterConfig(5, LengthOperator.GREATER_THAN)


@dataclass(frozen=True)
class _AnyWordConfig:
    minimum: int = 1


class _AnyWordRule(Rule):
    def name(self) -> str:
        return f"At least {self.config.minimum} words"

    def process(self, words):
        return Count(int(len(words) >= self.config.minimum))


class TestRegistry:
    """Test plugging in a new rule type."""

    def test_register_rule(self, monkeypatch):
        """Registered rules are built by build_rule and create_rule."""
        monkeypatch.setattr(factory, "_REGISTRY", dict(factory._REGISTRY))
        register_rule(RuleType.LENGTH_FILTER, _AnyWordConfig, _AnyWordRule)

        rule = create_rule(RuleType.LENGTH_FILTER, 2)
        assert isinstance(rule, _AnyWordRule)
        assert rule.process(["a", "b"]) == Count(1)
        assert isinstance(build_rule(_AnyWordConfig(3)), _AnyWordRule)

    def test_default_param_parser_errors(self, monkeypatch):
        """Too many params for the config class become InvalidRuleConfigError."""
        monkeypatch.setattr(factory, "_REGISTRY", dict(factory._REGISTRY))
        register_rule(RuleType.LENGTH_FILTER, _AnyWordConfig, _AnyWordRule)

        with pytest.raises(InvalidRuleConfigError):
            create_rule(RuleType.LENGTH_FILTER, 1, 2, 3)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
