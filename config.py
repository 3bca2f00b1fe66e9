"""Default configuration for wordindexer."""

from dataclasses import dataclass, field

from rules.types import (
    LengthFilterConfig, LengthOperator, RuleConfig, StartsWithLetterConfig,
)


def _default_rules() -> list[RuleConfig]:
    return [
        StartsWithLetterConfig("M", ignore_case=True),
        LengthFilterConfig(5, LengthOperator.GREATER_THAN),
    ]


@dataclass
class Config:
    """Application configuration."""

    # Input
    encoding: str = "utf-8"

    # Rules used when none are given on the command line
    default_rules: list[RuleConfig] = field(default_factory=_default_rules)

    # Logging
    log_format: str = "%(levelname)s: %(message)s"


# Supported length operators, by symbol
LENGTH_OPERATORS = [op.symbol for op in LengthOperator]
