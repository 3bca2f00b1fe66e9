#!/usr/bin/env python3
"""wordindexer CLI.

Usage:
    python main.py notes.txt
    python main.py notes.txt -l M -l a --case-sensitive
    python main.py notes.txt -L ">5" -L "<= 2"
"""

import codecs
import logging
import re
import sys
from pathlib import Path

import click

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from config import Config, LENGTH_OPERATORS
from core.processor import Processor
from rules import (
    InvalidRuleConfigError, LengthFilterConfig, LengthOperator, RuleConfig,
    StartsWithLetterConfig, build_rule,
)

logger = logging.getLogger(__name__)

# "OP N", e.g. ">5", "<= 3", "==4"
LENGTH_RULE_PATTERN = re.compile(r'^\s*(<=|>=|==|=|<|>)\s*(-?\d+)\s*$')


def parse_length_rule(value: str) -> LengthFilterConfig:
    """Parse length rule string like '>5' or '<= 3'."""
    match = LENGTH_RULE_PATTERN.match(value)
    if not match:
        raise InvalidRuleConfigError(
            f"expected '<op> <length>' with op in {', '.join(LENGTH_OPERATORS)}, got {value!r}"
        )
    op, threshold = match.groups()
    return LengthFilterConfig(int(threshold), LengthOperator.parse(op))


def collect_rule_configs(
    letters: tuple[str, ...],
    ignore_case: bool,
    lengths: tuple[str, ...],
    config: Config,
) -> list[RuleConfig]:
    """Turn CLI options into rule configs, falling back to config defaults."""
    if not letters and not lengths:
        return list(config.default_rules)

    configs: list[RuleConfig] = [StartsWithLetterConfig(letter, ignore_case) for letter in letters]
    configs.extend(parse_length_rule(value) for value in lengths)
    return configs


@click.command()
@click.argument("path", required=False, type=click.Path())
@click.option("-l", "--letter", "letters", multiple=True, help="Count words starting with this letter (repeatable)")
@click.option("--ignore-case/--case-sensitive", default=True, help="Case handling for --letter rules")
@click.option("-L", "--length", "lengths", multiple=True, help='Filter words by length, e.g. ">5" or "<= 3" (repeatable)')
@click.option("-e", "--encoding", default=None, help="Input file encoding (default: utf-8)")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, path, letters, ignore_case, lengths, encoding, verbose):
    """Analyze the words of a text file with configurable rules."""
    config = Config()
    if encoding:
        try:
            codecs.lookup(encoding)
        except LookupError:
            raise click.BadParameter(f"unknown encoding '{encoding}'", param_hint="--encoding")
        config.encoding = encoding

    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=config.log_format)

    if path is None:
        click.echo(ctx.get_usage(), err=True)
        click.echo("Error: Missing argument 'PATH'.", err=True)
        ctx.exit(1)

    try:
        rule_configs = collect_rule_configs(letters, ignore_case, lengths, config)
    except InvalidRuleConfigError as e:
        raise click.UsageError(str(e), ctx=ctx)

    processor = Processor(encoding=config.encoding)
    for rule_config in rule_configs:
        processor.add_rule(build_rule(rule_config))

    try:
        results = processor.process_file(path)
    except OSError as e:
        logger.error("Error processing file: %s", e)
        ctx.exit(1)

    for name, result in results.items():
        click.echo(f"{name}: {result}")


if __name__ == "__main__":
    main()
