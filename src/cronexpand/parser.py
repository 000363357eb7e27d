"""Cron expression parser.

Splits an expression into its five time fields and trailing command and
expands every field independently. A failing field never prevents the
other fields from being expanded; only an expression with too few tokens
fails as a whole.

Usage:
    >>> from cronexpand.parser import parse_expression
    >>> parsed = parse_expression("*/15 0 1,15 * 1-5 /usr/bin/find")
    >>> parsed.fields[0].values
    (0, 15, 30, 45)
    >>> parsed.command
    '/usr/bin/find'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from cronexpand.errors import ExpressionError, FieldError
from cronexpand.expander import ExpandedField, expand_field
from cronexpand.fields import CRON_FIELDS, FIELD_COUNT, CronFieldType

# Five time fields plus at least one command token
MIN_TOKENS = FIELD_COUNT + 1


@dataclass(frozen=True)
class ParsedExpression:
    """Result of parsing a full cron expression.

    Attributes:
        expression: The raw expression string.
        fields: One ExpandedField per time field, in catalog order.
        command: Remaining tokens joined with single spaces.
    """

    expression: str
    fields: tuple[ExpandedField, ...]
    command: str

    @classmethod
    def parse(cls, expression: str) -> "ParsedExpression":
        """Parse an expression.

        Raises:
            ExpressionError: If the expression has fewer than six tokens.
        """
        return parse_expression(expression)

    @property
    def has_errors(self) -> bool:
        return any(not f.ok for f in self.fields)

    @property
    def errors(self) -> list[tuple[str, FieldError]]:
        """(field name, error) pairs for every failing field."""
        return [(f.name, f.error) for f in self.fields if f.error is not None]

    def get_field(self, field_type: CronFieldType) -> ExpandedField:
        return self.fields[field_type.value]

    def to_dict(self) -> dict[str, Any]:
        return {
            "expression": self.expression,
            "fields": [f.to_dict() for f in self.fields],
            "command": self.command,
            "valid": not self.has_errors,
        }


def parse_expression(expression: str) -> ParsedExpression:
    """Parse a cron expression into expanded fields and a command.

    Args:
        expression: Five whitespace-separated time fields followed by a
            command, e.g. ``"*/15 0 1,15 * 1-5 /usr/bin/find"``.

    Returns:
        ParsedExpression with exactly five field results.

    Raises:
        ExpressionError: If fewer than six tokens are present. No field is
            expanded in that case.
    """
    tokens = expression.split()
    if len(tokens) < MIN_TOKENS:
        raise ExpressionError(expression, len(tokens), MIN_TOKENS)

    fields = tuple(
        expand_field(tokens[spec.position], spec) for spec in CRON_FIELDS
    )
    command = " ".join(tokens[FIELD_COUNT:])
    return ParsedExpression(expression=expression, fields=fields, command=command)


# =============================================================================
# Validation Functions
# =============================================================================


def validate_expression(expression: str) -> list[str]:
    """Validate a cron expression.

    Args:
        expression: Cron expression to validate.

    Returns:
        List of validation errors (empty if valid). Field errors are
        prefixed with the field name.
    """
    try:
        parsed = parse_expression(expression)
    except ExpressionError as e:
        return [str(e)]

    return [f"{name}: {error}" for name, error in parsed.errors]


def is_valid_expression(expression: str) -> bool:
    """Check if a cron expression is valid.

    Args:
        expression: Cron expression to check.

    Returns:
        True if valid.
    """
    return not validate_expression(expression)
