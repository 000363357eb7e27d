"""Output formatting utilities for CLI commands.

Renders parsed expressions either as the fixed-column console table:

    minute        0 15 30 45
    hour          0
    day of month  1 15
    month         1 2 3 4 5 6 7 8 9 10 11 12
    day of week   1 2 3 4 5
    command       /usr/bin/find

or as a JSON document for machine consumption.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from enum import Enum

import typer

from cronexpand.config import DEFAULT_COLUMN_WIDTH
from cronexpand.expander import ExpandedField
from cronexpand.fields import COMMAND_LABEL
from cronexpand.parser import ParsedExpression


class OutputFormat(str, Enum):
    """Supported output formats."""

    CONSOLE = "console"
    JSON = "json"


# =============================================================================
# Formatter Protocol
# =============================================================================


class ExpressionFormatter(ABC):
    """Abstract base class for expression formatters."""

    @abstractmethod
    def format(self, parsed: ParsedExpression) -> str:
        """Format a parsed expression.

        Args:
            parsed: Parsed expression to render

        Returns:
            Formatted string
        """
        pass

    def write(self, parsed: ParsedExpression) -> None:
        """Write a parsed expression to stdout."""
        typer.echo(self.format(parsed))


# =============================================================================
# Console Output
# =============================================================================


class ConsoleFormatter(ExpressionFormatter):
    """Fixed-column console formatter.

    The command line is emitted only when every field expanded
    successfully.
    """

    def __init__(self, column_width: int = DEFAULT_COLUMN_WIDTH) -> None:
        self.column_width = column_width

    def label(self, name: str) -> str:
        """Pad or truncate a label to the column width."""
        return name[: self.column_width].ljust(self.column_width)

    def format_field(self, field: ExpandedField) -> str:
        if field.error is not None:
            return f"{self.label(field.name)}Error: {field.error}"
        return self.label(field.name) + " ".join(str(v) for v in field.values)

    def format_lines(self, parsed: ParsedExpression) -> list[str]:
        lines = [self.format_field(field) for field in parsed.fields]
        if not parsed.has_errors:
            lines.append(self.label(COMMAND_LABEL) + parsed.command)
        return lines

    def format(self, parsed: ParsedExpression) -> str:
        return "\n".join(self.format_lines(parsed))


# =============================================================================
# JSON Output
# =============================================================================


class JsonFormatter(ExpressionFormatter):
    """JSON formatter."""

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def format(self, parsed: ParsedExpression) -> str:
        return json.dumps(parsed.to_dict(), indent=self.indent)


def get_formatter(
    output_format: OutputFormat | str,
    column_width: int = DEFAULT_COLUMN_WIDTH,
) -> ExpressionFormatter:
    """Create a formatter for the given format.

    Args:
        output_format: Format name or OutputFormat member
        column_width: Column width for console output

    Returns:
        Formatter instance

    Raises:
        ValueError: If the format is unknown
    """
    fmt = OutputFormat(output_format)
    if fmt == OutputFormat.JSON:
        return JsonFormatter()
    return ConsoleFormatter(column_width=column_width)
