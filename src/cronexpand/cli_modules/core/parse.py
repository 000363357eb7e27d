"""Parse command - Expand a cron expression.

This module implements the `cronexpand parse` command, which expands each
time field of a cron expression to the values it matches.
"""

from __future__ import annotations

import json
import logging
from typing import Annotated, Optional

import typer

from cronexpand.cli_modules.common.errors import ErrorCode, UsageError, error_boundary
from cronexpand.cli_modules.common.output import OutputFormat, get_formatter
from cronexpand.config import OUTPUT_FORMATS, get_default_config
from cronexpand.errors import ExpressionError
from cronexpand.parser import parse_expression

logger = logging.getLogger(__name__)


@error_boundary
def parse_cmd(
    expression: Annotated[
        str,
        typer.Argument(help="Cron expression: five time fields followed by a command"),
    ],
    format: Annotated[
        Optional[str],
        typer.Option("--format", "-f", help="Output format (console, json)"),
    ] = None,
    width: Annotated[
        Optional[int],
        typer.Option("--width", "-w", help="Width of the field-name column"),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Exit with a non-zero code if any field is invalid"),
    ] = False,
) -> None:
    """Parse a cron expression and expand each field.

    The expression should be in the standard format with five time fields
    (minute, hour, day of month, month, and day of week) plus a command.

    Examples:
        cronexpand parse "*/15 0 1,15 * 1-5 /usr/bin/find"
        cronexpand parse "0 9 * * 1-5 backup.sh" --format json
    """
    config = get_default_config().with_overrides(
        output_format=format.lower() if format else None,
        column_width=width,
    )
    if config.output_format not in OUTPUT_FORMATS:
        raise UsageError(
            f"Unknown output format: {config.output_format}",
            option="--format",
            hint=f"Use one of: {', '.join(OUTPUT_FORMATS)}",
        )
    if config.column_width < 1:
        raise UsageError("Column width must be at least 1", option="--width")

    try:
        parsed = parse_expression(expression)
    except ExpressionError as e:
        logger.debug(f"Rejected expression with {e.token_count} tokens: {expression!r}")
        if config.output_format == OutputFormat.JSON.value:
            typer.echo(json.dumps({"expression": expression, "error": str(e)}, indent=2))
        else:
            typer.echo(str(e))
        raise typer.Exit(ErrorCode.INVALID_EXPRESSION.value)

    get_formatter(config.output_format, config.column_width).write(parsed)

    for name, error in parsed.errors:
        logger.debug(f"Field '{name}' failed: {error}")

    if parsed.has_errors and (strict or config.strict):
        raise typer.Exit(ErrorCode.FIELD_ERRORS.value)
