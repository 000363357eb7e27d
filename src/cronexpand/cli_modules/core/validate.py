"""Validate command - Check a cron expression for errors."""

from __future__ import annotations

from typing import Annotated

import typer

from cronexpand.cli_modules.common.errors import ErrorCode, error_boundary
from cronexpand.parser import MIN_TOKENS, validate_expression


@error_boundary
def validate_cmd(
    expression: Annotated[
        str,
        typer.Argument(help="Cron expression: five time fields followed by a command"),
    ],
) -> None:
    """Validate a cron expression, listing every invalid field.

    Examples:
        cronexpand validate "*/15 0 1,15 * 1-5 /usr/bin/find"
    """
    problems = validate_expression(expression)
    if not problems:
        typer.echo("Valid cron expression")
        return

    for problem in problems:
        typer.echo(problem)

    if len(expression.split()) < MIN_TOKENS:
        raise typer.Exit(ErrorCode.INVALID_EXPRESSION.value)
    raise typer.Exit(ErrorCode.FIELD_ERRORS.value)
