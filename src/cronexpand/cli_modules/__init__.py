"""CLI modules for cronexpand.

This package provides the command implementations behind ``cronexpand.cli``:
    - common: Shared infrastructure (errors, output)
    - core: The parse and validate commands

Usage:
    from cronexpand.cli_modules import core

    app = typer.Typer()
    core.register_commands(app)
"""

from cronexpand.cli_modules.common import (
    CLIError,
    ErrorCode,
    UsageError,
    error_boundary,
    ConsoleFormatter,
    ExpressionFormatter,
    JsonFormatter,
    OutputFormat,
    get_formatter,
)

__all__ = [
    "CLIError",
    "ErrorCode",
    "UsageError",
    "error_boundary",
    "ConsoleFormatter",
    "ExpressionFormatter",
    "JsonFormatter",
    "OutputFormat",
    "get_formatter",
]
