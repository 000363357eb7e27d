"""Shared CLI infrastructure (errors, output)."""

from cronexpand.cli_modules.common.errors import (
    CLIError,
    ErrorCode,
    UsageError,
    error_boundary,
)
from cronexpand.cli_modules.common.output import (
    ConsoleFormatter,
    ExpressionFormatter,
    JsonFormatter,
    OutputFormat,
    get_formatter,
)

__all__ = [
    # Errors
    "CLIError",
    "ErrorCode",
    "UsageError",
    "error_boundary",
    # Output
    "ConsoleFormatter",
    "ExpressionFormatter",
    "JsonFormatter",
    "OutputFormat",
    "get_formatter",
]
