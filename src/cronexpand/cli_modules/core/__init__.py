"""Core CLI commands for cronexpand.

This package contains the CLI commands:
    - parse: Expand each field of a cron expression
    - validate: Report invalid fields of a cron expression
"""

import typer

from cronexpand.cli_modules.core.parse import parse_cmd
from cronexpand.cli_modules.core.validate import validate_cmd


def register_commands(parent_app: typer.Typer) -> None:
    """Register core commands with the parent app.

    Args:
        parent_app: Parent Typer app to register commands to
    """
    parent_app.command(name="parse")(parse_cmd)
    parent_app.command(name="validate")(validate_cmd)


__all__ = [
    "register_commands",
    "parse_cmd",
    "validate_cmd",
]
