"""Command-line interface for cronexpand."""

import logging
import sys
from typing import Annotated

import typer

from cronexpand.cli_modules import core
from cronexpand.config import get_default_config

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

app = typer.Typer(
    name="cronexpand",
    help="Expand cron expressions to show the times at which each field runs",
    add_completion=False,
)


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Configure the ``cronexpand`` logger to write to stderr.

    Calling this more than once replaces the previously installed handler.

    Args:
        level: Log level as a number or level name.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("cronexpand")
    for handler in list(logger.handlers):
        if getattr(handler, "_cronexpand_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._cronexpand_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Expand cron expressions to show the times at which each field runs."""
    config = get_default_config()
    configure_logging(logging.DEBUG if verbose else config.log_level)


core.register_commands(app)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
