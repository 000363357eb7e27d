"""Configuration for the cronexpand command-line interface.

Settings are read from environment variables; command-line options
override them per invocation.

Environment variables:
    CRONEXPAND_COLUMN_WIDTH: Width of the field-name column (default: 14)
    CRONEXPAND_OUTPUT_FORMAT: Output format, console or json (default: console)
    CRONEXPAND_LOG_LEVEL: Log level for the cronexpand logger (default: WARNING)
    CRONEXPAND_STRICT: Exit non-zero when any field fails (default: false)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Mapping

DEFAULT_COLUMN_WIDTH = 14
OUTPUT_FORMATS = ("console", "json")


@dataclass(frozen=True)
class CronExpandConfig:
    """CLI configuration.

    Attributes:
        column_width: Width the field-name column is padded or truncated to.
        output_format: Default output format.
        log_level: Level name for the ``cronexpand`` logger.
        strict: Treat field errors as a failing exit status.
    """

    column_width: int = DEFAULT_COLUMN_WIDTH
    output_format: str = "console"
    log_level: str = "WARNING"
    strict: bool = False

    def with_overrides(self, **kwargs: Any) -> "CronExpandConfig":
        """Return a copy with non-None overrides applied."""
        changes = {k: v for k, v in kwargs.items() if v is not None}
        return replace(self, **changes)


def get_default_config(environ: Mapping[str, str] | None = None) -> CronExpandConfig:
    """Build configuration from environment variables.

    Invalid values are ignored and the corresponding default is used.

    Args:
        environ: Mapping to read from (defaults to ``os.environ``).

    Returns:
        CronExpandConfig.
    """
    env = os.environ if environ is None else environ

    def get_bool(key: str, default: bool = False) -> bool:
        value = env.get(key, "").lower()
        if value in ("true", "1", "yes", "on"):
            return True
        if value in ("false", "0", "no", "off"):
            return False
        return default

    def get_int(key: str, default: int) -> int:
        try:
            return int(env.get(key, default))
        except ValueError:
            return default

    column_width = get_int("CRONEXPAND_COLUMN_WIDTH", DEFAULT_COLUMN_WIDTH)
    if column_width < 1:
        column_width = DEFAULT_COLUMN_WIDTH

    output_format = env.get("CRONEXPAND_OUTPUT_FORMAT", "console").lower()
    if output_format not in OUTPUT_FORMATS:
        output_format = "console"

    log_level = env.get("CRONEXPAND_LOG_LEVEL", "WARNING").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        log_level = "WARNING"

    return CronExpandConfig(
        column_width=column_width,
        output_format=output_format,
        log_level=log_level,
        strict=get_bool("CRONEXPAND_STRICT", False),
    )
