"""Tests for the parse and validate CLI commands."""

import json
import logging

import pytest
from typer.testing import CliRunner

from cronexpand.cli import app, configure_logging
from cronexpand.cli_modules.common.errors import ErrorCode
from cronexpand.cli_modules.common.output import (
    ConsoleFormatter,
    JsonFormatter,
    get_formatter,
)
from cronexpand.parser import parse_expression


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def runner():
    """Create CLI runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate tests from CRONEXPAND_* settings in the environment."""
    for key in (
        "CRONEXPAND_COLUMN_WIDTH",
        "CRONEXPAND_OUTPUT_FORMAT",
        "CRONEXPAND_LOG_LEVEL",
        "CRONEXPAND_STRICT",
    ):
        monkeypatch.delenv(key, raising=False)


ALL_MINUTES = " ".join(str(i) for i in range(60))
ALL_HOURS = " ".join(str(i) for i in range(24))
ALL_DAYS = " ".join(str(i) for i in range(1, 32))
ALL_MONTHS = " ".join(str(i) for i in range(1, 13))
ALL_WEEKDAYS = " ".join(str(i) for i in range(7))


CONSOLE_CASES = [
    (
        "*/15 0 1,15 * 1-5 /usr/bin/find",
        [
            "minute        0 15 30 45",
            "hour          0",
            "day of month  1 15",
            f"month         {ALL_MONTHS}",
            "day of week   1 2 3 4 5",
            "command       /usr/bin/find",
        ],
    ),
    (
        "* * * * * /usr/bin/find",
        [
            f"minute        {ALL_MINUTES}",
            f"hour          {ALL_HOURS}",
            f"day of month  {ALL_DAYS}",
            f"month         {ALL_MONTHS}",
            f"day of week   {ALL_WEEKDAYS}",
            "command       /usr/bin/find",
        ],
    ),
    (
        "0-5,10-59/5 1-4,22,23 1,15 1-6/2 * /usr/local/bin/complex_command",
        [
            "minute        0 1 2 3 4 5 10 15 20 25 30 35 40 45 50 55",
            "hour          1 2 3 4 22 23",
            "day of month  1 15",
            "month         1 3 5",
            f"day of week   {ALL_WEEKDAYS}",
            "command       /usr/local/bin/complex_command",
        ],
    ),
    (
        "*/95 0 1,15 * 1-5 /usr/bin/find",
        [
            "minute        Error: step value 95 is too large for range 0-59",
            "hour          0",
            "day of month  1 15",
            f"month         {ALL_MONTHS}",
            "day of week   1 2 3 4 5",
        ],
    ),
    (
        "0 0 0,32 * 1-5 /usr/bin/find",
        [
            "minute        0",
            "hour          0",
            "day of month  Error: value 0 out of range (allowed range: 1-31)",
            f"month         {ALL_MONTHS}",
            "day of week   1 2 3 4 5",
        ],
    ),
    (
        "*/100 26 0-32 0,13 1-7 /usr/bin/find",
        [
            "minute        Error: step value 100 is too large for range 0-59",
            "hour          Error: value 26 out of range (allowed range: 0-23)",
            "day of month  Error: range 0-32 out of bounds (allowed range: 1-31)",
            "month         Error: value 0 out of range (allowed range: 1-12)",
            "day of week   Error: range 1-7 out of bounds (allowed range: 0-6)",
        ],
    ),
    (
        "0 0 */0 * * /scripts/invalid-step.sh",
        [
            "minute        0",
            "hour          0",
            "day of month  Error: step value must be positive",
            f"month         {ALL_MONTHS}",
            f"day of week   {ALL_WEEKDAYS}",
        ],
    ),
]


# =============================================================================
# Parse Command Tests
# =============================================================================


class TestParseCommand:
    """Tests for `cronexpand parse`."""

    @pytest.mark.parametrize("expression,expected", CONSOLE_CASES)
    def test_console_output(self, runner, expression, expected):
        result = runner.invoke(app, ["parse", expression])
        assert result.exit_code == 0
        assert result.stdout == "\n".join(expected) + "\n"

    def test_too_few_fields(self, runner):
        result = runner.invoke(app, ["parse", "* * * *"])
        assert result.exit_code == ErrorCode.INVALID_EXPRESSION.value
        assert result.stdout == "Invalid cron expression. Expected at least 6 fields.\n"

    def test_strict_fails_on_field_error(self, runner):
        result = runner.invoke(app, ["parse", "0 24 * * * cmd", "--strict"])
        assert result.exit_code == ErrorCode.FIELD_ERRORS.value
        assert "hour          Error: value 24 out of range" in result.stdout

    def test_strict_passes_valid_expression(self, runner):
        result = runner.invoke(app, ["parse", "0 12 * * * cmd", "--strict"])
        assert result.exit_code == 0

    def test_strict_from_environment(self, runner, monkeypatch):
        monkeypatch.setenv("CRONEXPAND_STRICT", "true")
        result = runner.invoke(app, ["parse", "0 24 * * * cmd"])
        assert result.exit_code == ErrorCode.FIELD_ERRORS.value

    def test_json_output(self, runner):
        result = runner.invoke(
            app, ["parse", "*/15 0 1,15 * 1-5 /usr/bin/find", "--format", "json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["command"] == "/usr/bin/find"
        assert data["valid"] is True
        assert [f["name"] for f in data["fields"]] == [
            "minute",
            "hour",
            "day of month",
            "month",
            "day of week",
        ]
        assert data["fields"][0]["values"] == [0, 15, 30, 45]

    def test_json_output_too_few_fields(self, runner):
        result = runner.invoke(app, ["parse", "* *", "-f", "json"])
        assert result.exit_code == ErrorCode.INVALID_EXPRESSION.value
        data = json.loads(result.stdout)
        assert data["error"] == "Invalid cron expression. Expected at least 6 fields."

    def test_format_from_environment(self, runner, monkeypatch):
        monkeypatch.setenv("CRONEXPAND_OUTPUT_FORMAT", "json")
        result = runner.invoke(app, ["parse", "0 0 1 1 * cmd"])
        assert json.loads(result.stdout)["fields"][3]["values"] == [1]

    def test_unknown_format(self, runner):
        result = runner.invoke(app, ["parse", "* * * * * cmd", "--format", "xml"])
        assert result.exit_code == ErrorCode.USAGE_ERROR.value
        assert "Unknown output format: xml" in result.output

    def test_custom_width(self, runner):
        result = runner.invoke(app, ["parse", "0 0 1 1 0 cmd", "--width", "5"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "minut0",
            "hour 0",
            "day o1",
            "month1",
            "day o0",
            "commacmd",
        ]

    def test_invalid_width(self, runner):
        result = runner.invoke(app, ["parse", "* * * * * cmd", "--width", "0"])
        assert result.exit_code == ErrorCode.USAGE_ERROR.value

    def test_verbose_flag_accepted(self, runner):
        result = runner.invoke(app, ["--verbose", "parse", "0 0 1 1 0 cmd"])
        assert result.exit_code == 0
        assert "command       cmd" in result.stdout


# =============================================================================
# Validate Command Tests
# =============================================================================


class TestValidateCommand:
    """Tests for `cronexpand validate`."""

    def test_valid(self, runner):
        result = runner.invoke(app, ["validate", "*/15 9-17 * * 1-5 /scripts/work.sh"])
        assert result.exit_code == 0
        assert result.stdout == "Valid cron expression\n"

    def test_field_errors(self, runner):
        result = runner.invoke(app, ["validate", "0 0 1 0,13 1-5 /usr/bin/find"])
        assert result.exit_code == ErrorCode.FIELD_ERRORS.value
        assert result.stdout == "month: value 0 out of range (allowed range: 1-12)\n"

    def test_too_few_fields(self, runner):
        result = runner.invoke(app, ["validate", "0 0 1"])
        assert result.exit_code == ErrorCode.INVALID_EXPRESSION.value


# =============================================================================
# Formatter Tests
# =============================================================================


class TestFormatters:
    """Tests for output formatters."""

    def test_get_formatter(self):
        assert isinstance(get_formatter("console", 10), ConsoleFormatter)
        assert isinstance(get_formatter("json"), JsonFormatter)
        with pytest.raises(ValueError):
            get_formatter("yaml")

    def test_command_suppressed_on_error(self):
        parsed = parse_expression("0 0 10-5 * * cmd")
        lines = ConsoleFormatter().format_lines(parsed)
        assert len(lines) == 5
        assert lines[2] == "day of month  Error: invalid range 10-5: start greater than end"

    def test_label_padding_and_truncation(self):
        formatter = ConsoleFormatter(column_width=8)
        assert formatter.label("hour") == "hour    "
        assert formatter.label("day of month") == "day of m"


class TestLogging:
    """Tests for logging configuration."""

    def test_configure_logging_replaces_handler(self):
        logger = configure_logging("DEBUG")
        configure_logging(logging.INFO)
        ours = [h for h in logger.handlers if getattr(h, "_cronexpand_handler", False)]
        assert len(ours) == 1
        assert logger.level == logging.INFO
