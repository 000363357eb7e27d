"""Exceptions raised while expanding cron expressions.

Two levels of failure exist:

    ExpressionError
        The expression as a whole is malformed (too few tokens). No field
        is expanded.

    FieldError (and subclasses)
        A single field token is invalid. Other fields are unaffected; the
        expander attaches the error to that field's result.
"""

from __future__ import annotations


class CronExpandError(ValueError):
    """Base class for all cron expansion errors."""


# =============================================================================
# Expression-level Errors
# =============================================================================


class ExpressionError(CronExpandError):
    """Raised when an expression has fewer tokens than required."""

    def __init__(self, expression: str, token_count: int, min_tokens: int = 6) -> None:
        self.expression = expression
        self.token_count = token_count
        self.min_tokens = min_tokens
        super().__init__(
            f"Invalid cron expression. Expected at least {min_tokens} fields."
        )


# =============================================================================
# Field-level Errors
# =============================================================================


class FieldError(CronExpandError):
    """Raised when a single field token cannot be expanded.

    Attributes:
        item: The comma-separated item that failed, if known.
    """

    def __init__(self, message: str, item: str = "") -> None:
        self.item = item
        super().__init__(message)

    @property
    def message(self) -> str:
        return str(self)


class InvalidIntegerError(FieldError):
    """A segment of the token is not an integer."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"invalid integer value '{text}'", text)


class OutOfRangeError(FieldError):
    """A single value lies outside the field's bounds."""

    def __init__(self, value: int, min_value: int, max_value: int) -> None:
        self.value = value
        self.min_value = min_value
        self.max_value = max_value
        super().__init__(
            f"value {value} out of range (allowed range: {min_value}-{max_value})",
            str(value),
        )


class InvalidRangeOrderError(FieldError):
    """A range's start is greater than its end."""

    def __init__(self, start: int, end: int) -> None:
        self.start = start
        self.end = end
        super().__init__(
            f"invalid range {start}-{end}: start greater than end",
            f"{start}-{end}",
        )


class RangeOutOfBoundsError(FieldError):
    """A range extends past the field's bounds."""

    def __init__(self, start: int, end: int, min_value: int, max_value: int) -> None:
        self.start = start
        self.end = end
        self.min_value = min_value
        self.max_value = max_value
        super().__init__(
            f"range {start}-{end} out of bounds "
            f"(allowed range: {min_value}-{max_value})",
            f"{start}-{end}",
        )


class InvalidStepError(FieldError):
    """A step value is zero or negative."""

    def __init__(self, step: int) -> None:
        self.step = step
        super().__init__("step value must be positive", str(step))


class StepTooLargeError(FieldError):
    """A step value exceeds the width of the field's range."""

    def __init__(self, step: int, min_value: int, max_value: int) -> None:
        self.step = step
        self.min_value = min_value
        self.max_value = max_value
        super().__init__(
            f"step value {step} is too large for range {min_value}-{max_value}",
            str(step),
        )


class MalformedStepOrRangeError(FieldError):
    """A step or range item has the wrong number of parts."""

    def __init__(self, item: str, separator: str) -> None:
        self.separator = separator
        kind = "step" if separator == "/" else "range"
        super().__init__(f"invalid {kind} expression '{item}'", item)
