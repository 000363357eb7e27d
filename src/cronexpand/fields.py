"""Field catalog for cron expressions.

Describes the five time fields of a standard cron expression: their
display names, inclusive bounds, and position in the expression.

    Field         Position  Values
    ──────────────────────────────
    Minute        0         0-59
    Hour          1         0-23
    Day of Month  2         1-31
    Month         3         1-12
    Day of Week   4         0-6
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CronFieldType(Enum):
    """Types of cron fields, valued by their position in the expression."""

    MINUTE = 0
    HOUR = 1
    DAY_OF_MONTH = 2
    MONTH = 3
    DAY_OF_WEEK = 4


@dataclass(frozen=True)
class FieldSpec:
    """Descriptor for a single cron field.

    Attributes:
        name: Human-readable field name used in output.
        min_value: Smallest allowed value (inclusive).
        max_value: Largest allowed value (inclusive).
        position: Index of the field's token in the expression.
        field_type: Enum member for this field.
    """

    name: str
    min_value: int
    max_value: int
    position: int
    field_type: CronFieldType

    def __post_init__(self) -> None:
        if self.min_value > self.max_value:
            raise ValueError(
                f"Invalid bounds for field '{self.name}': "
                f"{self.min_value} > {self.max_value}"
            )

    @property
    def span(self) -> int:
        """Number of values in the field's inclusive range."""
        return self.max_value - self.min_value + 1

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def __str__(self) -> str:
        return f"{self.name} ({self.min_value}-{self.max_value})"


CRON_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("minute", 0, 59, 0, CronFieldType.MINUTE),
    FieldSpec("hour", 0, 23, 1, CronFieldType.HOUR),
    FieldSpec("day of month", 1, 31, 2, CronFieldType.DAY_OF_MONTH),
    FieldSpec("month", 1, 12, 3, CronFieldType.MONTH),
    FieldSpec("day of week", 0, 6, 4, CronFieldType.DAY_OF_WEEK),
)

FIELD_COUNT = len(CRON_FIELDS)

# Label for the trailing command in formatted output
COMMAND_LABEL = "command"


def get_field_spec(field: int | CronFieldType) -> FieldSpec:
    """Look up a field descriptor by position or type.

    Args:
        field: Position (0-4) or CronFieldType member.

    Returns:
        The matching FieldSpec.

    Raises:
        ValueError: If the position is outside the catalog.
    """
    position = field.value if isinstance(field, CronFieldType) else field
    if not 0 <= position < FIELD_COUNT:
        raise ValueError(
            f"Invalid field position: {position}. Expected 0-{FIELD_COUNT - 1}."
        )
    return CRON_FIELDS[position]
