"""cronexpand - Expand cron expressions into the values each field matches.

Syntax Reference:
    Field         Values   Special Characters
    ─────────────────────────────────────────
    Minute        0-59     * / , -
    Hour          0-23     * / , -
    Day of Month  1-31     * / , -
    Month         1-12     * / , -
    Day of Week   0-6      * / , -

Special Characters:
    *   Any value
    ,   List separator (1,3,5)
    -   Range (1-5)
    /   Step (*/15 = every 15, 1-30/5, 10/20)

Usage:
    >>> from cronexpand import parse_expression
    >>> parsed = parse_expression("*/15 0 1,15 * 1-5 /usr/bin/find")
    >>> [f.values for f in parsed.fields][2]
    (1, 15)
"""

from cronexpand.errors import (
    CronExpandError,
    ExpressionError,
    FieldError,
    InvalidIntegerError,
    OutOfRangeError,
    InvalidRangeOrderError,
    RangeOutOfBoundsError,
    InvalidStepError,
    StepTooLargeError,
    MalformedStepOrRangeError,
)
from cronexpand.fields import (
    CRON_FIELDS,
    CronFieldType,
    FieldSpec,
    get_field_spec,
)
from cronexpand.expander import (
    ExpandedField,
    FieldItem,
    ItemKind,
    expand_field,
    expand_values,
    parse_item,
)
from cronexpand.parser import (
    ParsedExpression,
    parse_expression,
    validate_expression,
    is_valid_expression,
)

# Version: Single source of truth from pyproject.toml
try:
    from importlib.metadata import version, PackageNotFoundError

    __version__ = version("cronexpand")
except PackageNotFoundError:
    # Package not installed (development mode)
    __version__ = "0.0.0.dev"

__all__ = [
    # Errors
    "CronExpandError",
    "ExpressionError",
    "FieldError",
    "InvalidIntegerError",
    "OutOfRangeError",
    "InvalidRangeOrderError",
    "RangeOutOfBoundsError",
    "InvalidStepError",
    "StepTooLargeError",
    "MalformedStepOrRangeError",
    # Field catalog
    "CRON_FIELDS",
    "CronFieldType",
    "FieldSpec",
    "get_field_spec",
    # Expansion
    "ExpandedField",
    "FieldItem",
    "ItemKind",
    "expand_field",
    "expand_values",
    "parse_item",
    # Parsing
    "ParsedExpression",
    "parse_expression",
    "validate_expression",
    "is_valid_expression",
    "__version__",
]
