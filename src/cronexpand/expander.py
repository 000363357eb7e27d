"""Field expansion for cron tokens.

A field token is a comma-separated list of items. Each item is first
classified into a tagged variant (wildcard, single value, range, or step)
and only then resolved against the field's bounds, so malformed input such
as ``1/2/3`` or ``1-2-3`` is rejected explicitly instead of being
misinterpreted by substring checks.

Example:
    >>> from cronexpand.fields import get_field_spec, CronFieldType
    >>> spec = get_field_spec(CronFieldType.MINUTE)
    >>> expand_values("0-5,10-59/5", spec)[:8]
    [0, 1, 2, 3, 4, 5, 10, 15]
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from cronexpand.errors import (
    FieldError,
    InvalidIntegerError,
    InvalidRangeOrderError,
    InvalidStepError,
    MalformedStepOrRangeError,
    OutOfRangeError,
    RangeOutOfBoundsError,
    StepTooLargeError,
)
from cronexpand.fields import FieldSpec

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

LIST_SEPARATOR = ","
RANGE_SEPARATOR = "-"
STEP_SEPARATOR = "/"
WILDCARD = "*"


# =============================================================================
# Item Classification
# =============================================================================


class ItemKind(Enum):
    """Syntactic kinds of a single list item."""

    WILDCARD = auto()
    SINGLE = auto()
    RANGE = auto()
    STEP = auto()


@dataclass(frozen=True)
class FieldItem:
    """One classified item of a field token.

    Attributes:
        kind: Syntactic kind of the item.
        text: Original item text.
        start: Value for SINGLE, range start for RANGE.
        end: Range end for RANGE.
        step: Step size for STEP.
        base: Start expression for STEP (WILDCARD, SINGLE or RANGE).
    """

    kind: ItemKind
    text: str
    start: int | None = None
    end: int | None = None
    step: int | None = None
    base: FieldItem | None = None


def _parse_int(text: str) -> int:
    if not _INTEGER_RE.fullmatch(text):
        raise InvalidIntegerError(text)
    return int(text)


def _parse_base(text: str) -> FieldItem:
    """Classify an item that contains no step separator."""
    if text == WILDCARD:
        return FieldItem(ItemKind.WILDCARD, text)

    if RANGE_SEPARATOR in text:
        parts = text.split(RANGE_SEPARATOR)
        if len(parts) != 2:
            raise MalformedStepOrRangeError(text, RANGE_SEPARATOR)
        return FieldItem(
            ItemKind.RANGE,
            text,
            start=_parse_int(parts[0]),
            end=_parse_int(parts[1]),
        )

    return FieldItem(ItemKind.SINGLE, text, start=_parse_int(text))


def parse_item(text: str) -> FieldItem:
    """Classify a single comma-separated item.

    Only the syntax is checked here; bounds are applied by resolve_item().

    Args:
        text: Item text, e.g. ``*``, ``5``, ``1-5``, ``*/15`` or ``1-30/5``.

    Returns:
        Classified FieldItem.

    Raises:
        MalformedStepOrRangeError: If the item has too many ``/`` or ``-`` parts.
        InvalidIntegerError: If a numeric segment is not an integer.
    """
    if STEP_SEPARATOR not in text:
        return _parse_base(text)

    parts = text.split(STEP_SEPARATOR)
    if len(parts) != 2:
        raise MalformedStepOrRangeError(text, STEP_SEPARATOR)

    base_text, step_text = parts
    base = _parse_base(base_text)
    step = _parse_int(step_text)
    return FieldItem(ItemKind.STEP, text, step=step, base=base)


# =============================================================================
# Resolution
# =============================================================================


def _check_value(value: int, spec: FieldSpec) -> int:
    if not spec.contains(value):
        raise OutOfRangeError(value, spec.min_value, spec.max_value)
    return value


def _check_range(start: int, end: int, spec: FieldSpec) -> tuple[int, int]:
    if start > end:
        raise InvalidRangeOrderError(start, end)
    if start < spec.min_value or end > spec.max_value:
        raise RangeOutOfBoundsError(start, end, spec.min_value, spec.max_value)
    return start, end


def _resolve_bounds(item: FieldItem, spec: FieldSpec) -> tuple[int, int]:
    """Resolve the inclusive start and end covered by a non-step item."""
    if item.kind == ItemKind.WILDCARD:
        return spec.min_value, spec.max_value
    if item.kind == ItemKind.RANGE:
        assert item.start is not None and item.end is not None
        return _check_range(item.start, item.end, spec)
    if item.kind == ItemKind.SINGLE:
        assert item.start is not None
        return _check_value(item.start, spec), spec.max_value
    raise ValueError(f"Cannot resolve bounds for {item.kind.name} item")


def resolve_item(item: FieldItem, spec: FieldSpec) -> list[int]:
    """Expand a classified item into the values it matches.

    Args:
        item: Item produced by parse_item().
        spec: Field the item belongs to.

    Returns:
        Matching values in ascending order.

    Raises:
        FieldError: If the item violates the field's bounds or step rules.
    """
    if item.kind == ItemKind.WILDCARD:
        return list(range(spec.min_value, spec.max_value + 1))

    if item.kind == ItemKind.SINGLE:
        assert item.start is not None
        return [_check_value(item.start, spec)]

    if item.kind == ItemKind.RANGE:
        assert item.start is not None and item.end is not None
        start, end = _check_range(item.start, item.end, spec)
        return list(range(start, end + 1))

    # STEP: a bare value as base means "from value to the field maximum"
    assert item.step is not None and item.base is not None
    if item.step <= 0:
        raise InvalidStepError(item.step)
    if item.step > spec.span:
        raise StepTooLargeError(item.step, spec.min_value, spec.max_value)

    start, end = _resolve_bounds(item.base, spec)
    return list(range(start, end + 1, item.step))


def expand_values(token: str, spec: FieldSpec) -> list[int]:
    """Expand a full field token into its sorted, unique values.

    Items are evaluated left to right; the first failing item aborts the
    whole field and later items are not evaluated.

    Args:
        token: Field token, e.g. ``1-4,22,23``.
        spec: Field the token belongs to.

    Returns:
        Sorted list of unique matching values.

    Raises:
        FieldError: From the first item that fails.
    """
    values: list[int] = []
    for text in token.split(LIST_SEPARATOR):
        values.extend(resolve_item(parse_item(text), spec))
    return sorted(set(values))


# =============================================================================
# Expanded Field
# =============================================================================


@dataclass(frozen=True)
class ExpandedField:
    """Result of expanding one field token.

    Exactly one of ``values`` (on success) or ``error`` (on failure) is
    meaningful; a failed field always has empty ``values``.
    """

    spec: FieldSpec
    token: str
    values: tuple[int, ...] = ()
    error: FieldError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def name(self) -> str:
        return self.spec.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.spec.name,
            "token": self.token,
            "values": list(self.values),
            "error": str(self.error) if self.error is not None else None,
        }


def expand_field(token: str, spec: FieldSpec) -> ExpandedField:
    """Expand a field token without raising on invalid content.

    Args:
        token: Field token.
        spec: Field the token belongs to.

    Returns:
        ExpandedField holding either the values or the FieldError.
    """
    try:
        values = expand_values(token, spec)
    except FieldError as e:
        return ExpandedField(spec=spec, token=token, error=e)
    return ExpandedField(spec=spec, token=token, values=tuple(values))
