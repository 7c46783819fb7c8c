"""Cell values that flow through the design graph."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Int64Value:
    """A signed 64-bit integer cell value."""

    value: int

    def __post_init__(self) -> None:
        if not -(2**63) <= self.value < 2**63:
            raise OverflowError(f"{self.value} does not fit in a signed 64-bit integer")


@dataclass(frozen=True)
class StringValue:
    """A text cell value."""

    value: str


@dataclass(frozen=True)
class NullValue:
    """A SQL NULL cell value."""


Value = Union[Int64Value, StringValue, NullValue]


class ValueTypeTag(enum.IntEnum):
    """The kind of value a column holds."""

    INT64 = 0
    STRING = 1
    NULL = 2


def format_value(value: Value) -> str:
    """Render a value for display; NULL is shown as ``[NULL]``."""
    match value:
        case NullValue():
            return "[NULL]"
        case Int64Value(value=number):
            return str(number)
        case StringValue(value=text):
            return text
    raise TypeError(f"not a cell value: {value!r}")