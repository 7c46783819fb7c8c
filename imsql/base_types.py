"""Basic geometric and colour types."""

from __future__ import annotations

import math
import string
from dataclasses import dataclass
from typing import Tuple

_CHANNEL_MAX = 255


@dataclass
class Vec2:
    """A 2D vector ordered by its length."""

    x: float = 0.0
    y: float = 0.0

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalized(self) -> Vec2:
        """The unit vector in the same direction, or the zero vector."""
        length = self.length()
        if length == 0.0:
            return Vec2(0.0, 0.0)
        return Vec2(self.x / length, self.y / length)

    def __lt__(self, other: Vec2) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        mine, theirs = self.length(), other.length()
        if mine != theirs:
            return mine < theirs
        # Equal lengths but different components still order as "less".
        return self != other

    def __gt__(self, other: Vec2) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.length() > other.length()

    def __le__(self, other: Vec2) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return not self > other

    def __ge__(self, other: Vec2) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return not self < other


def _parse_channel(text: str) -> int:
    digits = ""
    for char in text:
        if char not in string.hexdigits:
            break
        digits += char
    return int(digits, 16) if digits else 0


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGBA colour."""

    red: int = 0
    green: int = 0
    blue: int = 0
    alpha: int = _CHANNEL_MAX

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            channel = getattr(self, name)
            if not 0 <= channel <= _CHANNEL_MAX:
                raise ValueError(f"{name} channel out of range: {channel}")

    @classmethod
    def from_hex(cls, hex_color: str) -> Color:
        """Parse ``#rrggbb``; alpha is always opaque."""
        if not hex_color.startswith("#"):
            raise ValueError("Hex color must start with '#'")
        return cls(
            red=_parse_channel(hex_color[1:3]),
            green=_parse_channel(hex_color[3:5]),
            blue=_parse_channel(hex_color[5:7]),
        )

    def to_float4(self) -> Tuple[float, float, float, float]:
        """Channels scaled to the range 0..1, in RGBA order."""
        return (
            self.red / _CHANNEL_MAX,
            self.green / _CHANNEL_MAX,
            self.blue / _CHANNEL_MAX,
            self.alpha / _CHANNEL_MAX,
        )

    def to_u32(self) -> int:
        """Pack as a 32-bit integer with red in the low byte and alpha in the high byte."""
        return (self.alpha << 24) | (self.blue << 16) | (self.green << 8) | self.red

    def to_hex(self) -> str:
        """Render as ``#rrggbbaa`` in lower case."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}{self.alpha:02x}"

    def __str__(self) -> str:
        return self.to_hex()