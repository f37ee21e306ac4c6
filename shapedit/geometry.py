"""Basic value types: 2D vectors, RGBA colours and axis-aligned bounds."""

from __future__ import annotations

from dataclasses import dataclass

_CHANNEL_MAX = 0xFF
_INTEGER_MAX = 0xFFFFFFFF


@dataclass(frozen=True)
class Vector:
    """A point or offset in the plane."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = _CHANNEL_MAX

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= _CHANNEL_MAX:
                raise ValueError(f"colour channel out of range: {channel}")

    def to_integer(self) -> int:
        """Pack the colour as 0xRRGGBBAA."""
        return (self.r << 24) | (self.g << 16) | (self.b << 8) | self.a

    @classmethod
    def from_integer(cls, value: int) -> Color:
        """Unpack a colour from 0xRRGGBBAA."""
        if not 0 <= value <= _INTEGER_MAX:
            raise ValueError(f"colour value out of range: {value}")
        return cls(
            (value >> 24) & _CHANNEL_MAX,
            (value >> 16) & _CHANNEL_MAX,
            (value >> 8) & _CHANNEL_MAX,
            value & _CHANNEL_MAX,
        )


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
YELLOW = Color(255, 255, 0)
MAGENTA = Color(255, 0, 255)
CYAN = Color(0, 255, 255)
TRANSPARENT = Color(0, 0, 0, 0)


@dataclass(frozen=True)
class Bounds:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    def contains(self, point: Vector) -> bool:
        """True if the point lies inside; the right and bottom edges are excluded."""
        min_x = min(self.left, self.left + self.width)
        max_x = max(self.left, self.left + self.width)
        min_y = min(self.top, self.top + self.height)
        max_y = max(self.top, self.top + self.height)
        return min_x <= point.x < max_x and min_y <= point.y < max_y

    def position(self) -> Vector:
        """The top-left corner."""
        return Vector(self.left, self.top)

    def right_down(self) -> Vector:
        """The bottom-right corner."""
        return Vector(self.left + self.width, self.top + self.height)