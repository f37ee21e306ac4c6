"""Shapes wrapped with perimeter and area measurements."""

from __future__ import annotations

import math
from abc import abstractmethod

from .geometry import Bounds, Vector
from .shapes import Circle, Rectangle, Shape, ShapeVisitor, Triangle


def _format_number(value: float) -> str:
    return format(float(value), "g")


class MathDecorator(Shape):
    """A shape that also knows its perimeter and area; everything else is delegated."""

    def __init__(self, shape: Shape) -> None:
        self.shape = shape

    @property
    def selected(self) -> bool:  # type: ignore[override]
        return self.shape.selected

    @selected.setter
    def selected(self, value: bool) -> None:
        self.shape.selected = value

    @abstractmethod
    def perimeter(self) -> float:
        """Length of the shape's border."""

    @abstractmethod
    def area(self) -> float:
        """Area enclosed by the shape."""

    def describe(self) -> str:
        """One report line with the perimeter and the area."""
        return f"P = {_format_number(self.perimeter())}; S = {_format_number(self.area())}"

    def serialize(self) -> str:
        return ""

    def bounds(self) -> Bounds:
        return self.shape.bounds()

    def contains(self, point: Vector) -> bool:
        return self.shape.contains(point)

    def position(self) -> Vector:
        return self.shape.position()

    def move_to(self, position: Vector) -> None:
        self.shape.move_to(position)

    def right_down_corner(self) -> Vector:
        return self.shape.right_down_corner()

    def move(self, offset: Vector) -> None:
        self.shape.move(offset)

    def is_group(self) -> bool:
        return self.shape.is_group()

    def accept(self, visitor: ShapeVisitor) -> None:
        self.shape.accept(visitor)

    def clone(self) -> Shape:
        """A copy of the wrapped shape."""
        return self.shape.clone()


class CircleDecorator(MathDecorator):
    """Measures a circle."""

    shape: Circle

    def __init__(self, shape: Circle) -> None:
        super().__init__(shape)

    def perimeter(self) -> float:
        return 2 * math.pi * self.shape.radius

    def area(self) -> float:
        return math.pi * self.shape.radius ** 2


class RectangleDecorator(MathDecorator):
    """Measures a rectangle from its width, taken as the side of a square."""

    shape: Rectangle

    def __init__(self, shape: Rectangle) -> None:
        super().__init__(shape)

    def perimeter(self) -> float:
        return 4 * self.shape.size.x

    def area(self) -> float:
        side = self.shape.size.x
        return side * side


class TriangleDecorator(MathDecorator):
    """Measures a triangle."""

    shape: Triangle

    def __init__(self, shape: Triangle) -> None:
        super().__init__(shape)

    def perimeter(self) -> float:
        a, b, c = self.shape.points
        return math.dist((a.x, a.y), (b.x, b.y)) + math.dist(
            (b.x, b.y), (c.x, c.y)
        ) + math.dist((c.x, c.y), (a.x, a.y))

    def area(self) -> float:
        (x1, y1), (x2, y2), (x3, y3) = ((p.x, p.y) for p in self.shape.points)
        return abs((x1 * (y2 - y3) + x2 * (y3 - y1) + x3 * (y1 - y2)) / 2.0)