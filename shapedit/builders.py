"""Builders that turn a saved line of text back into a shape."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from .geometry import Color, Vector
from .shapes import Circle, Rectangle, Shape, Triangle


class ShapeFormatError(ValueError):
    """A saved shape line cannot be parsed."""


class ShapeBuilder(ABC):
    """Parses one line of the text format into a shape."""

    kind: str = ""
    _coordinate_count: int = 0

    def __init__(self) -> None:
        self._result: Shape | None = None

    @abstractmethod
    def _create(self, values: Sequence[float]) -> Shape:
        """Make the shape from its numeric fields."""

    def build(self, data: str) -> None:
        """Parse a line; a line naming another kind of shape is ignored."""
        tokens = data.split()
        count = self._coordinate_count
        error = f"Invalid data format for {self.kind}"
        if len(tokens) < count + 4:
            raise ShapeFormatError(error)
        try:
            values = [float(token) for token in tokens[1 : count + 1]]
            fill = Color.from_integer(int(tokens[count + 1]))
            outline = Color.from_integer(int(tokens[count + 2]))
            thickness = float(tokens[count + 3])
        except ValueError as exc:
            raise ShapeFormatError(error) from exc
        if tokens[0] != self.kind:
            return
        shape = self._create(values)
        shape.fill_color = fill
        shape.outline_color = outline
        shape.outline_thickness = thickness
        self._result = shape

    def result(self) -> Shape | None:
        """The last shape built, if any."""
        return self._result


class CircleBuilder(ShapeBuilder):
    kind = "Circle"
    _coordinate_count = 3

    def _create(self, values: Sequence[float]) -> Shape:
        radius, x, y = values
        return Circle(radius, Vector(x, y))


class RectangleBuilder(ShapeBuilder):
    kind = "Rectangle"
    _coordinate_count = 4

    def _create(self, values: Sequence[float]) -> Shape:
        width, height, x, y = values
        return Rectangle(Vector(width, height), Vector(x, y))


class TriangleBuilder(ShapeBuilder):
    kind = "Triangle"
    _coordinate_count = 6

    def _create(self, values: Sequence[float]) -> Shape:
        x1, y1, x2, y2, x3, y3 = values
        return Triangle(Vector(x1, y1), Vector(x2, y2), Vector(x3, y3))