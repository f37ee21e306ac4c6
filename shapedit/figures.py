"""Reading figure descriptions and writing their measurements."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable

from .builders import ShapeFormatError
from .geometry import Vector
from .measures import CircleDecorator, MathDecorator, RectangleDecorator, TriangleDecorator
from .shapes import Circle, Rectangle, Triangle

ShapeCreator = Callable[[str], MathDecorator]

_INTEGER = re.compile(r"\s*([+-]?\d+)")


class _Scanner:
    """Reads integers and single characters from a line, skipping blanks."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def skip(self, count: int) -> None:
        self._pos = min(self._pos + count, len(self._text))

    def integer(self) -> int:
        match = _INTEGER.match(self._text, self._pos)
        if match is None:
            raise ShapeFormatError(f"expected a number in {self._text!r}")
        self._pos = match.end()
        return int(match.group(1))

    def char(self, count: int = 1) -> None:
        for _ in range(count):
            while self._pos < len(self._text) and self._text[self._pos].isspace():
                self._pos += 1
            if self._pos >= len(self._text):
                raise ShapeFormatError(f"unexpected end of {self._text!r}")
            self._pos += 1


def create_circle(text: str) -> MathDecorator:
    """Parse ' C=cx, cy; R=r'."""
    scanner = _Scanner(text)
    scanner.skip(3)
    cx = scanner.integer()
    scanner.char()
    cy = scanner.integer()
    scanner.char(3)
    radius = scanner.integer()
    return CircleDecorator(Circle(radius, Vector(cx, cy)))


def create_rectangle(text: str) -> MathDecorator:
    """Parse ' P1=x1, y1; P2=x2, y2'."""
    scanner = _Scanner(text)
    scanner.skip(4)
    x1 = scanner.integer()
    scanner.char()
    y1 = scanner.integer()
    scanner.char(4)
    x2 = scanner.integer()
    scanner.char()
    y2 = scanner.integer()
    return RectangleDecorator(Rectangle(Vector(x2 - x1, y2 - y1), Vector(x1, y1)))


def create_triangle(text: str) -> MathDecorator:
    """Parse ' P1=x1, y1; P2=x2, y2; P3=x3, y3'."""
    scanner = _Scanner(text)
    scanner.skip(4)
    points = []
    for index in range(3):
        if index:
            scanner.char(4)
        x = scanner.integer()
        scanner.char()
        y = scanner.integer()
        points.append(Vector(x, y))
    return TriangleDecorator(Triangle(*points))


def shape_factory() -> dict[str, ShapeCreator]:
    """Creators keyed by the line prefix that names them."""
    return {
        "CIRCLE:": create_circle,
        "RECTANGLE:": create_rectangle,
        "TRIANGLE:": create_triangle,
    }


def load_shapes(filename: str) -> list[MathDecorator]:
    """Read every recognised figure line; a missing file yields no figures."""
    factory = shape_factory()
    try:
        with open(filename, encoding="utf-8") as file:
            lines = file.read().splitlines()
    except FileNotFoundError:
        return []
    shapes = []
    for line in lines:
        stripped = line.lstrip()
        tokens = stripped.split(maxsplit=1)
        if not tokens:
            continue
        creator = factory.get(tokens[0])
        if creator is not None:
            shapes.append(creator(stripped[len(tokens[0]):]))
    return shapes


def save_results(shapes: Iterable[MathDecorator], filename: str) -> None:
    """Write one measurement line per figure."""
    with open(filename, "w", encoding="utf-8") as file:
        for shape in shapes:
            file.write(shape.describe() + "\n")