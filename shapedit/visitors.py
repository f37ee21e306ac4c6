"""Visitors that restyle shapes, recursing into groups."""

from __future__ import annotations

from abc import abstractmethod
from typing import Union

from .geometry import Color
from .shapes import Circle, Group, Rectangle, ShapeVisitor, Triangle

_Figure = Union[Circle, Rectangle, Triangle]


class _StyleVisitor(ShapeVisitor):
    """Applies one change to every figure, descending into groups."""

    @abstractmethod
    def _apply(self, figure: _Figure) -> None:
        """Change a single figure."""

    def visit_circle(self, circle: Circle) -> None:
        self._apply(circle)

    def visit_rectangle(self, rectangle: Rectangle) -> None:
        self._apply(rectangle)

    def visit_triangle(self, triangle: Triangle) -> None:
        self._apply(triangle)

    def visit_group(self, group: Group) -> None:
        for member in group.shapes:
            member.accept(self)


class FillColorVisitor(_StyleVisitor):
    """Sets the fill colour."""

    def __init__(self, color: Color) -> None:
        self.color = color

    def _apply(self, figure: _Figure) -> None:
        figure.fill_color = self.color


class OutlineColorVisitor(_StyleVisitor):
    """Sets the outline colour."""

    def __init__(self, color: Color) -> None:
        self.color = color

    def _apply(self, figure: _Figure) -> None:
        figure.outline_color = self.color


class OutlineThicknessVisitor(_StyleVisitor):
    """Sets the outline thickness."""

    def __init__(self, thickness: float) -> None:
        self.thickness = thickness

    def _apply(self, figure: _Figure) -> None:
        figure.outline_thickness = self.thickness