"""Editable shapes: circles, rectangles, triangles and groups of them."""

from __future__ import annotations

import copy
import math
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

from .geometry import BLACK, RED, Bounds, Color, Vector

CIRCLE_POINT_COUNT = 30
DEFAULT_OUTLINE_THICKNESS = 2.0


def _format_number(value: float) -> str:
    return format(float(value), "g")


def _bounds_of(points: Iterable[Vector]) -> Bounds:
    points = list(points)
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return Bounds(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))


def _shifted(bounds: Bounds, offset: Vector) -> Bounds:
    return Bounds(bounds.left + offset.x, bounds.top + offset.y, bounds.width, bounds.height)


def _unit_normal(a: Vector, b: Vector) -> tuple[float, float]:
    nx, ny = a.y - b.y, b.x - a.x
    length = math.hypot(nx, ny)
    if length:
        nx, ny = nx / length, ny / length
    return nx, ny


def _outline_bounds(points: Sequence[Vector], thickness: float) -> Bounds:
    """Bounds of a convex polygon together with its mitred outline."""
    inside = _bounds_of(points)
    if thickness == 0:
        return inside
    cx = inside.left + inside.width / 2
    cy = inside.top + inside.height / 2
    previous = list(points[-1:]) + list(points[:-1])
    following = list(points[1:]) + list(points[:1])
    outline = list(points)
    for p0, p1, p2 in zip(previous, points, following):
        normals = []
        for nx, ny in (_unit_normal(p0, p1), _unit_normal(p1, p2)):
            if nx * cx + ny * cy - (nx * p1.x + ny * p1.y) > 0:
                nx, ny = -nx, -ny
            normals.append((nx, ny))
        (ax, ay), (bx, by) = normals
        factor = 1 + ax * bx + ay * by
        if factor:
            mx, my = (ax + bx) / factor, (ay + by) / factor
        else:
            mx, my = ax, ay
        outline.append(Vector(p1.x + mx * thickness, p1.y + my * thickness))
    return _bounds_of(outline)


class ShapeVisitor(ABC):
    """Operation applied to each kind of shape."""

    @abstractmethod
    def visit_circle(self, circle: Circle) -> None: ...

    @abstractmethod
    def visit_rectangle(self, rectangle: Rectangle) -> None: ...

    @abstractmethod
    def visit_triangle(self, triangle: Triangle) -> None: ...

    @abstractmethod
    def visit_group(self, group: Group) -> None: ...


class Shape(ABC):
    """Something that can be placed, moved, selected and saved."""

    def __init__(self, selected: bool = False) -> None:
        self.selected = selected

    @abstractmethod
    def serialize(self) -> str:
        """Text form of the shape."""

    @abstractmethod
    def bounds(self) -> Bounds:
        """Global bounds, outline included."""

    def contains(self, point: Vector) -> bool:
        return self.bounds().contains(point)

    def position(self) -> Vector:
        return self.bounds().position()

    @abstractmethod
    def move_to(self, position: Vector) -> None:
        """Place the shape at a position."""

    def right_down_corner(self) -> Vector:
        return self.bounds().right_down()

    @abstractmethod
    def move(self, offset: Vector) -> None:
        """Shift the shape by an offset."""

    def is_group(self) -> bool:
        return False

    @abstractmethod
    def clone(self) -> Shape:
        """An independent copy."""

    @abstractmethod
    def accept(self, visitor: ShapeVisitor) -> None:
        """Dispatch to the matching visitor method."""


class _Figure(Shape):
    """A single polygonal figure with fill, outline and a selection frame."""

    def __init__(self, origin: Vector) -> None:
        super().__init__()
        self.origin = origin
        self.fill_color: Color = BLACK
        self.outline_color: Color = RED
        self.outline_thickness: float = DEFAULT_OUTLINE_THICKNESS
        self.frame = self.bounds()

    @abstractmethod
    def _local_points(self) -> Sequence[Vector]: ...

    def _style_fields(self) -> str:
        return (
            f"{self.fill_color.to_integer()} "
            f"{self.outline_color.to_integer()} "
            f"{_format_number(self.outline_thickness)}"
        )

    def bounds(self) -> Bounds:
        local = _outline_bounds(self._local_points(), self.outline_thickness)
        return _shifted(local, self.origin)

    def move_to(self, position: Vector) -> None:
        self.origin = position
        current = self.bounds()
        self.frame = Bounds(current.left, current.top, self.frame.width, self.frame.height)

    def move(self, offset: Vector) -> None:
        self.origin = self.origin + offset
        self.frame = _shifted(self.frame, offset)

    def clone(self) -> Shape:
        return copy.copy(self)


class Circle(_Figure):
    """A circle drawn as a regular polygon."""

    def __init__(self, radius: float, position: Vector) -> None:
        self.radius = radius
        super().__init__(position)

    def _local_points(self) -> Sequence[Vector]:
        step = 2 * math.pi / CIRCLE_POINT_COUNT
        return [
            Vector(
                self.radius + math.cos(k * step - math.pi / 2) * self.radius,
                self.radius + math.sin(k * step - math.pi / 2) * self.radius,
            )
            for k in range(CIRCLE_POINT_COUNT)
        ]

    def serialize(self) -> str:
        return (
            f"Circle {_format_number(self.radius)} "
            f"{_format_number(self.origin.x)} {_format_number(self.origin.y)} "
            f"{self._style_fields()}"
        )

    def accept(self, visitor: ShapeVisitor) -> None:
        visitor.visit_circle(self)


class Rectangle(_Figure):
    """An axis-aligned rectangle."""

    def __init__(self, size: Vector, position: Vector) -> None:
        self.size = size
        super().__init__(position)

    def _local_points(self) -> Sequence[Vector]:
        w, h = self.size.x, self.size.y
        return [Vector(0, 0), Vector(w, 0), Vector(w, h), Vector(0, h)]

    def serialize(self) -> str:
        return (
            f"Rectangle {_format_number(self.size.x)} {_format_number(self.size.y)} "
            f"{_format_number(self.origin.x)} {_format_number(self.origin.y)} "
            f"{self._style_fields()}"
        )

    def accept(self, visitor: ShapeVisitor) -> None:
        visitor.visit_rectangle(self)


class Triangle(_Figure):
    """A triangle; its points are kept relative to its origin."""

    def __init__(self, point1: Vector, point2: Vector, point3: Vector) -> None:
        self.points = (point1, point2, point3)
        super().__init__(Vector(0, 0))

    def _local_points(self) -> Sequence[Vector]:
        return self.points

    def update_frame(self) -> None:
        """Fit the selection frame to the current bounds."""
        self.frame = self.bounds()

    def serialize(self) -> str:
        coordinates = "".join(
            f"{_format_number(p.x)} {_format_number(p.y)} " for p in self.points
        )
        return f"Triangle {coordinates}{self._style_fields()}"

    def move_to(self, position: Vector) -> None:
        self.origin = self.origin + (position - self.bounds().position())
        self.update_frame()

    def right_down_corner(self) -> Vector:
        corner = self.bounds().right_down()
        t = self.outline_thickness
        return Vector(corner.x - t, corner.y - t)

    def accept(self, visitor: ShapeVisitor) -> None:
        visitor.visit_triangle(self)


class Group(Shape):
    """A collection of shapes that behaves as one."""

    def __init__(self, shapes: Iterable[Shape] | None = None) -> None:
        super().__init__(selected=True)
        self.shapes: list[Shape] = list(shapes or [])
        self.frame = Bounds(0, 0, 0, 0)

    def make_frame(self) -> None:
        """Fit the selection frame around the members."""
        self.frame = self.bounds()

    def add(self, shape: Shape) -> None:
        self.shapes.append(shape)

    def remove(self, shape: Shape) -> None:
        """Remove every occurrence of this very shape."""
        self.shapes = [member for member in self.shapes if member is not shape]

    def is_empty(self) -> bool:
        return not self.shapes

    def bounds(self) -> Bounds:
        top_left = self.position()
        corner = self.right_down_corner()
        return Bounds(top_left.x, top_left.y, corner.x - top_left.x, corner.y - top_left.y)

    def serialize(self) -> str:
        body = "".join(f"{member.serialize()}\n" for member in self.shapes)
        return "{\n" + body + "}\n"

    def contains(self, point: Vector) -> bool:
        return any(member.contains(point) for member in self.shapes)

    def position(self) -> Vector:
        if not self.shapes:
            return Vector(0, 0)
        positions = [member.position() for member in self.shapes]
        return Vector(min(p.x for p in positions), min(p.y for p in positions))

    def move_to(self, position: Vector) -> None:
        if not self.shapes:
            return
        offset = position - self.position()
        for member in self.shapes:
            member.move(offset)
        self.make_frame()

    def right_down_corner(self) -> Vector:
        if not self.shapes:
            return Vector(0, 0)
        corners = [member.right_down_corner() for member in self.shapes]
        return Vector(max(c.x for c in corners), max(c.y for c in corners))

    def move(self, offset: Vector) -> None:
        for member in self.shapes:
            member.move(offset)
        self.frame = _shifted(self.frame, offset)

    def is_group(self) -> bool:
        return True

    def clone(self) -> Shape:
        return Group(member.clone() for member in self.shapes)

    def accept(self, visitor: ShapeVisitor) -> None:
        visitor.visit_group(self)