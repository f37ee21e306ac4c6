"""Editor commands that act on the list of shapes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from .geometry import Color, Vector
from .shapes import Circle, Rectangle, Shape, ShapeVisitor, Triangle
from .storage import SaveStrategy, ShapeLoader
from .visitors import FillColorVisitor, OutlineColorVisitor, OutlineThicknessVisitor

DEFAULT_FILENAME = "out.txt"


def _apply_to_selected(shapes: list[Shape], visitor: ShapeVisitor) -> None:
    for shape in shapes:
        if shape.selected:
            shape.accept(visitor)


class Command(ABC):
    """An action on the drawing."""

    @abstractmethod
    def execute(self, shapes: list[Shape]) -> None:
        """Carry out the action, changing the list in place."""


class AddCircleCommand(Command):
    def execute(self, shapes: list[Shape]) -> None:
        shapes.append(Circle(50, Vector(200, 200)))


class AddRectangleCommand(Command):
    def execute(self, shapes: list[Shape]) -> None:
        shapes.append(Rectangle(Vector(100, 100), Vector(100, 100)))


class AddTriangleCommand(Command):
    def execute(self, shapes: list[Shape]) -> None:
        shapes.append(Triangle(Vector(100, 200), Vector(200, 200), Vector(150, 100)))


class ChangeFillColorCommand(Command):
    def __init__(self, color: Color) -> None:
        self.color = color

    def execute(self, shapes: list[Shape]) -> None:
        _apply_to_selected(shapes, FillColorVisitor(self.color))


class ChangeOutlineColorCommand(Command):
    def __init__(self, color: Color) -> None:
        self.color = color

    def execute(self, shapes: list[Shape]) -> None:
        _apply_to_selected(shapes, OutlineColorVisitor(self.color))


class ChangeOutlineThicknessCommand(Command):
    def __init__(self, thickness: float) -> None:
        self.thickness = thickness

    def execute(self, shapes: list[Shape]) -> None:
        _apply_to_selected(shapes, OutlineThicknessVisitor(self.thickness))


class UndoCommand(Command):
    """Calls the editor's undo action."""

    def __init__(self, undo: Callable[[], None]) -> None:
        self.undo = undo

    def execute(self, shapes: list[Shape]) -> None:
        self.undo()


class SaveCommand(Command):
    def __init__(self, strategy: SaveStrategy, filename: str = DEFAULT_FILENAME) -> None:
        self.strategy = strategy
        self.filename = filename

    def execute(self, shapes: list[Shape]) -> None:
        self.strategy.save(self.filename, shapes)


class LoadCommand(Command):
    """Replaces the drawing with the shapes read from a file."""

    def __init__(self, loader: ShapeLoader, filename: str = DEFAULT_FILENAME) -> None:
        self.loader = loader
        self.filename = filename

    def execute(self, shapes: list[Shape]) -> None:
        shapes[:] = self.loader.load(self.filename)