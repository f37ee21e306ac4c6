"""Saving shapes to text files and loading them back."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator

from .builders import CircleBuilder, RectangleBuilder, ShapeBuilder, TriangleBuilder
from .shapes import Group, Shape

_BUILDERS: dict[str, type[ShapeBuilder]] = {
    builder.kind: builder for builder in (CircleBuilder, RectangleBuilder, TriangleBuilder)
}


def create_builder(shape_type: str) -> ShapeBuilder | None:
    """A fresh builder for the named kind of shape, or None."""
    builder = _BUILDERS.get(shape_type)
    return builder() if builder else None


def _build(line: str) -> Shape | None:
    tokens = line.split()
    builder = create_builder(tokens[0] if tokens else "")
    if builder is None:
        return None
    builder.build(line)
    return builder.result()


class SaveStrategy(ABC):
    """A way of writing shapes to a file."""

    @abstractmethod
    def save(self, filename: str, shapes: Iterable[Shape]) -> None:
        """Write the shapes to the file."""


class TextSaveStrategy(SaveStrategy):
    """Writes each shape's text form on its own line."""

    def save(self, filename: str, shapes: Iterable[Shape]) -> None:
        with open(filename, "w", encoding="utf-8") as file:
            for shape in shapes:
                file.write(shape.serialize() + "\n")


class ShapeLoader:
    """Reads shapes written by TextSaveStrategy."""

    def load(self, filename: str) -> list[Shape]:
        with open(filename, encoding="utf-8") as file:
            lines = (line.rstrip("\n") for line in file)
            return list(self._parse(lines))

    def _parse(self, lines: Iterator[str]) -> Iterator[Shape]:
        for line in lines:
            tokens = line.split()
            if tokens and tokens[0] == "{":
                group = Group()
                for inner in lines:
                    if inner == "}":
                        break
                    shape = _build(inner)
                    if shape is not None:
                        group.add(shape)
                    if not group.is_empty():
                        group.make_frame()
                yield group
            else:
                shape = _build(line)
                if shape is not None:
                    yield shape