"""Snapshots of the drawing and the undo history that keeps them."""

from __future__ import annotations

from collections.abc import Iterable

from .shapes import Shape


class Memento:
    """A deep snapshot of a list of shapes."""

    def __init__(self, shapes: Iterable[Shape]) -> None:
        self._state = tuple(shape.clone() for shape in shapes)

    def state(self) -> list[Shape]:
        """The saved shapes, as a new list."""
        return list(self._state)


class Caretaker:
    """A stack of snapshots for undo."""

    def __init__(self) -> None:
        self._history: list[Memento] = []

    def save(self, memento: Memento) -> None:
        self._history.append(memento)

    def can_undo(self) -> bool:
        return bool(self._history)

    def undo(self) -> Memento:
        """Remove and return the most recent snapshot."""
        if not self._history:
            raise IndexError("nothing to undo")
        return self._history.pop()