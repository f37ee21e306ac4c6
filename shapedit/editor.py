"""Selection, dragging, grouping and undo for the shapes on the canvas."""

from __future__ import annotations

from .geometry import Vector
from .history import Caretaker, Memento
from .shapes import Group, Shape
from .toolbar import Toolbar


class Editor:
    """Holds the drawing and reacts to the user's mouse and keyboard actions."""

    def __init__(self, toolbar: Toolbar, caretaker: Caretaker | None = None) -> None:
        self.toolbar = toolbar
        self.caretaker = caretaker if caretaker is not None else Caretaker()
        self.shapes: list[Shape] = []
        self.moving = False
        self._last_point = Vector()

    def save_state(self) -> None:
        """Push a snapshot of the drawing onto the undo history."""
        self.caretaker.save(Memento(self.shapes))

    def undo(self) -> None:
        """Restore the most recent snapshot, if there is one."""
        if self.caretaker.can_undo():
            self.shapes[:] = self.caretaker.undo().state()

    def press(self, point: Vector, additive: bool = False) -> bool:
        """Left mouse press: run a toolbar button or change the selection.

        Returns whether the selection changed.
        """
        self.toolbar.click(point, self.shapes, self.caretaker)
        if self.toolbar.is_over_button(point):
            return False
        return self.select_at(point, additive)

    def select_at(self, point: Vector, additive: bool = False) -> bool:
        """Select the topmost shape under the point.

        Unless additive, every other shape is deselected. Returns whether
        anything changed.
        """
        changed = False
        selection_made = False
        for shape in reversed(self.shapes):
            was_selected = shape.selected
            if not selection_made and shape.contains(point):
                shape.selected = True
                selection_made = True
                changed = True
            elif not additive:
                shape.selected = False
                changed = changed or was_selected
        return changed

    def drag(self, point: Vector, pressed: bool) -> None:
        """Move selected shapes while the button is held, saving a snapshot at the start."""
        if self.toolbar.is_over_button(point):
            self.moving = False
            return
        if not pressed:
            self.moving = False
            return
        if not self.moving:
            self.moving = True
            self._last_point = point
            self.save_state()
        offset = point - self._last_point
        for shape in self.shapes:
            if shape.selected:
                shape.move(offset)
        self._last_point = point

    def group_selected(self) -> None:
        """Save a snapshot, then replace the selected shapes with one group of them."""
        self.save_state()
        chosen = [shape for shape in self.shapes if shape.selected]
        for shape in chosen:
            shape.selected = False
        self.shapes[:] = [shape for shape in self.shapes if not shape.selected and shape not in chosen]
        group = Group(chosen)
        if not group.is_empty():
            group.make_frame()
            self.shapes.append(group)

    def ungroup_selected(self) -> None:
        """Save a snapshot, then take the last member out of each selected group.

        A group left empty is removed.
        """
        self.save_state()
        # The list grows and shrinks while it is walked, so an index is kept.
        index = 0
        while index < len(self.shapes):
            shape = self.shapes[index]
            if shape.selected and isinstance(shape, Group):
                if not shape.is_empty():
                    last = shape.shapes[-1]
                    self.shapes.append(last)
                    shape.remove(last)
                    shape.make_frame()
                if shape.is_empty():
                    del self.shapes[index]
            index += 1