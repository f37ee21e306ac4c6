"""The row of buttons along the top of the editor window."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from .commands import (
    DEFAULT_FILENAME,
    AddCircleCommand,
    AddRectangleCommand,
    AddTriangleCommand,
    ChangeFillColorCommand,
    ChangeOutlineColorCommand,
    ChangeOutlineThicknessCommand,
    Command,
    LoadCommand,
    SaveCommand,
    UndoCommand,
)
from .geometry import BLACK, BLUE, CYAN, GREEN, MAGENTA, RED, YELLOW, Bounds, Color, Vector
from .history import Caretaker, Memento
from .shapes import Shape
from .storage import SaveStrategy, ShapeLoader, TextSaveStrategy

BUTTON_SIZE = Vector(40, 40)
BUTTON_SPACING = 5.0
TOOLBAR_ORIGIN = Vector(10, 10)
LABEL_INSET = Vector(5, 5)


@dataclass
class ToolbarButton:
    """A coloured square with a label that runs a command when clicked."""

    size: Vector
    position: Vector
    color: Color
    label: str
    command: Command | None = None

    def bounds(self) -> Bounds:
        return Bounds(self.position.x, self.position.y, self.size.x, self.size.y)

    def contains(self, point: Vector) -> bool:
        return self.bounds().contains(point)

    def execute(self, shapes: list[Shape]) -> None:
        if self.command is not None:
            self.command.execute(shapes)


@dataclass
class Toolbar:
    """The editor's buttons, with the file storage the save and load buttons use."""

    filename: str = DEFAULT_FILENAME
    save_strategy: SaveStrategy = field(default_factory=TextSaveStrategy)
    loader: ShapeLoader = field(default_factory=ShapeLoader)
    buttons: list[ToolbarButton] = field(default_factory=list)

    def setup_buttons(self, undo: Callable[[], None]) -> None:
        """Create the standard buttons; undo is called by the Undo button."""
        specs: list[tuple[Color, str, Command]] = [
            (CYAN, "Circle", AddCircleCommand()),
            (CYAN, "Rect", AddRectangleCommand()),
            (CYAN, "Tri", AddTriangleCommand()),
            (GREEN, "Fill G", ChangeFillColorCommand(GREEN)),
            (RED, "Fill R", ChangeFillColorCommand(RED)),
            (YELLOW, "Fill Y", ChangeFillColorCommand(YELLOW)),
            (BLUE, "Out B", ChangeOutlineColorCommand(BLUE)),
            (BLACK, "Out Bl", ChangeOutlineColorCommand(BLACK)),
            (MAGENTA, "Out M", ChangeOutlineColorCommand(MAGENTA)),
            (CYAN, "Th 0", ChangeOutlineThicknessCommand(0.0)),
            (CYAN, "Th 3", ChangeOutlineThicknessCommand(3.0)),
            (CYAN, "Th 5", ChangeOutlineThicknessCommand(5.0)),
            (CYAN, "Undo", UndoCommand(undo)),
            (CYAN, "Save", SaveCommand(self.save_strategy, self.filename)),
            (CYAN, "Load", LoadCommand(self.loader, self.filename)),
        ]
        step = BUTTON_SIZE.x + BUTTON_SPACING
        self.buttons = [
            ToolbarButton(
                BUTTON_SIZE,
                Vector(TOOLBAR_ORIGIN.x + index * step, TOOLBAR_ORIGIN.y),
                color,
                label,
                command,
            )
            for index, (color, label, command) in enumerate(specs)
        ]

    def click(self, point: Vector, shapes: list[Shape], caretaker: Caretaker) -> bool:
        """Run the button under the point, saving a snapshot first unless it is Undo.

        Returns whether a button was hit.
        """
        for button in self.buttons:
            if button.contains(point):
                if not isinstance(button.command, UndoCommand):
                    caretaker.save(Memento(shapes))
                button.execute(shapes)
                return True
        return False

    def is_over_button(self, point: Vector) -> bool:
        return any(button.contains(point) for button in self.buttons)