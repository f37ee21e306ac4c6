"""The editor window: drawing and the event loop."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

import pygame

from .editor import Editor
from .figures import load_shapes, save_results
from .geometry import MAGENTA, WHITE, Bounds, Color, Vector
from .history import Caretaker
from .shapes import Circle, Group, Rectangle, Shape, ShapeVisitor, Triangle
from .toolbar import LABEL_INSET, Toolbar

WINDOW_SIZE = (800, 600)
WINDOW_TITLE = "Graphics Editor"
FRAME_THICKNESS = 2
LABEL_SIZE = 16
FRAMES_PER_SECOND = 60
INPUT_FILE_NAME = "input.txt"
OUTPUT_FILE_NAME = "output.txt"


def _rgba(color: Color) -> pygame.Color:
    return pygame.Color(color.r, color.g, color.b, color.a)


def _rect(left: float, top: float, width: float, height: float) -> pygame.Rect:
    return pygame.Rect(round(left), round(top), round(width), round(height))


class _Painter(ShapeVisitor):
    """Draws shapes onto a surface, with a frame around selected ones."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface

    def _frame(self, bounds: Bounds) -> None:
        t = FRAME_THICKNESS
        outer = _rect(bounds.left - t, bounds.top - t, bounds.width + 2 * t, bounds.height + 2 * t)
        pygame.draw.rect(self.surface, _rgba(MAGENTA), outer, width=t)

    def visit_circle(self, circle: Circle) -> None:
        r = circle.radius
        centre = (circle.origin.x + r, circle.origin.y + r)
        t = circle.outline_thickness
        if t > 0 and circle.outline_color.a:
            pygame.draw.circle(self.surface, _rgba(circle.outline_color), centre, r + t)
        if circle.fill_color.a:
            pygame.draw.circle(self.surface, _rgba(circle.fill_color), centre, r)
        if circle.selected:
            self._frame(circle.frame)

    def visit_rectangle(self, rectangle: Rectangle) -> None:
        x, y = rectangle.origin.x, rectangle.origin.y
        w, h = rectangle.size.x, rectangle.size.y
        t = rectangle.outline_thickness
        if t > 0 and rectangle.outline_color.a:
            outer = _rect(x - t, y - t, w + 2 * t, h + 2 * t)
            pygame.draw.rect(self.surface, _rgba(rectangle.outline_color), outer)
        if rectangle.fill_color.a:
            pygame.draw.rect(self.surface, _rgba(rectangle.fill_color), _rect(x, y, w, h))
        if rectangle.selected:
            self._frame(rectangle.frame)

    def visit_triangle(self, triangle: Triangle) -> None:
        origin = triangle.origin
        points = [(origin.x + p.x, origin.y + p.y) for p in triangle.points]
        if triangle.fill_color.a:
            pygame.draw.polygon(self.surface, _rgba(triangle.fill_color), points)
        t = triangle.outline_thickness
        if t > 0 and triangle.outline_color.a:
            width = max(1, round(t))
            pygame.draw.polygon(self.surface, _rgba(triangle.outline_color), points, width)
        if triangle.selected:
            self._frame(triangle.frame)

    def visit_group(self, group: Group) -> None:
        for member in group.shapes:
            member.accept(self)
        if group.selected:
            self._frame(group.frame)


def draw_shape(surface: pygame.Surface, shape: Shape) -> None:
    """Draw one shape, and its selection frame if it is selected."""
    shape.accept(_Painter(surface))


def draw_toolbar(surface: pygame.Surface, toolbar: Toolbar, font: pygame.font.Font | None) -> None:
    """Draw every button; labels are drawn only when a font is given."""
    for button in toolbar.buttons:
        b = button.bounds()
        pygame.draw.rect(surface, _rgba(button.color), _rect(b.left, b.top, b.width, b.height))
        if font is not None:
            text = font.render(button.label, True, pygame.Color(0, 0, 0))
            position = button.position + LABEL_INSET
            surface.blit(text, (round(position.x), round(position.y)))


class Application:
    """The window that shows the toolbar and the drawing and feeds events to the editor."""

    def __init__(self, editor: Editor) -> None:
        self.editor = editor

    def run(self) -> None:
        """Open the window and process events until it is closed."""
        editor = self.editor
        if not editor.toolbar.buttons:
            editor.toolbar.setup_buttons(editor.undo)
        pygame.init()
        try:
            screen = pygame.display.set_mode(WINDOW_SIZE)
            pygame.display.set_caption(WINDOW_TITLE)
            font = pygame.font.Font(None, LABEL_SIZE)
            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        additive = bool(pygame.key.get_pressed()[pygame.K_LSHIFT])
                        editor.press(Vector(*event.pos), additive)
                    elif event.type == pygame.KEYDOWN and event.mod & pygame.KMOD_CTRL:
                        if event.key == pygame.K_g:
                            editor.group_selected()
                        elif event.key == pygame.K_u:
                            editor.ungroup_selected()
                editor.drag(Vector(*pygame.mouse.get_pos()), pygame.mouse.get_pressed()[0])
                screen.fill(_rgba(WHITE))
                draw_toolbar(screen, editor.toolbar, font)
                for shape in editor.shapes:
                    draw_shape(screen, shape)
                pygame.display.flip()
                clock.tick(FRAMES_PER_SECOND)
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Write measurements of the input figures, then open the editor."""
    parser = argparse.ArgumentParser(prog="shapedit", description=WINDOW_TITLE)
    parser.add_argument("--input", default=INPUT_FILE_NAME, help="figure descriptions to measure")
    parser.add_argument("--output", default=OUTPUT_FILE_NAME, help="where to write the measurements")
    args = parser.parse_args(argv)

    save_results(load_shapes(args.input), args.output)

    toolbar = Toolbar()
    editor = Editor(toolbar, Caretaker())
    toolbar.setup_buttons(editor.undo)
    Application(editor).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())