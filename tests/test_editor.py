import pytest

from shapedit.editor import Editor
from shapedit.history import Caretaker
from shapedit.shapes import Circle, Group, Rectangle
from shapedit.geometry import Vector
from shapedit.toolbar import Toolbar


def centre(button):
    b = button.bounds()
    return Vector(b.left + b.width / 2, b.top + b.height / 2)


@pytest.fixture
def editor():
    toolbar = Toolbar()
    ed = Editor(toolbar, Caretaker())
    toolbar.setup_buttons(ed.undo)
    return ed


def two_rects():
    return Rectangle(Vector(100, 100), Vector(100, 100)), Rectangle(Vector(100, 100), Vector(150, 150))


def test_select_picks_topmost_and_clears_others(editor):
    low, high = two_rects()
    low.selected = True
    editor.shapes.extend([low, high])
    assert editor.select_at(Vector(175, 175), additive=False)
    assert high.selected and not low.selected


def test_additive_select_keeps_existing_selection(editor):
    low, high = two_rects()
    low.selected = True
    editor.shapes.extend([low, high])
    editor.select_at(Vector(175, 175), additive=True)
    assert high.selected and low.selected


def test_click_on_empty_canvas_clears_selection(editor):
    low, high = two_rects()
    low.selected = True
    editor.shapes.extend([low, high])
    assert editor.select_at(Vector(500, 500))
    assert not low.selected and not high.selected
    assert not editor.select_at(Vector(500, 500))


def test_press_on_button_runs_command_and_skips_selection(editor):
    add_circle = editor.toolbar.buttons[0]
    assert not editor.press(centre(add_circle))
    assert len(editor.shapes) == 1 and isinstance(editor.shapes[0], Circle)
    assert not editor.shapes[0].selected


def test_press_undo_button_reverts_last_command(editor):
    editor.press(centre(editor.toolbar.buttons[0]))
    undo_button = next(b for b in editor.toolbar.buttons if b.label == "Undo")
    editor.press(centre(undo_button))
    assert editor.shapes == []
    assert not editor.caretaker.can_undo()


def test_press_on_canvas_selects_shape(editor):
    low, high = two_rects()
    editor.shapes.extend([low, high])
    assert editor.press(Vector(120, 120))
    assert low.selected and not high.selected


def test_drag_moves_selected_by_mouse_delta(editor):
    moving, still = two_rects()
    moving.selected = True
    editor.shapes.extend([moving, still])
    start_moving, start_still = moving.position(), still.position()
    editor.drag(Vector(300, 300), True)
    editor.drag(Vector(310, 305), True)
    assert moving.position() - start_moving == Vector(10, 5)
    assert still.position() == start_still
    assert editor.moving


def test_drag_saves_one_snapshot_per_gesture_and_undo_restores(editor):
    shape, _ = two_rects()
    shape.selected = True
    editor.shapes.append(shape)
    start = shape.position()
    editor.drag(Vector(300, 300), True)
    editor.drag(Vector(320, 320), True)
    editor.drag(Vector(340, 340), True)
    editor.drag(Vector(340, 340), False)
    assert not editor.moving
    editor.undo()
    assert not editor.caretaker.can_undo()
    assert editor.shapes[0].position() == start


def test_drag_over_toolbar_stops_moving(editor):
    shape, _ = two_rects()
    shape.selected = True
    editor.shapes.append(shape)
    editor.drag(Vector(300, 300), True)
    before = shape.position()
    editor.drag(centre(editor.toolbar.buttons[0]), True)
    assert not editor.moving
    assert shape.position() == before


def test_undo_with_empty_history_keeps_drawing(editor):
    shape, _ = two_rects()
    editor.shapes.append(shape)
    editor.undo()
    assert editor.shapes == [shape]


def test_group_selected_collects_and_deselects(editor):
    a, b = two_rects()
    c = Circle(10, Vector(400, 400))
    a.selected = b.selected = True
    editor.shapes.extend([a, c, b])
    editor.group_selected()
    assert editor.shapes[0] is c
    group = editor.shapes[1]
    assert isinstance(group, Group) and group.selected
    assert group.shapes[0] is a and group.shapes[1] is b
    assert not a.selected and not b.selected
    assert group.frame == group.bounds()


def test_group_with_nothing_selected_adds_nothing_but_saves(editor):
    a, b = two_rects()
    editor.shapes.extend([a, b])
    editor.group_selected()
    assert editor.shapes == [a, b]
    assert editor.caretaker.can_undo()


def test_group_then_undo_restores_separate_shapes(editor):
    a, b = two_rects()
    a.selected = b.selected = True
    editor.shapes.extend([a, b])
    editor.group_selected()
    editor.undo()
    assert [s.serialize() for s in editor.shapes] == [a.serialize(), b.serialize()]


def test_ungroup_takes_out_last_member_then_removes_empty_group(editor):
    a, b = two_rects()
    a.selected = b.selected = True
    editor.shapes.extend([a, b])
    editor.group_selected()
    group = editor.shapes[0]
    editor.ungroup_selected()
    assert editor.shapes[0] is group and editor.shapes[1] is b
    assert group.shapes == [a]
    editor.ungroup_selected()
    assert editor.shapes[0] is b and editor.shapes[1] is a
    assert len(editor.shapes) == 2


def test_ungroup_ignores_unselected_group(editor):
    a, b = two_rects()
    group = Group([a, b])
    group.selected = False
    editor.shapes.append(group)
    editor.ungroup_selected()
    assert editor.shapes == [group]
    assert group.shapes == [a, b]