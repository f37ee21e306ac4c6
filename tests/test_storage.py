import pytest

from shapedit.builders import ShapeFormatError
from shapedit.geometry import GREEN, Vector
from shapedit.shapes import Circle, Group, Rectangle, Triangle
from shapedit.storage import ShapeLoader, TextSaveStrategy, create_builder


def _drawing():
    circle = Circle(50, Vector(200, 200))
    circle.fill_color = GREEN
    rectangle = Rectangle(Vector(100, 100), Vector(100, 100))
    triangle = Triangle(Vector(100, 200), Vector(200, 200), Vector(150, 100))
    group = Group([Circle(5, Vector(1, 2)), Rectangle(Vector(3, 4), Vector(5, 6))])
    return [circle, rectangle, triangle, group]


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "out.txt"
    shapes = _drawing()
    TextSaveStrategy().save(str(path), shapes)
    loaded = ShapeLoader().load(str(path))
    assert [s.serialize() for s in loaded] == [s.serialize() for s in shapes]
    assert loaded[3].is_group()
    assert loaded[3].selected is True


def test_saved_group_layout(tmp_path):
    path = tmp_path / "out.txt"
    member = Circle(5, Vector(1, 2))
    TextSaveStrategy().save(str(path), [Group([member])])
    assert path.read_text().splitlines() == ["{", member.serialize(), "}", ""]


def test_unknown_lines_are_skipped(tmp_path):
    path = tmp_path / "in.txt"
    circle = Circle(7, Vector(3, 4))
    path.write_text("Hexagon 1 2 3\n\n" + circle.serialize() + "\n")
    loaded = ShapeLoader().load(str(path))
    assert [s.serialize() for s in loaded] == [circle.serialize()]


def test_empty_and_unclosed_groups(tmp_path):
    path = tmp_path / "in.txt"
    circle = Circle(7, Vector(3, 4))
    path.write_text("{\n}\n{\n" + circle.serialize() + "\n")
    empty, unclosed = ShapeLoader().load(str(path))
    assert empty.is_empty()
    assert [s.serialize() for s in unclosed.shapes] == [circle.serialize()]


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ShapeLoader().load(str(tmp_path / "absent.txt"))


def test_malformed_line_raises(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("Circle 1 2\n")
    with pytest.raises(ShapeFormatError):
        ShapeLoader().load(str(path))


@pytest.mark.parametrize(
    "shape",
    [
        Circle(4, Vector(1, 1)),
        Rectangle(Vector(2, 3), Vector(4, 5)),
        Triangle(Vector(0, 0), Vector(4, 0), Vector(2, 3)),
    ],
)
def test_create_builder_for_known_kinds(shape):
    text = shape.serialize()
    builder = create_builder(text.split()[0])
    builder.build(text)
    assert builder.result().serialize() == text


def test_create_builder_for_unknown_kind():
    assert create_builder("Hexagon") is None