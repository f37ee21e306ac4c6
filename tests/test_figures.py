import pytest

from shapedit.builders import ShapeFormatError
from shapedit.figures import (
    create_circle,
    create_rectangle,
    create_triangle,
    load_shapes,
    save_results,
    shape_factory,
)
from shapedit.geometry import Vector
from shapedit.measures import CircleDecorator, RectangleDecorator, TriangleDecorator


def test_factory_keys():
    assert set(shape_factory()) == {"CIRCLE:", "RECTANGLE:", "TRIANGLE:"}


def test_factory_maps_to_creators():
    factory = shape_factory()
    assert factory["CIRCLE:"] is create_circle
    assert factory["RECTANGLE:"] is create_rectangle
    assert factory["TRIANGLE:"] is create_triangle


def test_create_circle():
    measured = create_circle(" C=100, 120; R=50")
    assert isinstance(measured, CircleDecorator)
    assert measured.shape.radius == 50
    assert measured.shape.origin == Vector(100, 120)


def test_create_rectangle():
    measured = create_rectangle(" P1=10, 20; P2=30, 60")
    assert isinstance(measured, RectangleDecorator)
    assert measured.shape.origin == Vector(10, 20)
    assert measured.shape.size == Vector(30 - 10, 60 - 20)


def test_create_triangle():
    measured = create_triangle(" P1=1, 2; P2=3, 4; P3=5, -6")
    assert isinstance(measured, TriangleDecorator)
    assert measured.shape.points == (Vector(1, 2), Vector(3, 4), Vector(5, -6))


@pytest.mark.parametrize(
    "creator, text",
    [
        (create_circle, " C=abc"),
        (create_rectangle, " P1=10, 20;"),
        (create_triangle, " P1=1, 2; P2=3, 4"),
    ],
)
def test_malformed_lines_raise(creator, text):
    with pytest.raises(ShapeFormatError):
        creator(text)


def test_load_shapes(tmp_path):
    source = tmp_path / "input.txt"
    source.write_text(
        "CIRCLE: C=100, 100; R=50\n"
        "\n"
        "HEXAGON: whatever\n"
        "RECTANGLE: P1=10, 20; P2=30, 40\n"
        "TRIANGLE: P1=0, 0; P2=3, 0; P3=0, 4\n",
        encoding="utf-8",
    )
    shapes = load_shapes(str(source))
    assert [type(s) for s in shapes] == [
        CircleDecorator,
        RectangleDecorator,
        TriangleDecorator,
    ]
    assert shapes[0].shape.radius == 50
    assert shapes[2].describe() == "P = 12; S = 6"


def test_load_missing_file_is_empty(tmp_path):
    assert load_shapes(str(tmp_path / "absent.txt")) == []


def test_save_results_writes_one_line_per_shape(tmp_path):
    shapes = [
        create_circle(" C=0, 0; R=3"),
        create_rectangle(" P1=0, 0; P2=5, 5"),
        create_triangle(" P1=0, 0; P2=3, 0; P3=0, 4"),
    ]
    target = tmp_path / "output.txt"
    save_results(shapes, str(target))
    lines = target.read_text(encoding="utf-8").splitlines()
    assert lines == [shape.describe() for shape in shapes]


def test_load_then_save_round_trip(tmp_path):
    source = tmp_path / "input.txt"
    source.write_text("TRIANGLE: P1=0, 0; P2=3, 0; P3=0, 4\n", encoding="utf-8")
    target = tmp_path / "output.txt"
    save_results(load_shapes(str(source)), str(target))
    assert target.read_text(encoding="utf-8") == "P = 12; S = 6\n"