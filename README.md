# shapedit

A small vector graphics editor built on pygame. It puts circles, rectangles
and triangles on a canvas. You can select, drag, group and ungroup them. You
can set their fill colour, outline colour and outline thickness. You can undo
changes, and you can save the drawing to a plain text file and load it back.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Running

```
shapedit [--input FILE] [--output FILE]
```

The command first reads figure descriptions from `--input` (default
`input.txt`). For each figure it writes the perimeter and area to `--output`
(default `output.txt`). If the input file does not exist, the output file is
still written, and it is empty. Lines that do not start with a known prefix
are ignored. Input lines look like this:

```
CIRCLE: C=100,100; R=50
RECTANGLE: P1=10,10; P2=60,40
TRIANGLE: P1=0,0; P2=30,0; P3=0,40
```

Each output line has the form `P = <perimeter>; S = <area>`. A rectangle is
measured from its width alone, as a square with that side.

After that, an 800×600 editor window titled "Graphics Editor" opens.

### Toolbar

| Button | Action |
| --- | --- |
| Circle, Rect, Tri | add a new shape at a fixed place |
| Fill G / Fill R / Fill Y | set the fill colour of the selected shapes |
| Out B / Out Bl / Out M | set the outline colour of the selected shapes |
| Th 0 / Th 3 / Th 5 | set the outline thickness of the selected shapes |
| Undo | restore the drawing as it was before the last change |
| Save | write the shapes to `out.txt` in the current directory |
| Load | replace the shapes with those in `out.txt` |

Every button except Undo saves a snapshot for undo before it runs. Style
changes on a group reach every shape inside it.

### Mouse and keyboard

- Click a shape to select the topmost shape under the pointer. Other shapes
  are deselected unless Left Shift is held.
- Drag with the left button to move the selected shapes. Each drag can be
  undone.
- Ctrl+G puts the selected shapes into one group. The new group is selected.
- Ctrl+U takes the last shape out of each selected group. A group that ends
  up empty is removed.

## Saved file format

Each shape is on one line. Numbers are given in this order: geometry, then
fill and outline colours as packed `0xRRGGBBAA` integers, then the outline
thickness.

```
Circle <radius> <x> <y> <fill> <outline> <thickness>
Rectangle <width> <height> <x> <y> <fill> <outline> <thickness>
Triangle <x1> <y1> <x2> <y2> <x3> <y3> <fill> <outline> <thickness>
```

A group is written as a line `{`, then its members one per line, then a
line `}`. A malformed shape line raises `shapedit.builders.ShapeFormatError`.

## Using it as a library

```python
from shapedit.geometry import Vector, GREEN
from shapedit.shapes import Circle, Group, Rectangle
from shapedit.visitors import FillColorVisitor
from shapedit.storage import TextSaveStrategy, ShapeLoader

shapes = [Circle(50, Vector(200, 200)), Group([Rectangle(Vector(40, 20), Vector(10, 10))])]
shapes[1].accept(FillColorVisitor(GREEN))
TextSaveStrategy().save("drawing.txt", shapes)
restored = ShapeLoader().load("drawing.txt")
```

Other modules:

- `shapedit.editor.Editor` handles selection, dragging, grouping and undo
  without a window. Use it with `shapedit.toolbar.Toolbar` and
  `shapedit.history.Caretaker`.
- `shapedit.commands` has the toolbar actions as `Command` objects.
- `shapedit.figures.load_shapes` and `shapedit.figures.save_results` read
  figure descriptions and write their measurements.
- `shapedit.measures` has `CircleDecorator`, `RectangleDecorator` and
  `TriangleDecorator`, which give `perimeter()`, `area()` and `describe()`.

## Limitations

- Shapes cannot be deleted, resized or reshaped in the editor. New shapes
  always appear at the same place.
- Save and Load always use `out.txt` in the current directory. If that file
  is missing when Load is pressed, the editor stops with an error.
- Undo history lasts only while the editor runs. There is no redo.