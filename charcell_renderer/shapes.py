#
# PROJECT: charcell-renderer
# MODULE: charcell_renderer/shapes.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""
2D shape variants.

Every shape carries its geometry, the Cell it is drawn with and a
`z_index` draw-order hint: higher values are drawn later, on top.
Coordinates are integer grid positions (x grows right, y grows down).
How each variant turns into cells lives in rasterizer.py.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .cell import Cell
from .errors import InvalidGeometry

Point2D = Tuple[int, int]


def _as_point(p) -> Point2D:
    return (int(p[0]), int(p[1]))


@dataclass
class Point:
    position: Point2D
    fill: Cell = Cell.SOLID
    z_index: float = 0

    def __post_init__(self):
        self.position = _as_point(self.position)
        self.fill = Cell.coerce(self.fill)


@dataclass
class Line:
    start: Point2D
    end: Point2D
    fill: Cell = Cell.SOLID
    z_index: float = 0

    def __post_init__(self):
        self.start = _as_point(self.start)
        self.end = _as_point(self.end)
        self.fill = Cell.coerce(self.fill)


@dataclass
class Polyline:
    """Chain of line segments through `points`; `closed` joins last to first."""
    points: Tuple[Point2D, ...]
    fill: Cell = Cell.SOLID
    closed: bool = False
    z_index: float = 0

    def __post_init__(self):
        self.points = tuple(_as_point(p) for p in self.points)
        if len(self.points) < 2:
            raise InvalidGeometry(f"Polyline needs at least 2 points, got {len(self.points)}")
        self.fill = Cell.coerce(self.fill)


@dataclass
class Polygon:
    vertices: Tuple[Point2D, ...]
    fill: Cell = Cell.SOLID
    filled: bool = True
    z_index: float = 0

    def __post_init__(self):
        self.vertices = tuple(_as_point(p) for p in self.vertices)
        if len(self.vertices) < 3:
            raise InvalidGeometry(f"Polygon needs at least 3 vertices, got {len(self.vertices)}")
        self.fill = Cell.coerce(self.fill)


@dataclass
class Rect:
    """Axis-aligned rectangle with its top-left corner at `position`."""
    position: Point2D
    size: Tuple[int, int]
    fill: Cell = Cell.SOLID
    filled: bool = True
    z_index: float = 0

    def __post_init__(self):
        self.position = _as_point(self.position)
        self.size = _as_point(self.size)
        if self.size[0] <= 0 or self.size[1] <= 0:
            raise InvalidGeometry(f"Rect size must be positive, got {self.size}")
        self.fill = Cell.coerce(self.fill)

    @property
    def corners(self) -> Tuple[Point2D, Point2D, Point2D, Point2D]:
        (x, y), (w, h) = self.position, self.size
        return ((x, y), (x + w - 1, y), (x + w - 1, y + h - 1), (x, y + h - 1))


@dataclass
class Text:
    """
    Block of text anchored at its top-left corner. Newlines start a new
    row; whitespace is transparent and leaves the canvas untouched.
    """
    position: Point2D
    content: str
    modifier: Optional[str] = None
    z_index: float = 0
    lines: Tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self):
        self.position = _as_point(self.position)
        self.lines = tuple(self.content.split('\n'))


SHAPE_TYPES = (Point, Line, Polyline, Polygon, Rect, Text)
