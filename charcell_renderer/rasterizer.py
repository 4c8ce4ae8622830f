#
# PROJECT: charcell-renderer
# MODULE: charcell_renderer/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
from functools import singledispatch
from typing import Iterator, Optional, Sequence, Tuple

from .canvas import Canvas
from .cell import Cell
from .shapes import Line, Point, Point2D, Polygon, Polyline, Rect, Text

# (x, y, cell) triple produced by every rasterizer
CellWrite = Tuple[int, int, Cell]
# (width, height) of the target grid, used to skip work off-canvas
Bounds = Tuple[int, int]


def _step_range(v0: int, step: int, lo: int, hi: int) -> Tuple[int, int]:
    """Range of k for which v0 + step * k stays within [lo, hi]."""
    if step > 0:
        return lo - v0, hi - v0
    return v0 - hi, v0 - lo


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def line_points(start: Point2D, end: Point2D,
                bounds: Optional[Bounds] = None) -> Iterator[Point2D]:
    """
    Bresenham-style line from `start` to `end`, both endpoints included.

    Steps one cell at a time along the longer axis; the other coordinate
    is the exact position on the segment, rounded half away from `start`,
    using integer arithmetic only. Each cell on the path is yielded
    exactly once and consecutive cells are 8-connected.

    With `bounds` only the steps that land on the (width, height) grid
    are walked, so the cost is capped by the grid size however far the
    endpoints lie off it. The cells are the same ones the unclipped line
    would produce.
    """
    x0, y0 = start
    x1, y1 = end
    x_major = abs(x1 - x0) >= abs(y1 - y0)
    if x_major:
        a0, a1, b0, b1 = x0, x1, y0, y1
    else:
        a0, a1, b0, b1 = y0, y1, x0, x1
    major = abs(a1 - a0)
    minor = abs(b1 - b0)
    sa = 1 if a1 >= a0 else -1
    sb = 1 if b1 >= b0 else -1

    k_lo, k_hi = 0, major
    if bounds:
        a_max, b_max = ((bounds[0] - 1, bounds[1] - 1) if x_major
                        else (bounds[1] - 1, bounds[0] - 1))
        lo, hi = _step_range(a0, sa, 0, a_max)
        k_lo, k_hi = max(k_lo, lo), min(k_hi, hi)

        # Minor offset at step k is (2*k*minor + major) // (2*major);
        # invert that to find the steps whose offset stays on the grid
        o_lo, o_hi = _step_range(b0, sb, 0, b_max)
        if minor == 0:
            if o_lo > 0 or o_hi < 0:
                return
        else:
            k_lo = max(k_lo, _ceil_div(2 * major * o_lo - major, 2 * minor))
            k_hi = min(k_hi, _ceil_div(2 * major * (o_hi + 1) - major, 2 * minor) - 1)

    for k in range(k_lo, k_hi + 1):
        a = a0 + sa * k
        b = b0 + sb * ((2 * k * minor + major) // (2 * major)) if major else b0
        yield (a, b) if x_major else (b, a)


def outline_points(vertices: Sequence[Point2D], closed: bool = True,
                   bounds: Optional[Bounds] = None) -> Iterator[Point2D]:
    """Cells on the edges joining consecutive vertices, without repeats."""
    seen = set()
    count = len(vertices)
    segments = count if closed else count - 1
    for i in range(segments):
        for p in line_points(vertices[i], vertices[(i + 1) % count], bounds):
            if p not in seen:
                seen.add(p)
                yield p


def _cross(o: Point2D, a: Point2D, b: Point2D) -> int:
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def is_collinear(vertices: Sequence[Point2D]) -> bool:
    """True when every vertex lies on one line (the polygon has no area)."""
    v0 = vertices[0]
    other = next((v for v in vertices if v != v0), None)
    if other is None:
        return True
    return all(_cross(v0, other, v) == 0 for v in vertices)


def on_edge(p: Point2D, vertices: Sequence[Point2D]) -> bool:
    """True when cell centre `p` lies exactly on one of the polygon's edges."""
    count = len(vertices)
    for i in range(count):
        a, b = vertices[i], vertices[(i + 1) % count]
        if (_cross(a, b, p) == 0
                and min(a[0], b[0]) <= p[0] <= max(a[0], b[0])
                and min(a[1], b[1]) <= p[1] <= max(a[1], b[1])):
            return True
    return False


def scanline_points(vertices: Sequence[Point2D],
                    bounds: Optional[Bounds] = None) -> Iterator[Point2D]:
    """
    Interior cells of a polygon using scanline fill with the even-odd rule.

    For every row the x positions where edges cross the row are sorted and
    cells between each pair of crossings are filled. Edges count on the
    half-open range [y_min, y_max) so a shared vertex is crossed once.
    Cells on the bottom row or on horizontal edges are not produced here.
    """
    edges = []
    count = len(vertices)
    for i in range(count):
        (x0, y0), (x1, y1) = vertices[i], vertices[(i + 1) % count]
        if y0 == y1:
            continue
        if y0 > y1:
            x0, y0, x1, y1 = x1, y1, x0, y0
        edges.append((y0, y1, x0, (x1 - x0) / (y1 - y0)))

    if not edges:
        return

    y_start = min(e[0] for e in edges)
    y_end = max(e[1] for e in edges)
    if bounds:
        y_start = max(y_start, 0)
        y_end = min(y_end, bounds[1])

    for y in range(y_start, y_end):
        crossings = sorted(x0 + (y - ey0) * slope
                           for ey0, ey1, x0, slope in edges if ey0 <= y < ey1)
        for left, right in zip(crossings[0::2], crossings[1::2]):
            sx, ex = math.ceil(left), math.floor(right)
            if bounds:
                sx, ex = max(sx, 0), min(ex, bounds[0] - 1)
            for x in range(sx, ex + 1):
                yield x, y


def rect_points(position: Point2D, size: Tuple[int, int], filled: bool = True,
                bounds: Optional[Bounds] = None) -> Iterator[Point2D]:
    """Cells of an axis-aligned rectangle without going through scanline fill."""
    (x, y), (w, h) = position, size
    x_end, y_end = x + w - 1, y + h - 1

    if not filled:
        corners = ((x, y), (x_end, y), (x_end, y_end), (x, y_end))
        yield from outline_points(corners, bounds=bounds)
        return

    sx, sy, ex, ey = x, y, x_end, y_end
    if bounds:
        sx, sy = max(sx, 0), max(sy, 0)
        ex, ey = min(ex, bounds[0] - 1), min(ey, bounds[1] - 1)
    for row in range(sy, ey + 1):
        for col in range(sx, ex + 1):
            yield col, row


# ── Per-variant dispatch ────────────────────────────────────────────────

@singledispatch
def rasterize(shape, bounds: Optional[Bounds] = None) -> Iterator[CellWrite]:
    """
    Turn a drawable into (x, y, cell) writes.

    `bounds` is an optional (width, height); when given, lines and fills
    skip rows and columns that cannot land on the canvas. Points and text
    may still fall outside it and are clipped by the canvas.
    """
    raise TypeError(f"Don't know how to rasterize {type(shape).__name__}")


@rasterize.register(Point)
def _(shape: Point, bounds=None):
    x, y = shape.position
    yield x, y, shape.fill


@rasterize.register(Line)
def _(shape: Line, bounds=None):
    fill = shape.fill
    for x, y in line_points(shape.start, shape.end, bounds):
        yield x, y, fill


@rasterize.register(Polyline)
def _(shape: Polyline, bounds=None):
    fill = shape.fill
    for x, y in outline_points(shape.points, closed=shape.closed, bounds=bounds):
        yield x, y, fill


@rasterize.register(Polygon)
def _(shape: Polygon, bounds=None):
    fill = shape.fill
    vertices = shape.vertices
    if not shape.filled or is_collinear(vertices):
        for x, y in outline_points(vertices, bounds=bounds):
            yield x, y, fill
        return

    seen = set()
    for p in scanline_points(vertices, bounds):
        seen.add(p)
        yield p[0], p[1], fill
    # Bottom rows and horizontal edges; stepped outline cells that only
    # approximate a sloped edge would stick out of the shape
    for p in outline_points(vertices, bounds=bounds):
        if p not in seen and on_edge(p, vertices):
            yield p[0], p[1], fill


@rasterize.register(Rect)
def _(shape: Rect, bounds=None):
    fill = shape.fill
    for x, y in rect_points(shape.position, shape.size, shape.filled, bounds):
        yield x, y, fill


@rasterize.register(Text)
def _(shape: Text, bounds=None):
    ox, oy = shape.position
    for dy, line in enumerate(shape.lines):
        for dx, char in enumerate(line):
            if char.isspace():
                continue
            yield ox + dx, oy + dy, Cell(char, shape.modifier)


def is_drawable(obj) -> bool:
    """True if `rasterize` has an implementation for obj's type."""
    return rasterize.dispatch(type(obj)) is not rasterize.dispatch(object)


def draw(canvas: Canvas, shape):
    """Rasterize one shape straight onto the canvas."""
    for x, y, cell in rasterize(shape, (canvas.width, canvas.height)):
        canvas.plot(x, y, cell)
