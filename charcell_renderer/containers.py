#
# PROJECT: charcell-renderer
# MODULE: charcell_renderer/containers.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""
Drawables that hold other drawables. Each container is itself drawable,
so containers can nest.
"""

from typing import Iterable, List, Tuple

from .cell import Cell
from .rasterizer import CellWrite, rasterize
from .shapes import Point2D


class PixelContainer:
    """A free-form list of (x, y, cell) pixels drawn as-is."""

    def __init__(self, pixels: Iterable[CellWrite] = (), z_index: float = 0):
        self.pixels: List[CellWrite] = [(x, y, Cell.coerce(c)) for x, y, c in pixels]
        self.z_index = z_index

    def plot(self, position: Point2D, fill):
        self.pixels.append((int(position[0]), int(position[1]), Cell.coerce(fill)))

    def append_points(self, points: Iterable[Point2D], fill):
        """Add every point with the same fill."""
        fill = Cell.coerce(fill)
        self.pixels.extend((int(x), int(y), fill) for x, y in points)

    def blit(self, drawable):
        """Rasterize another drawable into this container."""
        self.pixels.extend(rasterize(drawable))

    def __len__(self):
        return len(self.pixels)


class VisibilityToggle:
    """Draws `element` only while `visible` is true."""

    def __init__(self, element, visible: bool = True):
        self.element = element
        self.visible = visible

    @property
    def z_index(self):
        return self.element.z_index

    def toggle(self):
        self.visible = not self.visible


class CollisionContainer:
    """
    Groups drawables to test whether something overlaps them. Drawing the
    container draws all of its elements in order.
    """

    def __init__(self, elements: Iterable = (), z_index: float = 0):
        self.elements = list(elements)
        self.z_index = z_index

    def push(self, element):
        self.elements.append(element)

    def occupied(self) -> set:
        return {(x, y) for x, y, _ in rasterize(self)}

    def overlaps(self, element) -> bool:
        return self.will_overlap(element, (0, 0))

    def will_overlap(self, element, offset: Tuple[int, int]) -> bool:
        """True if `element`, shifted by `offset`, would share a cell with us."""
        taken = self.occupied()
        dx, dy = offset
        return any((x + dx, y + dy) in taken for x, y, _ in rasterize(element))


@rasterize.register(PixelContainer)
def _(shape: PixelContainer, bounds=None):
    return iter(shape.pixels)


@rasterize.register(VisibilityToggle)
def _(shape: VisibilityToggle, bounds=None):
    if shape.visible:
        yield from rasterize(shape.element, bounds)


@rasterize.register(CollisionContainer)
def _(shape: CollisionContainer, bounds=None):
    for element in shape.elements:
        yield from rasterize(element, bounds)
