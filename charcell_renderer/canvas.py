#
# PROJECT: charcell-renderer
# MODULE: charcell_renderer/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from typing import List, Optional

from .cell import Cell
from .errors import InvalidDimension


class Canvas:
    """
    Fixed-size grid of Cells, the only output surface of the pipeline.

    Writes outside the grid are silently dropped so shapes may hang over
    the edges. The canvas does no I/O: `render()` hands rows to whoever
    prints them.
    """
    __slots__ = ['width', 'height', 'background', 'cells']

    def __init__(self, width: int, height: int, background=' '):
        if width <= 0 or height <= 0:
            raise InvalidDimension(width, height)
        self.width, self.height = width, height
        self.background = Cell.coerce(background)
        self.cells = [[self.background] * width for _ in range(height)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def plot(self, x: int, y: int, char):
        if not self.in_bounds(x, y): return
        self.cells[y][x] = Cell.coerce(char)

    def cell_at(self, x: int, y: int) -> Optional[Cell]:
        """Return the cell at (x, y), or None when outside the grid."""
        if not self.in_bounds(x, y):
            return None
        return self.cells[y][x]

    def clear(self):
        """Reset every cell to the background."""
        bg = self.background
        for row in self.cells:
            row[:] = [bg] * self.width

    def render(self) -> List[str]:
        """Rows of characters, row 0 first, each exactly `width` long."""
        return [''.join(cell.char for cell in row) for row in self.cells]

    def __str__(self):
        return '\n'.join(self.render())
