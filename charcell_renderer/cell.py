#
# PROJECT: charcell-renderer
# MODULE: charcell_renderer/cell.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class Cell:
    """
    One character-sized unit of output.

    `char` is the single printable character shown in the grid.
    `modifier` is an optional display attribute (colour name, style, ...)
    that the pipeline carries along untouched; turning it into terminal
    escape codes is the terminal writer's job.
    """
    char: str
    modifier: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.char, str) or len(self.char) != 1:
            raise ValueError(f"Cell needs exactly one character, got {self.char!r}")

    def with_char(self, char: str) -> 'Cell':
        return replace(self, char=char)

    def with_modifier(self, modifier: Optional[str]) -> 'Cell':
        return replace(self, modifier=modifier)

    @classmethod
    def coerce(cls, value) -> 'Cell':
        """Accept either a Cell or a one-character string."""
        if isinstance(value, Cell):
            return value
        return cls(value)

    def __str__(self):
        return self.char


Cell.SOLID = Cell('*')
Cell.BACKGROUND = Cell('.')
Cell.EMPTY = Cell(' ')
Cell.VOID = Cell('-')
