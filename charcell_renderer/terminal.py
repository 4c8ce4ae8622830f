#
# PROJECT: charcell-renderer
# MODULE: charcell_renderer/terminal.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
from typing import Sequence


def present(stdscr, lines: Sequence[str], top: int = 0, attr: int = 0):
    """
    Copy rendered rows onto a curses window starting at row `top`.

    Rows and columns that do not fit are cut off. Does NOT call
    stdscr.refresh(); the caller does that after any overlay drawing.
    """
    th, tw = stdscr.getmaxyx()
    for y, line in enumerate(lines[:max(0, th - top)]):
        row = line[:tw - 1]
        try:
            stdscr.addstr(top + y, 0, row, attr)
        except curses.error:
            # Writing the bottom-right cell moves the cursor off-screen
            pass


def canvas_size(stdscr, reserved_rows: int = 1):
    """Largest canvas (width, height) that fits the window below a HUD."""
    th, tw = stdscr.getmaxyx()
    return max(1, tw - 1), max(1, th - reserved_rows)
