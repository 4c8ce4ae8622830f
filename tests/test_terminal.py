import curses
import logging

from charcell_renderer.demo import FACE_CHARS, load_mesh
from charcell_renderer.terminal import canvas_size, present


class FakeScreen:
    def __init__(self, rows, cols):
        self.rows, self.cols = rows, cols
        self.writes = []

    def getmaxyx(self):
        return self.rows, self.cols

    def addstr(self, y, x, text, attr=0):
        if y == self.rows - 1 and x + len(text) >= self.cols:
            raise curses.error("bottom-right corner")
        self.writes.append((y, x, text))


def test_present_truncates_to_window():
    screen = FakeScreen(3, 5)
    present(screen, ["abcdefg", "hijklmn", "opqrstu", "vwxyz"], top=1)
    assert screen.writes == [(1, 0, "abcd"), (2, 0, "hijk")]


def test_canvas_size_leaves_room_for_hud():
    assert canvas_size(FakeScreen(24, 80)) == (79, 23)
    assert canvas_size(FakeScreen(1, 1)) == (1, 1)


def test_load_mesh_defaults_to_cube():
    mesh = load_mesh(None, '#')
    assert len(mesh.faces) == 6
    assert [f.fill.char for f in mesh.faces] == list(FACE_CHARS)


def test_load_mesh_falls_back_with_warning(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="charcell_renderer.demo"):
        mesh = load_mesh(str(tmp_path / "missing.obj"), '#')
    assert len(mesh.vertices) == 8
    assert "using the demo cube" in caplog.text
