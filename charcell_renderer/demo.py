#
# PROJECT: charcell-renderer
# MODULE: charcell_renderer/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
import logging
import random
import time

from .config import RenderConfig
from .errors import RenderError
from .math_utils import Vec3
from .mesh import Line3D, Mesh
from .shapes import Rect, Text
from .terminal import canvas_size, present
from .transform import Transform3D
from .viewport import Viewport

logger = logging.getLogger(__name__)

FACE_CHARS = '#%@&=+'
HELP = "arrows:look  +/-:move  [/]:fov  c:cull  space:add  q:quit"


def load_mesh(path, solid_char):
    """Load an OBJ model, falling back to the demo cube if it is unusable."""
    if path:
        try:
            return Mesh.from_obj(path, fill=solid_char)
        except (OSError, RenderError, ValueError) as e:
            logger.warning("Could not load '%s' (%s), using the demo cube", path, e)
    cube = Mesh.cube(2.0)
    # One character per face so orientation stays readable
    for face, char in zip(cube.faces, FACE_CHARS):
        face.fill = face.fill.with_char(char)
    return cube


class DemoApp:
    """
    Interactive demo: a spinning mesh over a backdrop, with a HUD line.
    """

    def __init__(self, stdscr, args):
        self.stdscr = stdscr
        self.running = True

        # ── Curses setup ────────────────────────────────────────────────
        curses.curs_set(0)
        stdscr.nodelay(True)

        # ── RenderConfig from terminal detection + CLI overrides ────────
        config = RenderConfig.detect_terminal(
            fov=args.fov,
            use_culling=not args.no_cull,
            projection_workers=args.workers,
        )
        if args.ascii:
            config.solid_char = '#'
        self.config = config

        width, height = canvas_size(stdscr)
        self.viewport = Viewport(width, height, config)
        self.viewport.camera.position = Vec3(0.0, 1.5, -6.0)
        self.viewport.camera.look_at(Vec3.ZERO)

        self.mesh = load_mesh(args.model, config.solid_char)
        self.placements = [Transform3D.IDENTITY]
        self.spin = Vec3.ZERO

        self.frame_count = 0
        self.fps = 0
        self.last_fps_time = time.time()

    # ────────────────────────────────────────────────────────────────────
    # Input
    # ────────────────────────────────────────────────────────────────────
    def handle_input(self):
        try:
            key = self.stdscr.getch()
        except curses.error:
            key = -1

        if key == -1:
            return

        camera = self.viewport.camera

        if key == ord('q'):
            self.running = False
        elif key == curses.KEY_UP:
            camera.rotate(-0.1, 0.0)
        elif key == curses.KEY_DOWN:
            camera.rotate(0.1, 0.0)
        elif key == curses.KEY_RIGHT:
            camera.rotate(0.0, 0.1)
        elif key == curses.KEY_LEFT:
            camera.rotate(0.0, -0.1)
        elif key in (ord('='), ord('+')):
            camera.move(camera.forward * 0.5)
        elif key == ord('-'):
            camera.move(camera.forward * -0.5)
        elif key == ord('['):
            camera.adjust_fov(-5)
        elif key == ord(']'):
            camera.adjust_fov(5)
        elif key == ord('c'):
            self.config.use_culling = not self.config.use_culling
        elif key == ord(' '):
            offset = Vec3(random.uniform(-8, 8), random.uniform(-3, 3), random.uniform(2, 20))
            self.placements.append(Transform3D(translation=offset))
        elif key == curses.KEY_RESIZE:
            self.viewport.resize(*canvas_size(self.stdscr))

    # ────────────────────────────────────────────────────────────────────
    # Frame
    # ────────────────────────────────────────────────────────────────────
    def build_frame(self, ms):
        vp = self.viewport
        vp.clear()

        # Backdrop sits behind every 3D primitive
        vp.add(Rect((0, vp.height * 2 // 3), (vp.width, vp.height - vp.height * 2 // 3),
                    fill='.', z_index=-1e9))
        vp.add(Line3D(Vec3(-6, -1.5, 0), Vec3(6, -1.5, 0), fill='_'))
        vp.add(Text((1, vp.height - 1), HELP, z_index=1e9))

        self.mesh.transform = self.mesh.transform.with_rotation(self.spin)
        for placement in self.placements:
            vp.add(self.mesh, placement)

        hdr = (f" OBJ:{len(self.placements)}"
               f" | V:{len(self.mesh.vertices)}"
               f" F:{len(self.mesh.faces)}"
               f" | FPS:{self.fps}"
               f" | {ms:.1f}ms"
               f" | FOV:{vp.camera.fov:.0f}"
               f" | {'CULL' if self.config.use_culling else 'ALL'} ")
        return hdr

    def run(self):
        ms = 0.0
        while self.running:
            start_time = time.time()

            self.handle_input()
            self.spin = Vec3(self.spin.x + 0.013, self.spin.y + 0.021, 0.0)

            hdr = self.build_frame(ms)
            lines = self.viewport.render()

            self.stdscr.erase()
            present(self.stdscr, lines, top=1)

            th, tw = self.stdscr.getmaxyx()
            try:
                self.stdscr.addstr(0, 0, hdr.center(tw - 1, '=')[:tw - 1], curses.A_BOLD)
            except curses.error:
                pass
            self.stdscr.refresh()

            self.frame_count += 1
            now = time.time()
            if now - self.last_fps_time >= 1.0:
                self.fps = self.frame_count
                self.frame_count = 0
                self.last_fps_time = now
            ms = (now - start_time) * 1000
            time.sleep(max(0.0, 1 / 30 - (now - start_time)))


def main(stdscr, args):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, args)
    app.run()
