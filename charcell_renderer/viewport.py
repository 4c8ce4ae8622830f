#
# PROJECT: charcell-renderer
# MODULE: charcell_renderer/viewport.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from typing import List, Optional

from .camera import Camera
from .canvas import Canvas
from .config import RenderConfig
from .errors import InvalidDimension
from .renderer import DrawCall, Renderer
from .scene import Scene
from .transform import Transform3D


class Viewport:
    """
    One render target: a Canvas, the Camera looking into it and the Scene
    of things to draw this frame.

    Typical frame loop:

        vp = Viewport(80, 24)
        vp.add(Mesh.cube(), Transform3D(Vec3(0, 0, 6)))
        for line in vp.render():
            print(line)
        vp.clear()
    """

    def __init__(self, width: int, height: int, config: RenderConfig = None,
                 camera: Camera = None):
        if width <= 0 or height <= 0:
            raise InvalidDimension(width, height)
        self.config = config or RenderConfig()
        self.canvas = Canvas(width, height, self.config.background)
        self.camera = camera or Camera.from_config(width, height, self.config)
        self.camera.resize(width, height)
        self.scene = Scene()
        self.renderer = Renderer(self.config)
        self.last_calls: List[DrawCall] = []

    @property
    def width(self) -> int:
        return self.canvas.width

    @property
    def height(self) -> int:
        return self.canvas.height

    def add(self, drawable, placement: Optional[Transform3D] = None):
        return self.scene.add(drawable, placement)

    def extend(self, drawables):
        self.scene.extend(drawables)

    def clear(self):
        """Drop this frame's render targets; the canvas keeps its last frame."""
        self.scene.clear()

    def render(self) -> List[str]:
        """Project, sort and rasterize the scene; return the canvas rows."""
        self.last_calls = self.renderer.render(self.canvas, self.scene, self.camera)
        return self.canvas.render()

    def resize(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise InvalidDimension(width, height)
        self.canvas = Canvas(width, height, self.config.background)
        self.camera.resize(width, height)
