#
# PROJECT: charcell-renderer
# MODULE: charcell_renderer/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, NamedTuple

from .camera import Camera
from .canvas import Canvas
from .config import RenderConfig
from .mesh import OBJECT3D_TYPES
from .projection import project
from .rasterizer import rasterize
from .scene import Scene

logger = logging.getLogger(__name__)


class DrawCall(NamedTuple):
    key: float
    shape: object


def depth_key(depth: float) -> float:
    """
    Map view-space depth onto the z-index scale: farther is lower.

    A 2D shape with z_index 0 therefore lands in front of all 3D geometry,
    and one with z_index below -far_plane lands behind it.
    """
    return -depth


class Renderer:
    """
    Painter's-algorithm compositor.

    render(canvas, scene, camera) draws one frame:
      1. Project every 3D object into depth-tagged 2D shapes
      2. Give each 2D shape its z_index as draw key, each projected
         shape depth_key(depth)
      3. Stable-sort ascending by key, so the farthest primitive is drawn
         first and equal keys keep insertion order
      4. Rasterize in that order onto the cleared canvas

    There is no per-cell depth buffer; nearer primitives simply overwrite
    farther ones.
    """

    def __init__(self, config: RenderConfig = None):
        self.config = config or RenderConfig()

    def _project_entry(self, entry, camera: Camera):
        obj, placement = entry
        transform = placement * obj.transform if placement is not None else None
        return project(obj, camera, transform,
                       cull_backfaces=self.config.use_culling,
                       frustum_cull=self.config.use_frustum_culling)

    def collect(self, scene: Scene, camera: Camera) -> List[DrawCall]:
        """Build the sorted draw list for one frame without touching a canvas."""
        entries = list(scene)
        solids = [e for e in entries if isinstance(e[0], OBJECT3D_TYPES)]

        # Per-object projection is independent; results keep scene order
        workers = self.config.projection_workers
        if workers and len(solids) > 1:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                projected = list(pool.map(lambda e: self._project_entry(e, camera), solids))
        else:
            projected = [self._project_entry(e, camera) for e in solids]
        projected = iter(projected)

        calls = []
        for obj, _placement in entries:
            if isinstance(obj, OBJECT3D_TYPES):
                for depth, shape in next(projected):
                    calls.append(DrawCall(depth_key(depth), shape))
            else:
                calls.append(DrawCall(obj.z_index, obj))

        calls.sort(key=lambda c: c.key)
        return calls

    def draw(self, canvas: Canvas, calls: List[DrawCall]):
        bounds = (canvas.width, canvas.height)
        for call in calls:
            for x, y, cell in rasterize(call.shape, bounds):
                canvas.plot(x, y, cell)

    def render(self, canvas: Canvas, scene: Scene, camera: Camera) -> List[DrawCall]:
        """Clear the canvas, then draw the whole scene back to front."""
        calls = self.collect(scene, camera)
        canvas.clear()
        self.draw(canvas, calls)
        logger.debug("Rendered %d draw calls from %d scene objects", len(calls), len(scene))
        return calls
