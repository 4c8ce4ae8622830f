#
# PROJECT: charcell-renderer
# MODULE: charcell_renderer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging

from .errors import RenderError, InvalidDimension, InvalidGeometry
from .math_utils import Vec3, Mat4
from .transform import Transform3D
from .config import RenderConfig
from .cell import Cell
from .canvas import Canvas
from .shapes import Point, Line, Polyline, Polygon, Rect, Text
from .rasterizer import rasterize, draw, line_points
from .containers import PixelContainer, VisibilityToggle, CollisionContainer
from .mesh import Face, Mesh, Line3D
from .camera import Camera, ProjectedPoint
from .projection import project
from .scene import Scene
from .renderer import Renderer, DrawCall
from .viewport import Viewport

logging.getLogger(__name__).addHandler(logging.NullHandler())
