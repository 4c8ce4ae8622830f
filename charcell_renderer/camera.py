#
# PROJECT: charcell-renderer
# MODULE: charcell_renderer/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
from typing import NamedTuple, Optional, Tuple

from .errors import InvalidDimension
from .math_utils import Mat4, Vec3


class ProjectedPoint(NamedTuple):
    """Viewport position (fractional cells) plus view-space depth."""
    x: float
    y: float
    depth: float

    def cell(self) -> Tuple[int, int]:
        """Nearest grid cell, rounding halves up."""
        return (int(math.floor(self.x + 0.5)), int(math.floor(self.y + 0.5)))


class Camera:
    """
    Perspective camera.

    The camera sits at `position` looking down its local +Z axis, with +X
    to the right and +Y up. `rotation` holds pitch, yaw and roll in
    radians (about X, Y and Z), applied in that order. The camera projects
    objects but never owns them.
    """
    __slots__ = ('position', 'rotation', 'fov', 'near', 'far',
                 'width', 'height', 'cell_aspect')

    def __init__(self, width: int, height: int, position: Vec3 = Vec3.ZERO,
                 rotation: Vec3 = Vec3.ZERO, fov: float = 90.0,
                 near: float = 0.1, far: float = 150.0, cell_aspect: float = 1.0):
        if width <= 0 or height <= 0:
            raise InvalidDimension(width, height)
        self.width = width
        self.height = height
        self.position = position
        self.rotation = rotation
        self.fov = fov            # Horizontal field of view (degrees)
        self.near = near
        self.far = far
        self.cell_aspect = cell_aspect

    @classmethod
    def from_config(cls, width: int, height: int, config, **kwargs) -> 'Camera':
        return cls(width, height, fov=config.fov, near=config.near_clip,
                   far=config.far_plane, cell_aspect=config.cell_aspect, **kwargs)

    # ── Projection ──────────────────────────────────────────────────────

    @property
    def focal_length(self) -> float:
        return (self.width / 2.0) / math.tan(math.radians(self.fov) / 2.0)

    def view_matrix(self) -> Mat4:
        """World-to-view transform: undo the translation, then the rotation."""
        p = self.position
        return Mat4.rotation(self.rotation).transposed() @ Mat4.translation(-p.x, -p.y, -p.z)

    def to_view(self, point: Vec3, view: Mat4 = None) -> Vec3:
        return (view or self.view_matrix()).mul_vec3(point)

    def project_view(self, v: Vec3) -> Optional[ProjectedPoint]:
        """
        Perspective-divide a view-space point. Returns None when the point
        is on or in front of the near plane, or beyond the far plane.
        """
        if v.z <= self.near or v.z > self.far:
            return None
        f = self.focal_length
        x = (self.width - 1) / 2.0 + v.x * f / v.z
        y = (self.height - 1) / 2.0 - v.y * f * self.cell_aspect / v.z
        return ProjectedPoint(x, y, v.z)

    def project_point(self, point: Vec3) -> Optional[ProjectedPoint]:
        """Project one world-space point; None if it is culled."""
        return self.project_view(self.to_view(point))

    # ── Movement ────────────────────────────────────────────────────────

    @property
    def forward(self) -> Vec3:
        return Mat4.rotation(self.rotation).mul_vec3(Vec3(0, 0, 1))

    def look_at(self, target: Vec3):
        """Aim the camera at `target`, dropping any roll."""
        d = target - self.position
        yaw = math.atan2(d.x, d.z)
        pitch = -math.atan2(d.y, math.hypot(d.x, d.z))
        self.rotation = Vec3(pitch, yaw, 0.0)

    def move(self, delta: Vec3):
        self.position = self.position + delta

    def rotate(self, dpitch: float, dyaw: float):
        """Adjust orientation by delta (radians)."""
        r = self.rotation
        self.rotation = Vec3(r.x + dpitch, r.y + dyaw, r.z)

    def adjust_fov(self, delta: float):
        """Adjust field of view by delta degrees, clamped to [10, 170]."""
        self.fov = max(10, min(170, self.fov + delta))

    def resize(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise InvalidDimension(width, height)
        self.width = width
        self.height = height
