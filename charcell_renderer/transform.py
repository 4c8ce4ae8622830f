#
# PROJECT: charcell-renderer
# MODULE: charcell_renderer/transform.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from dataclasses import dataclass
from typing import Iterable, List

from .math_utils import Mat4, Vec3


@dataclass(frozen=True)
class Transform3D:
    """
    Position, rotation (radians about X, Y, Z) and scale of an object.

    A vertex is scaled first, then rotated about X, Y and Z in that order,
    then translated. The transform is a value: the matrix is rebuilt from
    the three components whenever it is needed.
    """
    translation: Vec3 = Vec3.ZERO
    rotation: Vec3 = Vec3.ZERO
    scale: Vec3 = Vec3.ONE

    def matrix(self) -> Mat4:
        s = self.scale
        return (Mat4.translation(*self.translation)
                @ Mat4.rotation(self.rotation)
                @ Mat4.scale(s.x, s.y, s.z))

    def apply(self, vertex: Vec3) -> Vec3:
        return self.matrix().mul_vec3(vertex)

    def apply_to(self, vertices: Iterable[Vec3]) -> List[Vec3]:
        mat = self.matrix()
        return [mat.mul_vec3(v) for v in vertices]

    def rotate(self, value: Vec3) -> Vec3:
        """Rotate a direction by this transform's rotation only."""
        return Mat4.rotation(self.rotation).mul_vec3(value)

    def with_translation(self, translation: Vec3) -> 'Transform3D':
        return Transform3D(translation, self.rotation, self.scale)

    def with_rotation(self, rotation: Vec3) -> 'Transform3D':
        return Transform3D(self.translation, rotation, self.scale)

    def __mul__(self, other: 'Transform3D') -> 'Transform3D':
        # Component-wise: offsets and angles add, scales multiply
        if not isinstance(other, Transform3D):
            return NotImplemented
        return Transform3D(
            self.translation + other.translation,
            self.rotation + other.rotation,
            self.scale.scaled(other.scale),
        )


Transform3D.IDENTITY = Transform3D()
