#
# PROJECT: charcell-renderer
# MODULE: charcell_renderer/mesh.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""
3D object variants: Mesh (vertices + faces) and Line3D.

Faces list their vertex indices clockwise as seen from outside the mesh,
in the camera's frame (x right, y up, z forward). With that winding the
cross product of the first two edges points outward.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from .cell import Cell
from .errors import InvalidGeometry
from .math_utils import Vec3
from .transform import Transform3D

logger = logging.getLogger(__name__)


def _as_vec3(v) -> Vec3:
    return v if isinstance(v, Vec3) else Vec3(*v)


@dataclass
class Face:
    indices: Tuple[int, ...]
    fill: Cell = Cell.SOLID
    filled: bool = True

    def __post_init__(self):
        self.indices = tuple(int(i) for i in self.indices)
        if len(self.indices) < 3:
            raise InvalidGeometry(f"Face needs at least 3 vertices, got {len(self.indices)}")
        self.fill = Cell.coerce(self.fill)


class Mesh:
    """
    Vertices in object space plus faces that index into them.

    `transform` places the mesh in the world; the vertex list itself is
    never rewritten by the renderer.
    """

    def __init__(self, vertices: Sequence, faces: Sequence,
                 transform: Transform3D = Transform3D.IDENTITY):
        self.vertices: List[Vec3] = [_as_vec3(v) for v in vertices]
        self.faces: List[Face] = [f if isinstance(f, Face) else Face(f) for f in faces]
        self.transform = transform

        count = len(self.vertices)
        for face in self.faces:
            for idx in face.indices:
                if not 0 <= idx < count:
                    raise InvalidGeometry(
                        f"Face {face.indices} references vertex {idx}, mesh has {count}")

    def __repr__(self):
        return f"Mesh(vertices={len(self.vertices)}, faces={len(self.faces)})"

    def world_vertices(self, transform: Transform3D = None) -> List[Vec3]:
        return (transform or self.transform).apply_to(self.vertices)

    @classmethod
    def cube(cls, size: float = 2.0, fill=Cell.SOLID, filled: bool = True,
             transform: Transform3D = Transform3D.IDENTITY) -> 'Mesh':
        """Axis-aligned cube of edge `size` centred on the origin."""
        h = size / 2.0
        vertices = [
            (-h, -h, -h), ( h, -h, -h), ( h,  h, -h), (-h,  h, -h),
            (-h, -h,  h), ( h, -h,  h), ( h,  h,  h), (-h,  h,  h),
        ]
        faces = [
            [0, 3, 2, 1],  # front  (-z)
            [4, 5, 6, 7],  # back   (+z)
            [4, 7, 3, 0],  # left   (-x)
            [1, 2, 6, 5],  # right  (+x)
            [3, 7, 6, 2],  # top    (+y)
            [0, 1, 5, 4],  # bottom (-y)
        ]
        return cls(vertices, [Face(f, fill, filled) for f in faces], transform)

    @classmethod
    def from_obj(cls, filename, fill=Cell.SOLID, filled: bool = True,
                 transform: Transform3D = Transform3D.IDENTITY) -> 'Mesh':
        """
        Load `v` and `f` records from a Wavefront OBJ file.

        `f` entries may use the v/vt/vn forms and negative (relative)
        indices. Faces pointing at missing vertices are dropped with a
        warning. Raises InvalidGeometry if nothing usable was found;
        I/O errors propagate.
        """
        vertices, raw_faces = [], []
        with open(filename, 'r') as f:
            for lineno, line in enumerate(f, 1):
                if line.startswith('v '):
                    vertices.append([float(x) for x in line.split()[1:4]])
                elif line.startswith('f '):
                    # Handle v/vt/vn format by splitting by '/'
                    refs = [int(x.split('/')[0]) for x in line.split()[1:]]
                    # Negative indices count back from the vertices read so far
                    seen = len(vertices)
                    indices = [r - 1 if r > 0 else seen + r for r in refs]
                    raw_faces.append((lineno, refs, indices))
                elif line.strip() and not line.startswith('#'):
                    logger.debug("%s:%d: skipping %r", filename, lineno, line.split()[0])

        faces = []
        count = len(vertices)
        for lineno, refs, indices in raw_faces:
            if len(indices) < 3 or not all(0 <= i < count for i in indices):
                logger.warning("%s:%d: dropping face %s", filename, lineno, refs)
                continue
            faces.append(Face(indices, fill, filled))

        if not vertices or not faces:
            raise InvalidGeometry(f"{filename}: no vertices or faces found")
        logger.debug("Loaded %s: %d vertices, %d faces", filename, count, len(faces))
        return cls(vertices, faces, transform)


@dataclass
class Line3D:
    start: Vec3
    end: Vec3
    fill: Cell = Cell.SOLID
    transform: Transform3D = field(default=Transform3D.IDENTITY)

    def __post_init__(self):
        self.start = _as_vec3(self.start)
        self.end = _as_vec3(self.end)
        self.fill = Cell.coerce(self.fill)


OBJECT3D_TYPES = (Mesh, Line3D)
