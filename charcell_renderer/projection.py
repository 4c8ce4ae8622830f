#
# PROJECT: charcell-renderer
# MODULE: charcell_renderer/projection.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""
Projection of 3D objects into depth-tagged 2D shapes.

Near-plane policy: a face (or line) is drawn only if every one of its
vertices survives culling; faces crossing the near plane are dropped
whole rather than clipped.
"""

from functools import singledispatch
from typing import List, Sequence, Tuple

from .camera import Camera, ProjectedPoint
from .math_utils import Vec3
from .mesh import Line3D, Mesh
from .shapes import Line, Polygon

# (depth, shape): depth is the mean view-space Z of the primitive's vertices
DepthShape = Tuple[float, object]


def is_back_face(view_vertices: Sequence) -> bool:
    """
    True when the face normal (Newell's method over every edge, in view
    space) points away from the eye at the view-space origin.

    Summing over the whole loop keeps the normal right when some of the
    leading vertices are collinear. A face with no area counts as a back
    face.
    """
    count = len(view_vertices)
    normal = Vec3.ZERO
    for i in range(count):
        normal = normal + view_vertices[i].cross(view_vertices[(i + 1) % count])
    return normal.dot(view_vertices[0]) >= 0


def off_screen(points: Sequence[ProjectedPoint], width: int, height: int) -> bool:
    """True when all points lie past the same viewport edge."""
    return (all(p.x < -0.5 for p in points)
            or all(p.x > width - 0.5 for p in points)
            or all(p.y < -0.5 for p in points)
            or all(p.y > height - 0.5 for p in points))


@singledispatch
def project(obj, camera: Camera, transform=None, cull_backfaces: bool = True,
            frustum_cull: bool = True) -> List[DepthShape]:
    """
    Project a 3D object through `camera`.

    `transform` overrides the object's own transform (used for scene
    placements). Returns (depth, shape) pairs in the object's own order.
    """
    raise TypeError(f"Don't know how to project {type(obj).__name__}")


@project.register(Mesh)
def _(obj: Mesh, camera: Camera, transform=None, cull_backfaces=True, frustum_cull=True):
    view = camera.view_matrix()
    view_v = [view.mul_vec3(v) for v in obj.world_vertices(transform)]
    proj_v = [camera.project_view(v) for v in view_v]

    out = []
    for face in obj.faces:
        pts = [proj_v[i] for i in face.indices]
        if any(p is None for p in pts):
            continue
        if cull_backfaces and is_back_face([view_v[i] for i in face.indices]):
            continue
        if frustum_cull and off_screen(pts, camera.width, camera.height):
            continue

        depth = sum(p.depth for p in pts) / len(pts)
        out.append((depth, Polygon([p.cell() for p in pts], face.fill, filled=face.filled)))
    return out


@project.register(Line3D)
def _(obj: Line3D, camera: Camera, transform=None, cull_backfaces=True, frustum_cull=True):
    start, end = (transform or obj.transform).apply_to([obj.start, obj.end])
    a = camera.project_point(start)
    b = camera.project_point(end)
    if a is None or b is None:
        return []
    if frustum_cull and off_screen((a, b), camera.width, camera.height):
        return []
    return [((a.depth + b.depth) / 2.0, Line(a.cell(), b.cell(), obj.fill))]
