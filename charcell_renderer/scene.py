#
# PROJECT: charcell-renderer
# MODULE: charcell_renderer/scene.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from typing import Iterator, Optional, Tuple

from .mesh import OBJECT3D_TYPES
from .rasterizer import is_drawable
from .transform import Transform3D


class Scene:
    """
    Render targets for a frame, kept in insertion order.

    Each entry is a (drawable, placement) pair. `placement` is only
    meaningful for 3D objects: it lets one mesh appear several times, the
    effective transform being `placement * obj.transform`. 2D shapes are
    always stored with a placement of None.
    """

    def __init__(self):
        self.objects = []  # list of (drawable, Transform3D or None)

    def add(self, drawable, placement: Optional[Transform3D] = None):
        """Add a 2D shape or a 3D object (optionally at a placement)."""
        if isinstance(drawable, OBJECT3D_TYPES):
            self.objects.append((drawable, placement))
        elif is_drawable(drawable):
            if placement is not None:
                raise TypeError(f"{type(drawable).__name__} is 2D and cannot take a 3D placement")
            self.objects.append((drawable, None))
        else:
            raise TypeError(f"{type(drawable).__name__} is neither a 2D shape nor a 3D object")
        return drawable

    def extend(self, drawables):
        for d in drawables:
            self.add(d)

    def remove(self, drawable):
        """Remove every entry of `drawable`."""
        self.objects = [e for e in self.objects if e[0] is not drawable]

    def clear(self):
        """Remove all objects from the scene."""
        self.objects.clear()

    def __iter__(self) -> Iterator[Tuple[object, Optional[Transform3D]]]:
        return iter(self.objects)

    def __len__(self):
        return len(self.objects)
