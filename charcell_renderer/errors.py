#
# PROJECT: charcell-renderer
# MODULE: charcell_renderer/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#


class RenderError(Exception):
    """Base class for all errors raised by the rendering pipeline."""


class InvalidDimension(RenderError, ValueError):
    """A canvas, camera or viewport was given a zero or negative size."""

    def __init__(self, width, height):
        super().__init__(f"Invalid dimensions {width}x{height}: both must be positive")
        self.width = width
        self.height = height


class InvalidGeometry(RenderError, ValueError):
    """A shape or mesh is degenerate (too few points, bad indices, ...)."""
