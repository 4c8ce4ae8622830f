#
# PROJECT: charcell-renderer
# MODULE: charcell_renderer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import os
from dataclasses import dataclass


@dataclass
class RenderConfig:
    """Configuration for the rendering pipeline."""
    background: str = ' '
    solid_char: str = '#'
    fov: float = 90.0
    near_clip: float = 0.1
    far_plane: float = 150.0
    cell_aspect: float = 1.0
    use_culling: bool = True
    use_frustum_culling: bool = True
    projection_workers: int = 0

    def __post_init__(self):
        if not 0 < self.fov < 180:
            raise ValueError(f"fov must be between 0 and 180 degrees, got {self.fov}")
        if self.near_clip <= 0:
            raise ValueError(f"near_clip must be positive, got {self.near_clip}")
        if self.far_plane <= self.near_clip:
            raise ValueError(f"far_plane ({self.far_plane}) must lie beyond near_clip ({self.near_clip})")
        if self.cell_aspect <= 0:
            raise ValueError(f"cell_aspect must be positive, got {self.cell_aspect}")
        if self.projection_workers < 0:
            raise ValueError(f"projection_workers cannot be negative, got {self.projection_workers}")

    @classmethod
    def detect_terminal(cls, **overrides) -> 'RenderConfig':
        """
        Guess sensible defaults for an interactive terminal.
        Checks TERM and LANG environment variables. Only the demo calls
        this; library code takes its config explicitly.
        """
        term = os.environ.get('TERM', '').lower()
        lang = os.environ.get('LANG', '').lower()

        is_linux_console = term == 'linux'
        supports_utf8 = 'utf-8' in lang or 'utf8' in lang

        settings = dict(
            # Linux console fonts often lack block elements
            solid_char='█' if supports_utf8 and not is_linux_console else '#',
            # Terminal cells are roughly twice as tall as they are wide
            cell_aspect=0.5,
        )
        settings.update(overrides)
        return cls(**settings)
