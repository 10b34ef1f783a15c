"""Graphics module for the runner rendering pipeline."""

from trex.graphics.renderer import Palette, SceneRenderer
from trex.graphics.primitives import (
    blend_rect,
    draw_rect,
    fill,
    new_buffer,
)

__all__ = [
    # Renderer
    "Palette",
    "SceneRenderer",
    # Primitives
    "blend_rect",
    "draw_rect",
    "fill",
    "new_buffer",
]
