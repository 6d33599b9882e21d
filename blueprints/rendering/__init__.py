"""Blueprint rendering into surface-independent draw operations."""

from blueprints.rendering.renderer import render_blueprint, to_draw_ops
from blueprints.rendering.schemas import (
    MARKER_RADIUS,
    BlueprintDrawing,
    DrawOp,
    LineTo,
    MarkAt,
    MoveTo,
    RenderStyle,
)

__all__ = [
    "MARKER_RADIUS",
    "BlueprintDrawing",
    "DrawOp",
    "LineTo",
    "MarkAt",
    "MoveTo",
    "RenderStyle",
    "render_blueprint",
    "to_draw_ops",
]
