"""Renderer - turns a blueprint's ordered points into draw operations."""

from typing import Optional

from blueprints.geometry.schemas import Blueprint
from blueprints.rendering.schemas import (
    MARKER_RADIUS,
    BlueprintDrawing,
    DrawOp,
    LineTo,
    MarkAt,
    MoveTo,
    RenderStyle,
)


def to_draw_ops(blueprint: Blueprint, marker_radius: float = MARKER_RADIUS) -> list[DrawOp]:
    """Emit the path for a blueprint, then a marker on every point.

    Path ops come first (MoveTo the first point, LineTo each following
    point), and markers follow in a second pass over all points, so
    markers always sit on top of the path. No points means no ops.
    """
    points = blueprint.points
    if not points:
        return []

    first, rest = points[0], points[1:]
    ops: list[DrawOp] = [MoveTo(x=first.x, y=first.y)]
    ops.extend(LineTo(x=p.x, y=p.y) for p in rest)
    ops.extend(MarkAt(x=p.x, y=p.y, radius=marker_radius) for p in points)
    return ops


def render_blueprint(
    blueprint: Blueprint,
    style: Optional[RenderStyle] = None,
) -> BlueprintDrawing:
    """Bundle a blueprint's draw ops with the style to draw them in."""
    return BlueprintDrawing(
        author=blueprint.author,
        name=blueprint.name,
        style=style or RenderStyle(),
        ops=to_draw_ops(blueprint),
    )
