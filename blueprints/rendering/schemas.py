"""Draw operation schemas.

Draw operations describe how to render a blueprint independently of any
drawing surface. A surface (canvas, SVG, plotter) maps each op to its own
primitive: MoveTo starts the path, LineTo extends it, MarkAt places a
filled circle marker.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

MARKER_RADIUS = 3.0


class MoveTo(BaseModel):
    model_config = ConfigDict(frozen=True)

    op: Literal["move_to"] = "move_to"
    x: float
    y: float


class LineTo(BaseModel):
    model_config = ConfigDict(frozen=True)

    op: Literal["line_to"] = "line_to"
    x: float
    y: float


class MarkAt(BaseModel):
    model_config = ConfigDict(frozen=True)

    op: Literal["mark_at"] = "mark_at"
    x: float
    y: float
    radius: float = Field(default=MARKER_RADIUS, gt=0)


DrawOp = Annotated[Union[MoveTo, LineTo, MarkAt], Field(discriminator="op")]


class RenderStyle(BaseModel):
    """Stroke and marker styling for a drawing surface."""

    stroke_color: str = Field(default="#333", description="Path stroke color")
    line_width: float = Field(default=2.0, gt=0)
    line_cap: str = Field(default="round")
    line_join: str = Field(default="round")
    marker_color: str = Field(default="#666", description="Marker fill color")


class BlueprintDrawing(BaseModel):
    """Everything a drawing surface needs to render one blueprint."""

    author: str
    name: str
    style: RenderStyle = Field(default_factory=RenderStyle)
    ops: list[DrawOp] = Field(default_factory=list)
