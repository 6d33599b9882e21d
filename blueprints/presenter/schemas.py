"""Presenter schemas - render-ready payloads for a display layer.

- OpenBlueprintAction: token a row carries to open its blueprint
- BlueprintRow: one table row built from an already-computed summary
- AuthorPage: an AuthorView together with its rows
"""

from typing import Literal

from pydantic import BaseModel, Field

from blueprints.summaries.schemas import AuthorView


class OpenBlueprintAction(BaseModel):
    """Action attached to a row; carries identifiers, never display text."""

    action: Literal["open_blueprint"] = "open_blueprint"
    author: str
    name: str


class BlueprintRow(BaseModel):
    """Display row descriptor for one blueprint."""

    name: str
    point_count: int = Field(..., ge=0)
    open: OpenBlueprintAction


class AuthorPage(BaseModel):
    """Everything a display layer needs to list an author's blueprints."""

    view: AuthorView
    rows: list[BlueprintRow] = Field(default_factory=list)
    message: str = Field(
        default="",
        description="Heading text, e.g. \"johnconnor's blueprints:\"",
    )
