"""Geometry schemas for blueprints.

A blueprint is a named, authored polyline: an ordered list of 2D points
whose order defines the draw path.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

RESERVED_KEYS = frozenset({".", ".."})


def check_key_segment(value: str) -> str:
    """Validate an author or name so it maps onto exactly one URL path segment.

    Raises:
        ValueError: If the value is empty, contains '/', or is a dot segment
    """
    if not value:
        raise ValueError("must not be empty")
    if "/" in value:
        raise ValueError("must not contain '/'")
    if value in RESERVED_KEYS:
        raise ValueError(f"'{value}' is reserved")
    return value


class Point(BaseModel):
    """Immutable 2D point with finite coordinates."""

    model_config = ConfigDict(frozen=True)

    # strict keeps booleans and numeric strings out; ints are still accepted
    x: float = Field(
        ..., strict=True, allow_inf_nan=False, description="Horizontal coordinate"
    )
    y: float = Field(
        ..., strict=True, allow_inf_nan=False, description="Vertical coordinate"
    )


class Blueprint(BaseModel):
    """A named polyline diagram owned by an author.

    The pair (author, name) identifies a blueprint within a data source.
    Points are insertion-ordered; an empty list is a valid (blank) blueprint.
    """

    author: str = Field(
        ...,
        min_length=1,
        description="Owning author identity",
        examples=["johnconnor"],
    )
    name: str = Field(
        ...,
        min_length=1,
        description="Blueprint name, unique per author",
        examples=["house"],
    )
    points: list[Point] = Field(
        default_factory=list,
        description="Ordered points; order is the draw path",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "author": "johnconnor",
                "name": "house",
                "points": [
                    {"x": 150, "y": 120},
                    {"x": 215, "y": 115},
                    {"x": 340, "y": 240},
                    {"x": 15, "y": 215},
                ],
            }
        }
    )

    @property
    def key(self) -> tuple[str, str]:
        """Identity of this blueprint within a data source."""
        return (self.author, self.name)

    @field_validator("author", "name")
    @classmethod
    def _single_segment(cls, value: str) -> str:
        return check_key_segment(value)
