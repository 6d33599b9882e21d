"""Summary schemas - derived, display-oriented views of an author's blueprints."""

from pydantic import BaseModel, Field, computed_field


class BlueprintSummary(BaseModel):
    """Name and point count of one blueprint."""

    name: str
    point_count: int = Field(..., ge=0)


class AuthorView(BaseModel):
    """Summary of every blueprint an author owns.

    total_points is always derived from the summaries and cannot be set
    on its own.
    """

    author: str
    summaries: list[BlueprintSummary] = Field(default_factory=list)

    @computed_field
    @property
    def total_points(self) -> int:
        return sum(s.point_count for s in self.summaries)

    @property
    def is_empty(self) -> bool:
        return not self.summaries
