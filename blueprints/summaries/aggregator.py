"""Aggregator - reduces an author's blueprints to an AuthorView."""

from typing import Sequence

from blueprints.geometry.schemas import Blueprint
from blueprints.summaries.schemas import AuthorView, BlueprintSummary


def summarize(author: str, blueprints: Sequence[Blueprint]) -> AuthorView:
    """Summarize blueprints in input order.

    An empty sequence yields an empty view with total_points == 0; that is
    the normal shape for an author without blueprints, not an error.
    """
    return AuthorView(
        author=author,
        summaries=[
            BlueprintSummary(name=bp.name, point_count=len(bp.points))
            for bp in blueprints
        ],
    )


def empty_view(author: str) -> AuthorView:
    """View for an author the data source does not know."""
    return summarize(author, [])
