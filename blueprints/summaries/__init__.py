"""Author summaries (per-blueprint point counts and totals)."""

from blueprints.summaries.aggregator import empty_view, summarize
from blueprints.summaries.schemas import AuthorView, BlueprintSummary

__all__ = [
    "AuthorView",
    "BlueprintSummary",
    "empty_view",
    "summarize",
]
