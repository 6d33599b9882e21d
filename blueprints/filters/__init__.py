"""Blueprint read filters (subsampling, redundancy removal)."""

from blueprints.filters.filters import (
    BlueprintFilter,
    filter_from_env,
    get_filter,
    identity_filter,
    redundancy_filter,
    subsampling_filter,
)
from blueprints.filters.schemas import FilterMode

__all__ = [
    "BlueprintFilter",
    "FilterMode",
    "filter_from_env",
    "get_filter",
    "identity_filter",
    "redundancy_filter",
    "subsampling_filter",
]
