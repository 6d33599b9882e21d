"""Read filter schemas."""

from enum import Enum


class FilterMode(str, Enum):
    """How blueprint points are reduced before being served."""

    NONE = "none"  # Serve points unchanged
    SUBSAMPLING = "subsampling"  # Keep every other point, starting with the first
    REDUNDANCY = "redundancy"  # Drop consecutive duplicate points
