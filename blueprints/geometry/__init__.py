"""Blueprint geometry model."""

from blueprints.geometry.schemas import Blueprint, Point, check_key_segment

__all__ = [
    "Blueprint",
    "Point",
    "check_key_segment",
]
