"""Blueprint read filters applied by the REST service."""

import logging
import os
from typing import Callable, Union

from blueprints.filters.schemas import FilterMode
from blueprints.geometry.schemas import Blueprint, Point

logger = logging.getLogger(__name__)

BlueprintFilter = Callable[[Blueprint], Blueprint]


def _with_points(blueprint: Blueprint, points: list[Point]) -> Blueprint:
    return Blueprint(author=blueprint.author, name=blueprint.name, points=points)


def identity_filter(blueprint: Blueprint) -> Blueprint:
    return blueprint


def subsampling_filter(blueprint: Blueprint) -> Blueprint:
    """Keep points at even indices (0, 2, 4, ...)."""
    if not blueprint.points:
        return blueprint
    return _with_points(blueprint, blueprint.points[::2])


def redundancy_filter(blueprint: Blueprint) -> Blueprint:
    """Drop every point equal to the point right before it."""
    if not blueprint.points:
        return blueprint
    kept = [blueprint.points[0]]
    for previous, current in zip(blueprint.points, blueprint.points[1:]):
        if current != previous:
            kept.append(current)
    return _with_points(blueprint, kept)


_FILTERS: dict[FilterMode, BlueprintFilter] = {
    FilterMode.NONE: identity_filter,
    FilterMode.SUBSAMPLING: subsampling_filter,
    FilterMode.REDUNDANCY: redundancy_filter,
}


def get_filter(mode: Union[FilterMode, str]) -> BlueprintFilter:
    """Resolve a filter mode to its filter function.

    Raises:
        ValueError: If mode is not a known FilterMode value
    """
    return _FILTERS[FilterMode(mode)]


def filter_from_env() -> BlueprintFilter:
    """Resolve the filter named by BLUEPRINTS_FILTER (default: none)."""
    mode = os.environ.get("BLUEPRINTS_FILTER", FilterMode.NONE.value).lower()
    logger.info(f"Blueprint read filter: {mode}")
    return get_filter(mode)
