"""
Shared test fixtures for the blueprints test suite.

Local fixtures in individual test files override these (pytest convention).
"""

import pytest

from blueprints.geometry.schemas import Blueprint, Point
from blueprints.sources.errors import ServiceUnavailableError
from blueprints.sources.fixture import FixtureBlueprintSource


# ---------------------------------------------------------------------------
# Blueprints
# ---------------------------------------------------------------------------

@pytest.fixture
def house():
    """johnconnor/house - 4 points."""
    return Blueprint(
        author="johnconnor",
        name="house",
        points=[
            Point(x=150, y=120),
            Point(x=215, y=115),
            Point(x=340, y=240),
            Point(x=15, y=215),
        ],
    )


@pytest.fixture
def gear():
    """johnconnor/gear - 3 points."""
    return Blueprint(
        author="johnconnor",
        name="gear",
        points=[
            Point(x=340, y=240),
            Point(x=15, y=215),
            Point(x=45, y=225),
        ],
    )


@pytest.fixture
def blank():
    """A blueprint with no points."""
    return Blueprint(author="johnconnor", name="blank", points=[])


# ---------------------------------------------------------------------------
# Sources
# ---------------------------------------------------------------------------

@pytest.fixture
def seeded_source(house, gear):
    """Fixture source holding only johnconnor's house and gear."""
    return FixtureBlueprintSource(blueprints=[house, gear])


@pytest.fixture
def bundled_source():
    """Fixture source seeded from the bundled JSON definitions."""
    return FixtureBlueprintSource()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class FailingSource:
    """Source whose backing store is down; records every call."""

    def __init__(self):
        self.calls = []

    async def fetch_all(self):
        self.calls.append("fetch_all")
        raise ServiceUnavailableError("store down", status_code=503)

    async def fetch_by_author(self, author):
        self.calls.append(("fetch_by_author", author))
        raise ServiceUnavailableError("store down", status_code=503)

    async def fetch_by_author_and_name(self, author, name):
        self.calls.append(("fetch_by_author_and_name", author, name))
        raise ServiceUnavailableError("store down", status_code=503)

    async def create(self, blueprint):
        self.calls.append(("create", blueprint.key))
        raise ServiceUnavailableError("store down")

    async def update(self, author, name, blueprint):
        self.calls.append(("update", author, name))
        raise ServiceUnavailableError("store down")

    async def close(self):
        pass
