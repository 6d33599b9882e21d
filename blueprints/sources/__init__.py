"""Blueprint data sources.

Two interchangeable variants satisfy the BlueprintSource contract:
- FixtureBlueprintSource: in-memory store seeded from JSON definitions
- RemoteBlueprintSource: REST client for a blueprints service
"""

from blueprints.sources.base import BlueprintSource
from blueprints.sources.errors import (
    BlueprintConflictError,
    BlueprintError,
    BlueprintNotFoundError,
    BlueprintValidationError,
    ServiceUnavailableError,
)
from blueprints.sources.factory import build_source, get_blueprint_source
from blueprints.sources.fixture import FixtureBlueprintSource
from blueprints.sources.remote import RemoteBlueprintSource

__all__ = [
    "BlueprintConflictError",
    "BlueprintError",
    "BlueprintNotFoundError",
    "BlueprintSource",
    "BlueprintValidationError",
    "FixtureBlueprintSource",
    "RemoteBlueprintSource",
    "ServiceUnavailableError",
    "build_source",
    "get_blueprint_source",
]
