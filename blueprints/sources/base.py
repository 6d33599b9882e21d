"""Data source contract shared by the fixture and remote variants.

Callers hold a BlueprintSource and never inspect which variant backs it.
Every operation is a single awaited request/response exchange that either
returns a value or raises one of the errors in blueprints.sources.errors.
"""

from typing import Protocol, runtime_checkable

from blueprints.geometry.schemas import Blueprint, check_key_segment
from blueprints.sources.errors import BlueprintValidationError


@runtime_checkable
class BlueprintSource(Protocol):
    """Protocol for blueprint data source implementations."""

    async def fetch_all(self) -> list[Blueprint]: ...

    async def fetch_by_author(self, author: str) -> list[Blueprint]:
        """Raises BlueprintNotFoundError for an unknown author."""
        ...

    async def fetch_by_author_and_name(self, author: str, name: str) -> Blueprint:
        """Raises BlueprintNotFoundError if no such blueprint exists."""
        ...

    async def create(self, blueprint: Blueprint) -> Blueprint:
        """Raises BlueprintConflictError if (author, name) is taken."""
        ...

    async def update(self, author: str, name: str, blueprint: Blueprint) -> Blueprint:
        """Replace the record keyed by (author, name).

        Raises BlueprintNotFoundError if there is nothing to replace.
        """
        ...

    async def close(self) -> None: ...


def check_key(value: str, field: str) -> str:
    """Validate an author or name exactly as given."""
    try:
        return check_key_segment(value)
    except ValueError as e:
        raise BlueprintValidationError(f"{field} {e}") from e


def require_text(value: str, field: str) -> str:
    """Strip and validate a lookup key, raising before any source access."""
    if value is None:
        raise BlueprintValidationError(f"{field} must not be empty")
    return check_key(value.strip(), field)


def check_update_key(author: str, name: str, blueprint: Blueprint) -> None:
    """An update body must describe the record it replaces."""
    if blueprint.author != author or blueprint.name != name:
        raise BlueprintValidationError(
            f"Blueprint {blueprint.author}/{blueprint.name} does not match "
            f"update key {author}/{name}"
        )
