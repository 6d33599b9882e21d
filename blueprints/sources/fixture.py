"""Fixture source - serves blueprints from an in-memory store.

The store is seeded from JSON files (one list of blueprints per file) found
in blueprints/sources/definitions/, or from an explicit list of
blueprints. It is the deterministic variant used for local development,
tests, and as the backing store of the REST service.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, Optional

from blueprints.geometry.schemas import Blueprint
from blueprints.sources.base import check_update_key
from blueprints.sources.errors import BlueprintConflictError, BlueprintNotFoundError

logger = logging.getLogger(__name__)


class FixtureBlueprintSource:
    """In-memory blueprint store keyed by (author, name).

    Records are stored and returned as deep copies, so nothing a caller
    does to a returned Blueprint changes the stored one. Insertion order is
    preserved, which keeps per-author listings stable.
    """

    def __init__(
        self,
        definitions_dir: Optional[Path] = None,
        blueprints: Optional[Iterable[Blueprint]] = None,
    ):
        """Initialize with a seed directory, or with explicit blueprints."""
        if definitions_dir is None:
            definitions_dir = Path(__file__).parent / "definitions"
        self.definitions_dir = Path(definitions_dir)
        self._blueprints: dict[tuple[str, str], Blueprint] = {}
        self._loaded = False

        if blueprints is not None:
            for blueprint in blueprints:
                self._seed(blueprint)
            self._loaded = True

    def load(self) -> None:
        """Load all seed blueprints from JSON files."""
        if self._loaded:
            return

        if not self.definitions_dir.exists():
            logger.warning(f"Definitions directory not found: {self.definitions_dir}")
            self._loaded = True
            return

        for json_file in sorted(self.definitions_dir.glob("*.json")):
            try:
                with open(json_file, "r") as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    data = [data]
                for item in data:
                    self._seed(Blueprint.model_validate(item))
                logger.debug(f"Loaded blueprints from {json_file.name}")
            except Exception as e:
                logger.error(f"Failed to load blueprints from {json_file}: {e}")

        self._loaded = True
        logger.info(f"Loaded {len(self._blueprints)} fixture blueprints")

    def _seed(self, blueprint: Blueprint) -> None:
        if blueprint.key in self._blueprints:
            logger.warning(
                f"Duplicate fixture blueprint skipped: {blueprint.author}/{blueprint.name}"
            )
            return
        self._blueprints[blueprint.key] = blueprint.model_copy(deep=True)

    def count(self) -> int:
        """Get total number of stored blueprints."""
        self.load()
        return len(self._blueprints)

    def list_authors(self) -> list[str]:
        """List authors in first-seen order."""
        self.load()
        return list(dict.fromkeys(author for author, _ in self._blueprints))

    async def fetch_all(self) -> list[Blueprint]:
        self.load()
        return [bp.model_copy(deep=True) for bp in self._blueprints.values()]

    async def fetch_by_author(self, author: str) -> list[Blueprint]:
        self.load()
        found = [
            bp.model_copy(deep=True)
            for bp in self._blueprints.values()
            if bp.author == author
        ]
        if not found:
            raise BlueprintNotFoundError(author)
        return found

    async def fetch_by_author_and_name(self, author: str, name: str) -> Blueprint:
        self.load()
        blueprint = self._blueprints.get((author, name))
        if blueprint is None:
            raise BlueprintNotFoundError(author, name)
        return blueprint.model_copy(deep=True)

    async def create(self, blueprint: Blueprint) -> Blueprint:
        self.load()
        if blueprint.key in self._blueprints:
            raise BlueprintConflictError(blueprint.author, blueprint.name)
        self._blueprints[blueprint.key] = blueprint.model_copy(deep=True)
        logger.info(
            f"Created blueprint {blueprint.author}/{blueprint.name} "
            f"({len(blueprint.points)} points)"
        )
        return blueprint.model_copy(deep=True)

    async def update(self, author: str, name: str, blueprint: Blueprint) -> Blueprint:
        check_update_key(author, name, blueprint)
        self.load()
        if (author, name) not in self._blueprints:
            raise BlueprintNotFoundError(author, name)
        self._blueprints[(author, name)] = blueprint.model_copy(deep=True)
        logger.info(
            f"Updated blueprint {author}/{name} ({len(blueprint.points)} points)"
        )
        return blueprint.model_copy(deep=True)

    async def close(self) -> None:
        """Nothing to release for the in-memory store."""
