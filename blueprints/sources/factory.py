"""Data source factory.

Resolves the configured source variant once, at process configuration time.
Nothing above this layer branches on which variant is active.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from blueprints.sources.base import BlueprintSource
from blueprints.sources.fixture import FixtureBlueprintSource
from blueprints.sources.remote import RemoteBlueprintSource

logger = logging.getLogger(__name__)

SOURCE_KINDS = ("fixture", "remote")


def build_source(
    kind: str = "fixture",
    base_url: Optional[str] = None,
    timeout: float = 30.0,
    definitions_dir: Optional[Path] = None,
) -> Union[FixtureBlueprintSource, RemoteBlueprintSource]:
    """Build a data source of the given kind.

    Args:
        kind: 'fixture' or 'remote'
        base_url: Root URL of the blueprints service (remote only)
        timeout: Request timeout in seconds (remote only)
        definitions_dir: Seed directory (fixture only)

    Raises:
        ValueError: If kind is unknown or a remote source has no base_url
    """
    if kind == "fixture":
        return FixtureBlueprintSource(definitions_dir=definitions_dir)
    elif kind == "remote":
        if not base_url:
            raise ValueError(
                "Remote blueprint source requires BLUEPRINTS_API_URL to be set"
            )
        return RemoteBlueprintSource(base_url=base_url, timeout=timeout)
    else:
        raise ValueError(
            f"Unknown blueprint source: '{kind}'. Expected one of {list(SOURCE_KINDS)}."
        )


def source_from_env() -> BlueprintSource:
    """Build a data source from BLUEPRINTS_* environment variables."""
    definitions_dir = os.environ.get("BLUEPRINTS_DEFINITIONS_DIR")
    return build_source(
        kind=os.environ.get("BLUEPRINTS_SOURCE", "fixture").lower(),
        base_url=os.environ.get("BLUEPRINTS_API_URL"),
        timeout=float(os.environ.get("BLUEPRINTS_TIMEOUT", "30")),
        definitions_dir=Path(definitions_dir) if definitions_dir else None,
    )


# Singleton instance
_source: Optional[BlueprintSource] = None


def get_blueprint_source() -> BlueprintSource:
    """Get or create the process-wide blueprint source."""
    global _source
    if _source is None:
        _source = source_from_env()
        logger.info(f"Using {type(_source).__name__}")
    return _source


def reset_blueprint_source() -> None:
    """Forget the process-wide source so the next call re-reads the environment."""
    global _source
    _source = None
