"""Error taxonomy raised across the data source boundary.

Data sources are the only place where raw outcomes (missing dict keys,
HTTP status codes, transport failures) are translated into these errors.
"""

from typing import Optional


class BlueprintError(Exception):
    """Base class for blueprint lookup and storage errors."""


class BlueprintNotFoundError(BlueprintError):
    """The requested author, or author + blueprint name, does not exist."""

    def __init__(self, author: str, name: Optional[str] = None):
        self.author = author
        self.name = name
        if name is None:
            message = f"No blueprints found for author: {author}"
        else:
            message = f"Blueprint not found: {author}/{name}"
        super().__init__(message)


class BlueprintConflictError(BlueprintError):
    """A blueprint with the same (author, name) already exists."""

    def __init__(self, author: str, name: str):
        self.author = author
        self.name = name
        super().__init__(f"Blueprint already exists: {author}/{name}")


class ServiceUnavailableError(BlueprintError):
    """The backing store failed for reasons unrelated to the requested key."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class BlueprintValidationError(BlueprintError, ValueError):
    """Malformed input, rejected before any data source access."""
