"""Remote source - serves blueprints from a blueprints REST service.

Each operation maps to exactly one HTTP call under the /blueprints base path:

    GET  /blueprints                  -> all blueprints
    GET  /blueprints/{author}         -> blueprints of one author
    GET  /blueprints/{author}/{name}  -> one blueprint
    POST /blueprints                  -> create
    PUT  /blueprints/{author}/{name}  -> update

Status codes are translated here and nowhere else: 404 is NotFound, 409 on
create is Conflict, and every other non-2xx status (or, for create, any
status but 200/201), transport error, or undecodable 2xx body is
ServiceUnavailable. No retries are attempted. Keys that cannot stand as a
single path segment are rejected before a request is sent.
"""

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter

from blueprints.geometry.schemas import Blueprint
from blueprints.sources.base import check_key, check_update_key
from blueprints.sources.errors import (
    BlueprintConflictError,
    BlueprintNotFoundError,
    ServiceUnavailableError,
)

logger = logging.getLogger(__name__)

BASE_PATH = "/blueprints"

_blueprint = TypeAdapter(Blueprint)
_blueprint_list = TypeAdapter(list[Blueprint])


def _path(author: str, name: Optional[str] = None) -> str:
    """Build a request path with each key validated and percent-encoded.

    Raises:
        BlueprintValidationError: If a key cannot stand as one path segment
    """
    segments = [check_key(author, "author")]
    if name is not None:
        segments.append(check_key(name, "name"))
    return "/".join([BASE_PATH, *(quote(s, safe="") for s in segments)])


class RemoteBlueprintSource:
    """Blueprint source backed by a remote REST service.

    Uses a single httpx.AsyncClient for the lifetime of the source; call
    close() (or use it as an async context manager) to release it.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={"Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )
        logger.info(f"Remote blueprint source enabled for {base_url}")

    async def __aenter__(self) -> "RemoteBlueprintSource":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def _send(
        self,
        method: str,
        path: str,
        payload: Optional[dict[str, Any]] = None,
    ) -> httpx.Response:
        try:
            response = await self._client.request(method, path, json=payload)
        except httpx.HTTPError as e:
            logger.error(f"Blueprint service HTTP error during {method} {path}: {e}")
            raise ServiceUnavailableError(f"Blueprint service unreachable: {e}") from e
        logger.debug(f"{method} {path} -> {response.status_code}")
        return response

    @staticmethod
    def _unavailable(response: httpx.Response) -> ServiceUnavailableError:
        body = response.text[:500] if response.text else "no response body"
        logger.error(
            f"Blueprint service error: {response.status_code} - {body}"
        )
        return ServiceUnavailableError(
            f"Blueprint service error: {response.status_code}",
            status_code=response.status_code,
        )

    @staticmethod
    def _decode(response: httpx.Response, adapter: Any) -> Any:
        try:
            return adapter.validate_python(response.json())
        except ValueError as e:
            # Covers both JSON decode errors and pydantic validation errors
            logger.error(f"Unexpected blueprint service response body: {e}")
            raise ServiceUnavailableError(
                "Blueprint service returned an unexpected body",
                status_code=response.status_code,
            ) from e

    async def fetch_all(self) -> list[Blueprint]:
        response = await self._send("GET", BASE_PATH)
        if not response.is_success:
            raise self._unavailable(response)
        return self._decode(response, _blueprint_list)

    async def fetch_by_author(self, author: str) -> list[Blueprint]:
        response = await self._send("GET", _path(author))
        if response.status_code == 404:
            logger.warning(f"No blueprints found for author: {author}")
            raise BlueprintNotFoundError(author)
        if not response.is_success:
            raise self._unavailable(response)
        return self._decode(response, _blueprint_list)

    async def fetch_by_author_and_name(self, author: str, name: str) -> Blueprint:
        response = await self._send("GET", _path(author, name))
        if response.status_code == 404:
            logger.warning(f"Blueprint not found: {name} by {author}")
            raise BlueprintNotFoundError(author, name)
        if not response.is_success:
            raise self._unavailable(response)
        return self._decode(response, _blueprint)

    async def create(self, blueprint: Blueprint) -> Blueprint:
        response = await self._send(
            "POST", BASE_PATH, payload=blueprint.model_dump(mode="json")
        )
        if response.status_code == 409:
            raise BlueprintConflictError(blueprint.author, blueprint.name)
        if response.status_code not in (200, 201):
            raise self._unavailable(response)
        logger.info(f"Created blueprint: {blueprint.author}/{blueprint.name}")
        if not response.content:
            return blueprint.model_copy(deep=True)
        return self._decode(response, _blueprint)

    async def update(self, author: str, name: str, blueprint: Blueprint) -> Blueprint:
        check_update_key(author, name, blueprint)
        response = await self._send(
            "PUT", _path(author, name), payload=blueprint.model_dump(mode="json")
        )
        if response.status_code == 404:
            raise BlueprintNotFoundError(author, name)
        if not response.is_success:
            raise self._unavailable(response)
        logger.info(f"Updated blueprint: {author}/{name}")
        if not response.content:
            return blueprint.model_copy(deep=True)
        return self._decode(response, _blueprint)

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()
