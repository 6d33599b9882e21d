"""Blueprint REST routes.

Serves the /blueprints contract consumed by RemoteBlueprintSource, backed by
whichever source the app was built with. Reads pass through the configured
read filter.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from blueprints.filters.filters import BlueprintFilter
from blueprints.geometry.schemas import Blueprint
from blueprints.sources.base import BlueprintSource, check_update_key
from blueprints.sources.errors import (
    BlueprintConflictError,
    BlueprintNotFoundError,
    BlueprintValidationError,
    ServiceUnavailableError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/blueprints", tags=["blueprints"])


def get_source(request: Request) -> BlueprintSource:
    return request.app.state.source


def get_read_filter(request: Request) -> BlueprintFilter:
    return request.app.state.blueprint_filter


@router.get("", response_model=list[Blueprint])
async def list_blueprints(
    source: BlueprintSource = Depends(get_source),
    read_filter: BlueprintFilter = Depends(get_read_filter),
) -> list[Blueprint]:
    """List every stored blueprint."""
    try:
        blueprints = await source.fetch_all()
    except ServiceUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return [read_filter(bp) for bp in blueprints]


@router.get("/{author}", response_model=list[Blueprint])
async def get_blueprints_by_author(
    author: str,
    source: BlueprintSource = Depends(get_source),
    read_filter: BlueprintFilter = Depends(get_read_filter),
) -> list[Blueprint]:
    """List the blueprints of one author."""
    try:
        blueprints = await source.fetch_by_author(author)
    except BlueprintNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ServiceUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return [read_filter(bp) for bp in blueprints]


@router.get("/{author}/{name}", response_model=Blueprint)
async def get_blueprint(
    author: str,
    name: str,
    source: BlueprintSource = Depends(get_source),
    read_filter: BlueprintFilter = Depends(get_read_filter),
) -> Blueprint:
    """Get one blueprint by author and name."""
    try:
        blueprint = await source.fetch_by_author_and_name(author, name)
    except BlueprintNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ServiceUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return read_filter(blueprint)


@router.post("", response_model=Blueprint, status_code=status.HTTP_201_CREATED)
async def create_blueprint(
    blueprint: Blueprint,
    source: BlueprintSource = Depends(get_source),
) -> Blueprint:
    """Create a blueprint; 409 if the author already has one with this name."""
    try:
        return await source.create(blueprint)
    except BlueprintConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ServiceUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.put("/{author}/{name}", response_model=Blueprint)
async def update_blueprint(
    author: str,
    name: str,
    blueprint: Blueprint,
    source: BlueprintSource = Depends(get_source),
) -> Blueprint:
    """Replace a blueprint. The body must carry the same author and name as the path."""
    try:
        check_update_key(author, name, blueprint)
        return await source.update(author, name, blueprint)
    except BlueprintValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except BlueprintNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ServiceUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
