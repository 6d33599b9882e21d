"""Browser API routes - author lookup and blueprint drawing for a display layer."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from blueprints.presenter.browser import BlueprintBrowser
from blueprints.presenter.schemas import AuthorPage
from blueprints.rendering.schemas import BlueprintDrawing
from blueprints.sources.errors import (
    BlueprintNotFoundError,
    BlueprintValidationError,
    ServiceUnavailableError,
)

router = APIRouter(prefix="/browser", tags=["browser"])


def get_browser(request: Request) -> BlueprintBrowser:
    return request.app.state.browser


@router.get("/authors/{author}", response_model=AuthorPage)
async def lookup_author(
    author: str,
    browser: BlueprintBrowser = Depends(get_browser),
) -> AuthorPage:
    """Select an author and list their blueprints with point totals.

    An unknown author yields an empty page, not a 404.
    """
    try:
        return await browser.author_page(author)
    except BlueprintValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ServiceUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.get("/authors/{author}/blueprints/{name}", response_model=BlueprintDrawing)
async def open_blueprint(
    author: str,
    name: str,
    browser: BlueprintBrowser = Depends(get_browser),
) -> BlueprintDrawing:
    """Get the draw operations for one blueprint."""
    try:
        return await browser.open_blueprint(author, name)
    except BlueprintValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except BlueprintNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ServiceUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.get("/session")
async def get_session(
    browser: BlueprintBrowser = Depends(get_browser),
) -> dict[str, Optional[str]]:
    """Get the currently selected author."""
    return {"current_author": browser.current_author()}
