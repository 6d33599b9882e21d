"""Blueprints API - blueprint storage and browsing service.

This API serves:
- The /blueprints REST contract (list, fetch, create, update)
- Browser endpoints: author summaries and blueprint draw operations
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blueprints import __version__
from blueprints.api.routes import blueprints as blueprint_routes
from blueprints.api.routes import browser as browser_routes
from blueprints.filters.filters import BlueprintFilter, filter_from_env
from blueprints.presenter.browser import BlueprintBrowser
from blueprints.sources.base import BlueprintSource
from blueprints.sources.errors import ServiceUnavailableError
from blueprints.sources.factory import get_blueprint_source

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(f"Blueprints API ready ({type(app.state.source).__name__})")
    yield
    logger.info("Shutting down Blueprints API")
    await app.state.source.close()


def create_app(
    source: Optional[BlueprintSource] = None,
    blueprint_filter: Optional[BlueprintFilter] = None,
) -> FastAPI:
    """Build the API around a data source.

    Defaults come from the environment (BLUEPRINTS_SOURCE, BLUEPRINTS_FILTER).
    """
    app = FastAPI(
        title="Blueprints API",
        description="""
## Blueprint storage and browsing

- `GET /blueprints` - List all blueprints
- `GET /blueprints/{author}` - List an author's blueprints
- `GET /blueprints/{author}/{name}` - Get one blueprint
- `POST /blueprints` - Create a blueprint (409 if it exists)
- `PUT /blueprints/{author}/{name}` - Replace a blueprint
- `GET /v1/browser/authors/{author}` - Author summary with point totals
- `GET /v1/browser/authors/{author}/blueprints/{name}` - Draw operations
""",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.source = source if source is not None else get_blueprint_source()
    app.state.blueprint_filter = (
        blueprint_filter if blueprint_filter is not None else filter_from_env()
    )
    app.state.browser = BlueprintBrowser(app.state.source)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(blueprint_routes.router)
    app.include_router(browser_routes.router, prefix="/v1")

    @app.get("/")
    async def root():
        """Root endpoint with API info."""
        return {
            "service": "Blueprints API",
            "version": __version__,
            "docs": "/docs",
            "endpoints": {
                "blueprints": "/blueprints",
                "browser": "/v1/browser",
            },
        }

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        try:
            loaded = len(await app.state.source.fetch_all())
        except ServiceUnavailableError as e:
            logger.error(f"Health check failed: {e}")
            return {"status": "degraded", "detail": str(e)}
        return {"status": "healthy", "blueprints_loaded": loaded}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "blueprints.api.main:app",
        host="0.0.0.0",
        port=8001,
        reload=True,
    )
