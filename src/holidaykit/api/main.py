"""
holidaykit API

Read-only holiday service.

Environment variables: see holidaykit.config (HK_CONFIG_FILE, HK_CATALOG_DIR,
HK_LOG_LEVEL, HK_LOG_FORMAT, ...).
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .. import __version__
from ..config import load_settings
from ..log import configure_logging
from ..registry import Registry, get_registry
from .routes import countries
from .schemas import HealthResponse

logger = logging.getLogger(__name__)


def create_app(registry: Optional[Registry] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        registry: Registry to serve; when omitted the default registry is
            loaded on startup from settings
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Load country catalogs on startup."""
        if registry is None:
            settings = load_settings()
            configure_logging(settings.log_level, settings.log_format)
            countries.set_registry(get_registry())
        logger.info("Serving %d countries", len(countries.registry or ()))
        yield
        logger.info("Shutting down")

    app = FastAPI(
        title="holidaykit API",
        description="""
**Public holidays by country, year and subdivision.**

## Quick Start

1. `GET /countries` - See supported countries
2. `GET /countries/{code}/holidays/{year}` - Holidays of a year
3. `GET /countries/{code}/dates/{date}` - Check a single date
        """,
        version=__version__,
        lifespan=lifespan,
    )

    if registry is not None:
        countries.set_registry(registry)

    app.include_router(countries.router)

    @app.get("/health", tags=["Health"], response_model=HealthResponse)
    async def health():
        """Health check endpoint."""
        return HealthResponse(
            healthy=countries.registry is not None,
            countries_loaded=len(countries.registry or ()),
            version=__version__,
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
