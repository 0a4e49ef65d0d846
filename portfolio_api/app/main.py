"""
Main entrypoint for the Portfolio API.

This module assembles the FastAPI application: it sets up logging,
initialises the database on startup, allows the front-end origin
through CORS, installs the error handlers and includes the versioned
routers.  Run it with uvicorn, e.g.::

    uvicorn portfolio_api.app.main:app --reload

or use ``run.py`` at the project root.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.errors import register_error_handlers
from .core.logging_config import setup_logging


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Creates the database file if needed and applies pending migrations.
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured application instance ready to be served.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.client_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(v1_router, prefix="/api/v1")

    return app


# Created at import time so uvicorn can discover it without calling
# create_app manually.
app = create_app()
