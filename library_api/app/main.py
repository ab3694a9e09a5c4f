"""
Main entrypoint for the Library API.

This module assembles the FastAPI application, sets up logging,
registers the error translator and includes the API router under
``/api``.  The ``create_app`` function builds and configures the app,
which is then instantiated at module import time as ``app``, e.g.::

    uvicorn library_api.app.main:app --reload
"""

from fastapi import FastAPI

from .api.errors import register_exception_handlers
from .api.router import router as api_router
from .core.config import settings
from .core.db import init_db
from .core.logging_config import setup_logging


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.include_router(api_router, prefix="/api")
    register_exception_handlers(app)

    @app.get("/health", tags=["health"])
    async def healthcheck() -> dict:
        return {"status": "ok"}

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file on first start and brings the schema up to date.
        init_db()

    return app


# Created at import time so uvicorn can discover it without calling create_app.
app = create_app()
