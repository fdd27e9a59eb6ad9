"""
Main entrypoint for the REST Basics API.

This module assembles the FastAPI application, sets up logging,
installs the error handlers and includes the versioned router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn
or any other ASGI server, e.g.::

    uvicorn rest_basics_api.app.main:app --port 3000

or simply ``python run.py``.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .core.store import init_store

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as ``{"error": <detail>}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed or wrongly typed bodies with 400."""
    logger.warning("Invalid request to %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body"},
    )


def normalize_prefix(prefix: str) -> str:
    """Return ``prefix`` as ``/segment`` without a trailing slash, or ``""``."""
    stripped = prefix.strip("/")
    return f"/{stripped}" if stripped else ""


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module‑level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    cfg = app_settings or settings
    prefix = normalize_prefix(cfg.api_prefix)

    # Initialise logging before anything else so that the startup hook
    # and request handlers can log safely.
    setup_logging(cfg.log_level, cfg.log_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Collections are created fresh on every start; nothing survives
        # a restart.
        init_store(seed_users=cfg.seed_users)
        logger.info("Server is running on http://localhost:%s%s", cfg.port, prefix)
        yield
        logger.info("Server stopped, in-memory state discarded")

    app = FastAPI(
        title=cfg.project_name,
        version=cfg.api_version,
        debug=cfg.debug,
        lifespan=lifespan,
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(v1_router, prefix=prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
