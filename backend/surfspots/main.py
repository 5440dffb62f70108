"""
Surf Spots Backend - FastAPI Application Factory
===================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() assembles middleware, exception handlers, routes and the
       SpotService wired to a storage backend.
Who:   uvicorn (`uvicorn surfspots.main:app`, or `python -m surfspots`) and tests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌──────────────┐  │
    │  │ Req ID   │→│  Logging        │→│  CORS        │  │
    │  └──────────┘ └─────────────────┘ └──────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────────────────────┐ ┌──────────────┐  │
    │  │ /api/spots, /api/spots/{id}  │ │ GET /health  │  │
    │  └──────────────────────────────┘ └──────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌────────────────────────────────────────────────┐ │
    │  │ Validation→400 │ NotFound→404 │ I/O, codec→500 │ │
    │  └────────────────────────────────────────────────┘ │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from surfspots import __version__
from surfspots.config import settings
from surfspots.dependencies import build_spot_service
from surfspots.exceptions import NotFoundError, SurfSpotsError, ValidationError
from surfspots.middleware.logging import RequestLoggingMiddleware
from surfspots.middleware.request_id import RequestIDMiddleware, request_id_var
from surfspots.routes import health, spots
from surfspots.services.storage_base import StorageBackend

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once from the lifespan, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # RequestLoggingMiddleware already writes one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging, report the storage location.
    Shutdown: log only; nothing is held open between requests.
    """
    setup_logging()
    logger.info("Surf Spots Backend %s starting up...", __version__)

    storage = app.state.spot_service.persistence.storage
    if await storage.exists():
        logger.info("Spot storage: %s", storage.location)
    else:
        # Not created here: every request will fail with 500 until it exists
        logger.warning("Spot storage %s does not exist yet", storage.location)

    logger.info("Server listening on %s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("Surf Spots Backend shutting down.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes.

    Handler hierarchy:
        ValidationError        → 400 (request body failed to decode)
        NotFoundError          → 404 Not Found
        SurfSpotsError (base)  → 500 (StorageError, DecodeError, EncodeError)
        Exception (fallback)   → 500

    Bodies are a short plain-text message. Context (paths, OS errors,
    pydantic error lists) is logged server-side only.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s | Context: %s", rid, exc.message, exc.context)
        return PlainTextResponse(exc.message, status_code=400)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return PlainTextResponse(exc.message, status_code=404)

    @app.exception_handler(SurfSpotsError)
    async def handle_server_error(request: Request, exc: SurfSpotsError):
        rid = request_id_var.get("")
        logger.error(
            "[%s] %s: %s | Context: %s", rid, type(exc).__name__, exc.message, exc.context
        )
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return PlainTextResponse("Internal server error", status_code=500)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(storage: Optional[StorageBackend] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        storage: Backend holding the spot document. Defaults to FileStorage
                 over settings.data_file; tests pass MemoryStorage or a temp file.
    """
    app = FastAPI(
        title="Surf Spots API",
        description="CRUD over a collection of surf spot records stored as one JSON document.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.spot_service = build_spot_service(storage)

    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → CORS → routes
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(spots.router)
    app.include_router(health.router)

    return app


# uvicorn expects `surfspots.main:app` to be importable
app = create_app()
