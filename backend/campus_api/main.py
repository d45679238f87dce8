"""
Campus API Backend: FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn campus_api.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────┐ ┌──────┐ ┌──────┐         │
    │  │  Req ID  │→│ Logging │→│ GZip │→│ CORS │         │
    │  └──────────┘ └─────────┘ └──────┘ └──────┘         │
    │                                                     │
    │  Routes:                                            │
    │  /api/articles  /api/helprequests  /health          │
    │  /api/ucsbdiningcommonsmenuitems                    │
    │  /api/ucsborganizations                             │
    │                                                     │
    │  Exception Handlers:                                │
    │  Validation→400 │ Forbidden→403 │ NotFound→404      │
    │  Database→500   │ anything else→500                 │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging setup, configuration validation
    Shutdown: database engine disposal
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from campus_api import __version__
from campus_api.config import settings
from campus_api.database import dispose_engine
from campus_api.exceptions import (
    DatabaseError,
    EntityNotFoundError,
    ForbiddenError,
    ValidationError,
)
from campus_api.middleware.logging import RequestLoggingMiddleware
from campus_api.middleware.request_id import RequestIDMiddleware, request_id_var
from campus_api.routes import health
from campus_api.routes.resources import resource_routers

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s, to stdout.
    Called once during app startup, before any other initialization.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party libraries that log every operation at DEBUG/INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Run initialization on startup and cleanup on shutdown."""
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("Campus API %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Not fatal: local development runs on the default secret
        logger.error("Configuration error: %s", str(e))

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Campus API shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def error_body(type_tag: str, message: str, details: Optional[Any] = None) -> Dict[str, Any]:
    """Error response body: `type` and `message`, plus `details` when given."""
    body: Dict[str, Any] = {"type": type_tag, "message": message}
    if details is not None:
        body["details"] = details
    return body


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and error bodies.

    Why: every failure reaches the client in the same {type, message} shape,
    and internal details (SQL, stack traces) stay in the server log.

    Handler table:
        ValidationError      → 400 {type: "ValidationError", message, details}
        ForbiddenError       → 403 {type: "AccessDeniedException", message: "Access Denied"}
        EntityNotFoundError  → 404 {type: "EntityNotFoundException", message}
        DatabaseError        → 500 generic message (details logged only)
        Exception (fallback) → 500 generic message (stack trace logged only)
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return JSONResponse(
            status_code=400,
            content=error_body(exc.type_tag, exc.message, exc.errors),
        )

    @app.exception_handler(ForbiddenError)
    async def handle_forbidden(request: Request, exc: ForbiddenError):
        return JSONResponse(status_code=403, content=error_body(exc.type_tag, exc.message))

    @app.exception_handler(EntityNotFoundError)
    async def handle_not_found(request: Request, exc: EntityNotFoundError):
        return JSONResponse(status_code=404, content=error_body(exc.type_tag, exc.message))

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error(
            "[%s] Database error: %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
        )
        return JSONResponse(
            status_code=500,
            content=error_body(
                exc.type_tag, "An internal error occurred. Please try again later."
            ),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = getattr(request.state, "request_id", "")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content=error_body(
                "InternalServerError",
                "An unexpected error occurred. Please try again or contact support.",
            ),
            headers={"X-Request-ID": rid} if rid else None,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    Tests build a fresh instance per test so dependency overrides never leak.
    """
    app = FastAPI(
        title="Campus API",
        description=(
            "CRUD API for campus resources: articles, help requests, dining commons "
            "menu items and student organizations. Reads need the USER role; "
            "writes need ADMIN."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added executes first: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    for router in resource_routers:
        app.include_router(router)
    app.include_router(health.router)

    return app


# uvicorn expects `campus_api.main:app` to be importable
app = create_app()
