"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() returns a configured app
   - Tests can build fresh instances

2. Lifespan Events
   - startup: create missing tables
   - shutdown: dispose of the connection pool

3. Exception Handlers
   - Map the error taxonomy (app.exceptions) to HTTP statuses
   - Remap FastAPI's 422 validation errors to 400
   - Wrap every error in the {status, message, data} envelope
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import get_settings
from app.database import create_tables, engine
from app.dependencies import DbSession
from app.exceptions import BookNotFoundError, RepositoryError
from app.routers import books_router
from app.schemas.response import (
    APIResponse,
    bad_request,
    error_response,
    internal_server_error,
    not_found,
    ok,
)
from app.services.rate_limiter import limiter, rate_limit_exceeded_handler

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

INVALID_BOOK_ID_MESSAGE = "Invalid book ID"


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield: Runs on startup
    Code after yield: Runs on shutdown
    """
    # ----- STARTUP -----
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Environment: {settings.environment}, debug: {settings.debug}")

    create_tables()
    logger.info("Database tables ready")

    yield

    # ----- SHUTDOWN -----
    logger.info(f"Shutting down {settings.app_name}...")
    engine.dispose()


def format_validation_error(exc: RequestValidationError) -> str:
    """
    Turn pydantic's error list into one readable message.

    A bad path parameter reads "Invalid book ID"; body errors are listed as
    "field: reason" pairs.
    """
    errors = exc.errors()

    if any(error["loc"] and error["loc"][0] == "path" for error in errors):
        return INVALID_BOOK_ID_MESSAGE

    parts = []
    for error in errors:
        # Drop the leading "body" segment, keep the field path
        location = ".".join(str(part) for part in error["loc"][1:])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])

    return "; ".join(parts) or "Invalid request"


# =============================================================================
# Application Factory
# =============================================================================
def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        description="""
## Book Catalog API

Create, read, update, delete and list book records.

Every response is wrapped in an envelope:

    {"status": 200, "message": "success", "data": ...}
        """,
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # Rate Limiting
    # -------------------------------------------------------------------------
    # The limiter decorators look it up on app.state
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Malformed client input is a 400, not FastAPI's default 422."""
        message = format_validation_error(exc)
        logger.info(f"Rejected {request.method} {request.url.path}: {message}")
        return bad_request(message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Unknown routes, wrong methods and explicit HTTPExceptions."""
        return error_response(
            exc.status_code,
            str(exc.detail),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(BookNotFoundError)
    async def book_not_found_handler(
        request: Request,
        exc: BookNotFoundError,
    ) -> JSONResponse:
        return not_found(exc.message)

    @app.exception_handler(RepositoryError)
    async def repository_exception_handler(
        request: Request,
        exc: RepositoryError,
    ) -> JSONResponse:
        """Store failures surface their underlying text to the client."""
        logger.error(f"Repository error on {request.method} {request.url.path}: {exc}")
        return internal_server_error(exc.message)

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """Database errors raised outside the repository layer."""
        logger.error(f"Database error: {exc}")
        return internal_server_error(str(exc))

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Catch-all: anything unexpected is a 500 carrying the error text."""
        logger.error(f"Unhandled error: {exc}", exc_info=True)
        return internal_server_error(str(exc))

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    # /api/v1/books, /api/v1/books/{book_id}
    app.include_router(books_router, prefix=settings.api_prefix)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        response_model=APIResponse[dict],
        summary="Health check",
        description="Check that the API is running and the database answers.",
    )
    def health_check(db: DbSession) -> APIResponse[dict] | JSONResponse:
        """
        Health check endpoint.

        Runs SELECT 1 on a pooled connection; answers 503 when the database
        is unreachable.
        """
        try:
            db.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            logger.warning(f"Health check failed: {exc}")
            return error_response(status.HTTP_503_SERVICE_UNAVAILABLE, str(exc))

        return ok(
            {
                "status": "healthy",
                "app": settings.app_name,
                "version": settings.api_version,
                "database": "ok",
            }
        )

    @app.get(
        "/",
        tags=["Root"],
        response_model=APIResponse[dict],
        summary="API root",
        description="Welcome message and API information.",
    )
    async def root() -> APIResponse[dict]:
        """Root endpoint with API information."""
        return ok(
            {
                "message": f"Welcome to {settings.app_name}",
                "version": settings.api_version,
                "books": f"{settings.api_prefix}/books",
                "docs": "/docs",
                "health": "/health",
            }
        )

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn app.main:app

app = create_app()


# =============================================================================
# Development Server
# =============================================================================
# python -m app.main

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
