# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Users API.
# It wires the store, exception handlers, middleware and routers together.
#
# Usage:
#   poetry run uvicorn app.main:app --reload
#   poetry run users-api
# =============================================================================

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import __version__
from app.config import Settings, get_settings
from app.exceptions import (
    UsersApiException,
    http_exception_handler,
    store_exception_handler,
    users_api_exception_handler,
    validation_exception_handler,
)
from app.routers import health, users
from lib.user_store import StoreError, UserStore

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: Connect to the database and ensure the users table exists.
      A failure aborts startup, so the server exits instead of serving.
    - Shutdown: Dispose of the engine.
    """
    settings: Settings = app.state.settings
    store: UserStore = app.state.store

    # Startup
    logger.info(f"Starting Users API in {settings.ENVIRONMENT} mode")

    try:
        store.connect()
    except StoreError as e:
        logger.critical(f"Cannot start without a database: {e}")
        raise

    yield

    # Shutdown
    logger.info("Shutting down Users API")
    store.close()


def create_app(
    settings: Settings | None = None,
    store: UserStore | None = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use (defaults to get_settings())
        store: Store handle to use (defaults to one built from DATABASE_URL)

    Returns:
        FastAPI: The configured application
    """
    settings = settings or get_settings()
    configure_logging(settings)

    if store is None:
        store = UserStore.from_url(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

    app = FastAPI(
        title="Users API",
        description="CRUD service for a single user resource backed by a relational table.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Users",
                "description": "Create, read, update and delete users",
            },
            {
                "name": "Health",
                "description": "API health and readiness checks",
            },
        ],
    )

    app.state.settings = settings
    app.state.store = store

    # =========================================================================
    # Middleware
    # =========================================================================

    @app.middleware("http")
    async def json_content_type(request: Request, call_next):
        """Mark every non-text response as JSON."""
        response = await call_next(request)
        if not response.headers.get("content-type", "").startswith("text/"):
            response.headers["content-type"] = "application/json"
        return response

    # CORS middleware - allows cross-origin requests
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(UsersApiException, users_api_exception_handler)
    app.add_exception_handler(StoreError, store_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.exception_handler(Exception)
    async def handle_general_exception(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception(f"Unexpected error: {exc}")
        return PlainTextResponse("Internal server error", status_code=500)

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(
        users.router,
        prefix="/users",
        tags=["Users"]
    )

    app.include_router(
        health.router,
        tags=["Health"]
    )

    @app.get("/", tags=["Root"])
    async def root():
        """
        Root endpoint - returns API info.
        """
        return {
            "name": "Users API",
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()


def run() -> None:
    """Start the API server on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )
