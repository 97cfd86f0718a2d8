"""FastAPI web application for the project showcase."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from showcase import __version__
from showcase.api import auth_routes, project_routes
from showcase.api.schemas import HealthResponse
from showcase.auth.verifier import IdentityVerifier, build_identity_verifier
from showcase.config import Settings
from showcase.database.database import build_engine, build_session_factory, init_db
from showcase.errors import ShowcaseError, StoreUnavailable

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def describe_validation_error(exc: RequestValidationError) -> str:
    """Turn the first request validation error into a one-line message."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    field = ".".join(loc)
    if first.get("type") == "missing":
        return f"Missing required field: {field}" if field else "Missing request body"
    if field:
        return f"Invalid {field}: {first.get('msg')}"
    return first.get("msg") or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    """Make every failure response a JSON `{"error": <message>}` object."""

    @app.exception_handler(ShowcaseError)
    async def handle_showcase_error(request: Request, exc: ShowcaseError):
        if isinstance(exc, StoreUnavailable):
            logger.error(f"Store failure on {request.method} {request.url.path}: {exc.message}")
            return _error(exc.status_code, INTERNAL_ERROR)
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        return _error(status.HTTP_400_BAD_REQUEST, describe_validation_error(exc))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(SQLAlchemyError)
    async def handle_database_error(request: Request, exc: SQLAlchemyError):
        logger.error(f"Database error on {request.method} {request.url.path}: {type(exc).__name__}: {exc}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception(f"Server error on {request.method} {request.url.path}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)


def create_app(
    settings: Optional[Settings] = None,
    engine: Optional[Engine] = None,
    identity_verifier: Optional[IdentityVerifier] = None,
) -> FastAPI:
    """Build the application.

    Args:
        settings: Defaults to `Settings.from_env()`
        engine: Database engine; built from `settings.database_url` when omitted
        identity_verifier: Bearer token verifier; chosen from settings when omitted
    """
    settings = settings or Settings.from_env()
    owns_engine = engine is None
    if owns_engine:
        engine = build_engine(settings.database_url, echo=settings.debug)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(engine)
        logger.info(f"Showcase API {__version__} ready")
        yield
        if owns_engine:
            engine.dispose()

    app = FastAPI(
        title="Project Showcase API",
        description="Users, projects and likes for a project showcase",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.identity_verifier = identity_verifier or build_identity_verifier(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.client_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.get("/api/health", response_model=HealthResponse)
    async def health():
        """Health check endpoint."""
        return HealthResponse(message="Server running", timestamp=datetime.utcnow())

    app.include_router(auth_routes.router)
    app.include_router(project_routes.router)
    return app
