"""
Placement Portal - Main Application

FastAPI backend with:
- MongoDB for job notifications and student feedback
- Review workflow for the placement cell (approve / reject / hold)
- Shared validation for the HTML forms and the API

Run: uvicorn placement_portal.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from placement_portal import __version__
from placement_portal.api.routes import api_router
from placement_portal.core.config import Settings, get_settings
from placement_portal.core.errors import PortalError, StorageError
from placement_portal.core.logging_config import setup_logging
from placement_portal.core.responses import send_response
from placement_portal.db.mongodb import MongoStore

logger = logging.getLogger(__name__)


def _request_errors(exc: RequestValidationError) -> dict:
    """Flatten FastAPI's error list into field -> message."""
    errors = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(loc) or "body"
        if error.get("type") == "json_invalid":
            field = "body"
            errors.setdefault(field, "Malformed JSON in request body")
            continue
        errors.setdefault(field, error.get("msg", "Invalid value"))
    return errors


def register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(PortalError)
    async def portal_error_handler(request: Request, exc: PortalError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return send_response(exc.status_code, exc.message, errors=exc.errors)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        # Unknown routes and wrong methods still get the envelope
        return send_response(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return send_response(400, "Validation failed. Please check the errors below.",
                             errors=_request_errors(exc))

    @app.exception_handler(PyMongoError)
    async def storage_error_handler(request: Request, exc: PyMongoError):
        logger.exception("Storage error on %s %s", request.method, request.url.path)
        settings: Settings = request.app.state.settings
        errors = {"error": str(exc)} if settings.debug else None
        return send_response(500, StorageError.default_message, errors=errors)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        settings: Settings = request.app.state.settings
        errors = {"error": f"{type(exc).__name__}: {exc}"} if settings.debug else None
        return send_response(500, PortalError.default_message, errors=errors)


def create_app(settings: Optional[Settings] = None, store: Optional[MongoStore] = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: defaults to get_settings()
        store: an already-connected store (tests pass a mongomock-backed one);
               when omitted the lifespan connects using settings.mongodb_uri
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = store is None
        app.state.store = store or MongoStore.from_settings(settings)
        try:
            app.state.store.init_indexes()
        except PyMongoError as e:
            logger.warning("MongoDB index initialization failed: %s", e)
        yield
        if owned:
            app.state.store.close()

    app = FastAPI(
        title=settings.app_name,
        description="""
    Job notification intake and student feedback for a university placement cell.

    ## Features
    - **Job Notifications**: companies submit hiring notifications, reviewers approve / reject / hold
    - **Course Feedback**: one submission per student per course per academic year
    - **Placement Feedback**: students review a company's recruitment process
    - **Forms**: server-side validation and dropdown options for the HTML forms
    """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include API routes
    app.include_router(api_router, prefix="/api")

    @app.get("/health", tags=["Health"])
    async def health_check(request: Request):
        """Liveness plus a MongoDB ping."""
        current: Optional[MongoStore] = request.app.state.store
        connected = current is not None and current.ping()
        return send_response(200, "Server is running", {
            "status": "healthy" if connected else "degraded",
            "mongodb": "connected" if connected else "disconnected",
            "version": __version__,
        })

    return app


app = create_app()
