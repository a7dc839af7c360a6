"""
FastAPI application for the hostel backend.

This is the HTTP API the student and warden dashboards talk to.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from hostel.api.dependencies import get_app_settings
from hostel.api.routes import router as records_router
from hostel.api.schemas import ErrorResponse
from hostel.auth.context import SessionIdentity
from hostel.auth.passwords import PasswordHasher
from hostel.auth.policies import require_page_role
from hostel.auth.routes import router as auth_router
from hostel.auth.service import AuthService
from hostel.auth.sessions import SessionManager
from hostel.config import Settings, get_settings
from hostel.core.errors import HostelError, NotAuthenticatedError, PageRedirect, ValidationError
from hostel.core.models import Role
from hostel.integrations.sentry import capture_exception, init_sentry
from hostel.services import ComplaintService, FineService, GatePassService, RoomService
from hostel.storage import create_local_storage

logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize and cleanup app resources."""
    settings: Settings = app.state.settings

    if init_sentry(settings):
        logger.info("Sentry error tracking enabled")

    await app.state.storage.records.ensure_collections()

    logger.info(f"Hostel API starting in {settings.environment} mode (data: {settings.data_dir})")

    yield

    logger.info("Hostel API shutting down")


# =============================================================================
# Error Handling
# =============================================================================


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(message=message).model_dump())


def is_programmatic(request: Request) -> bool:
    """API calls and XHR get JSON errors; page loads get redirects."""
    if request.headers.get("x-requested-with", "").lower() == "xmlhttprequest":
        return True
    return request.url.path.startswith("/api/")


def _login_redirect(request: Request) -> RedirectResponse:
    return RedirectResponse(request.app.state.settings.login_page, status_code=302)


async def hostel_error_handler(request: Request, exc: HostelError) -> JSONResponse | RedirectResponse:
    if isinstance(exc, PageRedirect):
        return _login_redirect(request)
    if isinstance(exc, NotAuthenticatedError) and not is_programmatic(request):
        return _login_redirect(request)

    if exc.status_code >= 500:
        capture_exception(exc, path=request.url.path)
    return _error(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if any(e.get("type") == "json_invalid" for e in errors):
        return _error(400, "Invalid JSON body")
    if all(e.get("type") in ("missing", "string_too_short") for e in errors):
        return _error(400, ValidationError.default_message)

    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ())[1:])
    return _error(400, f"Invalid value for {field}: {first.get('msg', 'invalid')}")


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error(exc.status_code, str(exc.detail))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    capture_exception(exc, path=request.url.path)
    return _error(500, "Internal server error")


# =============================================================================
# App Setup
# =============================================================================


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application.

    Storage, sessions and services are created here and kept on
    `app.state`; routes receive them through dependencies.
    """
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title="Hostel Management API",
        description="Rooms, complaints, fines and gate passes for students and wardens",
        version="0.1.0",
        lifespan=lifespan,
    )

    storage = create_local_storage(settings.data_dir)
    hasher = PasswordHasher(rounds=settings.bcrypt_rounds)
    session_manager = SessionManager(storage.sessions, settings.secret_key, settings.session_ttl)

    app.state.settings = settings
    app.state.storage = storage
    app.state.hasher = hasher
    app.state.session_manager = session_manager
    app.state.auth_service = AuthService(storage.records, hasher, session_manager)
    app.state.room_service = RoomService(storage.records)
    app.state.complaint_service = ComplaintService(storage.records)
    app.state.fine_service = FineService(storage.records)
    app.state.gatepass_service = GatePassService(storage.records)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(HostelError, hostel_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(auth_router)
    app.include_router(records_router)
    _add_pages(app)

    return app


# =============================================================================
# Pages
# =============================================================================


def _add_pages(app: FastAPI) -> None:
    """Entry redirect, health check, the login page and the role-gated dashboards."""

    @app.get("/", include_in_schema=False)
    async def index(request: Request):
        return _login_redirect(request)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": "hostel-api"}

    @app.get("/login.html", include_in_schema=False)
    async def login_page(settings: Settings = Depends(get_app_settings)):
        return _page(settings, "login.html")

    @app.get("/student-dashboard.html", include_in_schema=False)
    async def student_dashboard(
        identity: SessionIdentity = Depends(require_page_role(Role.STUDENT)),
        settings: Settings = Depends(get_app_settings),
    ):
        return _page(settings, "student-dashboard.html")

    @app.get("/warden-dashboard.html", include_in_schema=False)
    async def warden_dashboard(
        identity: SessionIdentity = Depends(require_page_role(Role.WARDEN)),
        settings: Settings = Depends(get_app_settings),
    ):
        return _page(settings, "warden-dashboard.html")


def _page(settings: Settings, name: str) -> FileResponse:
    path = settings.static_dir / name
    if not path.is_file():
        raise StarletteHTTPException(status_code=404, detail="Page not found")
    return FileResponse(path, media_type="text/html")


app = create_app()
