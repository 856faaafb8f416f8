from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Optional
import logging
import time

from ...application.dto.vpn_dto import ErrorResponse
from ...domain.exceptions import NotFoundError
from ...infrastructure.config.settings import Settings
from ...infrastructure.database.memory_repository import InMemoryStore
from ...infrastructure.security.audit_logger import AuditLogger
from .deps import ServiceContainer
from .router import api_router

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("vpn_panel.access")

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "X-DNS-Prefetch-Control": "off",
    "Cross-Origin-Resource-Policy": "same-origin",
}

ANNOUNCED_ENDPOINTS = [
    "GET  /api/status",
    "GET  /api/servers",
    "POST /api/connection/connect",
    "POST /api/connection/disconnect",
]

def _apply_security_headers(response):
    for header, value in SECURITY_HEADERS.items():
        response.headers.setdefault(header, value)
    return response

def _error(status_code: int, message: str) -> JSONResponse:
    # 500s are rendered outside the http middleware, so headers are set here too
    response = JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())
    return _apply_security_headers(response)

def create_app(store: Optional[InMemoryStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the API bound to ``store`` (a freshly seeded one by default).

    There is no module-level app; run it directly with
    ``uvicorn --factory src.presentation.api.main:create_app``.
    """
    settings = settings or Settings.from_env()
    store = store if store is not None else InMemoryStore()

    app = FastAPI(title="VPN Mock API", version="1.0.0")
    app.state.settings = settings
    app.state.services = ServiceContainer.build(
        store,
        AuditLogger(settings.audit_log_file),
        history_default_limit=settings.history_default_limit
    )

    # Access log and security headers
    @app.middleware("http")
    async def access_log_middleware(request: Request, call_next):
        start_time = time.time()
        response = _apply_security_headers(await call_next(request))
        duration_ms = (time.time() - start_time) * 1000
        access_logger.info(
            f"{request.method} {request.url.path} {response.status_code} {duration_ms:.1f}ms"
        )
        return response

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return _error(status.HTTP_404_NOT_FOUND, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.debug(f"Rejected body for {request.method} {request.url.path}: {exc.errors()}")
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid request body")

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        access_logger.info(f"{request.method} {request.url.path} 500")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    app.include_router(api_router)

    @app.on_event("startup")
    async def announce_endpoints():
        logger.info(f"VPN API Server running on http://localhost:{settings.port}")
        logger.info("API Endpoints:")
        for endpoint in ANNOUNCED_ENDPOINTS:
            logger.info(f"   {endpoint}")

    return app
