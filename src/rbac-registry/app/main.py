"""RBAC Registry FastAPI Application.

The RBAC Registry Service provides:
- Registration of services and the operations they expose
- Roles as named sets of operation identifiers
- Expansion of role identifiers into the operation identifiers they grant
- Forwarding of every successful change to an external audit service
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import RbacRegistrySettings
from shared.database import Base, create_engine, create_session_factory
from shared.models import ErrorResponse
from shared.observability import get_logger, setup_logging

from .api import health, roles, rolexpand, services
from .middleware import RequestLoggingMiddleware
from .services.audit import AuditClient
from .services.exceptions import RegistryError

settings = RbacRegistrySettings()
setup_logging(log_level=settings.log_level, log_format=settings.log_format)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Handles startup and shutdown of:
    - Database connections
    - Audit client
    """
    logger.info("Starting RBAC Registry service", version=settings.app_version)

    engine = create_engine(settings.database.async_url, echo=settings.debug)
    app.state.db_engine = engine
    app.state.session_factory = create_session_factory(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables initialized")

    audit = AuditClient(settings.audit, source=settings.service_name)
    app.state.audit = audit
    if not audit.enabled:
        logger.info("Auditing disabled")

    logger.info("RBAC Registry service started successfully")

    yield

    logger.info("Shutting down RBAC Registry service")
    await audit.close()
    await engine.dispose()
    logger.info("RBAC Registry service shutdown complete")


app = FastAPI(
    title="RBAC Registry Service",
    description="Registry of services, their operations and the roles that grant them",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)
app.state.settings = settings

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


def error_response(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": ErrorResponse(error=error, message=message).model_dump()},
    )


@app.exception_handler(RegistryError)
async def registry_error_handler(request: Request, exc: RegistryError) -> JSONResponse:
    return error_response(exc.status_code, exc.error_code, str(exc))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render malformed request bodies and parameters as a 400."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"] if part != "body")
        messages.append(f'"{location}" {error["msg"]}' if location else error["msg"])

    message = "; ".join(messages)
    logger.warning("Request validation failed", path=request.url.path, errors=message)
    return error_response(status.HTTP_400_BAD_REQUEST, "VALIDATION_FAILED", message)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error", path=request.url.path, exc_info=exc)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR", "Internal server error"
    )


app.include_router(services.router, prefix="/api/v1", tags=["Services"])
app.include_router(roles.router, prefix="/api/v1", tags=["Roles"])
app.include_router(rolexpand.router, prefix="/api/v1", tags=["Roles"])
app.include_router(health.router, tags=["Health"])


@app.get("/")
async def root():
    """Root endpoint with service info."""
    return {
        "service": "rbac-registry",
        "version": settings.app_version,
        "docs": "/docs",
        "time": datetime.now(timezone.utc).isoformat(),
    }
