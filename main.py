from contextlib import asynccontextmanager
from datetime import datetime, timezone

import structlog
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.api.v1.endpoints.auth_router import router as auth_router
from app.api.v1.endpoints.room_router import router as rooms_router
from app.core.config import settings
from app.core.database import create_tables, drop_tables
from app.core.exceptions import (
    ConflictException,
    DomainException,
    ForbiddenException,
    NotFoundException,
    ValidationException,
)
from testing_setup import setup_demo_environment

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan event handler for startup and shutdown.
    """
    logger.info("app_starting", app_name=settings.app_name)

    if settings.reset_db:
        logger.warning("database_reset_requested")
        await drop_tables()

    await create_tables()
    if settings.seed_demo_data:
        await setup_demo_environment()
    yield
    logger.info("app_shutting_down")


app = FastAPI(
    title=settings.app_name,
    description="Time-bounded rooms with creator-managed membership",
    docs_url="/docs",
    lifespan=lifespan,
)


# ============================================================================
# Exception Handlers (Convert Domain Exceptions → HTTP Responses)
# ============================================================================


def _error_response(status_code: int, exc: DomainException) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": exc.message,
            "error_code": exc.error_code,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


@app.exception_handler(NotFoundException)
async def not_found_exception_handler(request: Request, exc: NotFoundException) -> JSONResponse:
    """Handle resource not found exceptions."""
    return _error_response(status.HTTP_404_NOT_FOUND, exc)


@app.exception_handler(ForbiddenException)
async def forbidden_exception_handler(request: Request, exc: ForbiddenException) -> JSONResponse:
    """Handle authorization exceptions."""
    return _error_response(status.HTTP_403_FORBIDDEN, exc)


@app.exception_handler(ValidationException)
async def validation_exception_handler(request: Request, exc: ValidationException) -> JSONResponse:
    """Handle business rule violations."""
    return _error_response(status.HTTP_400_BAD_REQUEST, exc)


@app.exception_handler(ConflictException)
async def conflict_exception_handler(request: Request, exc: ConflictException) -> JSONResponse:
    """Handle concurrent modification conflicts."""
    return _error_response(status.HTTP_409_CONFLICT, exc)


@app.exception_handler(DomainException)
async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Fallback handler for all other domain exceptions."""
    logger.error("unhandled_domain_exception", error_code=exc.error_code, detail=exc.message)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc)


# ============================================================================
# Router Registration
# ============================================================================

API_V1_PREFIX = "/api/v1"

app.include_router(rooms_router, prefix=API_V1_PREFIX)
app.include_router(auth_router, prefix=API_V1_PREFIX)


@app.get("/")
def root():
    return {
        "message": f"Welcome to the {settings.app_name} API",
        "status": "running",
        "version": "1.0.0",
        "docs": "/docs",
        "endpoints": {
            "rooms": "/api/v1/rooms/",
            "auth": "/api/v1/auth/login",
        },
    }


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.debug)
