# app/utils/errors.py
"""
Application error taxonomy.

Components raise these instead of HTTPException so they stay usable outside a
request; ``register_exception_handlers`` turns each one into a single JSON
response of the same shape FastAPI uses for HTTPException.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base exception for errors that map to exactly one HTTP response."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal Server Error"

    def __init__(self, detail: str = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class AbsentCredential(AppError):
    """No bearer token was supplied."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "No token provided"


class InvalidCredential(AppError):
    """Token signature is invalid, tampered with, or expired."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Invalid token"


class UnknownSubject(InvalidCredential):
    """Token is valid but its subject exists in neither identity pool.

    Callers only ever see the generic invalid-token detail.
    """


class Forbidden(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Forbidden"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class Conflict(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Conflict"


class InternalFailure(AppError):
    pass


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    if isinstance(exc, InternalFailure):
        logger.error("❌ %s %s failed: %s", request.method, request.url.path, exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=headers,
    )


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("❌ Store failure on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=InternalFailure.status_code,
        content={"detail": InternalFailure.default_detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
