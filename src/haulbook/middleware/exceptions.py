"""Application exceptions and the handlers that render them as ``{"error": message}``."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class HaulbookError(Exception):
    """Base exception for errors surfaced to API callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationFailure(HaulbookError):
    """Input rejected before reaching the store."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(HaulbookError):
    """Operation refused because of the state of related records."""

    status_code = status.HTTP_409_CONFLICT


class StoreError(HaulbookError):
    """Backend failure, carrying the backend's own message."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class DuplicateRecordError(StoreError):
    """Uniqueness constraint violated in the store."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConfigurationError(RuntimeError):
    """Raised at start-up when the configured backend cannot be built."""


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def haulbook_exception_handler(request: Request, exc: HaulbookError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected ({exc.status_code}): {exc.message}")
    return error_response(exc.status_code, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}")
    return error_response(exc.status_code, str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Flatten pydantic errors into a single readable message."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"] if part not in ("body", "query", "path"))
        message = error["msg"]
        messages.append(f"{location}: {message}" if location else message)
    text = "; ".join(messages) or "Invalid request"
    logger.info(f"Validation error on {request.url.path}: {text}")
    return error_response(status.HTTP_400_BAD_REQUEST, text)


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or exc.__class__.__name__)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HaulbookError, haulbook_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
