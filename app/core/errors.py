"""Application error taxonomy and FastAPI exception handlers.

Every error the API returns deliberately is an ``AppError`` subclass that
carries its HTTP status and a client-safe message.  Anything else is
logged and rendered as a generic 500 so internal details never reach the
client.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors mapped to an HTTP response."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Malformed or missing input."""

    status_code = 400
    default_message = "Validation failed"


class AuthError(AppError):
    """Missing, invalid or expired credential."""

    status_code = 401
    default_message = "Authentication required"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Not found"


class ConflictError(AppError):
    """Uniqueness violation reported by the store."""

    status_code = 409
    default_message = "Resource already exists"


class RateLimitError(AppError):
    status_code = 429
    default_message = "Rate limit exceeded"


class InternalError(AppError):
    """Store or transport failure; the message stays generic."""

    status_code = 500
    default_message = "Internal server error"


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

def _format_location(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "request_failed",
            extra={"path": request.url.path, "error_message": exc.message},
        )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render schema failures as 400 with one entry per offending field."""
    details = [
        {"field": _format_location(tuple(err.get("loc", ()))), "message": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"error": ValidationError.default_message, "details": details},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "unhandled_exception",
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(
        status_code=500, content={"error": InternalError.default_message}
    )


def register_exception_handlers(application: FastAPI) -> None:
    """Install the handlers for the error taxonomy on *application*."""
    application.add_exception_handler(AppError, app_error_handler)  # type: ignore[arg-type]
    application.add_exception_handler(
        RequestValidationError, request_validation_handler  # type: ignore[arg-type]
    )
    application.add_exception_handler(Exception, unhandled_error_handler)
