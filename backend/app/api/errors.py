"""Translate project errors into HTTP responses."""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.core.exceptions import (
    ForbiddenError,
    IntegrityError,
    InvalidInputError,
    NotFoundError,
    ProjectError,
    StorageUnavailableError,
)

logger = structlog.get_logger(__name__)

GENERIC_ERROR_MESSAGE = "Internal server error"

_CLIENT_ERRORS: dict[type[ProjectError], int] = {
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
}


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def project_error_handler(request: Request, exc: ProjectError) -> JSONResponse:
    """Return client errors verbatim; log everything else and hide the detail."""
    for error_type, status_code in _CLIENT_ERRORS.items():
        if isinstance(exc, error_type):
            return error_response(exc.message, status_code)

    log_context = {
        "method": request.method,
        "path": request.url.path,
        "error_type": type(exc).__name__,
        "error": exc.message,
    }
    if isinstance(exc, IntegrityError):
        log_context["slug"] = exc.slug
    elif isinstance(exc, StorageUnavailableError):
        log_context["operation"] = exc.operation

    logger.error("request_failed", **log_context)
    return error_response(GENERIC_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all returning a generic 500 while keeping the traceback in logs."""
    logger.exception(
        "unhandled_exception",
        method=request.method,
        path=request.url.path,
        error_type=type(exc).__name__,
    )
    return error_response(GENERIC_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ProjectError, project_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
