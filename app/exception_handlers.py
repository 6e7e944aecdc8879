"""Map application errors to HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.exceptions import AppError, BindingFailure, DatabaseError
from schemas.common import ErrorResponse

logger = logging.getLogger(__name__)


def _error_response(exc: AppError) -> JSONResponse:
    body = ErrorResponse(detail=exc.detail, error_code=exc.error_code)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Render an AppError using its status code and error code."""
    if isinstance(exc, DatabaseError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
    else:
        logger.info(
            "%s %s rejected: %s (%s)",
            request.method,
            request.url.path,
            exc.error_code,
            exc.detail,
        )
    return _error_response(exc)


async def validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Report request binding problems as a BindingFailure."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        problems.append(f"{location}: {error.get('msg')}")

    failure = BindingFailure("; ".join(problems) or "Invalid request")
    logger.info("%s %s binding failed: %s", request.method, request.url.path, failure.detail)
    return _error_response(failure)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on the application."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
