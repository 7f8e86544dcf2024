"""Translate store and request errors into plain-text HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from store import TaskNotFoundError
import logging

logger = logging.getLogger(__name__)

TASK_NOT_FOUND_MESSAGE = "Задача не найдена"
INTERNAL_ERROR_MESSAGE = "Internal server error"


def describe_validation_error(exc: RequestValidationError) -> str:
    """Render the first validation problem as ``location: message``."""
    errors = exc.errors()
    if not errors:
        return "Invalid request body"

    error = errors[0]
    location = ".".join(str(part) for part in error.get("loc", ()))
    message = error.get("msg", "Invalid request body")
    return f"{location}: {message}" if location else message


async def task_not_found_handler(request: Request, exc: TaskNotFoundError):
    return PlainTextResponse(TASK_NOT_FOUND_MESSAGE, status_code=404)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return PlainTextResponse(describe_validation_error(exc), status_code=400)


async def internal_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return PlainTextResponse(INTERNAL_ERROR_MESSAGE, status_code=500)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TaskNotFoundError, task_not_found_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, internal_error_handler)
