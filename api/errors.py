"""Global exception handlers for FastAPI.

Form actions return their own validation and storage outcomes; these
handlers cover the read endpoints and anything that escapes a route.
"""

import logging

import psycopg2
import redis
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.responses import JSONResponse

from api.base import error_response, ErrorCodes

logger = logging.getLogger(__name__)


def _json_error(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=error_response(code, message).model_dump(mode="json"),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers on the app."""

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        message = str(exc)
        if "not found" in message.lower():
            return _json_error(404, ErrorCodes.NOT_FOUND, message)
        return _json_error(400, ErrorCodes.INVALID_REQUEST, message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return _json_error(422, ErrorCodes.VALIDATION_ERROR, str(exc.errors()))

    @app.exception_handler(psycopg2.Error)
    async def database_error_handler(request: Request, exc: psycopg2.Error):
        logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
        return _json_error(503, ErrorCodes.DATABASE_ERROR, "Database is unavailable")

    @app.exception_handler(redis.RedisError)
    async def cache_error_handler(request: Request, exc: redis.RedisError):
        logger.error(f"Valkey error on {request.method} {request.url.path}: {exc}")
        return _json_error(503, ErrorCodes.INTERNAL_ERROR, "Cache is unavailable")

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
        return _json_error(500, ErrorCodes.INTERNAL_ERROR, "An internal error occurred")
