"""
Exception handlers — translate every failure into the response envelope.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.responses import send_error
from utils.errors import AppError, AuthenticationError, InternalError

logger = logging.getLogger(__name__)

GENERIC_ERROR = "something went wrong"


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if isinstance(exc, InternalError) and exc.status_code >= 500:
        logger.error(
            "%s %s failed: %s",
            request.method,
            request.url.path,
            exc.detail or exc.message,
            exc_info=exc,
        )
        return send_error(GENERIC_ERROR, exc.status_code)

    logger.info(
        "%s %s → %d %s (%s)",
        request.method,
        request.url.path,
        exc.status_code,
        type(exc).__name__,
        exc.detail or exc.message,
    )
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return send_error(exc.message, exc.status_code, headers=headers)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Undecodable or wrongly-typed request bodies."""
    # only locations and types; inputs may hold passwords
    problems = [(".".join(str(p) for p in e["loc"]), e["type"]) for e in exc.errors()]
    logger.info("%s %s → invalid body: %s", request.method, request.url.path, problems)
    return send_error("invalid body", status.HTTP_422_UNPROCESSABLE_ENTITY)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Routing-level errors (unknown path, wrong method)."""
    return send_error(str(exc.detail), exc.status_code, headers=getattr(exc, "headers", None))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return send_error(GENERIC_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
