"""Centralized exception handlers for the FastAPI app.

Register with :func:`register_exception_handlers`. Maps API and framework
exceptions to JSON responses shaped as ``{"error", "message", "details"}``.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from users_api.api.errors import UsersApiError
from users_api.settings import get_settings

logger = logging.getLogger(__name__)


def _users_api_exception_handler(request: Request, exc: UsersApiError) -> JSONResponse:
    logger.debug(
        "%s %s rejected with %s: %s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def _request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed bodies and unparsable query values are bad requests."""
    return JSONResponse(
        status_code=400,
        content={
            "error": "BAD_REQUEST",
            "message": "Request could not be parsed",
            "details": {"errors": jsonable_encoder(exc.errors())},
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail, "details": {}},
        headers=getattr(exc, "headers", None),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is on."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    detail: Any = str(exc) if get_settings().debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": detail, "details": {}},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app."""
    app.add_exception_handler(UsersApiError, _users_api_exception_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
