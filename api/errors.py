"""
API error taxonomy and the handlers that render it as JSON.

Every failure a route can surface is one of the ``ApiError`` subclasses
below.  Handlers translate them to ``{"error": message}`` bodies with the
matching status code.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base for errors that map straight onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, details: Any = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class ValidationFailure(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Missing fields"


class DuplicateCredential(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Username or email already exists"


class InvalidCredentials(ApiError):
    # Unknown user and wrong password share this message on purpose.
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid credentials"


class Unauthenticated(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authorization header is missing"


class Forbidden(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Invalid token"


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ServiceUnavailable(ApiError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_message = "Service unavailable"


class InternalFailure(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"


def error_body(exc: ApiError) -> dict:
    body: dict = {"error": exc.message}
    if exc.details is not None:
        body["details"] = exc.details
    return body


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the ``ApiError`` and request-validation handlers."""

    @app.exception_handler(ApiError)
    async def handle_api_error(request: Request, exc: ApiError):
        if exc.status_code >= 500:
            logger.warning("%s %s → %d %s", request.method, request.url.path, exc.status_code, exc.message)
        return JSONResponse(status_code=exc.status_code, content=error_body(exc))

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        logger.debug("Rejected body for %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=ValidationFailure.status_code,
            content={"error": ValidationFailure.default_message},
        )
