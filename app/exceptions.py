# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Error responses are plain text; successful responses are JSON.
# Store failures become HTTP 500 and never stop the process.
# =============================================================================

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from lib.user_store import StoreError

logger = logging.getLogger(__name__)


class UsersApiException(Exception):
    """
    Base exception for the Users API.

    All custom exceptions inherit from this class. The message is sent
    to the client as the plain-text response body.
    """

    def __init__(
        self,
        message: str,
        code: str = "USERS_API_ERROR",
        status_code: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


# =============================================================================
# User Exceptions
# =============================================================================

class UserNotFoundError(UsersApiException):
    """Raised when a user ID doesn't exist."""

    def __init__(self, user_id: int, message: str | None = None):
        super().__init__(
            message=message or f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            status_code=404,
        )
        self.user_id = user_id


# =============================================================================
# Request Exceptions
# =============================================================================

class InvalidJsonError(UsersApiException):
    """Raised when a request body is not valid JSON."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Invalid JSON body: {error}",
            code="INVALID_JSON",
            status_code=400,
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def users_api_exception_handler(
    request: Request,
    exc: UsersApiException
) -> PlainTextResponse:
    """Convert UsersApiException to a plain-text response."""
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> PlainTextResponse:
    """
    Handle framework HTTP errors (unknown route, wrong method).

    Keeps their status and headers (e.g. Allow on 405) but sends the
    detail as plain text like every other error.
    """
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def store_exception_handler(
    request: Request,
    exc: StoreError
) -> PlainTextResponse:
    """
    Handle database failures.

    Logs the full error and returns a generic 500 so driver details
    don't leak to clients.
    """
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return PlainTextResponse("Internal server error", status_code=500)


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> PlainTextResponse:
    """
    Handle request validation errors.

    A body that isn't valid JSON (including an empty body) is a 400.
    Well-formed input of the wrong shape (non-string field, non-object
    body, non-integer id) is a 422.
    """
    errors = exc.errors()

    for error in errors:
        if error.get("type") == "json_invalid":
            ctx = error.get("ctx") or {}
            return await users_api_exception_handler(
                request,
                InvalidJsonError(str(ctx.get("error", "malformed body"))),
            )
        if error.get("type") == "missing" and tuple(error.get("loc", ())) == ("body",):
            return await users_api_exception_handler(request, InvalidJsonError("empty body"))

    problems = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}"
        for error in errors
    )
    return PlainTextResponse(f"Validation error: {problems}", status_code=422)
