"""
Failure taxonomy and the single classifier that maps failures to HTTP responses.

Every failure is one of:
- BadRequest  (400): malformed input (non-numeric id, missing body field, bad enum)
- NotFound    (404): well-formed reference to a missing resource, or unmatched route
- ServerError (500): anything unclassified

Services raise the typed errors directly; library exceptions (asyncpg, FastAPI
request validation, Starlette routing) bubble up untouched and are classified here.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# Foreign keys pointing at users mean "unknown username" (404); the rest are 400.
_USER_REFERENCE_MARKERS = ("author", "username", "users")


class ApiError(Exception):
    status_code = 500
    default_msg = "Server Error!"

    def __init__(self, msg: str | None = None, *, log_detail: str | None = None):
        self.msg = msg or self.default_msg
        self.log_detail = log_detail
        super().__init__(log_detail or self.msg)


class BadRequest(ApiError):
    status_code = 400
    default_msg = "Bad Request"


class NotFound(ApiError):
    status_code = 404
    default_msg = "Not Found"


class ServerError(ApiError):
    status_code = 500
    default_msg = "Server Error!"


def _references_users(exc: asyncpg.ForeignKeyViolationError) -> bool:
    haystack = " ".join(
        str(part or "")
        for part in (
            getattr(exc, "constraint_name", None),
            getattr(exc, "detail", None),
            getattr(exc, "message", None),
        )
    ).lower()
    return any(marker in haystack for marker in _USER_REFERENCE_MARKERS)


def classify(exc: Exception) -> ApiError:
    """
    Reduce any failure to exactly one of BadRequest / NotFound / ServerError.
    """
    if isinstance(exc, ApiError):
        return exc

    if isinstance(exc, asyncpg.ForeignKeyViolationError):
        if _references_users(exc):
            return NotFound(log_detail=str(exc))
        return BadRequest(log_detail=str(exc))

    if isinstance(exc, (asyncpg.DataError, asyncpg.NotNullViolationError)):
        return BadRequest(log_detail=str(exc))

    if isinstance(exc, RequestValidationError):
        return BadRequest(log_detail=str(exc.errors()))

    if isinstance(exc, StarletteHTTPException):
        if exc.status_code in (404, 405):
            return NotFound()
        error = ApiError(str(exc.detail))
        error.status_code = exc.status_code
        return error

    return ServerError(log_detail=repr(exc))


def to_response(error: ApiError) -> JSONResponse:
    return JSONResponse(status_code=error.status_code, content={"msg": error.msg})


async def api_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = classify(exc)
    if error.status_code >= 500:
        logger.error(
            "request_failed method=%s path=%s status=%s detail=%s",
            request.method,
            request.url.path,
            error.status_code,
            error.log_detail or error.msg,
            exc_info=None if isinstance(exc, ApiError) else exc,
        )
    else:
        logger.info(
            "request_rejected method=%s path=%s status=%s detail=%s",
            request.method,
            request.url.path,
            error.status_code,
            error.log_detail or error.msg,
        )
    return to_response(error)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = classify(exc)
    if error.status_code >= 500:
        logger.exception(
            "request_crashed method=%s path=%s",
            request.method,
            request.url.path,
            exc_info=exc,
        )
    return to_response(error)
