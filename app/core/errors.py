"""Error taxonomy and its mapping to HTTP responses.

Every failure a handler can raise is an ``ApiError`` subclass carrying its
own status code and a plaintext detail.  ``register_exception_handlers``
turns them (plus routing errors, request-shape validation failures and
anything unexpected)
into plaintext responses so that no request failure escapes the app.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import PlainTextResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = 500

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class Unauthorized(ApiError):
    """Missing or invalid credentials (bearer token or admin secrets)."""

    status_code = 401

    NO_TOKEN = "Unauthorized: No token provided"
    INVALID_TOKEN = "Unauthorized: Invalid token"
    ADMIN_REQUIRED = "Unauthorized: Admin name and password are required"
    INVALID_ADMIN = "Unauthorized: Invalid admin credentials"


class StoreError(ApiError):
    """A document store operation failed.

    The detail is ``"<context>: <underlying message>"``.
    """

    status_code = 400

    def __init__(self, context: str, message: str) -> None:
        super().__init__(f"{context}: {message}")
        self.context = context
        self.message = message


class CandidateNotFound(StoreError):
    """An update targeted an identifier that does not resolve."""

    status_code = 404

    def __init__(self, context: str, candidate_id: str) -> None:
        super().__init__(context, f"No candidate found with ID: {candidate_id}")
        self.candidate_id = candidate_id


def _summarize_validation_errors(exc: RequestValidationError) -> str:
    parts: list[str] = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or "malformed body"


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error-to-response mapping on *app*."""

    @app.exception_handler(ApiError)
    async def handle_api_error(request: Request, exc: ApiError) -> PlainTextResponse:
        logger.info(
            "request_failed",
            extra={
                "path": request.url.path,
                "status_code": exc.status_code,
                "error_type": type(exc).__name__,
            },
        )
        return PlainTextResponse(exc.detail, status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(
        request: Request, exc: StarletteHTTPException
    ) -> PlainTextResponse:
        # unmatched routes (404) and wrong methods (405) raised by the router
        return PlainTextResponse(
            str(exc.detail), status_code=exc.status_code, headers=exc.headers
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> PlainTextResponse:
        return PlainTextResponse(
            f"Invalid request payload: {_summarize_validation_errors(exc)}",
            status_code=400,
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> PlainTextResponse:
        logger.error(
            "unhandled_exception",
            exc_info=exc,
            extra={"path": request.url.path},
        )
        return PlainTextResponse("Internal Server Error", status_code=500)
