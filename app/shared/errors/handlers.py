"""
Centralized error handlers for FastAPI.

Maps domain errors and request decoding failures to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses have the shape {"message": "..."}.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.domain.users.errors import DomainError, NotFoundError

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_422 = 422
HTTP_500 = 500

MESSAGE_BAD_REQUEST = "bad request"
MESSAGE_NOT_FOUND = "not found"
MESSAGE_UNPROCESSABLE = "unprocessable entity"
MESSAGE_INTERNAL = "internal server error"


def _error_response(status_code: int, message: str) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(status_code=status_code, content={"message": message})


def internal_error_response() -> JSONResponse:
    """Build the 500 response used for every unexpected failure."""
    return _error_response(HTTP_500, MESSAGE_INTERNAL)


def error_status(exc: DomainError) -> tuple[int, str]:
    """Return the (status code, message) pair for a domain error.

    This is the only place domain errors are translated to the wire.
    """
    if isinstance(exc, NotFoundError):
        return HTTP_404, MESSAGE_NOT_FOUND
    return HTTP_500, MESSAGE_INTERNAL


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(DomainError)
    async def handle_domain_error(
        _request: Request, exc: DomainError
    ) -> JSONResponse:
        """Translate a domain error into its status and message."""
        status_code, message = error_status(exc)
        if status_code >= HTTP_500:
            logger.error("Domain error: %s", exc.message)
        else:
            logger.warning("Domain error: %s", exc.message)
        return _error_response(status_code, message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle undecodable path parameters and request bodies.

        A bad path segment is a 400; a bad body is a 422.
        """
        errors = exc.errors()
        if any(err.get("loc", ("",))[0] == "path" for err in errors):
            logger.warning("Rejected request: malformed path parameter")
            return _error_response(HTTP_400, MESSAGE_BAD_REQUEST)
        logger.warning("Rejected request: %d body error(s)", len(errors))
        return _error_response(HTTP_422, MESSAGE_UNPROCESSABLE)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return internal_error_response()
