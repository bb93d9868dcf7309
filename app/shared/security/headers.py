"""
Secure HTTP headers middleware.

Adds security-related headers to every response, including the
framework's own 404s and error responses.
No business logic. Pure cross-cutting concern.
"""

import logging
from collections.abc import Mapping

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from app.shared.errors.handlers import internal_error_response

logger = logging.getLogger(__name__)

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Cache-Control": "no-store",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that sets a fixed set of headers on every response.

    The responses carry user records, so they are marked non-cacheable.
    Unhandled exceptions become the standard 500 body here, since the
    framework's server-error handler runs outside this middleware.
    """

    def __init__(
        self, app: ASGIApp, headers: Mapping[str, str] | None = None
    ) -> None:
        super().__init__(app)
        self._headers = dict(SECURE_HEADERS if headers is None else headers)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Process request and add security headers to response."""
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception("Unexpected error: %s", type(exc).__name__)
            response = internal_error_response()
        for header_name, header_value in self._headers.items():
            response.headers[header_name] = header_value
        return response
