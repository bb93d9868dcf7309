"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client rate limit on every route.
A limiter is built per application so separate app instances do not
share counters.
"""

from fastapi import Request
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.responses import JSONResponse

from app.core.config import Settings

HTTP_429 = 429


def build_limiter(settings: Settings) -> Limiter:
    """Build a Limiter from application settings.

    Args:
        settings: Settings providing the default limit and on/off switch.

    Returns:
        A Limiter keyed on the client address.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
    )


async def enforce_rate_limit(request: Request) -> None:
    """Count the request against the application's default limit.

    Installed as a router dependency, so the matched endpoint is taken
    from the request scope rather than looked up in ``app.routes``.

    Raises:
        RateLimitExceeded: When the client is over its limit.
    """
    limiter: Limiter = request.app.state.limiter
    if not limiter.enabled:
        return
    # in_middleware=True selects the default limits for undecorated routes
    limiter._check_request_limit(request, request.scope.get("endpoint"), True)


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response in the service's error shape.
    """
    return JSONResponse(
        status_code=HTTP_429,
        content={"message": "rate limit exceeded"},
    )
