"""
Rate limiting for the Beacon query routes.

Uses slowapi, keyed on the client address. Limits are applied per
route with ``@limiter.limit(...)``.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

HTTP_429 = 429

limiter = Limiter(key_func=get_remote_address)


async def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a JSON response.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response naming the exceeded limit.
    """
    return JSONResponse(
        status_code=HTTP_429,
        content={"error": "Rate limit exceeded", "detail": str(exc.detail)},
    )
