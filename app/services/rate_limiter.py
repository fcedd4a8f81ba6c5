"""
Rate Limiting Service

Per-client request limits using slowapi.

Rate Limit Tiers:
=================
- Reads (list, get): settings.rate_limit_default
- Writes (create, update, delete): settings.rate_limit_write

Counters live in settings.rate_limit_storage_uri ("memory://" by default,
so each worker process counts on its own).
"""

import logging

from fastapi import Request, status
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.responses import JSONResponse

from app.config import get_settings
from app.schemas.response import error_response

logger = logging.getLogger(__name__)
settings = get_settings()


def get_client_ip(request: Request) -> str:
    """
    Get client IP address for rate limiting.

    Honours X-Forwarded-For and X-Real-IP set by a reverse proxy, falling
    back to the direct connection address.
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        # X-Forwarded-For can contain multiple IPs; first is the client
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()

    return get_remote_address(request)


def create_limiter() -> Limiter:
    """Create the limiter from the current settings."""
    limiter = Limiter(
        key_func=get_client_ip,
        default_limits=[settings.rate_limit_default],
        storage_uri=settings.rate_limit_storage_uri,
        strategy="fixed-window",
        enabled=settings.rate_limit_enabled,
    )

    logger.info(
        f"Rate limiter initialized - enabled: {settings.rate_limit_enabled}, "
        f"default: {settings.rate_limit_default}, write: {settings.rate_limit_write}"
    )

    return limiter


limiter = create_limiter()


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Answer 429 in the standard envelope with a Retry-After hint."""
    limit_detail = str(exc.detail)

    logger.warning(
        f"Rate limit exceeded for {get_client_ip(request)}: {limit_detail}"
    )

    return error_response(
        status.HTTP_429_TOO_MANY_REQUESTS,
        f"Too many requests: {limit_detail}",
        headers={"Retry-After": "60", "X-RateLimit-Limit": limit_detail},
    )
