"""
Rate limiting middleware using slowapi.
Each chat or evaluate call costs one model request, so both are limited per client.
"""

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from archcoach.config import get_settings

settings = get_settings()


def get_client_identifier(request: Request) -> str:
    """Rate-limit key: the caller's IP address (there are no user accounts)."""
    return f"ip:{get_remote_address(request)}"


limiter = Limiter(
    key_func=get_client_identifier,
    enabled=settings.rate_limit_enabled,
)


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> Response:
    """Custom handler for rate limit exceeded errors."""
    limit_value = str(exc.detail) if hasattr(exc, "detail") else "Rate limit exceeded"

    return JSONResponse(
        status_code=429,
        content={
            "error": "rate_limit_exceeded",
            "message": "Too many requests. Please slow down.",
            "detail": limit_value,
        },
        headers={"X-RateLimit-Limit": limit_value},
    )


def chat_limit() -> str:
    """Get rate limit string for the chat endpoint."""
    return f"{settings.rate_limit_chat_per_minute}/minute"


def evaluate_limit() -> str:
    """Get rate limit string for the evaluate endpoint."""
    return f"{settings.rate_limit_evaluate_per_hour}/hour"
