"""
Request Rate Limiting

One limit shared by every page and form, counted per client address.
Static assets are served before the limiter and are not counted.

Author: El Sabor Web Team
Version: 1.0.0
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from elsabor.core.config import get_settings

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Demasiadas peticiones, inténtalo más tarde."

settings = get_settings()

limiter = Limiter(
    key_func=get_remote_address,
    application_limits=[settings.rate_limit],
    enabled=settings.rate_limit_enabled,
)


def rate_limit_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """Answer an exceeded limit with a plain-text 429."""
    logger.warning(f"Rate limit exceeded for {get_remote_address(request)} on {request.url.path}")
    return PlainTextResponse(RATE_LIMIT_MESSAGE, status_code=429)


def setup_rate_limiter(app: FastAPI) -> None:
    """
    Setup rate limiting for the FastAPI application.
    """
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)
    app.add_middleware(SlowAPIMiddleware)
