"""Rate limiting for the diagram generator API server."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import status
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from api.models import GenerateMapResponse

if TYPE_CHECKING:
    from fastapi import Request

logger = logging.getLogger(__name__)

GENERATE_RATE_LIMIT = "10/minute"

limiter = Limiter(key_func=get_remote_address)


async def rate_limit_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Answer throttled requests in the generate-map response shape.

    Raises
    ------
    exc
        If the exception is not a ``RateLimitExceeded`` error, it is re-raised.

    """
    if not isinstance(exc, RateLimitExceeded):
        raise exc

    logger.warning("Rate limit exceeded for %s on %s", get_remote_address(request), request.url.path)
    response = GenerateMapResponse.failure(
        f"Rate limit exceeded ({exc.detail}). Please wait a minute before trying again.",
    )
    return JSONResponse(status_code=status.HTTP_429_TOO_MANY_REQUESTS, content=response.to_content())
