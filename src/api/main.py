"""Main module for the FastAPI application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from starlette.middleware.base import BaseHTTPMiddleware

from api.config import get_settings
from api.middleware import limiter, rate_limit_exception_handler
from api.routers import generate, health

logger = logging.getLogger(__name__)

# Load settings
settings = get_settings()

# Initialize the FastAPI application
app = FastAPI(
    title="MMAP",
    description="Turn a topic and optional images into Mermaid diagrams",
    debug=settings.debug,
    docs_url=None,
    redoc_url=None,
)
app.state.limiter = limiter

# Register the custom exception handler for rate limits
app.add_exception_handler(RateLimitExceeded, rate_limit_exception_handler)


# ---------------------------------------------------------------------------
# Security headers middleware
# ---------------------------------------------------------------------------
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses."""

    async def dispatch(self, request: Request, call_next) -> Response:  # noqa: ANN001
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        if request.url.scheme == "https":
            response.headers["Strict-Transport-Security"] = (
                "max-age=31536000; includeSubDomains"
            )
        return response


app.add_middleware(SecurityHeadersMiddleware)

# CORS middleware
allowed_origins = [f"https://{h.strip()}" for h in settings.allowed_hosts.split(",") if h.strip()]
allowed_origins.extend(["http://localhost:3000", "http://localhost:8080", "http://127.0.0.1:8080"])

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(health)
app.include_router(generate)
