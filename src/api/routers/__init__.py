"""Module containing the routers for the FastAPI application."""

from api.routers.generate import router as generate
from api.routers.health import router as health

__all__ = ["generate", "health"]
