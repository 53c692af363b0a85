"""Health check endpoint for the diagram generator API."""

from typing import Annotated

from fastapi import APIRouter, Depends

from api.config import Settings, get_settings

router = APIRouter()


@router.get("/health")
async def health_check(settings: Annotated[Settings, Depends(get_settings)]) -> dict[str, str]:
    """Report liveness and whether a generation key is configured."""
    return {
        "status": "ok",
        "generation": "configured" if settings.claude_api_key else "unconfigured",
    }
