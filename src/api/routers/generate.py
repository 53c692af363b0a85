"""Diagram generation endpoints."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from api.config import Settings, get_settings
from api.middleware import GENERATE_RATE_LIMIT, limiter
from api.models import GenerateMapRequest, GenerateMapResponse
from core.dialects import all_dialects
from core.errors import GenerationFailure, InputValidationError, SyntaxMismatch
from core.oracle import ClaudeOracle, DiagramOracle
from core.pipeline import build_generation_request, generate_diagram

logger = logging.getLogger(__name__)

router = APIRouter()

GENERATION_FAILED_MESSAGE = "Failed to generate diagram. Please try again."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred while generating the diagram"

GENERATE_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_200_OK: {"model": GenerateMapResponse, "description": "Diagram generated"},
    status.HTTP_400_BAD_REQUEST: {"model": GenerateMapResponse, "description": "Invalid topic, dialect or images"},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": GenerateMapResponse, "description": "Generation failed"},
}


def get_oracle(settings: Annotated[Settings, Depends(get_settings)]) -> DiagramOracle:
    """Provide the text-generation oracle for a request."""
    return ClaudeOracle(
        api_key=settings.claude_api_key,
        model=settings.claude_model,
        max_tokens=settings.max_output_tokens,
        timeout=settings.generation_timeout,
    )


def _respond(status_code: int, response: GenerateMapResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=response.to_content())


@router.get("/api/dialects")
async def list_dialects() -> JSONResponse:
    """List the supported dialects and the tokens a diagram of each may start with."""
    return JSONResponse({"dialects": all_dialects()})


@router.get("/api/generate/available")
async def generate_available(settings: Annotated[Settings, Depends(get_settings)]) -> JSONResponse:
    """Report whether diagram generation is configured.

    Returns
    -------
    JSONResponse
        JSON object with ``available`` boolean.

    """
    available = bool(settings.claude_api_key)
    if not available:
        logger.warning("Diagram generation not available: claude_api_key is empty")
    return JSONResponse({"available": available})


@router.post("/api/generate-map", responses=GENERATE_RESPONSES)
@limiter.limit(GENERATE_RATE_LIMIT)
async def api_generate_map(
    request: Request,
    map_request: GenerateMapRequest,
    oracle: Annotated[DiagramOracle, Depends(get_oracle)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> JSONResponse:
    """Generate a Mermaid diagram for a topic.

    Parameters
    ----------
    request : Request
        The incoming HTTP request (used by rate limiter).
    map_request : GenerateMapRequest
        Topic, optional description, dialect and images.
    oracle : DiagramOracle
        Text-generation capability.
    settings : Settings
        Application settings.

    Returns
    -------
    JSONResponse
        ``{"diagramText", "success"}`` on success, otherwise
        ``{"diagramText": "", "success": false, "error"}``.

    """
    uploads = map_request.images or []
    images = [image for image in uploads if image is not None and image.is_complete]
    if len(images) < len(uploads):
        logger.info("Ignoring %d incomplete image uploads", len(uploads) - len(images))

    try:
        if len(images) > settings.max_images:
            msg = f"Too many images: at most {settings.max_images} are allowed"
            raise InputValidationError(msg)

        generation_request = build_generation_request(
            topic=map_request.topic,
            dialect=map_request.dialect,
            description=map_request.description,
            images=[(image.topic, image.payload) for image in images],
        )
        diagram_text = await generate_diagram(
            generation_request,
            oracle,
            timeout=settings.generation_timeout,
        )

    except InputValidationError as exc:
        return _respond(status.HTTP_400_BAD_REQUEST, GenerateMapResponse.failure(str(exc)))

    except GenerationFailure as exc:
        logger.error("Diagram generation failed: %s", exc.cause)  # noqa: TRY400
        return _respond(status.HTTP_500_INTERNAL_SERVER_ERROR, GenerateMapResponse.failure(GENERATION_FAILED_MESSAGE))

    except SyntaxMismatch as exc:
        logger.warning("Rejected generated diagram: %s", exc)
        return _respond(status.HTTP_500_INTERNAL_SERVER_ERROR, GenerateMapResponse.failure(str(exc)))

    except Exception:
        logger.exception("Unexpected error in generate-map")
        return _respond(status.HTTP_500_INTERNAL_SERVER_ERROR, GenerateMapResponse.failure(UNEXPECTED_ERROR_MESSAGE))

    return _respond(status.HTTP_200_OK, GenerateMapResponse(diagram_text=diagram_text, success=True))
