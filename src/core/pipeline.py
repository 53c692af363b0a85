"""End-to-end diagram generation.

compose prompt -> oracle -> sanitize -> validate -> inject images

The oracle is injected so the pipeline can run against a deterministic
stub in tests.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from core.dialects import DiagramDialect, parse_dialect
from core.errors import GenerationFailure, InputValidationError
from core.image_injector import inject_images
from core.images import payload_size_kb
from core.prompts import compose_prompt
from core.sanitizer import sanitize, validate
from core.schemas import GenerationRequest, ImageTopicPair

if TYPE_CHECKING:
    from collections.abc import Iterable

    from core.oracle import DiagramOracle

logger = logging.getLogger(__name__)


def build_generation_request(
    topic: str | None,
    dialect: str | None,
    description: str | None = None,
    images: Iterable[tuple[str, str]] = (),
) -> GenerationRequest:
    """Validate raw inbound values into a :class:`GenerationRequest`.

    Parameters
    ----------
    topic : str | None
        Diagram subject; must be non-blank.
    dialect : str | None
        Dialect token; must name a known dialect.
    description : str | None
        Optional free-text context.
    images : Iterable[tuple[str, str]]
        ``(topic, payload)`` pairs in caller order.

    Returns
    -------
    GenerationRequest
        The validated request.

    Raises
    ------
    InputValidationError
        If the topic is blank, the dialect is unknown, or an image pair is invalid.

    """
    if not topic or not topic.strip():
        msg = "Topic is required"
        raise InputValidationError(msg)

    parsed_dialect = parse_dialect(dialect)
    try:
        pairs = tuple(ImageTopicPair(topic=t, payload=p) for t, p in images)
        return GenerationRequest(
            topic=topic,
            description=description,
            dialect=parsed_dialect,
            images=pairs,
        )
    except ValidationError as exc:
        msg = f"Invalid request: {exc.errors()[0]['msg']}"
        raise InputValidationError(msg) from exc


async def _call_oracle(oracle: DiagramOracle, prompt: str, timeout: float | None) -> str:
    try:
        if timeout is None:
            return await oracle(prompt)
        return await asyncio.wait_for(oracle(prompt), timeout=timeout)
    except GenerationFailure:
        raise
    except TimeoutError as exc:
        msg = f"no response within {timeout:g} seconds"
        raise GenerationFailure(msg) from exc
    except Exception as exc:
        logger.exception("Diagram oracle raised an unexpected error")
        raise GenerationFailure(str(exc) or type(exc).__name__) from exc


async def generate_diagram(
    request: GenerationRequest,
    oracle: DiagramOracle,
    *,
    timeout: float | None = None,
) -> str:
    """Generate the final diagram text for ``request``.

    Parameters
    ----------
    request : GenerationRequest
        The validated request.
    oracle : DiagramOracle
        Text-generation capability, called exactly once.
    timeout : float | None
        Seconds to wait for the oracle before giving up (default: no limit).

    Returns
    -------
    str
        Diagram text in the requested dialect, with images spliced into
        mind maps.

    Raises
    ------
    GenerationFailure
        If the oracle fails, times out, or returns nothing.
    SyntaxMismatch
        If the output is not in the requested dialect.

    """
    prompt = compose_prompt(request)
    logger.info(
        "Generating %s diagram for topic %r (%d prompt chars, %d images)",
        request.dialect.value,
        request.topic,
        len(prompt),
        len(request.images),
    )

    raw = await _call_oracle(oracle, prompt, timeout)
    if not raw or not raw.strip():
        msg = "empty response"
        raise GenerationFailure(msg)

    text = validate(sanitize(raw), request.dialect)

    if request.dialect is DiagramDialect.HIERARCHICAL_MAP and request.images:
        logger.debug(
            "Injecting %d images (%.1f KB)",
            len(request.images),
            sum(payload_size_kb(image.payload) for image in request.images),
        )
        text = inject_images(text, request.images)

    return text
