"""Text-generation adapter backed by Anthropic Claude."""

from __future__ import annotations

import logging
from typing import Protocol

import anthropic

from core.errors import GenerationFailure

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-sonnet-4-20250514"
DEFAULT_MAX_TOKENS = 4096

# Fixed so output stays varied without drifting away from the exemplar syntax
TEMPERATURE = 0.7


class DiagramOracle(Protocol):
    """Anything that turns a prompt into raw diagram text."""

    async def __call__(self, prompt: str) -> str:
        """Return the generated text for ``prompt``.

        Raises
        ------
        GenerationFailure
            If the text could not be generated.

        """
        ...


class ClaudeOracle:
    """Call the Claude Messages API once per prompt.

    Parameters
    ----------
    api_key : str
        Anthropic API key.
    model : str
        Model identifier (default: ``DEFAULT_MODEL``).
    max_tokens : int
        Upper bound on generated tokens (default: ``DEFAULT_MAX_TOKENS``).
    timeout : float | None
        Transport timeout in seconds handed to the client.

    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        timeout: float | None = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.max_tokens = max_tokens
        self.timeout = timeout

    async def __call__(self, prompt: str) -> str:
        """Generate diagram text for ``prompt``.

        Returns
        -------
        str
            The raw model output.

        Raises
        ------
        GenerationFailure
            If the API key is missing, the call fails, or the response is empty.

        """
        if not self.api_key:
            msg = "Claude API key is not configured"
            raise GenerationFailure(msg)

        # Retry policy belongs to the caller, so the SDK must not retry either
        client_kwargs: dict[str, object] = {"api_key": self.api_key, "max_retries": 0}
        if self.timeout is not None:
            client_kwargs["timeout"] = self.timeout

        try:
            async with anthropic.AsyncAnthropic(**client_kwargs) as client:
                response = await client.messages.create(
                    model=self.model,
                    max_tokens=self.max_tokens,
                    temperature=TEMPERATURE,
                    messages=[{"role": "user", "content": prompt}],
                )
        except anthropic.APIError as exc:
            logger.warning("Claude API call failed: %s", exc)
            raise GenerationFailure(str(exc)) from exc

        text = "".join(
            getattr(block, "text", "") for block in response.content if getattr(block, "type", "text") == "text"
        )
        if not text.strip():
            msg = "The model returned an empty response"
            raise GenerationFailure(msg)

        logger.info("Generated %d chars with %s", len(text), self.model)
        return text
