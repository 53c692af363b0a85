"""Error types raised by the diagram text pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class DiagramError(Exception):
    """Base class for all pipeline failures."""


class InputValidationError(DiagramError, ValueError):
    """Raised when a request is rejected before any generation attempt."""


class GenerationFailure(DiagramError, RuntimeError):
    """Raised when the text-generation service errors, times out or returns nothing.

    Attributes
    ----------
    cause : str
        The underlying message reported by the generation service.

    """

    def __init__(self, cause: str) -> None:
        self.cause = cause
        super().__init__(f"Diagram generation failed: {cause}")


class SyntaxMismatch(DiagramError, ValueError):
    """Raised when generated text does not start with a token of the requested dialect."""

    def __init__(self, dialect: str, accepted_prefixes: Sequence[str]) -> None:
        self.dialect = dialect
        self.accepted_prefixes = tuple(accepted_prefixes)
        super().__init__(
            f"Invalid {dialect} diagram syntax. "
            f"Expected to start with {' or '.join(self.accepted_prefixes)}",
        )
