"""Clean-up and dialect checks for raw model output.

Models often wrap diagram code in markdown fences, pad it with blank
lines, or drift into a different diagram type. ``sanitize`` removes the
wrapping and ``validate`` rejects text that is not in the requested
dialect.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from core.dialects import accepted_prefixes
from core.errors import SyntaxMismatch

if TYPE_CHECKING:
    from core.dialects import DiagramDialect

logger = logging.getLogger(__name__)

# ```mermaid, ```graph, ``` mindmap ... on the same line as the fence
_TAGGED_FENCE_RE = re.compile(r"`{3,}[ \t]*[A-Za-z][\w.+-]*[ \t]*\n?")
_BARE_FENCE_RE = re.compile(r"`{3,}\n?")
_BLANK_RUN_RE = re.compile(r"\n[ \t]*\n(?:[ \t]*\n)+")


def sanitize(raw: str) -> str:
    """Strip fences and redundant whitespace from generated text.

    Tagged fences are removed first, then bare ones, then the text is
    trimmed and runs of blank lines collapse to a single blank line.
    The function is idempotent.

    Parameters
    ----------
    raw : str
        The unprocessed model output.

    Returns
    -------
    str
        The cleaned text, which may still be in the wrong dialect.

    """
    text = _TAGGED_FENCE_RE.sub("", raw)
    text = _BARE_FENCE_RE.sub("", text)
    text = text.strip()
    return _BLANK_RUN_RE.sub("\n\n", text)


def validate(text: str, dialect: DiagramDialect) -> str:
    """Check that ``text`` starts with one of the dialect's leading tokens.

    Only the start of the text is inspected; the renderer owns full
    grammar checking.

    Parameters
    ----------
    text : str
        Sanitized diagram text.
    dialect : DiagramDialect
        The dialect that was requested.

    Returns
    -------
    str
        ``text`` unchanged.

    Raises
    ------
    SyntaxMismatch
        If no accepted prefix matches, case-insensitively.

    """
    prefixes = accepted_prefixes(dialect)
    head = text.strip().lower()
    for prefix in prefixes:
        if head.startswith(prefix.lower()):
            return text

    logger.warning("Generated text does not look like %s: %r", dialect.value, text[:40])
    raise SyntaxMismatch(dialect.value, prefixes)
