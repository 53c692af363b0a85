"""Splice uploaded images into generated mind maps.

Injection runs in two phases:

1. **Marker phase** - every line of the form
   ``<indent><topic> [IMG]`` (topic compared case-insensitively) is
   replaced by the bare label followed by an image line indented two
   more spaces. Pairs are tried in caller order; the first pair whose
   topic matches a line consumes it.
2. **Substring phase** - only when the marker phase changed nothing.
   Each line whose trimmed, lower-cased text contains a pair's topic
   gets one image line beneath it (first matching pair wins).

Pairs that match nothing are dropped; injection never fails a request.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from core.dialects import DiagramDialect, accepted_prefixes
from core.images import embedded_image_reference
from core.prompts import IMAGE_MARKER

if TYPE_CHECKING:
    from collections.abc import Sequence

    from core.schemas import ImageTopicPair

logger = logging.getLogger(__name__)

INDENT_STEP = "  "

_HEADER_LINES = frozenset(p.lower() for p in accepted_prefixes(DiagramDialect.HIERARCHICAL_MAP))


def _marker_pattern(topic: str) -> re.Pattern[str]:
    return re.compile(
        rf"^(?P<indent>[ \t]*)(?P<label>{re.escape(topic)})[ \t]*{re.escape(IMAGE_MARKER)}\s*$",
        re.IGNORECASE,
    )


def _indentation(line: str) -> str:
    return line[: len(line) - len(line.lstrip())]


def replace_markers(text: str, images: Sequence[ImageTopicPair]) -> tuple[str, bool]:
    """Run the marker phase.

    Returns
    -------
    tuple[str, bool]
        The rewritten text and whether any line was replaced.

    """
    patterns = [(_marker_pattern(image.topic.strip()), image) for image in images]
    out: list[str] = []
    changed = False

    for line in text.split("\n"):
        for pattern, image in patterns:
            match = pattern.match(line)
            if match:
                indent = match.group("indent")
                out.append(indent + match.group("label"))
                out.append(indent + INDENT_STEP + embedded_image_reference(image.payload))
                changed = True
                break
        else:
            out.append(line)

    return "\n".join(out), changed


def inject_by_substring(text: str, images: Sequence[ImageTopicPair]) -> str:
    """Run the substring fallback phase.

    The bare ``mindmap`` header never receives an image.
    """
    topics = [(image.topic.strip().lower(), image) for image in images]
    out: list[str] = []

    for line in text.split("\n"):
        out.append(line)
        content = line.strip().lower()
        if not content or content in _HEADER_LINES:
            continue
        for topic, image in topics:
            if topic and topic in content:
                out.append(_indentation(line) + INDENT_STEP + embedded_image_reference(image.payload))
                break

    return "\n".join(out)


def inject_images(text: str, images: Sequence[ImageTopicPair]) -> str:
    """Place each image directly under the mind map node matching its topic.

    Parameters
    ----------
    text : str
        Validated mind map text.
    images : Sequence[ImageTopicPair]
        Images in caller order.

    Returns
    -------
    str
        The text with image lines inserted. Identical input always yields
        identical output.

    """
    if not images:
        return text

    result, changed = replace_markers(text, images)
    if changed:
        logger.debug("Placed images using %s markers", IMAGE_MARKER)
        return result

    logger.debug("No %s markers matched, falling back to substring matching", IMAGE_MARKER)
    return inject_by_substring(result, images)
