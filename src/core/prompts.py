"""Prompt construction for diagram generation.

The prompt is assembled from the request and the grammar registry only,
so the same request always produces the same prompt text.

Layout of the composed prompt:

    role line
    Topic / Description / Diagram Type
    dialect guidance + exemplar
    image topics and marker instructions (mind maps with images only)
    IMPORTANT RULES
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.dialects import DiagramDialect, exemplar_for, guidance_for

if TYPE_CHECKING:
    from core.schemas import GenerationRequest

# Literal flag the model appends to node labels that should receive an image
IMAGE_MARKER = "[IMG]"

ROLE_PROMPT = "You are a diagram expert. Create a Mermaid diagram based on the following information:"

IMAGE_MARKER_PROMPT = """
The user has provided images for the following topics:
{topic_list}

If the mindmap contains a node whose label matches one of these topics, write the node label exactly as listed and append the marker {marker} after it, on the same line.
Example: `    Photosynthesis {marker}`
Do NOT add {marker} to any other node.
"""

RULES_PROMPT = """
IMPORTANT RULES:
1. Return ONLY the Mermaid code, no explanations or markdown code blocks
2. Do not wrap the code in ``` or ```mermaid or any other formatting
3. Ensure the syntax is valid Mermaid {dialect} syntax
4. Keep it clear, well-structured, and easy to understand
5. For mind maps, use proper indentation (2 spaces per level)
6. Make sure all connections and relationships make logical sense

Generate the Mermaid diagram now:"""


def _image_section(topics: list[str]) -> str:
    topic_list = "\n".join(f"- {topic}" for topic in topics)
    return IMAGE_MARKER_PROMPT.format(topic_list=topic_list, marker=IMAGE_MARKER)


def compose_prompt(request: GenerationRequest) -> str:
    """Build the instruction sent to the generation service.

    Parameters
    ----------
    request : GenerationRequest
        The validated generation request.

    Returns
    -------
    str
        The full prompt text.

    """
    parts = [ROLE_PROMPT, "", f"Topic: {request.topic}"]
    if request.description:
        parts.append(f"Description: {request.description}")
    parts += [
        "",
        f"Diagram Type: {request.dialect.value}",
        "",
        guidance_for(request.dialect),
        exemplar_for(request.dialect),
    ]

    if request.dialect is DiagramDialect.HIERARCHICAL_MAP and request.images:
        parts.append(_image_section(request.image_topics))

    parts.append(RULES_PROMPT.format(dialect=request.dialect.value))
    return "\n".join(parts)
