"""Grammar registry for the supported Mermaid diagram dialects.

Maps every dialect to the leading tokens a valid document may start with
and to the syntax exemplar shown to the model when prompting.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from core.errors import InputValidationError


class DiagramDialect(StrEnum):
    """Diagram grammars the pipeline can produce."""

    HIERARCHICAL_MAP = "hierarchical-map"
    CONCEPT_GRAPH = "concept-graph"
    FLOWCHART = "flowchart"
    SEQUENCE = "sequence"

    @classmethod
    def _missing_(cls, value: object) -> DiagramDialect | None:
        if not isinstance(value, str):
            return None
        key = value.strip().lower()
        for member in cls:
            if member.value == key:
                return member
        return _LEGACY_ALIASES.get(key)


# Tokens used by the first version of the web client
_LEGACY_ALIASES: dict[str, DiagramDialect] = {
    "mindmap": DiagramDialect.HIERARCHICAL_MAP,
    "concept": DiagramDialect.CONCEPT_GRAPH,
}


@dataclass(frozen=True)
class Grammar:
    """Static grammar entry for one dialect."""

    prefixes: tuple[str, ...]
    guidance: str
    exemplar: str


_GRAMMARS: dict[DiagramDialect, Grammar] = {
    DiagramDialect.HIERARCHICAL_MAP: Grammar(
        prefixes=("mindmap",),
        guidance='Use Mermaid mindmap syntax. Start with "mindmap" and use proper indentation:',
        exemplar=(
            "mindmap\n"
            "  root((Central Topic))\n"
            "    Branch 1\n"
            "      Sub-topic 1.1\n"
            "      Sub-topic 1.2\n"
            "    Branch 2"
        ),
    ),
    DiagramDialect.CONCEPT_GRAPH: Grammar(
        prefixes=("graph TD", "graph LR", "graph"),
        guidance="Use Mermaid graph TD syntax for concept maps with labeled relationships:",
        exemplar=(
            "graph TD\n"
            "    A[Concept 1] -->|relationship| B[Concept 2]\n"
            "    B -->|another relationship| C[Concept 3]"
        ),
    ),
    DiagramDialect.FLOWCHART: Grammar(
        prefixes=("flowchart TD", "flowchart LR", "flowchart"),
        guidance="Use Mermaid flowchart syntax:",
        exemplar=(
            "flowchart TD\n"
            "    Start([Start]) --> Process[Process Step]\n"
            "    Process --> Decision{Decision?}\n"
            "    Decision -->|Yes| End([End])\n"
            "    Decision -->|No| Process"
        ),
    ),
    DiagramDialect.SEQUENCE: Grammar(
        prefixes=("sequenceDiagram",),
        guidance="Use Mermaid sequence diagram syntax:",
        exemplar=(
            "sequenceDiagram\n"
            "    participant A\n"
            "    participant B\n"
            "    A->>B: Message\n"
            "    B-->>A: Response"
        ),
    ),
}


def exemplar_for(dialect: DiagramDialect) -> str:
    """Return the syntax exemplar embedded in prompts for ``dialect``."""
    return _GRAMMARS[dialect].exemplar


def guidance_for(dialect: DiagramDialect) -> str:
    """Return the one-line syntax instruction that precedes the exemplar."""
    return _GRAMMARS[dialect].guidance


def accepted_prefixes(dialect: DiagramDialect) -> list[str]:
    """Return the leading tokens a document of ``dialect`` may start with.

    Prefixes are ordered from most to least specific and are compared
    case-insensitively against the start of the trimmed text.
    """
    return list(_GRAMMARS[dialect].prefixes)


def parse_dialect(token: str | None) -> DiagramDialect:
    """Parse a wire token into a :class:`DiagramDialect`.

    Parameters
    ----------
    token : str | None
        The dialect token received from the client.

    Returns
    -------
    DiagramDialect
        The matching dialect.

    Raises
    ------
    InputValidationError
        If the token is missing or does not name a known dialect.

    """
    if not token or not token.strip():
        msg = "Diagram dialect is required"
        raise InputValidationError(msg)
    try:
        return DiagramDialect(token.strip())
    except ValueError as exc:
        allowed = ", ".join(d.value for d in DiagramDialect)
        msg = f"Invalid diagram dialect: {token!r} (expected one of {allowed})"
        raise InputValidationError(msg) from exc


def all_dialects() -> list[dict[str, object]]:
    """Describe every dialect with its accepted prefixes."""
    return [{"dialect": d.value, "prefixes": accepted_prefixes(d)} for d in DiagramDialect]
