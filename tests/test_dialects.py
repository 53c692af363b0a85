"""Tests for the dialect grammar registry."""

from __future__ import annotations

import pytest

from core.dialects import (
    DiagramDialect,
    accepted_prefixes,
    all_dialects,
    exemplar_for,
    guidance_for,
    parse_dialect,
)
from core.errors import InputValidationError
from core.sanitizer import sanitize, validate


class TestDiagramDialect:
    """Tests for the DiagramDialect enum."""

    def test_enum_values(self) -> None:
        """Dialect string values should match the wire tokens."""
        assert DiagramDialect.HIERARCHICAL_MAP.value == "hierarchical-map"
        assert DiagramDialect.CONCEPT_GRAPH.value == "concept-graph"
        assert DiagramDialect.FLOWCHART.value == "flowchart"
        assert DiagramDialect.SEQUENCE.value == "sequence"

    def test_enum_count(self) -> None:
        """There should be exactly 4 dialects."""
        assert len(DiagramDialect) == 4

    def test_legacy_aliases(self) -> None:
        """Tokens from the first web client still resolve."""
        assert DiagramDialect("mindmap") is DiagramDialect.HIERARCHICAL_MAP
        assert DiagramDialect("concept") is DiagramDialect.CONCEPT_GRAPH

    def test_case_insensitive_lookup(self) -> None:
        assert DiagramDialect("Flowchart") is DiagramDialect.FLOWCHART


class TestRegistry:
    """Tests for prefix and exemplar lookup."""

    @pytest.mark.parametrize("dialect", list(DiagramDialect))
    def test_exemplars_pass_their_own_validation(self, dialect: DiagramDialect) -> None:
        """Every exemplar must sanitize and validate as its own dialect."""
        text = sanitize(exemplar_for(dialect))
        assert validate(text, dialect) == text

    def test_concept_graph_prefixes_most_specific_first(self) -> None:
        assert accepted_prefixes(DiagramDialect.CONCEPT_GRAPH) == ["graph TD", "graph LR", "graph"]

    def test_flowchart_prefixes(self) -> None:
        assert accepted_prefixes(DiagramDialect.FLOWCHART) == ["flowchart TD", "flowchart LR", "flowchart"]

    def test_single_prefix_dialects(self) -> None:
        assert accepted_prefixes(DiagramDialect.HIERARCHICAL_MAP) == ["mindmap"]
        assert accepted_prefixes(DiagramDialect.SEQUENCE) == ["sequenceDiagram"]

    def test_prefix_list_is_a_copy(self) -> None:
        """Mutating the returned list must not affect the registry."""
        prefixes = accepted_prefixes(DiagramDialect.SEQUENCE)
        prefixes.append("graph")
        assert accepted_prefixes(DiagramDialect.SEQUENCE) == ["sequenceDiagram"]

    def test_guidance_mentions_mermaid(self) -> None:
        for dialect in DiagramDialect:
            assert "Mermaid" in guidance_for(dialect)

    def test_all_dialects(self) -> None:
        described = all_dialects()
        assert [d["dialect"] for d in described] == [d.value for d in DiagramDialect]
        assert described[0]["prefixes"] == ["mindmap"]


class TestParseDialect:
    """Tests for parse_dialect."""

    def test_parses_wire_token(self) -> None:
        assert parse_dialect("concept-graph") is DiagramDialect.CONCEPT_GRAPH

    def test_strips_whitespace(self) -> None:
        assert parse_dialect("  sequence ") is DiagramDialect.SEQUENCE

    @pytest.mark.parametrize("token", [None, "", "   "])
    def test_missing_token(self, token: str | None) -> None:
        with pytest.raises(InputValidationError, match="required"):
            parse_dialect(token)

    def test_unknown_token(self) -> None:
        with pytest.raises(InputValidationError, match="Invalid diagram dialect"):
            parse_dialect("gantt")
