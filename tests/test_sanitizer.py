"""Unit tests for sanitize and validate."""

from __future__ import annotations

import pytest

from core.dialects import DiagramDialect
from core.errors import SyntaxMismatch
from core.sanitizer import sanitize, validate

# ---------------------------------------------------------------------------
# sanitize
# ---------------------------------------------------------------------------


class TestSanitize:
    """Tests for every clean-up step inside sanitize."""

    # 1. Tagged fences
    def test_removes_mermaid_fence(self) -> None:
        assert sanitize("```mermaid\nmindmap\n  root((A))\n```") == "mindmap\n  root((A))"

    def test_removes_dialect_hint_fence(self) -> None:
        assert sanitize("```graph\ngraph TD\n  A-->B\n```") == "graph TD\n  A-->B"

    def test_removes_fence_with_space_before_hint(self) -> None:
        assert sanitize("``` mermaid\nsequenceDiagram\n```") == "sequenceDiagram"

    # 2. Bare fences
    def test_removes_bare_fences(self) -> None:
        assert sanitize("```\nflowchart TD\n  A-->B\n```") == "flowchart TD\n  A-->B"

    def test_removes_fences_in_the_middle(self) -> None:
        assert sanitize("graph TD\n```\n  A-->B") == "graph TD\n  A-->B"

    def test_removes_long_fences(self) -> None:
        assert sanitize("````mermaid\nmindmap\n````") == "mindmap"

    # 3. Trimming
    def test_strips_leading_trailing_whitespace(self) -> None:
        result = sanitize("\n\n  graph TD\n  A --> B  \n\n")
        assert result == "graph TD\n  A --> B"

    # 4. Blank line runs
    def test_collapses_blank_line_runs(self) -> None:
        assert sanitize("graph TD\n\n\n\n  A-->B") == "graph TD\n\n  A-->B"

    def test_collapses_whitespace_only_blank_lines(self) -> None:
        assert sanitize("graph TD\n  \n\t\n  \n  A-->B") == "graph TD\n\n  A-->B"

    def test_keeps_single_blank_line(self) -> None:
        assert sanitize("graph TD\n\n  A-->B") == "graph TD\n\n  A-->B"

    def test_preserves_inner_indentation(self) -> None:
        text = "mindmap\n  root((A))\n    B\n      C"
        assert sanitize(text) == text

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "```",
            "``````",
            "```mermaid",
            "x```mermaid\n``",
            "```\n\n\n```mermaid\n\n\nmindmap\n\n\n\n  A\n```\n",
            "   ```graph\ngraph LR\n```  \n\n",
            "`` ``` `",
        ],
    )
    def test_idempotent(self, raw: str) -> None:
        once = sanitize(raw)
        assert sanitize(once) == once


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------


class TestValidate:
    """Tests for the leading-token dialect check."""

    def test_returns_text_unchanged(self) -> None:
        text = "flowchart TD\n  A-->B"
        assert validate(text, DiagramDialect.FLOWCHART) == text

    def test_case_insensitive(self) -> None:
        assert validate("FLOWCHART lr\n  A-->B", DiagramDialect.FLOWCHART)
        assert validate("sequencediagram\n  A->>B: hi", DiagramDialect.SEQUENCE)
        assert validate("MindMap\n  root((x))", DiagramDialect.HIERARCHICAL_MAP)

    def test_bare_graph_accepted(self) -> None:
        assert validate("graph\n  A-->B", DiagramDialect.CONCEPT_GRAPH)

    def test_graph_with_other_direction_accepted(self) -> None:
        """Direction suffixes are not inspected beyond the prefix."""
        assert validate("graph BT\n  A-->B", DiagramDialect.CONCEPT_GRAPH)

    def test_wrong_dialect_rejected(self) -> None:
        with pytest.raises(SyntaxMismatch):
            validate("graph TD\n  A-->B", DiagramDialect.SEQUENCE)

    def test_prose_rejected(self) -> None:
        with pytest.raises(SyntaxMismatch):
            validate("Here is your diagram:\nmindmap", DiagramDialect.HIERARCHICAL_MAP)

    def test_empty_rejected(self) -> None:
        with pytest.raises(SyntaxMismatch):
            validate("", DiagramDialect.FLOWCHART)

    def test_error_names_dialect_and_prefixes(self) -> None:
        with pytest.raises(SyntaxMismatch) as exc_info:
            validate("sequenceDiagram\n  A->>B: hi", DiagramDialect.CONCEPT_GRAPH)

        err = exc_info.value
        assert err.dialect == "concept-graph"
        assert err.accepted_prefixes == ("graph TD", "graph LR", "graph")
        assert str(err) == (
            "Invalid concept-graph diagram syntax. Expected to start with graph TD or graph LR or graph"
        )

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="sequenceDiagram"):
            validate("mindmap", DiagramDialect.SEQUENCE)
