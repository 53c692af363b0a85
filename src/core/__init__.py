"""Core module for the diagram generator.

Provides ``generate_diagram`` and ``build_generation_request``, the
entry-points of the diagram text pipeline.
"""

from core.pipeline import build_generation_request, generate_diagram

__all__ = ["build_generation_request", "generate_diagram"]
