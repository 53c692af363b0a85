"""Module containing the schemas for the diagram pipeline."""

from core.schemas.generation import GenerationRequest, ImageTopicPair

__all__ = ["GenerationRequest", "ImageTopicPair"]
