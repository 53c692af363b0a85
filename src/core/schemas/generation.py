"""Models describing a single diagram generation request."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.dialects import DiagramDialect  # noqa: TC001 needed at runtime by pydantic


class ImageTopicPair(BaseModel):
    """An embedded image and the diagram topic it illustrates.

    Attributes
    ----------
    topic : str
        Label of the node the image belongs under. Duplicates are allowed.
    payload : str
        Self-describing embedded image, usually a ``data:`` URI.

    """

    model_config = ConfigDict(frozen=True)

    topic: str
    payload: str

    @field_validator("topic")
    @classmethod
    def validate_topic(cls, v: str) -> str:
        """Trim the topic and reject blank values."""
        v = v.strip()
        if not v:
            err = "image topic cannot be empty"
            raise ValueError(err)
        return v


class GenerationRequest(BaseModel):
    """Validated input to the diagram pipeline.

    Attributes
    ----------
    topic : str
        Subject of the diagram, trimmed and non-empty.
    description : str | None
        Optional free-text context, trimmed (``None`` when blank).
    dialect : DiagramDialect
        Requested output grammar.
    images : tuple[ImageTopicPair, ...]
        Images to splice into hierarchical maps, in caller order.

    """

    model_config = ConfigDict(frozen=True)

    topic: str
    description: str | None = None
    dialect: DiagramDialect
    images: tuple[ImageTopicPair, ...] = Field(default_factory=tuple)

    @field_validator("topic")
    @classmethod
    def validate_topic(cls, v: str) -> str:
        """Trim the topic and reject blank values."""
        v = v.strip()
        if not v:
            err = "topic cannot be empty"
            raise ValueError(err)
        return v

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str | None) -> str | None:
        """Normalise blank descriptions to ``None``."""
        if v is None:
            return None
        return v.strip() or None

    @property
    def image_topics(self) -> list[str]:
        """Image topics in request order."""
        return [image.topic for image in self.images]
