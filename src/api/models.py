"""Pydantic models for the API request/response types."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ImagePayload(BaseModel):
    """An uploaded image and the topic it belongs to.

    Attributes
    ----------
    payload : str | None
        Embedded image, usually a ``data:image/...;base64,`` URI.
    topic : str | None
        Label of the diagram node the image illustrates.

    """

    payload: str | None = Field(
        default=None,
        validation_alias=AliasChoices("payload", "base64"),
        description="Embedded image data URI",
    )
    topic: str | None = Field(default=None, description="Topic this image represents")

    @property
    def is_complete(self) -> bool:
        """Whether both the payload and the topic are non-blank."""
        return bool(self.payload and self.payload.strip() and self.topic and self.topic.strip())


class GenerateMapRequest(BaseModel):
    """Request model for the ``/api/generate-map`` endpoint.

    Field values are validated by the pipeline rather than by pydantic so
    that bad input is answered in the usual response shape.

    Attributes
    ----------
    topic : str | None
        Subject of the diagram.
    description : str | None
        Optional free-text context.
    dialect : str | None
        Diagram dialect token (``mapType`` is accepted as an alias).
    images : list[ImagePayload | None] | None
        Images with their topics, in order. ``null`` entries are ignored.

    """

    topic: str | None = Field(default=None, description="Diagram topic")
    description: str | None = Field(default=None, description="Optional description")
    dialect: str | None = Field(
        default=None,
        validation_alias=AliasChoices("dialect", "mapType"),
        description="hierarchical-map, concept-graph, flowchart or sequence",
    )
    images: list[ImagePayload | None] | None = Field(default=None, description="Images with topics")


class GenerateMapResponse(BaseModel):
    """Response model for the ``/api/generate-map`` endpoint.

    Attributes
    ----------
    diagram_text : str
        The generated diagram, empty on failure.
    success : bool
        Whether generation succeeded.
    error : str | None
        Human-readable error message on failure.

    """

    model_config = ConfigDict(populate_by_name=True)

    diagram_text: str = Field(default="", alias="diagramText", description="Generated diagram text")
    success: bool = Field(..., description="Whether generation succeeded")
    error: str | None = Field(default=None, description="Error message")

    @classmethod
    def failure(cls, error: str) -> GenerateMapResponse:
        """Build an error response with empty diagram text."""
        return cls(diagram_text="", success=False, error=error)

    def to_content(self) -> dict[str, object]:
        """Serialise using wire field names, omitting an unset error."""
        return self.model_dump(by_alias=True, exclude_none=True)
