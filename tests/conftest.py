"""Fixtures for tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from api.config import Settings, get_settings
from api.main import app
from api.middleware import limiter
from api.routers.generate import get_oracle
from core.schemas import ImageTopicPair

PNG_PAYLOAD = "data:image/png;base64,AAA="

NEURAL_NETWORKS_MAP = "mindmap\n  root((Neural Networks))\n    Neural Networks [IMG]\n    Layers"


class StubOracle:
    """Deterministic oracle returning a canned response and recording prompts."""

    def __init__(self, response: str = "", error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.prompts: list[str] = []

    async def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response


StubOracleFactory = Callable[..., StubOracle]


@pytest.fixture
def stub_oracle() -> StubOracleFactory:
    """Provide a factory for :class:`StubOracle` instances."""
    return StubOracle


@pytest.fixture
def image_pair() -> Callable[[str], ImageTopicPair]:
    """Provide a helper building an image pair with a fixed PNG payload."""

    def _image_pair(topic: str, payload: str = PNG_PAYLOAD) -> ImageTopicPair:
        return ImageTopicPair(topic=topic, payload=payload)

    return _image_pair


@pytest.fixture
def client() -> Iterator[TestClient]:
    """TestClient for the FastAPI app with a fresh rate limiter and no overrides."""
    limiter.reset()
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def use_oracle() -> Callable[[StubOracle], StubOracle]:
    """Route ``/api/generate-map`` through the given stub oracle."""

    def _use_oracle(oracle: StubOracle) -> StubOracle:
        app.dependency_overrides[get_oracle] = lambda: oracle
        return oracle

    return _use_oracle


@pytest.fixture
def use_settings() -> Callable[..., Settings]:
    """Override application settings for API tests."""

    def _use_settings(**overrides: object) -> Settings:
        settings = get_settings().model_copy(update=overrides)
        app.dependency_overrides[get_settings] = lambda: settings
        return settings

    return _use_settings
