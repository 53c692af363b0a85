"""Configuration for the diagram generator API server."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from core.oracle import DEFAULT_MAX_TOKENS, DEFAULT_MODEL

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    Attributes
    ----------
    host : str
        The host address to bind the server to (default: ``"0.0.0.0"``).
    port : int
        The port to bind the server to (default: ``8080``).
    debug : bool
        Whether to run the server in debug mode (default: ``False``).
    log_level : str
        Log level handed to the server (default: ``"info"``).
    allowed_hosts : str
        Comma-separated list of allowed hosts (default: ``"localhost,127.0.0.1"``).
    claude_api_key : str
        Anthropic API key used for generation (default: ``""``).
    claude_model : str
        Claude model identifier.
    max_output_tokens : int
        Upper bound on generated tokens per diagram (default: ``4096``).
    generation_timeout : float
        Seconds to wait for the model before failing (default: ``60``).
    max_images : int
        Maximum number of images per request (default: ``5``).

    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    host: str = "0.0.0.0"  # noqa: S104
    port: int = 8080
    debug: bool = False
    log_level: str = "info"
    allowed_hosts: str = "localhost,127.0.0.1"
    claude_api_key: str = ""
    claude_model: str = DEFAULT_MODEL
    max_output_tokens: int = DEFAULT_MAX_TOKENS
    generation_timeout: float = 60.0
    max_images: int = 5


@lru_cache
def get_settings() -> Settings:
    """Return the application settings instance (cached).

    Returns
    -------
    Settings
        The application settings.

    """
    s = Settings()
    logger.info(
        "Settings loaded: claude_api_key=%s, claude_model=%s",
        "SET" if s.claude_api_key else "NOT SET",
        s.claude_model,
    )
    return s
