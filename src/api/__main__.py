"""Server module entry point for running with ``python -m api``."""

from __future__ import annotations

import logging
import os

import uvicorn

from api.config import get_settings

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    settings = get_settings()
    reload = os.getenv("RELOAD", "false").lower() == "true"

    logger.info("Starting MMAP server on %s:%d", settings.host, settings.port)

    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        reload=reload,
        log_level=settings.log_level,
    )
