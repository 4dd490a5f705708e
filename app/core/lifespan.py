"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring: logging on startup, SQL engine
dispose on shutdown. No business logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.infrastructure.persistence.database import dispose_engine
from app.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging, yield, then dispose the database engine."""
    settings = get_settings()
    setup_logging()
    logger.info("Starting %s %s", settings.app_name, settings.app_version)
    try:
        yield
    finally:
        await dispose_engine()
        logger.info("Shutdown complete")
