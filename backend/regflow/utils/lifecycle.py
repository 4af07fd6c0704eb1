# /regflow/utils/lifecycle.py

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from regflow.config.settings import settings
from regflow.utils.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    setup_logging()

    logger.info(
        f"Starting {settings.service_name} (environment={settings.environment}, "
        f"definition_store={settings.definition_store}, action_match_policy={settings.action_match_policy})"
    )

    yield

    logger.info("Application shutting down...")
