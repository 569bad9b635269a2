from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from contentql.api.dependencies import close_source
from contentql.source.config import ConfigError, load_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    try:
        config = load_config()
    except ConfigError as exc:
        logger.warning("%s; queries will fail until it is set", exc)
    else:
        logger.info("Serving %s space %s (%s)", config.mode, config.space_id, config.environment)
    try:
        yield
    finally:
        await close_source()
