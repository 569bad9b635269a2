from __future__ import annotations

import logging
from collections.abc import AsyncIterator

from fastapi import Depends, HTTPException, status

from contentql.core.ports.content_source import ContentSource
from contentql.core.resolve import QueryEngine
from contentql.source.config import ConfigError, load_config
from contentql.source.contentful import ContentfulSource, get_client

logger = logging.getLogger(__name__)

_source: ContentfulSource | None = None


def _connect() -> ContentfulSource:
    try:
        config = load_config()
    except ConfigError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    logger.info("Connecting to %s", config.entries_url)
    return ContentfulSource(get_client(config), config)


async def get_source() -> AsyncIterator[ContentSource]:
    """Yield the shared Contentful source, connecting on first use.

    Requests answer 503 while the ``CONTENTFUL_*`` credentials are missing.
    """
    global _source  # noqa: PLW0603
    if _source is None:
        _source = _connect()
    yield _source


def get_engine(source: ContentSource = Depends(get_source)) -> QueryEngine:
    return QueryEngine(source)


async def close_source() -> None:
    global _source  # noqa: PLW0603
    if _source is None:
        return
    source, _source = _source, None
    await source.dispose()
