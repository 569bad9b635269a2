"""Fixtures for tests against the live Contentful API.

Set ``CONTENTFUL_SPACE_ID``, ``CONTENTFUL_ACCESS_TOKEN`` and
``CONTENTFUL_TEST_CONTENT_TYPE`` to run them.
"""

import os
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio

from contentql.source.config import ConfigError, load_config
from contentql.source.contentful import ContentfulSource, get_client


@pytest.fixture(scope="session")
def content_type() -> str:
    value = os.getenv("CONTENTFUL_TEST_CONTENT_TYPE")
    if not value:
        pytest.skip("CONTENTFUL_TEST_CONTENT_TYPE is not set")
    return value


@pytest_asyncio.fixture
async def contentful_source() -> AsyncGenerator[ContentfulSource, None]:
    try:
        config = load_config()
    except ConfigError as exc:
        pytest.skip(str(exc))
    source = ContentfulSource(get_client(config), config)
    yield source
    await source.dispose()
