"""Unit tests for the query engine over an in-memory source."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock

import pytest

from contentql.core.planner import FetchRequest, to_query_params
from contentql.core.resolve import QueryEngine
from contentql.models import Join, Prop, RawPayload
from contentql.source.contentful import ContentSourceError
from contentql.source.memory import InMemoryContentSource
from tests.conftest import entry


@pytest.mark.asyncio
async def test_resolves_nested_query(source: InMemoryContentSource) -> None:
    root = Join(
        key="blog",
        children=(
            Prop(key="title"),
            Join(key="author", children=(Prop(key="name"),)),
            Join(key="hero_image", children=(Prop(key="width"), Prop(key="height")), params={"width": 150}),
        ),
        params={"order": "fields.title", "limit": 2},
    )
    results = await QueryEngine(source).resolve([root])

    blog = results["blog"]
    assert blog.nodes == [
        {"title": "Hello", "author": [{"name": "Ada"}], "hero_image": {"width": 150, "height": 75}},
        {"title": "Second", "author": [], "hero_image": None},
    ]
    assert blog.info.total == 3
    assert blog.info.page_size == 2
    assert blog.info.total_pages == 2
    assert blog.info.has_next is True


@pytest.mark.asyncio
async def test_resolves_each_root_under_its_key(source: InMemoryContentSource) -> None:
    roots = [
        Join(key="blog", children=(Prop(key="title"),), params={"id": "blog-3"}),
        Join(key="author", children=(Prop(key="name"),)),
    ]
    results = await QueryEngine(source).resolve(roots)

    assert set(results) == {"blog", "author"}
    assert results["blog"].nodes == [{"title": "Third"}]
    assert results["author"].nodes == [{"name": "Ada"}]
    assert len(source.requests) == 2


@pytest.mark.asyncio
async def test_result_to_dict_matches_output_shape(source: InMemoryContentSource) -> None:
    results = await QueryEngine(source).resolve([Join(key="author", children=(Prop(key="name"),))])
    assert results["author"].to_dict() == {
        "nodes": [{"name": "Ada"}],
        "info": {
            "nodes": {"total": 1},
            "page": {"size": 100, "current": 1, "total": 1, "hasNext": False, "hasPrev": False},
            "pagination": {"cursor": 0, "nextSkip": 0, "prevSkip": 0},
        },
    }


@pytest.mark.asyncio
async def test_first_failure_propagates_and_cancels_other_roots() -> None:
    started = asyncio.Event()
    cancelled = False

    async def _fetch(request: FetchRequest) -> RawPayload:
        nonlocal cancelled
        if request.collection == "broken":
            await started.wait()
            raise ContentSourceError("Fetching broken failed with HTTP 500", status_code=500)
        started.set()
        try:
            await asyncio.sleep(10)
        except asyncio.CancelledError:
            cancelled = True
            raise
        return RawPayload()

    source = AsyncMock()
    source.fetch_entries.side_effect = _fetch

    with pytest.raises(ContentSourceError):
        await QueryEngine(source).resolve([Join(key="slow"), Join(key="broken")])
    await asyncio.sleep(0.01)
    assert cancelled is True


@pytest.mark.asyncio
async def test_field_keys_match_however_they_are_spelled() -> None:
    source = InMemoryContentSource([entry("store-1", "store", address2="Main St", heroTitle="Welcome")])
    root = Join(key="store", children=(Prop(key="address2"), Prop(key="hero-title"), Prop(key="heroTitle")))

    results = await QueryEngine(source).resolve([root])

    assert to_query_params(source.requests[0])["select"] == "fields.address2,fields.heroTitle"
    assert results["store"].nodes == [{"address2": "Main St", "hero-title": "Welcome", "heroTitle": "Welcome"}]
