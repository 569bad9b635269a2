"""Shared fixtures and helpers for tests."""

from pathlib import Path
from typing import Any

import pytest

from contentql.source import InMemoryContentSource

_TESTS_ROOT = Path(__file__).parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        rel = Path(str(item.fspath)).relative_to(_TESTS_ROOT)
        if rel.parts and rel.parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Wire payload builders
# ---------------------------------------------------------------------------


def link(target_id: str, link_type: str = "Entry") -> dict[str, Any]:
    return {"sys": {"type": "Link", "linkType": link_type, "id": target_id}}


def entry(entry_id: str, content_type: str, **fields: Any) -> dict[str, Any]:
    return {
        "sys": {"id": entry_id, "type": "Entry", "contentType": link(content_type, "ContentType")},
        "fields": fields,
    }


def asset(asset_id: str, url: str, width: int, height: int, **fields: Any) -> dict[str, Any]:
    return {
        "sys": {"id": asset_id, "type": "Asset"},
        "fields": {
            **fields,
            "file": {
                "url": url,
                "contentType": "image/jpeg",
                "details": {"image": {"width": width, "height": height}},
            },
        },
    }


BLOG_ENTRIES = [
    entry(
        "blog-1",
        "blog",
        title="Hello",
        body="First post",
        author=link("author-1"),
        heroImage=link("asset-1", "Asset"),
        tags=["news"],
    ),
    entry("blog-2", "blog", title="Second", body="Another post", author=link("author-missing")),
    entry("blog-3", "blog", title="Third", body="Last post", author=link("author-1")),
    entry("author-1", "author", name="Ada", posts=[link("blog-1")]),
]

BLOG_ASSETS = [
    asset("asset-1", "//images.ctfassets.net/space/hero.jpg", 2000, 1000, title="Hero"),
]


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def source() -> InMemoryContentSource:
    return InMemoryContentSource(BLOG_ENTRIES, BLOG_ASSETS)
