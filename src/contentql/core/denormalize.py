"""Rebuild nested entries from a flat payload by following links through the link tables.

Per field, in order:

1. an asset link becomes an ``Image`` (``None`` when the asset is missing);
2. a single entry link is treated as a one-element link list;
3. a link list resolves through the entry table and recurses, dropping
   unresolved ids;
4. a one-element list wrapping a scalar (localization wrapper) is unwrapped;
5. anything else passes through.

A link back to an entry already on the current expansion path is dropped
like an unresolved one, so cyclic link graphs still terminate.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from contentql.core.links import LinkTables, as_link, as_link_list
from contentql.core.naming import to_field_name
from contentql.models import DenormalizedValue, Entry, Image, LinkSys, RawAsset, RawEntry

logger = logging.getLogger(__name__)

ASSET_LINK = "Asset"


def _unwrap(value: Any) -> Any:
    if isinstance(value, list) and len(value) == 1 and not isinstance(value[0], (dict | list)):
        return value[0]
    return value


def to_image(asset: RawAsset) -> Image:
    fields = {name: _unwrap(value) for name, value in asset.fields.items()}
    file = fields.get("file") or {}
    dimensions = (file.get("details") or {}).get("image") or {}
    url = file.get("url", "")
    if url.startswith("//"):
        url = f"https:{url}"
    return Image(
        url=url,
        width=dimensions.get("width", 0),
        height=dimensions.get("height", 0),
        title=fields.get("title"),
        description=fields.get("description"),
        content_type=file.get("contentType"),
    )


def denormalize(entries: Iterable[RawEntry], tables: LinkTables) -> list[Entry]:
    return [_denormalize_entry(raw, tables, frozenset()) for raw in entries]


def _denormalize_entry(raw: RawEntry, tables: LinkTables, path: frozenset[str]) -> Entry:
    path = path | {raw.id}
    fields = {to_field_name(name): _denormalize_value(value, tables, path) for name, value in raw.fields.items()}
    return Entry(id=raw.id, type_name=raw.content_type, fields=fields)


def _denormalize_value(value: Any, tables: LinkTables, path: frozenset[str]) -> DenormalizedValue:
    link = as_link(value)
    if link is not None:
        if link.link_type == ASSET_LINK:
            asset = tables.asset(link.id)
            if asset is None:
                logger.debug("Asset %s is not in the payload", link.id)
                return None
            return to_image(asset)
        return _resolve_entries([link], tables, path)

    links = as_link_list(value)
    if links is not None:
        return _resolve_entries(links, tables, path)

    return _unwrap(value)


def _resolve_entries(links: list[LinkSys], tables: LinkTables, path: frozenset[str]) -> list[Entry]:
    resolved: list[Entry] = []
    for link in links:
        if link.link_type == ASSET_LINK:
            # Lists resolve through the entry table only.
            logger.debug("Dropping asset %s from a list of links", link.id)
            continue
        if link.id in path:
            logger.debug("Dropping cyclic link to entry %s", link.id)
            continue
        raw = tables.entry(link.id)
        if raw is None:
            logger.debug("Dropping unresolved link to entry %s", link.id)
            continue
        resolved.append(_denormalize_entry(raw, tables, path))
    return resolved
