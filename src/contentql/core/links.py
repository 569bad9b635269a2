from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from contentql.models import LinkSys, RawAsset, RawEntry, RawPayload


def as_link(value: Any) -> LinkSys | None:
    """Return the link in ``value`` if it is a ``{"sys": {"type": "Link", ...}}`` reference."""
    if isinstance(value, dict):
        sys = value.get("sys")
        if isinstance(sys, dict) and sys.get("type") == "Link" and "id" in sys:
            return LinkSys.model_validate(sys)
    return None


def as_link_list(value: Any) -> list[LinkSys] | None:
    if not isinstance(value, list) or not value:
        return None
    links = [as_link(v) for v in value]
    if any(link is None for link in links):
        return None
    return [link for link in links if link is not None]


def iter_links(entry: RawEntry | RawAsset) -> Iterator[LinkSys]:
    for value in entry.fields.values():
        link = as_link(value)
        if link is not None:
            yield link
            continue
        yield from as_link_list(value) or ()


@dataclass(frozen=True)
class LinkTables:
    """Entries and assets of one fetch, keyed by identifier.

    Lookups of unknown ids return ``None``; the linked object simply failed to
    resolve.
    """

    entries: dict[str, RawEntry] = field(default_factory=dict)
    assets: dict[str, RawAsset] = field(default_factory=dict)

    def entry(self, entry_id: str) -> RawEntry | None:
        return self.entries.get(entry_id)

    def asset(self, asset_id: str) -> RawAsset | None:
        return self.assets.get(asset_id)


def build_link_tables(payload: RawPayload) -> LinkTables:
    # The API does not repeat entries of ``items`` in ``includes``, so both feed the entry table.
    entries = {e.id: e for e in payload.items}
    entries.update((e.id, e) for e in payload.linked_entries)
    return LinkTables(entries=entries, assets={a.id: a for a in payload.linked_assets})
