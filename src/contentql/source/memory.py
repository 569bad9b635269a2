from collections.abc import Iterable
from typing import Any

from contentql.core.links import iter_links
from contentql.core.planner import INCLUDE_DEPTH, FetchRequest, format_value, to_query_params
from contentql.models import Includes, RawAsset, RawEntry, RawPayload

DEFAULT_LIMIT = 100


def _field_value(entry: RawEntry, path: str) -> Any:
    if path == "sys.id":
        return entry.id
    if path.startswith("fields."):
        value = entry.fields.get(path.removeprefix("fields."))
        if isinstance(value, list) and len(value) == 1:
            return value[0]
        return value
    return None


def _sort_key(value: Any) -> tuple[bool, Any]:
    # Missing values are grouped apart so they never compare against present ones.
    return (value is None, value)


def _sort(items: list[RawEntry], order: str) -> list[RawEntry]:
    # Sort by the last key first; ``sorted`` is stable, so earlier keys take precedence.
    for key in reversed(order.split(",")):
        descending = key.startswith("-")
        path = key.removeprefix("-")
        items = sorted(items, key=lambda e: _sort_key(_field_value(e, path)), reverse=descending)
    return items


class InMemoryContentSource:
    """A ``ContentSource`` over entries and assets held in memory.

    Supports the subset of the delivery API that queries produce: content
    type, ``sys.id`` and ``fields.<name>`` equality filters, ``order``,
    ``skip``, ``limit``, ``select`` and side-loading of linked entries and
    assets.
    """

    def __init__(
        self,
        entries: Iterable[RawEntry | dict[str, Any]] = (),
        assets: Iterable[RawAsset | dict[str, Any]] = (),
    ) -> None:
        self.entries: dict[str, RawEntry] = {}
        self.assets: dict[str, RawAsset] = {}
        self.requests: list[FetchRequest] = []
        for entry in entries:
            self.add_entry(entry)
        for asset in assets:
            self.add_asset(asset)

    def add_entry(self, entry: RawEntry | dict[str, Any]) -> RawEntry:
        raw = entry if isinstance(entry, RawEntry) else RawEntry.model_validate(entry)
        self.entries[raw.id] = raw
        return raw

    def add_asset(self, asset: RawAsset | dict[str, Any]) -> RawAsset:
        raw = asset if isinstance(asset, RawAsset) else RawAsset.model_validate(asset)
        self.assets[raw.id] = raw
        return raw

    async def fetch_entries(self, request: FetchRequest) -> RawPayload:
        self.requests.append(request)
        query = to_query_params(request)

        items = [e for e in self.entries.values() if e.content_type == query["content_type"]]
        for name, value in query.items():
            if name == "sys.id" or (name.startswith("fields.") and "[" not in name):
                items = [e for e in items if format_value(_field_value(e, name)) == value]
        if "order" in query:
            items = _sort(items, query["order"])

        skip = int(query.get("skip", 0))
        limit = int(query.get("limit", DEFAULT_LIMIT))
        page = items[skip : skip + limit]
        linked_entries, linked_assets = self._collect_includes(page)

        if "select" in query:
            wanted = {p.removeprefix("fields.") for p in query["select"].split(",") if p.startswith("fields.")}
            page = [e.model_copy(update={"fields": {k: v for k, v in e.fields.items() if k in wanted}}) for e in page]

        return RawPayload(
            items=page,
            total=len(items),
            skip=skip,
            limit=limit,
            includes=Includes(entry=linked_entries, asset=linked_assets),
        )

    def _collect_includes(self, page: list[RawEntry]) -> tuple[list[RawEntry], list[RawAsset]]:
        seen = {e.id for e in page}
        linked_entries: dict[str, RawEntry] = {}
        linked_assets: dict[str, RawAsset] = {}
        frontier: list[RawEntry] = list(page)
        for _ in range(INCLUDE_DEPTH):
            next_frontier: list[RawEntry] = []
            for entry in frontier:
                for link in iter_links(entry):
                    if link.link_type == "Asset":
                        if link.id in self.assets:
                            linked_assets[link.id] = self.assets[link.id]
                    elif link.id not in seen and link.id in self.entries:
                        seen.add(link.id)
                        linked_entries[link.id] = self.entries[link.id]
                        next_frontier.append(self.entries[link.id])
            if not next_frontier:
                break
            frontier = next_frontier
        return list(linked_entries.values()), list(linked_assets.values())

    async def ping(self) -> bool:
        return True

    async def dispose(self) -> None:
        pass
