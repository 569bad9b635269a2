"""Resolve a list of root query nodes into one result per root.

Each root runs its own fetch, denormalize, paginate and project pipeline as
an ``asyncio`` task. Pipelines share no state; the only join point is the
final mapping, where each root writes under its own key. The first failing
root cancels the others and its exception propagates.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from contentql.core.denormalize import denormalize
from contentql.core.links import build_link_tables
from contentql.core.pagination import paginate
from contentql.core.planner import plan
from contentql.core.ports.content_source import ContentSource
from contentql.core.project import project_entries
from contentql.models import Join, RootResult

logger = logging.getLogger(__name__)


class QueryEngine:
    def __init__(self, source: ContentSource) -> None:
        self._source = source

    async def resolve_root(self, root: Join) -> RootResult:
        request = plan(root)
        logger.info("Fetching %s with params %s", request.collection, request.params)
        payload = await self._source.fetch_entries(request)
        logger.info("Fetched %d of %d %s entries", len(payload.items), payload.total, request.collection)

        entries = denormalize(payload.items, build_link_tables(payload))
        info = paginate(payload.total, payload.skip, payload.limit)
        return RootResult(nodes=project_entries(entries, root.children), info=info)

    async def resolve(self, roots: Sequence[Join]) -> dict[str, RootResult]:
        tasks = [asyncio.create_task(self.resolve_root(root)) for root in roots]
        try:
            results = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            raise
        return {root.key: result for root, result in zip(roots, results)}
