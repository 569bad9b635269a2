from typing import Protocol

from contentql.core.planner import FetchRequest
from contentql.models import RawPayload


class ContentSource(Protocol):
    async def fetch_entries(self, request: FetchRequest) -> RawPayload: ...

    async def ping(self) -> bool: ...

    async def dispose(self) -> None: ...
