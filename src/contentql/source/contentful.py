import logging

import httpx

from contentql.core.planner import FetchRequest, to_query_params
from contentql.models import RawPayload
from contentql.source.config import ContentfulConfig

logger = logging.getLogger(__name__)


class ContentSourceError(RuntimeError):
    """Raised when the content API cannot be reached or answers with an error."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def get_client(config: ContentfulConfig) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        headers={"Authorization": f"Bearer {config.access_token}"},
        timeout=config.timeout,
    )


class ContentfulSource:
    """Fetch entries from the Contentful delivery (``live``) or preview API."""

    def __init__(self, client: httpx.AsyncClient, config: ContentfulConfig) -> None:
        self._client = client
        self._config = config

    async def fetch_entries(self, request: FetchRequest) -> RawPayload:
        params = to_query_params(request)
        try:
            response = await self._client.get(self._config.entries_url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            logger.warning("Fetching %s failed with HTTP %d", request.collection, status_code)
            raise ContentSourceError(
                f"Fetching {request.collection} failed with HTTP {status_code}", status_code=status_code
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("Fetching %s failed: %s", request.collection, exc)
            raise ContentSourceError(f"Fetching {request.collection} failed: {exc}") from exc

        try:
            return RawPayload.model_validate(response.json())
        except ValueError as exc:
            raise ContentSourceError(f"Unexpected payload for {request.collection}") from exc

    async def ping(self) -> bool:
        try:
            response = await self._client.get(self._config.entries_url, params={"limit": "1"})
        except httpx.HTTPError:
            return False
        return response.is_success

    async def dispose(self) -> None:
        await self._client.aclose()
