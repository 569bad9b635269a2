from fastapi import APIRouter, Depends, Response, status

from contentql.api.dependencies import get_source
from contentql.api.schemas import HealthResponse, ReadinessResponse
from contentql.core.ports.content_source import ContentSource

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
@router.get("/healthz/live", response_model=HealthResponse)
async def liveness() -> HealthResponse:
    return HealthResponse()


@router.get("/healthz/ready", response_model=ReadinessResponse)
async def readiness(
    response: Response,
    source: ContentSource = Depends(get_source),
) -> ReadinessResponse:
    """Ready once a one-entry request against the content API succeeds."""
    if await source.ping():
        return ReadinessResponse()
    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ReadinessResponse(status="degraded", source="down")
