from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from contentql.api.dependencies import get_engine
from contentql.api.schemas import InfoSchema, PlanRow, RootResultSchema
from contentql.core.document import QueryDocumentError, parse_query_document
from contentql.core.planner import plan as _plan
from contentql.core.planner import to_query_params
from contentql.core.resolve import QueryEngine
from contentql.models import Join
from contentql.source.contentful import ContentSourceError

router = APIRouter(prefix="/query", tags=["query"])


def _parse(document: dict[str, Any]) -> list[Join]:
    try:
        return parse_query_document(document)
    except QueryDocumentError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc


@router.post("", response_model=dict[str, RootResultSchema])
async def query(
    document: dict[str, Any] = Body(...),
    engine: QueryEngine = Depends(get_engine),
) -> dict[str, RootResultSchema]:
    roots = _parse(document)
    try:
        results = await engine.resolve(roots)
    except ContentSourceError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
    return {
        key: RootResultSchema(nodes=result.nodes, info=InfoSchema.model_validate(result.info.to_dict()))
        for key, result in results.items()
    }


@router.post("/plan", response_model=list[PlanRow])
async def plan(document: dict[str, Any] = Body(...)) -> list[PlanRow]:
    return [PlanRow(root=root.key, params=to_query_params(_plan(root))) for root in _parse(document)]
