from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NodesInfo(_CamelModel):
    total: int


class PageSchema(_CamelModel):
    size: int
    current: int
    total: int
    has_next: bool
    has_prev: bool


class PaginationSchema(_CamelModel):
    cursor: int
    next_skip: int
    prev_skip: int


class InfoSchema(_CamelModel):
    nodes: NodesInfo
    page: PageSchema
    pagination: PaginationSchema


class RootResultSchema(BaseModel):
    nodes: list[dict[str, Any]]
    info: InfoSchema


class PlanRow(BaseModel):
    root: str
    params: dict[str, str]


class HealthResponse(BaseModel):
    status: str = "ok"


class ReadinessResponse(BaseModel):
    status: str = "ok"
    source: str = "up"
