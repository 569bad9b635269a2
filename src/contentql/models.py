from __future__ import annotations

from dataclasses import dataclass, field
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# --- Query nodes ---------------------------------------------------------


class Prop(BaseModel):
    """Leaf selection: copy one field of the entry."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["prop"] = "prop"
    key: str


class Join(BaseModel):
    """Nested selection: a linked field (or a root collection) with its own children."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["join"] = "join"
    key: str
    children: tuple[QueryNode, ...] = ()
    params: dict[str, Any] = Field(default_factory=dict)


QueryNode = Annotated[Union[Prop, Join], Field(discriminator="kind")]

Join.model_rebuild()  # necessary for recursive types


# --- Raw wire payload ----------------------------------------------------


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class LinkSys(_WireModel):
    id: str
    type: str = "Link"
    link_type: str | None = None


class Link(_WireModel):
    sys: LinkSys


class Sys(_WireModel):
    id: str
    type: str | None = None
    content_type: Link | None = None


class RawEntry(_WireModel):
    sys: Sys
    fields: dict[str, Any] = Field(default_factory=dict)

    @property
    def id(self) -> str:
        return self.sys.id

    @property
    def content_type(self) -> str | None:
        return self.sys.content_type.sys.id if self.sys.content_type else None


class RawAsset(_WireModel):
    sys: Sys
    fields: dict[str, Any] = Field(default_factory=dict)

    @property
    def id(self) -> str:
        return self.sys.id


class Includes(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    entry: list[RawEntry] = Field(default_factory=list, alias="Entry")
    asset: list[RawAsset] = Field(default_factory=list, alias="Asset")


class RawPayload(_WireModel):
    items: list[RawEntry] = Field(default_factory=list)
    total: int = 0
    skip: int = 0
    limit: int = 100
    includes: Includes = Field(default_factory=Includes)

    @property
    def linked_entries(self) -> list[RawEntry]:
        return self.includes.entry

    @property
    def linked_assets(self) -> list[RawAsset]:
        return self.includes.asset


# --- Denormalized tree ---------------------------------------------------

Scalar = Union[str, int, float, bool, dict[str, Any], list[Any]]


@dataclass(frozen=True)
class Image:
    url: str
    width: int
    height: int
    title: str | None = None
    description: str | None = None
    content_type: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "width": self.width,
            "height": self.height,
            "title": self.title,
            "description": self.description,
            "content_type": self.content_type,
        }


@dataclass
class Entry:
    id: str
    type_name: str | None
    fields: dict[str, DenormalizedValue] = field(default_factory=dict)

    def get(self, key: str) -> DenormalizedValue:
        if key == "id":
            return self.id
        if key == "type_name":
            return self.type_name
        return self.fields.get(key)


DenormalizedValue = Union[Scalar, Image, list[Entry], None]


# --- Results -------------------------------------------------------------


@dataclass(frozen=True)
class PageInfo:
    total: int
    page_size: int
    current_page: int
    total_pages: int
    has_next: bool
    has_prev: bool
    cursor: int
    next_skip: int
    prev_skip: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": {"total": self.total},
            "page": {
                "size": self.page_size,
                "current": self.current_page,
                "total": self.total_pages,
                "hasNext": self.has_next,
                "hasPrev": self.has_prev,
            },
            "pagination": {
                "cursor": self.cursor,
                "nextSkip": self.next_skip,
                "prevSkip": self.prev_skip,
            },
        }


@dataclass(frozen=True)
class RootResult:
    nodes: list[dict[str, Any]]
    info: PageInfo

    def to_dict(self) -> dict[str, Any]:
        return {"nodes": self.nodes, "info": self.info.to_dict()}
