"""Turn a root query node into the description of one collection fetch.

Only the immediate children of the root are selected on the wire. Nested
joins are served from the linked entries the API side-loads, which is why
every request asks for the maximal include depth.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from contentql.core.naming import IDENTIFIER_FIELD, to_select_path, to_wire_name
from contentql.models import Join, Prop

INCLUDE_DEPTH = 10
IDENTIFIER_FILTER = "sys.id"


@dataclass(frozen=True)
class FetchRequest:
    collection: str
    selected_fields: tuple[str, ...] = ()
    params: dict[str, Any] = field(default_factory=dict)


def plan(root: Join) -> FetchRequest:
    selected: list[str] = []
    for child in root.children:
        match child:
            case Prop(key=key) | Join(key=key):
                if key not in selected:
                    selected.append(key)

    params: dict[str, Any] = {}
    for name, value in root.params.items():
        if name == IDENTIFIER_FIELD:
            params[IDENTIFIER_FILTER] = value
        else:
            params[name] = value

    return FetchRequest(collection=to_wire_name(root.key), selected_fields=tuple(selected), params=params)


def format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list | tuple)):
        return ",".join(format_value(v) for v in value)
    return str(value)


def to_query_params(request: FetchRequest) -> dict[str, str]:
    """Render a ``FetchRequest`` as the URL query parameters of the entries endpoint."""
    query = {"content_type": request.collection, "include": str(INCLUDE_DEPTH)}
    if request.selected_fields:
        # Different spellings of one field select the same path.
        query["select"] = ",".join(dict.fromkeys(to_select_path(key) for key in request.selected_fields))
    for name, value in request.params.items():
        query[name] = format_value(value)
    return query
