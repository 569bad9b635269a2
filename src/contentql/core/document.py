"""JSON query documents, the textual form of a query accepted by the CLI, API and MCP tools.

A document maps each root collection to its selection::

    {
        "blog": {
            "params": {"limit": 4, "order": "-sys.createdAt"},
            "select": [
                "title",
                {"author": ["name"]},
                {"hero_image": {"params": {"width": 100}, "select": ["url", "width", "height"]}}
            ]
        }
    }

Strings select a field (``Prop``); single-key objects select a linked field
with its own selection (``Join``). A bare list stands for ``{"select": [...]}``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from contentql.models import Join, Prop, QueryNode

_JOIN_KEYS = frozenset({"params", "select"})


class QueryDocumentError(ValueError):
    """Raised when a query document cannot be turned into query nodes."""


def load_query_document(text: str) -> list[Join]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise QueryDocumentError(f"Query document is not valid JSON: {exc}") from exc
    return parse_query_document(data)


def parse_query_document(data: Any) -> list[Join]:
    if not isinstance(data, Mapping) or not data:
        raise QueryDocumentError("Query document must be a non-empty object keyed by collection")
    roots = [_parse_join(key, selection, key) for key, selection in data.items()]
    for root in roots:
        _check_root_params(root)
    return roots


def _parse_join(key: str, selection: Any, path: str) -> Join:
    if isinstance(selection, list):
        params: Any = {}
        select: Any = selection
    elif isinstance(selection, Mapping):
        unknown = set(selection) - _JOIN_KEYS
        if unknown:
            raise QueryDocumentError(f"Unknown keys at {path}: {', '.join(sorted(unknown))}")
        params = selection.get("params", {})
        select = selection.get("select", [])
    else:
        raise QueryDocumentError(f"Selection at {path} must be a list or an object, got {selection!r}")

    if not isinstance(params, Mapping):
        raise QueryDocumentError(f"Params at {path} must be an object")
    if not isinstance(select, list):
        raise QueryDocumentError(f"Select at {path} must be a list")
    return Join(key=key, children=tuple(_parse_node(item, path) for item in select), params=dict(params))


def _parse_node(item: Any, path: str) -> QueryNode:
    if isinstance(item, str):
        return Prop(key=item)
    if isinstance(item, Mapping) and len(item) == 1:
        ((key, selection),) = item.items()
        return _parse_join(key, selection, f"{path}.{key}")
    raise QueryDocumentError(f"Invalid selection under {path}: {item!r}")


def _check_root_params(root: Join) -> None:
    for name, minimum in (("limit", 1), ("skip", 0)):
        if name not in root.params:
            continue
        value = root.params[name]
        if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
            raise QueryDocumentError(f"{root.key}: {name} must be an integer >= {minimum}, got {value!r}")
