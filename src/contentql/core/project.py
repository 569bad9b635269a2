"""Reduce denormalized entries to exactly the shape a query asks for."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from contentql.core.images import scale_image
from contentql.core.naming import to_field_key, to_wire_name
from contentql.models import DenormalizedValue, Entry, Image, Join, Prop, QueryNode


def _resolve_image(image: Image, params: Mapping[str, Any]) -> Image:
    return scale_image(image, width=params.get("width"), height=params.get("height"))


_RESOLVERS: dict[type, Callable[[Any, Mapping[str, Any]], Any]] = {
    Image: _resolve_image,
}


def resolve_field(value: DenormalizedValue, params: Mapping[str, Any]) -> DenormalizedValue:
    """Apply the resolver for the type of ``value``; values without one are returned as-is."""
    resolver = _RESOLVERS.get(type(value))
    if resolver is None:
        return value
    return resolver(value, params)


def to_plain(value: Any) -> Any:
    """Render a denormalized value as plain JSON-compatible data."""
    if isinstance(value, Entry):
        return {"id": value.id, "type_name": value.type_name, **{k: to_plain(v) for k, v in value.fields.items()}}
    if isinstance(value, Image):
        return value.to_dict()
    if isinstance(value, list):
        return [to_plain(v) for v in value]
    return value


def _lookup(value: Any, key: str) -> Any:
    if isinstance(value, Entry):
        return value.get(to_field_key(key))
    if isinstance(value, Image):
        return value.to_dict().get(to_field_key(key))
    if isinstance(value, Mapping):
        # Plain JSON objects keep their wire keys.
        return value[key] if key in value else value.get(to_wire_name(key))
    return None


def project(value: DenormalizedValue, node: QueryNode) -> Any:
    match node:
        case Prop():
            # Leaf fields are copied as-is; parameters on a leaf are not resolved.
            return to_plain(value)
        case Join(children=children, params=params):
            if params:
                value = resolve_field(value, params)
            return _project_nested(value, children)


def _project_nested(value: Any, children: Sequence[QueryNode]) -> Any:
    if value is None:
        return None
    if isinstance(value, list):
        return [_project_nested(v, children) for v in value]
    if isinstance(value, (Entry | Image | Mapping)):
        return {child.key: project(_lookup(value, child.key), child) for child in children}
    return value


def project_entry(entry: Entry, children: Sequence[QueryNode]) -> dict[str, Any]:
    return {child.key: project(entry.get(to_field_key(child.key)), child) for child in children}


def project_entries(entries: Iterable[Entry], children: Sequence[QueryNode]) -> list[dict[str, Any]]:
    return [project_entry(entry, children) for entry in entries]
