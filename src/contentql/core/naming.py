"""Conversion between query field names (snake_case) and wire field names (camelCase)."""

from pydantic.alias_generators import to_camel, to_snake

IDENTIFIER_FIELD = "id"
TYPE_NAME_FIELD = "type_name"


def to_wire_name(key: str) -> str:
    return to_camel(key.replace("-", "_"))


def to_field_name(wire_name: str) -> str:
    return to_snake(wire_name)


def to_field_key(key: str) -> str:
    """Name under which a selected ``key`` is stored on a denormalized entry.

    ``address2``, ``hero-title`` and ``heroTitle`` select the same wire fields
    as ``address_2`` and ``hero_title`` and are looked up under those names.
    """
    if key in (IDENTIFIER_FIELD, TYPE_NAME_FIELD):
        return key
    return to_field_name(to_wire_name(key))


def to_select_path(key: str) -> str:
    """Map a selected field to its wire path, e.g. ``id`` -> ``sys.id``, ``hero_image`` -> ``fields.heroImage``."""
    if key == IDENTIFIER_FIELD:
        return "sys.id"
    if key == TYPE_NAME_FIELD:
        return "sys.contentType"
    return f"fields.{to_wire_name(key)}"
