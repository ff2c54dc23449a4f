"""Schema nodes for OpenAPI schema objects.

This module turns the untyped schema mappings of an OpenAPI document into a
closed set of node classes:

- ``RefSchema`` for ``$ref`` pointers
- ``UnionSchema`` / ``IntersectionSchema`` for ``anyOf``, ``oneOf`` and ``allOf``
- ``PrimitiveSchema``, ``ArraySchema``, ``ObjectSchema`` and ``RecordSchema``
  for typed schemas
- ``EnumSchema`` for bare enumerations
- ``UnknownSchema`` for everything else

``parse_schema`` checks the schema keywords in a fixed order and never
raises, so consumers can dispatch on the node class exhaustively.
"""

import dataclasses
from collections.abc import Iterator
from typing import Any, Literal

__all__ = [
    'SchemaNode',
    'UnknownSchema',
    'RefSchema',
    'UnionSchema',
    'IntersectionSchema',
    'PrimitiveSchema',
    'ArraySchema',
    'ObjectSchema',
    'RecordSchema',
    'EnumSchema',
    'parse_schema',
    'iter_references',
]


@dataclasses.dataclass(frozen=True)
class UnknownSchema:
    """A schema whose shape cannot be determined."""


@dataclasses.dataclass(frozen=True)
class RefSchema:
    name: str


@dataclasses.dataclass(frozen=True)
class UnionSchema:
    members: tuple['SchemaNode', ...]
    keyword: Literal['anyOf', 'oneOf'] = 'anyOf'


@dataclasses.dataclass(frozen=True)
class IntersectionSchema:
    members: tuple['SchemaNode', ...]


@dataclasses.dataclass(frozen=True)
class PrimitiveSchema:
    # integer and number collapse into one kind
    kind: Literal['string', 'number', 'boolean']


@dataclasses.dataclass(frozen=True)
class ArraySchema:
    items: 'SchemaNode | None' = None


@dataclasses.dataclass(frozen=True)
class ObjectSchema:
    """An object schema with declared properties, in declaration order."""

    properties: tuple[tuple[str, 'SchemaNode'], ...]
    required: frozenset[str] = frozenset()

    def is_required(self, name: str) -> bool:
        return name in self.required


@dataclasses.dataclass(frozen=True)
class RecordSchema:
    """An object schema without declared properties."""


@dataclasses.dataclass(frozen=True)
class EnumSchema:
    values: tuple[Any, ...]


SchemaNode = (
    UnknownSchema
    | RefSchema
    | UnionSchema
    | IntersectionSchema
    | PrimitiveSchema
    | ArraySchema
    | ObjectSchema
    | RecordSchema
    | EnumSchema
)

_PRIMITIVE_KINDS = {
    'string': 'string',
    'number': 'number',
    'integer': 'number',
    'boolean': 'boolean',
}


def _members(raw: dict, keyword: str) -> tuple[SchemaNode, ...] | None:
    value = raw.get(keyword)
    if isinstance(value, list) and value:
        return tuple(parse_schema(member) for member in value)
    return None


def _required(raw: dict) -> frozenset[str]:
    required = raw.get('required')
    if not isinstance(required, list):
        return frozenset()
    return frozenset(name for name in required if isinstance(name, str))


def parse_schema(raw: Any) -> SchemaNode:
    """Convert a raw schema mapping into a schema node.

    The first matching rule wins:

    1. anything that is not a mapping is unknown
    2. ``$ref`` names the referenced schema by its last path segment
    3. ``anyOf``, then ``oneOf``, then ``allOf``
    4. ``type`` of string, number/integer, boolean, array or object
    5. ``enum``
    6. anything else is unknown

    Args:
        raw: The schema as found in the document.

    Returns:
        The schema node. Malformed input yields ``UnknownSchema``.
    """
    if not isinstance(raw, dict):
        return UnknownSchema()

    if '$ref' in raw:
        ref = raw['$ref']
        name = ref.rsplit('/', 1)[-1] if isinstance(ref, str) else ''
        return RefSchema(name) if name else UnknownSchema()

    for keyword in ('anyOf', 'oneOf'):
        members = _members(raw, keyword)
        if members is not None:
            return UnionSchema(members, keyword)

    members = _members(raw, 'allOf')
    if members is not None:
        return IntersectionSchema(members)

    schema_type = raw.get('type')
    if isinstance(schema_type, str):
        if schema_type in _PRIMITIVE_KINDS:
            return PrimitiveSchema(_PRIMITIVE_KINDS[schema_type])

        if schema_type == 'array':
            items = raw.get('items')
            return ArraySchema(parse_schema(items) if items is not None else None)

        if schema_type == 'object':
            properties = raw.get('properties')
            if isinstance(properties, dict):
                return ObjectSchema(
                    properties=tuple(
                        (str(name), parse_schema(prop))
                        for name, prop in properties.items()
                    ),
                    required=_required(raw),
                )
            return RecordSchema()

    enum = raw.get('enum')
    if isinstance(enum, list) and enum:
        return EnumSchema(tuple(enum))

    return UnknownSchema()


def iter_references(node: SchemaNode) -> Iterator[str]:
    """Yield the names of all schemas referenced anywhere inside ``node``."""
    if isinstance(node, RefSchema):
        yield node.name
    elif isinstance(node, (UnionSchema, IntersectionSchema)):
        for member in node.members:
            yield from iter_references(member)
    elif isinstance(node, ArraySchema) and node.items is not None:
        yield from iter_references(node.items)
    elif isinstance(node, ObjectSchema):
        for _, prop in node.properties:
            yield from iter_references(prop)
