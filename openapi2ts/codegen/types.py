"""TypeScript type generation for openapi2ts.

This module provides:
- TypeResolver for converting schema nodes into TypeScript type expressions
- Declaration helpers for interfaces, enum-literal unions and type aliases
- generate_types for rendering the types file of a whole document
"""

from datetime import datetime, timezone
from typing import Any

from openapi2ts.codegen.document import OpenAPIDocument
from openapi2ts.codegen.schema import (
    ArraySchema,
    EnumSchema,
    IntersectionSchema,
    ObjectSchema,
    PrimitiveSchema,
    RecordSchema,
    RefSchema,
    SchemaNode,
    UnionSchema,
    UnknownSchema,
    parse_schema,
)
from openapi2ts.codegen.utils import quote_property_name, ts_literal

__all__ = [
    'UNKNOWN_TYPE',
    'BUILTIN_TYPES',
    'TypeResolver',
    'resolve_type',
    'generate_type_definition',
    'generate_interface',
    'generate_enum',
    'generate_type_alias',
    'generate_types',
]

UNKNOWN_TYPE = 'any'

BUILTIN_TYPES = frozenset(
    {
        'any',
        'unknown',
        'string',
        'number',
        'boolean',
        'object',
        'void',
        'null',
        'undefined',
        'never',
        'Record',
        'Array',
        'Date',
    }
)

TYPES_HEADER = '// Auto-generated TypeScript types from OpenAPI schema'


class TypeResolver:
    """Converts schema nodes into TypeScript type expressions.

    Referenced schemas are named, not looked up, so a ``$ref`` resolves to
    the referenced name whether or not the target exists. ``aliases`` maps
    schema names to the local names a module imports them under.

    Example:
        >>> resolver = TypeResolver()
        >>> resolver.resolve({'type': 'array', 'items': {'type': 'string'}})
        'string[]'
        >>> resolver.resolve({'$ref': '#/components/schemas/Todo'})
        'Todo'
    """

    def __init__(self, aliases: dict[str, str] | None = None):
        self.aliases = dict(aliases or {})

    def resolve(self, schema: Any) -> str:
        """Resolve a raw schema mapping into a type expression."""
        return self.resolve_node(parse_schema(schema))

    def resolve_node(self, node: SchemaNode) -> str:
        if isinstance(node, RefSchema):
            return self.aliases.get(node.name, node.name)
        if isinstance(node, UnionSchema):
            return ' | '.join(self.resolve_node(member) for member in node.members)
        if isinstance(node, IntersectionSchema):
            return ' & '.join(self.resolve_node(member) for member in node.members)
        if isinstance(node, PrimitiveSchema):
            return node.kind
        if isinstance(node, ArraySchema):
            return self._array_type(node)
        if isinstance(node, ObjectSchema):
            return self._object_type(node)
        if isinstance(node, RecordSchema):
            return f'Record<string, {UNKNOWN_TYPE}>'
        if isinstance(node, EnumSchema):
            return enum_union(node.values)
        if isinstance(node, UnknownSchema):
            return UNKNOWN_TYPE
        return UNKNOWN_TYPE

    def _array_type(self, node: ArraySchema) -> str:
        if node.items is None:
            return f'{UNKNOWN_TYPE}[]'

        item_type = self.resolve_node(node.items)
        if _needs_parentheses(node.items):
            item_type = f'({item_type})'
        return f'{item_type}[]'

    def _object_type(self, node: ObjectSchema) -> str:
        if not node.properties:
            return '{}'

        fields = '; '.join(
            f'{self.field_name(name, node)}: {self.resolve_node(prop)}'
            for name, prop in node.properties
        )
        return f'{{ {fields} }}'

    @staticmethod
    def field_name(name: str, node: ObjectSchema) -> str:
        optional = '' if node.is_required(name) else '?'
        return f'{quote_property_name(name)}{optional}'


def _needs_parentheses(node: SchemaNode) -> bool:
    if isinstance(node, (UnionSchema, IntersectionSchema)):
        return len(node.members) > 1
    if isinstance(node, EnumSchema):
        return len(node.values) > 1
    return False


def enum_union(values) -> str:
    return ' | '.join(ts_literal(value) for value in values)


_default_resolver = TypeResolver()


def resolve_type(schema: Any) -> str:
    """Resolve a raw schema mapping with a shared resolver."""
    return _default_resolver.resolve(schema)


def _is_object_with_properties(schema: Any) -> bool:
    return (
        isinstance(schema, dict)
        and schema.get('type') == 'object'
        and isinstance(schema.get('properties'), dict)
    )


def _object_node(schema: dict) -> ObjectSchema:
    # composite keywords next to ``properties`` do not affect the fields
    return parse_schema(
        {
            'type': 'object',
            'properties': schema['properties'],
            'required': schema.get('required'),
        }
    )


def generate_interface(type_name: str, schema: dict) -> str:
    lines = [f'export interface {type_name} {{']
    if _is_object_with_properties(schema):
        node = _object_node(schema)
        for name, prop in node.properties:
            field = TypeResolver.field_name(name, node)
            lines.append(f'  {field}: {_default_resolver.resolve_node(prop)};')
    lines.append('}')
    return '\n'.join(lines)


def generate_enum(type_name: str, schema: dict) -> str:
    values = schema.get('enum') if isinstance(schema, dict) else None
    if not isinstance(values, list) or not values:
        return generate_type_alias(type_name, schema)
    return f'export type {type_name} = {enum_union(values)};'


def generate_type_alias(type_name: str, schema: Any) -> str:
    return f'export type {type_name} = {resolve_type(schema)};'


def generate_type_definition(type_name: str, schema: Any) -> str:
    """Generate the declaration for one named schema.

    Schemas of ``type: object`` with a ``properties`` mapping become
    interfaces, whatever composite keywords they also carry. Otherwise a
    schema declaring ``enum`` becomes a union of its literals, even when it
    also declares a primitive ``type``. Everything else is a plain alias.
    """
    if _is_object_with_properties(schema):
        return generate_interface(type_name, schema)

    if isinstance(schema, dict) and isinstance(schema.get('enum'), list):
        return generate_enum(type_name, schema)

    return generate_type_alias(type_name, schema)


def generated_on(generated_at: datetime | None = None) -> str:
    moment = generated_at or datetime.now(timezone.utc)
    return f'// Generated on: {moment.isoformat()}'


def generate_types(
    document: OpenAPIDocument | dict, generated_at: datetime | None = None
) -> str:
    """Render the types file for every named schema of a document.

    Args:
        document: The OpenAPI document (raw mapping or wrapped).
        generated_at: Timestamp for the header; defaults to now (UTC).

    Returns:
        The declarations, or an empty string when the document declares no
        schemas. Callers should not write a types file in that case.
    """
    if not isinstance(document, OpenAPIDocument):
        document = OpenAPIDocument(document)

    schemas = document.schemas
    if not schemas:
        return ''

    declarations = [
        generate_type_definition(name, schema) for name, schema in schemas.items()
    ]
    header = f'{TYPES_HEADER}\n{generated_on(generated_at)}\n\n'
    return header + '\n\n'.join(declarations) + '\n'
