"""Endpoint method generation for the TypeScript client.

Each analyzed path becomes an ``Endpoint`` carrying everything needed to
render its method: name, response and request types, the query parameter
type and security labels. ``decide_shape`` picks how the method is exposed
on the client, and the ``render_*`` functions produce the TypeScript source
for each shape. All shapes share one request body template,
``render_request_fn``.
"""

import dataclasses
import re
from enum import Enum

from openapi2ts.codegen.document import OpenAPIDocument, ParameterRecord
from openapi2ts.codegen.paths import PathInfo, normalize_resource_name
from openapi2ts.codegen.schema import SchemaNode, UnknownSchema, parse_schema
from openapi2ts.codegen.security import resolve_security
from openapi2ts.codegen.types import UNKNOWN_TYPE, TypeResolver
from openapi2ts.codegen.utils import method_name, quote_property_name, to_identifier

__all__ = [
    'MethodShape',
    'QueryParamsType',
    'Endpoint',
    'build_endpoint',
    'decide_shape',
    'has_operation_id',
    'render_endpoint',
    'render_request_fn',
    'singular_name',
]

QUERY_PARAMS_TYPE = 'QueryParams'

# verbs whose resource-shaped operationId methods take the id first
CURRIED_METHODS = frozenset({'post', 'put', 'patch', 'delete'})

_PATH_PARAM = re.compile(r'\{([^}]+)\}')

_QUERY_PRIMITIVES = {
    'string': 'string',
    'number': 'number',
    'integer': 'number',
    'boolean': 'boolean',
}

INDENT = '  '

# names the request template declares itself
TEMPLATE_LOCALS = frozenset({'url', 'response', 'data', 'body', 'params'})


class MethodShape(Enum):
    """How an endpoint is exposed on its verb block.

    - ``DIRECT``: ``opname(pathParams..., params?, body?)``
    - ``CURRIED``: ``opname(pathParams...)(body?)``
    - ``BARE``: ``resource(params?)``
    - ``NESTED``: ``resource.queryParams(params)`` / ``resource.data(body)``
    - ``KEYED``: ``resource(id).get()`` / ``.data(body)`` / ``.delete()``
    """

    DIRECT = 'direct'
    CURRIED = 'curried'
    BARE = 'bare'
    NESTED = 'nested'
    KEYED = 'keyed'


@dataclasses.dataclass(frozen=True)
class QueryParamsType:
    annotation: str
    has_required: bool = False
    declared: bool = False

    def signature(self) -> str:
        if self.has_required:
            return f'params: {self.annotation}'
        return f'params: {self.annotation} = {{}}'


@dataclasses.dataclass(frozen=True)
class Endpoint:
    """Everything needed to render one client method.

    Attributes:
        path_info: The analyzed path the endpoint belongs to.
        name: The method name derived from the operationId, if any.
        response_type: TypeScript type of the success payload.
        request_type: TypeScript type of the request body, or None.
        query: The query parameter type used by GET methods.
        security: Human-readable authentication requirements.
        returns_payload: False for DELETE without a success schema.
    """

    path_info: PathInfo
    name: str | None
    response_type: str
    request_type: str | None
    query: QueryParamsType
    security: tuple[str, ...] = ()
    returns_payload: bool = True
    response_schema: SchemaNode = dataclasses.field(default_factory=UnknownSchema)
    request_schema: SchemaNode | None = None

    @property
    def method(self) -> str:
        return self.path_info.method

    @property
    def has_body(self) -> bool:
        return self.request_type is not None

    @property
    def result_type(self) -> str:
        return self.response_type if self.returns_payload else 'void'


def has_operation_id(path_info: PathInfo) -> bool:
    return bool(method_name(path_info.operation.operation_id, ''))


def decide_shape(path_info: PathInfo) -> MethodShape:
    """Decide how an endpoint is exposed on the client.

    Operations with an operationId become methods named after it; the
    resource-shaped ones that write or delete take their path parameters in
    a first call. Without an operationId the shape follows the path: plain
    collection reads are called directly, collections with query
    parameters or a body get nested ``queryParams``/``data`` members, and
    resource paths are keyed by their path parameters.
    """
    operation = path_info.operation

    if has_operation_id(path_info):
        if path_info.is_resource and path_info.method in CURRIED_METHODS:
            return MethodShape.CURRIED
        return MethodShape.DIRECT

    if path_info.is_resource:
        return MethodShape.KEYED

    if operation.has_request_body:
        return MethodShape.NESTED
    if path_info.method == 'get' and operation.query_parameters:
        return MethodShape.NESTED
    return MethodShape.BARE


def _query_param_type(schema) -> str:
    if not isinstance(schema, dict):
        return UNKNOWN_TYPE

    schema_type = schema.get('type')
    if schema_type in _QUERY_PRIMITIVES:
        return _QUERY_PRIMITIVES[schema_type]
    if schema_type == 'array':
        items = schema.get('items')
        item_type = items.get('type') if isinstance(items, dict) else None
        return f'{_QUERY_PRIMITIVES.get(item_type, UNKNOWN_TYPE)}[]'
    return UNKNOWN_TYPE


def query_params_type(parameters: list[ParameterRecord]) -> QueryParamsType:
    """Build the query parameter type from declared query parameters.

    Declared parameters are mapped shallowly, without resolving references.
    Without any declared parameter the open ``QueryParams`` type is used.
    """
    if not parameters:
        return QueryParamsType(QUERY_PARAMS_TYPE)

    fields = '; '.join(
        f'{quote_property_name(param.name)}{"" if param.required else "?"}: '
        f'{_query_param_type(param.schema)}'
        for param in parameters
    )
    return QueryParamsType(
        annotation=f'{{ {fields} }}',
        has_required=any(param.required for param in parameters),
        declared=True,
    )


def build_endpoint(
    path_info: PathInfo,
    document: OpenAPIDocument,
    resolver: TypeResolver | None = None,
) -> Endpoint:
    resolver = resolver or TypeResolver()
    operation = path_info.operation

    raw_response = operation.success_response_schema()
    response_schema = parse_schema(raw_response)

    request_schema = None
    request_type = None
    if operation.has_request_body:
        request_schema = parse_schema(operation.request_body_schema())
        request_type = resolver.resolve_node(request_schema)

    return Endpoint(
        path_info=path_info,
        name=method_name(operation.operation_id, '') or None,
        response_type=resolver.resolve_node(response_schema),
        request_type=request_type,
        query=query_params_type(operation.query_parameters),
        security=tuple(resolve_security(operation, document)),
        returns_payload=not (path_info.method == 'delete' and raw_response is None),
        response_schema=response_schema,
        request_schema=request_schema,
    )


def singular_name(resource: str) -> str:
    return resource[:-1] if resource.endswith('s') and len(resource) > 1 else resource


def path_param_name(name: str) -> str:
    """Variable name for a path placeholder, clear of the template's locals."""
    identifier = to_identifier(name)
    if identifier in TEMPLATE_LOCALS:
        identifier += '_'
    return identifier


def path_param_signature(path_info: PathInfo) -> list[str]:
    """Function parameters for the path placeholders, one per distinct name."""
    seen = []
    for name in path_info.path_params:
        identifier = path_param_name(name)
        if identifier not in seen:
            seen.append(identifier)
    return [f'{identifier}: string' for identifier in seen]


def url_template(path: str) -> str:
    escaped = path.replace('\\', '\\\\').replace('`', '\\`')
    substituted = _PATH_PARAM.sub(
        lambda match: f'${{{path_param_name(match.group(1))}}}', escaped
    )
    return f'`${{this.config.baseUrl}}{substituted}`'


def _indent(lines: list[str], depth: int = 1) -> list[str]:
    prefix = INDENT * depth
    return [prefix + line if line else line for line in lines]


def _comment_text(text: str) -> list[str]:
    return [line.rstrip().replace('*/', '*\\/') for line in text.splitlines()]


def render_doc(endpoint: Endpoint, name: str) -> list[str]:
    operation = endpoint.path_info.operation
    lines = ['/**']
    lines.extend(f' * {line}'.rstrip() for line in _comment_text(operation.summary or name))
    if operation.description:
        lines.extend(f' * {line}'.rstrip() for line in _comment_text(operation.description))
    if endpoint.security:
        lines.append(f' * @requires {", ".join(endpoint.security)}')
    lines.append(' */')
    return lines


def render_request_fn(
    endpoint: Endpoint,
    params: list[str],
    *,
    with_query: bool = False,
    with_body: bool = False,
) -> list[str]:
    """Render the async arrow function performing one request.

    Returns the lines of ``async (...): Promise<ApiResponse<T>> => { ... }``
    without trailing punctuation or outer indentation.
    """
    verb = endpoint.method.upper()
    body = [f'const url = new URL({url_template(endpoint.path_info.path)});']

    if with_query:
        body += [
            'Object.entries(params).forEach(([key, value]) => {',
            '  if (value !== undefined) {',
            '    url.searchParams.append(key, String(value));',
            '  }',
            '});',
        ]

    body += ['', 'const response = await fetch(url.toString(), {', f"  method: '{verb}',"]
    if with_body:
        body += [
            '  headers: {',
            "    'Content-Type': 'application/json',",
            '    ...this.config.headers,',
            '  },',
            '  body: JSON.stringify(body),',
        ]
    else:
        body.append('  headers: this.config.headers,')
    body += ['});', '']

    if endpoint.returns_payload:
        body += ['const data = await response.json();', 'return {', '  data,']
    else:
        body += ['return {', '  data: undefined,']
    body += ['  status: response.status,', '  statusText: response.statusText,', '};']

    signature = (
        f'async ({", ".join(params)}): '
        f'Promise<ApiResponse<{endpoint.result_type}>> => {{'
    )
    return [signature, *_indent(body), '}']


def _member(key: str, fn: list[str], prefix: str = '', suffix: str = ',') -> list[str]:
    return [f'{key}: {prefix}{fn[0]}', *fn[1:-1], fn[-1] + suffix]


def _get_params(endpoint: Endpoint) -> list[str]:
    return [endpoint.query.signature()]


def _body_params(endpoint: Endpoint) -> list[str]:
    return [f'body: {endpoint.request_type}']


def render_direct(endpoint: Endpoint) -> list[str]:
    """``opname: async (pathParams..., params, body) => ...``"""
    name = endpoint.name or normalize_resource_name(endpoint.path_info.resource_name)
    params = path_param_signature(endpoint.path_info)
    with_query = endpoint.method == 'get'
    if with_query:
        params += _get_params(endpoint)
    if endpoint.has_body:
        params += _body_params(endpoint)

    fn = render_request_fn(
        endpoint, params, with_query=with_query, with_body=endpoint.has_body
    )
    return render_doc(endpoint, name) + _member(quote_property_name(name), fn)


def render_curried(endpoint: Endpoint) -> list[str]:
    """``opname: (pathParams...) => async (body) => ...``"""
    name = endpoint.name or normalize_resource_name(endpoint.path_info.resource_name)
    params = _body_params(endpoint) if endpoint.has_body else []
    fn = render_request_fn(endpoint, params, with_body=endpoint.has_body)
    outer = ', '.join(path_param_signature(endpoint.path_info))
    return render_doc(endpoint, name) + _member(
        quote_property_name(name), fn, prefix=f'({outer}) => '
    )


def render_bare(endpoint: Endpoint, key: str) -> list[str]:
    """``resource: async (params = {}) => ...`` for plain collection calls."""
    with_query = endpoint.method == 'get'
    params = _get_params(endpoint) if with_query else []
    fn = render_request_fn(endpoint, params, with_query=with_query)
    return render_doc(endpoint, key) + _member(quote_property_name(key), fn)


def _fallback_member(endpoint: Endpoint, fallback: str, fn: list[str]) -> list[str]:
    name = method_name(endpoint.path_info.operation.operation_id, fallback)
    return render_doc(endpoint, name) + _member(name, fn)


def _query_member(endpoint: Endpoint, fallback: str) -> list[str]:
    params = _get_params(endpoint)
    fn = render_request_fn(endpoint, params, with_query=True)
    return _fallback_member(endpoint, fallback, fn)


def _data_member(endpoint: Endpoint) -> list[str]:
    fn = render_request_fn(endpoint, _body_params(endpoint), with_body=True)
    return _fallback_member(endpoint, 'data', fn)


def render_nested(endpoint: Endpoint, key: str) -> list[str]:
    """``resource: { queryParams: ..., data: ... }`` for collections."""
    members = []
    if endpoint.method == 'get':
        members += _query_member(endpoint, 'queryParams')
    if endpoint.has_body:
        members += _data_member(endpoint)
    return [f'{quote_property_name(key)}: {{', *_indent(members), '},']


def render_keyed(endpoint: Endpoint, key: str) -> list[str]:
    """``singular: (id) => ({ get, data, delete })`` for single resources."""
    method = endpoint.method
    members = []

    if method == 'get':
        if endpoint.query.declared:
            members += _query_member(endpoint, 'get')
        else:
            fn = render_request_fn(endpoint, [])
            members += _fallback_member(endpoint, 'get', fn)
    if endpoint.has_body:
        members += _data_member(endpoint)
    if method == 'delete':
        fn = render_request_fn(endpoint, [])
        members += _fallback_member(endpoint, 'delete', fn)
    if not members:
        fn = render_request_fn(endpoint, [])
        members += _fallback_member(endpoint, method, fn)

    outer = ', '.join(path_param_signature(endpoint.path_info))
    return [
        f'{quote_property_name(singular_name(key))}: ({outer}) => ({{',
        *_indent(members),
        '}),',
    ]


def render_endpoint(endpoint: Endpoint, shape: MethodShape | None = None) -> list[str]:
    """Render an endpoint in the given (or decided) shape.

    Returns unindented lines forming one entry of a verb block.
    """
    shape = shape or decide_shape(endpoint.path_info)
    key = normalize_resource_name(endpoint.path_info.resource_name)

    if shape is MethodShape.DIRECT:
        return render_direct(endpoint)
    if shape is MethodShape.CURRIED:
        return render_curried(endpoint)
    if shape is MethodShape.BARE:
        return render_bare(endpoint, key)
    if shape is MethodShape.NESTED:
        return render_nested(endpoint, key)
    return render_keyed(endpoint, key)
