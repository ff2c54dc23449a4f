"""TypeScript API client generation.

This module renders the client file: the imports of referenced schema types,
the fixed helper types (``ClientConfig``, ``QueryParams``, ``ApiResponse``),
and an ``ApiClient`` class with one object per HTTP verb whose members
mirror the document's paths.
"""

from datetime import datetime

from openapi2ts.codegen.document import OpenAPIDocument
from openapi2ts.codegen.endpoints import (
    Endpoint,
    build_endpoint,
    has_operation_id,
    render_endpoint,
)
from openapi2ts.codegen.import_collector import ImportCollector
from openapi2ts.codegen.paths import (
    PathInfo,
    ResourceGroups,
    collect_path_infos,
    group_paths_by_resource,
)
from openapi2ts.codegen.types import TypeResolver, generated_on
from openapi2ts.codegen.utils import ts_literal

__all__ = [
    'CLIENT_METHODS',
    'DEFAULT_TYPES_MODULE',
    'ClientGenerator',
    'generate_client',
    'import_aliases',
]

# verb blocks emitted on ApiClient, in this order
CLIENT_METHODS = ('get', 'post', 'put', 'delete', 'patch')

DEFAULT_TYPES_MODULE = './types.ts'

# names declared or used as values by the client module itself; schemas
# with these names are imported under an alias
RESERVED_NAMES = frozenset(
    {
        'ApiClient',
        'ApiResponse',
        'ClientConfig',
        'QueryParams',
        'RequestBody',
        'Servers',
        'createClient',
        'JSON',
        'Object',
        'Promise',
        'String',
        'URL',
    }
)

ALIAS_SUFFIX = 'Model'

CLIENT_HEADER = '// Auto-generated API client from OpenAPI specification'

HELPER_TYPES = """\
export interface ClientConfig {
  baseUrl: Servers | (string & {});
  headers?: Record<string, string>;
}

export interface QueryParams {
  [key: string]: string | number | boolean | undefined;
}

export interface RequestBody {
  [key: string]: any;
}

export interface ApiResponse<T = any> {
  data: T;
  status: number;
  statusText: string;
}
"""

CLIENT_CLASS_START = """\
export class ApiClient {
  private config: ClientConfig;

  constructor(config: ClientConfig) {
    this.config = config;
  }
"""

CLIENT_FACTORY = """\
export function createClient(config: ClientConfig): ApiClient {
  return new ApiClient(config);
}
"""


class ClientGenerator:
    """Generates the TypeScript client module for one document.

    Example:
        >>> generator = ClientGenerator(document, types_module='./types.ts')
        >>> source = generator.generate()
    """

    def __init__(
        self,
        document: OpenAPIDocument | dict,
        types_module: str = DEFAULT_TYPES_MODULE,
    ):
        if not isinstance(document, OpenAPIDocument):
            document = OpenAPIDocument(document)
        self.document = document
        self.types_module = types_module
        self.aliases = import_aliases(self.document.schemas)
        self.resolver = TypeResolver(aliases=self.aliases)

    def generate(self, generated_at: datetime | None = None) -> str:
        path_infos = collect_path_infos(self.document)
        endpoints = {
            id(path_info): build_endpoint(path_info, self.document, self.resolver)
            for path_info in path_infos
        }
        groups = group_paths_by_resource(path_infos)

        sections = [f'{CLIENT_HEADER}\n{generated_on(generated_at)}\n']

        imports = self._collect_imports(endpoints.values()).to_lines()
        if imports:
            sections.append('// Import generated types\n' + '\n'.join(imports) + '\n')

        sections.append(self._servers_type() + '\n')
        sections.append(HELPER_TYPES)

        class_body = [CLIENT_CLASS_START]
        for method in CLIENT_METHODS:
            class_body.append(
                self._render_method_block(method, groups, endpoints) + '\n'
            )
        sections.append('\n'.join(class_body) + '}\n')
        sections.append(CLIENT_FACTORY)

        return '\n'.join(sections)

    def _collect_imports(self, endpoints) -> ImportCollector:
        """Collect every schema name the client may refer to.

        Names referenced by response and request types are added alongside
        every named schema of the document; unused imports are harmless,
        missing ones are not.
        """
        collector = ImportCollector()
        for name, alias in self.aliases.items():
            collector.add_alias(name, alias)
        for endpoint in endpoints:
            collector.add_references(self.types_module, endpoint.response_schema)
            if endpoint.request_schema is not None:
                collector.add_references(self.types_module, endpoint.request_schema)
        collector.add_imports({self.types_module: set(self.document.schemas)})
        return collector

    def _servers_type(self) -> str:
        urls = self.document.server_urls
        union = ' | '.join(ts_literal(url) for url in urls) if urls else 'string'
        return f'export type Servers = {union};'

    def _render_method_block(
        self,
        method: str,
        groups: ResourceGroups,
        endpoints: dict[int, Endpoint],
    ) -> str:
        direct: list[str] = []
        fallback: list[str] = []

        for path_infos in groups.get(method, {}).values():
            for path_info in _select_entries(path_infos):
                lines = render_endpoint(endpoints[id(path_info)])
                if has_operation_id(path_info):
                    direct.extend(lines)
                else:
                    fallback.extend(lines)

        body = [f'    {line}' if line else line for line in direct + fallback]
        return '\n'.join([f'  {method} = {{', *body, '  };'])


def import_aliases(schema_names) -> dict[str, str]:
    """Pick local names for schemas that clash with the client's own names.

    ``ApiResponse`` is imported as ``ApiResponseModel``; the suffix repeats
    until the alias is free.
    """
    taken = set(schema_names) | RESERVED_NAMES
    aliases = {}
    for name in schema_names:
        if name not in RESERVED_NAMES:
            continue
        alias = name + ALIAS_SUFFIX
        while alias in taken:
            alias += ALIAS_SUFFIX
        taken.add(alias)
        aliases[name] = alias
    return aliases


def _select_entries(path_infos: list[PathInfo]) -> list[PathInfo]:
    """Pick the members of a resource group that get emitted.

    Every operation with an operationId gets its own method. Without one,
    only the first collection path and the first resource path of the
    group are emitted, since further ones would reuse the same key.
    """
    selected = []
    seen_collection = seen_resource = False

    for path_info in path_infos:
        if has_operation_id(path_info):
            selected.append(path_info)
        elif path_info.is_collection and not seen_collection:
            seen_collection = True
            selected.append(path_info)
        elif path_info.is_resource and not seen_resource:
            seen_resource = True
            selected.append(path_info)

    return selected


def generate_client(
    document: OpenAPIDocument | dict,
    types_module: str = DEFAULT_TYPES_MODULE,
    generated_at: datetime | None = None,
) -> str:
    """Render the TypeScript client module for a document.

    Args:
        document: The OpenAPI document (raw mapping or wrapped).
        types_module: Module specifier the schema types are imported from.
        generated_at: Timestamp for the header; defaults to now (UTC).

    Returns:
        The client module source.
    """
    return ClientGenerator(document, types_module=types_module).generate(generated_at)
