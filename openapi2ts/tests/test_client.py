"""Tests for the generated TypeScript client module."""

from datetime import datetime, timezone

import pytest

from openapi2ts.codegen.client import ClientGenerator, generate_client, import_aliases
from openapi2ts.tests.fixtures import (
    MINIMAL_OPENAPI_SPEC,
    PETSTORE_SPEC,
    SEARCH_SPEC,
    SECURED_SPEC,
    TODO_SPEC,
    TODO_SPEC_WITH_OPERATION_IDS,
)

GENERATED_AT = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _block(content: str, method: str) -> str:
    start = content.index(f'  {method} = {{\n')
    return content[start : content.index('\n  };', start)]


class TestClientStructure:
    """Tests for the fixed parts of the client module."""

    @pytest.fixture
    def content(self):
        return generate_client(TODO_SPEC, generated_at=GENERATED_AT)

    def test_header(self, content):
        assert content.startswith(
            '// Auto-generated API client from OpenAPI specification\n'
            '// Generated on: 2024-01-01T00:00:00+00:00\n'
        )

    def test_imports(self, content):
        assert (
            '// Import generated types\n'
            'import type { Status, Todo, TodoInput } from "./types.ts";\n'
        ) in content

    def test_custom_types_module(self):
        content = generate_client(
            TODO_SPEC, types_module='./api-types.ts', generated_at=GENERATED_AT
        )
        assert 'from "./api-types.ts";' in content

    def test_servers(self, content):
        assert (
            'export type Servers = "https://api.example.com/v1" | '
            '"http://localhost:8080";'
        ) in content

    def test_servers_without_declared_servers(self):
        content = generate_client(SEARCH_SPEC, generated_at=GENERATED_AT)
        assert 'export type Servers = string;' in content

    def test_helper_types_and_factory(self, content):
        assert 'baseUrl: Servers | (string & {});' in content
        assert 'export interface ApiResponse<T = any> {' in content
        assert 'export class ApiClient {' in content
        assert 'export function createClient(config: ClientConfig): ApiClient {' in content

    def test_verb_blocks_in_order(self, content):
        positions = [
            content.index(f'  {method} = {{')
            for method in ('get', 'post', 'put', 'delete', 'patch')
        ]
        assert positions == sorted(positions)
        assert '  post = {\n  };' in content
        assert '  patch = {\n  };' in content

    def test_no_imports_without_schemas(self):
        content = generate_client(MINIMAL_OPENAPI_SPEC, generated_at=GENERATED_AT)
        assert '// Import generated types' not in content
        assert 'import type' not in content

    def test_accepts_wrapped_document(self):
        from openapi2ts.codegen.document import OpenAPIDocument

        generator = ClientGenerator(OpenAPIDocument(TODO_SPEC))
        assert generator.generate(GENERATED_AT) == generate_client(
            TODO_SPEC, generated_at=GENERATED_AT
        )


class TestClientMethods:
    """End-to-end tests for the generated verb blocks."""

    def test_fallback_shapes(self):
        content = generate_client(TODO_SPEC, generated_at=GENERATED_AT)

        get_block = _block(content, 'get')
        assert (
            '    todos: async (params: QueryParams = {}): '
            'Promise<ApiResponse<Todo[]>> => {'
        ) in get_block
        assert '    todo: (id: string) => ({' in get_block
        assert '      get: async (): Promise<ApiResponse<Todo>> => {' in get_block

        put_block = _block(content, 'put')
        assert '    todo: (id: string) => ({' in put_block
        assert (
            '      data: async (body: TodoInput): Promise<ApiResponse<Todo>> => {'
        ) in put_block
        assert 'updatetodo' not in put_block

        delete_block = _block(content, 'delete')
        assert '      delete: async (): Promise<ApiResponse<void>> => {' in delete_block

    def test_operation_id_shapes(self):
        content = generate_client(TODO_SPEC_WITH_OPERATION_IDS, generated_at=GENERATED_AT)

        get_block = _block(content, 'get')
        assert '    gettodos: async (params: QueryParams = {}): ' in get_block
        assert '    gettodobyid: async (id: string, params: QueryParams = {}): ' in get_block

        assert (
            '    updatetodo: (id: string) => async (body: TodoInput): '
            'Promise<ApiResponse<Todo>> => {'
        ) in _block(content, 'put')
        assert (
            '    deletetodo: (id: string) => async (): Promise<ApiResponse<void>> => {'
        ) in _block(content, 'delete')

    def test_required_query_parameters(self):
        content = generate_client(SEARCH_SPEC, generated_at=GENERATED_AT)
        assert 'params: { q: string; limit?: number })' in content
        assert 'params: { q: string; limit?: number } = {}' not in content

    def test_security_labels(self):
        content = generate_client(SECURED_SPEC, generated_at=GENERATED_AT)

        get_block = _block(content, 'get')
        assert '     * @requires Basic Authentication' in get_block
        assert '     * @requires Bearer Token' in _block(content, 'post')
        # explicit opt-out on getStatus
        assert get_block.count('@requires') == 1

    def test_operation_id_methods_come_first(self):
        spec = {
            'paths': {
                '/pets': {'get': {'responses': {}}},
                '/owners': {'get': {'operationId': 'listOwners', 'responses': {}}},
            }
        }
        get_block = _block(generate_client(spec, generated_at=GENERATED_AT), 'get')
        assert get_block.index('listowners:') < get_block.index('pets:')

    def test_only_first_fallback_per_kind(self):
        spec = {
            'paths': {
                '/v1/pets': {'get': {'summary': 'first', 'responses': {}}},
                '/v2/pets': {'get': {'summary': 'second', 'responses': {}}},
                '/v2/pets/{id}': {'get': {'summary': 'one', 'responses': {}}},
                '/v3/pets/{id}': {'get': {'summary': 'other', 'responses': {}}},
            }
        }
        get_block = _block(generate_client(spec, generated_at=GENERATED_AT), 'get')
        assert ' * first' in get_block
        assert ' * second' not in get_block
        assert '    pet: (id: string) => ({' in get_block
        assert get_block.count('pet: (id: string)') == 1

    def test_quoted_keys(self):
        spec = {
            'paths': {
                '/2fa': {'post': {'responses': {}}},
                '/user-profiles/{id}': {'get': {'responses': {}}},
            }
        }
        content = generate_client(spec, generated_at=GENERATED_AT)
        assert '    "2fa": async (): Promise<ApiResponse<any>> => {' in content
        assert '    user_profile: (id: string) => ({' in content


class TestDeterminism:
    def test_identical_output(self):
        first = generate_client(TODO_SPEC, generated_at=GENERATED_AT)
        second = generate_client(TODO_SPEC, generated_at=GENERATED_AT)
        assert first == second

    def test_timestamp_defaults_to_now(self):
        content = generate_client(TODO_SPEC)
        assert '// Generated on: ' in content
        assert '2024-01-01T00:00:00+00:00' not in content


class TestHelperNameClashes:
    """Schemas named like the client's own declarations are aliased."""

    @pytest.fixture
    def content(self):
        return generate_client(PETSTORE_SPEC, generated_at=GENERATED_AT)

    def test_import_aliases(self):
        assert import_aliases(['Pet', 'ApiResponse', 'ApiResponseModel', 'URL']) == {
            'ApiResponse': 'ApiResponseModelModel',
            'URL': 'URLModel',
        }

    def test_clashing_schemas_are_imported_under_alias(self, content):
        assert (
            'import type { ApiResponse as ApiResponseModelModel, ApiResponseModel, '
            'Pet, URL as URLModel } from "./types.ts";'
        ) in content
        assert 'export interface ApiResponse<T = any> {' in content

    def test_aliases_used_in_method_types(self, content):
        assert (
            '    uploadfile: (petId: string) => async (): '
            'Promise<ApiResponse<ApiResponseModelModel>> => {'
        ) in content
        assert 'Promise<ApiResponse<Pet[]>>' in content

    def test_no_aliases_without_clashes(self):
        content = generate_client(TODO_SPEC, generated_at=GENERATED_AT)
        assert ' as ' not in content.split('export type Servers')[0]
