"""Tests for the Codegen orchestrator and convenience functions."""

import json
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from openapi2ts.codegen.codegen import (
    Codegen,
    generate_client_from_openapi_file,
    generate_from_openapi,
    generate_types_from_openapi,
)
from openapi2ts.codegen.document import OpenAPIDocument
from openapi2ts.codegen.emitter import StringEmitter
from openapi2ts.config import GenerateOptions
from openapi2ts.exceptions import SchemaLoadError
from openapi2ts.tests.fixtures import MINIMAL_OPENAPI_SPEC, TODO_SPEC

GENERATED_AT = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def todo_source(tmp_path):
    path = tmp_path / 'openapi.json'
    path.write_text(json.dumps(TODO_SPEC))
    return str(path)


class TestCodegen:
    """Tests for the Codegen class."""

    def test_writes_both_files(self, tmp_path, todo_source):
        output_dir = tmp_path / 'out'
        options = GenerateOptions(source=todo_source, output_dir=str(output_dir))

        result = Codegen(options).generate(generated_at=GENERATED_AT)

        assert result.types_path == str(output_dir / 'types.ts')
        assert result.client_path == str(output_dir / 'client.ts')
        assert (output_dir / 'types.ts').read_text() == result.types_content
        client = (output_dir / 'client.ts').read_text()
        assert 'from "./types.ts";' in client

    def test_custom_filenames(self, tmp_path, todo_source):
        options = GenerateOptions(
            source=todo_source,
            output_dir=str(tmp_path),
            types_filename='api-types.ts',
            client_filename='api-client.ts',
        )

        Codegen(options).generate()

        assert (tmp_path / 'api-types.ts').exists()
        assert 'from "./api-types.ts";' in (tmp_path / 'api-client.ts').read_text()

    def test_skips_types_without_schemas(self):
        loader = MagicMock()
        loader.load.return_value = OpenAPIDocument(MINIMAL_OPENAPI_SPEC)
        emitter = StringEmitter()
        options = GenerateOptions(source='spec.yaml')

        result = Codegen(options, schema_loader=loader, emitter=emitter).generate()

        assert result.types_path is None
        assert result.types_content is None
        assert result.client_path == 'client.ts'
        assert list(emitter.get_all_modules()) == ['client.ts']
        loader.load.assert_called_once_with('spec.yaml')

    def test_toggles(self, todo_source):
        emitter = StringEmitter()
        options = GenerateOptions(source=todo_source, generate_client=False)

        result = Codegen(options, emitter=emitter).generate()

        assert result.client_path is None
        assert list(emitter.get_all_modules()) == ['types.ts']

    def test_document_is_kept(self, todo_source):
        codegen = Codegen(GenerateOptions(source=todo_source), emitter=StringEmitter())
        assert codegen.document is None

        codegen.generate()

        assert 'Todo' in codegen.document.schemas

    def test_deterministic(self, todo_source):
        first = Codegen(
            GenerateOptions(source=todo_source), emitter=StringEmitter()
        ).generate(generated_at=GENERATED_AT)
        second = Codegen(
            GenerateOptions(source=todo_source), emitter=StringEmitter()
        ).generate(generated_at=GENERATED_AT)

        assert first == second

    def test_missing_source(self, tmp_path):
        options = GenerateOptions(source=str(tmp_path / 'nope.json'))

        with pytest.raises(SchemaLoadError):
            Codegen(options, emitter=StringEmitter()).generate()


class TestConvenienceFunctions:
    def test_generate_from_openapi(self, tmp_path, todo_source):
        result = generate_from_openapi(todo_source, output_dir=str(tmp_path / 'gen'))

        assert (tmp_path / 'gen' / 'types.ts').exists()
        assert (tmp_path / 'gen' / 'client.ts').exists()
        assert result.client_content.startswith('// Auto-generated API client')

    def test_generate_types_only(self, tmp_path, todo_source):
        output_path = tmp_path / 'gen' / 'model.ts'

        content = generate_types_from_openapi(todo_source, str(output_path))

        assert output_path.read_text() == content
        assert not (tmp_path / 'gen' / 'client.ts').exists()

    def test_generate_client_only(self, tmp_path, todo_source):
        output_path = tmp_path / 'gen' / 'api.ts'

        content = generate_client_from_openapi_file(todo_source, str(output_path))

        assert output_path.read_text() == content
        assert not (tmp_path / 'gen' / 'types.ts').exists()

    def test_types_only_without_schemas(self, tmp_path):
        source = tmp_path / 'empty.json'
        source.write_text(json.dumps(MINIMAL_OPENAPI_SPEC))

        content = generate_types_from_openapi(
            str(source), str(tmp_path / 'gen' / 'types.ts')
        )

        assert content == ''
        assert not (tmp_path / 'gen' / 'types.ts').exists()
