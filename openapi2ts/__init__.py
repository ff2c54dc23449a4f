"""openapi2ts - Generate TypeScript types and API clients from OpenAPI documents.

openapi2ts reads an OpenAPI document (JSON or YAML, local or remote) and
writes two TypeScript files: type declarations for the document's schemas
and a fetch-based ``ApiClient`` whose methods mirror the document's paths.

Quick Start:
    >>> from openapi2ts import generate_from_openapi
    >>>
    >>> result = generate_from_openapi('api-spec.json', output_dir='generated')
    >>> result.types_path, result.client_path
    ('generated/types.ts', 'generated/client.ts')

CLI Usage:
    $ openapi2ts generate api-spec.yaml --output-dir generated
    $ openapi2ts generate --config openapi2ts.yaml
"""

from openapi2ts.codegen.client import generate_client
from openapi2ts.codegen.codegen import (
    Codegen,
    GenerateResult,
    generate_client_from_openapi_file,
    generate_from_openapi,
    generate_types_from_openapi,
)
from openapi2ts.codegen.loader import SchemaLoader
from openapi2ts.codegen.types import TypeResolver, generate_types
from openapi2ts.config import CodegenConfig, GenerateOptions, get_config
from openapi2ts.exceptions import (
    ConfigurationError,
    Openapi2tsError,
    OutputError,
    SchemaLoadError,
    SchemaParseError,
)

__all__ = [
    # Main classes
    'Codegen',
    'GenerateResult',
    'SchemaLoader',
    'TypeResolver',
    # Generation functions
    'generate_client',
    'generate_types',
    'generate_from_openapi',
    'generate_types_from_openapi',
    'generate_client_from_openapi_file',
    # Configuration
    'CodegenConfig',
    'GenerateOptions',
    'get_config',
    # Exceptions
    'Openapi2tsError',
    'SchemaLoadError',
    'SchemaParseError',
    'ConfigurationError',
    'OutputError',
]

from openapi2ts._version import version as __version__
