"""Code generation module for openapi2ts.

This module provides the functionality for turning an OpenAPI document into
TypeScript source: schema types and a fetch-based API client.

Main Components:
    - Codegen: The orchestrator that loads a document and writes both files
    - TypeResolver: Converts schemas into TypeScript type expressions
    - ClientGenerator: Renders the ApiClient module
    - SchemaLoader: Loads OpenAPI documents from URLs or files
    - CodeEmitter: Handles output of generated code

Example:
    >>> from openapi2ts.codegen import Codegen
    >>> from openapi2ts.config import GenerateOptions
    >>>
    >>> options = GenerateOptions(source='./openapi.yaml', output_dir='./client')
    >>> Codegen(options).generate()
"""

from openapi2ts.codegen.client import ClientGenerator, generate_client
from openapi2ts.codegen.codegen import (
    Codegen,
    GenerateResult,
    generate_client_from_openapi_file,
    generate_from_openapi,
    generate_types_from_openapi,
)
from openapi2ts.codegen.document import OpenAPIDocument, OperationRecord
from openapi2ts.codegen.emitter import CodeEmitter, FileEmitter, StringEmitter
from openapi2ts.codegen.endpoints import MethodShape, decide_shape
from openapi2ts.codegen.import_collector import ImportCollector
from openapi2ts.codegen.loader import SchemaLoader
from openapi2ts.codegen.paths import PathInfo, analyze_path, group_paths_by_resource
from openapi2ts.codegen.security import resolve_security
from openapi2ts.codegen.types import TypeResolver, generate_types, resolve_type
from openapi2ts.codegen.utils import method_name

__all__ = [
    'ClientGenerator',
    'Codegen',
    'CodeEmitter',
    'FileEmitter',
    'GenerateResult',
    'ImportCollector',
    'MethodShape',
    'OpenAPIDocument',
    'OperationRecord',
    'PathInfo',
    'SchemaLoader',
    'StringEmitter',
    'TypeResolver',
    'analyze_path',
    'decide_shape',
    'generate_client',
    'generate_client_from_openapi_file',
    'generate_from_openapi',
    'generate_types',
    'generate_types_from_openapi',
    'group_paths_by_resource',
    'method_name',
    'resolve_security',
    'resolve_type',
]
