"""Code generation module for openapi2ts.

This module provides the main Codegen class that loads an OpenAPI document
and writes the generated TypeScript types and client, plus convenience
functions mirroring the command line usage.
"""

import dataclasses
import logging
from datetime import datetime
from pathlib import PurePosixPath

from openapi2ts.codegen.client import generate_client
from openapi2ts.codegen.document import OpenAPIDocument
from openapi2ts.codegen.emitter import CodeEmitter, FileEmitter
from openapi2ts.codegen.loader import SchemaLoader
from openapi2ts.codegen.types import generate_types
from openapi2ts.config import GenerateOptions

logger = logging.getLogger(__name__)

__all__ = [
    'Codegen',
    'GenerateResult',
    'generate_from_openapi',
    'generate_types_from_openapi',
    'generate_client_from_openapi_file',
]


@dataclasses.dataclass
class GenerateResult:
    """Information about the generated artifacts.

    Attributes:
        types_path: Where the types file was written, if it was.
        client_path: Where the client file was written, if it was.
        types_content: The generated types, if any were produced.
        client_content: The generated client, if it was requested.
    """

    types_path: str | None = None
    client_path: str | None = None
    types_content: str | None = None
    client_content: str | None = None


class Codegen:
    """Generates TypeScript types and an API client from an OpenAPI document.

    Attributes:
        options: The GenerateOptions with source, output and toggles.
        document: The loaded document (populated by generate()).

    Example:
        >>> from openapi2ts.config import GenerateOptions
        >>> from openapi2ts.codegen.codegen import Codegen
        >>>
        >>> options = GenerateOptions(source='api-spec.json', output_dir='generated')
        >>> result = Codegen(options).generate()
        >>> result.client_path
        'generated/client.ts'
    """

    def __init__(
        self,
        options: GenerateOptions,
        schema_loader: SchemaLoader | None = None,
        emitter: CodeEmitter | None = None,
    ):
        """Initialize the code generator.

        Args:
            options: Source document, output location and toggles.
            schema_loader: Optional custom schema loader.
            emitter: Optional emitter; defaults to writing files into
                     ``options.output_dir``.
        """
        self.options = options
        self.document: OpenAPIDocument | None = None
        self._schema_loader = schema_loader or SchemaLoader()
        self._emitter = emitter or FileEmitter(options.output_dir)

    def _load_schema(self) -> OpenAPIDocument:
        """Load the document from the configured source.

        Raises:
            SchemaLoadError: If the source does not exist or cannot be fetched.
            SchemaParseError: If the source is not valid JSON or YAML.
        """
        self.document = self._schema_loader.load(self.options.source)
        return self.document

    def generate(self, generated_at: datetime | None = None) -> GenerateResult:
        """Generate the requested artifacts and write them.

        The types file is skipped when the document declares no schemas.

        Args:
            generated_at: Timestamp embedded in the file headers; defaults
                          to the current time.

        Returns:
            GenerateResult describing what was written.
        """
        document = self._load_schema()
        result = GenerateResult()

        if self.options.generate_types:
            types_content = generate_types(document, generated_at=generated_at)
            if types_content:
                result.types_content = types_content
                result.types_path = self._emitter.emit_types(
                    types_content, self.options.types_filename
                )
                logger.info(f'TypeScript types generated: {result.types_path}')
            else:
                logger.info('No TypeScript types generated: document has no schemas')

        if self.options.generate_client:
            client_content = generate_client(
                document,
                types_module=self.options.types_module,
                generated_at=generated_at,
            )
            result.client_content = client_content
            result.client_path = self._emitter.emit_client(
                client_content, self.options.client_filename
            )
            logger.info(f'API client generated: {result.client_path}')

        return result


def generate_from_openapi(source: str, **options) -> GenerateResult:
    """Generate types and client from an OpenAPI document.

    Args:
        source: Path or URL of the OpenAPI document.
        **options: Any GenerateOptions field (``output_dir``,
                   ``types_filename``, ``generate_client``, ...).

    Example:
        >>> result = generate_from_openapi(
        ...     'api-spec.json',
        ...     output_dir='generated',
        ...     types_filename='api-types.ts',
        ...     client_filename='api-client.ts',
        ... )
    """
    return Codegen(GenerateOptions(source=source, **options)).generate()


def _split_output_path(output_path: str) -> tuple[str, str]:
    path = PurePosixPath(output_path)
    return str(path.parent), path.name


def generate_types_from_openapi(
    source: str, output_path: str = 'src/out/types.ts'
) -> str:
    """Generate only the types file; returns its content (may be empty)."""
    output_dir, filename = _split_output_path(output_path)
    result = generate_from_openapi(
        source, output_dir=output_dir, types_filename=filename, generate_client=False
    )
    return result.types_content or ''


def generate_client_from_openapi_file(
    source: str, output_path: str = 'src/out/client.ts'
) -> str:
    """Generate only the client file; returns its content."""
    output_dir, filename = _split_output_path(output_path)
    result = generate_from_openapi(
        source, output_dir=output_dir, client_filename=filename, generate_types=False
    )
    return result.client_content
