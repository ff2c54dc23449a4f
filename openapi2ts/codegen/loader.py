"""Loading OpenAPI documents from files and URLs.

Documents are read from a local path or fetched over HTTP(S), then parsed as
JSON or YAML. Nothing is validated beyond parsing: the generator tolerates
missing or malformed sections.
"""

import json
import logging
from pathlib import Path
from typing import Any

import httpx
import yaml

from openapi2ts.codegen.document import OpenAPIDocument
from openapi2ts.codegen.utils import is_url
from openapi2ts.exceptions import SchemaLoadError, SchemaParseError

logger = logging.getLogger(__name__)

__all__ = ['SchemaLoader', 'load_document']


class SchemaLoader:
    """Loads OpenAPI documents from URLs or file paths.

    Files ending in ``.json`` are parsed as JSON, everything else as YAML
    (which also accepts JSON). URLs are parsed as JSON only when the content
    type or the extension says so, and as YAML otherwise.

    Example:
        >>> loader = SchemaLoader()
        >>> document = loader.load('api-spec.yaml')
        >>> document = loader.load('https://api.example.com/openapi.json')
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        base_path: str | Path | None = None,
        timeout: float = 30.0,
    ):
        """Initialize the schema loader.

        Args:
            http_client: Optional HTTP client to use for URL requests.
            base_path: Base path for resolving relative file paths.
                      Defaults to the current working directory.
            timeout: Timeout in seconds for URL requests.
        """
        self._http_client = http_client
        self._base_path = Path(base_path) if base_path else Path.cwd()
        self._timeout = timeout

    def load(self, source: str) -> OpenAPIDocument:
        """Load an OpenAPI document from a URL or file path.

        Args:
            source: URL or file path of the document.

        Returns:
            The parsed document.

        Raises:
            SchemaLoadError: If the file does not exist or the URL cannot
                             be fetched.
            SchemaParseError: If the content is not valid JSON or YAML.
        """
        if is_url(source):
            data = self._load_from_url(source)
        else:
            data = self._load_from_file(source)

        if not isinstance(data, dict):
            logger.warning(f'Document {source} is not a mapping; treating it as empty')

        return OpenAPIDocument(data)

    def _load_from_url(self, url: str) -> Any:
        logger.debug(f'Fetching OpenAPI document from {url}')
        try:
            if self._http_client:
                response = self._http_client.get(url)
            else:
                response = httpx.get(url, follow_redirects=True, timeout=self._timeout)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise SchemaLoadError(url, cause=e) from e

        content_type = response.headers.get('content-type', '')
        path = httpx.URL(url).path
        if 'yaml' in content_type or path.endswith(('.yaml', '.yml')):
            as_json = False
        else:
            as_json = 'json' in content_type or path.endswith('.json')
        return self._parse(response.text, url, as_json=as_json)

    def _load_from_file(self, file_path: str) -> Any:
        path = Path(file_path)
        if not path.is_absolute():
            path = self._base_path / path

        if not path.is_file():
            raise SchemaLoadError(
                str(file_path),
                cause=FileNotFoundError(f'OpenAPI specification file not found: {path}'),
            )

        logger.debug(f'Reading OpenAPI document from {path}')
        try:
            content = path.read_text(encoding='utf-8')
        except OSError as e:
            raise SchemaLoadError(str(file_path), cause=e) from e

        return self._parse(content, str(file_path), as_json=path.suffix.lower() == '.json')

    @staticmethod
    def _parse(content: str, source: str, as_json: bool) -> Any:
        try:
            if as_json:
                return json.loads(content)
            return yaml.safe_load(content)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise SchemaParseError(source, cause=e) from e


def load_document(source: str) -> OpenAPIDocument:
    """Load a document with a default ``SchemaLoader``."""
    return SchemaLoader().load(source)
