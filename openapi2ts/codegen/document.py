"""Read-only views over a parsed OpenAPI document.

The generator works on the plain mapping produced by the JSON/YAML parser.
``OpenAPIDocument`` wraps that mapping and exposes the handful of sections
code generation needs, falling back to empty values whenever a section is
missing or has the wrong shape. Nothing here validates the document.
"""

import dataclasses
from collections.abc import Iterator
from typing import Any

__all__ = [
    'HTTP_METHODS',
    'JSON_CONTENT_TYPE',
    'FORM_CONTENT_TYPE',
    'ParameterRecord',
    'OperationRecord',
    'OpenAPIDocument',
]

HTTP_METHODS = ('get', 'put', 'post', 'delete', 'options', 'head', 'patch', 'trace')

JSON_CONTENT_TYPE = 'application/json'
FORM_CONTENT_TYPE = 'application/x-www-form-urlencoded'

SUCCESS_STATUS_CODES = ('200', '201', '204')


def _mapping(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


@dataclasses.dataclass(frozen=True)
class ParameterRecord:
    name: str
    location: str
    required: bool = False
    schema: Any = None


@dataclasses.dataclass(frozen=True)
class OperationRecord:
    """One HTTP operation on one path template.

    Attributes:
        path: The path template, possibly containing ``{name}`` placeholders.
        method: The HTTP verb, lower-case.
        operation_id: The declared operationId, if any.
        parameters: Declared parameters, path-level ones merged in.
        request_body: The raw request body object.
        responses: Response objects keyed by status code.
        security: The operation's own security requirements. ``None`` when
            the operation does not declare any, ``[]`` when it explicitly
            opts out of authentication.
    """

    path: str
    method: str
    operation_id: str | None = None
    summary: str | None = None
    description: str | None = None
    parameters: tuple[ParameterRecord, ...] = ()
    request_body: Any = None
    responses: dict = dataclasses.field(default_factory=dict)
    security: list | None = None

    @property
    def query_parameters(self) -> list[ParameterRecord]:
        return [param for param in self.parameters if param.location == 'query']

    @property
    def has_request_body(self) -> bool:
        return bool(self.request_body)

    def request_body_schema(self) -> Any:
        """Return the JSON (or form-encoded) request body schema, if any."""
        content = _mapping(_mapping(self.request_body).get('content'))
        for content_type in (JSON_CONTENT_TYPE, FORM_CONTENT_TYPE):
            media = content.get(content_type)
            if isinstance(media, dict) and 'schema' in media:
                return media['schema']
        return None

    def success_response_schema(self) -> Any:
        """Return the JSON schema of the first declared success response.

        Status codes are checked in the order 200, 201, 204; only the first
        one present is considered.
        """
        for status in SUCCESS_STATUS_CODES:
            response = self.responses.get(status)
            if response is None:
                continue
            return _json_schema(_mapping(_mapping(response).get('content')))
        return None


def _json_schema(content: dict) -> Any:
    media = content.get(JSON_CONTENT_TYPE)
    if not isinstance(media, dict):
        media = next(
            (
                value
                for key, value in content.items()
                if isinstance(key, str) and key.endswith('+json')
            ),
            None,
        )
    if isinstance(media, dict):
        return media.get('schema')
    return None


class OpenAPIDocument:
    """A tolerant wrapper around a parsed OpenAPI document.

    Example:
        >>> document = OpenAPIDocument(yaml.safe_load(text))
        >>> for operation in document.operations():
        ...     print(operation.method, operation.path)
    """

    def __init__(self, data: Any):
        self.data = _mapping(data)

    @property
    def components(self) -> dict:
        return _mapping(self.data.get('components'))

    @property
    def schemas(self) -> dict:
        """Named schemas from ``components.schemas``, in document order."""
        return _mapping(self.components.get('schemas'))

    @property
    def security_schemes(self) -> dict:
        return _mapping(self.components.get('securitySchemes'))

    @property
    def security(self) -> list | None:
        security = self.data.get('security')
        return security if isinstance(security, list) else None

    @property
    def paths(self) -> dict:
        return _mapping(self.data.get('paths'))

    @property
    def server_urls(self) -> list[str]:
        servers = self.data.get('servers')
        if not isinstance(servers, list):
            return []
        return [
            server['url']
            for server in servers
            if isinstance(server, dict) and isinstance(server.get('url'), str)
        ]

    def operations(self) -> Iterator[OperationRecord]:
        """Yield every operation of the document in document order."""
        for path, path_item in self.paths.items():
            if not isinstance(path_item, dict):
                continue

            shared = self._parameters(path_item.get('parameters'))
            for method, operation in path_item.items():
                if not isinstance(method, str) or method.lower() not in HTTP_METHODS:
                    continue
                if not isinstance(operation, dict):
                    continue
                yield self._operation(str(path), method.lower(), operation, shared)

    def _operation(
        self,
        path: str,
        method: str,
        operation: dict,
        shared: list[ParameterRecord],
    ) -> OperationRecord:
        own = self._parameters(operation.get('parameters'))
        overridden = {(param.name, param.location) for param in own}
        parameters = [
            param for param in shared if (param.name, param.location) not in overridden
        ]
        parameters.extend(own)

        operation_id = operation.get('operationId')
        security = operation.get('security')

        return OperationRecord(
            path=path,
            method=method,
            operation_id=operation_id if isinstance(operation_id, str) else None,
            summary=_text(operation.get('summary')),
            description=_text(operation.get('description')),
            parameters=tuple(parameters),
            request_body=self._request_body(operation.get('requestBody')),
            responses=_mapping(operation.get('responses')),
            security=security if isinstance(security, list) else None,
        )

    def _parameters(self, raw: Any) -> list[ParameterRecord]:
        if not isinstance(raw, list):
            return []

        parameters = []
        for entry in raw:
            entry = self._resolve_component(entry, 'parameters')
            name = entry.get('name')
            location = entry.get('in')
            if not isinstance(name, str) or not isinstance(location, str):
                continue
            parameters.append(
                ParameterRecord(
                    name=name,
                    location=location,
                    required=entry.get('required') is True,
                    schema=entry.get('schema'),
                )
            )
        return parameters

    def _request_body(self, raw: Any) -> Any:
        if isinstance(raw, dict) and '$ref' in raw:
            return self._resolve_component(raw, 'requestBodies') or None
        return raw

    def _resolve_component(self, entry: Any, section: str) -> dict:
        """Follow a local ``#/components/<section>/<Name>`` reference once."""
        entry = _mapping(entry)
        ref = entry.get('$ref')
        if not isinstance(ref, str):
            return entry

        prefix = f'#/components/{section}/'
        if not ref.startswith(prefix):
            return {}
        return _mapping(_mapping(self.components.get(section)).get(ref[len(prefix) :]))


def _text(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None
