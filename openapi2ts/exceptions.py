"""Custom exceptions for openapi2ts.

Errors only surface at the boundaries of the generator: loading the OpenAPI
document, reading configuration and writing output files. Resolving schemas
and emitting code never raise; degenerate input falls back to ``any``.
"""


class Openapi2tsError(Exception):
    """Base exception for all openapi2ts errors.

    Example:
        try:
            codegen.generate()
        except Openapi2tsError as e:
            print(f"openapi2ts error: {e}")
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class SchemaLoadError(Openapi2tsError):
    """Failed to load an OpenAPI document from a source.

    Raised when the file does not exist or the URL cannot be fetched. For a
    missing file this is raised before any parsing is attempted.

    Attributes:
        source: The source path or URL that failed to load.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, source: str, cause: Exception | None = None):
        self.source = source
        self.cause = cause
        message = f"Failed to load schema from '{source}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class SchemaParseError(SchemaLoadError):
    """The document text could not be parsed as JSON or YAML.

    The parser's own exception is available as ``cause``.
    """

    def __init__(self, source: str, cause: Exception):
        super().__init__(source, cause=cause)
        self.message = f"Failed to parse schema from '{source}': {cause}"
        self.args = (self.message,)


class ConfigurationError(Openapi2tsError):
    """Error in configuration.

    Attributes:
        config_path: The path to the configuration file, if applicable.
        field: The specific configuration field that is invalid.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)


class OutputError(Openapi2tsError):
    """Error writing generated output.

    Attributes:
        output_path: The path where output was being written.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, output_path: str, cause: Exception | None = None):
        self.output_path = output_path
        self.cause = cause
        message = f"Failed to write output to '{output_path}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)
