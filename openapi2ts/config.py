import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from openapi2ts.exceptions import ConfigurationError

DEFAULT_FILENAMES = ['openapi2ts.yaml', 'openapi2ts.yml']


class GenerateOptions(BaseModel):
    """Options for generating the artifacts of a single document."""

    source: str = Field(..., description='Path or URL to the OpenAPI document.')

    output_dir: str = Field(
        'src/out', description='Output directory for the generated files.'
    )

    generate_types: bool = Field(True, description='Whether to write the types file.')

    generate_client: bool = Field(
        True, description='Whether to write the client file.'
    )

    types_filename: str = Field('types.ts', description='File name for the types.')

    client_filename: str = Field(
        'client.ts', description='File name for the API client.'
    )

    @property
    def types_module(self) -> str:
        """Module specifier the client uses to import the types file."""
        return f'./{self.types_filename}'


class CodegenConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='OPENAPI2TS_')

    documents: list[GenerateOptions] = Field(
        ..., description='List of OpenAPI documents to process.'
    )


def load_yaml(path: str | Path) -> dict:
    # YAML is a superset of JSON, so this reads both formats
    return yaml.safe_load(Path(path).read_text(encoding='utf-8'))


def _validate(data, config_path: str) -> CodegenConfig:
    if not isinstance(data, dict):
        raise ConfigurationError('Configuration must be a mapping', config_path)
    try:
        return CodegenConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(str(e), config_path) from e


def get_config(path: str | None = None) -> CodegenConfig:
    """Load configuration from a file or the current directory.

    Lookup order: the explicit ``path``, then ``openapi2ts.yaml`` /
    ``openapi2ts.yml``, then the ``[tool.openapi2ts]`` table of
    ``pyproject.toml``.

    Raises:
        ConfigurationError: If no configuration is found or it is invalid.
    """
    if path:
        if not Path(path).exists():
            raise ConfigurationError('Configuration file not found', path)
        try:
            data = load_yaml(path)
        except yaml.YAMLError as e:
            raise ConfigurationError(f'Invalid configuration: {e}', path) from e
        return _validate(data, path)

    cwd = os.getcwd()

    for filename in DEFAULT_FILENAMES:
        candidate = Path(cwd) / filename
        if candidate.exists():
            try:
                data = load_yaml(candidate)
            except yaml.YAMLError as e:
                raise ConfigurationError(
                    f'Invalid configuration: {e}', str(candidate)
                ) from e
            return _validate(data, str(candidate))

    candidate = Path(cwd) / 'pyproject.toml'

    if candidate.exists():
        import tomllib

        pyproject = tomllib.loads(candidate.read_text(encoding='utf-8'))
        tools = pyproject.get('tool', {})

        if 'openapi2ts' in tools:
            return _validate(tools['openapi2ts'], str(candidate))

    raise ConfigurationError('Configuration not found')
