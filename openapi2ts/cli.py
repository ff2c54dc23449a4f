import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from openapi2ts.codegen.codegen import Codegen, GenerateResult
from openapi2ts.config import GenerateOptions, get_config
from openapi2ts.exceptions import Openapi2tsError

console = Console()
app = typer.Typer(
    name='openapi2ts',
    help='Generate TypeScript types and API clients from OpenAPI specifications',
    no_args_is_help=True,
)


def _report(options: GenerateOptions, result: GenerateResult) -> None:
    console.print('[dim]Generated files:[/dim]')
    if result.types_path:
        console.print(f'  - {result.types_path}')
    elif options.generate_types:
        console.print('  [yellow]No TypeScript types generated[/yellow]')
    if result.client_path:
        console.print(f'  - {result.client_path}')


def _run(options: GenerateOptions) -> None:
    with Progress(
        SpinnerColumn(),
        TextColumn('[progress.description]{task.description}'),
        console=console,
    ) as progress:
        task = progress.add_task(
            f'Generating code for {options.source} in {options.output_dir}...',
            total=None,
        )
        result = Codegen(options).generate()
        progress.update(
            task, description=f'Code generation completed for {options.source}!'
        )
    _report(options, result)


@app.command()
def generate(
    source: Annotated[
        str | None,
        typer.Argument(help='Path or URL of the OpenAPI document (JSON or YAML)'),
    ] = None,
    output_dir: Annotated[
        str,
        typer.Option('--output-dir', '-o', help='Directory for the generated files'),
    ] = 'src/out',
    types_file: Annotated[
        str, typer.Option('--types-file', help='File name for the types')
    ] = 'types.ts',
    client_file: Annotated[
        str, typer.Option('--client-file', help='File name for the API client')
    ] = 'client.ts',
    no_types: Annotated[
        bool, typer.Option('--no-types', help='Skip the types file')
    ] = False,
    no_client: Annotated[
        bool, typer.Option('--no-client', help='Skip the client file')
    ] = False,
    config: Annotated[
        str | None,
        typer.Option(
            '--config', '-c', help='Path to configuration file (YAML or JSON)'
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option('--verbose', '-v', help='Enable debug logging')
    ] = False,
) -> None:
    """Generate TypeScript types and an API client.

    With a SOURCE the document is generated using the command line options.
    Without one, every document listed in the configuration file is
    generated.

    Examples:
        openapi2ts generate api-spec.yaml -o generated
        openapi2ts generate --config my-config.yaml
        openapi2ts generate
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        if source:
            documents = [
                GenerateOptions(
                    source=source,
                    output_dir=output_dir,
                    types_filename=types_file,
                    client_filename=client_file,
                    generate_types=not no_types,
                    generate_client=not no_client,
                )
            ]
        else:
            documents = get_config(config).documents

        for options in documents:
            _run(options)

    except Openapi2tsError as e:
        console.print(f'[red]Error:[/red] {e}')
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show the version of openapi2ts."""
    from openapi2ts._version import version

    console.print(f'openapi2ts version: {version}')


if __name__ == '__main__':
    app()
