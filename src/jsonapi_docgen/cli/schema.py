import json
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from jsonapi_docgen.config import build_example_provider
from jsonapi_docgen.core.errors import SchemaSynthesisError
from jsonapi_docgen.core.examples import ExampleProvider
from jsonapi_docgen.core.synthesize import synthesize_schema
from jsonapi_docgen.loader import load_column_catalogue, load_resource

console = Console()


def schema(
    source: Annotated[str, typer.Argument(help="Resource JSON file or 'package.module:attribute'.")],
    seed: Annotated[
        int | None, typer.Option(envvar="JSONAPI_DOCGEN_SEED", help="Seed for random example values.")
    ] = None,
    faker: Annotated[
        bool, typer.Option("--faker/--no-faker", envvar="JSONAPI_DOCGEN_FAKER", help="Use Faker for object examples.")
    ] = False,
    locale: Annotated[str, typer.Option(envvar="JSONAPI_DOCGEN_FAKER_LOCALE", help="Faker locale.")] = "en_US",
    indent: Annotated[int, typer.Option(help="JSON indentation.")] = 2,
    columns: Annotated[
        str | None,
        typer.Option(help="SQLAlchemy model or table supplying column types, as 'package.module:Model'."),
    ] = None,
) -> None:
    """Print the JSON:API schema of a resource."""
    try:
        resource = load_resource(source)
        catalogue = load_column_catalogue(columns) if columns else None
        examples = build_example_provider(seed=seed, use_faker=faker, locale=locale)
        result = synthesize_schema(resource, examples=examples, columns=catalogue)
    except SchemaSynthesisError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc

    typer.echo(json.dumps(result, indent=indent))


def types(
    seed: Annotated[int | None, typer.Option(help="Seed for random example values.")] = None,
) -> None:
    """List supported attribute types with a sample example."""
    examples = ExampleProvider(seed=seed)
    table = Table(show_lines=False)
    table.add_column("type")
    table.add_column("example")
    for tag in examples.supported_types:
        table.add_row(tag, json.dumps(examples.example_for(tag)))
    console.print(table)
    console.print(f"({len(examples.supported_types)} types)")
