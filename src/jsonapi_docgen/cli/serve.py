from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from jsonapi_docgen.core.errors import ResourceLoadError
from jsonapi_docgen.loader import load_resources, parse_column_bindings

console = Console()


def serve(
    sources: Annotated[list[str], typer.Argument(help="Resource JSON files or 'package.module:attribute' paths.")],
    host: str = "127.0.0.1",
    port: int = 8000,
    columns: Annotated[
        list[str] | None,
        typer.Option(help="Column source for a resource, as 'record_type=package.module:Model'. Repeatable."),
    ] = None,
) -> None:
    """Serve resource schemas over HTTP."""
    import uvicorn

    from jsonapi_docgen.api.app import create_app
    from jsonapi_docgen.config import get_example_provider

    try:
        resources = load_resources(sources)
        catalogues = parse_column_bindings(columns or [])
    except ResourceLoadError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc

    app = create_app(resources, examples=get_example_provider(), column_catalogues=catalogues)
    console.print(f"[green]Serving {len(resources)} resource schema(s) on {host}:{port}[/green]")
    uvicorn.run(app, host=host, port=port)
