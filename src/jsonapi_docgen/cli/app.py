import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from jsonapi_docgen.cli.schema import schema, types
from jsonapi_docgen.cli.serve import serve
from jsonapi_docgen.config import get_log_level

app = typer.Typer(
    name="jsonapi-docgen",
    help="jsonapi-docgen CLI — document JSON:API resources as JSON Schema.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log at DEBUG level.")] = False,
) -> None:
    logging.basicConfig(
        level="DEBUG" if verbose else get_log_level(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


app.command("schema")(schema)
app.command("types")(types)
app.command("serve")(serve)


def main() -> None:
    app()
