from __future__ import annotations

from typing import Any

from fastapi import Request

from jsonapi_docgen.core.examples import ExampleProvider
from jsonapi_docgen.core.ports.resource import ColumnCatalogue


def get_resources(request: Request) -> dict[str, Any]:
    """Return registered resources keyed by record type."""
    resources: dict[str, Any] = request.app.state.resources
    return resources


def example_provider_dependency(request: Request) -> ExampleProvider:
    examples: ExampleProvider = request.app.state.examples
    return examples


def get_column_catalogues(request: Request) -> dict[str, ColumnCatalogue]:
    catalogues: dict[str, ColumnCatalogue] = request.app.state.column_catalogues
    return catalogues
