from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from jsonapi_docgen.core.errors import SchemaSynthesisError
from jsonapi_docgen.core.examples import ExampleProvider
from jsonapi_docgen.core.ports.resource import ColumnCatalogue
from jsonapi_docgen.core.synthesize import synthesize_schema

logger = logging.getLogger(__name__)


def resource_component(
    resource: Any,
    examples: ExampleProvider | None = None,
    columns: ColumnCatalogue | None = None,
) -> dict[str, Any]:
    """Wrap a synthesized schema tree as an object definition."""
    return {"type": "object", "properties": synthesize_schema(resource, examples=examples, columns=columns)}


def install_openapi_components(
    app: FastAPI,
    resources: Mapping[str, Any],
    examples: ExampleProvider | None = None,
    column_catalogues: Mapping[str, ColumnCatalogue] | None = None,
) -> None:
    """Publish each resource's schema under ``components.schemas.<record_type>``.

    A resource whose schema cannot be synthesized is left out of the document
    and logged; ``/schemas/<record_type>`` still reports its error.
    """
    catalogues = column_catalogues or {}

    def openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema
        document = get_openapi(
            title=app.title,
            version=app.version,
            description=app.description,
            routes=app.routes,
        )
        components = document.setdefault("components", {}).setdefault("schemas", {})
        for record_type, resource in resources.items():
            try:
                components[record_type] = resource_component(resource, examples, catalogues.get(record_type))
            except SchemaSynthesisError as exc:
                logger.warning("Skipping OpenAPI component %r: %s", record_type, exc)
        app.openapi_schema = document
        return document

    app.openapi = openapi  # type: ignore[method-assign]
