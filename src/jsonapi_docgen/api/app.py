from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from fastapi import FastAPI

from jsonapi_docgen.api.openapi import install_openapi_components
from jsonapi_docgen.api.routes.health import router as health_router
from jsonapi_docgen.api.routes.schemas import router as schemas_router
from jsonapi_docgen.core.examples import ExampleProvider
from jsonapi_docgen.core.ports.resource import ColumnCatalogue


def create_app(
    resources: Iterable[Any],
    examples: ExampleProvider | None = None,
    column_catalogues: Mapping[str, ColumnCatalogue] | None = None,
) -> FastAPI:
    app = FastAPI(
        title="jsonapi-docgen",
        description="JSON Schema documentation for JSON:API resources.",
        version="0.1.0",
    )

    registry = {r.record_type: r for r in resources}
    app.state.resources = registry
    app.state.examples = examples or ExampleProvider()
    app.state.column_catalogues = dict(column_catalogues or {})

    app.include_router(health_router, include_in_schema=False)
    app.include_router(schemas_router)

    install_openapi_components(app, registry, app.state.examples, app.state.column_catalogues)

    return app
