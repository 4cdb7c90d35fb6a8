from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from jsonapi_docgen.api.dependencies import example_provider_dependency, get_column_catalogues, get_resources
from jsonapi_docgen.api.schemas import ResourceListResponse
from jsonapi_docgen.core.errors import SchemaSynthesisError
from jsonapi_docgen.core.examples import ExampleProvider
from jsonapi_docgen.core.ports.resource import ColumnCatalogue
from jsonapi_docgen.core.synthesize import synthesize_schema

router = APIRouter(prefix="/schemas", tags=["schemas"])


@router.get("", response_model=ResourceListResponse)
async def list_schemas(resources: dict[str, Any] = Depends(get_resources)) -> ResourceListResponse:
    return ResourceListResponse(record_types=sorted(resources))


@router.get("/{record_type}")
async def get_schema(
    record_type: str,
    resources: dict[str, Any] = Depends(get_resources),
    examples: ExampleProvider = Depends(example_provider_dependency),
    catalogues: dict[str, ColumnCatalogue] = Depends(get_column_catalogues),
) -> dict[str, Any]:
    """Synthesize the JSON:API response schema of one resource."""
    resource = resources.get(record_type)
    if resource is None:
        raise HTTPException(status_code=404, detail=f"Unknown record type {record_type!r}")
    try:
        return synthesize_schema(resource, examples=examples, columns=catalogues.get(record_type))
    except SchemaSynthesisError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
