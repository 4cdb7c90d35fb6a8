from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from jsonapi_docgen.core.errors import UnsupportedTypeError
from jsonapi_docgen.core.examples import ExampleProvider
from jsonapi_docgen.core.ports.resource import ColumnCatalogue, ResourceModel
from jsonapi_docgen.models import AttributeDocumentation

DEFAULT_TYPE = "string"


@dataclass(frozen=True)
class ResolvedAttribute:
    type: str
    example: Any
    required: bool = False
    enum: list[Any] | None = None


def _as_documentation(value: AttributeDocumentation | Mapping[str, Any] | None) -> AttributeDocumentation:
    if value is None:
        return AttributeDocumentation()
    if isinstance(value, AttributeDocumentation):
        return value
    return AttributeDocumentation.model_validate(dict(value))


def _normalize_type(type_tag: str) -> str:
    return str(type_tag).strip().lower()


def resolve_attribute(
    documentation: AttributeDocumentation,
    examples: ExampleProvider,
    column_type: str | None = None,
    column_documentation: AttributeDocumentation | None = None,
) -> ResolvedAttribute:
    """Merge registry documentation over column metadata, filling gaps with defaults."""
    fallback = column_documentation or AttributeDocumentation()

    type_tag = _normalize_type(documentation.type or fallback.type or column_type or DEFAULT_TYPE)
    if not examples.supports(type_tag):
        raise UnsupportedTypeError(type_tag, examples.supported_types)

    if documentation.example is not None:
        example = documentation.example
    elif fallback.example is not None:
        example = fallback.example
    else:
        example = examples.example_for(type_tag)

    fields_set = documentation.model_fields_set
    required = documentation.required if "required" in fields_set else fallback.required
    enum = documentation.enum if documentation.enum is not None else fallback.enum

    return ResolvedAttribute(
        type=type_tag,
        example=example,
        required=required,
        enum=list(enum) if enum is not None else None,
    )


def resolve_attributes(
    model: ResourceModel,
    examples: ExampleProvider,
    columns: ColumnCatalogue | None = None,
) -> dict[str, ResolvedAttribute]:
    """Resolve the documented attributes of ``model`` in registry order.

    With a column catalogue, a column sharing an attribute's name supplies the
    storage type and documentation the registry leaves unset.
    """
    registry = model.attributes_to_serialize or {}
    resolved: dict[str, ResolvedAttribute] = {}
    for name, raw in registry.items():
        documentation = _as_documentation(raw)
        column = columns.column(name) if columns is not None else None
        if column is None:
            resolved[name] = resolve_attribute(documentation, examples)
        else:
            resolved[name] = resolve_attribute(
                documentation,
                examples,
                column_type=column.storage_type,
                column_documentation=column.documentation,
            )
    return resolved


def enrich_attributes(tree: dict[str, Any], attributes: Mapping[str, ResolvedAttribute]) -> dict[str, Any]:
    attributes_schema = tree["data"]["properties"]["attributes"]
    examples = tree["data"]["example"]["attributes"]

    for name, attribute in attributes.items():
        prop: dict[str, Any] = {"type": attribute.type, "example": copy.deepcopy(attribute.example)}
        if attribute.enum is not None:
            prop["enum"] = list(attribute.enum)
        attributes_schema["properties"][name] = prop
        examples[name] = copy.deepcopy(attribute.example)
        if attribute.required and name not in attributes_schema.setdefault("required", []):
            attributes_schema["required"].append(name)

    return tree
