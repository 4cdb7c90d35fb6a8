from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from jsonapi_docgen.core.errors import UnresolvedRelationshipTypeError
from jsonapi_docgen.core.ports.resource import ResourceModel
from jsonapi_docgen.models import RelationshipDescriptor

HAS_MANY = "has_many"

RELATIONSHIP_DEFAULT_ITEM: dict[str, Any] = {
    "type": "object",
    "properties": {
        "id": {"type": "integer"},
        "type": {"type": "string"},
    },
}


def _as_descriptor(value: RelationshipDescriptor | Mapping[str, Any]) -> RelationshipDescriptor:
    if isinstance(value, RelationshipDescriptor):
        return value
    return RelationshipDescriptor.model_validate(dict(value))


def resolve_relationships(model: ResourceModel) -> dict[str, RelationshipDescriptor]:
    """Key relationships by the name they are rendered under.

    A descriptor's ``key`` wins over the association name, so associations
    sharing a key collapse into the last one declared.
    """
    registry = model.relationships_to_serialize or {}
    resolved: dict[str, RelationshipDescriptor] = {}
    for name, raw in registry.items():
        descriptor = _as_descriptor(raw)
        resolved[descriptor.key or name] = descriptor
    return resolved


def is_collection(descriptor: RelationshipDescriptor) -> bool:
    return descriptor.relationship_type == HAS_MANY


def relationship_properties(descriptor: RelationshipDescriptor) -> dict[str, Any]:
    item = copy.deepcopy(RELATIONSHIP_DEFAULT_ITEM)
    if not is_collection(descriptor):
        return {"data": item}
    return {"data": {"type": "array", "items": item}}


def relationship_example(key: str, descriptor: RelationshipDescriptor) -> dict[str, Any]:
    related_type = descriptor.record_type or descriptor.static_record_type or descriptor.object_method_name
    if not related_type:
        raise UnresolvedRelationshipTypeError(key)

    data: dict[str, Any] | list[dict[str, Any]] = {"id": 1, "type": related_type}
    if is_collection(descriptor):
        data = [data]
    return {"data": data}


def enrich_relationships(
    tree: dict[str, Any], relationships: Mapping[str, RelationshipDescriptor]
) -> dict[str, Any]:
    relationships_schema = tree["data"]["properties"]["relationships"]["properties"]
    examples = tree["data"]["example"]["relationships"]

    for key, descriptor in relationships.items():
        relationships_schema[key] = {
            "type": "object",
            "properties": relationship_properties(descriptor),
        }
        examples[key] = relationship_example(key, descriptor)

    return tree
