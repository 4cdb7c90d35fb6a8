import logging
from typing import Any

from jsonapi_docgen.core.attributes import enrich_attributes, resolve_attributes
from jsonapi_docgen.core.examples import ExampleProvider
from jsonapi_docgen.core.merge import deep_merge
from jsonapi_docgen.core.ports.resource import ColumnCatalogue, ResourceModel
from jsonapi_docgen.core.relationships import enrich_relationships, resolve_relationships
from jsonapi_docgen.core.skeleton import build_skeleton

logger = logging.getLogger(__name__)


def synthesize_schema(
    model: ResourceModel,
    endpoint: Any = None,
    *,
    examples: ExampleProvider | None = None,
    columns: ColumnCatalogue | None = None,
) -> dict[str, Any]:
    """Build the JSON:API response schema, with example payload, for ``model``.

    ``endpoint`` is accepted for callers that document per endpoint; it does not
    influence the result. Raises a ``SchemaSynthesisError`` subclass when an
    attribute type or relationship type cannot be documented.
    """
    examples = examples or ExampleProvider()

    attributes = resolve_attributes(model, examples, columns)
    relationships = resolve_relationships(model)
    logger.debug(
        "Synthesizing schema for %s: %d attribute(s), %d relationship(s)",
        model.record_type,
        len(attributes),
        len(relationships),
    )

    schema = build_skeleton(model.record_type)
    schema = enrich_attributes(schema, attributes)
    schema = enrich_relationships(schema, relationships)

    fragment = getattr(model, "additional_schema", None)
    if fragment:
        logger.debug("Merging additional schema for %s", model.record_type)
        deep_merge(schema, fragment)

    return schema
