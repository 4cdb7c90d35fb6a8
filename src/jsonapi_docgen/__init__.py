from jsonapi_docgen.core.errors import (
    ResourceLoadError,
    SchemaSynthesisError,
    UnresolvedRelationshipTypeError,
    UnsupportedTypeError,
)
from jsonapi_docgen.core.examples import ExampleProvider
from jsonapi_docgen.core.synthesize import synthesize_schema
from jsonapi_docgen.models import AttributeDocumentation, ColumnInfo, RelationshipDescriptor, Resource

__all__ = [
    "AttributeDocumentation",
    "ColumnInfo",
    "ExampleProvider",
    "RelationshipDescriptor",
    "Resource",
    "ResourceLoadError",
    "SchemaSynthesisError",
    "UnresolvedRelationshipTypeError",
    "UnsupportedTypeError",
    "synthesize_schema",
]
