class SchemaSynthesisError(ValueError):
    """Base class for errors raised while documenting a resource."""


class UnsupportedTypeError(SchemaSynthesisError):
    """Raised when an attribute type tag has no example case."""

    def __init__(self, type_tag: object, supported: list[str]) -> None:
        super().__init__(f"Unsupported attribute type {type_tag!r}. Supported: {supported}")
        self.type_tag = type_tag


class UnresolvedRelationshipTypeError(SchemaSynthesisError):
    """Raised when a relationship names no record type to use in its example."""

    def __init__(self, key: str) -> None:
        super().__init__(
            f"Relationship {key!r} has no record_type, static_record_type or object_method_name to use as its type."
        )
        self.key = key


class ResourceLoadError(SchemaSynthesisError):
    """Raised when a resource definition cannot be loaded from a file or import path."""
