from collections.abc import Mapping
from typing import Any, Protocol

from jsonapi_docgen.models import AttributeDocumentation, ColumnInfo, RelationshipDescriptor


class ResourceModel(Protocol):
    record_type: str

    @property
    def attributes_to_serialize(self) -> Mapping[str, AttributeDocumentation | Mapping[str, Any] | None] | None: ...

    @property
    def relationships_to_serialize(self) -> Mapping[str, RelationshipDescriptor | Mapping[str, Any]] | None: ...


class ColumnCatalogue(Protocol):
    def column(self, name: str) -> ColumnInfo | None: ...


class FakeDataProvider(Protocol):
    def slug(self) -> str: ...

    def seed_instance(self, seed: Any = None) -> Any: ...
