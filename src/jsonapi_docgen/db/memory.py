from collections.abc import Iterable, Mapping
from typing import Any

from jsonapi_docgen.models import AttributeDocumentation, ColumnInfo


class InMemoryColumnCatalogue:
    def __init__(self, columns: Iterable[ColumnInfo] = ()) -> None:
        self.columns: dict[str, ColumnInfo] = {c.name: c for c in columns}

    @classmethod
    def from_types(
        cls,
        types: Mapping[str, str],
        documentation: Mapping[str, Mapping[str, Any]] | None = None,
    ) -> "InMemoryColumnCatalogue":
        """Build a catalogue from ``{name: storage_type}`` pairs."""
        documentation = documentation or {}
        return cls(
            ColumnInfo(
                name=name,
                storage_type=storage_type,
                documentation=(
                    AttributeDocumentation.model_validate(dict(documentation[name]))
                    if name in documentation
                    else None
                ),
            )
            for name, storage_type in types.items()
        )

    def column(self, name: str) -> ColumnInfo | None:
        return self.columns.get(name)

    def add(self, column: ColumnInfo) -> None:
        self.columns[column.name] = column
