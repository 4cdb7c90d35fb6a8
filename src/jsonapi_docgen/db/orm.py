"""Column catalogue backed by SQLAlchemy table metadata."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import (
    ARRAY,
    JSON,
    Boolean,
    Date,
    DateTime,
    Enum,
    Integer,
    Numeric,
    String,
    Text,
    Time,
    Uuid,
    inspect,
)
from sqlalchemy.types import TypeEngine

from jsonapi_docgen.models import AttributeDocumentation, ColumnInfo

logger = logging.getLogger(__name__)

DOCUMENTATION_INFO_KEY = "documentation"

# Subclasses first: Enum and Text derive from String, Float from Numeric.
_STORAGE_TYPES: list[tuple[type[TypeEngine[Any]], str]] = [
    (Boolean, "boolean"),
    (Enum, "string"),
    (Text, "text"),
    (String, "string"),
    (Integer, "integer"),
    (Numeric, "float"),
    (DateTime, "datetime"),
    (Date, "date"),
    (Time, "time"),
    (JSON, "object"),
    (ARRAY, "array"),
    (Uuid, "uuid"),
]


def storage_type(column_type: TypeEngine[Any]) -> str:
    visit_name = str(getattr(column_type, "__visit_name__", "")).lower()
    if visit_name == "citext":
        return "citext"
    for sa_type, tag in _STORAGE_TYPES:
        if isinstance(column_type, sa_type):
            return tag
    logger.debug("No storage type mapping for %r, using %r", column_type, visit_name)
    return visit_name or type(column_type).__name__.lower()


def _column_documentation(column: Any) -> AttributeDocumentation | None:
    raw = column.info.get(DOCUMENTATION_INFO_KEY)
    documentation = AttributeDocumentation.model_validate(dict(raw)) if raw else None

    enums = getattr(column.type, "enums", None)
    if isinstance(column.type, Enum) and enums:
        if documentation is None:
            documentation = AttributeDocumentation(enum=list(enums))
        elif documentation.enum is None:
            documentation = documentation.model_copy(update={"enum": list(enums)})
    return documentation


class SqlAlchemyColumnCatalogue:
    """Read column types from a declarative class, mapper or ``Table``.

    Columns are keyed by the mapped attribute name when a mapper is available,
    otherwise by column name. Optional documentation is read from
    ``Column(info={"documentation": {...}})``.
    """

    def __init__(self, mapped: Any) -> None:
        inspected = inspect(mapped)
        self.columns: dict[str, ColumnInfo] = {}
        for key, column in inspected.columns.items():
            self.columns[key] = ColumnInfo(
                name=key,
                storage_type=storage_type(column.type),
                documentation=_column_documentation(column),
            )

    def column(self, name: str) -> ColumnInfo | None:
        return self.columns.get(name)
