from jsonapi_docgen.db.memory import InMemoryColumnCatalogue
from jsonapi_docgen.db.orm import DOCUMENTATION_INFO_KEY, SqlAlchemyColumnCatalogue, storage_type

__all__ = [
    "DOCUMENTATION_INFO_KEY",
    "InMemoryColumnCatalogue",
    "SqlAlchemyColumnCatalogue",
    "storage_type",
]
