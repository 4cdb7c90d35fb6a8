"""Load resource definitions from JSON files or ``module:attribute`` import paths."""

from __future__ import annotations

import importlib
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from sqlalchemy.exc import NoInspectionAvailable

from jsonapi_docgen.core.errors import ResourceLoadError
from jsonapi_docgen.db.orm import SqlAlchemyColumnCatalogue
from jsonapi_docgen.models import Resource


def load_resource_file(path: Path) -> Resource:
    try:
        return Resource.model_validate_json(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ResourceLoadError(f"Cannot read resource file {str(path)!r}: {exc}") from exc
    except ValidationError as exc:
        raise ResourceLoadError(f"Invalid resource file {str(path)!r}: {exc}") from exc


def import_object(import_path: str) -> Any:
    """Resolve ``package.module:attribute`` (dotted attributes allowed)."""
    module_name, _, attribute = import_path.partition(":")
    if not module_name or not attribute:
        raise ResourceLoadError(f"Import path must look like 'package.module:attribute', got {import_path!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ResourceLoadError(f"Cannot import module {module_name!r}: {exc}") from exc
    except Exception as exc:
        raise ResourceLoadError(f"Importing module {module_name!r} failed: {exc!r}") from exc

    obj: Any = module
    for part in attribute.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise ResourceLoadError(f"Module {module_name!r} has no attribute {attribute!r}") from exc
    return obj


def import_resource(import_path: str) -> Any:
    obj = import_object(import_path)
    if not hasattr(obj, "record_type"):
        raise ResourceLoadError(f"{import_path!r} does not expose a record_type")
    return obj


def load_resource(source: str) -> Any:
    path = Path(source)
    if path.suffix.lower() == ".json":
        return load_resource_file(path)
    if ":" in source:
        return import_resource(source)
    raise ResourceLoadError(f"Unrecognised resource source {source!r}; expected a .json file or 'module:attribute'")


def load_resources(sources: Iterable[str]) -> list[Any]:
    return [load_resource(s) for s in sources]


def load_column_catalogue(import_path: str) -> SqlAlchemyColumnCatalogue:
    """Build a column catalogue from a declarative class or ``Table`` import path."""
    mapped = import_object(import_path)
    try:
        return SqlAlchemyColumnCatalogue(mapped)
    except NoInspectionAvailable as exc:
        raise ResourceLoadError(f"{import_path!r} is not a SQLAlchemy mapped class or table") from exc


def parse_column_bindings(bindings: Iterable[str]) -> dict[str, SqlAlchemyColumnCatalogue]:
    """Parse ``record_type=package.module:Model`` pairs into catalogues keyed by record type."""
    catalogues: dict[str, SqlAlchemyColumnCatalogue] = {}
    for binding in bindings:
        record_type, sep, import_path = binding.partition("=")
        if not sep or not record_type.strip():
            raise ResourceLoadError(f"Column binding must look like 'record_type=package.module:Model', got {binding!r}")
        catalogues[record_type.strip()] = load_column_catalogue(import_path.strip())
    return catalogues
