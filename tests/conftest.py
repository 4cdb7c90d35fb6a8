"""Shared fixtures and helpers for tests."""

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from jsonapi_docgen.core.examples import ExampleProvider
from jsonapi_docgen.models import Resource

_REPO_ROOT = Path(__file__).parent.parent

FIXED_NOW = datetime(2024, 3, 5, 14, 30, 15, 123456, tzinfo=timezone(timedelta(hours=2)))


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def examples() -> ExampleProvider:
    """Return a seeded example provider with a frozen clock."""
    return ExampleProvider(seed=1234, clock=lambda: FIXED_NOW)


@pytest.fixture
def article() -> Resource:
    """Return the ``articles`` resource with a required title and an author."""
    return Resource.model_validate(
        {
            "record_type": "articles",
            "attributes": {"title": {"type": "string", "required": True}},
            "relationships": {
                "author": {"key": "author", "relationship_type": "belongs_to", "record_type": "people"},
            },
        }
    )
