"""Tests for end-to-end schema synthesis."""

from __future__ import annotations

import json
from types import SimpleNamespace
from typing import Any

import pytest

from jsonapi_docgen.core.errors import UnresolvedRelationshipTypeError, UnsupportedTypeError
from jsonapi_docgen.core.examples import ExampleProvider
from jsonapi_docgen.core.synthesize import synthesize_schema
from jsonapi_docgen.db.memory import InMemoryColumnCatalogue
from jsonapi_docgen.models import Resource


def _resource(**kwargs: Any) -> Resource:
    return Resource.model_validate({"record_type": "articles", **kwargs})


class TestArticleScenario:
    def test_singular_author(self, article: Resource, examples: ExampleProvider) -> None:
        result = synthesize_schema(article, examples=examples)
        data = result["data"]

        assert data["properties"]["attributes"]["properties"]["title"] == {
            "type": "string",
            "example": "Example string",
        }
        assert data["properties"]["attributes"]["required"] == ["title"]
        assert data["properties"]["relationships"]["properties"]["author"]["properties"]["data"] == {
            "type": "object",
            "properties": {"id": {"type": "integer"}, "type": {"type": "string"}},
        }
        assert data["example"]["relationships"]["author"]["data"] == {"id": 1, "type": "people"}
        assert data["example"]["id"] == 1
        assert data["example"]["type"] == "articles"
        assert data["example"]["attributes"] == {"title": "Example string"}

    def test_has_many_author(self, examples: ExampleProvider) -> None:
        resource = _resource(
            attributes={"title": {"type": "string", "required": True}},
            relationships={"author": {"key": "author", "relationship_type": "has_many", "record_type": "people"}},
        )
        data = synthesize_schema(resource, examples=examples)["data"]

        assert data["properties"]["relationships"]["properties"]["author"]["properties"]["data"]["type"] == "array"
        assert data["example"]["relationships"]["author"]["data"] == [{"id": 1, "type": "people"}]


class TestShapeInvariants:
    @pytest.mark.parametrize(
        "resource",
        [
            _resource(),
            _resource(attributes={"title": {}}),
            _resource(relationships={"tags": {"relationship_type": "has_many", "record_type": "tags"}}),
        ],
        ids=["empty", "attributes-only", "relationships-only"],
    )
    def test_top_level_keys(self, resource: Resource, examples: ExampleProvider) -> None:
        data = synthesize_schema(resource, examples=examples)["data"]
        assert set(data["properties"]) == {"id", "type", "attributes", "relationships"}
        assert set(data["example"]) == {"id", "type", "attributes", "relationships"}

    def test_missing_metadata_yields_empty_maps(self, examples: ExampleProvider) -> None:
        model = SimpleNamespace(record_type="things", attributes_to_serialize=None, relationships_to_serialize=None)
        data = synthesize_schema(model, examples=examples)["data"]
        assert data["properties"]["attributes"]["properties"] == {}
        assert data["properties"]["relationships"]["properties"] == {}
        assert data["example"]["attributes"] == {}
        assert data["example"]["relationships"] == {}

    def test_attribute_example_parity(self, examples: ExampleProvider) -> None:
        resource = _resource(
            attributes={
                "title": {"type": "string"},
                "body": {"type": "text"},
                "views": {"type": "integer", "example": 42},
                "rating": {"type": "float"},
                "published_on": {"type": "date"},
                "updated_at": {"type": "datetime"},
                "meta": {"type": "object"},
                "tags": {"type": "array"},
                "draft": {"type": "boolean"},
                "ref": {"type": "uuid"},
            }
        )
        data = synthesize_schema(resource, examples=examples)["data"]
        props = data["properties"]["attributes"]["properties"]
        assert set(props) == set(data["example"]["attributes"])
        for name, prop in props.items():
            assert prop["example"] == data["example"]["attributes"][name]

    def test_relationship_example_parity(self, examples: ExampleProvider) -> None:
        resource = _resource(
            relationships={
                "author": {"relationship_type": "belongs_to", "record_type": "people"},
                "comments": {"relationship_type": "has_many", "record_type": "comments"},
            }
        )
        data = synthesize_schema(resource, examples=examples)["data"]
        assert set(data["properties"]["relationships"]["properties"]) == set(data["example"]["relationships"])

    def test_required_list_matches_flags(self, examples: ExampleProvider) -> None:
        resource = _resource(
            attributes={
                "title": {"required": True},
                "body": {"required": False},
                "slug": {"required": True},
                "summary": {},
            }
        )
        attributes = synthesize_schema(resource, examples=examples)["data"]["properties"]["attributes"]
        assert attributes["required"] == ["title", "slug"]
        assert set(attributes["required"]) <= set(attributes["properties"])

    def test_required_list_absent_when_nothing_required(self, examples: ExampleProvider) -> None:
        resource = _resource(attributes={"title": {}})
        assert "required" not in synthesize_schema(resource, examples=examples)["data"]["properties"]["attributes"]

    def test_explicit_example_is_deterministic(self) -> None:
        resource = _resource(attributes={"title": {"example": "X"}})
        for seed in range(5):
            data = synthesize_schema(resource, examples=ExampleProvider(seed=seed))["data"]
            assert data["example"]["attributes"]["title"] == "X"

    def test_rendering_key_collapses_relationships(self, examples: ExampleProvider) -> None:
        resource = _resource(
            relationships={
                "writer": {"key": "author", "relationship_type": "belongs_to", "record_type": "people"},
                "owner": {"key": "author", "relationship_type": "belongs_to", "record_type": "users"},
            }
        )
        data = synthesize_schema(resource, examples=examples)["data"]
        assert list(data["properties"]["relationships"]["properties"]) == ["author"]
        assert data["example"]["relationships"] == {"author": {"data": {"id": 1, "type": "users"}}}

    def test_output_is_json_serializable(self, article: Resource, examples: ExampleProvider) -> None:
        json.dumps(synthesize_schema(article, examples=examples))

    def test_same_seed_same_output(self, examples: ExampleProvider) -> None:
        resource = _resource(attributes={"rating": {"type": "float"}, "ref": {"type": "uuid"}})
        first = synthesize_schema(resource, examples=ExampleProvider(seed=9))
        second = synthesize_schema(resource, examples=ExampleProvider(seed=9))
        assert first == second


class TestAdditionalSchema:
    def test_fragment_overrides_computed_type(self, examples: ExampleProvider) -> None:
        resource = _resource(
            attributes={"foo": {"type": "string"}},
            additional_schema={"data": {"properties": {"attributes": {"properties": {"foo": {"type": "bar"}}}}}},
        )
        data = synthesize_schema(resource, examples=examples)["data"]
        foo = data["properties"]["attributes"]["properties"]["foo"]
        assert foo["type"] == "bar"
        assert foo["example"] == "Example string"

    def test_fragment_can_add_keys(self, article: Resource, examples: ExampleProvider) -> None:
        resource = article.model_copy(update={"additional_schema": {"data": {"description": "An article"}}})
        data = synthesize_schema(resource, examples=examples)["data"]
        assert data["description"] == "An article"
        assert data["properties"]["attributes"]["required"] == ["title"]

    def test_fragment_on_plain_object(self, examples: ExampleProvider) -> None:
        model = SimpleNamespace(
            record_type="things",
            attributes_to_serialize={"name": {}},
            relationships_to_serialize={},
            additional_schema={"data": {"example": {"id": 7}}},
        )
        data = synthesize_schema(model, examples=examples)["data"]
        assert data["example"]["id"] == 7
        assert data["example"]["attributes"] == {"name": "Example string"}

    def test_model_fragment_is_not_mutated(self, examples: ExampleProvider) -> None:
        fragment = {"data": {"properties": {"extra": {"type": "string"}}}}
        resource = _resource(additional_schema=fragment)
        result = synthesize_schema(resource, examples=examples)
        result["data"]["properties"]["extra"]["type"] = "integer"
        assert resource.additional_schema == {"data": {"properties": {"extra": {"type": "string"}}}}


class TestColumnsAndErrors:
    def test_columns_supply_types(self, examples: ExampleProvider) -> None:
        resource = _resource(attributes={"views": {}, "title": {}})
        columns = InMemoryColumnCatalogue.from_types({"views": "integer"})
        data = synthesize_schema(resource, examples=examples, columns=columns)["data"]
        assert data["properties"]["attributes"]["properties"]["views"] == {"type": "integer", "example": 1}
        assert data["example"]["attributes"] == {"views": 1, "title": "Example string"}

    def test_unsupported_type_fails_whole_call(self, examples: ExampleProvider) -> None:
        resource = _resource(attributes={"title": {}, "price": {"type": "money"}})
        with pytest.raises(UnsupportedTypeError):
            synthesize_schema(resource, examples=examples)

    def test_unresolved_relationship_type_fails(self, examples: ExampleProvider) -> None:
        resource = _resource(relationships={"author": {"relationship_type": "belongs_to"}})
        with pytest.raises(UnresolvedRelationshipTypeError):
            synthesize_schema(resource, examples=examples)

    def test_endpoint_is_ignored(self, article: Resource) -> None:
        first = synthesize_schema(article, {"path": "/articles"}, examples=ExampleProvider(seed=1))
        second = synthesize_schema(article, examples=ExampleProvider(seed=1))
        assert first == second

    def test_default_example_provider(self, article: Resource) -> None:
        data = synthesize_schema(article)["data"]
        assert data["example"]["attributes"]["title"] == "Example string"
