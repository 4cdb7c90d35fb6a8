from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class AttributeDocumentation(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: str | None = None
    required: bool = False
    example: Any = None
    enum: list[Any] | None = Field(default=None, validation_alias=AliasChoices("enum", "values"))


class RelationshipDescriptor(BaseModel):
    model_config = ConfigDict(extra="ignore")

    key: str | None = None
    relationship_type: str
    record_type: str | None = None
    static_record_type: str | None = None
    object_method_name: str | None = None


class ColumnInfo(BaseModel):
    name: str
    storage_type: str
    documentation: AttributeDocumentation | None = None


class Resource(BaseModel):
    """Serializable resource definition, e.g. loaded from a JSON file."""

    record_type: str
    attributes_to_serialize: dict[str, AttributeDocumentation | None] = Field(
        default_factory=dict, validation_alias=AliasChoices("attributes_to_serialize", "attributes")
    )
    relationships_to_serialize: dict[str, RelationshipDescriptor] = Field(
        default_factory=dict, validation_alias=AliasChoices("relationships_to_serialize", "relationships")
    )
    additional_schema: dict[str, Any] | None = None
