from typing import Any


def _object_schema() -> dict[str, Any]:
    return {"type": "object", "properties": {}}


def build_skeleton(record_type: str) -> dict[str, Any]:
    """Return the JSON:API document shape every resource schema starts from."""
    return {
        "data": {
            "type": "object",
            "properties": {
                "id": {"type": "integer"},
                "type": {"type": "string"},
                "attributes": _object_schema(),
                "relationships": _object_schema(),
            },
            "example": {
                "id": 1,
                "type": record_type,
                "attributes": {},
                "relationships": {},
            },
        }
    }
