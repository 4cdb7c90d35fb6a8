from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"


class ResourceListResponse(BaseModel):
    record_types: list[str]
