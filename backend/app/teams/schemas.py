from datetime import datetime

from pydantic import Field

from app.schemas import CamelModel


class TeamCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    tenant_id: str = Field(min_length=1, max_length=64)
    department_id: str | None = Field(None, max_length=64)


class TeamResponse(CamelModel):
    id: str
    tenant_id: str
    name: str
    description: str | None
    department_id: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
