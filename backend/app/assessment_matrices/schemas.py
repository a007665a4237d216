from datetime import datetime
from typing import Any

from pydantic import Field

from app.schemas import CamelModel


class AssessmentMatrixCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    tenant_id: str = Field(min_length=1, max_length=64)
    performance_cycle_id: str | None = Field(None, max_length=64)
    pillar_map: dict[str, Any] = Field(default_factory=dict)


class AssessmentMatrixResponse(CamelModel):
    id: str
    tenant_id: str
    performance_cycle_id: str | None
    name: str
    description: str | None
    pillar_map: dict[str, Any] | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
