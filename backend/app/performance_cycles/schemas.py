from datetime import date, datetime

from pydantic import Field, model_validator

from app.schemas import CamelModel


class PerformanceCycleCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    tenant_id: str = Field(min_length=1, max_length=64)
    is_active: bool = True
    is_time_sensitive: bool = False
    start_date: date | None = None
    end_date: date | None = None

    @model_validator(mode="after")
    def _check_dates(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self


class PerformanceCycleResponse(CamelModel):
    id: str
    tenant_id: str
    name: str
    description: str | None
    is_active: bool
    is_time_sensitive: bool
    start_date: date | None
    end_date: date | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class PerformanceCycleCard(CamelModel):
    id: str
    name: str
    description: str | None = None
    status: str  # ACTIVE, UPCOMING, COMPLETED, EXPIRED
    start_date: date | None = None
    end_date: date | None = None
    created_date: datetime | None = None
    last_activity_date: datetime | None = None
    assessment_matrix_count: int = 0
    total_employee_assessments: int = 0
    completed_assessments: int = 0
    completion_percentage: float = 0.0


class PerformanceCycleSummaryResponse(CamelModel):
    company_id: str
    company_name: str
    performance_cycles: list[PerformanceCycleCard]
