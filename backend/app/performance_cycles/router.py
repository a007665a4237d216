from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.dashboard.access import authorize_company
from app.database import get_db
from app.errors import InternalError, NotFoundError, require_param
from app.performance_cycles.schemas import (
    PerformanceCycleCreate,
    PerformanceCycleResponse,
    PerformanceCycleSummaryResponse,
)
from app.performance_cycles.service import (
    create_performance_cycle,
    delete_performance_cycle,
    get_performance_cycle_by_id,
    get_performance_cycle_summary,
    get_performance_cycles,
)

router = APIRouter(prefix="/performancecycles", tags=["performance-cycles"])
summary_router = APIRouter(prefix="/performance-cycle-summary", tags=["performance-cycles"])


@router.post("", response_model=PerformanceCycleResponse, status_code=status.HTTP_201_CREATED)
async def create(
    data: PerformanceCycleCreate,
    db: AsyncSession = Depends(get_db),
):
    cycle = await create_performance_cycle(db, data)
    return PerformanceCycleResponse.model_validate(cycle)


@router.get("", response_model=list[PerformanceCycleResponse])
async def list_cycles(
    tenant_id: str | None = Query(None, alias="tenantId"),
    db: AsyncSession = Depends(get_db),
):
    tenant_id = require_param(tenant_id, "tenantId")
    cycles = await get_performance_cycles(db, tenant_id)
    return [PerformanceCycleResponse.model_validate(c) for c in cycles]


@router.get("/{cycle_id}", response_model=PerformanceCycleResponse)
async def get_cycle(
    cycle_id: str,
    db: AsyncSession = Depends(get_db),
):
    cycle = await get_performance_cycle_by_id(db, cycle_id)
    if not cycle:
        raise NotFoundError("Performance cycle not found")
    return PerformanceCycleResponse.model_validate(cycle)


@router.delete("/{cycle_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete(
    cycle_id: str,
    db: AsyncSession = Depends(get_db),
):
    cycle = await get_performance_cycle_by_id(db, cycle_id)
    if not cycle:
        raise NotFoundError("Performance cycle not found")
    await delete_performance_cycle(db, cycle)


@summary_router.get("/{company_id}", response_model=PerformanceCycleSummaryResponse)
async def performance_cycle_summary(
    company_id: str,
    tenant_id: str | None = Query(None, alias="tenantId"),
    db: AsyncSession = Depends(get_db),
):
    tenant_id = require_param(tenant_id, "tenantId")
    authorize_company(company_id, tenant_id)

    try:
        return await get_performance_cycle_summary(db, company_id)
    except Exception as e:
        raise InternalError(f"Failed to retrieve performance cycle summary: {e}") from e
