from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.assessment_matrices.service import SqlAssessmentMatrixLookup
from app.dashboard.schemas import ComputeAck, DashboardOverviewResponse, DashboardTeamResponse
from app.dashboard.service import DashboardService
from app.dashboard.store import SqlAnalyticsStore
from app.database import get_db
from app.errors import MethodNotAllowedError, require_param

router = APIRouter(prefix="/dashboard-analytics", tags=["dashboard-analytics"])


def get_dashboard_service(db: AsyncSession = Depends(get_db)) -> DashboardService:
    return DashboardService(SqlAssessmentMatrixLookup(db), SqlAnalyticsStore(db))


@router.get("/overview/{assessment_matrix_id}", response_model=DashboardOverviewResponse)
async def get_overview(
    assessment_matrix_id: str,
    tenant_id: str | None = Query(None, alias="tenantId"),
    service: DashboardService = Depends(get_dashboard_service),
):
    tenant_id = require_param(tenant_id, "tenantId")
    return await service.get_overview(assessment_matrix_id, tenant_id)


@router.get("/team/{assessment_matrix_id}/{team_id}", response_model=DashboardTeamResponse)
async def get_team(
    assessment_matrix_id: str,
    team_id: str,
    tenant_id: str | None = Query(None, alias="tenantId"),
    service: DashboardService = Depends(get_dashboard_service),
):
    tenant_id = require_param(tenant_id, "tenantId")
    return await service.get_team(assessment_matrix_id, team_id, tenant_id)


@router.post("/compute/{assessment_matrix_id}", response_model=ComputeAck)
async def compute(
    assessment_matrix_id: str,
    tenant_id: str | None = Query(None, alias="tenantId"),
    service: DashboardService = Depends(get_dashboard_service),
):
    tenant_id = require_param(tenant_id, "tenantId")
    return await service.compute(assessment_matrix_id, tenant_id)


@router.api_route(
    "/compute/{assessment_matrix_id}",
    methods=["GET", "HEAD", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
async def compute_wrong_method(assessment_matrix_id: str):
    # Checked before tenantId, so a bare GET still gets 405
    raise MethodNotAllowedError("Method Not Allowed - POST required for compute endpoint")
