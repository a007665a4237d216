from datetime import datetime, timezone

import structlog

from app.dashboard.access import TenantAccessGuard
from app.dashboard.assembler import (
    build_empty_overview_response,
    build_empty_team_response,
    build_overview_response,
    build_team_response,
)
from app.dashboard.ports import AnalyticsStore, AssessmentMatrixLookup
from app.dashboard.schemas import ComputeAck, DashboardOverviewResponse, DashboardTeamResponse
from app.errors import InternalError

logger = structlog.get_logger()

COMPUTE_SUCCESS_MESSAGE = "Dashboard analytics computed successfully"


class DashboardService:
    """Read and recompute entry points for the dashboard.

    Every operation authorizes the tenant against the matrix first; the
    analytics store is only touched once that has passed.
    """

    def __init__(self, matrices: AssessmentMatrixLookup, store: AnalyticsStore):
        self.guard = TenantAccessGuard(matrices)
        self.store = store

    async def get_overview(self, assessment_matrix_id: str, tenant_id: str) -> DashboardOverviewResponse:
        await self.guard.authorize(assessment_matrix_id, tenant_id)

        try:
            overview = await self.store.get_overview_analytics(assessment_matrix_id)
            if overview is None:
                logger.info("dashboard_overview_empty", assessment_matrix_id=assessment_matrix_id)
                return build_empty_overview_response(assessment_matrix_id)

            records = await self.store.get_all_analytics(assessment_matrix_id)
            response = build_overview_response(overview, records)
        except Exception as e:
            logger.error("dashboard_overview_failed", assessment_matrix_id=assessment_matrix_id, error=str(e))
            raise InternalError(f"Failed to retrieve overview analytics: {e}") from e

        logger.info(
            "dashboard_overview_served",
            assessment_matrix_id=assessment_matrix_id,
            teams=len(response.teams),
        )
        return response

    async def get_team(self, assessment_matrix_id: str, team_id: str, tenant_id: str) -> DashboardTeamResponse:
        await self.guard.authorize(assessment_matrix_id, tenant_id)

        try:
            record = await self.store.get_team_analytics(assessment_matrix_id, team_id)
            if record is None:
                logger.info("dashboard_team_empty", assessment_matrix_id=assessment_matrix_id, team_id=team_id)
                return build_empty_team_response(team_id)
            return build_team_response(record)
        except Exception as e:
            logger.error(
                "dashboard_team_failed",
                assessment_matrix_id=assessment_matrix_id,
                team_id=team_id,
                error=str(e),
            )
            raise InternalError(f"Failed to retrieve team analytics: {e}") from e

    async def compute(self, assessment_matrix_id: str, tenant_id: str) -> ComputeAck:
        await self.guard.authorize(assessment_matrix_id, tenant_id)

        logger.info("dashboard_compute_triggered", assessment_matrix_id=assessment_matrix_id, tenant_id=tenant_id)
        try:
            await self.store.trigger_recompute(assessment_matrix_id)
        except Exception as e:
            logger.error("dashboard_compute_failed", assessment_matrix_id=assessment_matrix_id, error=str(e))
            raise InternalError(f"Failed to compute analytics: {e}") from e

        return ComputeAck(
            success=True,
            message=COMPUTE_SUCCESS_MESSAGE,
            assessment_matrix_id=assessment_matrix_id,
            computed_at=datetime.now(timezone.utc),
        )
