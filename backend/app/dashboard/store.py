import json

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.assessment_matrices.service import get_assessment_matrix_by_id
from app.companies.service import get_company_by_id
from app.config import settings
from app.dashboard.models import AnalyticsScope, DashboardAnalytics
from app.dashboard.ports import AnalyticsStore
from app.dashboard.rollup import rollup_team_analytics
from app.models.base import utcnow
from app.performance_cycles.service import get_performance_cycle_by_id

logger = structlog.get_logger()

_RECORD_FIELDS = (
    "company_id",
    "performance_cycle_id",
    "general_average",
    "employee_count",
    "completion_percentage",
    "last_updated",
    "company_name",
    "performance_cycle_name",
    "assessment_matrix_name",
    "team_name",
    "analytics_data_json",
)


class SqlAnalyticsStore(AnalyticsStore):
    def __init__(self, db: AsyncSession, sufficient_responses: int | None = None):
        self.db = db
        self.sufficient_responses = (
            sufficient_responses if sufficient_responses is not None
            else settings.WORD_CLOUD_SUFFICIENT_RESPONSES
        )

    async def get_overview_analytics(self, assessment_matrix_id: str) -> DashboardAnalytics | None:
        result = await self.db.execute(
            select(DashboardAnalytics)
            .where(
                DashboardAnalytics.assessment_matrix_id == assessment_matrix_id,
                DashboardAnalytics.scope == AnalyticsScope.ASSESSMENT_MATRIX.value,
            )
            .order_by(DashboardAnalytics.last_updated.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def get_all_analytics(self, assessment_matrix_id: str) -> list[DashboardAnalytics]:
        result = await self.db.execute(
            select(DashboardAnalytics)
            .where(DashboardAnalytics.assessment_matrix_id == assessment_matrix_id)
            .order_by(DashboardAnalytics.scope.asc(), DashboardAnalytics.team_name.asc())
        )
        return list(result.scalars().all())

    async def get_team_analytics(self, assessment_matrix_id: str, team_id: str) -> DashboardAnalytics | None:
        result = await self.db.execute(
            select(DashboardAnalytics)
            .where(
                DashboardAnalytics.assessment_matrix_id == assessment_matrix_id,
                DashboardAnalytics.scope == AnalyticsScope.TEAM.value,
                DashboardAnalytics.team_id == team_id,
            )
            .order_by(DashboardAnalytics.last_updated.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def _find_slot(self, record: DashboardAnalytics) -> DashboardAnalytics | None:
        if record.scope == AnalyticsScope.TEAM.value:
            return await self.get_team_analytics(record.assessment_matrix_id, record.team_id)
        return await self.get_overview_analytics(record.assessment_matrix_id)

    async def save_analytics(self, record: DashboardAnalytics) -> DashboardAnalytics:
        """Insert or wholesale-overwrite the record at the same matrix/scope/team."""
        record.scope = AnalyticsScope(record.scope).value
        if record.last_updated is None:
            record.last_updated = utcnow()

        existing = await self._find_slot(record)
        if existing is None:
            self.db.add(record)
            try:
                await self.db.commit()
            except IntegrityError:
                # Another writer filled the slot between the read and the insert
                await self.db.rollback()
                existing = await self._find_slot(record)
                if existing is None:
                    raise
                logger.info(
                    "dashboard_analytics_insert_conflict",
                    assessment_matrix_id=record.assessment_matrix_id,
                    scope=record.scope,
                    team_id=record.team_id,
                )
            else:
                await self.db.refresh(record)
                return record

        for field in _RECORD_FIELDS:
            setattr(existing, field, getattr(record, field))
        await self.db.commit()
        await self.db.refresh(existing)
        return existing

    async def trigger_recompute(self, assessment_matrix_id: str) -> None:
        matrix = await get_assessment_matrix_by_id(self.db, assessment_matrix_id)
        if matrix is None:
            raise LookupError(f"assessment matrix {assessment_matrix_id} does not exist")

        team_records = [
            r for r in await self.get_all_analytics(assessment_matrix_id)
            if r.scope == AnalyticsScope.TEAM.value
        ]
        rollup = rollup_team_analytics(team_records, self.sufficient_responses)

        company = await get_company_by_id(self.db, matrix.tenant_id)
        cycle = None
        if matrix.performance_cycle_id:
            cycle = await get_performance_cycle_by_id(self.db, matrix.performance_cycle_id)

        await self.save_analytics(DashboardAnalytics(
            company_id=matrix.tenant_id,
            performance_cycle_id=matrix.performance_cycle_id,
            assessment_matrix_id=matrix.id,
            scope=AnalyticsScope.ASSESSMENT_MATRIX.value,
            team_id=None,
            general_average=rollup["general_average"],
            employee_count=rollup["employee_count"],
            completion_percentage=rollup["completion_percentage"],
            last_updated=utcnow(),
            company_name=company.name if company else None,
            performance_cycle_name=cycle.name if cycle else None,
            assessment_matrix_name=matrix.name,
            team_name=None,
            analytics_data_json=json.dumps(rollup["analytics_data"]),
        ))
        logger.info(
            "dashboard_analytics_recomputed",
            assessment_matrix_id=assessment_matrix_id,
            teams=len(team_records),
            employees=rollup["employee_count"],
        )
