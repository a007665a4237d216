from datetime import date, datetime, timezone

import structlog
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.assessment_matrices.models import AssessmentMatrix
from app.companies.service import get_company_by_id
from app.dashboard.models import AnalyticsScope, DashboardAnalytics
from app.performance_cycles.models import PerformanceCycle
from app.performance_cycles.schemas import (
    PerformanceCycleCard,
    PerformanceCycleCreate,
    PerformanceCycleSummaryResponse,
)

logger = structlog.get_logger()


async def create_performance_cycle(db: AsyncSession, data: PerformanceCycleCreate) -> PerformanceCycle:
    cycle = PerformanceCycle(**data.model_dump())
    db.add(cycle)
    await db.commit()
    await db.refresh(cycle)
    return cycle


async def get_performance_cycles(db: AsyncSession, tenant_id: str) -> list[PerformanceCycle]:
    result = await db.execute(
        select(PerformanceCycle)
        .where(PerformanceCycle.tenant_id == tenant_id)
        .order_by(PerformanceCycle.start_date.asc(), PerformanceCycle.name.asc())
    )
    return list(result.scalars().all())


async def get_performance_cycle_by_id(db: AsyncSession, cycle_id: str) -> PerformanceCycle | None:
    result = await db.execute(select(PerformanceCycle).where(PerformanceCycle.id == cycle_id))
    return result.scalar_one_or_none()


async def delete_performance_cycle(db: AsyncSession, cycle: PerformanceCycle) -> None:
    await db.delete(cycle)
    await db.commit()


def cycle_status(cycle: PerformanceCycle, today: date | None = None) -> str:
    today = today or datetime.now(timezone.utc).date()
    if cycle.start_date and cycle.start_date > today:
        return "UPCOMING"
    if cycle.end_date and cycle.end_date < today:
        return "EXPIRED" if cycle.is_time_sensitive else "COMPLETED"
    if not cycle.is_active:
        return "COMPLETED"
    return "ACTIVE"


async def get_performance_cycle_summary(
    db: AsyncSession,
    company_id: str,
    today: date | None = None,
) -> PerformanceCycleSummaryResponse:
    """Per-cycle completion cards for a company, built from matrix-level analytics."""
    company = await get_company_by_id(db, company_id)
    cycles = await get_performance_cycles(db, company_id)

    matrix_counts: dict[str, int] = {}
    if cycles:
        count_result = await db.execute(
            select(AssessmentMatrix.performance_cycle_id, func.count().label("count"))
            .where(AssessmentMatrix.tenant_id == company_id)
            .group_by(AssessmentMatrix.performance_cycle_id)
        )
        matrix_counts = {r.performance_cycle_id: r.count for r in count_result.all()}

    records_by_cycle: dict[str, list[DashboardAnalytics]] = {}
    if cycles:
        # Only records whose matrix still exists, bucketed by that matrix's cycle
        records_result = await db.execute(
            select(DashboardAnalytics, AssessmentMatrix.performance_cycle_id)
            .join(AssessmentMatrix, AssessmentMatrix.id == DashboardAnalytics.assessment_matrix_id)
            .where(
                AssessmentMatrix.tenant_id == company_id,
                DashboardAnalytics.scope == AnalyticsScope.ASSESSMENT_MATRIX.value,
            )
        )
        for record, cycle_id in records_result.all():
            records_by_cycle.setdefault(cycle_id, []).append(record)

    cards = []
    for cycle in cycles:
        records = records_by_cycle.get(cycle.id, [])
        total = sum(r.employee_count or 0 for r in records)
        completed = round(sum((r.employee_count or 0) * (r.completion_percentage or 0.0) / 100 for r in records))
        last_activity = max((r.last_updated for r in records if r.last_updated), default=None)

        cards.append(PerformanceCycleCard(
            id=cycle.id,
            name=cycle.name,
            description=cycle.description,
            status=cycle_status(cycle, today),
            start_date=cycle.start_date,
            end_date=cycle.end_date,
            created_date=cycle.created_at,
            last_activity_date=last_activity,
            assessment_matrix_count=matrix_counts.get(cycle.id, 0),
            total_employee_assessments=total,
            completed_assessments=completed,
            completion_percentage=round(completed / total * 100, 1) if total else 0.0,
        ))

    logger.info("performance_cycle_summary_built", company_id=company_id, cycles=len(cards))
    return PerformanceCycleSummaryResponse(
        company_id=company_id,
        company_name=company.name if company else "N/A",
        performance_cycles=cards,
    )
