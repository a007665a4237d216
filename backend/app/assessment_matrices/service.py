from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.assessment_matrices.models import AssessmentMatrix
from app.assessment_matrices.schemas import AssessmentMatrixCreate
from app.dashboard.models import DashboardAnalytics
from app.dashboard.ports import AssessmentMatrixLookup


async def create_assessment_matrix(db: AsyncSession, data: AssessmentMatrixCreate) -> AssessmentMatrix:
    matrix = AssessmentMatrix(**data.model_dump())
    db.add(matrix)
    await db.commit()
    await db.refresh(matrix)
    return matrix


async def get_assessment_matrices(db: AsyncSession, tenant_id: str) -> list[AssessmentMatrix]:
    result = await db.execute(
        select(AssessmentMatrix)
        .where(AssessmentMatrix.tenant_id == tenant_id)
        .order_by(AssessmentMatrix.name.asc())
    )
    return list(result.scalars().all())


async def get_assessment_matrix_by_id(db: AsyncSession, matrix_id: str) -> AssessmentMatrix | None:
    result = await db.execute(select(AssessmentMatrix).where(AssessmentMatrix.id == matrix_id))
    return result.scalar_one_or_none()


async def delete_assessment_matrix(db: AsyncSession, matrix: AssessmentMatrix) -> None:
    """Removes the matrix together with every analytics record computed against it."""
    await db.execute(delete(DashboardAnalytics).where(DashboardAnalytics.assessment_matrix_id == matrix.id))
    await db.delete(matrix)
    await db.commit()


class SqlAssessmentMatrixLookup(AssessmentMatrixLookup):
    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_assessment_matrix_by_id(self, assessment_matrix_id: str) -> AssessmentMatrix | None:
        return await get_assessment_matrix_by_id(self.db, assessment_matrix_id)
