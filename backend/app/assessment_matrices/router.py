from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.assessment_matrices.schemas import AssessmentMatrixCreate, AssessmentMatrixResponse
from app.assessment_matrices.service import (
    create_assessment_matrix,
    delete_assessment_matrix,
    get_assessment_matrices,
    get_assessment_matrix_by_id,
)
from app.database import get_db
from app.errors import NotFoundError, require_param

router = APIRouter(prefix="/assessmentmatrices", tags=["assessment-matrices"])


@router.post("", response_model=AssessmentMatrixResponse, status_code=status.HTTP_201_CREATED)
async def create(
    data: AssessmentMatrixCreate,
    db: AsyncSession = Depends(get_db),
):
    matrix = await create_assessment_matrix(db, data)
    return AssessmentMatrixResponse.model_validate(matrix)


@router.get("", response_model=list[AssessmentMatrixResponse])
async def list_matrices(
    tenant_id: str | None = Query(None, alias="tenantId"),
    db: AsyncSession = Depends(get_db),
):
    tenant_id = require_param(tenant_id, "tenantId")
    matrices = await get_assessment_matrices(db, tenant_id)
    return [AssessmentMatrixResponse.model_validate(m) for m in matrices]


@router.get("/{matrix_id}", response_model=AssessmentMatrixResponse)
async def get_matrix(
    matrix_id: str,
    db: AsyncSession = Depends(get_db),
):
    matrix = await get_assessment_matrix_by_id(db, matrix_id)
    if not matrix:
        raise NotFoundError("Assessment matrix not found")
    return AssessmentMatrixResponse.model_validate(matrix)


@router.delete("/{matrix_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete(
    matrix_id: str,
    db: AsyncSession = Depends(get_db),
):
    matrix = await get_assessment_matrix_by_id(db, matrix_id)
    if not matrix:
        raise NotFoundError("Assessment matrix not found")
    await delete_assessment_matrix(db, matrix)
