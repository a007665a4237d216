import structlog

from app.assessment_matrices.models import AssessmentMatrix
from app.dashboard.ports import AssessmentMatrixLookup
from app.errors import AccessDeniedError, InternalError, NotFoundError

logger = structlog.get_logger()


class TenantAccessGuard:
    """Tenant isolation for matrix-scoped analytics.

    Must pass before any analytics record is read or any recompute is
    requested. A denial says nothing about the matrix beyond the 403 itself.
    """

    def __init__(self, matrices: AssessmentMatrixLookup):
        self.matrices = matrices

    async def authorize(self, assessment_matrix_id: str, tenant_id: str) -> AssessmentMatrix:
        try:
            matrix = await self.matrices.find_assessment_matrix_by_id(assessment_matrix_id)
        except Exception as e:
            logger.error(
                "tenant_access_check_failed",
                assessment_matrix_id=assessment_matrix_id,
                error=str(e),
            )
            raise InternalError("Error verifying access permissions") from e

        if matrix is None:
            logger.warning("assessment_matrix_not_found", assessment_matrix_id=assessment_matrix_id)
            raise NotFoundError("Assessment matrix not found")

        if matrix.tenant_id != tenant_id:
            logger.warning(
                "tenant_access_denied",
                assessment_matrix_id=assessment_matrix_id,
                tenant_id=tenant_id,
            )
            raise AccessDeniedError("Access denied to this assessment matrix")

        return matrix


def authorize_company(company_id: str, tenant_id: str) -> None:
    """Direct check for company-scoped paths, where no matrix is in scope."""
    if tenant_id != company_id:
        logger.warning("tenant_access_denied", company_id=company_id, tenant_id=tenant_id)
        raise AccessDeniedError("Access denied to this company data")
