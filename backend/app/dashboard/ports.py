from abc import ABC, abstractmethod

from app.assessment_matrices.models import AssessmentMatrix
from app.dashboard.models import DashboardAnalytics


class AssessmentMatrixLookup(ABC):
    @abstractmethod
    async def find_assessment_matrix_by_id(self, assessment_matrix_id: str) -> AssessmentMatrix | None:
        pass


class AnalyticsStore(ABC):
    @abstractmethod
    async def get_overview_analytics(self, assessment_matrix_id: str) -> DashboardAnalytics | None:
        pass

    @abstractmethod
    async def get_all_analytics(self, assessment_matrix_id: str) -> list[DashboardAnalytics]:
        pass

    @abstractmethod
    async def get_team_analytics(self, assessment_matrix_id: str, team_id: str) -> DashboardAnalytics | None:
        pass

    @abstractmethod
    async def trigger_recompute(self, assessment_matrix_id: str) -> None:
        pass
