from datetime import datetime

from app.schemas import CamelModel


class CategoryScore(CamelModel):
    name: str
    score: float  # percentage, actual_score / potential_score * 100
    actual_score: float
    potential_score: float
    gap_from_potential: float


class PillarScore(CamelModel):
    name: str
    score: float
    actual_score: float
    potential_score: float
    gap_from_potential: float
    categories: list[CategoryScore]


class PillarSummary(CamelModel):
    name: str
    percentage: float
    actual_score: float
    potential_score: float


class CategorySummary(CamelModel):
    name: str
    pillar: str
    percentage: float
    actual_score: float
    potential_score: float


class OverviewMetadata(CamelModel):
    assessment_matrix_id: str
    company_name: str
    performance_cycle: str
    assessment_matrix_name: str
    last_updated: datetime | None


class OverviewSummary(CamelModel):
    general_average: float
    top_pillar: PillarSummary | None = None
    bottom_pillar: PillarSummary | None = None
    top_category: CategorySummary | None = None
    bottom_category: CategorySummary | None = None
    total_employees: int
    completion_percentage: float


class TeamOverview(CamelModel):
    team_id: str | None
    team_name: str | None
    total_score: float
    employee_count: int
    completion_percentage: float
    pillar_scores: dict[str, PillarScore]


class DashboardOverviewResponse(CamelModel):
    metadata: OverviewMetadata
    summary: OverviewSummary
    teams: list[TeamOverview]


class WordFrequency(CamelModel):
    text: str
    count: int


class WordCloud(CamelModel):
    words: list[WordFrequency]
    total_responses: int
    status: str  # sufficient, limited, none


class DashboardTeamResponse(CamelModel):
    team_id: str | None
    team_name: str | None
    total_score: float
    employee_count: int
    completion_percentage: float
    pillar_scores: dict[str, PillarScore]
    word_cloud: WordCloud


class ComputeAck(CamelModel):
    success: bool
    message: str
    assessment_matrix_id: str
    computed_at: datetime
