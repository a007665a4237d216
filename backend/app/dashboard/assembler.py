"""Response assembly for the overview and team dashboards.

The empty responses are part of the contract: a matrix whose analytics have
not been computed yet still answers 200 with zeroed, fully-formed bodies.
"""

from app.dashboard.blob import parse_analytics_data
from app.dashboard.extremum import extract_extremes
from app.dashboard.models import AnalyticsScope, DashboardAnalytics
from app.dashboard.schemas import (
    DashboardOverviewResponse,
    DashboardTeamResponse,
    OverviewMetadata,
    OverviewSummary,
    TeamOverview,
)
from app.dashboard.score_tree import build_pillar_scores, build_word_cloud, empty_word_cloud

NOT_AVAILABLE = "N/A"
UNKNOWN_TEAM = "Unknown Team"


def build_team_overview(record: DashboardAnalytics) -> TeamOverview:
    data = parse_analytics_data(record.analytics_data_json)
    return TeamOverview(
        team_id=record.team_id,
        team_name=record.team_name,
        total_score=record.general_average,
        employee_count=record.employee_count,
        completion_percentage=record.completion_percentage,
        pillar_scores=build_pillar_scores(data),
    )


def build_overview_response(
    overview: DashboardAnalytics,
    all_records: list[DashboardAnalytics],
) -> DashboardOverviewResponse:
    data = parse_analytics_data(overview.analytics_data_json)
    extremes = extract_extremes(data)

    metadata = OverviewMetadata(
        assessment_matrix_id=overview.assessment_matrix_id,
        company_name=overview.company_name or NOT_AVAILABLE,
        performance_cycle=overview.performance_cycle_name or NOT_AVAILABLE,
        assessment_matrix_name=overview.assessment_matrix_name or NOT_AVAILABLE,
        last_updated=overview.last_updated,
    )
    summary = OverviewSummary(
        general_average=overview.general_average,
        top_pillar=extremes.top_pillar,
        bottom_pillar=extremes.bottom_pillar,
        top_category=extremes.top_category,
        bottom_category=extremes.bottom_category,
        total_employees=overview.employee_count,
        completion_percentage=overview.completion_percentage,
    )
    teams = [
        build_team_overview(record)
        for record in all_records
        if record.scope == AnalyticsScope.TEAM.value
    ]
    return DashboardOverviewResponse(metadata=metadata, summary=summary, teams=teams)


def build_team_response(record: DashboardAnalytics) -> DashboardTeamResponse:
    data = parse_analytics_data(record.analytics_data_json)
    return DashboardTeamResponse(
        team_id=record.team_id,
        team_name=record.team_name,
        total_score=record.general_average,
        employee_count=record.employee_count,
        completion_percentage=record.completion_percentage,
        pillar_scores=build_pillar_scores(data),
        word_cloud=build_word_cloud(data),
    )


def build_empty_overview_response(assessment_matrix_id: str) -> DashboardOverviewResponse:
    return DashboardOverviewResponse(
        metadata=OverviewMetadata(
            assessment_matrix_id=assessment_matrix_id,
            company_name=NOT_AVAILABLE,
            performance_cycle=NOT_AVAILABLE,
            assessment_matrix_name=NOT_AVAILABLE,
            last_updated=None,
        ),
        summary=OverviewSummary(general_average=0.0, total_employees=0, completion_percentage=0.0),
        teams=[],
    )


def build_empty_team_response(team_id: str) -> DashboardTeamResponse:
    return DashboardTeamResponse(
        team_id=team_id,
        team_name=UNKNOWN_TEAM,
        total_score=0.0,
        employee_count=0,
        completion_percentage=0.0,
        pillar_scores={},
        word_cloud=empty_word_cloud(),
    )
