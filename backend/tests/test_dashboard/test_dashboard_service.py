import pytest

from app.assessment_matrices.models import AssessmentMatrix
from app.dashboard.models import AnalyticsScope, DashboardAnalytics
from app.dashboard.ports import AnalyticsStore, AssessmentMatrixLookup
from app.dashboard.service import DashboardService
from app.errors import AccessDeniedError, InternalError, NotFoundError
from factories import COMPANY_ID, MATRIX_ID, OTHER_COMPANY_ID, OVERVIEW_PILLARS, TEAM_ID, analytics_blob, make_record


class FakeMatrixLookup(AssessmentMatrixLookup):
    def __init__(self, matrix: AssessmentMatrix | None = None, error: Exception | None = None):
        self.matrix = matrix
        self.error = error

    async def find_assessment_matrix_by_id(self, assessment_matrix_id):
        if self.error:
            raise self.error
        if self.matrix is not None and self.matrix.id == assessment_matrix_id:
            return self.matrix
        return None


class CountingStore(AnalyticsStore):
    def __init__(self, records: list[DashboardAnalytics] | None = None, error: Exception | None = None):
        self.records = records or []
        self.error = error
        self.calls: list[str] = []

    def _check(self, name: str):
        self.calls.append(name)
        if self.error:
            raise self.error

    async def get_overview_analytics(self, assessment_matrix_id):
        self._check("get_overview_analytics")
        return next((r for r in self.records if r.scope == AnalyticsScope.ASSESSMENT_MATRIX.value), None)

    async def get_all_analytics(self, assessment_matrix_id):
        self._check("get_all_analytics")
        return list(self.records)

    async def get_team_analytics(self, assessment_matrix_id, team_id):
        self._check("get_team_analytics")
        return next((r for r in self.records if r.team_id == team_id), None)

    async def trigger_recompute(self, assessment_matrix_id):
        self._check("trigger_recompute")


def _service(store: CountingStore, matrix_owner: str = COMPANY_ID, lookup_error: Exception | None = None):
    matrix = AssessmentMatrix(id=MATRIX_ID, tenant_id=matrix_owner, name="Agile Maturity")
    return DashboardService(FakeMatrixLookup(matrix, lookup_error), store)


@pytest.mark.asyncio
async def test_overview_without_record_is_empty_state():
    store = CountingStore()
    response = await _service(store).get_overview(MATRIX_ID, COMPANY_ID)
    assert response.summary.general_average == 0.0
    assert response.summary.total_employees == 0
    assert response.teams == []
    assert store.calls == ["get_overview_analytics"]


@pytest.mark.asyncio
async def test_overview_with_record():
    store = CountingStore([
        make_record(analytics_data_json=analytics_blob(OVERVIEW_PILLARS)),
        make_record(scope=AnalyticsScope.TEAM, team_id=TEAM_ID, team_name="Platform"),
    ])
    response = await _service(store).get_overview(MATRIX_ID, COMPANY_ID)
    assert response.summary.top_pillar.percentage == 87.5
    assert response.summary.bottom_pillar.percentage == 65.0
    assert [t.team_id for t in response.teams] == [TEAM_ID]
    assert store.calls == ["get_overview_analytics", "get_all_analytics"]


@pytest.mark.asyncio
async def test_team_without_record_is_empty_state():
    store = CountingStore()
    response = await _service(store).get_team(MATRIX_ID, TEAM_ID, COMPANY_ID)
    assert response.team_id == TEAM_ID
    assert response.team_name == "Unknown Team"
    assert response.pillar_scores == {}
    assert response.word_cloud.status == "none"


@pytest.mark.asyncio
async def test_compute_acknowledges():
    store = CountingStore()
    ack = await _service(store).compute(MATRIX_ID, COMPANY_ID)
    assert ack.success is True
    assert ack.assessment_matrix_id == MATRIX_ID
    assert ack.message == "Dashboard analytics computed successfully"
    assert ack.computed_at is not None
    assert store.calls == ["trigger_recompute"]


@pytest.mark.asyncio
@pytest.mark.parametrize("operation", ["overview", "team", "compute"])
async def test_tenant_mismatch_never_touches_the_store(operation):
    store = CountingStore([make_record()])
    service = _service(store, matrix_owner=OTHER_COMPANY_ID)

    with pytest.raises(AccessDeniedError) as exc_info:
        if operation == "overview":
            await service.get_overview(MATRIX_ID, COMPANY_ID)
        elif operation == "team":
            await service.get_team(MATRIX_ID, TEAM_ID, COMPANY_ID)
        else:
            await service.compute(MATRIX_ID, COMPANY_ID)

    assert exc_info.value.message == "Access denied to this assessment matrix"
    assert store.calls == []


@pytest.mark.asyncio
async def test_unknown_matrix_is_not_found():
    store = CountingStore()
    with pytest.raises(NotFoundError):
        await _service(store).get_overview("missing", COMPANY_ID)
    assert store.calls == []


@pytest.mark.asyncio
async def test_lookup_failure_is_internal():
    store = CountingStore()
    service = _service(store, lookup_error=RuntimeError("connection reset"))
    with pytest.raises(InternalError) as exc_info:
        await service.compute(MATRIX_ID, COMPANY_ID)
    assert exc_info.value.message == "Error verifying access permissions"
    assert store.calls == []


@pytest.mark.asyncio
async def test_store_failures_are_reported_with_their_message():
    service = _service(CountingStore(error=RuntimeError("table locked")))

    with pytest.raises(InternalError) as overview_error:
        await service.get_overview(MATRIX_ID, COMPANY_ID)
    assert overview_error.value.message == "Failed to retrieve overview analytics: table locked"

    with pytest.raises(InternalError) as team_error:
        await service.get_team(MATRIX_ID, TEAM_ID, COMPANY_ID)
    assert team_error.value.message == "Failed to retrieve team analytics: table locked"

    with pytest.raises(InternalError) as compute_error:
        await service.compute(MATRIX_ID, COMPANY_ID)
    assert compute_error.value.message == "Failed to compute analytics: table locked"
