from app.dashboard.models import AnalyticsScope
from app.dashboard.rollup import rollup_team_analytics
from factories import analytics_blob, make_record


def _team(team_id: str, employees: int, average: float, completion: float, pillars=None, words=None):
    return make_record(
        scope=AnalyticsScope.TEAM,
        team_id=team_id,
        team_name=team_id.title(),
        general_average=average,
        employee_count=employees,
        completion_percentage=completion,
        analytics_data_json=analytics_blob(pillars, words),
    )


def test_no_teams_rolls_up_to_zero():
    rollup = rollup_team_analytics([], sufficient_responses=10)
    assert rollup["general_average"] == 0.0
    assert rollup["employee_count"] == 0
    assert rollup["completion_percentage"] == 0.0
    assert rollup["analytics_data"]["pillars"] == {}
    assert rollup["analytics_data"]["wordCloud"] == {"status": "none", "totalResponses": 0, "words": []}


def test_averages_are_weighted_by_employees():
    rollup = rollup_team_analytics(
        [_team("a", 3, 90.0, 100.0), _team("b", 1, 50.0, 0.0)],
        sufficient_responses=10,
    )
    assert rollup["employee_count"] == 4
    assert rollup["general_average"] == 80.0
    assert rollup["completion_percentage"] == 75.0


def test_plain_mean_when_no_team_has_employees():
    rollup = rollup_team_analytics(
        [_team("a", 0, 60.0, 0.0), _team("b", 0, 80.0, 0.0)],
        sufficient_responses=10,
    )
    assert rollup["general_average"] == 70.0


def test_pillars_and_categories_merge_by_key():
    pillars_a = {"p1": {"name": "Delivery", "actualScore": 30, "potentialScore": 40, "categories": {
        "c1": {"name": "Flow", "actualScore": 15, "potentialScore": 20},
    }}}
    pillars_b = {"p1": {"name": "Delivery", "actualScore": 10, "potentialScore": 40, "categories": {
        "c1": {"name": "Flow", "actualScore": 5, "potentialScore": 20},
        "c2": {"name": "Quality", "actualScore": 0, "potentialScore": 0},
    }}}
    rollup = rollup_team_analytics(
        [_team("a", 2, 75.0, 100.0, pillars_a), _team("b", 2, 25.0, 100.0, pillars_b)],
        sufficient_responses=10,
    )

    delivery = rollup["analytics_data"]["pillars"]["p1"]
    assert delivery["name"] == "Delivery"
    assert delivery["actualScore"] == 40.0
    assert delivery["potentialScore"] == 80.0
    assert delivery["percentage"] == 50.0
    assert delivery["gapFromPotential"] == 50.0
    assert delivery["categories"]["c1"]["percentage"] == 50.0
    assert delivery["categories"]["c2"]["percentage"] == 0.0
    assert delivery["categories"]["c2"]["gapFromPotential"] == 100.0


def test_word_clouds_merge_counts_and_sort():
    words_a = {"totalResponses": 6, "words": [{"text": "scrum", "count": 2}, {"text": "agile", "count": 3}]}
    words_b = {"totalResponses": 5, "words": [{"text": "scrum", "count": 1}, {"text": "kanban", "count": 3}]}
    rollup = rollup_team_analytics(
        [_team("a", 1, 0.0, 0.0, words=words_a), _team("b", 1, 0.0, 0.0, words=words_b)],
        sufficient_responses=10,
    )

    cloud = rollup["analytics_data"]["wordCloud"]
    assert cloud["totalResponses"] == 11
    assert cloud["status"] == "sufficient"
    assert cloud["words"] == [
        {"text": "agile", "count": 3},
        {"text": "kanban", "count": 3},
        {"text": "scrum", "count": 3},
    ]


def test_word_cloud_below_threshold_is_limited():
    words = {"totalResponses": 2, "words": [{"text": "retro", "count": 2}]}
    rollup = rollup_team_analytics([_team("a", 1, 0.0, 0.0, words=words)], sufficient_responses=10)
    assert rollup["analytics_data"]["wordCloud"]["status"] == "limited"
