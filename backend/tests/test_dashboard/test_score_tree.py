from app.dashboard.blob import parse_analytics_data
from app.dashboard.score_tree import build_pillar_scores, build_word_cloud
from factories import OVERVIEW_PILLARS, analytics_blob


def _scores(pillars: dict):
    return build_pillar_scores(parse_analytics_data(analytics_blob(pillars)))


def test_pillar_scores_keyed_by_name():
    scores = _scores(OVERVIEW_PILLARS)
    assert list(scores) == ["Team Collaboration", "Technical Practices"]

    collaboration = scores["Team Collaboration"]
    assert collaboration.score == 87.5
    assert collaboration.actual_score == 175.0
    assert collaboration.potential_score == 200.0
    assert collaboration.gap_from_potential == 12.5
    assert [c.name for c in collaboration.categories] == ["Communication", "Trust"]


def test_category_gap_is_derived_from_percentage():
    scores = _scores({"p": {"name": "P", "categories": {"c": {"name": "C", "percentage": 72.5}}}})
    assert scores["P"].categories[0].gap_from_potential == 27.5


def test_stored_category_gap_is_kept():
    scores = _scores({"p": {"name": "P", "categories": {
        "c": {"name": "C", "percentage": 72.5, "gapFromPotential": 20.0},
    }}})
    assert scores["P"].categories[0].gap_from_potential == 20.0


def test_pillar_gap_is_not_derived():
    scores = _scores({"p": {"name": "P", "percentage": 72.5}})
    assert scores["P"].gap_from_potential == 0.0


def test_missing_numbers_default_to_zero():
    scores = _scores({"p": {"name": "P", "categories": {"c": {"name": "C"}}}})
    pillar = scores["P"]
    assert (pillar.score, pillar.actual_score, pillar.potential_score) == (0.0, 0.0, 0.0)
    category = pillar.categories[0]
    assert (category.score, category.gap_from_potential) == (0.0, 0.0)


def test_category_without_name_is_excluded():
    scores = _scores({"p": {"name": "P", "categories": {
        "cat1": {"name": "Valid Category", "percentage": 80.0},
        "cat2": {"percentage": 60.0},
        "cat3": {"name": "Another Valid", "percentage": 70.0},
    }}})
    assert [c.name for c in scores["P"].categories] == ["Valid Category", "Another Valid"]


def test_pillar_without_name_is_excluded():
    scores = _scores({"anon": {"percentage": 50.0}, "named": {"name": "Named", "percentage": 40.0}})
    assert list(scores) == ["Named"]


def test_pillars_sharing_a_name_collapse_to_the_last():
    scores = _scores({
        "a": {"name": "Delivery", "percentage": 30.0},
        "b": {"name": "Delivery", "percentage": 90.0},
    })
    assert list(scores) == ["Delivery"]
    assert scores["Delivery"].score == 90.0


def test_building_twice_gives_equal_output():
    data = parse_analytics_data(analytics_blob(OVERVIEW_PILLARS))
    assert build_pillar_scores(data) == build_pillar_scores(data)


def test_word_cloud_defaults_when_absent():
    cloud = build_word_cloud(parse_analytics_data(analytics_blob({})))
    assert cloud.words == []
    assert cloud.total_responses == 0
    assert cloud.status == "none"


def test_word_cloud_passes_through():
    cloud = build_word_cloud(parse_analytics_data(analytics_blob(word_cloud={
        "status": "sufficient",
        "totalResponses": 12,
        "words": [{"text": "retro", "count": 5}],
    })))
    assert cloud.status == "sufficient"
    assert cloud.total_responses == 12
    assert cloud.words[0].text == "retro"
    assert cloud.words[0].count == 5
