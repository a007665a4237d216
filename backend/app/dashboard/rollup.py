"""Roll team-level analytics up into the matrix-level record.

Team records are scored elsewhere; this only merges what they already
contain. Pillars and categories are merged by their blob key, so the same
pillar in two teams adds up instead of competing.
"""

from collections import Counter

from app.dashboard.blob import AnalyticsData, parse_analytics_data
from app.dashboard.models import DashboardAnalytics


def _percentage(actual: float, potential: float) -> float:
    return round(actual / potential * 100, 2) if potential > 0 else 0.0


def _weighted_mean(values: list[float], weights: list[int]) -> float:
    if not values:
        return 0.0
    total_weight = sum(weights)
    if total_weight == 0:
        return round(sum(values) / len(values), 2)
    return round(sum(v * w for v, w in zip(values, weights)) / total_weight, 2)


def _score_node(name: str | None, actual: float, potential: float) -> dict:
    percentage = _percentage(actual, potential)
    return {
        "name": name,
        "percentage": percentage,
        "actualScore": round(actual, 2),
        "potentialScore": round(potential, 2),
        "gapFromPotential": round(100.0 - percentage, 2),
    }


def merge_pillars(blobs: list[AnalyticsData]) -> dict[str, dict]:
    totals: dict[str, dict] = {}
    for data in blobs:
        for key, pillar in data.pillars.items():
            merged = totals.setdefault(key, {"name": None, "actual": 0.0, "potential": 0.0, "categories": {}})
            merged["name"] = merged["name"] or pillar.name
            merged["actual"] += pillar.actual_score or 0.0
            merged["potential"] += pillar.potential_score or 0.0

            for category_key, category in pillar.categories.items():
                cat = merged["categories"].setdefault(category_key, {"name": None, "actual": 0.0, "potential": 0.0})
                cat["name"] = cat["name"] or category.name
                cat["actual"] += category.actual_score or 0.0
                cat["potential"] += category.potential_score or 0.0

    pillars = {}
    for key, merged in totals.items():
        node = _score_node(merged["name"], merged["actual"], merged["potential"])
        node["categories"] = {
            category_key: _score_node(cat["name"], cat["actual"], cat["potential"])
            for category_key, cat in merged["categories"].items()
        }
        pillars[key] = node
    return pillars


def merge_word_clouds(blobs: list[AnalyticsData], sufficient_responses: int) -> dict:
    counts: Counter[str] = Counter()
    total_responses = 0
    for data in blobs:
        if data.word_cloud is None:
            continue
        total_responses += data.word_cloud.total_responses or 0
        for word in data.word_cloud.words:
            counts[word.text] += word.count

    words = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    if not words:
        status = "none"
    elif total_responses >= sufficient_responses:
        status = "sufficient"
    else:
        status = "limited"

    return {
        "status": status,
        "totalResponses": total_responses,
        "words": [{"text": text, "count": count} for text, count in words],
    }


def rollup_team_analytics(records: list[DashboardAnalytics], sufficient_responses: int) -> dict:
    """Matrix-level figures and blob from the matrix's TEAM-scope records."""
    blobs = [parse_analytics_data(r.analytics_data_json) for r in records]
    employee_counts = [r.employee_count or 0 for r in records]

    return {
        "general_average": _weighted_mean([r.general_average or 0.0 for r in records], employee_counts),
        "employee_count": sum(employee_counts),
        "completion_percentage": _weighted_mean(
            [r.completion_percentage or 0.0 for r in records], employee_counts,
        ),
        "analytics_data": {
            "pillars": merge_pillars(blobs),
            "wordCloud": merge_word_clouds(blobs, sufficient_responses),
        },
    }
