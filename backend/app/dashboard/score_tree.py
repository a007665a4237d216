"""Presentation tree (pillar scores with nested category scores) built from a decoded blob."""

import structlog
from pydantic import ValidationError

from app.dashboard.blob import AnalyticsData, CategoryNode, PillarNode
from app.dashboard.schemas import CategoryScore, PillarScore, WordCloud, WordFrequency

logger = structlog.get_logger()

UNKNOWN_PILLAR = "Unknown Pillar"


def build_category_score(category: CategoryNode) -> CategoryScore:
    percentage = category.percentage
    gap = category.gap_from_potential
    if gap is None:
        gap = 100.0 - percentage if percentage is not None else 0.0

    return CategoryScore(
        name=category.name,
        score=percentage if percentage is not None else 0.0,
        actual_score=category.actual_score or 0.0,
        potential_score=category.potential_score or 0.0,
        gap_from_potential=gap,
    )


def build_pillar_score(pillar: PillarNode) -> PillarScore:
    # Unlike categories, a missing pillar gap is not derived from the percentage
    categories = []
    for key, category in pillar.categories.items():
        if category.name is None:
            continue
        try:
            categories.append(build_category_score(category))
        except (ValidationError, TypeError, ValueError) as e:
            logger.warning("category_score_skipped", category_key=key, error=str(e))

    return PillarScore(
        name=pillar.name or UNKNOWN_PILLAR,
        score=pillar.percentage if pillar.percentage is not None else 0.0,
        actual_score=pillar.actual_score or 0.0,
        potential_score=pillar.potential_score or 0.0,
        gap_from_potential=pillar.gap_from_potential or 0.0,
        categories=categories,
    )


def build_pillar_scores(data: AnalyticsData) -> dict[str, PillarScore]:
    """Pillar scores keyed by pillar display name.

    Two pillars sharing a name collapse to the one appearing last; their
    scores are not merged.
    """
    pillar_scores: dict[str, PillarScore] = {}
    for key, pillar in data.pillars.items():
        if pillar.name is None:
            continue
        try:
            pillar_scores[pillar.name] = build_pillar_score(pillar)
        except (ValidationError, TypeError, ValueError) as e:
            logger.warning("pillar_score_skipped", pillar_key=key, error=str(e))
    return pillar_scores


def empty_word_cloud() -> WordCloud:
    return WordCloud(words=[], total_responses=0, status="none")


def build_word_cloud(data: AnalyticsData) -> WordCloud:
    node = data.word_cloud
    if node is None:
        return empty_word_cloud()

    return WordCloud(
        words=[WordFrequency(text=w.text, count=w.count) for w in node.words],
        total_responses=node.total_responses if node.total_responses is not None else 0,
        status=node.status if node.status is not None else "none",
    )
