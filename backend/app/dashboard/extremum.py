"""Top/bottom pillar and category extraction for the overview summary."""

from pydantic import BaseModel

from app.dashboard.blob import AnalyticsData, CategoryNode, PillarNode
from app.dashboard.schemas import CategorySummary, PillarSummary


class ExtremumResult(BaseModel):
    top_pillar: PillarSummary | None = None
    bottom_pillar: PillarSummary | None = None
    top_category: CategorySummary | None = None
    bottom_category: CategorySummary | None = None


def _pillar_summary(pillar: PillarNode) -> PillarSummary:
    return PillarSummary(
        name=pillar.name,
        percentage=pillar.percentage,
        actual_score=pillar.actual_score or 0.0,
        potential_score=pillar.potential_score or 0.0,
    )


def _category_summary(category: CategoryNode, pillar_name: str) -> CategorySummary:
    return CategorySummary(
        name=category.name,
        pillar=pillar_name,
        percentage=category.percentage,
        actual_score=category.actual_score or 0.0,
        potential_score=category.potential_score or 0.0,
    )


def extract_extremes(data: AnalyticsData) -> ExtremumResult:
    """Single pass over the pillars, ranking pillars and categories by percentage.

    Comparisons are strict, so on equal percentages the entry seen first in
    document order keeps the spot. Entries without a name are skipped along
    with, for pillars, all of their categories. Entries without a percentage
    are never ranked; when nothing carries one, every field stays None.
    """
    top_pillar: PillarSummary | None = None
    bottom_pillar: PillarSummary | None = None
    top_category: CategorySummary | None = None
    bottom_category: CategorySummary | None = None

    for pillar in data.pillars.values():
        if pillar.name is None:
            continue

        if pillar.percentage is not None:
            if top_pillar is None or pillar.percentage > top_pillar.percentage:
                top_pillar = _pillar_summary(pillar)
            if bottom_pillar is None or pillar.percentage < bottom_pillar.percentage:
                bottom_pillar = _pillar_summary(pillar)

        for category in pillar.categories.values():
            if category.name is None or category.percentage is None:
                continue
            if top_category is None or category.percentage > top_category.percentage:
                top_category = _category_summary(category, pillar.name)
            if bottom_category is None or category.percentage < bottom_category.percentage:
                bottom_category = _category_summary(category, pillar.name)

    return ExtremumResult(
        top_pillar=top_pillar,
        bottom_pillar=bottom_pillar,
        top_category=top_category,
        bottom_category=bottom_category,
    )
