"""Decoding of the stored analytics blob.

The blob is written by the scoring job and read back on every dashboard
request. It may be absent (not computed yet), truncated, or only partly
populated, so decoding never raises: unreadable input yields an empty tree
and unreadable pillar, category or word entries are dropped one at a time.

Dict order follows the order of the JSON document, which is what the
top/bottom extraction relies on to break ties.
"""

import json
import math
from collections.abc import Callable
from typing import Any, TypeVar

import structlog
from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, ValidationError, field_validator
from pydantic.alias_generators import to_camel

logger = structlog.get_logger()

T = TypeVar("T")


class _BlobNode(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class CategoryNode(_BlobNode):
    name: str | None = None
    # Strict: booleans and numeric strings are malformed, not scores
    percentage: StrictFloat | None = None
    actual_score: StrictFloat | None = None
    potential_score: StrictFloat | None = None
    gap_from_potential: StrictFloat | None = None

    @field_validator("percentage", "actual_score", "potential_score", "gap_from_potential")
    @classmethod
    def _finite_or_missing(cls, value: float | None) -> float | None:
        # NaN/Infinity are valid JSON for Python's decoder but not for responses
        if value is not None and not math.isfinite(value):
            return None
        return value


class PillarNode(CategoryNode):
    categories: dict[str, CategoryNode] = Field(default_factory=dict)


class WordNode(_BlobNode):
    text: str
    count: StrictInt


class WordCloudNode(_BlobNode):
    status: str | None = None
    total_responses: StrictInt | None = None
    words: list[WordNode] = Field(default_factory=list)


class AnalyticsData(_BlobNode):
    pillars: dict[str, PillarNode] = Field(default_factory=dict)
    word_cloud: WordCloudNode | None = None


def parse_analytics_data(raw: str | None) -> AnalyticsData:
    """Decode ``analytics_data_json``; never raises."""
    if raw is None or not raw.strip():
        return AnalyticsData()

    try:
        decoded = json.loads(raw)
    except (ValueError, RecursionError) as e:
        logger.warning("analytics_blob_unparsable", error=str(e)[:200])
        return AnalyticsData()

    if not isinstance(decoded, dict):
        logger.warning("analytics_blob_not_an_object", blob_type=type(decoded).__name__)
        return AnalyticsData()

    return AnalyticsData(
        pillars=_decode_entries(decoded.get("pillars"), _decode_pillar, "pillar"),
        word_cloud=_decode_word_cloud(decoded.get("wordCloud")),
    )


def _decode_entries(
    raw: Any,
    decode: Callable[[Any], T | None],
    kind: str,
) -> dict[str, T]:
    if not isinstance(raw, dict):
        return {}

    entries: dict[str, T] = {}
    for key, value in raw.items():
        node = decode(value)
        if node is None:
            logger.debug("analytics_blob_entry_skipped", kind=kind, key=key)
            continue
        entries[key] = node
    return entries


def _decode_category(raw: Any) -> CategoryNode | None:
    if not isinstance(raw, dict):
        return None
    try:
        return CategoryNode.model_validate(raw)
    except ValidationError:
        return None


def _decode_pillar(raw: Any) -> PillarNode | None:
    if not isinstance(raw, dict):
        return None

    fields = {k: v for k, v in raw.items() if k != "categories"}
    categories = _decode_entries(raw.get("categories"), _decode_category, "category")
    try:
        return PillarNode.model_validate({**fields, "categories": categories})
    except ValidationError:
        return None


def _decode_word(raw: Any) -> WordNode | None:
    if not isinstance(raw, dict):
        return None
    try:
        return WordNode.model_validate(raw)
    except ValidationError:
        return None


def _decode_word_cloud(raw: Any) -> WordCloudNode | None:
    if not isinstance(raw, dict) or not raw:
        return None

    raw_words = raw.get("words")
    words = [w for w in map(_decode_word, raw_words if isinstance(raw_words, list) else []) if w is not None]
    try:
        return WordCloudNode.model_validate({
            "status": raw.get("status"),
            "totalResponses": raw.get("totalResponses"),
            "words": words,
        })
    except ValidationError:
        logger.debug("analytics_blob_word_cloud_skipped")
        return None
