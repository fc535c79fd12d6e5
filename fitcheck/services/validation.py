from __future__ import annotations

import json
import math
from typing import Any

from fitcheck.schemas.evaluation import FilterSet, ScoreResponse

MIN_SCORE = 1.0
MAX_SCORE = 5.0
BULLETS_MIN_SCORE = 4.0
MAX_BULLETS = 5

FILTER_LIMITS: dict[str, int] = {
    "job_titles": 16,
    "skills": 24,
    "locations": 8,
    "keywords": 16,
    "industries": 10,
    "years_experience": 8,
}
BOOLEAN_FIELDS = ("boolean_titles", "boolean_keywords")


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError, RecursionError):
        return str(value)


def _as_number(value: Any) -> float:
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return math.nan
    if value is None:
        return 0.0
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return 0.0
        try:
            return float(stripped)
        except ValueError:
            return math.nan
    return math.nan


def coerce_score(value: Any) -> float:
    score = _as_number(value)
    if not math.isfinite(score):
        score = MIN_SCORE
    return min(MAX_SCORE, max(MIN_SCORE, score))


def coerce_bullets(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [_as_text(item) for item in value[:MAX_BULLETS]]


def coerce_string_list(value: Any, limit: int) -> list[str]:
    if not isinstance(value, list):
        return []
    cleaned = (_as_text(item).strip() for item in value)
    return list(dict.fromkeys(item for item in cleaned if item))[:limit]


def coerce_boolean_expression(value: Any) -> str:
    return value if isinstance(value, str) else ""


def validate_scoring(payload: dict[str, Any]) -> ScoreResponse:
    score = coerce_score(payload.get("score"))
    bullets = coerce_bullets(payload.get("bullets"))
    if score < BULLETS_MIN_SCORE:
        bullets = []
    return ScoreResponse(score=score, bullets=bullets)


def validate_filters(payload: dict[str, Any]) -> FilterSet:
    fields: dict[str, Any] = {
        name: coerce_string_list(payload.get(name), limit) for name, limit in FILTER_LIMITS.items()
    }
    for name in BOOLEAN_FIELDS:
        fields[name] = coerce_boolean_expression(payload.get(name))
    return FilterSet(**fields)
