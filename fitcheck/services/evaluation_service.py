from __future__ import annotations

import logging

from fitcheck.ai.types import CompletionOptions, LLMClient
from fitcheck.core.errors import InputValidationError, MissingInput
from fitcheck.normalize.text import extract_resume, normalize_text
from fitcheck.schemas.evaluation import FilterSet, ScoreResponse
from fitcheck.services.llm_json import FILTERS_DEFAULT, SCORING_DEFAULT, decode_payload
from fitcheck.services.prompts import build_filter_messages, build_scoring_messages
from fitcheck.services.validation import validate_filters, validate_scoring

logger = logging.getLogger(__name__)


def require_job_description(job_description: str | None, *, max_chars: int | None = None) -> str:
    normalized = normalize_text(job_description)
    if not normalized:
        raise MissingInput("Missing jobDescription")
    if max_chars and len(normalized) > max_chars:
        raise InputValidationError(f"jobDescription is too long (maximum {max_chars} characters).")
    return normalized


async def score_candidate(
    *,
    llm: LLMClient,
    options: CompletionOptions,
    job_description: str | None,
    resume_text: str | None = None,
    resume_document: bytes | None = None,
    resume_filename: str | None = None,
    max_chars: int | None = None,
) -> ScoreResponse:
    jd = require_job_description(job_description, max_chars=max_chars)
    resume = await extract_resume(resume_text, resume_document, resume_filename)
    if max_chars and len(resume) > max_chars:
        raise InputValidationError(f"Résumé text is too long (maximum {max_chars} characters).")

    raw = await llm.complete(build_scoring_messages(resume, jd), options)
    result = validate_scoring(decode_payload(raw, SCORING_DEFAULT))
    logger.info(
        "score_candidate model=%s resume_chars=%s jd_chars=%s score=%s bullets=%s",
        options.model,
        len(resume),
        len(jd),
        result.score,
        len(result.bullets),
    )
    return result


async def generate_filters(
    *,
    llm: LLMClient,
    options: CompletionOptions,
    job_description: str | None,
    max_chars: int | None = None,
) -> FilterSet:
    jd = require_job_description(job_description, max_chars=max_chars)

    raw = await llm.complete(build_filter_messages(jd), options)
    filters = validate_filters(decode_payload(raw, FILTERS_DEFAULT))
    logger.info(
        "generate_filters model=%s jd_chars=%s titles=%s skills=%s",
        options.model,
        len(jd),
        len(filters.job_titles),
        len(filters.skills),
    )
    return filters
