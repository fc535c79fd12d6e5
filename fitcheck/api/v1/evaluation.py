import logging
from typing import NoReturn

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile, status

from fitcheck.ai.factory import get_completion_options, get_llm_client
from fitcheck.ai.types import CompletionOptions, LLMClient
from fitcheck.core.config import Settings, get_settings
from fitcheck.core.errors import ExtractionFailure, InputValidationError, UpstreamError
from fitcheck.core.rate_limit import rate_limit
from fitcheck.schemas.evaluation import ErrorResponse, FilterRequest, FilterSet, ScoreResponse
from fitcheck.services.evaluation_service import generate_filters, score_candidate

router = APIRouter()
logger = logging.getLogger(__name__)

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    429: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _raise_http_error(exc: Exception, operation: str) -> NoReturn:
    if isinstance(exc, InputValidationError):
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
    if isinstance(exc, UpstreamError):
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=exc.public_message(),
        ) from exc
    if isinstance(exc, ExtractionFailure):
        logger.warning("%s_extraction_failed: %s", operation, exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    logger.exception("%s_failed", operation)
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    ) from exc


async def _read_upload(upload: UploadFile | None, max_bytes: int) -> tuple[bytes | None, str | None]:
    if upload is None:
        return None, None
    content = await upload.read(max_bytes + 1)
    if len(content) > max_bytes:
        raise InputValidationError(
            f"Résumé file is too large. Maximum allowed size is {max_bytes // (1024 * 1024) or 1} MB."
        )
    return (content or None), upload.filename


@router.post("/score-candidate", response_model=ScoreResponse, responses=_ERROR_RESPONSES)
@rate_limit()
async def score_candidate_endpoint(
    request: Request,
    jobDescription: str = Form(default=""),
    resumeText: str = Form(default=""),
    resumeFile: UploadFile | None = File(default=None),
    llm: LLMClient = Depends(get_llm_client),
    options: CompletionOptions = Depends(get_completion_options),
    config: Settings = Depends(get_settings),
):
    try:
        document, filename = await _read_upload(resumeFile, config.max_upload_bytes)
        return await score_candidate(
            llm=llm,
            options=options,
            job_description=jobDescription,
            resume_text=resumeText,
            resume_document=document,
            resume_filename=filename,
            max_chars=config.max_text_chars,
        )
    except Exception as exc:  # noqa: BLE001 - every failure becomes an error payload
        _raise_http_error(exc, "score_candidate")


@router.post("/generate-filters", response_model=FilterSet, responses=_ERROR_RESPONSES)
@rate_limit()
async def generate_filters_endpoint(
    request: Request,
    payload: FilterRequest | None = None,
    llm: LLMClient = Depends(get_llm_client),
    options: CompletionOptions = Depends(get_completion_options),
    config: Settings = Depends(get_settings),
):
    try:
        return await generate_filters(
            llm=llm,
            options=options,
            job_description=payload.jobDescription if payload else None,
            max_chars=config.max_text_chars,
        )
    except Exception as exc:  # noqa: BLE001 - every failure becomes an error payload
        _raise_http_error(exc, "generate_filters")
