from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

SCORE_OUT_OF: Literal[5] = 5


class ScoreResponse(BaseModel):
    score: float = Field(ge=1.0, le=5.0)
    score_out_of: Literal[5] = SCORE_OUT_OF
    bullets: list[str] = Field(default_factory=list, max_length=5)


class FilterRequest(BaseModel):
    jobDescription: str | None = ""


class FilterSet(BaseModel):
    job_titles: list[str] = Field(default_factory=list, max_length=16)
    boolean_titles: str = ""
    skills: list[str] = Field(default_factory=list, max_length=24)
    locations: list[str] = Field(default_factory=list, max_length=8)
    keywords: list[str] = Field(default_factory=list, max_length=16)
    boolean_keywords: str = ""
    industries: list[str] = Field(default_factory=list, max_length=10)
    years_experience: list[str] = Field(default_factory=list, max_length=8)


class HealthResponse(BaseModel):
    ok: bool = True


class ErrorResponse(BaseModel):
    error: str
