"""Pydantic models for the analyze operation."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from resume_insights.models.resume import ResumeReference

_CAMEL = {"alias_generator": to_camel, "populate_by_name": True}


class AnalysisRequest(BaseModel):
    resume: ResumeReference
    job_description: str

    model_config = _CAMEL


class EntityExtractionResult(BaseModel):
    skills: list[str] = Field(default_factory=list)
    experience: list[str] = Field(default_factory=list)  # one entry per role/company
    education: list[str] = Field(default_factory=list)  # one entry per degree/institution

    model_config = _CAMEL


class FitScoringResult(BaseModel):
    fit_score: float = Field(default=0.0, ge=0.0, le=1.0)
    justification: str = "Analysis could not be completed."
    suggested_roles: list[str] = Field(default_factory=list, max_length=5)
    improvement_suggestions: list[str] = Field(default_factory=list)

    model_config = _CAMEL


class AnalysisResult(BaseModel):
    entities: EntityExtractionResult
    scoring: FitScoringResult
    analysis_id: str | None = None

    model_config = _CAMEL
