"""Pydantic models for the generate operation."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

_CAMEL = {"alias_generator": to_camel, "populate_by_name": True}


class Tone(str, Enum):
    PROFESSIONAL = "professional"
    CREATIVE = "creative"
    TECHNICAL = "technical"


class ResumeGenerationRequest(BaseModel):
    full_name: str
    contact_info: str
    skills: str
    experience: str
    education: str
    target_job_description: str | None = None
    tone: Tone = Tone.PROFESSIONAL

    model_config = _CAMEL


class GeneratedResume(BaseModel):
    resume_text: str  # Markdown

    model_config = _CAMEL


class GenerationResult(BaseModel):
    resume_text: str
    generation_id: str | None = None

    model_config = _CAMEL
