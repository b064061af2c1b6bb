"""Form validation for the analyze and generate operations.

Raw input is a mapping with camelCase keys as submitted by a form
(``resumeDataUri``, ``jobDescription``, ``fullName``, ...). Validation runs
before any external call and reports every violated field at once.
"""

from __future__ import annotations

from typing import Any, Mapping

import pydantic
from pydantic import BaseModel, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from resume_insights.config import ValidationConfig
from resume_insights.errors import FieldError, ValidationError
from resume_insights.models.analysis import AnalysisRequest
from resume_insights.models.generation import ResumeGenerationRequest, Tone
from resume_insights.models.resume import ResumeReference
from resume_insights.parsers.resume_parser import parse_data_uri

_FORM_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
    "extra": "ignore",
}


def _limits(info: ValidationInfo) -> ValidationConfig:
    context = info.context or {}
    return context.get("limits") or ValidationConfig()


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


class AnalysisForm(BaseModel):
    resume_text: str | None = None
    resume_data_uri: str | None = Field(default=None, validate_default=True)
    job_description: str | None = Field(default=None, validate_default=True)

    model_config = _FORM_CONFIG

    @field_validator("resume_text")
    @classmethod
    def _resume_text_length(cls, value: str | None, info: ValidationInfo) -> str | None:
        if _blank(value):
            return None
        minimum = _limits(info).min_resume_text_length
        if len(value.strip()) < minimum:
            raise ValueError(f"Resume content must be at least {minimum} characters.")
        return value.strip()

    @field_validator("resume_data_uri")
    @classmethod
    def _resume_data_uri(cls, value: str | None, info: ValidationInfo) -> str | None:
        if "resume_text" not in info.data:
            # resume_text already failed; don't pile on a presence error
            return None if _blank(value) else value
        has_text = info.data["resume_text"] is not None
        if _blank(value):
            if not has_text:
                raise ValueError("Resume file data is required.")
            return None
        if has_text:
            raise ValueError("Provide either resume text or a resume file, not both.")

        document = parse_data_uri(value.strip())
        limit = _limits(info).max_upload_bytes
        if document.size > limit:
            raise ValueError(f"Resume file must be {_format_size(limit)} or smaller.")
        if document.size == 0:
            raise ValueError("Resume file is empty.")
        return value.strip()

    @field_validator("job_description")
    @classmethod
    def _job_description(cls, value: str | None, info: ValidationInfo) -> str:
        if _blank(value):
            raise ValueError("Job description cannot be empty.")
        minimum = _limits(info).min_job_description_length
        if len(value.strip()) < minimum:
            raise ValueError(f"Job description must be at least {minimum} characters.")
        return value.strip()


class GenerationForm(BaseModel):
    full_name: str | None = Field(default=None, validate_default=True)
    contact_info: str | None = Field(default=None, validate_default=True)
    skills: str | None = Field(default=None, validate_default=True)
    experience: str | None = Field(default=None, validate_default=True)
    education: str | None = Field(default=None, validate_default=True)
    target_job_description: str | None = None
    tone: Tone = Tone.PROFESSIONAL

    model_config = _FORM_CONFIG

    @field_validator("full_name", "contact_info", "skills", "experience", "education")
    @classmethod
    def _required(cls, value: str | None, info: ValidationInfo) -> str:
        if _blank(value):
            raise ValueError(_REQUIRED_MESSAGES[info.field_name])
        return value.strip()

    @field_validator("target_job_description")
    @classmethod
    def _optional_text(cls, value: str | None) -> str | None:
        return None if _blank(value) else value.strip()

    @field_validator("tone", mode="before")
    @classmethod
    def _tone(cls, value: Any) -> Any:
        if value is None or value == "":
            return Tone.PROFESSIONAL
        if isinstance(value, Tone):
            return value
        if not isinstance(value, str) or value not in {t.value for t in Tone}:
            allowed = ", ".join(t.value for t in Tone)
            raise ValueError(f"Tone must be one of: {allowed}.")
        return value


_REQUIRED_MESSAGES = {
    "full_name": "Full name is required.",
    "contact_info": "Contact information is required.",
    "skills": "Skills are required.",
    "experience": "Experience is required.",
    "education": "Education is required.",
}


def validate_analysis_input(
    raw: Mapping[str, Any],
    limits: ValidationConfig | None = None,
) -> AnalysisRequest:
    """Validate analyze form input and build an AnalysisRequest.

    Raises:
        ValidationError: listing every violated field.
    """
    form = _validate(AnalysisForm, raw, limits)
    return AnalysisRequest(
        resume=ResumeReference(text=form.resume_text, data_uri=form.resume_data_uri),
        job_description=form.job_description,
    )


def validate_generation_input(
    raw: Mapping[str, Any],
    limits: ValidationConfig | None = None,
) -> ResumeGenerationRequest:
    """Validate generate form input and build a ResumeGenerationRequest."""
    form = _validate(GenerationForm, raw, limits)
    return ResumeGenerationRequest(**form.model_dump())


def _validate(model: type[BaseModel], raw: Mapping[str, Any], limits: ValidationConfig | None):
    if not isinstance(raw, Mapping):
        raise ValidationError([FieldError("form", "Form data must be a mapping of fields.")])
    try:
        return model.model_validate(dict(raw), context={"limits": limits or ValidationConfig()})
    except pydantic.ValidationError as exc:
        raise ValidationError(_field_errors(model, exc)) from None


def _field_errors(model: type[BaseModel], exc: pydantic.ValidationError) -> list[FieldError]:
    errors = []
    for err in exc.errors():
        # defaulted fields are reported under their python name, not the alias
        field = ".".join(_alias(model, part) for part in err["loc"]) or "form"
        if err["type"] == "value_error":
            message = str(err["ctx"]["error"])
        else:
            message = f"{field}: {err['msg']}"
        errors.append(FieldError(field=field, message=message))
    return errors


def _format_size(num_bytes: int) -> str:
    mib = 1024 * 1024
    if num_bytes >= mib:
        return f"{num_bytes / mib:g}MB"
    return f"{num_bytes} bytes"


def _alias(model: type[BaseModel], part: str | int) -> str:
    field = model.model_fields.get(part) if isinstance(part, str) else None
    if field is None:
        return str(part)
    return field.alias or to_camel(part)
