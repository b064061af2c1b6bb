"""Tests for Pydantic data models."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from resume_insights.models import (
    AnalysisResult,
    EntityExtractionResult,
    FitScoringResult,
    GenerationResult,
    ResumeGenerationRequest,
    ResumeReference,
    Tone,
)


class TestEntityExtractionResult:
    def test_defaults_are_empty_lists(self):
        result = EntityExtractionResult()
        assert result.skills == []
        assert result.experience == []
        assert result.education == []


class TestFitScoringResult:
    def test_camel_case_aliases(self, scoring_json):
        result = FitScoringResult.model_validate(scoring_json)
        assert result.fit_score == 0.82
        assert result.suggested_roles[0] == "Backend Engineer"
        dumped = result.model_dump(by_alias=True)
        assert set(dumped) == {"fitScore", "justification", "suggestedRoles", "improvementSuggestions"}

    def test_score_bounds(self):
        with pytest.raises(PydanticValidationError):
            FitScoringResult(fit_score=1.5)

    def test_at_most_five_roles(self):
        with pytest.raises(PydanticValidationError):
            FitScoringResult(suggested_roles=[f"Role {i}" for i in range(6)])


class TestAnalysisResult:
    def test_serializes_analysis_id_alias(self):
        result = AnalysisResult(
            entities=EntityExtractionResult(),
            scoring=FitScoringResult(),
            analysis_id=None,
        )
        dumped = result.model_dump(by_alias=True)
        assert dumped["analysisId"] is None
        assert dumped["entities"]["skills"] == []


class TestGeneration:
    def test_tone_defaults_to_professional(self):
        request = ResumeGenerationRequest(
            full_name="Jane Doe",
            contact_info="jane@example.com",
            skills="Go",
            experience="5 years",
            education="BS CS",
        )
        assert request.tone is Tone.PROFESSIONAL
        assert request.target_job_description is None

    def test_result_alias(self):
        result = GenerationResult(resume_text="# Jane", generation_id="abc")
        assert result.model_dump(by_alias=True) == {"resumeText": "# Jane", "generationId": "abc"}


class TestResumeReference:
    def test_camel_case_alias(self):
        reference = ResumeReference.model_validate({"dataUri": "data:text/plain;base64,aGk="})
        assert reference.data_uri == "data:text/plain;base64,aGk="
        assert reference.text is None

    def test_requires_one_representation(self):
        with pytest.raises(PydanticValidationError, match="exactly one"):
            ResumeReference()

    def test_rejects_both_representations(self):
        with pytest.raises(PydanticValidationError, match="exactly one"):
            ResumeReference(text="plain resume", data_uri="data:text/plain;base64,aGk=")
