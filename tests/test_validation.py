"""Tests for analyze/generate form validation."""

import base64

import pytest

from resume_insights.config import ValidationConfig
from resume_insights.errors import ValidationError
from resume_insights.models.generation import Tone
from resume_insights.validation.forms import (
    validate_analysis_input,
    validate_generation_input,
)


class TestAnalysisValidation:
    def test_valid_data_uri(self, text_data_uri, sample_jd_text):
        request = validate_analysis_input(
            {"resumeDataUri": text_data_uri, "jobDescription": sample_jd_text}
        )
        assert request.resume.data_uri == text_data_uri
        assert request.resume.text is None
        assert request.job_description == sample_jd_text.strip()

    def test_valid_text_snake_case(self, sample_resume_text, sample_jd_text):
        request = validate_analysis_input(
            {"resume_text": sample_resume_text, "job_description": sample_jd_text}
        )
        assert request.resume.text == sample_resume_text.strip()
        assert request.resume.data_uri is None

    def test_reports_every_field(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_analysis_input({})
        err = exc_info.value
        assert err.for_field("resumeDataUri") == ["Resume file data is required."]
        assert err.for_field("jobDescription") == ["Job description cannot be empty."]
        assert err.message.startswith("Invalid input: ")

    def test_missing_and_invalid_fields_use_form_names(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_analysis_input({"jobDescription": "short"})
        err = exc_info.value
        assert [e.field for e in err.field_errors] == ["resumeDataUri", "jobDescription"]
        assert err.for_field("resumeDataUri") == ["Resume file data is required."]
        assert err.for_field("jobDescription") == [
            "Job description must be at least 50 characters."
        ]

    def test_short_job_description(self, text_data_uri):
        with pytest.raises(ValidationError, match="at least 50 characters"):
            validate_analysis_input({"resumeDataUri": text_data_uri, "jobDescription": "Go dev"})

    def test_custom_threshold(self, text_data_uri):
        limits = ValidationConfig(min_job_description_length=5)
        request = validate_analysis_input(
            {"resumeDataUri": text_data_uri, "jobDescription": "Go dev"}, limits
        )
        assert request.job_description == "Go dev"

    def test_short_resume_text(self, sample_jd_text):
        with pytest.raises(ValidationError) as exc_info:
            validate_analysis_input({"resumeText": "too short", "jobDescription": sample_jd_text})
        assert exc_info.value.for_field("resumeText") == [
            "Resume content must be at least 50 characters."
        ]
        # no extra presence error on the file field
        assert exc_info.value.for_field("resumeDataUri") == []

    def test_both_representations_rejected(self, sample_resume_text, text_data_uri, sample_jd_text):
        with pytest.raises(ValidationError, match="not both"):
            validate_analysis_input({
                "resumeText": sample_resume_text,
                "resumeDataUri": text_data_uri,
                "jobDescription": sample_jd_text,
            })

    @pytest.mark.parametrize(
        "uri, message",
        [
            ("text/plain;base64,aGVsbG8=", "Invalid file data format."),
            ("data:text/plain,hello", "File data must be base64 encoded."),
            ("data:text/plain;base64,***", "File data is not valid base64."),
            ("data:text/plain;base64,", "Resume file is empty."),
        ],
    )
    def test_data_uri_format(self, uri, message, sample_jd_text):
        with pytest.raises(ValidationError) as exc_info:
            validate_analysis_input({"resumeDataUri": uri, "jobDescription": sample_jd_text})
        assert exc_info.value.for_field("resumeDataUri") == [message]

    def test_upload_size_limit(self, sample_jd_text):
        uri = "data:application/pdf;base64," + base64.b64encode(b"x" * 64).decode()
        limits = ValidationConfig(max_upload_bytes=32)
        with pytest.raises(ValidationError, match="32 bytes or smaller"):
            validate_analysis_input({"resumeDataUri": uri, "jobDescription": sample_jd_text}, limits)

    def test_non_mapping_input(self):
        with pytest.raises(ValidationError):
            validate_analysis_input("resume")


class TestGenerationValidation:
    def test_valid(self, generation_form):
        request = validate_generation_input(generation_form)
        assert request.full_name == "Jane Doe"
        assert request.tone is Tone.TECHNICAL
        assert request.target_job_description is None

    def test_tone_defaults_to_professional(self, generation_form):
        del generation_form["tone"]
        assert validate_generation_input(generation_form).tone is Tone.PROFESSIONAL

    @pytest.mark.parametrize("tone", [" creative ", "Creative", "TECHNICAL", 3])
    def test_tone_must_match_exactly(self, generation_form, tone):
        generation_form["tone"] = tone
        with pytest.raises(ValidationError) as exc_info:
            validate_generation_input(generation_form)
        assert exc_info.value.for_field("tone") == [
            "Tone must be one of: professional, creative, technical."
        ]

    def test_tone_outside_enumeration(self, generation_form):
        generation_form["tone"] = "formal"
        with pytest.raises(ValidationError) as exc_info:
            validate_generation_input(generation_form)
        assert exc_info.value.for_field("tone") == [
            "Tone must be one of: professional, creative, technical."
        ]

    def test_missing_fields_all_reported(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_generation_input({"tone": "creative"})
        fields = {e.field for e in exc_info.value.field_errors}
        assert fields == {"fullName", "contactInfo", "skills", "experience", "education"}
        assert "Full name is required." in exc_info.value.message

    def test_blank_target_job_description(self, generation_form):
        generation_form["targetJobDescription"] = "   "
        assert validate_generation_input(generation_form).target_job_description is None

    def test_wrong_type_reported(self, generation_form):
        generation_form["skills"] = 42
        with pytest.raises(ValidationError) as exc_info:
            validate_generation_input(generation_form)
        assert exc_info.value.for_field("skills")
