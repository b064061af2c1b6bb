"""Data models for resume analysis and generation."""

from resume_insights.models.analysis import (
    AnalysisRequest,
    AnalysisResult,
    EntityExtractionResult,
    FitScoringResult,
)
from resume_insights.models.generation import (
    GeneratedResume,
    GenerationResult,
    ResumeGenerationRequest,
    Tone,
)
from resume_insights.models.record import PersistedRecord
from resume_insights.models.resume import DataUri, ResumeReference

__all__ = [
    "AnalysisRequest",
    "AnalysisResult",
    "DataUri",
    "EntityExtractionResult",
    "FitScoringResult",
    "GeneratedResume",
    "GenerationResult",
    "PersistedRecord",
    "ResumeGenerationRequest",
    "ResumeReference",
    "Tone",
]
