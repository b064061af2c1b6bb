"""User-facing operations: analyze a resume, generate a resume."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Mapping

from resume_insights.clients.llm_client import LLMClient
from resume_insights.config import AppConfig
from resume_insights.errors import GenerationError, UnknownError
from resume_insights.models.analysis import AnalysisRequest, AnalysisResult
from resume_insights.models.generation import GenerationResult
from resume_insights.pipeline.entity_extractor import EntityExtractor
from resume_insights.pipeline.fit_scorer import FitScorer
from resume_insights.pipeline.resume_generator import ResumeGenerator
from resume_insights.storage.record_store import RecordStore
from resume_insights.validation.forms import (
    validate_analysis_input,
    validate_generation_input,
)

logger = logging.getLogger(__name__)


class ResumeInsights:
    """Composes validation, the AI flows and persistence.

    Both operations share one error policy: validation and generation errors
    propagate unchanged, persistence failures only null the record id, and
    anything else is logged and re-raised as UnknownError.
    """

    def __init__(
        self,
        llm: LLMClient,
        store: RecordStore,
        config: AppConfig | None = None,
    ):
        self.config = config or AppConfig()
        self.store = store
        llm_config = self.config.llm
        self.entity_extractor = EntityExtractor(
            llm, model=llm_config.analysis_model, max_tokens=llm_config.max_tokens
        )
        self.fit_scorer = FitScorer(
            llm, model=llm_config.analysis_model, max_tokens=llm_config.max_tokens
        )
        self.resume_generator = ResumeGenerator(
            llm, model=llm_config.generation_model, max_tokens=llm_config.max_tokens
        )

    async def analyze(self, raw: Mapping[str, Any]) -> AnalysisResult:
        """Extract entities and score job fit concurrently, then persist.

        Args:
            raw: Form input with ``jobDescription`` and one of
                ``resumeText`` / ``resumeDataUri``.
        """
        request = validate_analysis_input(raw, self.config.validation)
        try:
            entities, scoring = await asyncio.gather(
                self.entity_extractor.extract(request.resume),
                self.fit_scorer.score(request.resume, request.job_description),
            )
            analysis_id = await self.store.save_analysis(
                self._analysis_payload(request, entities, scoring)
            )
        except GenerationError:
            raise
        except Exception as exc:
            logger.error("Error in analyze", exc_info=True)
            raise UnknownError("An unexpected error occurred during analysis.") from exc

        if analysis_id is None:
            logger.warning("Failed to save analysis; returning results without an ID.")

        return AnalysisResult(entities=entities, scoring=scoring, analysis_id=analysis_id)

    async def generate(self, raw: Mapping[str, Any]) -> GenerationResult:
        """Draft a resume from form details, then persist input and output."""
        request = validate_generation_input(raw, self.config.validation)
        try:
            generated = await self.resume_generator.generate(request)
            generation_id = await self.store.save_generated_resume({
                "input": request.model_dump(mode="json", by_alias=True),
                "output": generated.model_dump(mode="json", by_alias=True),
            })
        except GenerationError:
            raise
        except Exception as exc:
            logger.error("Error in generate", exc_info=True)
            raise UnknownError("An unexpected error occurred during resume generation.") from exc

        if generation_id is None:
            logger.warning("Failed to save generated resume; returning draft without an ID.")

        return GenerationResult(resume_text=generated.resume_text, generation_id=generation_id)

    def _analysis_payload(self, request: AnalysisRequest, entities, scoring) -> dict:
        payload = {
            "jobDescription": request.job_description,
            "entities": entities.model_dump(by_alias=True),
            "scoring": scoring.model_dump(by_alias=True),
        }
        if self.config.storage.store_resume_content:
            payload["resume"] = request.resume.model_dump(by_alias=True, exclude_none=True)
        return payload
